"""
Intake Context

Responsibilities:
- Ingests job description files and derives their company/role identity
- Splits job description text into sentences
- Loads the personal content bank (categorized resume lines and master skills)

Owns: Job description loading and validation, content bank parsing
Never: Calls embedding or entity models, makes targeting decisions
"""

from quiver.contexts.intake.content_bank import BankLine, ContentBank
from quiver.contexts.intake.exceptions import ContentBankError, JobDescriptionError
from quiver.contexts.intake.job_posting import JobPosting, discover_job_postings

__all__ = [
    "BankLine",
    "ContentBank",
    "ContentBankError",
    "JobDescriptionError",
    "JobPosting",
    "discover_job_postings",
]
