"""
Job description file naming conventions.

Job description files are named "{Company}-{Role}.txt" (or .md). The stem is
the job identifier; its first two dash-separated parts are the company and role.
"""

from pathlib import Path
from typing import Tuple

JOB_FILE_EXTENSIONS = (".txt", ".md")
IDENTIFIER_SEPARATOR = "-"


def identifier_from_filename(filename: str) -> str:
    """
    Extract job identifier from a filename.

    Args:
        filename: Filename with or without extension (e.g., "AcmeCorp-SoftwareEngineer.txt")

    Returns:
        Job identifier (filename stem)
    """
    return Path(filename).stem


def parse_identifier(identifier: str) -> Tuple[str, str]:
    """
    Split a job identifier into company and role.

    Parts beyond the second are ignored ("Acme-Engineer-Remote" -> Acme, Engineer).

    Args:
        identifier: Job identifier (e.g., "AcmeCorp-SoftwareEngineer")

    Returns:
        (company, role)

    Raises:
        ValueError: If the identifier has fewer than two non-empty parts
    """
    parts = identifier.split(IDENTIFIER_SEPARATOR)
    if len(parts) < 2 or not parts[0].strip() or not parts[1].strip():
        raise ValueError(
            f"Identifier must be in format 'Company{IDENTIFIER_SEPARATOR}Role': {identifier!r}"
        )
    return parts[0].strip(), parts[1].strip()


def is_job_file(path: Path) -> bool:
    """Check whether a path looks like a job description file."""
    return path.is_file() and path.suffix.lower() in JOB_FILE_EXTENSIONS
