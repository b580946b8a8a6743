"""
Job posting data structure for the Intake context.

Provides JobPosting, the model-free view of a job description that the
Targeting context turns into embeddings, entities and a TF-IDF index.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from quiver.contexts.intake.exceptions import JobDescriptionError
from quiver.contexts.intake.logger import _log_debug, _log_info
from quiver.contexts.intake.nomenclature import (
    identifier_from_filename,
    is_job_file,
    parse_identifier,
)
from quiver.utils.text_processing import split_sentences


@dataclass(frozen=True)
class JobPosting:
    """
    Raw job description text split into scorable sentences.

    Factory methods:
        from_text(text, identifier) - Split raw text, derive company/role from identifier
        from_file(path) - Load from a "{Company}-{Role}.txt" file
    """

    raw_text: str
    sentences: tuple
    identifier: str
    company: str
    role: str
    source_path: Optional[Path] = None

    # =========================================================================
    # FACTORY METHODS
    # =========================================================================

    @classmethod
    def from_text(
        cls,
        text: str,
        identifier: str,
        source_path: Optional[Path] = None,
    ) -> "JobPosting":
        """
        Build a posting from raw text.

        Args:
            text: Raw job description text
            identifier: Job identifier in "Company-Role" form
            source_path: File the text came from, for error reporting

        Returns:
            JobPosting with trimmed, non-empty sentences

        Raises:
            JobDescriptionError: If the identifier has no company/role or the
                text contains no non-empty sentences
        """
        try:
            company, role = parse_identifier(identifier)
        except ValueError as e:
            raise JobDescriptionError(str(e), source_path=source_path) from e

        sentences = split_sentences(text)
        if not sentences:
            raise JobDescriptionError(
                f"Job description {identifier!r} contains no non-empty sentences",
                source_path=source_path,
            )

        _log_debug(f"{identifier}: {len(sentences)} sentences, {len(text)} chars")
        return cls(
            raw_text=text,
            sentences=tuple(sentences),
            identifier=identifier,
            company=company,
            role=role,
            source_path=source_path,
        )

    @classmethod
    def from_file(cls, path: Path) -> "JobPosting":
        """
        Load a posting from a job description file.

        The identifier is the file stem, e.g. "AcmeCorp-SoftwareEngineer.txt".

        Raises:
            JobDescriptionError: If the file cannot be read or is malformed
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise JobDescriptionError(f"Could not read job description: {e}", source_path=path) from e

        return cls.from_text(text, identifier=identifier_from_filename(path.name), source_path=path)


def discover_job_postings(jobs_dir: Path) -> List[Path]:
    """
    List job description files in a directory.

    Only ".txt" and ".md" files are returned, sorted by name so batch runs are
    reproducible. Files are not parsed here.

    Raises:
        JobDescriptionError: If jobs_dir is not a directory
    """
    jobs_dir = Path(jobs_dir)
    if not jobs_dir.is_dir():
        raise JobDescriptionError("Job descriptions directory not found", source_path=jobs_dir)

    paths = sorted(path for path in jobs_dir.iterdir() if is_job_file(path))
    _log_info(f"Found {len(paths)} job descriptions in {jobs_dir}")
    return paths
