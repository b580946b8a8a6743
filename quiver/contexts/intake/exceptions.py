"""Custom exceptions for the intake context."""

from pathlib import Path
from typing import Optional


class JobDescriptionError(ValueError):
    """
    Exception raised when a job description cannot be turned into a scorable posting.

    Covers filenames without a derivable company/role identifier, unreadable files,
    and texts with no non-empty sentences.

    Attributes:
        message: Error description
        source_path: Job description file, if the posting came from disk
    """

    def __init__(self, message: str, source_path: Optional[Path] = None):
        self.message = message
        self.source_path = source_path

        parts = [message]
        if source_path:
            parts.append(f"Source: {source_path}")

        super().__init__("\n".join(parts))


class ContentBankError(ValueError):
    """
    Exception raised when the content bank structure is invalid.

    Attributes:
        message: Error description
        source_path: Content bank file, if loaded from disk
        entry: Offending entry (truncated in the message)
    """

    def __init__(
        self,
        message: str,
        source_path: Optional[Path] = None,
        entry: Optional[object] = None,
    ):
        self.message = message
        self.source_path = source_path
        self.entry = entry

        parts = [message]
        if source_path:
            parts.append(f"Source: {source_path}")
        if entry is not None:
            snippet = repr(entry)
            snippet = snippet[:200] + "..." if len(snippet) > 200 else snippet
            parts.append(f"Entry: {snippet}")

        super().__init__("\n".join(parts))
