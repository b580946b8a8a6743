"""Custom exceptions for the targeting context."""

from typing import Optional


def _snippet(text: str, limit: int = 200) -> str:
    return text[:limit] + "..." if len(text) > limit else text


class CollaboratorError(Exception):
    """
    Base exception for failures of an external model collaborator.

    Attributes:
        message: Error description
        text: Input text the collaborator failed on
        original_error: The backend exception, if any
    """

    def __init__(
        self,
        message: str,
        text: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.text = text
        self.original_error = original_error

        parts = [message]
        if text is not None:
            parts.append(f"Input: {_snippet(text)!r}")
        if original_error:
            parts.append(f"Original error: {original_error}")

        super().__init__("\n".join(parts))


class EmbeddingError(CollaboratorError):
    """Raised when an embedding cannot be produced for a text span."""


class EntityExtractionError(CollaboratorError):
    """Raised when the entity extractor fails or returns no result structure."""


class TargetingConfigError(ValueError):
    """Raised when targeting policy values are out of range."""
