"""Custom exceptions for templating context with template references."""

from pathlib import Path
from typing import Optional


class TemplateRenderError(Exception):
    """
    Exception raised when template rendering fails.

    Attributes:
        message: Error description
        template_path: Path to the template file
        original_error: The original Jinja2 error
    """

    def __init__(
        self,
        message: str,
        template_path: Optional[Path] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.template_path = template_path
        self.original_error = original_error

        parts = [message]

        if template_path:
            parts.append(f"\nTemplate: {template_path}")

        if original_error:
            parts.append(f"\nOriginal error: {str(original_error)}")

        super().__init__("\n".join(parts))


class ProfileError(ValueError):
    """
    Exception raised when the resume profile cannot be loaded.

    Attributes:
        message: Error description
        profile_path: Profile YAML file
    """

    def __init__(self, message: str, profile_path: Optional[Path] = None):
        self.message = message
        self.profile_path = profile_path

        parts = [message]

        if profile_path:
            parts.append(f"\nProfile: {profile_path}")

        super().__init__("\n".join(parts))
