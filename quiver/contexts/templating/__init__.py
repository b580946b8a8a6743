"""
Templating Context

Responsibilities:
- Renders targeted resume content into a Typst document
- Manages the resume profile (contact details shown in the header)
- Writes rendered resumes to the output directory

Owns: Typst template, profile loading, output file naming
Never: Makes content prioritization decisions
"""

from quiver.contexts.templating.exceptions import ProfileError, TemplateRenderError
from quiver.contexts.templating.profile import ResumeProfile, load_resume_profile
from quiver.contexts.templating.typst_renderer import (
    RenderReport,
    TypstRenderer,
    order_sections,
    resume_filename,
)

__all__ = [
    "ResumeProfile",
    "load_resume_profile",
    "ProfileError",
    "TemplateRenderError",
    "RenderReport",
    "TypstRenderer",
    "order_sections",
    "resume_filename",
]
