"""
Typst resume rendering.

Renders a TargetedResume into a Typst document with a Jinja2 template. The
template uses custom delimiters so Typst's own braces and hashes never clash
with template syntax:
- Variable: <<< var >>>
- Block: <%% block %%>
"""

from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError

from quiver.contexts.templating.exceptions import TemplateRenderError
from quiver.contexts.templating.logger import _log_debug, _log_error, _log_success
from quiver.contexts.templating.profile import ResumeProfile

TEMPLATES_PATH = Path(__file__).parent / "templates"
RESUME_TEMPLATE = "resume.typ.jinja"


@dataclass
class RenderReport:
    """
    Outcome of writing a batch of resumes.

    Attributes:
        written: Job identifier -> written file, in input order
        failures: Job identifier -> error for resumes that could not be written
    """

    written: Dict[str, Path] = field(default_factory=dict)
    failures: Dict[str, Exception] = field(default_factory=dict)


def typst_string(value: str) -> str:
    """Escape a value for use inside a Typst string literal."""
    return str(value).replace("\\", "\\\\").replace('"', '\\"')


def order_sections(
    selected_lines: Dict[str, List[str]],
    category_order: Optional[Iterable[str]] = None,
) -> List[Tuple[str, List[str]]]:
    """
    Order selected categories for display.

    Categories listed in category_order come first, in that order; any others
    follow in their existing order. Categories without lines are skipped.

    Example:
        >>> order_sections({"B": ["b"], "A": ["a"]}, ["A", "B"])
        [('A', ['a']), ('B', ['b'])]
    """
    ordered = [c for c in dict.fromkeys(category_order or []) if selected_lines.get(c)]
    ordered.extend(c for c in selected_lines if c not in ordered and selected_lines[c])
    return [(category, selected_lines[category]) for category in ordered]


def resume_filename(company: str, role: str, on: Optional[date] = None) -> str:
    """
    Output filename for a targeted resume.

    Example:
        >>> resume_filename("AcmeCorp", "SoftwareEngineer", date(2026, 10, 17))
        'AcmeCorp-SoftwareEngineer-2026-10-17.typ'
    """
    on = on or date.today()
    return f"{company}-{role}-{on.isoformat()}.typ"


class TypstRenderer:
    """
    Renders targeted resumes with the Typst Jinja2 template.

    Attributes:
        templates_path: Directory holding resume.typ.jinja
    """

    def __init__(self, templates_path: Path = None):
        if templates_path is None:
            templates_path = TEMPLATES_PATH

        self.templates_path = templates_path
        self.env = Environment(
            loader=FileSystemLoader(str(templates_path)),
            # Catches silent failures
            undefined=StrictUndefined,
            variable_start_string="<<<",
            variable_end_string=">>>",
            block_start_string="<%%",
            block_end_string="%%>",
            comment_start_string="<#",
            comment_end_string="#>",
            trim_blocks=False,
            lstrip_blocks=False,
            keep_trailing_newline=True,
        )
        self.env.filters["typst_string"] = typst_string

    def render(
        self,
        result,
        profile: Optional[ResumeProfile] = None,
        category_order: Optional[Iterable[str]] = None,
    ) -> str:
        """
        Render a targeted resume to Typst source.

        Args:
            result: TargetedResume from the targeting context
            profile: Header contact details
            category_order: Preferred section order (e.g., content bank order)

        Returns:
            Typst document text

        Raises:
            TemplateRenderError: If the template is missing or fails to render
        """
        profile = profile or ResumeProfile()
        try:
            template = self.env.get_template(RESUME_TEMPLATE)
            return template.render(
                header=profile.header_fields(),
                sections=order_sections(result.selected_lines, category_order),
                skills=result.relevant_skills,
            )
        except TemplateError as e:
            raise TemplateRenderError(
                f"Failed to render resume for {result.identifier}",
                template_path=self.templates_path / RESUME_TEMPLATE,
                original_error=e,
            ) from e

    def write(
        self,
        result,
        output_dir: Path,
        profile: Optional[ResumeProfile] = None,
        category_order: Optional[Iterable[str]] = None,
        on: Optional[date] = None,
    ) -> Path:
        """
        Render and write a resume as {company}-{role}-{date}.typ.

        Returns:
            Path to the written file
        """
        output_dir.mkdir(parents=True, exist_ok=True)
        output_path = output_dir / resume_filename(result.company, result.role, on)

        content = self.render(result, profile, category_order)
        output_path.write_text(content, encoding="utf-8")

        _log_debug(f"{len(content)} chars written")
        _log_success(f"Generated resume: {output_path}")
        return output_path

    def write_all(
        self,
        results: Iterable,
        output_dir: Path,
        profile: Optional[ResumeProfile] = None,
        category_order: Optional[Iterable[str]] = None,
        on: Optional[date] = None,
    ) -> RenderReport:
        """
        Write a resume per result; a failed write is recorded and skipped.

        Returns:
            RenderReport keyed by job identifier
        """
        category_order = list(category_order or [])
        report = RenderReport()
        for result in results:
            try:
                report.written[result.identifier] = self.write(
                    result, output_dir, profile, category_order, on
                )
            except (TemplateRenderError, OSError) as e:
                _log_error(f"Could not write resume for {result.identifier}: {e}")
                report.failures[result.identifier] = e
        return report
