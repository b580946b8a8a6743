"""
Personal content bank for the Intake context.

The content bank is the pool of reusable resume lines, each tagged with the
work-history category it belongs to, plus the candidate's master skill list.

File format (JSON or YAML, loaded with OmegaConf):

    lines:
      - job: "Civitas LLC"
        line: "Built a legislative monitoring pipeline in Python."
    skills: ["Python", "Policy Analysis"]
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

import yaml
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from quiver.contexts.intake.exceptions import ContentBankError
from quiver.contexts.intake.logger import _log_info, _log_warning


@dataclass(frozen=True)
class BankLine:
    """One resume line and the category (work-history entry) it came from."""

    category: str
    text: str


@dataclass
class ContentBank:
    """
    Categorized resume lines and the master skill list.

    Attributes:
        lines: Resume lines in file order
        skills: Master skill list in file order
    """

    lines: List[BankLine] = field(default_factory=list)
    skills: List[str] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any], source_path: Path = None) -> "ContentBank":
        """
        Build a content bank from its parsed mapping.

        Raises:
            ContentBankError: If "lines" is missing or an entry lacks job/line text
        """
        if not isinstance(data, dict) or "lines" not in data:
            raise ContentBankError("Content bank must contain a 'lines' list", source_path)

        raw_lines = data["lines"] or []
        raw_skills = data.get("skills") or []
        if not isinstance(raw_lines, list) or not isinstance(raw_skills, list):
            raise ContentBankError("'lines' and 'skills' must be lists", source_path)

        lines = []
        for entry in raw_lines:
            if not isinstance(entry, dict):
                raise ContentBankError("Line entry must be a mapping", source_path, entry)
            category = entry.get("job")
            text = entry.get("line")
            if not isinstance(category, str) or not isinstance(text, str) or not text.strip():
                raise ContentBankError(
                    "Line entry needs string 'job' and non-empty 'line'", source_path, entry
                )
            lines.append(BankLine(category=category, text=text))

        skills = [str(skill) for skill in raw_skills if str(skill).strip()]
        if len(skills) < len(raw_skills):
            _log_warning(f"Dropped {len(raw_skills) - len(skills)} blank skills")

        return cls(lines=lines, skills=skills)

    @classmethod
    def from_file(cls, path: Path) -> "ContentBank":
        """
        Load a content bank from a JSON or YAML file.

        Raises:
            ContentBankError: If the file is missing, unparsable, or malformed
        """
        path = Path(path)
        if not path.exists():
            raise ContentBankError("Content bank file not found", path)

        try:
            data = OmegaConf.to_container(OmegaConf.load(path), resolve=True)
        except (OmegaConfBaseException, yaml.YAMLError) as e:
            raise ContentBankError(f"Could not parse content bank: {e}", path) from e

        bank = cls.from_dict(data, source_path=path)
        _log_info(
            f"Loaded {len(bank.lines)} lines in {len(bank.categories)} categories "
            f"and {len(bank.skills)} skills from {path}"
        )
        return bank

    @property
    def categories(self) -> List[str]:
        """Distinct categories in first-appearance order."""
        return list(dict.fromkeys(line.category for line in self.lines))
