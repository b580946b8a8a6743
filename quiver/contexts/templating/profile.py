"""
Resume profile: the contact details rendered in the resume header.

Loaded from a YAML file whose keys match ResumeProfile fields:

    name: "Jackson Miller"
    email: "jackson@example.com"
    location: "Wabash, IN"
"""

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Dict, Optional

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from quiver.contexts.templating.exceptions import ProfileError

load_dotenv()
RESUME_PROFILE_PATH = os.getenv("RESUME_PROFILE_PATH")


@dataclass
class ResumeProfile:
    """Header fields; empty fields are left out of the rendered document."""

    name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    github: str = ""
    linkedin: str = ""
    personal_site: str = ""

    def header_fields(self) -> Dict[str, str]:
        """
        Non-empty fields keyed by their Typst argument names.

        Example:
            >>> ResumeProfile(name="Ada", personal_site="ada.dev").header_fields()
            {'author': 'Ada', 'personal-site': 'ada.dev'}
        """
        header = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value:
                key = "author" if f.name == "name" else f.name.replace("_", "-")
                header[key] = value
        return header


def load_resume_profile(profile_path: Optional[Path] = None) -> ResumeProfile:
    """
    Load the resume profile, falling back to an empty profile.

    Args:
        profile_path: YAML file (defaults to RESUME_PROFILE_PATH env variable)

    Raises:
        ProfileError: If the file is missing, unparsable, or has unknown keys
    """
    if profile_path is None:
        if not RESUME_PROFILE_PATH:
            return ResumeProfile()
        profile_path = Path(RESUME_PROFILE_PATH)

    profile_path = Path(profile_path)
    if not profile_path.exists():
        raise ProfileError("Resume profile not found", profile_path)

    try:
        merged = OmegaConf.merge(OmegaConf.structured(ResumeProfile), OmegaConf.load(profile_path))
        return OmegaConf.to_object(merged)
    except (OmegaConfBaseException, yaml.YAMLError) as e:
        raise ProfileError(f"Invalid resume profile: {e}", profile_path) from e
