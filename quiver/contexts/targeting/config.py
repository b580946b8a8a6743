"""
Targeting configuration.

Gathers the policy constants from defaults.py into a TargetingConfig and lets a
YAML file override any of them. Overrides are merged onto a structured schema,
so misspelled keys and wrongly typed values are rejected.

Examples:
    >>> config = load_targeting_config()                     # pure defaults
    >>> config = load_targeting_config(Path("targeting.yaml"))

    # targeting.yaml
    minimum_relevance_score: 0.25
    max_lines_per_category: 3
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

import yaml
from dotenv import load_dotenv
from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

from quiver.contexts.targeting import defaults
from quiver.contexts.targeting.exceptions import TargetingConfigError

load_dotenv()
TARGETING_CONFIG_PATH = os.getenv("TARGETING_CONFIG_PATH")


@dataclass
class TargetingConfig:
    """Fusion weights, selection policy and collaborator settings."""

    semantic_weight: float = defaults.SEMANTIC_WEIGHT
    lexical_weight: float = defaults.LEXICAL_WEIGHT
    graph_weight: float = defaults.GRAPH_WEIGHT
    minimum_relevance_score: float = defaults.MINIMUM_RELEVANCE_SCORE
    max_lines_per_category: int = defaults.MAX_LINES_PER_CATEGORY
    emphasis_template: str = defaults.EMPHASIS_TEMPLATE
    skill_vocabulary: List[str] = field(default_factory=lambda: list(defaults.COMMON_SKILL_TERMS))
    embedding_model: str = defaults.EMBEDDING_MODEL
    ner_model: str = defaults.NER_MODEL
    max_workers: int = defaults.MAX_WORKERS

    def validate(self) -> "TargetingConfig":
        """
        Check policy values are usable.

        Returns:
            self, for chaining

        Raises:
            TargetingConfigError: On negative weights, a limit or worker count
                below 1, or an emphasis template without a "{}" slot
        """
        for name in ("semantic_weight", "lexical_weight", "graph_weight"):
            if getattr(self, name) < 0:
                raise TargetingConfigError(f"{name} must be non-negative, got {getattr(self, name)}")
        if self.max_lines_per_category < 1:
            raise TargetingConfigError(
                f"max_lines_per_category must be at least 1, got {self.max_lines_per_category}"
            )
        if self.max_workers < 1:
            raise TargetingConfigError(f"max_workers must be at least 1, got {self.max_workers}")
        if "{}" not in self.emphasis_template:
            raise TargetingConfigError(
                f"emphasis_template needs a '{{}}' slot, got {self.emphasis_template!r}"
            )
        return self


def load_targeting_config(config_path: Optional[Path] = None) -> TargetingConfig:
    """
    Load targeting configuration, overriding defaults with a YAML file.

    Args:
        config_path: Optional YAML file (defaults to TARGETING_CONFIG_PATH env
                     variable; pure defaults when neither is set)

    Returns:
        Validated TargetingConfig

    Raises:
        TargetingConfigError: If the file is missing, has unknown keys,
            wrongly typed values, or out-of-range values
    """
    if config_path is None and TARGETING_CONFIG_PATH:
        config_path = Path(TARGETING_CONFIG_PATH)

    schema = OmegaConf.structured(TargetingConfig)

    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            raise TargetingConfigError(f"Targeting config not found: {config_path}")
        try:
            schema = OmegaConf.merge(schema, OmegaConf.load(config_path))
        except (OmegaConfBaseException, yaml.YAMLError) as e:
            raise TargetingConfigError(f"Invalid targeting config {config_path}: {e}") from e

    config = OmegaConf.to_object(schema)
    return config.validate()
