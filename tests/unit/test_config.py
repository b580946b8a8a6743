"""Unit tests for targeting configuration loading."""

import pytest

from quiver.contexts.targeting import defaults
from quiver.contexts.targeting.config import TargetingConfig, load_targeting_config
from quiver.contexts.targeting.exceptions import TargetingConfigError


@pytest.mark.unit
def test_defaults_match_policy_constants():
    config = load_targeting_config(None)

    assert (config.semantic_weight, config.lexical_weight, config.graph_weight) == (0.4, 0.3, 0.3)
    assert config.minimum_relevance_score == 0.2
    assert config.max_lines_per_category == 4
    assert config.emphasis_template == "#strong[{}]"
    assert config.skill_vocabulary == list(defaults.COMMON_SKILL_TERMS)


@pytest.mark.unit
def test_yaml_overrides_defaults(tmp_path):
    config_file = tmp_path / "targeting.yaml"
    config_file.write_text("minimum_relevance_score: 0.35\nmax_lines_per_category: 2\n")

    config = load_targeting_config(config_file)

    assert isinstance(config, TargetingConfig)
    assert config.minimum_relevance_score == 0.35
    assert config.max_lines_per_category == 2
    assert config.semantic_weight == 0.4


@pytest.mark.unit
def test_unknown_key_rejected(tmp_path):
    config_file = tmp_path / "targeting.yaml"
    config_file.write_text("minimum_relevence_score: 0.35\n")

    with pytest.raises(TargetingConfigError):
        load_targeting_config(config_file)


@pytest.mark.unit
def test_wrong_type_rejected(tmp_path):
    config_file = tmp_path / "targeting.yaml"
    config_file.write_text("max_lines_per_category: lots\n")

    with pytest.raises(TargetingConfigError):
        load_targeting_config(config_file)


@pytest.mark.unit
def test_missing_file_rejected(tmp_path):
    with pytest.raises(TargetingConfigError, match="not found"):
        load_targeting_config(tmp_path / "missing.yaml")


@pytest.mark.unit
@pytest.mark.parametrize(
    "overrides",
    [
        {"semantic_weight": -0.1},
        {"max_lines_per_category": 0},
        {"max_workers": 0},
        {"emphasis_template": "**bold**"},
    ],
)
def test_out_of_range_values_rejected(overrides):
    with pytest.raises(TargetingConfigError):
        TargetingConfig(**overrides).validate()


@pytest.mark.unit
def test_empty_skill_vocabulary_override(tmp_path):
    config_file = tmp_path / "targeting.yaml"
    config_file.write_text("skill_vocabulary: []\n")

    assert load_targeting_config(config_file).skill_vocabulary == []
