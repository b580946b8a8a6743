"""Unit tests for loguru setup and the targeting log helpers."""

import pytest
from loguru import logger

from quiver.contexts.targeting.config import TargetingConfig
from quiver.contexts.targeting.logger import log_targeting_failure, setup_targeting_logger
from quiver.contexts.targeting.exceptions import EmbeddingError


@pytest.fixture
def log_dir(tmp_path):
    yield tmp_path / "logs"
    logger.remove()


@pytest.mark.unit
def test_setup_writes_provenance_header(log_dir):
    log_file = setup_targeting_logger(log_dir, config=TargetingConfig())

    assert log_file == log_dir / "target.log"
    content = log_file.read_text()
    assert "Working directory:" in content
    assert "Fusion weights: 0.4/0.3/0.3" in content
    assert "Lines per category: 4" in content


@pytest.mark.unit
def test_failure_is_logged_with_prefix(log_dir):
    log_file = setup_targeting_logger(log_dir)

    log_targeting_failure("Acme-Dev", EmbeddingError("Embedding backend failed", text="Python"))

    content = log_file.read_text()
    assert "[target] Skipping Acme-Dev: EmbeddingError" in content
    assert "[target]   Input: 'Python'" in content
