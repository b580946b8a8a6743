"""
Targeting context logger.

Provides logging interface for targeting context with automatic [target] prefix.
All targeting modules should import from this module, not from utils.logger directly.
"""

from pathlib import Path

from loguru import logger

from quiver.utils.logger import setup_logger as _setup_logger

CONTEXT_PREFIX = "[target]"


def setup_targeting_logger(log_dir: Path, config=None) -> Path:
    """
    Setup logger for targeting context.

    Args:
        log_dir: Directory for this targeting session
        config: TargetingConfig whose policy is recorded in the provenance header

    Returns:
        Path to log file

    Example:
        from quiver.contexts.targeting.logger import setup_targeting_logger

        log_file = setup_targeting_logger(log_dir, config=config)
    """
    provenance = {}
    if config is not None:
        provenance = {
            "Embedding model": config.embedding_model,
            "NER model": config.ner_model,
            "Fusion weights": (
                f"{config.semantic_weight}/{config.lexical_weight}/{config.graph_weight}"
            ),
            "Minimum relevance": config.minimum_relevance_score,
            "Lines per category": config.max_lines_per_category,
        }
    return _setup_logger(context_name="target", log_dir=log_dir, extra_provenance=provenance)


# Wrapper functions with automatic [target] prefix


def _log_info(message: str) -> None:
    """Log info message with [target] prefix."""
    logger.info(f"{CONTEXT_PREFIX} {message}")


def _log_success(message: str) -> None:
    """Log success message with [target] prefix."""
    logger.success(f"{CONTEXT_PREFIX} {message}")


def _log_error(message: str) -> None:
    """Log error message with [target] prefix."""
    logger.error(f"{CONTEXT_PREFIX} {message}")


def _log_debug(message: str) -> None:
    """Log debug message with [target] prefix."""
    logger.debug(f"{CONTEXT_PREFIX} {message}")


# High-level targeting-specific logging helpers


def log_targeting_start(identifier: str, sentence_count: int, entity_count: int) -> None:
    """Log start of targeting for one job description."""
    _log_info(f"Targeting {identifier}")
    _log_debug(f"  {sentence_count} sentences, {entity_count} entities")


def log_targeting_result(result, elapsed_time: float) -> None:
    """
    Log a finished targeting pass.

    Args:
        result: TargetedResume from ResumeTargeter.target()
        elapsed_time: Time taken in seconds
    """
    line_count = sum(len(lines) for lines in result.selected_lines.values())
    _log_success(
        f"{result.identifier}: selected {line_count} lines in "
        f"{len(result.selected_lines)} categories ({elapsed_time:.2f}s)"
    )
    if result.relevant_skills:
        _log_info(f"  Skills: {', '.join(result.relevant_skills)}")
    else:
        _log_debug("  No relevant skills detected")


def log_targeting_failure(identifier: str, error: Exception) -> None:
    """Log a job description that was skipped because of an error."""
    _log_error(f"Skipping {identifier}: {type(error).__name__}")
    for line in str(error).splitlines():
        _log_error(f"  {line}")
