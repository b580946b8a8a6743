"""
Per-category selection of scored lines.

Lines are grouped by category, ranked by score, thresholded, and truncated.
Ties keep input order because Python's sort is stable, but callers should not
rely on the order of equally scored lines.
"""

from collections import defaultdict
from typing import Dict, Iterable, List, Sequence

from quiver.contexts.targeting.defaults import (
    EMPHASIS_TEMPLATE,
    MAX_LINES_PER_CATEGORY,
    MINIMUM_RELEVANCE_SCORE,
)
from quiver.contexts.targeting.skills import highlight_skills
from quiver.contexts.targeting.targeting_data_structures import ScoredLine


def group_by_category(scored_lines: Iterable[ScoredLine]) -> Dict[str, List[ScoredLine]]:
    """Group lines by category, categories in first-appearance order."""
    groups = defaultdict(list)
    for line in scored_lines:
        groups[line.category].append(line)
    return dict(groups)


def rank_lines(scored_lines: Iterable[ScoredLine]) -> List[ScoredLine]:
    """Sort lines by descending score."""
    return sorted(scored_lines, key=lambda line: line.score, reverse=True)


def select_top_lines(
    scored_lines: Iterable[ScoredLine],
    minimum_score: float = MINIMUM_RELEVANCE_SCORE,
    max_per_category: int = MAX_LINES_PER_CATEGORY,
) -> Dict[str, List[ScoredLine]]:
    """
    Pick the best lines of every category.

    Within each category lines are ranked, those below minimum_score dropped,
    and at most max_per_category kept. Categories with no surviving lines are
    omitted from the result.

    Args:
        scored_lines: Flat list of scored lines
        minimum_score: Inclusive relevance threshold
        max_per_category: Per-category cap

    Returns:
        Category -> surviving lines, highest score first
    """
    selected = {}
    for category, lines in group_by_category(scored_lines).items():
        survivors = [line for line in rank_lines(lines) if line.score >= minimum_score]
        if survivors:
            selected[category] = survivors[:max_per_category]
    return selected


def annotate_selection(
    selected: Dict[str, List[ScoredLine]],
    skills: Sequence[str],
    emphasis_template: str = EMPHASIS_TEMPLATE,
) -> Dict[str, List[str]]:
    """
    Highlight skills in already selected lines.

    Runs after selection, so neither the set nor the order of lines changes.

    Returns:
        Category -> annotated line texts
    """
    return {
        category: [highlight_skills(line.text, skills, emphasis_template) for line in lines]
        for category, lines in selected.items()
    }
