"""
Relevant-skill detection and highlighting.

Skills relevant to a posting come from two places:
1. JD entities whose case-folded text is in the closed skill vocabulary
2. Master-skill terms that appear (case-insensitively) anywhere in the JD text

Highlighting wraps whole-word occurrences of those skills in emphasis markup.
Word boundaries are "not preceded/followed by a word character" rather than
\\b, so terms ending in punctuation such as "c++" still match.
"""

import re
from typing import Iterable, List, Optional, Sequence, Tuple

from quiver.contexts.targeting.defaults import COMMON_SKILL_TERMS, EMPHASIS_TEMPLATE


def dedupe_case_insensitive(terms: Iterable[str]) -> List[str]:
    """
    Remove case-insensitive duplicates, keeping the first spelling seen.

    Example:
        >>> dedupe_case_insensitive(["Python", "SQL", "python"])
        ['Python', 'SQL']
    """
    seen = set()
    unique = []
    for term in terms:
        key = term.lower()
        if key not in seen:
            seen.add(key)
            unique.append(term)
    return unique


def find_relevant_skills(
    jd_entities: Sequence[Tuple[str, object]],
    master_skills: Iterable[str],
    jd_text: str,
    skill_vocabulary: Optional[Iterable[str]] = None,
) -> List[str]:
    """
    Collect skills relevant to a job description.

    Args:
        jd_entities: JD entity graph; only entity texts are used
        master_skills: Candidate's master skill list
        jd_text: Raw JD text
        skill_vocabulary: Closed vocabulary for entity matching
                          (defaults to COMMON_SKILL_TERMS; an empty
                          vocabulary disables entity matching)

    Returns:
        Entity-derived skills then master-list skills, deduplicated
        case-insensitively in first-appearance order
    """
    if skill_vocabulary is None:
        skill_vocabulary = COMMON_SKILL_TERMS
    vocabulary = {term.lower() for term in skill_vocabulary}
    jd_text_lower = jd_text.lower()

    candidates = [text for text, _ in jd_entities if text.lower() in vocabulary]
    candidates.extend(skill for skill in master_skills if skill.lower() in jd_text_lower)

    return dedupe_case_insensitive(candidates)


def compile_skill_pattern(skills: Sequence[str]) -> Optional[re.Pattern]:
    """
    Compile one case-insensitive whole-word pattern matching any skill.

    Longer skills come first so "machine learning" wins over "machine".

    Returns:
        Compiled pattern, or None when there are no skills
    """
    terms = sorted({skill for skill in skills if skill.strip()}, key=len, reverse=True)
    if not terms:
        return None
    alternation = "|".join(re.escape(term) for term in terms)
    return re.compile(rf"(?<!\w)(?:{alternation})(?!\w)", re.IGNORECASE)


def highlight_skills(
    text: str,
    skills: Sequence[str],
    emphasis_template: str = EMPHASIS_TEMPLATE,
) -> str:
    """
    Wrap every whole-word skill occurrence in emphasis markup.

    Matching is a single pass, so inserted markup is never matched again.
    The original casing of the matched text is kept.

    Args:
        text: Line to annotate
        skills: Skill terms to emphasize
        emphasis_template: Format string with one "{}" slot

    Returns:
        Annotated text; unchanged when no skill occurs

    Example:
        >>> highlight_skills("Wrote Java and JavaScript", ["java"])
        'Wrote #strong[Java] and JavaScript'
    """
    pattern = compile_skill_pattern(skills)
    if pattern is None:
        return text
    return pattern.sub(lambda match: emphasis_template.format(match.group(0)), text)
