"""
Multi-signal relevance scoring.

Each candidate line gets three signals against a job description:

- semantic: best cosine similarity between the line and any JD sentence
- lexical: sum over the line's words of their best TF-IDF relevance to any
  JD sentence (unnormalized, so long keyword-dense lines score higher)
- graph: mean cosine similarity across all line-entity x JD-entity pairs

The fused score is a fixed weighted sum. Nothing is normalized across lines.
"""

from typing import Iterable, List, Optional

from quiver.contexts.targeting.config import TargetingConfig
from quiver.contexts.targeting.similarity import cosine_similarity
from quiver.contexts.targeting.targeting_data_structures import (
    CandidateLine,
    JobDescription,
    ScoredLine,
    SignalBreakdown,
)
from quiver.contexts.targeting.tfidf import TfIdfIndex
from quiver.utils.text_processing import split_words


def semantic_signal(line: CandidateLine, jd: JobDescription) -> float:
    """Highest cosine similarity to any JD sentence, floored at 0.0."""
    best = 0.0
    for embedding in jd.sentence_embeddings:
        best = max(best, cosine_similarity(line.embedding, embedding))
    return best


def lexical_signal(line: CandidateLine, jd: JobDescription, tfidf: TfIdfIndex) -> float:
    """Sum of each word's best TF-IDF relevance across JD sentences."""
    return sum(
        max((tfidf.term_relevance(word, sentence) for sentence in jd.sentences), default=0.0)
        for word in split_words(line.text)
    )


def graph_signal(line: CandidateLine, jd: JobDescription) -> float:
    """Mean pairwise entity similarity; 0.0 when either side has no entities."""
    if not line.entities or not jd.entities:
        return 0.0

    similarities = [
        cosine_similarity(line_embedding, jd_embedding)
        for _, line_embedding in line.entities
        for _, jd_embedding in jd.entities
    ]
    return sum(similarities) / len(similarities)


def compute_signals(
    line: CandidateLine,
    jd: JobDescription,
    tfidf: TfIdfIndex,
    config: Optional[TargetingConfig] = None,
) -> SignalBreakdown:
    """
    Compute all three signals and fuse them.

    Args:
        line: Candidate line with precomputed embedding and entities
        jd: Job description with sentence embeddings and entities
        tfidf: Index built from jd.sentences
        config: Fusion weights (defaults when omitted)

    Returns:
        SignalBreakdown with the weighted total
    """
    config = config or TargetingConfig()

    semantic = semantic_signal(line, jd)
    lexical = lexical_signal(line, jd, tfidf)
    graph = graph_signal(line, jd)
    total = (
        config.semantic_weight * semantic
        + config.lexical_weight * lexical
        + config.graph_weight * graph
    )
    return SignalBreakdown(semantic=semantic, lexical=lexical, graph=graph, total=total)


def score_line(
    line: CandidateLine,
    jd: JobDescription,
    tfidf: TfIdfIndex,
    config: Optional[TargetingConfig] = None,
) -> float:
    """Fused relevance score of one line. Pure: same inputs, same float."""
    return compute_signals(line, jd, tfidf, config).total


def score_lines(
    lines: Iterable[CandidateLine],
    jd: JobDescription,
    tfidf: TfIdfIndex,
    config: Optional[TargetingConfig] = None,
) -> List[ScoredLine]:
    """
    Score every candidate line against a job description.

    Returns:
        ScoredLine per input line, in input order
    """
    scored = []
    for line in lines:
        signals = compute_signals(line, jd, tfidf, config)
        scored.append(
            ScoredLine(text=line.text, category=line.category, score=signals.total, signals=signals)
        )
    return scored
