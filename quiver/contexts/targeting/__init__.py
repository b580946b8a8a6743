"""
Targeting Context

Responsibilities:
- Scores relevance of content-bank lines against a job description
  (semantic, lexical and entity-graph signals fused into one score)
- Selects the best lines per work-history category
- Detects skills relevant to the posting and highlights them in selected lines

Owns: Similarity, TF-IDF, entity graphs, scoring, selection, collaborator adapters
Never: Reads raw files directly or renders documents
"""

from quiver.contexts.targeting.collaborators import (
    Embedder,
    Entity,
    EntityExtractor,
    SentenceTransformerEmbedder,
    SpacyEntityExtractor,
)
from quiver.contexts.targeting.config import TargetingConfig, load_targeting_config
from quiver.contexts.targeting.exceptions import (
    CollaboratorError,
    EmbeddingError,
    EntityExtractionError,
    TargetingConfigError,
)
from quiver.contexts.targeting.scoring import compute_signals, score_line, score_lines
from quiver.contexts.targeting.selection import annotate_selection, select_top_lines
from quiver.contexts.targeting.similarity import cosine_similarity
from quiver.contexts.targeting.targeter import ResumeTargeter, TargetingReport
from quiver.contexts.targeting.targeting_data_structures import (
    CandidateLine,
    JobDescription,
    ScoredLine,
    SignalBreakdown,
    TargetedResume,
)
from quiver.contexts.targeting.tfidf import TfIdfIndex

__all__ = [
    # Collaborators
    "Embedder",
    "Entity",
    "EntityExtractor",
    "SentenceTransformerEmbedder",
    "SpacyEntityExtractor",
    # Configuration and errors
    "TargetingConfig",
    "load_targeting_config",
    "CollaboratorError",
    "EmbeddingError",
    "EntityExtractionError",
    "TargetingConfigError",
    # Core algorithms
    "cosine_similarity",
    "TfIdfIndex",
    "compute_signals",
    "score_line",
    "score_lines",
    "select_top_lines",
    "annotate_selection",
    # Orchestration and data structures
    "ResumeTargeter",
    "TargetingReport",
    "CandidateLine",
    "JobDescription",
    "ScoredLine",
    "SignalBreakdown",
    "TargetedResume",
]
