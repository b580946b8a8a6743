"""
Data structures for the Targeting context.

CandidateLine and JobDescription carry the precomputed model outputs that
scoring consumes. Both are built once and never mutated.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import numpy as np

from quiver.contexts.intake import BankLine, JobPosting
from quiver.contexts.targeting.collaborators import Embedder, EntityExtractor
from quiver.contexts.targeting.entity_graph import build_entity_graph, embed_text


@dataclass(frozen=True, eq=False)
class CandidateLine:
    """
    A content-bank line with its embedding and entity graph.

    Attributes:
        text: Resume line text
        category: Work-history entry the line belongs to
        embedding: Sentence embedding of text
        entities: (entity_text, embedding) pairs in extractor order
    """

    text: str
    category: str
    embedding: np.ndarray
    entities: Tuple[Tuple[str, np.ndarray], ...] = ()

    @classmethod
    def from_bank_line(
        cls,
        bank_line: BankLine,
        embedder: Embedder,
        extractor: EntityExtractor,
    ) -> "CandidateLine":
        """
        Embed a bank line and build its entity graph.

        Raises:
            EmbeddingError: If the line or one of its entities cannot be embedded
            EntityExtractionError: If entity extraction fails
        """
        return cls(
            text=bank_line.text,
            category=bank_line.category,
            embedding=embed_text(bank_line.text, embedder),
            entities=tuple(build_entity_graph(bank_line.text, extractor, embedder)),
        )


@dataclass(frozen=True, eq=False)
class JobDescription:
    """
    A job posting with sentence embeddings and its entity graph.

    Attributes:
        posting: Source posting (raw text, sentences, company, role)
        sentence_embeddings: One embedding per posting sentence, same order
        entities: Entity graph of the full raw text
    """

    posting: JobPosting
    sentence_embeddings: Tuple[np.ndarray, ...]
    entities: Tuple[Tuple[str, np.ndarray], ...] = ()

    def __post_init__(self):
        if len(self.sentence_embeddings) != len(self.posting.sentences):
            raise ValueError(
                f"{len(self.sentence_embeddings)} sentence embeddings for "
                f"{len(self.posting.sentences)} sentences"
            )

    @classmethod
    def from_posting(
        cls,
        posting: JobPosting,
        embedder: Embedder,
        extractor: EntityExtractor,
    ) -> "JobDescription":
        """
        Embed every sentence of a posting and build its entity graph.

        Raises:
            EmbeddingError: If a sentence or entity cannot be embedded
            EntityExtractionError: If entity extraction fails
        """
        return cls(
            posting=posting,
            sentence_embeddings=tuple(embed_text(s, embedder) for s in posting.sentences),
            entities=tuple(build_entity_graph(posting.raw_text, extractor, embedder)),
        )

    @property
    def identifier(self) -> str:
        return self.posting.identifier

    @property
    def raw_text(self) -> str:
        return self.posting.raw_text

    @property
    def sentences(self) -> Tuple[str, ...]:
        return self.posting.sentences


@dataclass(frozen=True)
class SignalBreakdown:
    """The three relevance signals for one line and their fused total."""

    semantic: float
    lexical: float
    graph: float
    total: float


@dataclass(frozen=True)
class ScoredLine:
    """A line's text, category and fused relevance score."""

    text: str
    category: str
    score: float
    signals: Optional[SignalBreakdown] = field(default=None, compare=False)


@dataclass
class TargetedResume:
    """
    Targeting output for one job description.

    Attributes:
        identifier: Job identifier ("Company-Role")
        company: Company parsed from the identifier
        role: Role parsed from the identifier
        selected_lines: Category -> highlighted lines in score order; empty
            categories are absent
        relevant_skills: Deduplicated skills relevant to the posting
        scored_lines: Every scored line, highest score first
    """

    identifier: str
    company: str
    role: str
    selected_lines: Dict[str, List[str]]
    relevant_skills: List[str]
    scored_lines: List[ScoredLine] = field(default_factory=list)
