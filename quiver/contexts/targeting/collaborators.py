"""
External model collaborators for the Targeting context.

The scoring engine only sees two narrow interfaces:

- Embedder.embed(text) -> 1-D float vector
- EntityExtractor.extract_entities(text) -> list of Entity, or None when the
  backend produced no result structure at all

Concrete adapters wrap sentence-transformers and spaCy. Both libraries are
imported when an adapter is constructed, so the rest of the package (and its
tests) never loads them.
"""

from dataclasses import dataclass
from typing import List, Optional, Protocol

import numpy as np

from quiver.contexts.targeting.defaults import EMBEDDING_MODEL, NER_MODEL
from quiver.contexts.targeting.exceptions import EmbeddingError, EntityExtractionError
from quiver.contexts.targeting.logger import _log_info


@dataclass(frozen=True)
class Entity:
    """Named-entity span reported by an extractor."""

    text: str
    label: str = ""
    start: int = -1
    end: int = -1


class Embedder(Protocol):
    def embed(self, text: str) -> np.ndarray:
        """Return a fixed-length vector, raising EmbeddingError on failure."""
        ...


class EntityExtractor(Protocol):
    def extract_entities(self, text: str) -> Optional[List[Entity]]:
        """Return entity spans, raising EntityExtractionError on backend failure."""
        ...


class SentenceTransformerEmbedder:
    """
    Embedder backed by a sentence-transformers model.

    Attributes:
        model_name: Hugging Face model identifier
        dimension: Embedding dimensionality reported by the model
    """

    def __init__(self, model_name: str = EMBEDDING_MODEL, device: Optional[str] = None):
        from sentence_transformers import SentenceTransformer

        _log_info(f"Loading embedding model: {model_name}")
        self.model_name = model_name
        self._model = SentenceTransformer(model_name, device=device)
        self.dimension = self._model.get_sentence_embedding_dimension()

    def embed(self, text: str) -> np.ndarray:
        if not text or not text.strip():
            raise EmbeddingError("Cannot embed empty text", text=text)

        try:
            vector = self._model.encode(text, convert_to_numpy=True)
        except (RuntimeError, ValueError) as e:
            raise EmbeddingError("Embedding backend failed", text=text, original_error=e) from e

        return np.asarray(vector, dtype=np.float32).ravel()


class SpacyEntityExtractor:
    """
    Entity extractor backed by a spaCy pipeline with an NER component.

    Attributes:
        model_name: spaCy package name (e.g., "en_core_web_sm")
    """

    def __init__(self, model_name: str = NER_MODEL):
        import spacy

        _log_info(f"Loading NER model: {model_name}")
        self.model_name = model_name
        try:
            self._nlp = spacy.load(model_name)
        except OSError as e:
            raise EntityExtractionError(
                f"spaCy model {model_name!r} is not installed", original_error=e
            ) from e

    def extract_entities(self, text: str) -> Optional[List[Entity]]:
        try:
            doc = self._nlp(text)
        except (RuntimeError, ValueError) as e:
            raise EntityExtractionError("Entity backend failed", text=text, original_error=e) from e

        return [
            Entity(text=ent.text, label=ent.label_, start=ent.start_char, end=ent.end_char)
            for ent in doc.ents
        ]
