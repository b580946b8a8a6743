"""Shared fixtures: deterministic stand-ins for the embedding and NER models."""

import re

import numpy as np
import pytest

from quiver.contexts.targeting.collaborators import Entity
from quiver.contexts.targeting.exceptions import EmbeddingError

DIMENSION = 8


def letter_vector(text: str) -> np.ndarray:
    """Bag-of-letters vector folded into DIMENSION buckets."""
    vector = np.zeros(DIMENSION, dtype=np.float32)
    for char in text.lower():
        if char.isalpha():
            vector[ord(char) % DIMENSION] += 1.0
    return vector


class FakeEmbedder:
    """Embeds known texts to fixed vectors, everything else to letter_vector()."""

    def __init__(self, vectors=None, fail_on=()):
        self.vectors = {text: np.asarray(v, dtype=np.float32) for text, v in (vectors or {}).items()}
        self.fail_on = set(fail_on)
        self.calls = []

    def embed(self, text):
        self.calls.append(text)
        if text in self.fail_on or not text.strip():
            raise EmbeddingError("Fake embedding failure", text=text)
        if text in self.vectors:
            return self.vectors[text]
        return letter_vector(text)


class FakeExtractor:
    """Reports every whole-word occurrence of a known entity term, in text order."""

    def __init__(self, terms=(), return_none=False):
        self.terms = list(terms)
        self.return_none = return_none

    def extract_entities(self, text):
        if self.return_none:
            return None
        if not self.terms:
            return []
        alternation = "|".join(re.escape(t) for t in sorted(self.terms, key=len, reverse=True))
        return [
            Entity(text=m.group(0), label="SKILL", start=m.start(), end=m.end())
            for m in re.finditer(rf"(?<!\w)(?:{alternation})(?!\w)", text, re.IGNORECASE)
        ]


@pytest.fixture
def embedder():
    return FakeEmbedder()


@pytest.fixture
def extractor():
    return FakeExtractor(terms=["Python", "SQL", "Docker", "Kubernetes", "Acme"])
