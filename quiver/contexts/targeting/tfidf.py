"""
TF-IDF index over a small corpus of job-description sentences.

Build once from the corpus, then query term relevance against any document.
Words are normalized with normalize_word() in both phases.

Usage:
    index = TfIdfIndex.from_documents(posting.sentences)
    index.idf("python")                        # ln(N / df)
    index.term_relevance("Python", sentence)   # tf * idf
"""

import math
from collections import Counter
from types import MappingProxyType
from typing import Iterable, List, Mapping

from quiver.utils.text_processing import normalize_word, split_words


def _normalized_words(document: str) -> List[str]:
    """Normalized, non-empty words of a document."""
    return [word for word in map(normalize_word, split_words(document)) if word]


class TfIdfIndex:
    """
    Immutable vocabulary and inverse-document-frequency table.

    Attributes:
        vocabulary: Word -> index in first-seen order (read-only)
        inverse_document_frequency: Word -> ln(N / documents containing word) (read-only)
        document_count: N, the number of documents the index was built from
    """

    def __init__(
        self,
        vocabulary: Mapping[str, int],
        document_frequency: Mapping[str, int],
        document_count: int,
    ):
        """Prefer from_documents(); this takes already-counted statistics."""
        if document_count < 1:
            raise ValueError("TF-IDF index needs at least one document")

        self.document_count = document_count
        self.vocabulary = MappingProxyType(dict(vocabulary))
        self.inverse_document_frequency = MappingProxyType(
            {
                word: math.log(document_count / count)
                for word, count in document_frequency.items()
            }
        )

    @classmethod
    def from_documents(cls, documents: Iterable[str]) -> "TfIdfIndex":
        """
        Build the index from raw document texts.

        Each document counts a word at most once toward its document frequency.

        Raises:
            ValueError: If documents is empty
        """
        vocabulary = {}
        document_frequency = Counter()
        document_count = 0

        for document in documents:
            document_count += 1
            words = _normalized_words(document)
            for word in words:
                vocabulary.setdefault(word, len(vocabulary))
            document_frequency.update(set(words))

        return cls(vocabulary, document_frequency, document_count)

    def __len__(self) -> int:
        return len(self.vocabulary)

    def idf(self, term: str) -> float:
        """Inverse document frequency of a term, 0.0 if never seen."""
        return self.inverse_document_frequency.get(normalize_word(term), 0.0)

    def term_frequency(self, term: str, document: str) -> float:
        """
        Occurrences of term in document over the document's whitespace word count.

        Both sides are normalized; a term that normalizes to nothing never matches.
        """
        term = normalize_word(term)
        words = split_words(document)
        if not term or not words:
            return 0.0

        count = sum(1 for word in words if normalize_word(word) == term)
        return count / len(words)

    def term_relevance(self, term: str, document: str) -> float:
        """
        TF-IDF relevance of a term to a document.

        Returns 0.0 when the term does not occur in the document, and tf * idf
        otherwise. Never negative.

        Example:
            >>> index = TfIdfIndex.from_documents(["python python is great", "go", "rust"])
            >>> index.term_relevance("Python", "python python is great")  # (2/4) * ln(3)
            0.5493061443340549
        """
        tf = self.term_frequency(term, document)
        if tf == 0.0:
            return 0.0
        return tf * self.idf(term)
