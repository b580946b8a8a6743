"""
Shared utilities for QUIVER.

Common functionality used across contexts:
- Logger setup
- Text normalization and sentence splitting
"""

from quiver.utils.text_processing import normalize_word, split_sentences

__all__ = ["normalize_word", "split_sentences"]
