"""
Text processing utilities shared by the intake and targeting contexts.

Word normalization here is the single definition used by both the TF-IDF
build phase and its query phase, so the two can never drift apart.
"""

import re
from typing import List

# Runs of non-alphanumeric characters at either end of a word
BOUNDARY_PUNCTUATION = re.compile(r"^[\W_]+|[\W_]+$")

SENTENCE_DELIMITER = "."


def normalize_word(word: str) -> str:
    """
    Case-fold a word and strip non-alphanumeric characters from both ends.

    Inner punctuation is kept, so "c++" becomes "c" but "node.js" stays "node.js".

    Args:
        word: Raw whitespace-delimited token

    Returns:
        Normalized word, possibly empty

    Example:
        >>> normalize_word("(Python),")
        'python'
        >>> normalize_word("--")
        ''
    """
    return BOUNDARY_PUNCTUATION.sub("", word).lower()


def split_words(text: str) -> List[str]:
    """Split text on whitespace without normalizing."""
    return text.split()


def split_sentences(text: str) -> List[str]:
    """
    Split text into sentences on periods.

    Pieces that are empty after trimming are dropped; surviving pieces are trimmed.

    Example:
        >>> split_sentences("Build APIs. Ship often.. ")
        ['Build APIs', 'Ship often']
    """
    pieces = (piece.strip() for piece in text.split(SENTENCE_DELIMITER))
    return [piece for piece in pieces if piece]


def truncate_display(text: str, max_len: int) -> str:
    """
    Truncate text for display with ellipsis if needed.

    Example:
        >>> truncate_display("this is a very long string", 10)
        'this is...'
    """
    return text if len(text) <= max_len else text[: max_len - 3] + "..."
