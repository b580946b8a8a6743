"""Vector similarity primitive used by every relevance signal."""

from typing import Sequence, Union

import numpy as np

from quiver.contexts.targeting.defaults import COSINE_EPSILON

Vector = Union[Sequence[float], np.ndarray]


def cosine_similarity(vec1: Vector, vec2: Vector, epsilon: float = COSINE_EPSILON) -> float:
    """
    Cosine similarity between two equal-length vectors.

    The denominator is floored at epsilon, so a zero vector yields 0.0
    instead of dividing by zero.

    Args:
        vec1: First vector
        vec2: Second vector
        epsilon: Denominator floor

    Returns:
        Similarity in [-1, 1]

    Raises:
        ValueError: If the vectors differ in length

    Example:
        >>> cosine_similarity([1.0, 0.0], [0.0, 2.0])
        0.0
    """
    a = np.asarray(vec1, dtype=np.float64).ravel()
    b = np.asarray(vec2, dtype=np.float64).ravel()
    if a.shape != b.shape:
        raise ValueError(f"Vector length mismatch: {a.shape[0]} != {b.shape[0]}")

    denom = max(float(np.linalg.norm(a) * np.linalg.norm(b)), epsilon)
    return float(np.dot(a, b) / denom)
