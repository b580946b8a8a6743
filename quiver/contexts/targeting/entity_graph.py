"""
Entity graph builder.

An entity graph is the ordered list of (entity_text, embedding) pairs found in
a text. Two graphs are compared by the graph signal in scoring.py.
"""

from typing import Dict, List, Tuple

import numpy as np

from quiver.contexts.targeting.collaborators import Embedder, EntityExtractor
from quiver.contexts.targeting.exceptions import EmbeddingError, EntityExtractionError
from quiver.contexts.targeting.logger import _log_debug

EntityGraph = List[Tuple[str, np.ndarray]]


def embed_text(text: str, embedder: Embedder) -> np.ndarray:
    """
    Embed one text span, rejecting empty results.

    Raises:
        EmbeddingError: If the embedder fails or returns an empty vector
    """
    vector = embedder.embed(text)
    if vector is None or np.size(vector) == 0:
        raise EmbeddingError("Embedder returned no vector", text=text)
    return np.asarray(vector, dtype=np.float32).ravel()


def build_entity_graph(
    text: str,
    extractor: EntityExtractor,
    embedder: Embedder,
) -> EntityGraph:
    """
    Extract entities from text and pair each with its embedding.

    Entities keep extractor order and are not deduplicated. Each distinct
    entity text is embedded once per call; repeats reuse that vector.

    Args:
        text: Text to extract entities from
        extractor: Entity extraction collaborator
        embedder: Embedding collaborator

    Returns:
        List of (entity_text, embedding) pairs, empty when no entities were found

    Raises:
        EntityExtractionError: If the extractor returns no result structure
        EmbeddingError: If any entity cannot be embedded
    """
    entities = extractor.extract_entities(text)
    if entities is None:
        raise EntityExtractionError("Entity extractor returned no result", text=text)

    cache: Dict[str, np.ndarray] = {}
    graph = []
    for entity in entities:
        if entity.text not in cache:
            cache[entity.text] = embed_text(entity.text, embedder)
        graph.append((entity.text, cache[entity.text]))

    _log_debug(f"Entity graph: {len(graph)} entities ({len(cache)} distinct)")
    return graph
