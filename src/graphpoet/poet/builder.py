"""
Word-affinity graph construction from a corpus token sequence
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..core.graph import Graph

logger = logging.getLogger(__name__)


def build_affinity_graph(words: Optional[Iterable[str]], graph: Optional[Graph] = None) -> Graph:
    """Fold an ordered token sequence into a weighted directed graph.

    Every token becomes a vertex. Each adjacent pair (w_i, w_i+1) adds one to
    the weight of the edge w_i -> w_i+1. Tokens are lowercased before use.
    A pair of identical tokens would be a self-loop and is skipped, so
    "hello, hello," yields the vertex "hello," but no "hello, -> hello," edge.
    """

    if graph is None:
        graph = Graph.empty()

    previous: Optional[str] = None
    for word in words or ():
        word = word.lower()
        graph.add(word)
        if previous is not None:
            if previous == word:
                logger.debug(f"Skipping self-adjacent pair {word!r}")
            else:
                current = graph.weight(previous, word)
                graph.set(previous, word, current + 1)
        previous = word

    return graph
