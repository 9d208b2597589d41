"""
Graph-based poem generation
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, List, Optional, Tuple, Union

from ..core.graph import Edge, Graph
from ..corpus import read_corpus, tokenize
from .builder import build_affinity_graph

logger = logging.getLogger(__name__)


class GraphPoet:
    """
    Poem generator backed by a word-affinity graph.

    Vertices are lowercase corpus words; the weight of w1 -> w2 counts how
    often w1 is directly followed by w2 in the corpus. A poem is made by
    inserting, between each adjacent pair of input words a and b, the word
    on the heaviest two-edge path a -> bridge -> b, if one exists.
    """

    def __init__(self, words: Optional[Iterable[str]] = None, representation: str = "vertices"):
        self._corpus_words: Tuple[str, ...] = tuple(word.lower() for word in words or ())
        self._graph: Graph[str] = build_affinity_graph(
            self._corpus_words, Graph.empty(representation)
        )
        logger.info(
            f"Built affinity graph ({representation}): "
            f"{len(self._graph)} vertices, {len(self._graph.edges())} edges"
        )

    @classmethod
    def from_text(cls, text: str, representation: str = "vertices") -> "GraphPoet":
        return cls(tokenize(text), representation=representation)

    @classmethod
    def from_file(cls, path: Union[str, Path], representation: str = "vertices") -> "GraphPoet":
        """Build a poet from a corpus file; raises CorpusReadError if unreadable."""
        return cls(read_corpus(path), representation=representation)

    @property
    def corpus_words(self) -> Tuple[str, ...]:
        """Lowercase corpus tokens in corpus order."""
        return self._corpus_words

    def bridge(self, first: str, second: str) -> Optional[str]:
        """
        Best bridge word between two words, or None.

        The bridge maximizes the combined weight of first -> bridge and
        bridge -> second. Ties go to the earliest candidate among the
        targets of first, in edge creation order.
        """
        forward = self._graph.targets(first.lower())
        backward = self._graph.sources(second.lower())

        best: Optional[str] = None
        best_weight = 0
        for candidate, weight in forward.items():
            if candidate not in backward:
                continue
            combined = weight + backward[candidate]
            if combined > best_weight:
                best, best_weight = candidate, combined
        return best

    def poem(self, text: str) -> str:
        """Generate a poem from the input; words are joined by single spaces."""
        words = text.split()
        if not words:
            return ""

        out: List[str] = [words[0]]
        for first, second in zip(words, words[1:]):
            bridge = self.bridge(first, second)
            if bridge is not None:
                logger.debug(f"Bridging {first!r} -> {bridge!r} -> {second!r}")
                out.append(bridge)
            out.append(second)
        return " ".join(out)

    def edges(self) -> List[Edge[str]]:
        return self._graph.edges()

    def vertices(self) -> FrozenSet[str]:
        return self._graph.vertices()

    def graph_view(self) -> str:
        return str(self._graph)

    def __str__(self) -> str:
        return self.graph_view()
