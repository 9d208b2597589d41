from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, FrozenSet, Generic, Hashable, List, Tuple, TypeVar

from .exceptions import InvalidArgumentError


L = TypeVar("L", bound=Hashable)

REPRESENTATIONS = ("vertices", "edges")


@dataclass(frozen=True)
class Edge(Generic[L]):
    """A weighted directed edge. Weight is always positive."""

    source: L
    target: L
    weight: int

    def __str__(self) -> str:
        return f"{self.source} -> {self.target}: {self.weight}"


def _validate_edge(source: L, target: L, weight: int) -> None:
    if isinstance(weight, bool) or not isinstance(weight, int):
        raise InvalidArgumentError(f"Edge weight must be an int, got {weight!r}")
    if weight < 0:
        raise InvalidArgumentError(f"Edge weight must be non-negative, got {weight}")
    if source == target:
        raise InvalidArgumentError(f"Self-loop not allowed on {source!r}")


class Graph(ABC, Generic[L]):
    """A mutable weighted directed graph with labeled vertices.

    Every edge has a positive integer weight and distinct endpoints. Query
    methods return snapshots, so callers never hold a reference into the
    graph's internal state.
    """

    @staticmethod
    def empty(representation: str = "vertices") -> "Graph":
        return empty_graph(representation)

    @abstractmethod
    def add(self, label: L) -> bool:
        """Add a vertex; return True if it was not already present."""

    @abstractmethod
    def set(self, source: L, target: L, weight: int) -> int:
        """Add, change or remove (weight 0) an edge; return the previous weight.

        A positive weight adds both endpoints as vertices if needed. Raises
        InvalidArgumentError for a self-loop or a negative weight.
        """

    @abstractmethod
    def remove(self, label: L) -> bool:
        """Remove a vertex and every edge touching it; return True if it existed."""

    @abstractmethod
    def vertices(self) -> FrozenSet[L]:
        ...

    @abstractmethod
    def sources(self, target: L) -> Dict[L, int]:
        """Map of every vertex with an edge into target to that edge's weight."""

    @abstractmethod
    def targets(self, source: L) -> Dict[L, int]:
        """Map of every vertex reachable from source by one edge to its weight."""

    def weight(self, source: L, target: L) -> int:
        """Weight of source -> target, or 0 if there is no such edge."""
        return self.targets(source).get(target, 0)

    @abstractmethod
    def edges(self) -> List[Edge[L]]:
        ...

    def __len__(self) -> int:
        return len(self.vertices())

    def __contains__(self, label: object) -> bool:
        return label in self.vertices()

    def __str__(self) -> str:
        edges = self.edges()
        if not edges:
            return "Empty Graph"
        return "\n".join(str(edge) for edge in edges)


class Vertex(Generic[L]):
    """A vertex holding its own incoming and outgoing weights."""

    def __init__(self, label: L) -> None:
        self.label = label
        self._sources: Dict[L, int] = {}
        self._targets: Dict[L, int] = {}

    def set_source(self, source: L, weight: int) -> int:
        assert source != self.label
        if weight == 0:
            return self._sources.pop(source, 0)
        previous = self._sources.get(source, 0)
        self._sources[source] = weight
        return previous

    def set_target(self, target: L, weight: int) -> int:
        assert target != self.label
        if weight == 0:
            return self._targets.pop(target, 0)
        previous = self._targets.get(target, 0)
        self._targets[target] = weight
        return previous

    def detach(self, label: L) -> None:
        self._sources.pop(label, None)
        self._targets.pop(label, None)

    def neighbours(self) -> FrozenSet[L]:
        return frozenset(self._sources) | frozenset(self._targets)

    def sources(self) -> Dict[L, int]:
        return dict(self._sources)

    def targets(self) -> Dict[L, int]:
        return dict(self._targets)

    def target_weight(self, target: L) -> int:
        return self._targets.get(target, 0)

    def __repr__(self) -> str:
        return f"Vertex({self.label!r}, targets={self._targets}, sources={self._sources})"


class VertexGraph(Graph[L]):
    """Graph stored as one Vertex object per label.

    Each edge weight is kept twice, in the source's targets and in the
    target's sources; both copies must agree.
    """

    def __init__(self) -> None:
        self._vertices: Dict[L, Vertex[L]] = {}

    def _check_rep(self, *labels: L) -> None:
        for label in labels:
            vertex = self._vertices.get(label)
            if vertex is None:
                continue
            for target, weight in vertex.targets().items():
                assert target != label and weight > 0
                assert self._vertices[target].sources().get(label) == weight
            for source, weight in vertex.sources().items():
                assert source != label and weight > 0
                assert self._vertices[source].targets().get(label) == weight

    def _vertex(self, label: L) -> Vertex[L]:
        vertex = self._vertices.get(label)
        if vertex is None:
            vertex = self._vertices[label] = Vertex(label)
        return vertex

    def add(self, label: L) -> bool:
        if label in self._vertices:
            return False
        self._vertices[label] = Vertex(label)
        return True

    def set(self, source: L, target: L, weight: int) -> int:
        _validate_edge(source, target, weight)
        if weight == 0:
            if source not in self._vertices or target not in self._vertices:
                return 0
            source_vertex = self._vertices[source]
            target_vertex = self._vertices[target]
        else:
            source_vertex = self._vertex(source)
            target_vertex = self._vertex(target)

        previous = source_vertex.set_target(target, weight)
        mirrored = target_vertex.set_source(source, weight)
        assert previous == mirrored
        self._check_rep(source, target)
        return previous

    def remove(self, label: L) -> bool:
        vertex = self._vertices.pop(label, None)
        if vertex is None:
            return False
        neighbours = vertex.neighbours()
        for neighbour in neighbours:
            self._vertices[neighbour].detach(label)
        self._check_rep(*neighbours)
        return True

    def vertices(self) -> FrozenSet[L]:
        return frozenset(self._vertices)

    def sources(self, target: L) -> Dict[L, int]:
        vertex = self._vertices.get(target)
        return vertex.sources() if vertex is not None else {}

    def targets(self, source: L) -> Dict[L, int]:
        vertex = self._vertices.get(source)
        return vertex.targets() if vertex is not None else {}

    def weight(self, source: L, target: L) -> int:
        vertex = self._vertices.get(source)
        return vertex.target_weight(target) if vertex is not None else 0

    def edges(self) -> List[Edge[L]]:
        return [
            Edge(label, target, weight)
            for label, vertex in self._vertices.items()
            for target, weight in vertex.targets().items()
        ]


class EdgeGraph(Graph[L]):
    """Graph stored as a vertex set plus a flat collection of Edge records."""

    def __init__(self) -> None:
        self._vertices: set = set()
        self._edges: Dict[Tuple[L, L], Edge[L]] = {}

    def _check_rep(self, *keys: Tuple[L, L]) -> None:
        for key in keys:
            edge = self._edges.get(key)
            if edge is None:
                continue
            assert edge.weight > 0 and edge.source != edge.target
            assert edge.source in self._vertices and edge.target in self._vertices

    def add(self, label: L) -> bool:
        if label in self._vertices:
            return False
        self._vertices.add(label)
        return True

    def set(self, source: L, target: L, weight: int) -> int:
        _validate_edge(source, target, weight)
        key = (source, target)
        existing = self._edges.get(key)
        previous = existing.weight if existing is not None else 0

        if weight == 0:
            self._edges.pop(key, None)
        else:
            self.add(source)
            self.add(target)
            self._edges[key] = Edge(source, target, weight)
        self._check_rep(key)
        return previous

    def remove(self, label: L) -> bool:
        if label not in self._vertices:
            return False
        doomed = [key for key in self._edges if label in key]
        for key in doomed:
            del self._edges[key]
        self._vertices.discard(label)
        return True

    def vertices(self) -> FrozenSet[L]:
        return frozenset(self._vertices)

    def sources(self, target: L) -> Dict[L, int]:
        return {edge.source: edge.weight for edge in self._edges.values() if edge.target == target}

    def targets(self, source: L) -> Dict[L, int]:
        return {edge.target: edge.weight for edge in self._edges.values() if edge.source == source}

    def weight(self, source: L, target: L) -> int:
        edge = self._edges.get((source, target))
        return edge.weight if edge is not None else 0

    def edges(self) -> List[Edge[L]]:
        return list(self._edges.values())


_FACTORIES = {
    "vertices": VertexGraph,
    "edges": EdgeGraph,
}


def empty_graph(representation: str = "vertices") -> Graph:
    """Return an empty graph using the named internal representation."""

    factory = _FACTORIES.get(representation)
    if factory is None:
        raise InvalidArgumentError(
            f"Unknown graph representation {representation!r}; expected one of {REPRESENTATIONS}"
        )
    return factory()
