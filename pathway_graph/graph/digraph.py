"""Directed, weighted graph backed by an adjacency list.

Vertices are string identifiers. Each vertex maps to an ordered list of
outgoing ``Edge`` records; that order is the tie-break order of every
traversal. Self-loops and parallel edges are rejected.

The analyses live in sibling modules and take the graph as their first
argument; the methods below are thin delegates so callers can write
``graph.bfs("A")``.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Dict, Iterator, List, Optional, Tuple

from ..domain.errors import InvalidEdgeError, InvalidWeightError
from ..domain.models import BFSResult, Edge
from . import centrality, degree, shortest_path, traversal


class DirectedGraph:
    """Mutable directed, weighted graph over string vertices."""

    def __init__(self) -> None:
        self._adj: Dict[str, List[Edge]] = {}
        self._revision = 0

    # --- Mutation -------------------------------------------------------------

    def add_vertex(self, vertex: str) -> None:
        """Ensure vertex exists. No-op if it already does."""
        if vertex not in self._adj:
            self._adj[vertex] = []
            self._revision += 1

    def add_edge(self, source: str, target: str, weight: float = 1) -> None:
        """Add a directed edge source -> target.

        Both endpoints are created if missing. Nothing is mutated when
        the edge is rejected.

        Raises:
            InvalidEdgeError: On a self-loop or an existing source -> target edge.
            InvalidWeightError: If weight is not a real number.
        """
        if source == target:
            raise InvalidEdgeError(
                "Invalid edge: self-loops not allowed.",
                source=source,
                target=target,
                reason="self-loop",
            )
        if self.has_edge(source, target):
            raise InvalidEdgeError(
                "Invalid edge: duplicate edge not allowed.",
                source=source,
                target=target,
                reason="duplicate edge",
            )
        if isinstance(weight, bool) or not isinstance(weight, Real) or math.isnan(weight):
            raise InvalidWeightError(
                f"Invalid edge weight: {weight!r}",
                source=source,
                target=target,
                weight=weight,
            )

        self.add_vertex(source)
        self.add_vertex(target)
        self._adj[source].append(Edge(target=target, weight=float(weight)))
        self._revision += 1

    def copy(self) -> DirectedGraph:
        """Return an independent copy with the same vertex and edge order."""
        clone = DirectedGraph()
        clone._adj = {vertex: list(edges) for vertex, edges in self._adj.items()}
        clone._revision = self._revision
        return clone

    # --- Read access ----------------------------------------------------------

    @property
    def revision(self) -> int:
        """Counter bumped on every successful mutation."""
        return self._revision

    @property
    def edge_count(self) -> int:
        return sum(len(edges) for edges in self._adj.values())

    def __len__(self) -> int:
        return len(self._adj)

    def __contains__(self, vertex: object) -> bool:
        return vertex in self._adj

    def __iter__(self) -> Iterator[str]:
        return iter(self._adj)

    def __repr__(self) -> str:
        return f"DirectedGraph(vertices={len(self)}, edges={self.edge_count})"

    def vertices(self) -> List[str]:
        """All vertices in insertion order."""
        return list(self._adj)

    def neighbors(self, vertex: str) -> Tuple[Edge, ...]:
        """Outgoing edges of vertex in insertion order (empty if unknown)."""
        return tuple(self._adj.get(vertex, ()))

    def edges(self) -> Iterator[Tuple[str, Edge]]:
        """Iterate over every (source, edge) pair."""
        for source, edges in self._adj.items():
            for edge in edges:
                yield source, edge

    def has_edge(self, source: str, target: str) -> bool:
        return any(edge.target == target for edge in self._adj.get(source, ()))

    def out_degrees(self) -> Dict[str, int]:
        """Out-degree per vertex, in insertion order."""
        return {vertex: len(edges) for vertex, edges in self._adj.items()}

    def in_degrees(self) -> Dict[str, int]:
        """In-degree per vertex, in insertion order."""
        indeg = {vertex: 0 for vertex in self._adj}
        for _, edge in self.edges():
            indeg[edge.target] += 1
        return indeg

    # --- Analyses -------------------------------------------------------------

    def bfs(self, start: str, destination: Optional[str] = None) -> BFSResult:
        return traversal.bfs(self, start, destination)

    def dijkstra(self, start: str, destination: str) -> List[str]:
        return shortest_path.dijkstra(self, start, destination)

    def topological_sort(self) -> List[str]:
        return traversal.topological_sort(self)

    def all_paths(self, start: str, end: str) -> List[List[str]]:
        return traversal.all_paths(self, start, end)

    def is_valid_digraph(self) -> bool:
        return degree.is_valid_digraph(self)

    def betweenness_centrality_directed(self) -> Dict[str, float]:
        return centrality.betweenness_centrality_directed(self)
