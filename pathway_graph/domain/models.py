"""Immutable domain models for the pathway graph.

All models are frozen dataclasses with slots. They carry pure data
(paths, levels, scores) and know nothing about presentation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Optional


class Algorithm(Enum):
    """Analyses that can be run for a drug's target protein."""

    BFS = "bfs"
    DIJKSTRA = "dijkstra"
    TOPOLOGICAL = "topological"
    ALL_PATHS = "all_paths"


@dataclass(frozen=True, slots=True)
class Edge:
    """Directed outgoing edge stored in a vertex's adjacency sequence.

    Attributes:
        target: Identifier of the vertex the edge points to
        weight: Edge weight (any real number)
    """

    target: str
    weight: float = 1.0


@dataclass(frozen=True, slots=True)
class BFSResult:
    """Result of a breadth-first traversal.

    Attributes:
        path: Parent chain from start to destination, or every visited
            vertex in discovery order when no destination was given
        levels: Discovered depth of every vertex touched by the search
    """

    path: tuple[str, ...] = field(default_factory=tuple)
    levels: Mapping[str, int] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        """Check if nothing was reached."""
        return len(self.path) == 0

    @property
    def max_depth(self) -> int:
        """Deepest level discovered, 0 for an empty search."""
        return max(self.levels.values(), default=0)


@dataclass(frozen=True, slots=True)
class PathwayReport:
    """Outcome of one analysis run for a drug.

    Attributes:
        algorithm: The analysis that produced this report
        drug: Normalized drug name
        target: Target protein the drug binds
        destination: Destination protein for the target, if known
        path: Proteins forming the main result (path or order slice)
        paths: Every enumerated path (ALL_PATHS only)
        stats: Summary statistics keyed by name
    """

    algorithm: Algorithm
    drug: str
    target: str
    destination: Optional[str]
    path: tuple[str, ...] = field(default_factory=tuple)
    paths: tuple[tuple[str, ...], ...] = field(default_factory=tuple)
    stats: Mapping[str, Any] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        """Check if the analysis found nothing."""
        return len(self.path) == 0 and len(self.paths) == 0


@dataclass(frozen=True, slots=True)
class CentralityReport:
    """Directed betweenness centrality scores.

    Attributes:
        scores: Raw Brandes score per vertex, in vertex insertion order
    """

    scores: Mapping[str, float] = field(default_factory=dict)

    @property
    def max_score(self) -> float:
        return max(self.scores.values(), default=0.0)

    def ranked(self, top: Optional[int] = None) -> list[tuple[str, float]]:
        """Vertices sorted by descending score, ties in insertion order."""
        ordered = sorted(self.scores.items(), key=lambda item: -item[1])
        return ordered if top is None else ordered[:top]


@dataclass(frozen=True, slots=True)
class ProteinAddition:
    """Result of adding a protein and its outgoing interactions.

    Attributes:
        protein: The protein that was added
        added: Neighbors whose edges were committed
        rejected: Human-readable reasons for each edge that was refused
    """

    protein: str
    added: tuple[str, ...] = field(default_factory=tuple)
    rejected: tuple[str, ...] = field(default_factory=tuple)
