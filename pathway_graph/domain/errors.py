"""Typed domain errors for the pathway graph.

All errors inherit from PathwayGraphError and can optionally wrap
a root cause exception for debugging.

Unreachable destinations and unknown vertices are not errors: the
graph signals them with empty results.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class PathwayGraphError(Exception):
    """Base error for the pathway graph domain.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class InvalidEdgeError(PathwayGraphError):
    """Edge insertion rejected.

    Attributes:
        source: Source vertex of the rejected edge
        target: Target vertex of the rejected edge
        reason: "self-loop" or "duplicate edge"
    """

    source: str = ""
    target: str = ""
    reason: str = ""


@dataclass
class InvalidWeightError(PathwayGraphError):
    """Edge weight unusable for the requested operation.

    Raised on insertion for non-numeric or NaN weights, and by
    Dijkstra when the graph holds a negative weight.
    """

    source: str = ""
    target: str = ""
    weight: Any = math.nan


@dataclass
class GraphError(PathwayGraphError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the graph data file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class DrugNotFoundError(PathwayGraphError):
    """Drug name absent from the target lookup."""

    drug: str = ""


@dataclass
class DegreeConstraintError(PathwayGraphError):
    """A protein addition would break the degree-sequence check.

    The owned graph is left untouched when this is raised.
    """

    protein: str = ""


@dataclass
class AnalysisLimitError(PathwayGraphError):
    """Graph too large for exhaustive path enumeration.

    Attributes:
        limit: Configured maximum vertex count
        vertex_count: Actual vertex count of the graph
    """

    limit: int = 0
    vertex_count: int = 0
