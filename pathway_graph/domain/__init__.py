"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    AnalysisLimitError,
    DegreeConstraintError,
    DrugNotFoundError,
    GraphError,
    InvalidEdgeError,
    InvalidWeightError,
    PathwayGraphError,
)
from .models import (
    Algorithm,
    BFSResult,
    CentralityReport,
    Edge,
    PathwayReport,
    ProteinAddition,
)

__all__ = [
    # Models
    "Algorithm",
    "Edge",
    "BFSResult",
    "PathwayReport",
    "CentralityReport",
    "ProteinAddition",
    # Errors
    "PathwayGraphError",
    "InvalidEdgeError",
    "InvalidWeightError",
    "GraphError",
    "DrugNotFoundError",
    "DegreeConstraintError",
    "AnalysisLimitError",
]
