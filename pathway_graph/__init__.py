"""Top-level package for the pathway graph project.

The core is a directed, weighted graph (``DirectedGraph``) with
breadth-first traversal, Dijkstra shortest paths, topological ordering,
a degree-sequence feasibility check, directed betweenness centrality
and simple-path enumeration. The surrounding layers load seed data,
resolve drugs to proteins and orchestrate analyses.
"""

from .domain.errors import InvalidEdgeError, InvalidWeightError
from .domain.models import BFSResult, Edge
from .graph.digraph import DirectedGraph

__all__ = [
    "DirectedGraph",
    "Edge",
    "BFSResult",
    "InvalidEdgeError",
    "InvalidWeightError",
]
