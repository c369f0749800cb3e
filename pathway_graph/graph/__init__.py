"""Directed weighted graph and its analyses.

This subpackage holds the in-memory graph type and the traversal,
shortest-path, ordering, degree and centrality algorithms that run
on top of it. It has no dependency on loading or presentation code.
"""

from .centrality import betweenness_centrality_directed
from .degree import is_digraphic, is_valid_digraph
from .digraph import DirectedGraph
from .shortest_path import dijkstra
from .traversal import all_paths, bfs, topological_sort

__all__ = [
    "DirectedGraph",
    "bfs",
    "dijkstra",
    "topological_sort",
    "all_paths",
    "is_digraphic",
    "is_valid_digraph",
    "betweenness_centrality_directed",
]
