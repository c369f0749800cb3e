"""Shortest-path computation using Dijkstra's algorithm."""

from __future__ import annotations

import heapq
from typing import TYPE_CHECKING, Dict, List, Tuple

from ..domain.errors import InvalidWeightError

if TYPE_CHECKING:
    from .digraph import DirectedGraph


def dijkstra(graph: DirectedGraph, start: str, destination: str) -> List[str]:
    """Compute the lightest path between two vertices.

    Parameters
    ----------
    graph:
        Graph to search. Every edge weight must be non-negative.
    start:
        Identifier of the first vertex.
    destination:
        Identifier of the last vertex.

    Returns
    -------
    list[str]
        The vertices from ``start`` to ``destination`` (inclusive), or
        ``[]`` if either is unknown or no path exists. Equal tentative
        distances are settled in vertex insertion order.

    Raises
    ------
    InvalidWeightError
        If any edge of the graph has a negative weight.
    """
    for source, edge in graph.edges():
        if edge.weight < 0:
            raise InvalidWeightError(
                f"Negative weight on {source} -> {edge.target}; "
                "Dijkstra requires non-negative weights",
                source=source,
                target=edge.target,
                weight=edge.weight,
            )

    if start not in graph or destination not in graph:
        return []

    rank = {vertex: index for index, vertex in enumerate(graph)}
    distances: Dict[str, float] = {vertex: float("inf") for vertex in graph}
    previous: Dict[str, str] = {}
    distances[start] = 0.0

    heap: List[Tuple[float, int, str]] = [(0.0, rank[start], start)]
    settled = set()

    while heap:
        current_distance, _, u = heapq.heappop(heap)

        if u in settled:
            continue

        settled.add(u)

        if u == destination:
            break

        for edge in graph.neighbors(u):
            alt = current_distance + edge.weight
            if alt < distances[edge.target]:
                distances[edge.target] = alt
                previous[edge.target] = u
                heapq.heappush(heap, (alt, rank[edge.target], edge.target))

    if destination not in settled:
        return []

    path = [destination]
    while path[-1] != start:
        path.append(previous[path[-1]])

    path.reverse()
    return path
