"""Directed betweenness centrality (Brandes, 2001)."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Dict, List

if TYPE_CHECKING:
    from .digraph import DirectedGraph


def betweenness_centrality_directed(graph: DirectedGraph) -> Dict[str, float]:
    """Raw directed betweenness score of every vertex.

    Shortest paths are counted in hops, following edge direction only.
    Each ordered (s, t) pair contributes once; scores are neither
    symmetrized nor normalized.
    """
    vertices = graph.vertices()
    scores: Dict[str, float] = {v: 0.0 for v in vertices}

    for s in vertices:
        order: List[str] = []
        pred: Dict[str, List[str]] = {v: [] for v in vertices}
        sigma: Dict[str, int] = dict.fromkeys(vertices, 0)
        dist: Dict[str, int] = dict.fromkeys(vertices, -1)
        sigma[s] = 1
        dist[s] = 0

        queue = deque([s])
        while queue:
            v = queue.popleft()
            order.append(v)
            for edge in graph.neighbors(v):
                w = edge.target
                if dist[w] < 0:
                    dist[w] = dist[v] + 1
                    queue.append(w)
                if dist[w] == dist[v] + 1:
                    sigma[w] += sigma[v]
                    pred[w].append(v)

        delta: Dict[str, float] = dict.fromkeys(vertices, 0.0)
        while order:
            w = order.pop()
            for v in pred[w]:
                delta[v] += sigma[v] / sigma[w] * (1 + delta[w])
            if w != s:
                scores[w] += delta[w]

    return scores
