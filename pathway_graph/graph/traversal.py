"""Depth- and breadth-first traversals.

The depth-first walks use an explicit stack of neighbor iterators in
place of recursion, so graph size is not limited by the interpreter's
recursion limit. Visiting order is the same as the recursive form.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Tuple

from ..domain.models import BFSResult, Edge

if TYPE_CHECKING:
    from .digraph import DirectedGraph


def bfs(
    graph: DirectedGraph, start: str, destination: Optional[str] = None
) -> BFSResult:
    """Breadth-first search from start.

    Parameters
    ----------
    graph:
        Graph to traverse.
    start:
        Vertex the search starts from.
    destination:
        Optional target. The search stops as soon as it is dequeued,
        so ``levels`` only covers what was discovered up to that point.

    Returns
    -------
    BFSResult
        With a destination, ``path`` is the parent chain from ``start``
        to ``destination`` (empty if unreachable). Without one, ``path``
        lists every visited vertex in discovery order.
    """
    if start not in graph:
        return BFSResult()

    queue = deque([start])
    # dict keeps discovery order, values are parents
    parent: Dict[str, Optional[str]] = {start: None}
    levels: Dict[str, int] = {start: 0}

    while queue:
        current = queue.popleft()
        if current == destination:
            break

        for edge in graph.neighbors(current):
            if edge.target not in parent:
                parent[edge.target] = current
                levels[edge.target] = levels[current] + 1
                queue.append(edge.target)

    if destination is None:
        return BFSResult(path=tuple(parent), levels=levels)

    if destination not in parent:
        return BFSResult(path=(), levels=levels)

    path: List[str] = []
    node: Optional[str] = destination
    while node is not None:
        path.append(node)
        node = parent[node]
    path.reverse()
    return BFSResult(path=tuple(path), levels=levels)


def topological_sort(graph: DirectedGraph) -> List[str]:
    """DFS post-order over every vertex, reversed.

    Only meaningful on acyclic graphs. Cycles do not raise; the returned
    order is simply not a valid topological order then.
    """
    visited = set()
    finished: List[str] = []

    for root in graph:
        if root in visited:
            continue

        visited.add(root)
        stack: List[Tuple[str, Iterator[Edge]]] = [(root, iter(graph.neighbors(root)))]
        while stack:
            vertex, pending = stack[-1]
            for edge in pending:
                if edge.target not in visited:
                    visited.add(edge.target)
                    stack.append((edge.target, iter(graph.neighbors(edge.target))))
                    break
            else:
                stack.pop()
                finished.append(vertex)

    finished.reverse()
    return finished


def all_paths(graph: DirectedGraph, start: str, end: str) -> List[List[str]]:
    """Every simple path from start to end, in DFS discovery order.

    Exponential in the worst case and unguarded; callers bound the input.
    """
    if start not in graph or end not in graph:
        return []
    if start == end:
        return [[start]]

    results: List[List[str]] = []
    path = [start]
    on_path = {start}
    stack: List[Iterator[Edge]] = [iter(graph.neighbors(start))]

    while stack:
        for edge in stack[-1]:
            nxt = edge.target
            if nxt in on_path:
                continue
            if nxt == end:
                results.append(path + [nxt])
                continue
            on_path.add(nxt)
            path.append(nxt)
            stack.append(iter(graph.neighbors(nxt)))
            break
        else:
            stack.pop()
            on_path.discard(path.pop())

    return results
