"""Degree-sequence feasibility for directed graphs.

A directed analogue of the Havel-Hakimi / Erdos-Gallai conditions
(Fulkerson-Chen-Anstee). It only inspects the degree sequence, never
the actual edge set.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from .digraph import DirectedGraph


def is_digraphic(out_degrees: Sequence[int], in_degrees: Sequence[int]) -> bool:
    """Check a pair of degree sequences of equal length n.

    Returns False when any of the following fails:

    1. sum(out_degrees) == sum(in_degrees)
    2. every degree lies in [0, n)
    3. for every k in [1, n], the k largest out-degrees sum to at most
       sum(min(k, d) for d in in_degrees)
    """
    n = len(out_degrees)

    if sum(out_degrees) != sum(in_degrees):
        return False

    if any(d < 0 or d >= n for d in out_degrees) or any(
        d < 0 or d >= n for d in in_degrees
    ):
        return False

    out_sorted = sorted(out_degrees, reverse=True)
    lhs = 0
    for k in range(1, n + 1):
        lhs += out_sorted[k - 1]
        rhs = sum(min(k, d) for d in in_degrees)
        if lhs > rhs:
            return False

    return True


def is_valid_digraph(graph: DirectedGraph) -> bool:
    """Run ``is_digraphic`` on the graph's current degree sequences."""
    return is_digraphic(
        list(graph.out_degrees().values()),
        list(graph.in_degrees().values()),
    )
