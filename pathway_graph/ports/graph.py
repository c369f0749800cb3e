"""Graph ports - Abstractions for seed data loading and drug lookups.

These protocols define the contracts for everything the analysis
service needs from outside the graph core.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol

if TYPE_CHECKING:
    from ..graph.digraph import DirectedGraph


class InteractionRepositoryPort(Protocol):
    """Port for loading the protein interaction graph.

    Implementation: adapters/graph/csv_repository.py
    """

    def load(self) -> DirectedGraph:
        """Build a fresh graph from the stored interactions.

        Returns:
            A newly constructed graph the caller owns.
        """
        ...


class DrugLookupPort(Protocol):
    """Port for the static drug -> target -> destination tables.

    Implementation: adapters/graph/csv_repository.py
    """

    def target_for(self, drug: str) -> Optional[str]:
        """Target protein of a drug.

        Args:
            drug: Drug name, matched case-insensitively.

        Returns:
            The target protein, or None if the drug is unknown.
        """
        ...

    def destination_for(self, target: str) -> Optional[str]:
        """Destination protein reached from a target protein.

        Args:
            target: Target protein identifier.

        Returns:
            The destination protein, or None if none is recorded.
        """
        ...
