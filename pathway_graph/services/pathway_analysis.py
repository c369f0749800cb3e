"""Pathway analysis service - Main orchestrator.

The service owns no hidden state beyond the graph handed to it: the
caller constructs the graph (usually through the interaction
repository) and passes it in. Every method returns plain data.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from ..config import AnalysisConfig
from ..domain.errors import (
    AnalysisLimitError,
    DegreeConstraintError,
    DrugNotFoundError,
    InvalidEdgeError,
    InvalidWeightError,
)
from ..domain.models import Algorithm, CentralityReport, PathwayReport, ProteinAddition
from ..graph.digraph import DirectedGraph
from ..ports.cache import CachePort
from ..ports.graph import DrugLookupPort


def parse_neighbors(text: str) -> List[Tuple[str, float]]:
    """Parse ``"B:2, C"`` into ``[("B", 2.0), ("C", 1.0)]``.

    A missing, unparsable, zero or NaN weight becomes 1. Blank names are
    skipped.
    """
    neighbors: List[Tuple[str, float]] = []
    for item in text.split(","):
        name, _, raw_weight = item.partition(":")
        name = name.strip()
        if not name:
            continue
        try:
            weight = float(raw_weight) if raw_weight.strip() else 1.0
        except ValueError:
            weight = 1.0
        if not weight or math.isnan(weight):
            weight = 1.0
        neighbors.append((name, weight))
    return neighbors


@dataclass
class PathwayAnalysisService:
    """Runs graph analyses for drugs and guards graph growth.

    Attributes:
        graph: The graph this service analyzes and extends
        drug_lookup: Resolves drugs to target and destination proteins
        cache: Memoizes whole-graph analyses per graph revision
        config: Analysis limits
    """

    graph: DirectedGraph
    drug_lookup: DrugLookupPort
    cache: CachePort
    config: AnalysisConfig = field(default_factory=AnalysisConfig)

    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    # --- Drug resolution -------------------------------------------------------

    def resolve(self, drug: str) -> Tuple[str, Optional[str]]:
        """Resolve a drug to its target and destination proteins.

        Raises:
            DrugNotFoundError: If the drug is blank or unknown.
        """
        name = drug.strip().lower()
        if not name:
            raise DrugNotFoundError("Please enter a drug name", drug=drug)

        target = self.drug_lookup.target_for(name)
        if target is None:
            raise DrugNotFoundError(f"Drug {name} not found", drug=name)

        destination = self.drug_lookup.destination_for(target)
        self._logger.debug(
            "Drug resolved",
            extra={"drug": name, "target": target, "destination": destination},
        )
        return target, destination

    # --- Analyses --------------------------------------------------------------

    def analyze(self, drug: str, algorithm: Algorithm) -> PathwayReport:
        """Run one analysis starting from the drug's target protein.

        Raises:
            DrugNotFoundError: If the drug cannot be resolved.
            AnalysisLimitError: For ALL_PATHS on a graph that is too large.
            InvalidWeightError: For DIJKSTRA on a graph with negative weights.
        """
        target, destination = self.resolve(drug)
        name = drug.strip().lower()

        if algorithm is Algorithm.BFS:
            report = self._run_bfs(name, target, destination)
        elif algorithm is Algorithm.DIJKSTRA:
            report = self._run_dijkstra(name, target, destination)
        elif algorithm is Algorithm.TOPOLOGICAL:
            report = self._run_topological(name, target, destination)
        else:
            report = self._run_all_paths(name, target, destination)

        self._logger.info(
            "Analysis completed",
            extra={
                "drug": name,
                "algorithm": algorithm.value,
                "proteins": len(report.path),
                "paths": len(report.paths),
            },
        )
        return report

    def _run_bfs(
        self, drug: str, target: str, destination: Optional[str]
    ) -> PathwayReport:
        result = self.graph.bfs(target, destination)
        return PathwayReport(
            algorithm=Algorithm.BFS,
            drug=drug,
            target=target,
            destination=destination,
            path=result.path,
            stats={
                "proteins_reached": len(result.path),
                "max_depth": result.max_depth,
                "start": target,
                "destination": destination,
            },
        )

    def _run_dijkstra(
        self, drug: str, target: str, destination: Optional[str]
    ) -> PathwayReport:
        path = self.graph.dijkstra(target, destination) if destination else []
        if not path:
            self._logger.info(
                "No path found",
                extra={"start": target, "destination": destination},
            )
        return PathwayReport(
            algorithm=Algorithm.DIJKSTRA,
            drug=drug,
            target=target,
            destination=destination,
            path=tuple(path),
            stats={
                "path_length": len(path),
                "path_exists": bool(path),
                "start": target,
                "destination": destination,
            },
        )

    def _run_topological(
        self, drug: str, target: str, destination: Optional[str]
    ) -> PathwayReport:
        order = self.topological_order()
        start_index = order.index(target) if target in order else -1
        end_index = order.index(destination) if destination in order else -1

        if start_index == -1:
            relevant = order
        elif end_index >= start_index:
            relevant = order[start_index : end_index + 1]
        else:
            relevant = order[start_index:]

        return PathwayReport(
            algorithm=Algorithm.TOPOLOGICAL,
            drug=drug,
            target=target,
            destination=destination,
            path=tuple(relevant),
            stats={
                "total_proteins": len(order),
                "target_position": start_index + 1,
                "destination_position": end_index + 1,
                "proteins_between": max(len(relevant) - 1, 0),
            },
        )

    def _run_all_paths(
        self, drug: str, target: str, destination: Optional[str]
    ) -> PathwayReport:
        paths = self.all_paths(target, destination) if destination else []
        return PathwayReport(
            algorithm=Algorithm.ALL_PATHS,
            drug=drug,
            target=target,
            destination=destination,
            paths=tuple(tuple(p) for p in paths),
            stats={
                "path_count": len(paths),
                "shortest_hops": min((len(p) - 1 for p in paths), default=0),
                "start": target,
                "destination": destination,
            },
        )

    def all_paths(self, start: str, end: str) -> List[List[str]]:
        """Enumerate simple paths, refusing graphs above the configured size.

        Raises:
            AnalysisLimitError: If the graph has too many vertices.
        """
        limit = self.config.max_enumeration_vertices
        if len(self.graph) > limit:
            raise AnalysisLimitError(
                f"Path enumeration limited to {limit} proteins, "
                f"graph has {len(self.graph)}",
                limit=limit,
                vertex_count=len(self.graph),
            )
        return self.graph.all_paths(start, end)

    def topological_order(self) -> List[str]:
        """Topological order of the whole graph, cached per revision."""
        return list(self.cache.get_or_compute(
            f"topological:{self.graph.revision}", self.graph.topological_sort
        ))

    def centrality(self) -> CentralityReport:
        """Directed betweenness centrality, cached per revision."""
        scores = self.cache.get_or_compute(
            f"centrality:{self.graph.revision}",
            self.graph.betweenness_centrality_directed,
        )
        self._logger.info("Betweenness centrality computed", extra={"proteins": len(scores)})
        return CentralityReport(scores=dict(scores))

    def validate(self) -> bool:
        """Run the degree-sequence check on the owned graph."""
        valid = self.graph.is_valid_digraph()
        if valid:
            self._logger.info("Graph is valid according to Havel-Hakimi")
        else:
            self._logger.warning("Graph is invalid according to Havel-Hakimi")
        return valid

    # --- Growth ----------------------------------------------------------------

    def add_protein(
        self, protein: str, neighbors: Iterable[Tuple[str, float]] = ()
    ) -> ProteinAddition:
        """Add a protein and its outgoing interactions.

        Edges that the graph refuses are reported in ``rejected`` and do
        not abort the addition. The whole addition is first applied to a
        copy; the owned graph only changes if that copy still passes the
        degree-sequence check.

        Raises:
            ValueError: If protein is blank.
            DegreeConstraintError: If the addition breaks degree constraints.
        """
        name = protein.strip()
        if not name:
            raise ValueError("Enter a protein name")

        candidate = self.graph.copy()
        candidate.add_vertex(name)
        added, rejected = self._apply_edges(candidate, name, neighbors)

        if not candidate.is_valid_digraph():
            self._logger.warning(
                "Protein addition rejected",
                extra={"protein": name, "edges": len(added)},
            )
            raise DegreeConstraintError(
                "Adding this protein breaks degree sequence constraints!",
                protein=name,
            )

        self.graph.add_vertex(name)
        for neighbor, weight in added:
            self.graph.add_edge(name, neighbor, weight)

        self._logger.info(
            "Protein added",
            extra={"protein": name, "edges": len(added), "rejected": len(rejected)},
        )
        return ProteinAddition(
            protein=name,
            added=tuple(neighbor for neighbor, _ in added),
            rejected=tuple(rejected),
        )

    @staticmethod
    def _apply_edges(
        graph: DirectedGraph,
        source: str,
        neighbors: Iterable[Tuple[str, float]],
    ) -> Tuple[Sequence[Tuple[str, float]], Sequence[str]]:
        added: List[Tuple[str, float]] = []
        rejected: List[str] = []
        for neighbor, weight in neighbors:
            try:
                graph.add_edge(source, neighbor, weight)
            except (InvalidEdgeError, InvalidWeightError) as e:
                rejected.append(f"{source} -> {neighbor}: {e.message}")
            else:
                added.append((neighbor, weight))
        return added, rejected
