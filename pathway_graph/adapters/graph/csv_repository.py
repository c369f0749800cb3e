"""CSV-backed interaction repository and drug lookup.

Expected files (see GraphConfig):
- interactions.csv: ``source,target[,weight]``
- drug_targets.csv: ``drug,target``
- drug_destinations.csv: ``target,destination``
"""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional

from ...config import GraphConfig, get_config
from ...domain.errors import GraphError, InvalidEdgeError, InvalidWeightError
from ...graph.digraph import DirectedGraph


def _normalize_drug(drug: str) -> str:
    return drug.strip().lower()


@dataclass
class CSVInteractionRepository:
    """Interaction repository that loads from a CSV file.

    This adapter implements InteractionRepositoryPort. Every call to
    ``load`` builds a new graph; the caller owns it.

    Attributes:
        config: Graph configuration (paths, file names)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> DirectedGraph:
        """Build the interaction graph.

        Rejected edges (self-loops, duplicates, bad weights) are logged
        and skipped so one bad row does not abort the load.

        Returns:
            A freshly built graph.

        Raises:
            GraphError: If the file cannot be read or lacks required columns.
        """
        path = self.config.interactions_path
        self._logger.debug("Loading interactions", extra={"path": str(path)})

        try:
            graph, skipped = self._load_graph_from_csv(path)
        except (OSError, csv.Error, UnicodeDecodeError) as e:
            raise GraphError(
                f"Failed to load interactions: {e}",
                file_path=str(path),
                cause=e,
            )

        self._logger.info(
            "Graph loaded",
            extra={
                "vertices": len(graph),
                "edges": graph.edge_count,
                "skipped_rows": skipped,
            },
        )
        return graph

    def _load_graph_from_csv(self, path: Path) -> tuple[DirectedGraph, int]:
        graph = DirectedGraph()
        skipped = 0

        with path.open(newline="", encoding="utf-8") as f:
            reader = csv.DictReader(f)
            missing = {"source", "target"} - set(reader.fieldnames or ())
            if missing:
                raise GraphError(
                    f"Interactions file is missing columns: {sorted(missing)}",
                    file_path=str(path),
                )

            for line_no, row in enumerate(reader, start=2):
                source = (row.get("source") or "").strip()
                target = (row.get("target") or "").strip()
                weight_str = (row.get("weight") or "").strip()

                if not source or not target:
                    self._logger.warning(
                        "Skipping interaction with empty endpoint",
                        extra={"line": line_no},
                    )
                    skipped += 1
                    continue

                try:
                    weight = float(weight_str) if weight_str else 1.0
                except ValueError:
                    self._logger.warning(
                        "Skipping interaction with unparsable weight",
                        extra={"line": line_no, "weight": weight_str},
                    )
                    skipped += 1
                    continue

                try:
                    graph.add_edge(source, target, weight)
                except (InvalidEdgeError, InvalidWeightError) as e:
                    self._logger.warning(
                        e.message,
                        extra={"line": line_no, "source": source, "target": target},
                    )
                    skipped += 1

        return graph, skipped


@dataclass
class CSVDrugLookup:
    """Drug lookup tables loaded lazily from CSV.

    This adapter implements DrugLookupPort. A missing file yields an
    empty table and a warning rather than an error.
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    _targets: Optional[Dict[str, str]] = field(default=None, repr=False)
    _destinations: Optional[Dict[str, str]] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def target_for(self, drug: str) -> Optional[str]:
        if self._targets is None:
            self._targets = {
                _normalize_drug(k): v
                for k, v in self._load_table(
                    self.config.drug_targets_path, "drug", "target"
                ).items()
            }
        return self._targets.get(_normalize_drug(drug))

    def destination_for(self, target: str) -> Optional[str]:
        if self._destinations is None:
            self._destinations = self._load_table(
                self.config.drug_destinations_path, "target", "destination"
            )
        return self._destinations.get(target)

    def _load_table(self, path: Path, key_col: str, value_col: str) -> Dict[str, str]:
        """Load a two-column lookup, skipping rows with blank cells."""
        table: Dict[str, str] = {}
        try:
            with path.open(newline="", encoding="utf-8") as f:
                for row in csv.DictReader(f):
                    key = (row.get(key_col) or "").strip()
                    value = (row.get(value_col) or "").strip()
                    if key and value:
                        table[key] = value
        except (OSError, csv.Error, UnicodeDecodeError) as e:
            self._logger.warning(
                "Failed to load lookup table",
                extra={"path": str(path), "error": str(e)},
            )
            return {}

        self._logger.debug(
            "Lookup table loaded", extra={"path": str(path), "entries": len(table)}
        )
        return table

    def clear_cache(self) -> None:
        """Drop loaded tables so the next lookup rereads the files."""
        self._targets = None
        self._destinations = None
