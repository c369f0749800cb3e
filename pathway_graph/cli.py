"""Command line front-end for the pathway graph.

Examples:
    pathway-graph analyze aspirin --algorithm dijkstra
    pathway-graph centrality --top 5
    pathway-graph add-protein NEW1 --neighbors "TP53:2, MDM2"
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .config import AppConfig, GraphConfig, get_config
from .container import Container
from .domain.errors import PathwayGraphError
from .domain.models import Algorithm, PathwayReport
from .logging_config import configure_logging
from .services import PathwayAnalysisService, parse_neighbors

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathway-graph",
        description="Directed protein interaction analyses for drug targets",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory holding the interaction and lookup CSV files",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Override the configured log level",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    analyze = sub.add_parser("analyze", help="Run an analysis for a drug")
    analyze.add_argument("drug", help="Drug name (case-insensitive)")
    analyze.add_argument(
        "--algorithm",
        choices=[a.value for a in Algorithm],
        default=Algorithm.BFS.value,
        help="Analysis to run (default: bfs)",
    )

    sub.add_parser("validate", help="Check the degree-sequence constraints")

    centrality = sub.add_parser("centrality", help="Directed betweenness centrality")
    centrality.add_argument(
        "--top", type=int, default=None, help="Only show the N highest scores"
    )

    paths = sub.add_parser("paths", help="Enumerate every simple path")
    paths.add_argument("source")
    paths.add_argument("target")

    add = sub.add_parser("add-protein", help="Add a protein and its interactions")
    add.add_argument("name")
    add.add_argument(
        "--neighbors",
        default="",
        help='Comma-separated "protein:weight" list, weight defaults to 1',
    )

    return parser


def _format_report(report: PathwayReport) -> str:
    lines = [f"{report.algorithm.value} from {report.target} to {report.destination}:"]
    if report.paths:
        lines.extend(" -> ".join(p) for p in report.paths)
    elif report.path:
        lines.append(" -> ".join(report.path))
    else:
        lines.append(f"No path exists from {report.target} to {report.destination}")
    lines.extend(f"  {key}: {value}" for key, value in report.stats.items())
    return "\n".join(lines)


def _run(args: argparse.Namespace, service: PathwayAnalysisService) -> int:
    if args.command == "analyze":
        report = service.analyze(args.drug, Algorithm(args.algorithm))
        print(_format_report(report))
        return 0

    if args.command == "validate":
        valid = service.validate()
        verdict = "valid" if valid else "invalid"
        print(f"Graph is {verdict} according to Havel-Hakimi.")
        return 0 if valid else 1

    if args.command == "centrality":
        for protein, score in service.centrality().ranked(args.top):
            print(f"{protein}\t{score:.2f}")
        return 0

    if args.command == "paths":
        found = service.all_paths(args.source, args.target)
        for path in found:
            print(" -> ".join(path))
        print(f"{len(found)} path(s)")
        return 0

    # add-protein
    result = service.add_protein(args.name, parse_neighbors(args.neighbors))
    for reason in result.rejected:
        print(f"Rejected {reason}", file=sys.stderr)
    print(f"Protein {result.protein} added successfully!")
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = get_config()
    if args.data_dir is not None:
        config = AppConfig(
            graph=GraphConfig(data_dir=args.data_dir),
            analysis=config.analysis,
            observability=config.observability,
        )
    configure_logging(config.observability, level=args.log_level)

    container = Container.create_default(config)
    try:
        service = container.resolve(PathwayAnalysisService)
        return _run(args, service)
    except PathwayGraphError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
