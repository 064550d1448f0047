# src/coordshape/presentation/cli/measure_shapes.py

"""
Command-line interface for ranking reference polyhedra by shape measure.

The input file holds one ligand position per line as three whitespace
separated numbers; lines starting with '#' are ignored.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

import numpy as np
import pandas as pd

from ...core.domain.implementations.smart_alignment_advisor import SmartAlignmentAdvisor
from ...core.domain.models.exceptions import ShapeInputError
from ...core.domain.models.geometry_match import GeometryMatch
from ...core.domain.models.search_mode import SearchMode
from ...core.services.quality_metrics_service import quality_metrics
from ...core.services.shape_analysis_service import ShapeAnalysisService
from ...infrastructure.parallel.shape_worker_pool import ShapeWorkerPool
from ...infrastructure.repositories.geometry_repository import ReferenceGeometryRepository

RESULT_COLUMNS = ["code", "name", "point_group", "measure", "approximate"]


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Configure logging."""
    handlers: List[logging.Handler] = [
        logging.StreamHandler() if verbose else logging.NullHandler()
    ]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=logging.INFO if verbose else logging.ERROR,
        format="%(asctime)s - %(levelname)s - %(message)s",
        handlers=handlers,
        force=True,
    )


def setup_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Rank ideal coordination polyhedra by continuous shape measure"
    )
    parser.add_argument("input_file", help="Text file with one ligand position per line")
    parser.add_argument(
        "--center",
        type=float,
        nargs=3,
        metavar=("X", "Y", "Z"),
        help="Position of the central atom (default: origin)",
    )
    parser.add_argument(
        "--mode",
        choices=[mode.value for mode in SearchMode],
        default=SearchMode.DEFAULT.value,
        help="Search effort level",
    )
    parser.add_argument("--seed", type=int, help="Random seed for reproducible results")
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Number of worker processes (1 runs in-process)",
    )
    parser.add_argument(
        "--geometries", nargs="+", metavar="CODE", help="Only compare these SHAPE codes"
    )
    parser.add_argument("--top", type=int, help="Show only the best N geometries")
    parser.add_argument("--output", help="Write the ranking to this CSV file")
    parser.add_argument(
        "--no-smart-alignment",
        action="store_true",
        help="Do not seed the search with geometry-derived rotations",
    )
    parser.add_argument(
        "--flexible",
        action="store_true",
        help="Also report the flexible measure of the best match",
    )
    parser.add_argument("--log-file", help="Also write log messages to this file")
    parser.add_argument("--verbose", action="store_true", help="Show detailed output")
    return parser


def load_ligand_positions(path: str) -> np.ndarray:
    """Read ligand coordinates from a whitespace separated text file."""
    return np.atleast_2d(np.loadtxt(path, dtype=float, comments="#"))


def matches_to_frame(matches: List[GeometryMatch]) -> pd.DataFrame:
    """Tabulate ranked matches."""
    rows = [
        {
            "code": match.geometry.code,
            "name": match.geometry.name,
            "point_group": match.geometry.point_group,
            "measure": match.measure,
            "approximate": match.result.approximate,
        }
        for match in matches
    ]
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the shape measure CLI."""
    parser = setup_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose, args.log_file)

    repository = ReferenceGeometryRepository()
    mode = SearchMode(args.mode)
    advisor = None if args.no_smart_alignment else SmartAlignmentAdvisor()
    service = ShapeAnalysisService(repository, mode=mode, advisor=advisor)

    try:
        ligands = load_ligand_positions(args.input_file)
        center = np.array(args.center) if args.center else None

        if args.workers > 1:
            actual = service.prepare_points(ligands, center)
            geometries = service.candidate_geometries(len(ligands), args.geometries)
            with ShapeWorkerPool(args.workers, mode=mode, advisor=advisor) as pool:
                matches = pool.rank(
                    actual, geometries, seed=args.seed, show_progress=args.verbose
                )
        else:
            matches = service.rank(
                ligands, center=center, codes=args.geometries, seed=args.seed
            )
    except (ShapeInputError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if not matches:
        print(f"No reference geometries for coordination number {len(ligands)}")
        return 1

    table = matches_to_frame(matches)
    if args.output:
        table.to_csv(args.output, index=False)

    shown = table.head(args.top) if args.top else table
    print(shown.to_string(index=False, float_format=lambda v: f"{v:.4f}"))

    best = matches[0]
    metrics = quality_metrics(ligands, best.geometry, best.measure, center)
    print(
        f"\nBest match: {best.geometry.code} ({best.geometry.name}), "
        f"CShM = {best.measure:.4f}, quality score = {metrics.quality_score:.1f}"
    )
    if args.flexible:
        flexible = service.measure_flexible(
            ligands, best.geometry, center, rng=np.random.default_rng(args.seed)
        )
        print(
            f"Flexible CShM = {flexible.measure:.4f} ({flexible.description}, "
            f"distortion {flexible.distortion:.1f}, {flexible.category.value})"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
