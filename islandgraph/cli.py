"""Command-line interface for islandgraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

from islandgraph.logging import enable_trace_logging, get_logger, set_global_log_level
from islandgraph.scenario import Scenario
from islandgraph.utils.output_paths import ensure_parent_dir, results_path_for_run

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
    max_col_width: Optional[int] = None,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width
        max_col_width: Cells longer than this are clipped with "..."

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    def clip(val: Any) -> str:
        s = str(val)
        if max_col_width is not None and len(s) > max_col_width:
            return s[: max_col_width - 3] + "..."
        return s

    clipped_headers = [clip(h) for h in headers]
    clipped_rows = [[clip(item) for item in row] for row in rows]

    all_data = [clipped_headers] + clipped_rows
    col_widths = []
    for col_idx in range(len(clipped_headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(clipped_headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in clipped_rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_duration(seconds: float) -> str:
    if seconds < 1.0:
        return f"{seconds * 1000:.1f} ms"
    return f"{seconds:.2f} s"


def _inspect_scenario(path: Path) -> None:
    """Validate a scenario file and print its islands and settings."""
    logger.info(f"Inspecting scenario from: {path}")

    try:
        scenario = Scenario.from_yaml(path.read_text())
    except FileNotFoundError:
        logger.error(f"Scenario file not found: {path}")
        print(f"❌ ERROR: Scenario file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to inspect scenario: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to inspect scenario: {type(e).__name__}: {e}")
        sys.exit(1)

    network = scenario.network
    print("\n" + "=" * 60)
    print("ISLANDGRAPH SCENARIO INSPECTION")
    print("=" * 60)
    print(f"Islands: {len(network)}")
    print(f"Start:   {scenario.start}")

    print("\nSettings:")
    for key, value in scenario.config.to_dict().items():
        print(f"   {key}: {value}")

    rows = []
    for node in network.nodes:
        edges = network.edges_of(node)
        population = network.population(node)
        rows.append(
            [
                str(node),
                "-" if population is None else str(population),
                str(len(edges)),
                ", ".join(f"{e.target}({e.total_cost})" for e in edges) or "-",
            ]
        )
    table = _format_table(
        ["Island", "Population", "Out", "Edges (total cost)"], rows, max_col_width=60
    )
    if table:
        print("\nIslands:")
        print(table)
    logger.info("✓ Scenario validated and loaded successfully")


def _run_scenario(
    path: Path,
    start: Optional[str],
    results_override: Optional[Path],
    no_results: bool,
    stdout: bool,
    output_dir: Optional[Path] = None,
) -> None:
    """Run a scenario file and export results as JSON by default.

    Args:
        path: Scenario YAML file.
        start: Optional start island overriding the scenario's ``start``.
        results_override: Optional explicit path for the results JSON.
        no_results: Whether to disable results file generation.
        stdout: Whether to also print results to stdout.
        output_dir: Optional directory for generated artifacts.
    """
    logger.info(f"Loading scenario from: {path}")
    _start_time = perf_counter()

    try:
        scenario = Scenario.from_yaml(path.read_text())

        logger.info("Starting scenario execution")
        results: Dict[str, Any] = scenario.run(start=start)
        logger.info("Scenario execution completed successfully")
        print("✅ Scenario execution completed")

        json_str = json.dumps(results, indent=2, default=str)
        if not no_results:
            effective_output = results_path_for_run(
                scenario_path=path,
                output_dir=output_dir,
                results_override=results_override,
            )
            ensure_parent_dir(effective_output)
            logger.info(f"Writing results to: {effective_output}")
            effective_output.write_text(json_str)
            print(f"✅ Results written to: {effective_output}")

        if stdout:
            print(json_str)

        _elapsed = perf_counter() - _start_time
        logger.info(
            f"Scenario run completed successfully in {_format_duration(_elapsed)}"
        )

    except FileNotFoundError:
        logger.error(f"Scenario file not found: {path}")
        print(f"❌ ERROR: Scenario file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to run scenario: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to run scenario: {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``islandgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="islandgraph",
        description="Explore island networks under a travel budget.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress console output (logs only)"
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Log every visit and planting made by the traversal algorithms",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,inspect}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Run a scenario")
    run_parser.add_argument("scenario", type=Path, help="Path to scenario YAML")
    run_parser.add_argument(
        "--start", "-s", default=None, help="Start island (overrides the scenario)"
    )
    run_parser.add_argument(
        "--results",
        "-r",
        type=Path,
        default=None,
        help=(
            "Export results to JSON file (default: <scenario_name>.results.json;"
            " placed under --output when provided)"
        ),
    )
    run_parser.add_argument(
        "--no-results",
        action="store_true",
        help="Disable results file generation",
    )
    run_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print results to stdout",
    )
    run_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output directory for generated artifacts",
    )

    inspect_parser = subparsers.add_parser(
        "inspect", help="Inspect and validate a scenario"
    )
    inspect_parser.add_argument("scenario", type=Path, help="Path to scenario YAML")

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        set_global_log_level(logging.DEBUG)
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        set_global_log_level(logging.INFO)
    if args.trace:
        enable_trace_logging()

    if args.command == "run":
        _run_scenario(
            path=args.scenario,
            start=args.start,
            results_override=args.results,
            no_results=args.no_results,
            stdout=args.stdout,
            output_dir=args.output,
        )
    elif args.command == "inspect":
        _inspect_scenario(args.scenario)


if __name__ == "__main__":
    main()
