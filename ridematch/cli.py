"""Command-line interface for ridematch."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, List, Optional

import yaml

from ridematch.generate import Bounds, generate_drivers_and_passengers
from ridematch.logging import get_logger, set_global_log_level
from ridematch.scenario import Scenario

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[str]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _format_cost(value: Any) -> str:
    """Return cost formatted with up to three decimals.

    Uses thousands separators, trims trailing zeros and the decimal point when
    not needed. Falls back to ``str(value)`` if the input cannot be parsed as a
    float.

    Examples:
        0.1 -> "0.1"; 10.0 -> "10"; 1234.567 -> "1,234.567".
    """
    try:
        v = float(value)
    except (TypeError, ValueError):
        return str(value)

    s = f"{v:,.3f}"
    if "." in s:
        s = s.rstrip("0").rstrip(".")
    return s


def _format_duration(seconds: float) -> str:
    """Return a concise human-readable duration string.

    Examples:
        0.123 -> "123.0 ms"; 1.234 -> "1.23 s"; 75.2 -> "1m 15.2s".
    """
    if seconds < 1.0:
        return f"{seconds * 1000.0:.1f} ms"
    if seconds < 60.0:
        return f"{seconds:.2f} s"
    minutes = int(seconds // 60)
    rem = seconds - minutes * 60
    return f"{minutes}m {rem:.1f}s"


def _results_path(scenario_path: Path, results_override: Optional[Path]) -> Path:
    if results_override is not None:
        return results_override
    return Path.cwd() / f"{scenario_path.stem}.results.json"


def _run_scenario(
    path: Path,
    results_override: Optional[Path],
    no_results: bool,
    stdout: bool,
) -> None:
    """Run a scenario file and export the report as JSON by default.

    Args:
        path: Scenario YAML file.
        results_override: Optional explicit path for the JSON report. When
            ``None``, defaults to ``<scenario_name>.results.json`` in the
            current directory.
        no_results: Whether to disable results file generation.
        stdout: Whether to also print the report to stdout.
    """
    logger.info(f"Loading scenario from: {path}")
    start_time = perf_counter()

    try:
        scenario = Scenario.from_yaml(path.read_text())
        report = scenario.run()

        json_str = json.dumps(report.to_dict(), indent=2)
        if not no_results:
            effective_output = _results_path(path, results_override)
            effective_output.parent.mkdir(parents=True, exist_ok=True)
            logger.info(f"Writing results to: {effective_output}")
            effective_output.write_text(json_str)
            print(f"✅ Results written to: {effective_output}")

        rows = [
            [a.source_id, a.target_id, _format_cost(a.cost)]
            for a in report.assignments
        ]
        if rows:
            print(_format_table(["Driver", "Passenger", "Cost"], rows))
        print(f"   Optimal total: {_format_cost(report.total_assigned_cost)}")
        print(f"   Naive total:   {_format_cost(report.total_naive_cost)}")
        print(f"   Savings:       {_format_cost(report.savings)}")
        print(
            f"   MST weight:    {_format_cost(report.total_mst_weight)}"
            f" ({len(report.mst_edges)} edges)"
        )

        if stdout:
            print(json_str)

        elapsed = perf_counter() - start_time
        logger.info(f"Scenario run completed successfully in {_format_duration(elapsed)}")

    except FileNotFoundError:
        logger.error(f"Scenario file not found: {path}")
        print(f"❌ ERROR: Scenario file not found: {path}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to run scenario: {type(e).__name__}: {e}")
        print(f"❌ ERROR: Failed to run scenario: {type(e).__name__}: {e}")
        sys.exit(1)


def _inspect_scenario(path: Path, detail: bool = False) -> None:
    """Validate a scenario and print its settings and nodes."""
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

    print("✅ Scenario is valid")
    print(f"   Metric: {scenario.config.metric_name}")
    print(f"   Cost per unit distance: {_format_cost(scenario.config.cost_per_unit_distance)}")
    print(f"   Seed: {scenario.seed}")
    print(f"   Drivers: {len(scenario.drivers)}")
    print(f"   Passengers: {len(scenario.passengers)}")

    if detail:
        rows = [
            [role, n.id, f"{n.lat:.6f}", f"{n.lng:.6f}"]
            for role, nodes in (
                ("driver", scenario.drivers),
                ("passenger", scenario.passengers),
            )
            for n in nodes
        ]
        if rows:
            print(_format_table(["Role", "ID", "Lat", "Lng"], rows))


def _generate_scenario(
    drivers: int,
    passengers: int,
    seed: Optional[int],
    metric: str,
    output: Optional[Path],
) -> None:
    """Write a scenario YAML with randomly placed drivers and passengers."""
    bounds = Bounds()
    driver_nodes, passenger_nodes = generate_drivers_and_passengers(
        drivers, passengers, bounds, seed
    )
    data: dict[str, Any] = {
        "metric": metric,
        "bounds": bounds.to_dict(),
        "drivers": [n.to_dict() for n in driver_nodes],
        "passengers": [n.to_dict() for n in passenger_nodes],
    }
    if seed is not None:
        data["seed"] = seed
    yaml_text = yaml.safe_dump(data, sort_keys=False)

    if output is None:
        print(yaml_text, end="")
        return
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(yaml_text)
    logger.info(f"Scenario written to: {output}")
    print(f"✅ Scenario written to: {output}")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``ridematch`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="ridematch",
        description="Match drivers to passengers and compare against a naive pairing.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{run,inspect,generate}",
        help="Available commands",
    )

    run_parser = subparsers.add_parser("run", help="Run a scenario")
    run_parser.add_argument("scenario", type=Path, help="Path to scenario YAML")
    run_parser.add_argument(
        "--results",
        "-r",
        type=Path,
        default=None,
        help="Export results to JSON file (default: <scenario_name>.results.json)",
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

    inspect_parser = subparsers.add_parser(
        "inspect", help="Inspect and validate a scenario"
    )
    inspect_parser.add_argument("scenario", type=Path, help="Path to scenario YAML")
    inspect_parser.add_argument(
        "--detail",
        "-d",
        action="store_true",
        help="Show the complete node table",
    )

    generate_parser = subparsers.add_parser(
        "generate", help="Generate a scenario with random drivers and passengers"
    )
    generate_parser.add_argument("--drivers", type=int, default=10)
    generate_parser.add_argument("--passengers", type=int, default=10)
    generate_parser.add_argument("--seed", type=int, default=None)
    generate_parser.add_argument(
        "--metric", choices=["euclidean", "haversine"], default="haversine"
    )
    generate_parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Write the scenario YAML here instead of stdout",
    )

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

    if args.command == "run":
        _run_scenario(
            path=args.scenario,
            results_override=args.results,
            no_results=args.no_results,
            stdout=args.stdout,
        )
    elif args.command == "inspect":
        _inspect_scenario(args.scenario, args.detail)
    elif args.command == "generate":
        if args.drivers < 0 or args.passengers < 0:
            parser.error("--drivers and --passengers must be non-negative")
        _generate_scenario(
            drivers=args.drivers,
            passengers=args.passengers,
            seed=args.seed,
            metric=args.metric,
            output=args.output,
        )


if __name__ == "__main__":
    main()
