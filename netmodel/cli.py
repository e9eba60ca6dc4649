"""Command-line interface for netmodel."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import List, Optional

from netmodel.config import REPORT_CONFIG
from netmodel.failure import failure_impact_counts, worst_case_failure
from netmodel.io import (
    load_network,
    load_traffic,
    write_utilization_report,
    write_wcf_report,
)
from netmodel.logging import get_logger, level_for_flags, set_global_log_level
from netmodel.traffic_demand import total_volume
from netmodel.utilization import compute_utilization

logger = get_logger(__name__)


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


def _run_model(
    network_path: Path,
    traffic_path: Path,
    output_dir: Optional[Path] = None,
) -> None:
    """Load both tables, then write the utilization and WCF reports.

    Args:
        network_path: Network table (start,end,capacity,weight).
        traffic_path: Traffic table (source,destination,volume).
        output_dir: Directory for the reports. Defaults to the current directory.
    """
    _start_time = perf_counter()

    try:
        network = load_network(network_path)
        demands = load_traffic(traffic_path)
        logger.info(
            f"Modeling {len(demands)} demands (total volume {total_volume(demands)}) "
            f"over {len(network)} links (total capacity {network.total_capacity()})"
        )

        utilization = compute_utilization(network, demands)
        write_utilization_report(
            REPORT_CONFIG.utilization_path(output_dir), utilization
        )
        print("Utilization report generated successfully.")

        impacts = list(worst_case_failure(network, demands))
        write_wcf_report(REPORT_CONFIG.wcf_path(output_dir), impacts)
        counts = failure_impact_counts(impacts)
        if counts:
            worst, affected = counts.most_common(1)[0]
            logger.info(
                f"{len(counts)} of {len(network)} links have failure impact; "
                f"link {worst} affects the most demands ({affected})"
            )
        print("Worst Case Failure report generated successfully.")

        _elapsed = perf_counter() - _start_time
        logger.info(f"Traffic model completed in {_format_duration(_elapsed)}")

    except FileNotFoundError as e:
        logger.error(f"Input file not found: {e.filename or e}")
        print(f"ERROR: Input file not found: {e.filename or e}")
        sys.exit(1)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to model traffic: {type(e).__name__}: {e}")
        print(f"ERROR: Failed to model traffic: {type(e).__name__}: {e}")
        sys.exit(1)


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``netmodel`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="netmodel",
        description=(
            "Route traffic demands over shortest paths and report link "
            "utilization and worst-case link failure impact."
        ),
    )
    parser.add_argument("network", type=Path, help="Path to the network CSV file")
    parser.add_argument("traffic", type=Path, help="Path to the traffic CSV file")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", "-q", action="store_true", help="Only log warnings and errors"
    )
    parser.add_argument(
        "--output-dir",
        "-o",
        type=Path,
        default=None,
        help="Directory for the report files (default: current directory)",
    )

    args = parser.parse_args(sys.argv[1:] if argv is None else argv)

    level = set_global_log_level(level_for_flags(args.verbose, args.quiet))
    logger.debug(f"Log level set to {logging.getLevelName(level)}")

    _run_model(args.network, args.traffic, output_dir=args.output_dir)


if __name__ == "__main__":
    main()
