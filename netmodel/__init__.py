"""netmodel: batch network traffic modeling.

Routes point-to-point traffic demands over shortest paths in a directed,
weighted network and reports per-link utilization and worst-case link
failure impact.

Primary API:
    load_network(), load_traffic() - Read the input tables
    compute_utilization() - Route demands and aggregate volume per link
    worst_case_failure() - Enumerate demands touching each link's endpoints
    shortest_path() - Single shortest path as a list of link ids

Example:
    from netmodel import Link, Network, TrafficDemand, compute_utilization

    net = Network([Link(0, "A", "B", capacity=10, weight=1)])
    result = compute_utilization(net, [TrafficDemand("A", "B", 5)])
    assert result.as_dict() == {0: 5}
"""

from __future__ import annotations

from netmodel import cli, logging
from netmodel.config import REPORT_CONFIG, ReportConfig
from netmodel.failure import FailureImpact, affected_demands, worst_case_failure
from netmodel.io import (
    load_network,
    load_traffic,
    write_utilization_report,
    write_wcf_report,
)
from netmodel.lib.algorithms.spf import shortest_path, spf
from netmodel.network import Link, Network
from netmodel.traffic_demand import TrafficDemand
from netmodel.utilization import UtilizationResult, compute_utilization

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Model
    "Link",
    "Network",
    "TrafficDemand",
    # Analysis
    "shortest_path",
    "spf",
    "compute_utilization",
    "UtilizationResult",
    "worst_case_failure",
    "affected_demands",
    "FailureImpact",
    # I/O
    "load_network",
    "load_traffic",
    "write_utilization_report",
    "write_wcf_report",
    # Configuration
    "ReportConfig",
    "REPORT_CONFIG",
    # Utilities
    "cli",
    "logging",
]
