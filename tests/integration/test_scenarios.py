"""End-to-end scenarios: input tables in, both report files out."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from netmodel import cli

SCENARIOS = {
    "linear_chain": {
        "network": [("A", "B", 10, 1), ("B", "C", 10, 1), ("C", "D", 10, 1)],
        "traffic": [("A", "D", 5)],
        "utilization": "Link ID,Utilization\n0,5\n1,5\n2,5\n",
        "wcf": "A,B,A,D\nC,D,A,D\n",
    },
    "two_disjoint_paths": {
        "network": [
            ("A", "B", 10, 1),
            ("A", "C", 10, 5),
            ("B", "D", 10, 1),
            ("C", "D", 10, 1),
        ],
        "traffic": [("A", "D", 7)],
        "utilization": "Link ID,Utilization\n0,7\n2,7\n",
        "wcf": "A,B,A,D\nA,C,A,D\nB,D,A,D\nC,D,A,D\n",
    },
    "unreachable": {
        "network": [("A", "B", 10, 1)],
        "traffic": [("C", "D", 3)],
        "utilization": "Link ID,Utilization\n",
        "wcf": "",
    },
    "tie_break": {
        "network": [("A", "B", 10, 1), ("A", "B", 10, 1)],
        "traffic": [("A", "B", 4)],
        "utilization": "Link ID,Utilization\n0,4\n",
        "wcf": "A,B,A,B\nA,B,A,B\n",
    },
    "aggregation": {
        "network": [("A", "B", 10, 1), ("B", "C", 10, 1)],
        "traffic": [("A", "C", 3), ("A", "C", 2), ("A", "B", 5)],
        "utilization": "Link ID,Utilization\n0,10\n1,5\n",
        "wcf": (
            "A,B,A,C\nA,B,A,C\nA,B,A,B\n"
            "B,C,A,C\nB,C,A,C\nB,C,A,B\n"
        ),
    },
}


@pytest.mark.parametrize("name", sorted(SCENARIOS))
def test_scenario(name: str, tmp_path: Path, write_csv) -> None:
    scenario = SCENARIOS[name]
    network = write_csv("network.csv", scenario["network"])
    traffic = write_csv("traffic.csv", scenario["traffic"])
    out_dir = tmp_path / "reports"

    cli.main([str(network), str(traffic), "--output-dir", str(out_dir)])

    assert (out_dir / "utilization_report.csv").read_text() == scenario["utilization"]
    assert (out_dir / "wcf_report.csv").read_text() == scenario["wcf"]


def test_unreachable_scenario_logs_single_warning(tmp_path: Path, write_csv, caplog):
    network = write_csv("network.csv", SCENARIOS["unreachable"]["network"])
    traffic = write_csv("traffic.csv", SCENARIOS["unreachable"]["traffic"])
    with caplog.at_level(logging.WARNING, logger="netmodel"):
        cli.main([str(network), str(traffic), "-o", str(tmp_path)])
    warnings = [r for r in caplog.records if r.levelno == logging.WARNING]
    assert [r.getMessage() for r in warnings] == [
        "No path found for traffic demand from C to D."
    ]
