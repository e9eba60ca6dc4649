"""Shared fixtures: small networks and a CSV writer for loader/CLI tests."""

from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Sequence

import pytest

from netmodel.network import Network
from netmodel.traffic_demand import TrafficDemand


@pytest.fixture
def chain():
    #  A ──1──► B ──1──► C ──1──► D
    return Network.from_rows(
        [
            ("A", "B", 10, 1),
            ("B", "C", 10, 1),
            ("C", "D", 10, 1),
        ]
    )


@pytest.fixture
def two_paths():
    #      [1]     [1]
    #   ┌───►B──────┐
    #   │           ▼
    #   A           D
    #   │           ▲
    #   └───►C──────┘
    #      [5]     [1]
    return Network.from_rows(
        [
            ("A", "B", 10, 1),
            ("A", "C", 10, 5),
            ("B", "D", 10, 1),
            ("C", "D", 10, 1),
        ]
    )


@pytest.fixture
def parallel():
    # Two identical A->B links
    return Network.from_rows([("A", "B", 10, 1), ("A", "B", 10, 1)])


@pytest.fixture
def mesh():
    # Mixed weights, parallel links, a zero-weight link and a self-loop.
    return Network.from_rows(
        [
            ("A", "B", 100, 4),
            ("A", "C", 100, 1),
            ("C", "B", 100, 1),
            ("B", "D", 100, 1),
            ("C", "D", 100, 5),
            ("D", "E", 100, 0),
            ("E", "A", 100, 2),
            ("B", "D", 100, 1),
            ("C", "C", 100, 0),
            ("E", "F", 100, 3),
            ("B", "F", 100, 9),
        ]
    )


@pytest.fixture
def demands_s5():
    return [
        TrafficDemand("A", "C", 3),
        TrafficDemand("A", "C", 2),
        TrafficDemand("A", "B", 5),
    ]


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str, Iterable[Sequence[object]]], Path]:
    """Write rows as a headerless comma separated file under tmp_path."""

    def _write(name: str, rows: Iterable[Sequence[object]]) -> Path:
        path = tmp_path / name
        lines = [",".join(str(cell) for cell in row) for row in rows]
        path.write_text("".join(line + "\n" for line in lines))
        return path

    return _write
