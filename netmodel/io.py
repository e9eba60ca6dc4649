"""Reading network and traffic tables, writing utilization and WCF reports."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

import pandas as pd

from netmodel.config import REPORT_CONFIG, ReportConfig
from netmodel.failure import FailureImpact
from netmodel.logging import get_logger
from netmodel.network import Network
from netmodel.traffic_demand import TrafficDemand
from netmodel.utilization import UtilizationResult

logger = get_logger(__name__)

PathLike = Union[str, Path]

NETWORK_COLUMNS = ("start", "end", "capacity", "weight")
TRAFFIC_COLUMNS = ("source", "destination", "volume")
WCF_COLUMNS = ("link_start", "link_end", "source", "destination")


def _read_rows(
    path: PathLike,
    columns: Tuple[str, ...],
    has_header: bool,
    separator: str,
) -> List[List[str]]:
    """
    Read a delimited table as rows of strings.

    Every cell is kept as text; numeric conversion happens in the model layer.
    Blank lines are skipped and an empty file yields no rows.

    Args:
        path: File to read.
        columns: Expected leading column names (used for validation and messages).
        has_header: Whether the first row is a header to skip.
        separator: Field delimiter.

    Returns:
        One list of len(columns) strings per data row.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the table is malformed or a row is missing columns.
    """
    try:
        frame = pd.read_csv(
            path,
            sep=separator,
            header=0 if has_header else None,
            dtype=str,
            keep_default_na=False,
            na_filter=False,
            skip_blank_lines=True,
        )
    except pd.errors.EmptyDataError:
        return []
    except pd.errors.ParserError as exc:
        raise ValueError(f"Malformed table '{path}': {exc}") from exc

    rows: List[List[str]] = []
    expected = len(columns)
    for position, record in enumerate(frame.itertuples(index=False, name=None)):
        row_number = position + (2 if has_header else 1)
        cells = list(record[:expected])
        if len(cells) < expected or any(pd.isna(cell) for cell in cells):
            present = sum(1 for cell in cells if not pd.isna(cell))
            raise ValueError(
                f"{path}: row {row_number} has {present} columns, "
                f"expected {expected} ({', '.join(columns)})."
            )
        rows.append(cells)
    return rows


def load_network(path: PathLike, config: Optional[ReportConfig] = None) -> Network:
    """Load a network table: start,end,capacity,weight per row.

    The link id of each row is its zero-based position.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: On a short row or a non-integer/negative numeric field.
    """
    config = config or REPORT_CONFIG
    rows = _read_rows(
        path, NETWORK_COLUMNS, config.network_has_header, config.separator
    )
    try:
        network = Network.from_rows(rows)
    except ValueError as exc:
        raise ValueError(f"{path}: {exc}") from exc
    logger.info(
        f"Loaded network from {path}: {len(network.nodes)} nodes, {len(network)} links"
    )
    return network


def load_traffic(
    path: PathLike, config: Optional[ReportConfig] = None
) -> Tuple[TrafficDemand, ...]:
    """Load a traffic table: source,destination,volume per row.

    Fields are whitespace-stripped before use.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: On a short row or a non-integer/negative volume.
    """
    config = config or REPORT_CONFIG
    rows = _read_rows(
        path, TRAFFIC_COLUMNS, config.traffic_has_header, config.separator
    )
    demands = []
    for row_number, row in enumerate(rows, start=1):
        try:
            demands.append(TrafficDemand.from_row(row))
        except ValueError as exc:
            raise ValueError(f"{path}: row {row_number}: {exc}") from exc
    logger.info(f"Loaded {len(demands)} traffic demands from {path}")
    return tuple(demands)


def _prepare_output(path: PathLike) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    return out


def write_utilization_report(
    path: PathLike,
    result: UtilizationResult,
    config: Optional[ReportConfig] = None,
) -> int:
    """Write the utilization report, one row per link with routed volume.

    Rows are in ascending link id order under the configured header.

    Returns:
        Number of data rows written.
    """
    config = config or REPORT_CONFIG
    out = _prepare_output(path)
    frame = pd.DataFrame(list(result.items()), columns=list(config.utilization_header))
    frame.to_csv(out, sep=config.separator, index=False, lineterminator="\n")
    logger.info(f"Wrote utilization report with {len(frame)} rows to {out}")
    return len(frame)


def write_wcf_report(
    path: PathLike,
    impacts: Iterable[FailureImpact],
    config: Optional[ReportConfig] = None,
) -> int:
    """Write the worst-case failure report without a header row.

    Columns: link start, link end, demand source, demand destination.

    Returns:
        Number of rows written.
    """
    config = config or REPORT_CONFIG
    out = _prepare_output(path)
    frame = pd.DataFrame(
        [impact.as_row() for impact in impacts], columns=list(WCF_COLUMNS)
    )
    if frame.empty:
        out.write_text("")
    else:
        frame.to_csv(
            out, sep=config.separator, index=False, header=False, lineterminator="\n"
        )
    logger.info(f"Wrote WCF report with {len(frame)} rows to {out}")
    return len(frame)
