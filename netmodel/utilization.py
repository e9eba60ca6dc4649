"""Link utilization from shortest-path routed traffic demands."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Tuple

import pandas as pd

from netmodel.config import REPORT_CONFIG
from netmodel.lib.algorithms.base import LinkID, PathList
from netmodel.lib.algorithms.spf import path_cost, shortest_path
from netmodel.logging import get_logger
from netmodel.network import Network
from netmodel.traffic_demand import TrafficDemand

logger = get_logger(__name__)


@dataclass
class UtilizationResult:
    """Aggregated volume per link plus the routing outcome of every demand.

    Attributes:
        link_volume (List[int]): Routed volume indexed by link_id.
        routed (List[Tuple[TrafficDemand, PathList]]): Demands that found a
            path, with that path, in input order.
        unreachable (List[TrafficDemand]): Demands with no path, in input order.
    """

    link_volume: List[int]
    routed: List[Tuple[TrafficDemand, PathList]] = field(default_factory=list)
    unreachable: List[TrafficDemand] = field(default_factory=list)

    def items(self) -> Iterator[Tuple[LinkID, int]]:
        """Yield (link_id, volume) for links with non-zero volume, ascending id."""
        for link_id, volume in enumerate(self.link_volume):
            if volume:
                yield link_id, volume

    def as_dict(self) -> Dict[LinkID, int]:
        return dict(self.items())

    def total(self) -> int:
        return sum(self.link_volume)

    def to_dataframe(self) -> pd.DataFrame:
        """Return the report rows as a DataFrame with the report header."""
        columns = list(REPORT_CONFIG.utilization_header)
        return pd.DataFrame(list(self.items()), columns=columns)


def compute_utilization(
    network: Network, demands: Iterable[TrafficDemand]
) -> UtilizationResult:
    """Route every demand on its shortest path and sum volumes per link.

    Unreachable demands are logged as warnings and skipped.

    Args:
        network: The network to route over.
        demands: Demands in input order.

    Returns:
        UtilizationResult with a dense per-link accumulator.
    """
    result = UtilizationResult(link_volume=[0] * len(network))

    for demand in demands:
        path = shortest_path(network, demand.source, demand.destination)
        if path is None:
            logger.warning(
                f"No path found for traffic demand from {demand.source} "
                f"to {demand.destination}."
            )
            result.unreachable.append(demand)
            continue

        logger.debug(
            f"Routed {demand.source}->{demand.destination} volume={demand.volume} "
            f"over links {path} (cost {path_cost(network, path)})"
        )
        for link_id in path:
            result.link_volume[link_id] += demand.volume
        result.routed.append((demand, path))

    logger.info(
        f"Routed {len(result.routed)} demands, "
        f"{len(result.unreachable)} unreachable, "
        f"{sum(1 for _ in result.items())} links carry traffic"
    )
    return result
