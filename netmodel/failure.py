"""Worst-case failure impact: demands touching the endpoints of each link.

A demand is flagged for a link when its source or destination is either
endpoint of that link. Whether the demand's path actually crosses the link,
or could be rerouted around it, is not evaluated.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Tuple

from netmodel.lib.algorithms.base import LinkID, NodeID
from netmodel.network import Link, Network
from netmodel.traffic_demand import TrafficDemand


@dataclass(frozen=True, slots=True)
class FailureImpact:
    """One demand potentially affected by the failure of one link.

    Attributes:
        link_id (int): Id of the failed link.
        link_start (str): Start node of the failed link.
        link_end (str): End node of the failed link.
        source (str): Source node of the affected demand.
        destination (str): Destination node of the affected demand.
    """

    link_id: LinkID
    link_start: NodeID
    link_end: NodeID
    source: NodeID
    destination: NodeID

    def as_row(self) -> Tuple[NodeID, NodeID, NodeID, NodeID]:
        return (self.link_start, self.link_end, self.source, self.destination)


def affected_demands(
    link: Link, demands: Sequence[TrafficDemand]
) -> List[TrafficDemand]:
    """Return demands with an endpoint on either end of link, in input order."""
    return [
        demand
        for demand in demands
        if link.touches(demand.source) or link.touches(demand.destination)
    ]


def worst_case_failure(
    network: Network, demands: Sequence[TrafficDemand]
) -> Iterator[FailureImpact]:
    """Yield every (link, demand) pair sharing an endpoint.

    Links are visited in input order, and demands in input order per link.
    """
    for link in network:
        for demand in affected_demands(link, demands):
            yield FailureImpact(
                link_id=link.link_id,
                link_start=link.start,
                link_end=link.end,
                source=demand.source,
                destination=demand.destination,
            )


def failure_impact_counts(impacts: Iterable[FailureImpact]) -> Counter:
    """Count affected demands per link id from already enumerated impacts.

    Links without impact are absent. Ties in most_common() keep link order.
    """
    return Counter(impact.link_id for impact in impacts)
