from dataclasses import dataclass
from typing import Iterable, Sequence

from netmodel.network import parse_non_negative_int


@dataclass(frozen=True, slots=True)
class TrafficDemand:
    """
    Represents a single point-to-point traffic demand.

    Attributes:
        source (str): Name of the source node.
        destination (str): Name of the destination node.
        volume (int): Traffic volume to route from source to destination.
    """

    source: str
    destination: str
    volume: int = 0

    def __post_init__(self) -> None:
        if self.volume < 0:
            raise ValueError(
                f"Demand {self.source}->{self.destination} has negative volume."
            )

    @classmethod
    def from_row(cls, row: Sequence[object]) -> "TrafficDemand":
        """
        Build a demand from a (source, destination, volume) row.

        Each field is stripped of surrounding whitespace before use.

        Raises:
            ValueError: If the row is short or the volume is invalid.
        """
        if len(row) < 3:
            raise ValueError(
                f"Demand row has {len(row)} columns, expected 3 "
                "(source, destination, volume)."
            )
        source, destination, volume = (str(value).strip() for value in row[:3])
        return cls(
            source=source,
            destination=destination,
            volume=parse_non_negative_int(volume, "volume"),
        )


def total_volume(demands: Iterable[TrafficDemand]) -> int:
    return sum(demand.volume for demand in demands)
