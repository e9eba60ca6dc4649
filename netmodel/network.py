"""Network topology model with Link and Network classes."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, List, Sequence, Tuple

from netmodel.logging import get_logger

logger = get_logger(__name__)

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

#: Outgoing arc as (link_id, end node index, weight).
Arc = Tuple[int, int, int]


def parse_non_negative_int(value: object, field_name: str) -> int:
    """Parse a table cell as a non-negative integer.

    Args:
        value: Raw cell value (usually a string).
        field_name: Column name used in the error message.

    Returns:
        The parsed integer.

    Raises:
        ValueError: If the value is not an integer or is negative.
    """
    if isinstance(value, bool):
        raise ValueError(f"Invalid {field_name} '{value}': expected an integer.")
    if isinstance(value, int):
        parsed = value
    else:
        text = str(value).strip()
        if not _INT_PATTERN.fullmatch(text):
            raise ValueError(f"Invalid {field_name} '{value}': expected an integer.")
        parsed = int(text)
    if parsed < 0:
        raise ValueError(f"Invalid {field_name} '{value}': must be non-negative.")
    return parsed


@dataclass(frozen=True, slots=True)
class Link:
    """Represents a directed link between two nodes in the network.

    Attributes:
        link_id (int): Zero-based position of the link in the input order.
        start (str): Name of the start node.
        end (str): Name of the end node.
        capacity (int): Link capacity. Carried through but not used for routing.
        weight (int): Link cost used by shortest-path routing.
    """

    link_id: int
    start: str
    end: str
    capacity: int = 0
    weight: int = 1

    def __post_init__(self) -> None:
        if self.link_id < 0:
            raise ValueError(f"Link id must be non-negative, got {self.link_id}.")
        if self.capacity < 0:
            raise ValueError(
                f"Link {self.link_id} ({self.start}->{self.end}) has negative capacity."
            )
        if self.weight < 0:
            raise ValueError(
                f"Link {self.link_id} ({self.start}->{self.end}) has negative weight."
            )

    def touches(self, node: str) -> bool:
        """True if node is either endpoint of this link."""
        return node == self.start or node == self.end


class Network:
    """An immutable, ordered collection of directed links.

    Nodes are implicit: the node set is the union of all link endpoints.
    Node names are interned to dense indices in order of first appearance
    so that the shortest-path engine can use list-backed state.

    Attributes:
        links (Tuple[Link, ...]): All links, indexed by link_id.
        nodes (Tuple[str, ...]): Node names in interning order.
    """

    __slots__ = (
        "_links",
        "_nodes",
        "_node_index",
        "_out_links",
        "_out_arcs",
        "_start_index",
    )

    def __init__(self, links: Iterable[Link] = ()) -> None:
        """Build the network and its adjacency.

        Args:
            links: Links in input order. Each link_id must equal its position.

        Raises:
            ValueError: If a link_id does not match its position.
        """
        self._links: Tuple[Link, ...] = tuple(links)
        self._nodes: List[str] = []
        self._node_index: Dict[str, int] = {}
        out_links: List[List[Link]] = []
        out_arcs: List[List[Arc]] = []
        start_index: List[int] = []

        for position, link in enumerate(self._links):
            if link.link_id != position:
                raise ValueError(
                    f"Link id {link.link_id} does not match its position {position}."
                )
            for node in (link.start, link.end):
                if node not in self._node_index:
                    self._node_index[node] = len(self._nodes)
                    self._nodes.append(node)
                    out_links.append([])
                    out_arcs.append([])
            start_idx = self._node_index[link.start]
            out_links[start_idx].append(link)
            out_arcs[start_idx].append(
                (link.link_id, self._node_index[link.end], link.weight)
            )
            start_index.append(start_idx)

        self._out_links: Tuple[Tuple[Link, ...], ...] = tuple(
            tuple(node_links) for node_links in out_links
        )
        self._out_arcs: Tuple[Tuple[Arc, ...], ...] = tuple(
            tuple(node_arcs) for node_arcs in out_arcs
        )
        self._start_index: Tuple[int, ...] = tuple(start_index)
        logger.debug(
            f"Built network with {len(self._nodes)} nodes and {len(self._links)} links"
        )

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[object]]) -> Network:
        """Build a network from (start, end, capacity, weight) rows.

        Link ids are assigned from the row position.

        Raises:
            ValueError: If a row is short or a numeric field is invalid.
        """
        links = []
        for link_id, row in enumerate(rows):
            if len(row) < 4:
                raise ValueError(
                    f"Row {link_id + 1} has {len(row)} columns, expected 4 "
                    "(start, end, capacity, weight)."
                )
            start, end, capacity, weight = row[:4]
            try:
                link = Link(
                    link_id=link_id,
                    start=str(start),
                    end=str(end),
                    capacity=parse_non_negative_int(capacity, "capacity"),
                    weight=parse_non_negative_int(weight, "weight"),
                )
            except ValueError as exc:
                raise ValueError(f"Row {link_id + 1}: {exc}") from exc
            links.append(link)
        return cls(links)

    @property
    def links(self) -> Tuple[Link, ...]:
        return self._links

    @property
    def nodes(self) -> Tuple[str, ...]:
        return tuple(self._nodes)

    def __len__(self) -> int:
        return len(self._links)

    def __iter__(self) -> Iterator[Link]:
        return iter(self._links)

    def __repr__(self) -> str:
        return f"Network(nodes={len(self._nodes)}, links={len(self._links)})"

    def get_link(self, link_id: int) -> Link:
        """Return the link with the given id.

        Raises:
            KeyError: If no such link exists.
        """
        if not 0 <= link_id < len(self._links):
            raise KeyError(f"Link id {link_id} does not exist.")
        return self._links[link_id]

    def has_node(self, node: str) -> bool:
        return node in self._node_index

    def node_index(self, node: str) -> int:
        """Return the dense index of a node.

        Raises:
            KeyError: If the node is not an endpoint of any link.
        """
        try:
            return self._node_index[node]
        except KeyError:
            raise KeyError(f"Node '{node}' is not in the network.") from None

    def out_links(self, node: str) -> Tuple[Link, ...]:
        """Return links starting at node in input order (empty if unknown)."""
        idx = self._node_index.get(node)
        if idx is None:
            return ()
        return self._out_links[idx]

    def out_arcs(self, idx: int) -> Tuple[Arc, ...]:
        """Return (link_id, end_index, weight) for links leaving node idx."""
        return self._out_arcs[idx]

    def start_index(self, link_id: int) -> int:
        """Return the dense index of the start node of a link."""
        return self._start_index[link_id]

    def total_capacity(self) -> int:
        return sum(link.capacity for link in self._links)
