from heapq import heappop, heappush
from typing import Dict, List, Optional, Tuple

from netmodel.lib.algorithms.base import (
    NO_PRED,
    Cost,
    LinkID,
    NodeID,
    PathList,
    QueueEntry,
)
from netmodel.network import Network


def _dijkstra(
    network: Network,
    src_idx: int,
    dst_idx: Optional[int] = None,
) -> Tuple[List[Optional[Cost]], List[Optional[LinkID]]]:
    """
    Single-path Dijkstra over the dense node indices of a Network.

    Relaxation is strict, so among equal-cost alternatives the first one
    discovered keeps the predecessor slot. Outgoing links are scanned in input
    order and equal-cost heap entries are popped in insertion order, which
    makes the result a deterministic function of the link order.

    Args:
        network: The network to search.
        src_idx: Dense index of the source node.
        dst_idx: Optional dense index of a destination node. The search stops
            as soon as the destination is settled.

    Returns:
        A tuple of (dist, pred) lists indexed by node index:
          - dist: Best known cost, or None where the node was not reached.
          - pred: Inbound link id on the best path, or None for the source
            and for unreached nodes.
    """
    node_count = len(network.nodes)
    dist: List[Optional[Cost]] = [None] * node_count
    pred: List[Optional[LinkID]] = [NO_PRED] * node_count

    dist[src_idx] = 0
    seq = 0
    min_pq: List[QueueEntry] = [(0, seq, src_idx)]

    while min_pq:
        current_cost, _, node_idx = heappop(min_pq)
        if node_idx == dst_idx:
            break
        if current_cost > dist[node_idx]:
            continue

        for link_id, neighbor_idx, weight in network.out_arcs(node_idx):
            new_cost = current_cost + weight
            best = dist[neighbor_idx]
            if best is None or new_cost < best:
                dist[neighbor_idx] = new_cost
                pred[neighbor_idx] = link_id
                seq += 1
                heappush(min_pq, (new_cost, seq, neighbor_idx))

    return dist, pred


def _resolve_path(
    network: Network, pred: List[Optional[LinkID]], dst_idx: int
) -> PathList:
    """Walk predecessor links back from dst_idx and return them source-first."""
    path: PathList = []
    link_id = pred[dst_idx]
    while link_id is not NO_PRED:
        path.append(link_id)
        link_id = pred[network.start_index(link_id)]
    path.reverse()
    return path


def shortest_path(
    network: Network, source: NodeID, destination: NodeID
) -> Optional[PathList]:
    """
    Find the minimum-weight directed path from source to destination.

    Args:
        network: The network to route over.
        source: Name of the source node.
        destination: Name of the destination node.

    Returns:
        The ordered list of link ids along the path. An empty list when
        source equals destination and the node exists. None when either node
        is absent or no directed path exists.
    """
    if not network.has_node(source) or not network.has_node(destination):
        return None

    src_idx = network.node_index(source)
    dst_idx = network.node_index(destination)
    dist, pred = _dijkstra(network, src_idx, dst_idx)
    if dist[dst_idx] is None:
        return None
    return _resolve_path(network, pred, dst_idx)


def spf(
    network: Network, src_node: NodeID
) -> Tuple[Dict[NodeID, Cost], Dict[NodeID, LinkID]]:
    """
    Compute shortest paths from a source node to every reachable node.

    Args:
        network: The network to search.
        src_node: The source node.

    Returns:
        A tuple of (costs, pred):
          - costs: Maps each reachable node to its minimal cost from src_node.
          - pred: Maps each reachable node other than src_node to the inbound
            link id on its shortest path.

    Raises:
        KeyError: If src_node does not exist in the network.
    """
    src_idx = network.node_index(src_node)
    dist, pred_idx = _dijkstra(network, src_idx)

    nodes = network.nodes
    costs: Dict[NodeID, Cost] = {}
    pred: Dict[NodeID, LinkID] = {}
    for idx, cost in enumerate(dist):
        if cost is None:
            continue
        costs[nodes[idx]] = cost
        if pred_idx[idx] is not NO_PRED:
            pred[nodes[idx]] = pred_idx[idx]
    return costs, pred


def path_cost(network: Network, path: PathList) -> Cost:
    """Sum of link weights along a path."""
    return sum(network.get_link(link_id).weight for link_id in path)


def path_nodes(network: Network, source: NodeID, path: PathList) -> List[NodeID]:
    """
    Return the node sequence visited by a path, starting at source.

    Raises:
        ValueError: If consecutive links do not chain.
    """
    nodes = [source]
    for link_id in path:
        link = network.get_link(link_id)
        if link.start != nodes[-1]:
            raise ValueError(
                f"Link {link_id} starts at '{link.start}', expected '{nodes[-1]}'."
            )
        nodes.append(link.end)
    return nodes
