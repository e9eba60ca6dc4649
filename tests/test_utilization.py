import logging

import pytest

from netmodel.network import Network
from netmodel.traffic_demand import TrafficDemand
from netmodel.utilization import UtilizationResult, compute_utilization


def test_linear_chain(chain):
    result = compute_utilization(chain, [TrafficDemand("A", "D", 5)])
    assert result.as_dict() == {0: 5, 1: 5, 2: 5}
    assert result.link_volume == [5, 5, 5]
    assert result.routed == [(TrafficDemand("A", "D", 5), [0, 1, 2])]
    assert result.unreachable == []


def test_two_disjoint_paths_prefers_cheaper(two_paths):
    result = compute_utilization(two_paths, [TrafficDemand("A", "D", 7)])
    assert result.as_dict() == {0: 7, 2: 7}


def test_unreachable_demand_warns(caplog):
    net = Network.from_rows([("A", "B", 10, 1)])
    demand = TrafficDemand("C", "D", 3)
    with caplog.at_level(logging.WARNING, logger="netmodel"):
        result = compute_utilization(net, [demand])
    assert result.as_dict() == {}
    assert result.unreachable == [demand]
    assert "No path found for traffic demand from C to D." in caplog.text


def test_parallel_tie_break(parallel):
    result = compute_utilization(parallel, [TrafficDemand("A", "B", 4)])
    assert result.as_dict() == {0: 4}


def test_aggregation(demands_s5):
    net = Network.from_rows([("A", "B", 10, 1), ("B", "C", 10, 1)])
    result = compute_utilization(net, demands_s5)
    assert result.as_dict() == {0: 10, 1: 5}


def test_empty_network_all_unreachable(demands_s5):
    result = compute_utilization(Network(), demands_s5)
    assert result.as_dict() == {}
    assert result.unreachable == demands_s5
    assert result.link_volume == []


def test_empty_demands(chain):
    result = compute_utilization(chain, [])
    assert result.as_dict() == {}
    assert result.total() == 0


def test_self_demand_contributes_nothing(chain):
    result = compute_utilization(chain, [TrafficDemand("B", "B", 9)])
    assert result.as_dict() == {}
    assert result.routed == [(TrafficDemand("B", "B", 9), [])]
    assert result.unreachable == []


def test_zero_volume_demand_is_routed_but_not_reported(chain):
    result = compute_utilization(chain, [TrafficDemand("A", "B", 0)])
    assert len(result.routed) == 1
    assert result.as_dict() == {}


def test_unreachable_does_not_stop_processing(chain):
    demands = [
        TrafficDemand("D", "A", 1),
        TrafficDemand("A", "C", 2),
    ]
    result = compute_utilization(chain, demands)
    assert result.as_dict() == {0: 2, 1: 2}
    assert result.unreachable == [demands[0]]


def test_conservation(mesh):
    demands = [
        TrafficDemand(source, destination, volume)
        for volume, (source, destination) in enumerate(
            [("A", "F"), ("C", "E"), ("E", "B"), ("F", "A"), ("B", "B"), ("D", "C")],
            start=1,
        )
    ]
    result = compute_utilization(mesh, demands)
    expected = sum(len(path) * demand.volume for demand, path in result.routed)
    assert result.total() == expected
    assert sum(volume for _, volume in result.items()) == expected
    # F has no outgoing links
    assert result.unreachable == [TrafficDemand("F", "A", 4)]


def test_items_ascending_link_id():
    result = UtilizationResult(link_volume=[0, 3, 0, 1])
    assert list(result.items()) == [(1, 3), (3, 1)]


def test_to_dataframe(chain):
    frame = compute_utilization(chain, [TrafficDemand("A", "C", 2)]).to_dataframe()
    assert list(frame.columns) == ["Link ID", "Utilization"]
    assert frame.values.tolist() == [[0, 2], [1, 2]]


def test_to_dataframe_empty(chain):
    frame = compute_utilization(chain, []).to_dataframe()
    assert frame.empty
    assert list(frame.columns) == ["Link ID", "Utilization"]


@pytest.mark.parametrize("repeat", range(3))
def test_deterministic(mesh, repeat):
    demands = [TrafficDemand(s, d, 1) for s in mesh.nodes for d in mesh.nodes]
    first = compute_utilization(mesh, demands)
    second = compute_utilization(mesh, demands)
    assert first.link_volume == second.link_volume
    assert first.routed == second.routed
