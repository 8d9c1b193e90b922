import pytest

from dsakit.shortest_path import Route, dijkstra, format_routes

EDGES = [(1, 2, 4), (1, 3, 1), (3, 2, 2), (2, 4, 5), (3, 4, 9)]


def _by_target(routes):
    return {route.target: route for route in routes}


def test_indirect_route_is_shorter():
    route = _by_target(dijkstra(4, EDGES, 1))[2]
    assert route.distance == 3
    assert route.path == (1, 3, 2)


def test_routes_cover_every_other_vertex():
    routes = dijkstra(4, EDGES, 1)
    assert [r.target for r in routes] == [2, 3, 4]


def test_distance_matches_path_weights():
    weights = {(s, d): w for s, d, w in EDGES}
    for route in dijkstra(4, EDGES, 1):
        assert route.path[0] == 1
        assert route.path[-1] == route.target
        total = sum(weights[pair] for pair in zip(route.path, route.path[1:]))
        assert total == route.distance


def test_no_shorter_than_direct_edge_bound():
    routes = _by_target(dijkstra(4, EDGES, 1))
    for s, d, w in EDGES:
        if s == 1:
            assert routes[d].distance <= w


def test_unreachable_vertex():
    routes = _by_target(dijkstra(3, [(1, 2, 4)], 1))
    assert routes[3].distance is None
    assert routes[3].path == ()
    assert not routes[3].reachable
    assert routes[2].reachable


def test_zero_weight_edge_is_absent():
    routes = dijkstra(2, [(1, 2, 0)], 1)
    assert routes[0].distance is None


def test_edges_are_directed():
    routes = _by_target(dijkstra(2, [(1, 2, 4)], 2))
    assert routes[1].distance is None


@pytest.mark.parametrize("edge", [(0, 1, 1), (1, 4, 1)])
def test_invalid_edge(edge):
    with pytest.raises(ValueError):
        dijkstra(3, [edge], 1)


@pytest.mark.parametrize("source", [0, 4])
def test_invalid_source(source):
    with pytest.raises(ValueError):
        dijkstra(3, [(1, 2, 1)], source)


def test_format_header_and_no_path():
    text = format_routes([Route(3, None, ())])
    lines = text.splitlines()
    assert lines[0] == "Node\tDistance\tPath"
    assert lines[1].endswith("\tNO PATH")
    assert "INF" in lines[1]
    assert text.endswith("\n")


def test_format_reachable_row():
    text = format_routes([Route(2, 5, (1, 2))])
    assert text.splitlines()[1] == "   2\t       5\t2<-1"


def test_format_lists_path_from_target():
    routes = dijkstra(4, EDGES, 1)
    row = format_routes(routes).splitlines()[1]
    assert row.split("\t")[-1].split("<-") == [str(v) for v in reversed(routes[0].path)]