import pytest

from ant_farm import Graph, StructuralError


def _graph() -> Graph:
    graph = Graph()
    for idx, name in enumerate(["s", "a", "b", "e"]):
        graph.add_room(name, (idx, 0))
    graph.set_start("s")
    graph.set_end("e")
    graph.add_tunnel("s", "a")
    graph.add_tunnel("a", "b")
    graph.add_tunnel("b", "e")
    return graph


def test_rooms_are_indexed_by_insertion_order() -> None:
    graph = _graph()
    assert [room.room_id for room in graph.rooms] == [0, 1, 2, 3]
    assert graph.room_id("b") == 2
    assert graph.name_of(3) == "e"


def test_adjacency_keeps_declaration_order() -> None:
    graph = _graph()
    graph.add_tunnel("a", "e")
    assert graph.neighbors(graph.room_id("a")) == [0, 2, 3]
    assert graph.degree(graph.room_id("a")) == 3


def test_duplicate_tunnel_is_ignored() -> None:
    graph = _graph()
    assert graph.add_tunnel("b", "a") is False
    assert graph.degree(graph.room_id("b")) == 2
    assert graph.tunnels == [(0, 1), (1, 2), (2, 3)]


def test_route_properties() -> None:
    graph = _graph()
    route = graph.route_from_names(["s", "a", "b", "e"])
    assert route.length == 3
    assert route.first_hop == 1
    assert route.intermediate == (1, 2)
    assert route.mask == 0b0110
    assert str(route) == "s -> a -> b -> e"


def test_validate_requires_distinct_start_and_end() -> None:
    graph = _graph()
    graph.set_end("s")
    with pytest.raises(StructuralError, match="different"):
        graph.validate()


def test_unknown_room_lookup() -> None:
    with pytest.raises(StructuralError, match="unknown room"):
        _graph().room_id("zzz")
