import pytest

from ant_farm import StructuralError, load_farm, parse_farm


def _lines(*rows):
    return list(rows)


def test_parse_bottleneck_farm(bottleneck) -> None:
    graph = bottleneck.graph
    assert bottleneck.ants == 2
    assert graph.start_name == "start"
    assert graph.end_name == "end"
    assert len(graph) == 3
    assert [graph.name_of(n) for n in graph.neighbors(graph.room_id("1"))] == ["start", "end"]
    assert graph.rooms[graph.room_id("1")].coord == (0, 3)


def test_comments_and_unknown_commands_are_ignored() -> None:
    farm = parse_farm(
        _lines(
            "# a comment before the ant count",
            "3",
            "",
            "##start",
            "s 0 0",
            "##colour red",
            "##end",
            "e 1 1",
            "# tunnels",
            "s-e",
        )
    )
    assert farm.ants == 3
    assert farm.graph.degree(farm.graph.start) == 1


def test_duplicate_tunnel_adds_no_capacity() -> None:
    farm = parse_farm(_lines("1", "##start", "s 0 0", "##end", "e 1 0", "m 2 2", "s-m", "m-s", "s-m", "m-e"))
    graph = farm.graph
    assert graph.degree(graph.start) == 1
    assert graph.degree(graph.room_id("m")) == 2


def test_source_lines_are_kept_verbatim(bottleneck) -> None:
    assert bottleneck.source_lines[0] == "2"
    assert bottleneck.source_lines[-1] == "1-end"


@pytest.mark.parametrize(
    "rows, fragment",
    [
        (("0", "##start", "s 0 0", "##end", "e 1 0"), "must be positive"),
        (("-3",), "must be positive"),
        (("many",), "invalid number of ants"),
        (("1", "##start", "s 0", "##end", "e 1 0"), "invalid"),
        (("1", "##start", "s 0 x", "##end", "e 1 0"), "integers"),
        (("1", "##start", "s 0 0", "##end", "s 1 0"), "duplicate room"),
        (("1", "##start", "s 0 0", "##end", "e 0 0"), "share coordinates"),
        (("1", "##start", "s 0 0", "##end", "e 1 0", "s-x"), "unknown room"),
        (("1", "##start", "s 0 0", "##end", "e 1 0", "s-s"), "itself"),
        (("1", "##start", "s 0 0", "##start", "t 2 2", "##end", "e 1 0"), "more than once"),
        (("1", "##start", "##end", "s 0 0", "e 1 0"), "followed by a room"),
        (("1", "##start", "s 0 0", "e 1 0"), "missing ##end"),
        (("1", "s 0 0", "##end", "e 1 0"), "missing ##start"),
        (("1", "##start", "Ls 0 0", "##end", "e 1 0"), "may not start with 'L'"),
        (("1", "##start", "s-1 0 0", "##end", "e 1 0"), "may not contain '-'"),
        (("1", "##start", "s 0 0", "##end", "e 1 0", "s-e-x"), "invalid tunnel"),
        (("1", "##start", "s 0 0", "##end", "e 1 0", "garbage"), "unrecognised"),
        (("1", "##end"), "followed by a room"),
        ((), "missing number of ants"),
    ],
)
def test_structural_errors(rows, fragment) -> None:
    with pytest.raises(StructuralError, match=fragment):
        parse_farm(list(rows))


def test_structural_error_carries_line_number() -> None:
    with pytest.raises(StructuralError) as excinfo:
        parse_farm(_lines("1", "##start", "s 0 0", "##end", "e 1 0", "s 5 5"))
    assert excinfo.value.line_no == 6
    assert str(excinfo.value).startswith("line 6:")


def test_structural_error_is_a_value_error() -> None:
    with pytest.raises(ValueError):
        parse_farm(_lines("nope"))


def test_load_farm_from_file(farms_dir) -> None:
    farm = load_farm(farms_dir / "example.txt")
    assert farm.ants == 10
    assert len(farm.graph) == 11
    assert len(farm.graph.tunnels) == 13
