import logging
import random
import textwrap
from pathlib import Path

import pytest

from ant_farm import Graph, parse_farm


BOTTLENECK = """
2
##start
start -2 0
##end
end 10 0
1 0 3
start-1
1-end
"""

TWO_LANES = """
4
##start
start 0 0
##end
end 4 0
a 2 2
b 2 -2
start-a
start-b
a-end
b-end
"""

# Greedy takes a first (declared first, same degree as b) and its shortest
# route through m, which leaves b with only the dead end r.
TRAP = """
3
##start
start 0 0
##end
end 8 0
a 2 2
b 2 -2
m 4 0
p 4 4
q 6 4
r 2 -4
start-a
start-b
a-m
a-p
b-m
b-r
m-end
p-q
q-end
"""


@pytest.fixture
def make_farm():
    def _make(text):
        return parse_farm(textwrap.dedent(text).strip().splitlines())

    return _make


@pytest.fixture
def bottleneck(make_farm):
    return make_farm(BOTTLENECK)


@pytest.fixture
def two_lanes(make_farm):
    return make_farm(TWO_LANES)


@pytest.fixture
def trap(make_farm):
    return make_farm(TRAP)


@pytest.fixture
def farms_dir():
    return Path(__file__).resolve().parent.parent / "farms"


@pytest.fixture
def grid_farm():
    """Builder for random planar grid farms: ``(nx_graph, graph, source, sink, ants)``."""
    nx = pytest.importorskip("networkx")

    def _build(seed):
        rng = random.Random(seed)
        width, height = rng.randint(3, 7), rng.randint(3, 7)
        g = nx.grid_2d_graph(width, height)
        g.remove_edges_from([edge for edge in sorted(g.edges()) if rng.random() < 0.25])

        graph = Graph()
        for x, y in sorted(g.nodes()):
            graph.add_room(f"r{x}_{y}", (x, y))
        edges = sorted(g.edges())
        rng.shuffle(edges)
        for (a, b) in edges:
            graph.add_tunnel(f"r{a[0]}_{a[1]}", f"r{b[0]}_{b[1]}")
        source, sink = (0, 0), (width - 1, height - 1)
        graph.set_start(f"r{source[0]}_{source[1]}")
        graph.set_end(f"r{sink[0]}_{sink[1]}")
        return g, graph, source, sink, rng.randint(1, 30)

    return _build


@pytest.fixture(autouse=True)
def _reset_logger():
    yield
    logger = logging.getLogger("AntFarm")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
