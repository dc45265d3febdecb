"""Greedy selection of vertex-disjoint routes."""
from __future__ import annotations

from typing import List

from .graph import Graph, Route
from .logging_utils import get_logger
from .pathfinder import shortest_route


def order_first_hops(graph: Graph) -> List[int]:
    """Start's neighbours, fewest tunnels first; ties keep declaration order."""
    return sorted(graph.neighbors(graph.start), key=graph.degree)


def select_routes(graph: Graph) -> List[Route]:
    """Single greedy pass, one shortest route per first hop.

    Low-degree neighbours are tried first since they have the fewest
    alternatives. Each accepted route blocks its intermediate rooms for the
    searches that follow; a neighbour with no remaining route is skipped for
    good. There is no backtracking, so the result is locally maximal only.
    """
    logger = get_logger()
    blocked = 0
    selected: List[Route] = []
    for hop in order_first_hops(graph):
        route = shortest_route(graph, hop, blocked)
        if route is None:
            logger.info(
                "[select] no disjoint route through %s (degree=%d), skipping",
                graph.name_of(hop),
                graph.degree(hop),
            )
            continue
        selected.append(route)
        blocked |= route.mask
        logger.debug("[select] accepted route #%d: %s (length=%d)", len(selected), route, route.length)
    return selected
