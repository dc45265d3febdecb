"""Breadth-first route search from start to end through a forced first hop."""
from __future__ import annotations

from collections import deque
from typing import Dict, List, Optional

from .graph import Graph, Route
from .logging_utils import get_logger

# Partial paths held by the exhaustive listing before it gives up.
MAX_FRONTIER = 200_000


def shortest_route(graph: Graph, first_hop: int, blocked: int = 0) -> Optional[Route]:
    """Shortest route ``start -> first_hop -> ... -> end`` avoiding ``blocked`` rooms.

    ``blocked`` is a bitset of room ids. Rooms are marked visited once per search,
    so the first path that reaches end has the minimum edge count; among equally
    short paths the one found first in tunnel declaration order wins. Returns
    ``None`` when end cannot be reached.
    """
    start, end = graph.start, graph.end
    if first_hop not in graph.neighbors(start):
        return None
    if first_hop == end:
        return graph.route([start, end])
    if blocked >> first_hop & 1:
        return None

    parent: Dict[int, int] = {first_hop: start}
    visited = (1 << start) | (1 << first_hop)
    queue = deque([first_hop])
    while queue:
        current = queue.popleft()
        for nxt in graph.neighbors(current):
            if visited >> nxt & 1:
                continue
            if nxt != end and blocked >> nxt & 1:
                continue
            parent[nxt] = current
            if nxt == end:
                return graph.route(_unwind(parent, end, start))
            visited |= 1 << nxt
            queue.append(nxt)

    get_logger().debug("[bfs] no route through %s", graph.name_of(first_hop))
    return None


def _unwind(parent: Dict[int, int], node: int, start: int) -> List[int]:
    nodes = [node]
    while node != start:
        node = parent[node]
        nodes.append(node)
    nodes.reverse()
    return nodes


def all_routes(
    graph: Graph,
    first_hop: int,
    limit: Optional[int] = None,
    max_frontier: int = MAX_FRONTIER,
) -> List[Route]:
    """Every simple route through ``first_hop``, shortest first.

    The search keeps whole partial paths in its queue, so it is exponential in
    the size of the graph. ``limit`` caps the number of routes returned;
    ``max_frontier`` caps the queue itself, and once it is reached the routes
    found so far are returned with a warning.
    """
    start, end = graph.start, graph.end
    if first_hop not in graph.neighbors(start):
        return []
    found: List[Route] = []
    queue = deque([(start, first_hop)])
    while queue:
        path = queue.popleft()
        last = path[-1]
        if last == end:
            found.append(graph.route(path))
            if limit is not None and len(found) >= limit:
                break
            continue
        if len(queue) >= max_frontier:
            get_logger().warning(
                "[paths] route listing through %s stopped at %d partial paths (%d routes found)",
                graph.name_of(first_hop),
                max_frontier,
                len(found),
            )
            break
        for nxt in graph.neighbors(last):
            if nxt not in path:
                queue.append(path + (nxt,))
    return found


def candidate_routes(graph: Graph, exhaustive: bool = False, limit: Optional[int] = None) -> List[Route]:
    """Routes discovered per start neighbour, in declaration order.

    By default this is the unrestricted shortest route through each neighbour;
    ``exhaustive`` lists every simple route instead (capped by ``limit`` in total).
    """
    routes: List[Route] = []
    for hop in graph.neighbors(graph.start):
        if exhaustive:
            remaining = None if limit is None else limit - len(routes)
            if remaining is not None and remaining <= 0:
                break
            routes.extend(all_routes(graph, hop, remaining))
        else:
            route = shortest_route(graph, hop)
            if route is not None:
                routes.append(route)
    return routes
