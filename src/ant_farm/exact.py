"""
Exact vertex-disjoint route selection as a 0/1 integer program.

Every tunnel becomes two directed arcs with a binary flow variable. Intermediate
rooms conserve flow and accept at most one unit, so each unit leaving start
traces one route and the routes share no intermediate room. The objective
maximises the number of routes first and, among maximum sets, the total number
of edges used is minimised.

Requires pulp (bundled CBC solver).
"""
from __future__ import annotations

from typing import Dict, List, Tuple

import pulp as pl

from .graph import Graph, Route
from .logging_utils import get_logger
from .selector import order_first_hops

Arc = Tuple[int, int]


def _arcs(graph: Graph) -> List[Arc]:
    arcs: List[Arc] = []
    for u, nbrs in enumerate(graph.adjacency):
        if u == graph.end:
            continue
        for v in nbrs:
            if v == graph.start:
                continue
            arcs.append((u, v))
    return arcs


def select_routes_exact(graph: Graph, solver=None, verbose: bool = False) -> List[Route]:
    logger = get_logger()
    start, end = graph.start, graph.end
    arcs = _arcs(graph)
    if not arcs:
        return []

    prob = pl.LpProblem("Disjoint_Routes", pl.LpMaximize)
    flow = pl.LpVariable.dicts("arc", arcs, lowBound=0, upBound=1, cat=pl.LpBinary)

    outgoing: Dict[int, List[Arc]] = {}
    incoming: Dict[int, List[Arc]] = {}
    for arc in arcs:
        outgoing.setdefault(arc[0], []).append(arc)
        incoming.setdefault(arc[1], []).append(arc)

    big_m = len(arcs) + 1
    route_count = pl.lpSum(flow[a] for a in outgoing.get(start, []))
    prob += big_m * route_count - pl.lpSum(flow.values()), "Max_routes_then_min_edges"

    for room in range(len(graph)):
        if room in (start, end) or not graph.neighbors(room):
            continue
        inflow = pl.lpSum(flow[a] for a in incoming.get(room, []))
        outflow = pl.lpSum(flow[a] for a in outgoing.get(room, []))
        prob += (inflow == outflow, f"conserve_{room}")
        prob += (inflow <= 1, f"capacity_{room}")

    if solver is None:
        solver = pl.PULP_CBC_CMD(msg=verbose)
    prob.solve(solver)

    status = pl.LpStatus[prob.status]
    logger.debug("[exact] solver status=%s arcs=%d", status, len(arcs))
    if status != "Optimal":
        raise RuntimeError(f"disjoint route program ended with status {status}")

    used = {arc for arc in arcs if pl.value(flow[arc]) > 0.5}
    successor = {u: v for (u, v) in used if u != start}

    routes: List[Route] = []
    for hop in order_first_hops(graph):
        if (start, hop) not in used:
            continue
        nodes = [start, hop]
        while nodes[-1] != end:
            nodes.append(successor[nodes[-1]])
        routes.append(graph.route(nodes))
    logger.info("[exact] %d disjoint routes, %d edges in total", len(routes), sum(r.length for r in routes))
    return routes
