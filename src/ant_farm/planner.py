"""Planner facade used by the CLI, the batch runner and tests."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .allocator import Allocation, allocate
from .config import Config
from .errors import StructuralError, UnsolvableError
from .graph import Graph, Route
from .logging_utils import get_logger
from .pathfinder import candidate_routes
from .reporting import compute_stats
from .scheduler import Turn, schedule
from .selector import select_routes


@dataclass
class Solution:
    graph: Graph
    ants: int
    candidates: List[Route]
    routes: List[Route]
    allocation: Allocation
    turns: List[Turn]
    stats: Dict[str, float] = field(default_factory=dict)

    @property
    def turn_count(self) -> int:
        return len(self.turns)


def plan_routes(graph: Graph, config: Optional[Config] = None) -> List[Route]:
    """Select a disjoint route set with the backend named by ``config.strategy``."""
    config = config or Config()
    if config.strategy == "exact":
        from .exact import select_routes_exact

        return select_routes_exact(graph, verbose=config.debug)
    return select_routes(graph)


def solve(graph: Graph, ants: int, config: Optional[Config] = None) -> Solution:
    """Run the whole pipeline: candidates, disjoint routes, allocation, turns."""
    if ants < 1:
        raise StructuralError(f"number of ants must be positive, got {ants}")
    config = config or Config()
    logger = get_logger()
    graph.validate()
    if not graph.neighbors(graph.start):
        raise UnsolvableError(f"start room {graph.start_name!r} has no tunnels")

    candidates = candidate_routes(
        graph,
        exhaustive=config.list_all_routes,
        limit=config.max_candidate_routes if config.list_all_routes else None,
    )
    logger.debug("[plan] %d candidate routes", len(candidates))

    routes = plan_routes(graph, config)
    if not routes:
        raise UnsolvableError(f"no route connects {graph.start_name!r} to {graph.end_name!r}")

    allocation = allocate(ants, routes)
    turns = schedule(graph, routes, allocation)
    solution = Solution(graph, ants, candidates, routes, allocation, turns)
    solution.stats = compute_stats(solution)
    return solution
