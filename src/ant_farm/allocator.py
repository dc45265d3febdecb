"""Greedy assignment of ants to routes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from .errors import UnsolvableError
from .graph import Route


@dataclass(frozen=True)
class Allocation:
    route_of: List[int]
    counts: List[int]

    def route_for(self, agent_id: int) -> int:
        """Route index for ant ``agent_id`` (1-based)."""
        return self.route_of[agent_id - 1]

    @property
    def ants(self) -> int:
        return len(self.route_of)


def allocate(ants: int, routes: Sequence[Route]) -> Allocation:
    """Send each ant, in id order, down the route that would finish it soonest.

    ``length + already assigned`` estimates the turn at which one more ant on a
    route would arrive, since a route releases at most one ant from start per
    turn. Ties go to the lowest route index.
    """
    if ants < 1:
        raise ValueError(f"number of ants must be positive, got {ants}")
    if not routes:
        raise UnsolvableError("no route available to allocate ants to")

    counts = [0] * len(routes)
    route_of: List[int] = []
    for _ in range(ants):
        best = min(range(len(routes)), key=lambda i: (routes[i].length + counts[i], i))
        counts[best] += 1
        route_of.append(best)
    return Allocation(route_of, counts)
