"""Turn-by-turn simulation of ants moving along their routes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Set

from .allocator import Allocation
from .graph import Graph, Route
from .logging_utils import get_logger


@dataclass(frozen=True)
class Move:
    agent: int
    room: str

    def __str__(self) -> str:
        return f"L{self.agent}-{self.room}"


Turn = List[Move]


@dataclass
class Agent:
    agent_id: int
    route: Route
    position: int = 0

    @property
    def finished(self) -> bool:
        return self.position >= self.route.length

    @property
    def room(self) -> int:
        return self.route.nodes[self.position]

    @property
    def next_room(self) -> int:
        return self.route.nodes[self.position + 1]


def spawn_agents(routes: Sequence[Route], allocation: Allocation) -> List[Agent]:
    return [
        Agent(agent_id, routes[allocation.route_for(agent_id)])
        for agent_id in range(1, allocation.ants + 1)
    ]


def schedule(graph: Graph, routes: Sequence[Route], allocation: Allocation) -> List[Turn]:
    """Advance every ant one room per turn until all of them reach end.

    Ants are evaluated in increasing id order, so a lower id wins a contested
    room. A room other than start and end holds one ant at a time; it is
    released as soon as its occupant moves on, and an ant that finds its next
    room taken simply waits for the next turn.
    """
    logger = get_logger()
    agents = spawn_agents(routes, allocation)
    occupied: Set[int] = set()
    turns: List[Turn] = []
    active = [agent for agent in agents if not agent.finished]

    while active:
        moves: Turn = []
        for agent in active:
            dest = agent.next_room
            if dest != graph.end and dest in occupied:
                continue
            occupied.discard(agent.room)
            if dest != graph.end:
                occupied.add(dest)
            agent.position += 1
            moves.append(Move(agent.agent_id, graph.name_of(dest)))
        if not moves:
            raise RuntimeError(f"no ant could move on turn {len(turns) + 1}; routes are not disjoint")
        turns.append(moves)
        logger.debug("[turn %d] %s", len(turns), " ".join(str(move) for move in moves))
        active = [agent for agent in active if not agent.finished]

    return turns
