"""Domain data structures: rooms, the tunnel graph and routes."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .errors import StructuralError

Coord = Tuple[int, int]


@dataclass(frozen=True)
class Room:
    room_id: int
    name: str
    coord: Coord


@dataclass(frozen=True)
class Route:
    """Simple start-to-end path, stored both as room ids and room names."""

    nodes: Tuple[int, ...]
    names: Tuple[str, ...]

    @property
    def length(self) -> int:
        return len(self.nodes) - 1

    @property
    def first_hop(self) -> int:
        return self.nodes[1]

    @property
    def intermediate(self) -> Tuple[int, ...]:
        return self.nodes[1:-1]

    @property
    def mask(self) -> int:
        """Bitset of intermediate room ids."""
        bits = 0
        for room_id in self.intermediate:
            bits |= 1 << room_id
        return bits

    def __str__(self) -> str:
        return " -> ".join(self.names)


@dataclass
class Graph:
    """Arena of rooms indexed by integer id, with adjacency keyed by id."""

    rooms: List[Room] = field(default_factory=list)
    index: Dict[str, int] = field(default_factory=dict)
    adjacency: List[List[int]] = field(default_factory=list)
    start: Optional[int] = None
    end: Optional[int] = None
    _coords: Dict[Coord, str] = field(default_factory=dict, repr=False)

    def add_room(self, name: str, coord: Coord) -> Room:
        if name in self.index:
            raise StructuralError(f"duplicate room {name!r}")
        other = self._coords.get(coord)
        if other is not None:
            raise StructuralError(f"rooms {other!r} and {name!r} share coordinates {coord}")
        room = Room(len(self.rooms), name, coord)
        self.rooms.append(room)
        self.index[name] = room.room_id
        self.adjacency.append([])
        self._coords[coord] = name
        return room

    def add_tunnel(self, a: str, b: str) -> bool:
        """Connect two rooms; returns False when the tunnel already exists."""
        for name in (a, b):
            if name not in self.index:
                raise StructuralError(f"tunnel {a}-{b} references unknown room {name!r}")
        if a == b:
            raise StructuralError(f"tunnel {a}-{b} links a room to itself")
        ia, ib = self.index[a], self.index[b]
        if ib in self.adjacency[ia]:
            return False
        self.adjacency[ia].append(ib)
        self.adjacency[ib].append(ia)
        return True

    def set_start(self, name: str) -> None:
        self.start = self.room_id(name)

    def set_end(self, name: str) -> None:
        self.end = self.room_id(name)

    def validate(self) -> None:
        if self.start is None:
            raise StructuralError("missing ##start room")
        if self.end is None:
            raise StructuralError("missing ##end room")
        if self.start == self.end:
            raise StructuralError("start and end must be different rooms")

    def room_id(self, name: str) -> int:
        try:
            return self.index[name]
        except KeyError:
            raise StructuralError(f"unknown room {name!r}") from None

    def name_of(self, room_id: int) -> str:
        return self.rooms[room_id].name

    def neighbors(self, room_id: int) -> List[int]:
        return self.adjacency[room_id]

    def degree(self, room_id: int) -> int:
        return len(self.adjacency[room_id])

    def route(self, nodes: Sequence[int]) -> Route:
        return Route(tuple(nodes), tuple(self.rooms[n].name for n in nodes))

    def route_from_names(self, names: Iterable[str]) -> Route:
        return self.route([self.room_id(name) for name in names])

    @property
    def start_name(self) -> str:
        return self.name_of(self.start)

    @property
    def end_name(self) -> str:
        return self.name_of(self.end)

    @property
    def tunnels(self) -> List[Tuple[int, int]]:
        """Each tunnel once, as ``(lower_id, higher_id)`` in declaration order of the lower room."""
        return [(a, b) for a, nbrs in enumerate(self.adjacency) for b in nbrs if a < b]

    def __len__(self) -> int:
        return len(self.rooms)
