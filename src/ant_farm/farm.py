"""Farm description loading helpers.

The format is line oriented::

    3               number of ants
    ##start
    start 1 6       room: name x y
    ##end
    end 9 6
    mid 5 6
    start-mid       tunnel
    mid-end

Lines starting with a single ``#`` are comments, unknown ``##`` commands are
ignored.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

from .errors import StructuralError
from .graph import Graph


@dataclass
class Farm:
    graph: Graph
    ants: int
    source_lines: List[str] = field(default_factory=list)


def _parse_ants(line: str, line_no: int) -> int:
    try:
        ants = int(line.strip())
    except ValueError:
        raise StructuralError(f"invalid number of ants: {line!r}", line_no) from None
    if ants <= 0:
        raise StructuralError(f"number of ants must be positive, got {ants}", line_no)
    return ants


def _parse_room(line: str, line_no: int) -> tuple[str, tuple[int, int]]:
    parts = line.split()
    if len(parts) != 3:
        raise StructuralError(f"invalid room line: {line!r}", line_no)
    name, raw_x, raw_y = parts
    if name.startswith("L") or name.startswith("#"):
        raise StructuralError(f"room name may not start with 'L' or '#': {name!r}", line_no)
    if "-" in name:
        raise StructuralError(f"room name may not contain '-': {name!r}", line_no)
    try:
        coord = (int(raw_x), int(raw_y))
    except ValueError:
        raise StructuralError(f"room coordinates must be integers: {line!r}", line_no) from None
    return name, coord


def _parse_tunnel(line: str, line_no: int) -> tuple[str, str]:
    parts = line.strip().split("-")
    if len(parts) != 2 or not all(parts):
        raise StructuralError(f"invalid tunnel line: {line!r}", line_no)
    return parts[0], parts[1]


def parse_farm(lines: Iterable[str]) -> Farm:
    graph = Graph()
    ants: Optional[int] = None
    pending: Optional[str] = None
    seen_commands = set()
    source: List[str] = []

    for line_no, raw in enumerate(lines, 1):
        line = raw.rstrip("\r\n")
        source.append(line)
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.startswith("#") and not stripped.startswith("##"):
            continue
        if ants is None:
            ants = _parse_ants(stripped, line_no)
            continue
        if stripped.startswith("##"):
            if stripped in ("##start", "##end"):
                if stripped in seen_commands:
                    raise StructuralError(f"{stripped} declared more than once", line_no)
                if pending is not None:
                    raise StructuralError(f"{pending} must be followed by a room", line_no)
                seen_commands.add(stripped)
                pending = stripped
            continue
        if " " in stripped or "\t" in stripped:
            name, coord = _parse_room(stripped, line_no)
            try:
                graph.add_room(name, coord)
            except StructuralError as exc:
                raise StructuralError(str(exc), line_no) from None
            if pending == "##start":
                graph.set_start(name)
            elif pending == "##end":
                graph.set_end(name)
            pending = None
            continue
        if pending is not None:
            raise StructuralError(f"{pending} must be followed by a room", line_no)
        if "-" in stripped:
            a, b = _parse_tunnel(stripped, line_no)
            try:
                graph.add_tunnel(a, b)
            except StructuralError as exc:
                raise StructuralError(str(exc), line_no) from None
            continue
        raise StructuralError(f"unrecognised line: {line!r}", line_no)

    if ants is None:
        raise StructuralError("missing number of ants")
    if pending is not None:
        raise StructuralError(f"{pending} must be followed by a room")
    graph.validate()
    return Farm(graph, ants, source)


def load_farm(path: str | Path) -> Farm:
    path = Path(path)
    with path.open("r", encoding="utf-8") as handle:
        return parse_farm(handle)
