"""Post-run reporting helpers: movement notation, statistics, summaries."""
from __future__ import annotations

from datetime import datetime
import csv
import math
from pathlib import Path
from typing import TYPE_CHECKING, Dict, Iterable, List, Optional, Sequence

from .config import Config
from .graph import Route
from .scheduler import Turn

if TYPE_CHECKING:
    from .planner import Solution


CSV_FIELDS = [
    "timestamp",
    "farm",
    "strategy",
    "ants",
    "routes",
    "route_lengths",
    "turns",
    "lower_bound",
    "efficiency",
]


def format_turn(turn: Turn) -> str:
    return " ".join(str(move) for move in turn)


def format_schedule(turns: Iterable[Turn]) -> List[str]:
    """One line per turn, moves space separated (``L1-a L2-b``)."""
    return [format_turn(turn) for turn in turns]


def lower_bound(ants: int, routes: Sequence[Route], counts: Optional[Sequence[int]] = None) -> int:
    """Fewest turns any schedule over ``routes`` can take.

    Only routes that carry ants count (all of them when ``counts`` is omitted).
    A direct start-end tunnel lets every ant on it arrive in a single turn.
    """
    used = [r for i, r in enumerate(routes) if counts is None or counts[i] > 0]
    if not used or ants <= 0:
        return 0
    if any(r.length == 1 for r in used):
        return 1
    k = len(used)
    return math.ceil((ants + sum(r.length for r in used) - k) / k)


def compute_stats(solution: "Solution") -> Dict[str, float]:
    routes = solution.routes
    counts = solution.allocation.counts
    turns = solution.turn_count
    bound = lower_bound(solution.ants, routes, counts)
    used = [r.length for r, c in zip(routes, counts) if c > 0]
    return {
        "ants": solution.ants,
        "routes": len(routes),
        "routes_used": len(used),
        "turns": turns,
        "lower_bound": bound,
        "efficiency": round(bound / turns, 4) if turns else 1.0,
        "longest_route": max(used, default=0),
    }


def _route_payload(route: Route) -> dict:
    return {"rooms": list(route.names), "length": route.length}


def summarize_run(solution: "Solution") -> Dict[str, object]:
    graph = solution.graph
    return {
        "start": graph.start_name,
        "end": graph.end_name,
        "ants": solution.ants,
        "candidates": [_route_payload(r) for r in solution.candidates],
        "routes": [
            dict(_route_payload(r), ants=count)
            for r, count in zip(solution.routes, solution.allocation.counts)
        ],
        "assignment": {str(agent): idx for agent, idx in enumerate(solution.allocation.route_of, 1)},
        "moves": format_schedule(solution.turns),
        "stats": dict(solution.stats),
    }


def describe_solution(solution: "Solution") -> List[str]:
    """Human readable report lines (candidates, selection, counts, statistics)."""
    lines = ["All paths found:"]
    for i, route in enumerate(solution.candidates, 1):
        lines.append(f"Path {i}: [{' '.join(route.names)}] (length: {route.length})")
    lines.append("Selected disjoint paths:")
    for i, (route, count) in enumerate(zip(solution.routes, solution.allocation.counts), 1):
        lines.append(f"Path {i}: [{' '.join(route.names)}] (length: {route.length}, ants: {count})")
    stats = solution.stats
    lines.append(
        "Turns: %d  lower bound: %d  efficiency: %.2f"
        % (stats.get("turns", 0), stats.get("lower_bound", 0), stats.get("efficiency", 0.0))
    )
    return lines


def build_result_record(solution: "Solution", config: Config) -> Dict[str, object]:
    stats = solution.stats
    return {
        "timestamp": datetime.now().isoformat(timespec="seconds"),
        "farm": Path(config.farm_file).stem if config.farm_file else "",
        "strategy": config.strategy,
        "ants": solution.ants,
        "routes": len(solution.routes),
        "route_lengths": ";".join(str(r.length) for r in solution.routes),
        "turns": stats.get("turns", solution.turn_count),
        "lower_bound": stats.get("lower_bound", ""),
        "efficiency": stats.get("efficiency", ""),
    }


def write_records(
    records: Iterable[Dict[str, object]],
    csv_path: Path | str,
    fields: Sequence[str] = CSV_FIELDS,
    append: bool = True,
) -> int:
    """Write result rows to ``csv_path`` under the columns ``fields``.

    With ``append`` the rows follow whatever the file already holds; a file
    written under another header is rewritten so old rows line up with
    ``fields`` (dropped columns vanish, new ones are blank). Keys outside
    ``fields`` are ignored. Returns the number of data rows in the file.
    """
    csv_path = Path(csv_path)
    csv_path.parent.mkdir(parents=True, exist_ok=True)
    fields = list(fields)
    rows = list(records)
    kept: List[Dict[str, object]] = []
    mode = "w"
    if append and csv_path.exists():
        with csv_path.open("r", newline="", encoding="utf-8") as handle:
            reader = csv.DictReader(handle)
            kept = list(reader)
            if reader.fieldnames == fields:
                mode = "a"
    with csv_path.open(mode, newline="", encoding="utf-8") as handle:
        writer = csv.DictWriter(handle, fieldnames=fields, restval="", extrasaction="ignore")
        if mode == "w":
            writer.writeheader()
            writer.writerows(kept)
        writer.writerows(rows)
    return len(kept) + len(rows)


def append_result_record(record: Dict[str, object], csv_path: Path | str) -> None:
    """Append one ``build_result_record`` row to the shared ``result.csv``."""
    if record:
        write_records([record], csv_path)
