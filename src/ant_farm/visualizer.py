"""Visualization export helpers."""
from __future__ import annotations

from pathlib import Path
from typing import Dict

from .planner import Solution

import viz


def export_visuals(solution: Solution, output_dir: Path, animate: bool = True) -> Dict[str, Path]:
    """Render route map, per-ant turn timeline and GIF animation for a run."""
    graph = solution.graph
    coords = {room.name: room.coord for room in graph.rooms}
    tunnels = [(graph.name_of(a), graph.name_of(b)) for a, b in graph.tunnels]
    routes = [list(route.names) for route in solution.routes]

    artifacts: Dict[str, Path] = {}

    routes_path = output_dir / "routes.png"
    viz.plot_routes(
        coords,
        tunnels,
        routes,
        graph.start_name,
        graph.end_name,
        counts=solution.allocation.counts,
        savepath=str(routes_path),
    )
    artifacts["routes"] = routes_path

    turns = [[(move.agent, move.room) for move in turn] for turn in solution.turns]
    timeline_path = output_dir / "timeline.png"
    viz.plot_timeline(turns, solution.ants, graph.end_name, savepath=str(timeline_path))
    artifacts["timeline"] = timeline_path

    if animate:
        gif_path = output_dir / "anim.gif"
        viz.animate_turns(
            coords,
            tunnels,
            turns,
            solution.ants,
            graph.start_name,
            graph.end_name,
            savepath=str(gif_path),
        )
        artifacts["gif"] = gif_path

    return artifacts
