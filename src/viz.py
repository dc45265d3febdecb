import os
from typing import Dict, List, Optional, Sequence, Tuple

import matplotlib.pyplot as plt
import matplotlib.colors as mcolors


PALETTE = [
    "#1f77b4",
    "#ff7f0e",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
    "#e377c2",
    "#7f7f7f",
    "#bcbd22",
    "#17becf",
]


def _ensure_dir(p: str):
    d = os.path.dirname(p)
    if d and not os.path.exists(d):
        os.makedirs(d, exist_ok=True)


def _draw_farm(ax, coords, tunnels, start, end):
    for (a, b) in tunnels:
        ax.plot(
            [coords[a][0], coords[b][0]],
            [coords[a][1], coords[b][1]],
            color="#cccccc",
            lw=1.2,
            zorder=1,
        )
    rooms = [r for r in coords if r not in (start, end)]
    ax.scatter(
        [coords[r][0] for r in rooms],
        [coords[r][1] for r in rooms],
        marker="s",
        s=90,
        c="#eeeeee",
        edgecolors="#555555",
        linewidths=0.8,
        zorder=2,
    )
    for r in rooms:
        ax.text(coords[r][0], coords[r][1] + 0.35, r, fontsize=8, color="#111", ha="center")
    for name, color in ((start, "#2ca02c"), (end, "#d62728")):
        ax.scatter([coords[name][0]], [coords[name][1]], marker="^", s=120, c=color, zorder=3)
        ax.text(
            coords[name][0] + 0.3,
            coords[name][1] + 0.3,
            name,
            fontsize=9,
            color=color,
            bbox=dict(boxstyle="round,pad=0.1", facecolor="white", alpha=0.6, edgecolor="none"),
        )


def plot_routes(
    coords: Dict[str, Tuple[int, int]],
    tunnels: Sequence[Tuple[str, str]],
    routes: Sequence[Sequence[str]],
    start: str,
    end: str,
    counts: Optional[Sequence[int]] = None,
    savepath: str = "out/routes.png",
):
    _ensure_dir(savepath)
    fig, ax = plt.subplots(figsize=(8.5, 5.5))
    _draw_farm(ax, coords, tunnels, start, end)

    for idx, route in enumerate(routes):
        c = PALETTE[idx % len(PALETTE)]
        for u, v in zip(route, route[1:]):
            ax.annotate(
                "",
                xy=(coords[v][0], coords[v][1]),
                xytext=(coords[u][0], coords[u][1]),
                arrowprops=dict(arrowstyle="->", color=c, lw=2, alpha=0.85),
            )
        label = f"Route {idx + 1} (len {len(route) - 1}"
        if counts is not None:
            label += f", {counts[idx]} ants"
        ax.plot([], [], color=c, lw=2, label=label + ")")

    ax.set_aspect("equal", adjustable="datalim")
    ax.set_xlabel("X")
    ax.set_ylabel("Y")
    ax.set_title("Selected Disjoint Routes")
    ax.legend(loc="upper left", fontsize=8, frameon=False)
    fig.tight_layout(pad=1.4)
    fig.savefig(savepath, dpi=150)
    plt.close(fig)


def _stays(turns: Sequence[Sequence[Tuple[int, str]]], ants: int) -> Dict[int, List[Tuple[str, int, int]]]:
    """Per ant, the ``(room, first_turn, last_turn)`` spans spent in each room."""
    stays: Dict[int, List[Tuple[str, int, int]]] = {a: [] for a in range(1, ants + 1)}
    for t, moves in enumerate(turns, 1):
        for agent, room in moves:
            spans = stays[agent]
            if spans:
                prev_room, t0, _ = spans[-1]
                spans[-1] = (prev_room, t0, t)
            spans.append((room, t, t))
    return stays


def plot_timeline(
    turns: Sequence[Sequence[Tuple[int, str]]],
    ants: int,
    end: str,
    savepath: str = "out/timeline.png",
):
    _ensure_dir(savepath)
    stays = _stays(turns, ants)
    fig, ax = plt.subplots(figsize=(10, 2 + 0.35 * ants))

    def _variant(color, waiting):
        rgb = mcolors.to_rgb(color)
        if waiting:
            return tuple(min(1.0, c + 0.5 * (1 - c)) for c in rgb)
        return rgb

    yticks = []
    for agent in range(1, ants + 1):
        y = agent * 10
        base = PALETTE[(agent - 1) % len(PALETTE)]
        for room, t0, t1 in stays[agent]:
            if room == end:
                ax.scatter([t0], [y + 4], marker="|", s=80, c="#111")
                continue
            width = t1 - t0
            ax.broken_barh([(t0, width)], (y, 8), facecolors=_variant(base, width > 1), edgecolors="white")
            ax.text(t0 + width / 2, y + 4, room, ha="center", va="center", fontsize=7, color="#111")
        yticks.append(y + 4)

    ax.set_yticks(yticks)
    ax.set_yticklabels([f"L{a}" for a in range(1, ants + 1)])
    ax.set_xlabel("Turn")
    ax.set_xlim(0, len(turns) + 1)
    ax.set_title("Ant Timeline (room held per turn, light = waiting)", pad=12)
    ax.grid(True, axis="x", linestyle=":", alpha=0.4)
    fig.tight_layout()
    fig.savefig(savepath, dpi=150)
    plt.close(fig)


def animate_turns(
    coords: Dict[str, Tuple[int, int]],
    tunnels: Sequence[Tuple[str, str]],
    turns: Sequence[Sequence[Tuple[int, str]]],
    ants: int,
    start: str,
    end: str,
    savepath: str = "out/anim.gif",
    fps: int = 2,
):
    """Animate ant positions turn by turn as a GIF."""
    _ensure_dir(savepath)
    from matplotlib.animation import FuncAnimation, PillowWriter

    positions = [{a: start for a in range(1, ants + 1)}]
    for moves in turns:
        frame = dict(positions[-1])
        for agent, room in moves:
            frame[agent] = room
        positions.append(frame)

    fig, ax = plt.subplots(figsize=(8, 5))
    _draw_farm(ax, coords, tunnels, start, end)
    ax.set_aspect("equal", adjustable="datalim")
    ax.set_xticks([])
    ax.set_yticks([])
    for spine in ax.spines.values():
        spine.set_visible(False)
    markers = ax.scatter([], [], s=60, zorder=4)
    caption = ax.text(0.01, 0.98, "", transform=ax.transAxes, va="top", fontsize=10)

    def _update(i):
        frame = positions[i]
        moving = [a for a, room in frame.items() if room not in (start, end)]
        markers.set_offsets([coords[frame[a]] for a in moving] or [[float("nan"), float("nan")]])
        markers.set_color([PALETTE[(a - 1) % len(PALETTE)] for a in moving] or ["#000000"])
        waiting = sum(1 for room in frame.values() if room == start)
        arrived = sum(1 for room in frame.values() if room == end)
        caption.set_text(f"Turn {i}/{len(turns)}  at start: {waiting}  arrived: {arrived}")
        return markers, caption

    anim = FuncAnimation(fig, _update, frames=len(positions), interval=1000 // max(fps, 1), blit=False)
    anim.save(savepath, writer=PillowWriter(fps=fps))
    plt.close(fig)
