"""Helper utilities for saving solver output."""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List


def _sanitize(segment: str) -> str:
    return "".join(ch if ch.isalnum() or ch in "-_" else "_" for ch in segment)


def prepare_output_dir(output_root: str, farm_file: str, ants: int, strategy: str) -> Path:
    farm_label = _sanitize(Path(farm_file).stem) if farm_file else "stdin"
    tag = f"farm_{farm_label}_ants_{ants}_{_sanitize(strategy)}"
    output_dir = Path(output_root) / tag
    output_dir.mkdir(parents=True, exist_ok=True)
    return output_dir


def save_json(path: Path, payload: Any) -> None:
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)


def save_plan(output_dir: Path, plan: Dict[str, Any]) -> Path:
    path = output_dir / "plan.json"
    save_json(path, plan)
    return path


def save_schedule(output_dir: Path, lines: List[str]) -> Path:
    path = output_dir / "schedule.json"
    save_json(path, [{"turn": i, "moves": line.split()} for i, line in enumerate(lines, 1)])
    return path
