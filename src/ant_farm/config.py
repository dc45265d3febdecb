"""Configuration utilities for the ant farm router."""
from __future__ import annotations

from dataclasses import dataclass, asdict, fields
import os
from pathlib import Path
from typing import Any, Dict, get_type_hints


ENV_PREFIX = "ANTFARM_"
STRATEGIES = ("greedy", "exact")


def _coerce_value(expected_type: Any, value: str) -> Any:
    """Coerce a string value coming from the environment into ``expected_type``."""
    if expected_type is bool:
        return value.strip().lower() in {"1", "true", "yes", "on"}
    if expected_type is int:
        return int(value)
    if expected_type is float:
        return float(value)
    if expected_type is Path:
        return Path(value)
    return value


@dataclass
class Config:
    """Container for solver and output parameters."""

    farm_file: str = ""
    strategy: str = "greedy"
    list_all_routes: bool = False
    max_candidate_routes: int = 1000
    output_root: str = "out"
    save_artifacts: bool = False
    export_visuals: bool = False
    debug: bool = False

    def __post_init__(self) -> None:
        if self.strategy not in STRATEGIES:
            raise ValueError(f"unknown strategy {self.strategy!r}, expected one of {STRATEGIES}")
        if self.max_candidate_routes < 1:
            raise ValueError("max_candidate_routes must be positive")

    def with_env_overrides(self) -> "Config":
        """Return a copy of the config with ``ANTFARM_*`` environment overrides applied."""
        data: Dict[str, Any] = asdict(self)
        hints = get_type_hints(type(self))
        for field in fields(self):
            env_key = ENV_PREFIX + field.name.upper()
            if env_key in os.environ:
                raw_value = os.environ[env_key]
                data[field.name] = _coerce_value(hints.get(field.name, str), raw_value)
        return Config(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
