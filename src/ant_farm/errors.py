"""Exception types raised by the loader and the solver."""
from __future__ import annotations

from typing import Optional


class AntFarmError(Exception):
    """Base class for errors that halt the pipeline with a user-visible message."""


class StructuralError(AntFarmError, ValueError):
    """Malformed or contradictory farm description."""

    def __init__(self, message: str, line_no: Optional[int] = None) -> None:
        self.line_no = line_no
        if line_no is not None:
            message = f"line {line_no}: {message}"
        super().__init__(message)


class UnsolvableError(AntFarmError):
    """No route connects start to end."""
