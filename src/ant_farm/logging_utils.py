"""
Logging setup for the ant farm router.

Everything logs through one logger named "AntFarm". The console handler
prints bare messages (the CLI keeps stdout for the farm and its moves, so
logs go to stderr); per-run file handlers add a timestamp and level.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import IO, Optional


_LOGGER_NAME = "AntFarm"
_CONSOLE_FORMAT = "%(message)s"
_FILE_FORMAT = "%(asctime)s %(levelname)s %(message)s"


def _console_handlers(logger: logging.Logger):
    return [h for h in logger.handlers if not isinstance(h, logging.FileHandler)]


def setup_logging(debug: bool = False, stream: Optional[IO[str]] = None) -> logging.Logger:
    """Return the project logger with a console handler at INFO (or DEBUG).

    Calling it again only changes the level, so a later ``--debug`` run in the
    same process is honoured without stacking handlers.
    """
    logger = logging.getLogger(_LOGGER_NAME)
    level = logging.DEBUG if debug else logging.INFO
    logger.setLevel(level)
    consoles = _console_handlers(logger)
    if not consoles:
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(logging.Formatter(_CONSOLE_FORMAT))
        logger.addHandler(handler)
        consoles = [handler]
    for handler in consoles:
        handler.setLevel(level)
    logger.debug("Logger ready (level=%s)", logging.getLevelName(level))
    return logger


def get_logger() -> logging.Logger:
    """Return the shared project logger (call setup_logging() first)."""
    return logging.getLogger(_LOGGER_NAME)


def add_file_handler(path: Path | str, level: Optional[int] = None) -> logging.FileHandler:
    """Mirror the project log into ``path`` (a run's ``run.log``)."""
    logger = get_logger()
    target = Path(path).resolve()
    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == target:
            return handler
    target.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(target, encoding="utf-8")
    handler.setLevel(level or logger.level)
    handler.setFormatter(logging.Formatter(_FILE_FORMAT))
    logger.addHandler(handler)
    logger.debug("Mirroring log to %s", target)
    return handler


def detach_file_handlers() -> int:
    """Close and remove every per-run file handler; returns how many there were."""
    logger = get_logger()
    handlers = [h for h in logger.handlers if isinstance(h, logging.FileHandler)]
    for handler in handlers:
        logger.removeHandler(handler)
        handler.close()
    return len(handlers)
