"""Runtime settings; environment variables override the defaults."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from rich.logging import RichHandler

DEFAULT_RUN_DIR = Path("runs")
DEFAULT_LOG_LEVEL = "WARNING"

# Historical maze convention: 1 marks a traversable cell, 0 a wall.
DEFAULT_FREE_VALUE = 1

TRACE_STEP_DELAY = 0.2


def run_dir() -> Path:
    return Path(os.getenv("LATTICEWALK_RUN_DIR") or DEFAULT_RUN_DIR)


def free_value_override() -> int | None:
    raw = os.getenv("LATTICEWALK_FREE_VALUE")
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"LATTICEWALK_FREE_VALUE must be an integer, got {raw!r}.") from exc


def log_level() -> str:
    return (os.getenv("LATTICEWALK_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or log_level()).upper(),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
        force=True,
    )
