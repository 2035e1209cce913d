"""Append-only JSONL log of search runs: one header line, then one line per record."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from latticewalk.search.contracts import SearchRecord

SCHEMA_VERSION = 1
RUN_LOG_NAME = "run.jsonl"
# Sorts chronologically; microseconds separate saves made within one second.
RUN_ID_FORMAT = "%Y-%m-%dT%H-%M-%S-%fZ"


def create_run_folder(
    base_dir: Path, *, timestamp: str | None = None
) -> tuple[Path, Path]:
    """Create a fresh run folder; a taken name gets a ``-1``, ``-2``... suffix."""
    stem = timestamp or datetime.now(timezone.utc).strftime(RUN_ID_FORMAT)
    run_dir = base_dir / stem
    attempt = 0
    while run_dir.exists():
        attempt += 1
        run_dir = base_dir / f"{stem}-{attempt}"
    run_dir.mkdir(parents=True)
    return run_dir, run_dir / RUN_LOG_NAME


def write_header(path: Path, metadata: dict[str, Any]) -> None:
    _write_line(path, "header", metadata=metadata)


def append_result(path: Path, record: SearchRecord) -> None:
    _write_line(path, "result", record=record.model_dump(mode="json"))


def _write_line(path: Path, kind: str, **payload: Any) -> None:
    line = json.dumps(
        {"type": kind, "schema_version": SCHEMA_VERSION, **payload},
        separators=(",", ":"),
    )
    with path.open("a", encoding="utf-8") as handle:
        handle.write(line + "\n")
