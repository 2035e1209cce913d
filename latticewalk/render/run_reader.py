"""Read run logs and yield SearchRecords."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterator

from pydantic import ValidationError

from latticewalk.search.contracts import SearchRecord

logger = logging.getLogger(__name__)


def read_results(path: Path) -> Iterator[SearchRecord]:
    with path.open("r", encoding="utf-8") as handle:
        for line_number, line in enumerate(handle, start=1):
            record = _parse_record(line)
            if not record:
                continue
            if record.get("type") != "result":
                continue
            payload = record.get("record")
            if payload is None:
                continue
            try:
                yield SearchRecord.model_validate(payload)
            except ValidationError as exc:
                logger.warning("Skipping invalid record on line %d of %s: %s", line_number, path, exc)


def latest_run_folder(base_dir: Path) -> Path | None:
    if not base_dir.exists():
        return None
    run_dirs = [path for path in base_dir.iterdir() if path.is_dir()]
    if not run_dirs:
        return None
    return sorted(run_dirs)[-1]


def _parse_record(line: str) -> dict | None:
    try:
        data = json.loads(line)
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None
