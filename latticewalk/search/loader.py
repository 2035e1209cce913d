"""Load graphs and grids from JSON or ASCII map files."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from latticewalk.search.contracts import GraphSpec, GridSpec
from latticewalk.search.graph_store import AdjacencyGraph, Cell, Grid

logger = logging.getLogger(__name__)

ASCII_SUFFIXES = {".txt", ".map"}


def load_graph(path: Path) -> AdjacencyGraph:
    graph = GraphSpec.model_validate(_load_json(path)).to_graph()
    logger.debug("Loaded %s: %d nodes, %d edges", path, graph.node_count, graph.edge_count)
    return graph


def load_grid(path: Path, *, free_value: int | None = None) -> Grid:
    """Load a grid; ``free_value`` overrides the value declared in a JSON file.

    ASCII maps mark walls with ``#`` and have no cell values, so passing
    ``free_value`` for one raises ``ValueError``.
    """
    if path.suffix in ASCII_SUFFIXES:
        if free_value is not None:
            raise ValueError(f"free_value does not apply to ASCII map {path}.")
        return Grid.from_ascii(_read_lines(path))
    data = _load_json(path)
    if free_value is not None:
        data["free_value"] = free_value
    return GridSpec.model_validate(data).to_grid()


def parse_cell(text: str) -> Cell:
    parts = [part.strip() for part in text.split(",")]
    if len(parts) != 2:
        raise ValueError(f"Expected a cell as ROW,COL, got {text!r}.")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise ValueError(f"Expected integer ROW,COL, got {text!r}.") from exc


def _read_lines(path: Path) -> list[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing map file: {path}") from exc
    lines = [line.rstrip("\n") for line in text.splitlines()]
    while lines and not lines[-1].strip():
        lines.pop()
    if not lines:
        raise ValueError(f"Map file {path} is empty.")
    return lines


def _load_json(path: Path) -> dict:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise FileNotFoundError(f"Missing input file: {path}") from exc
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Input file {path} must contain a JSON object.")
    return data
