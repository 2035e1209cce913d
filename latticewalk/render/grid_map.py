"""Shared helpers for rendering grids, paths and viewports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from rich.text import Text

from latticewalk.search.graph_store import Cell, Grid

BLOCKED_GLYPH = "#"
FREE_GLYPH = "."
EXPANDED_GLYPH = "o"
PATH_GLYPH = "*"
START_GLYPH = "S"
GOAL_GLYPH = "G"

TILE_STYLES = {
    BLOCKED_GLYPH: "bright_magenta",
    FREE_GLYPH: "grey70",
    EXPANDED_GLYPH: "blue",
    PATH_GLYPH: "bold yellow",
    START_GLYPH: "bold bright_green",
    GOAL_GLYPH: "bold red",
}

CURSOR_STYLE = "reverse"


@dataclass(frozen=True)
class Viewport:
    row: int
    col: int
    height: int
    width: int


def compute_viewport(
    grid_rows: int,
    grid_cols: int,
    view_height: int,
    view_width: int,
    *,
    center: Cell | None = None,
) -> Viewport:
    view_height = max(1, min(grid_rows, view_height))
    view_width = max(1, min(grid_cols, view_width))

    if center is not None:
        origin_row = center[0] - view_height // 2
        origin_col = center[1] - view_width // 2
    else:
        origin_row, origin_col = 0, 0

    origin_row = _clamp(origin_row, 0, max(0, grid_rows - view_height))
    origin_col = _clamp(origin_col, 0, max(0, grid_cols - view_width))
    return Viewport(row=origin_row, col=origin_col, height=view_height, width=view_width)


def render_grid_lines(
    grid: Grid,
    *,
    path: Iterable[Cell] = (),
    expanded: Iterable[Cell] = (),
    start: Cell | None = None,
    goal: Cell | None = None,
    cursor: Cell | None = None,
    viewport: Viewport | None = None,
) -> list[Text]:
    cells = [
        [
            BLOCKED_GLYPH if (r, c) in grid.blocked else FREE_GLYPH
            for c in range(grid.cols)
        ]
        for r in range(grid.rows)
    ]
    for cell in expanded:
        _place(cells, cell, EXPANDED_GLYPH)
    for cell in path:
        _place(cells, cell, PATH_GLYPH)
    if start is not None:
        _place(cells, start, START_GLYPH)
    if goal is not None:
        _place(cells, goal, GOAL_GLYPH)

    viewport = viewport or Viewport(row=0, col=0, height=grid.rows, width=grid.cols)
    lines: list[Text] = []
    for r in range(viewport.row, viewport.row + viewport.height):
        line = Text()
        for c in range(viewport.col, viewport.col + viewport.width):
            glyph = cells[r][c]
            style = CURSOR_STYLE if cursor == (r, c) else TILE_STYLES[glyph]
            line.append(glyph, style=style)
        lines.append(line)
    return lines


def _place(cells: list[list[str]], cell: Cell, glyph: str) -> None:
    r, c = cell
    if 0 <= r < len(cells) and 0 <= c < len(cells[r]):
        cells[r][c] = glyph


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))
