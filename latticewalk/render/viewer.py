"""Rich viewer rendering for SearchRecord."""

from __future__ import annotations

from rich.columns import Columns
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from latticewalk.render.grid_map import render_grid_lines
from latticewalk.search.contracts import PathResult, SearchRecord
from latticewalk.search.graph_store import Grid


def render_record(record: SearchRecord, *, grid: Grid | None = None) -> RenderableType:
    header = Text(_title(record), style="bold")
    if record.result is None:
        return Panel(Group(header, _render_order(record.order or [])), title="Traversal")

    summary = Group(header, _render_path_summary(record.result))
    if grid is None:
        return Panel(summary, title="Path Search")
    lines = render_grid_lines(
        grid,
        path=record.result.path,
        expanded=record.result.expanded,
        start=record.start,
        goal=record.goal,
    )
    return Columns(
        [
            Panel(summary, title="Path Search"),
            Panel(Text("\n").join(lines), title="Grid"),
        ]
    )


def render_order(order: list[int]) -> Text:
    if not order:
        return Text("None")
    return Text(" ".join(str(node) for node in order))


def _render_order(order: list[int]) -> RenderableType:
    table = Table(title="Visit Order", show_header=True, header_style="bold")
    table.add_column("Step", justify="right")
    table.add_column("Node", justify="right")
    for step, node in enumerate(order, start=1):
        table.add_row(str(step), str(node))
    if not order:
        table.add_row("-", "None")
    return Group(table, render_order(order))


def _render_path_summary(result: PathResult) -> RenderableType:
    table = Table(show_header=False)
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("Found", "yes" if result.success else "no")
    table.add_row("Cost", str(result.cost) if result.cost is not None else "-")
    table.add_row("Expanded", str(len(result.expanded)))
    path = " ".join(f"({r},{c})" for r, c in result.path)
    table.add_row("Path", path or "None")
    return table


def _title(record: SearchRecord) -> str:
    if record.goal is None:
        return f"{record.algorithm.value} from {record.start}"
    return f"{record.algorithm.value} from {record.start} to {record.goal}"
