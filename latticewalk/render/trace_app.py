"""Textual viewer that steps through the expansion order of a grid search."""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Group, RenderableType
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widget import Widget
from textual.widgets import Footer, Static

from latticewalk.config import TRACE_STEP_DELAY
from latticewalk.render.grid_map import compute_viewport, render_grid_lines
from latticewalk.search.contracts import SearchRecord
from latticewalk.search.graph_store import Cell, Grid


@dataclass
class TraceController:
    total: int
    index: int = 0
    playing: bool = False

    @property
    def finished(self) -> bool:
        return self.index >= self.total

    def step(self, delta: int = 1) -> None:
        self.index = max(0, min(self.total, self.index + delta))
        if self.finished:
            self.playing = False

    def reset(self) -> None:
        self.index = 0
        self.playing = False


@dataclass(frozen=True)
class TraceFrame:
    expanded: list[Cell]
    path: list[Cell]
    current: Cell | None


def frame_at(record: SearchRecord, index: int) -> TraceFrame:
    """Cells to draw after ``index`` expansions; the path appears once all are shown."""
    if record.result is None:
        raise ValueError("Only path search records can be traced.")
    expanded = record.result.expanded[:index]
    done = index >= len(record.result.expanded)
    return TraceFrame(
        expanded=expanded,
        path=record.result.path if done else [],
        current=expanded[-1] if expanded else None,
    )


class GridWidget(Widget):
    def __init__(self, grid: Grid, record: SearchRecord, controller: TraceController) -> None:
        super().__init__()
        self._grid = grid
        self._record = record
        self._controller = controller

    def render(self) -> RenderableType:
        frame = frame_at(self._record, self._controller.index)
        viewport = compute_viewport(
            self._grid.rows,
            self._grid.cols,
            self.content_size.height or self._grid.rows,
            self.content_size.width or self._grid.cols,
            center=frame.current,
        )
        lines = render_grid_lines(
            self._grid,
            path=frame.path,
            expanded=frame.expanded,
            start=self._record.start,
            goal=self._record.goal,
            cursor=frame.current,
            viewport=viewport,
        )
        return Group(*lines)


class TraceScreen(Screen):
    BINDINGS = [
        Binding("n", "step(1)", "Step"),
        Binding("p", "step(-1)", "Back"),
        Binding("space", "toggle_play", "Play/Pause"),
        Binding("r", "restart", "Restart"),
        Binding("q", "app.quit", "Quit"),
    ]

    def __init__(self, grid: Grid, record: SearchRecord, *, step_delay: float = TRACE_STEP_DELAY) -> None:
        super().__init__()
        if record.result is None:
            raise ValueError("Only path search records can be traced.")
        self._record = record
        self._controller = TraceController(total=len(record.result.expanded))
        self._grid_widget = GridWidget(grid, record, self._controller)
        self._status = Static()
        self._step_delay = step_delay

    def compose(self) -> ComposeResult:
        yield self._status
        yield self._grid_widget
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_view()
        self.set_interval(self._step_delay, self._advance)

    def action_step(self, delta: int) -> None:
        self._controller.playing = False
        self._controller.step(delta)
        self._refresh_view()

    def action_toggle_play(self) -> None:
        self._controller.playing = not self._controller.playing

    def action_restart(self) -> None:
        self._controller.reset()
        self._refresh_view()

    def _advance(self) -> None:
        if not self._controller.playing:
            return
        self._controller.step()
        self._refresh_view()

    def _refresh_view(self) -> None:
        self._status.update(status_line(self._record, self._controller))
        self._grid_widget.refresh()


def status_line(record: SearchRecord, controller: TraceController) -> Text:
    text = Text(f"{record.algorithm.value} ", style="bold")
    text.append(f"expanded {controller.index}/{controller.total}")
    if controller.finished and record.result is not None:
        outcome = f"cost {record.result.cost}" if record.result.success else "unreachable"
        text.append(f" | {outcome}")
    return text


class TraceApp(App):
    """Run a single trace screen in a minimal Textual app."""

    def __init__(self, screen: Screen, *, title: str = "Latticewalk") -> None:
        super().__init__()
        self._initial_screen = screen
        self.title = title

    def on_mount(self) -> None:
        self.push_screen(self._initial_screen)


def run_trace_viewer(grid: Grid, record: SearchRecord) -> None:
    TraceApp(TraceScreen(grid, record)).run()
