from rich.console import Console

from latticewalk.app import build_fixture_graph, build_fixture_grid, run_search
from latticewalk.render.grid_map import compute_viewport, render_grid_lines
from latticewalk.render.viewer import render_record
from latticewalk.search.graph_store import Grid


def test_render_traversal_record() -> None:
    record = run_search("bfs", start=2, graph=build_fixture_graph())

    output = _export(render_record(record))
    assert "bfs from 2" in output
    assert "Visit Order" in output
    assert "2 0 3 1" in output


def test_render_path_record_with_grid() -> None:
    grid = build_fixture_grid()
    record = run_search("astar", start=(0, 0), goal=(3, 3), grid=grid)

    output = _export(render_record(record, grid=grid))
    assert "astar from (0, 0) to (3, 3)" in output
    assert "Found" in output
    assert "yes" in output
    assert "S*#." in output
    assert "##*#" in output
    assert "..*G" in output


def test_render_unreachable_without_grid() -> None:
    grid = Grid.from_ascii([".#."])
    record = run_search("bfs-path", start=(0, 0), goal=(0, 2), grid=grid)

    output = _export(render_record(record))
    assert "Path Search" in output
    assert "no" in output
    assert "None" in output


def test_grid_lines_mark_expanded_cells() -> None:
    grid = build_fixture_grid()
    lines = render_grid_lines(grid, expanded=[(0, 0), (0, 1)], start=(0, 0))
    assert [line.plain for line in lines] == ["So#.", "#...", "##.#", "...."]


def test_viewport_is_clamped_to_grid() -> None:
    viewport = compute_viewport(10, 20, 4, 6, center=(9, 0))
    assert (viewport.row, viewport.col) == (6, 0)
    assert (viewport.height, viewport.width) == (4, 6)

    viewport = compute_viewport(3, 3, 10, 10)
    assert (viewport.height, viewport.width) == (3, 3)


def _export(renderable) -> str:
    console = Console(width=100, record=True)
    console.print(renderable)
    return console.export_text()
