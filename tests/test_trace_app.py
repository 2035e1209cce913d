import pytest

from latticewalk.app import build_fixture_graph, build_fixture_grid, run_search
from latticewalk.render.trace_app import TraceController, frame_at, status_line


def test_controller_clamps_and_stops_at_end() -> None:
    controller = TraceController(total=3, playing=True)
    controller.step(-1)
    assert controller.index == 0

    controller.step(5)
    assert controller.index == 3
    assert controller.finished
    assert not controller.playing

    controller.reset()
    assert controller.index == 0
    assert not controller.finished


def test_frames_reveal_path_after_last_expansion() -> None:
    record = run_search("astar", start=(0, 0), goal=(3, 3), grid=build_fixture_grid())
    assert record.result is not None
    total = len(record.result.expanded)

    first = frame_at(record, 1)
    assert first.expanded == [(0, 0)]
    assert first.current == (0, 0)
    assert first.path == []

    empty = frame_at(record, 0)
    assert empty.current is None

    last = frame_at(record, total)
    assert last.path == record.result.path
    assert last.current == (3, 3)


def test_status_line_reports_outcome() -> None:
    record = run_search("bfs-path", start=(0, 0), goal=(3, 3), grid=build_fixture_grid())
    assert record.result is not None
    controller = TraceController(total=len(record.result.expanded))

    assert "expanded 0/" in status_line(record, controller).plain
    controller.step(controller.total)
    assert "cost 6" in status_line(record, controller).plain


def test_traversal_records_cannot_be_traced() -> None:
    record = run_search("dfs", start=0, graph=build_fixture_graph())
    with pytest.raises(ValueError):
        frame_at(record, 0)
