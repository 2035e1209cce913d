import json
import logging
from pathlib import Path

import pytest

from latticewalk.__main__ import main
from latticewalk.db.run_log import RUN_LOG_NAME


def test_fixture_bfs_prints_order(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--algorithm", "bfs", "--fixture"])
    output = capsys.readouterr().out
    assert "2 0 3 1" in output


def test_fixture_iterative_dfs_prints_order(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--algorithm", "dfs-iterative", "--fixture"])
    output = capsys.readouterr().out
    assert "2 3 0 1" in output


def test_graph_file_search_saves_run(tmp_path: Path) -> None:
    graph_path = tmp_path / "graph.json"
    graph_path.write_text(
        json.dumps({"node_count": 3, "edges": [[0, 1], [1, 2]]}), encoding="utf-8"
    )
    runs = tmp_path / "runs"

    main(
        [
            "--algorithm",
            "dfs",
            "--graph",
            str(graph_path),
            "--start",
            "0",
            "--save",
            "--log-dir",
            str(runs),
        ]
    )

    (run_dir,) = list(runs.iterdir())
    lines = (run_dir / RUN_LOG_NAME).read_text(encoding="utf-8").splitlines()
    record = json.loads(lines[-1])["record"]
    assert record["order"] == [0, 1, 2]
    assert record["source"] == str(graph_path)


def test_grid_file_search_and_replay(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    grid_path = tmp_path / "maze.txt"
    grid_path.write_text("...\n##.\n...\n", encoding="utf-8")
    runs = tmp_path / "runs"

    main(
        [
            "--algorithm",
            "astar",
            "--grid",
            str(grid_path),
            "--start",
            "0,0",
            "--goal",
            "2,0",
            "--save",
            "--log-dir",
            str(runs),
        ]
    )
    capsys.readouterr()

    main(["--replay", "--log-dir", str(runs)])
    output = capsys.readouterr().out
    assert "astar from (0, 0) to (2, 0)" in output
    assert "Found" in output


def test_invalid_endpoint_exits(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--algorithm", "astar", "--fixture", "--start", "0,2"])
    assert "blocked" in str(excinfo.value)


def test_missing_inputs_exit() -> None:
    with pytest.raises(SystemExit):
        main(["--algorithm", "bfs"])
    with pytest.raises(SystemExit):
        main(["--algorithm", "bfs", "--fixture", "--view"])


def test_log_level_is_case_insensitive(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--algorithm", "bfs", "--fixture", "--log-level", "debug"])
    assert logging.getLogger().level == logging.DEBUG
    assert "2 0 3 1" in capsys.readouterr().out

    with pytest.raises(SystemExit):
        main(["--algorithm", "bfs", "--fixture", "--log-level", "chatty"])


def test_free_value_flag_rejected_for_ascii_map(tmp_path: Path) -> None:
    grid_path = tmp_path / "maze.txt"
    grid_path.write_text("..\n..\n", encoding="utf-8")
    args = ["--algorithm", "astar", "--grid", str(grid_path), "--start", "0,0", "--goal", "1,1"]

    with pytest.raises(SystemExit) as excinfo:
        main([*args, "--free-value", "0"])
    assert "ASCII" in str(excinfo.value)


def test_free_value_env_skips_ascii_map(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
) -> None:
    monkeypatch.setenv("LATTICEWALK_FREE_VALUE", "0")
    grid_path = tmp_path / "maze.txt"
    grid_path.write_text("..\n..\n", encoding="utf-8")

    main(["--algorithm", "astar", "--grid", str(grid_path), "--start", "0,0", "--goal", "1,1"])
    assert "Found" in capsys.readouterr().out
