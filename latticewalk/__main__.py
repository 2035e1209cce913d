"""Module entry point for `python -m latticewalk`."""

from __future__ import annotations

import argparse
from pathlib import Path

from pydantic import ValidationError
from rich.console import Console

from latticewalk import config
from latticewalk.app import (
    FIXTURE_START,
    build_fixture_graph,
    build_fixture_grid,
    record_run,
    run_search,
)
from latticewalk.db.run_log import RUN_LOG_NAME
from latticewalk.render.run_reader import latest_run_folder, read_results
from latticewalk.render.trace_app import run_trace_viewer
from latticewalk.render.viewer import render_record
from latticewalk.search.contracts import Algorithm
from latticewalk.search.errors import SearchError
from latticewalk.search.loader import ASCII_SUFFIXES, load_graph, load_grid, parse_cell

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)
    config.configure_logging(args.log_level)

    if args.replay is not None:
        _replay_run(args.replay, args.log_dir)
        return

    try:
        _run(args)
    except (SearchError, ValidationError, ValueError, FileNotFoundError) as exc:
        raise SystemExit(str(exc)) from exc


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run a Latticewalk graph or grid search.")
    parser.add_argument(
        "--algorithm",
        choices=[algorithm.value for algorithm in Algorithm],
        default=Algorithm.BFS.value,
        help="Search to run.",
    )
    parser.add_argument(
        "--graph",
        type=Path,
        default=None,
        help="JSON adjacency graph file (bfs, dfs, dfs-iterative).",
    )
    parser.add_argument(
        "--grid",
        type=Path,
        default=None,
        help="JSON or ASCII grid file (astar, bfs-path, dfs-path).",
    )
    parser.add_argument(
        "--fixture",
        action="store_true",
        help="Use the built-in demo graph or maze instead of a file.",
    )
    parser.add_argument("--start", default=None, help="Start node id or ROW,COL cell.")
    parser.add_argument("--goal", default=None, help="Goal ROW,COL cell (grid searches).")
    parser.add_argument(
        "--free-value",
        type=int,
        default=None,
        help=(
            "Grid value that marks a free cell in a JSON grid. Falls back to "
            "LATTICEWALK_FREE_VALUE, then the file's free_value, then 1. "
            "ASCII maps reject it."
        ),
    )
    parser.add_argument(
        "--view",
        action="store_true",
        help="Step through the grid search expansion in the trace viewer.",
    )
    parser.add_argument(
        "--save",
        action="store_true",
        help="Append the result to a new run folder.",
    )
    parser.add_argument(
        "--replay",
        type=Path,
        nargs="?",
        const=Path(),
        default=None,
        help="Render a saved run folder (defaults to latest).",
    )
    parser.add_argument(
        "--log-dir",
        type=Path,
        default=None,
        help="Base directory for run folders.",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level, case-insensitive (defaults to LATTICEWALK_LOG_LEVEL, else WARNING).",
    )
    return parser


def _run(args: argparse.Namespace) -> None:
    algorithm = Algorithm(args.algorithm)
    console = Console()
    graph = grid = None
    goal = None
    source = None

    if algorithm.on_grid:
        if args.fixture:
            grid = build_fixture_grid()
            start = parse_cell(args.start) if args.start else (0, 0)
            goal = parse_cell(args.goal) if args.goal else (grid.rows - 1, grid.cols - 1)
        else:
            if args.grid is None or args.start is None or args.goal is None:
                raise SystemExit(f"{algorithm.value} needs --grid, --start and --goal.")
            free_value = args.free_value
            if free_value is None and args.grid.suffix not in ASCII_SUFFIXES:
                free_value = config.free_value_override()
            grid = load_grid(args.grid, free_value=free_value)
            start = parse_cell(args.start)
            goal = parse_cell(args.goal)
            source = str(args.grid)
    else:
        if args.fixture:
            graph = build_fixture_graph()
            start = int(args.start) if args.start else FIXTURE_START
        else:
            if args.graph is None or args.start is None:
                raise SystemExit(f"{algorithm.value} needs --graph and --start.")
            graph = load_graph(args.graph)
            start = int(args.start)
            source = str(args.graph)

    record = run_search(
        algorithm, start=start, goal=goal, graph=graph, grid=grid, source=source
    )

    if args.view:
        if grid is None:
            raise SystemExit("--view only applies to grid searches.")
        run_trace_viewer(grid, record)
    else:
        console.print(render_record(record, grid=grid))

    if args.save:
        run_dir = record_run(args.log_dir or config.run_dir(), [record])
        console.print(f"Run saved to {run_dir}")


def _replay_run(run_folder: Path, log_dir: Path | None) -> None:
    if run_folder == Path():
        found = latest_run_folder(log_dir or config.run_dir())
        if found is None:
            raise SystemExit("No run folder found. Save a search first.")
        run_folder = found
    log_path = run_folder / RUN_LOG_NAME
    if not log_path.exists():
        raise SystemExit(f"No run log at {log_path}.")
    console = Console()
    for record in read_results(log_path):
        console.print(render_record(record))


if __name__ == "__main__":
    main()
