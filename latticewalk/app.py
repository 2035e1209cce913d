"""Application entry for running a search and recording it."""

from __future__ import annotations

import logging
from pathlib import Path

from latticewalk.db.run_log import append_result, create_run_folder, write_header
from latticewalk.search.astar import PathFinder
from latticewalk.search.bfs import bfs
from latticewalk.search.contracts import Algorithm, SearchRecord
from latticewalk.search.dfs import DfsVariant, dfs
from latticewalk.search.graph_store import AdjacencyGraph, Cell, Grid
from latticewalk.search.maze import bfs_path, dfs_path

logger = logging.getLogger(__name__)

FIXTURE_EDGES = [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]
FIXTURE_START = 2

FIXTURE_MAZE = [
    [0, 0, 1, 0],
    [1, 0, 0, 0],
    [1, 1, 0, 1],
    [0, 0, 0, 0],
]
FIXTURE_MAZE_FREE_VALUE = 0


def build_fixture_graph() -> AdjacencyGraph:
    graph = AdjacencyGraph(4)
    for u, v in FIXTURE_EDGES:
        graph.add_edge(u, v)
    return graph


def build_fixture_grid() -> Grid:
    return Grid.from_values(FIXTURE_MAZE, free_value=FIXTURE_MAZE_FREE_VALUE)


def run_search(
    algorithm: Algorithm | str,
    *,
    start: int | Cell,
    goal: Cell | None = None,
    graph: AdjacencyGraph | None = None,
    grid: Grid | None = None,
    source: str | None = None,
) -> SearchRecord:
    algorithm = Algorithm(algorithm)
    if algorithm.on_grid:
        if grid is None or goal is None:
            raise ValueError(f"{algorithm.value} needs a grid and a goal.")
        if isinstance(start, int):
            raise ValueError(f"{algorithm.value} starts from a ROW,COL cell.")
        if algorithm == Algorithm.ASTAR:
            result = PathFinder(grid).find_path(start, goal)
        elif algorithm == Algorithm.BFS_PATH:
            result = bfs_path(grid, start, goal)
        else:
            result = dfs_path(grid, start, goal)
        logger.info(
            "%s %s -> %s: %s",
            algorithm.value,
            start,
            goal,
            f"cost {result.cost}" if result.success else "unreachable",
        )
        return SearchRecord(
            algorithm=algorithm, source=source, start=start, goal=goal, result=result
        )

    if graph is None:
        raise ValueError(f"{algorithm.value} needs a graph.")
    if not isinstance(start, int):
        raise ValueError(f"{algorithm.value} starts from a node id.")
    if algorithm == Algorithm.BFS:
        order = bfs(graph, start)
    else:
        variant = (
            DfsVariant.ITERATIVE
            if algorithm == Algorithm.DFS_ITERATIVE
            else DfsVariant.RECURSIVE
        )
        order = dfs(graph, start, variant)
    logger.info(
        "%s from %s visited %d of %d nodes",
        algorithm.value,
        start,
        len(order),
        graph.node_count,
    )
    return SearchRecord(algorithm=algorithm, source=source, start=start, order=order)


def record_run(base_dir: Path, records: list[SearchRecord]) -> Path:
    run_dir, log_path = create_run_folder(base_dir)
    write_header(
        log_path,
        metadata={
            "run_id": run_dir.name,
            "created_at": run_dir.name,
            "records": len(records),
        },
    )
    for record in records:
        append_result(log_path, record)
    return run_dir
