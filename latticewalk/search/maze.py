"""Uninformed path search on an occupancy grid."""

from __future__ import annotations

import logging

from latticewalk.search.astar import check_endpoints, reconstruct_path
from latticewalk.search.contracts import PathResult
from latticewalk.search.frontier import FifoFrontier, LifoFrontier
from latticewalk.search.graph_store import Cell, Grid
from latticewalk.search.visited import VisitedSet

logger = logging.getLogger(__name__)


def bfs_path(grid: Grid, start: Cell, goal: Cell) -> PathResult:
    """Shortest path by breadth-first expansion; cells are marked when enqueued."""
    start, goal = tuple(start), tuple(goal)
    check_endpoints(grid, start, goal)

    came_from: dict[Cell, Cell | None] = {start: None}
    expanded: list[Cell] = []
    frontier: FifoFrontier[Cell] = FifoFrontier()
    frontier.push(start)

    while not frontier.is_empty():
        current = frontier.pop()
        expanded.append(current)
        if current == goal:
            return PathResult(
                success=True,
                path=reconstruct_path(came_from, goal),
                expanded=expanded,
            )
        for neighbor in grid.neighbors(current):
            if neighbor in came_from:
                continue
            came_from[neighbor] = current
            frontier.push(neighbor)

    logger.debug("bfs path from %s to %s not found", start, goal)
    return PathResult(success=False, expanded=expanded)


def dfs_path(grid: Grid, start: Cell, goal: Cell) -> PathResult:
    """First path found depth-first; not necessarily the shortest."""
    start, goal = tuple(start), tuple(goal)
    check_endpoints(grid, start, goal)

    came_from: dict[Cell, Cell | None] = {}
    visited: VisitedSet[Cell] = VisitedSet()
    frontier: LifoFrontier[tuple[Cell, Cell | None]] = LifoFrontier()
    frontier.push((start, None))

    while not frontier.is_empty():
        current, parent = frontier.pop()
        if visited.is_visited(current):
            continue
        visited.mark_visited(current)
        came_from[current] = parent
        if current == goal:
            return PathResult(
                success=True,
                path=reconstruct_path(came_from, goal),
                expanded=list(visited),
            )
        # Reversed so the first move in neighbor order is explored first.
        for neighbor in reversed(list(grid.neighbors(current))):
            if not visited.is_visited(neighbor):
                frontier.push((neighbor, current))

    logger.debug("dfs path from %s to %s not found", start, goal)
    return PathResult(success=False, expanded=list(visited))
