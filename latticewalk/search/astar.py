"""Grid-based pathfinding (A*)."""

from __future__ import annotations

import logging
import math

from latticewalk.search.contracts import PathResult
from latticewalk.search.errors import InvalidEndpoint, Unreachable
from latticewalk.search.frontier import CostEntry, MinCostFrontier
from latticewalk.search.graph_store import Cell, Grid
from latticewalk.search.visited import VisitedSet

logger = logging.getLogger(__name__)

STEP_COST = 1


class PathFinder:
    """A* over a 4-connected grid with unit step cost and Euclidean heuristic."""

    def __init__(self, grid: Grid) -> None:
        self._grid = grid

    def find_path(self, start: Cell, goal: Cell) -> PathResult:
        start, goal = tuple(start), tuple(goal)
        check_endpoints(self._grid, start, goal)

        records: dict[Cell, CostEntry[Cell]] = {
            start: CostEntry(node=start, g=0, h=self._heuristic(start, goal))
        }
        closed: VisitedSet[Cell] = VisitedSet()
        frontier: MinCostFrontier[Cell] = MinCostFrontier()
        frontier.push(records[start])

        while not frontier.is_empty():
            entry = frontier.pop()
            current = entry.node
            if closed.is_visited(current) or entry.g > records[current].g:
                continue
            closed.mark_visited(current)
            if current == goal:
                path = reconstruct_path(
                    {node: record.parent for node, record in records.items()}, goal
                )
                logger.debug(
                    "a* reached %s from %s, cost %s, %d expanded",
                    goal,
                    start,
                    entry.g,
                    len(closed),
                )
                return PathResult(success=True, path=path, expanded=list(closed))

            for neighbor in self._grid.neighbors(current):
                if closed.is_visited(neighbor):
                    continue
                tentative = entry.g + STEP_COST
                known = records.get(neighbor)
                if known is not None and tentative >= known.g:
                    continue
                record = CostEntry(
                    node=neighbor,
                    g=tentative,
                    h=self._heuristic(neighbor, goal),
                    parent=current,
                )
                records[neighbor] = record
                frontier.push(record)

        logger.debug("a* exhausted frontier from %s to %s after %d expansions", start, goal, len(closed))
        return PathResult(success=False, expanded=list(closed))

    @staticmethod
    def _heuristic(a: Cell, b: Cell) -> float:
        return math.hypot(a[0] - b[0], a[1] - b[1])


def a_star(grid: Grid, start: Cell, goal: Cell) -> list[Cell]:
    """Return the cells of a shortest path, raising ``Unreachable`` if none exists."""
    result = PathFinder(grid).find_path(start, goal)
    if not result.success:
        raise Unreachable(start, goal)
    return result.path


def check_endpoints(grid: Grid, start: Cell, goal: Cell) -> None:
    for label, cell in (("start", start), ("goal", goal)):
        if not grid.is_valid(*cell):
            raise InvalidEndpoint(f"The {label} {cell} is outside the grid.")
        if not grid.is_free(*cell):
            raise InvalidEndpoint(f"The {label} {cell} is blocked.")


def reconstruct_path(came_from: dict[Cell, Cell | None], goal: Cell) -> list[Cell]:
    path: list[Cell] = []
    current: Cell | None = goal
    while current is not None:
        path.append(current)
        current = came_from[current]
    path.reverse()
    return path
