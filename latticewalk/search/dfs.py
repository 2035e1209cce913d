"""Depth-first traversal, recursive and explicit-stack variants.

Both variants visit the same set of nodes. They differ in sibling order:
the recursive variant descends into neighbors in neighbor-list order, while
the iterative variant pushes every neighbor and pops the last one first, so
siblings are explored in reverse. Prefer the iterative variant on deep graphs;
the recursive one is bounded by ``sys.getrecursionlimit()``.
"""

from __future__ import annotations

import logging
from enum import Enum

from latticewalk.search.frontier import LifoFrontier
from latticewalk.search.graph_store import AdjacencyGraph
from latticewalk.search.visited import VisitedSet

logger = logging.getLogger(__name__)


class DfsVariant(str, Enum):
    RECURSIVE = "recursive"
    ITERATIVE = "iterative"


def dfs(
    graph: AdjacencyGraph,
    start: int,
    variant: DfsVariant = DfsVariant.RECURSIVE,
) -> list[int]:
    variant = DfsVariant(variant)
    if variant == DfsVariant.ITERATIVE:
        return dfs_iterative(graph, start)
    return dfs_recursive(graph, start)


def dfs_recursive(graph: AdjacencyGraph, start: int) -> list[int]:
    graph.validate_node(start)
    visited: VisitedSet[int] = VisitedSet()
    order: list[int] = []

    def _visit(node: int) -> None:
        visited.mark_visited(node)
        order.append(node)
        for neighbor in graph.neighbors(node):
            if not visited.is_visited(neighbor):
                _visit(neighbor)

    _visit(start)
    logger.debug("recursive dfs from %s visited %d nodes", start, len(order))
    return order


def dfs_iterative(graph: AdjacencyGraph, start: int) -> list[int]:
    graph.validate_node(start)
    visited: VisitedSet[int] = VisitedSet()
    frontier: LifoFrontier[int] = LifoFrontier()
    frontier.push(start)
    order: list[int] = []

    while not frontier.is_empty():
        node = frontier.pop()
        if visited.is_visited(node):
            continue
        visited.mark_visited(node)
        order.append(node)
        for neighbor in graph.neighbors(node):
            frontier.push(neighbor)

    logger.debug("iterative dfs from %s visited %d nodes", start, len(order))
    return order
