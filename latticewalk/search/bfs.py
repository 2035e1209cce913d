"""Breadth-first traversal over an adjacency graph."""

from __future__ import annotations

import logging

from latticewalk.search.frontier import FifoFrontier
from latticewalk.search.graph_store import AdjacencyGraph
from latticewalk.search.visited import VisitedSet

logger = logging.getLogger(__name__)


def bfs(graph: AdjacencyGraph, start: int) -> list[int]:
    """Return nodes reachable from ``start`` in level order.

    Nodes are marked when enqueued, so each one is queued at most once.
    Within a level, order follows each parent's neighbor order.
    """
    graph.validate_node(start)
    visited: VisitedSet[int] = VisitedSet()
    frontier: FifoFrontier[int] = FifoFrontier()

    visited.mark_visited(start)
    frontier.push(start)
    order: list[int] = []

    while not frontier.is_empty():
        node = frontier.pop()
        order.append(node)
        for neighbor in graph.neighbors(node):
            if visited.is_visited(neighbor):
                continue
            visited.mark_visited(neighbor)
            frontier.push(neighbor)

    logger.debug("bfs from %s visited %d of %d nodes", start, len(order), graph.node_count)
    return order
