"""Search core: graph stores, frontiers and traversals."""

from latticewalk.search.astar import PathFinder, a_star
from latticewalk.search.bfs import bfs
from latticewalk.search.contracts import (
    Algorithm,
    GraphSpec,
    GridSpec,
    PathResult,
    SearchRecord,
)
from latticewalk.search.dfs import DfsVariant, dfs, dfs_iterative, dfs_recursive
from latticewalk.search.errors import (
    InvalidEndpoint,
    OutOfRange,
    SearchError,
    Unreachable,
)
from latticewalk.search.frontier import (
    CostEntry,
    FifoFrontier,
    Frontier,
    LifoFrontier,
    MinCostFrontier,
)
from latticewalk.search.graph_store import AdjacencyGraph, Cell, Grid
from latticewalk.search.maze import bfs_path, dfs_path
from latticewalk.search.visited import VisitedSet

__all__ = [
    "AdjacencyGraph",
    "Algorithm",
    "Cell",
    "CostEntry",
    "DfsVariant",
    "FifoFrontier",
    "Frontier",
    "GraphSpec",
    "Grid",
    "GridSpec",
    "InvalidEndpoint",
    "LifoFrontier",
    "MinCostFrontier",
    "OutOfRange",
    "PathFinder",
    "PathResult",
    "SearchError",
    "SearchRecord",
    "Unreachable",
    "VisitedSet",
    "a_star",
    "bfs",
    "bfs_path",
    "dfs",
    "dfs_iterative",
    "dfs_path",
    "dfs_recursive",
]
