"""Data contracts for search inputs, results and logged runs."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator

from latticewalk.config import DEFAULT_FREE_VALUE
from latticewalk.search.graph_store import AdjacencyGraph, Cell, Grid


class Algorithm(str, Enum):
    BFS = "bfs"
    DFS = "dfs"
    DFS_ITERATIVE = "dfs-iterative"
    ASTAR = "astar"
    BFS_PATH = "bfs-path"
    DFS_PATH = "dfs-path"

    @property
    def on_grid(self) -> bool:
        return self in {Algorithm.ASTAR, Algorithm.BFS_PATH, Algorithm.DFS_PATH}


class PathResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    success: bool
    path: list[Cell] = Field(default_factory=list)
    expanded: list[Cell] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_result(self) -> "PathResult":
        if self.success and not self.path:
            raise ValueError("successful result requires a path")
        if not self.success and self.path:
            raise ValueError("failed result cannot carry a path")
        return self

    @property
    def cost(self) -> int | None:
        if not self.success:
            return None
        return len(self.path) - 1


class GraphSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    node_count: int = Field(ge=0)
    directed: bool = True
    edges: list[tuple[int, int]] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_edges(self) -> "GraphSpec":
        for u, v in self.edges:
            if not (0 <= u < self.node_count and 0 <= v < self.node_count):
                raise ValueError(f"edge ({u}, {v}) references a node outside 0..{self.node_count - 1}")
        return self

    def to_graph(self) -> AdjacencyGraph:
        graph = AdjacencyGraph(self.node_count)
        for u, v in self.edges:
            if self.directed:
                graph.add_edge(u, v)
            else:
                graph.add_undirected_edge(u, v)
        return graph


class GridSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    rows: list[list[int]]
    free_value: int = DEFAULT_FREE_VALUE

    @model_validator(mode="after")
    def validate_rows(self) -> "GridSpec":
        if not self.rows or not self.rows[0]:
            raise ValueError("grid must have at least one cell")
        width = len(self.rows[0])
        if any(len(row) != width for row in self.rows):
            raise ValueError("grid rows must all have the same length")
        return self

    def to_grid(self) -> Grid:
        return Grid.from_values(self.rows, free_value=self.free_value)


class SearchRecord(BaseModel):
    """One search run as written to the run log."""

    model_config = ConfigDict(extra="forbid")

    algorithm: Algorithm
    source: str | None = None
    start: int | Cell
    goal: Cell | None = None
    order: list[int] | None = None
    result: PathResult | None = None

    @model_validator(mode="after")
    def validate_record(self) -> "SearchRecord":
        if self.algorithm.on_grid:
            if self.result is None or self.order is not None:
                raise ValueError(f"{self.algorithm.value} records carry a path result only")
            if self.goal is None or isinstance(self.start, int):
                raise ValueError(f"{self.algorithm.value} records require cell endpoints")
        elif self.order is None or self.result is not None:
            raise ValueError(f"{self.algorithm.value} records carry a visit order only")
        elif not isinstance(self.start, int):
            raise ValueError(f"{self.algorithm.value} records start from a node id")
        return self
