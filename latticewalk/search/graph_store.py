"""Graph stores: adjacency lists for traversal, occupancy grids for path search."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Sequence

from latticewalk.search.errors import OutOfRange

Cell = tuple[int, int]

# Row/col offsets in neighbor order: up, right, down, left.
MOVES: tuple[Cell, ...] = ((-1, 0), (0, 1), (1, 0), (0, -1))

FREE_TILES: set[str] = {
    ".",
    ",",
    ";",
    ":",
    "+",
    "=",
}


class AdjacencyGraph:
    """Directed graph over node ids ``0 <= id < node_count``."""

    def __init__(self, node_count: int) -> None:
        if node_count < 0:
            raise ValueError("node_count must be non-negative")
        self._adjacency: list[list[int]] = [[] for _ in range(node_count)]

    @property
    def node_count(self) -> int:
        return len(self._adjacency)

    @property
    def edge_count(self) -> int:
        return sum(len(neighbors) for neighbors in self._adjacency)

    def add_edge(self, u: int, v: int) -> None:
        self.validate_node(u)
        self.validate_node(v)
        self._adjacency[u].append(v)

    def add_undirected_edge(self, u: int, v: int) -> None:
        self.add_edge(u, v)
        self.add_edge(v, u)

    def neighbors(self, u: int) -> Sequence[int]:
        self.validate_node(u)
        return tuple(self._adjacency[u])

    def validate_node(self, node: int) -> None:
        if node not in self:
            raise OutOfRange(
                f"Node {node} is outside 0..{len(self._adjacency) - 1}."
            )


@dataclass(frozen=True)
class Grid:
    rows: int
    cols: int
    blocked: frozenset[Cell]

    @classmethod
    def from_values(cls, values: Sequence[Sequence[int]], *, free_value: int = 1) -> Grid:
        """Build a grid from an integer matrix where ``free_value`` marks open cells."""
        rows = len(values)
        cols = len(values[0]) if rows else 0
        blocked: set[Cell] = set()
        for r, row in enumerate(values):
            if len(row) != cols:
                raise ValueError(f"Row {r} has {len(row)} cells, expected {cols}.")
            for c, value in enumerate(row):
                if value != free_value:
                    blocked.add((r, c))
        return cls(rows=rows, cols=cols, blocked=frozenset(blocked))

    @classmethod
    def from_ascii(cls, lines: Sequence[str]) -> Grid:
        """Build a grid from a text map; walkable glyphs are in ``FREE_TILES``."""
        rows = len(lines)
        cols = max((len(line) for line in lines), default=0)
        blocked: set[Cell] = set()
        for r, line in enumerate(lines):
            padded = line.ljust(cols, "#")
            for c, ch in enumerate(padded):
                if ch not in FREE_TILES:
                    blocked.add((r, c))
        return cls(rows=rows, cols=cols, blocked=frozenset(blocked))

    def is_valid(self, r: int, c: int) -> bool:
        return 0 <= r < self.rows and 0 <= c < self.cols

    def is_free(self, r: int, c: int) -> bool:
        if not self.is_valid(r, c):
            raise OutOfRange(f"Cell {(r, c)} is outside {self.rows}x{self.cols}.")
        return (r, c) not in self.blocked

    def is_open(self, cell: Cell) -> bool:
        r, c = cell
        return self.is_valid(r, c) and (r, c) not in self.blocked

    def neighbors(self, cell: Cell) -> Iterator[Cell]:
        r, c = cell
        for dr, dc in MOVES:
            candidate = (r + dr, c + dc)
            if self.is_open(candidate):
                yield candidate
