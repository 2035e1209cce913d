"""Frontier disciplines shared by the traversals and path searches."""

from __future__ import annotations

import heapq
from collections import deque
from dataclasses import dataclass
from typing import Generic, Hashable, Protocol, TypeVar

ItemT = TypeVar("ItemT")
NodeT = TypeVar("NodeT", bound=Hashable)


class Frontier(Protocol[ItemT]):
    def push(self, item: ItemT) -> None: ...

    def pop(self) -> ItemT: ...

    def peek(self) -> ItemT: ...

    def is_empty(self) -> bool: ...

    def __len__(self) -> int: ...


class FifoFrontier(Generic[ItemT]):
    """Queue discipline: earliest pushed pops first."""

    def __init__(self) -> None:
        self._items: deque[ItemT] = deque()

    def push(self, item: ItemT) -> None:
        self._items.append(item)

    def pop(self) -> ItemT:
        if not self._items:
            raise IndexError("pop from empty frontier")
        return self._items.popleft()

    def peek(self) -> ItemT:
        if not self._items:
            raise IndexError("peek at empty frontier")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class LifoFrontier(Generic[ItemT]):
    """Stack discipline: most recently pushed pops first."""

    def __init__(self) -> None:
        self._items: list[ItemT] = []

    def push(self, item: ItemT) -> None:
        self._items.append(item)

    def pop(self) -> ItemT:
        if not self._items:
            raise IndexError("pop from empty frontier")
        return self._items.pop()

    def peek(self) -> ItemT:
        if not self._items:
            raise IndexError("peek at empty frontier")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


@dataclass(frozen=True)
class CostEntry(Generic[NodeT]):
    """Snapshot of a node's cost record at the time it was pushed."""

    node: NodeT
    g: float
    h: float
    parent: NodeT | None = None

    @property
    def f(self) -> float:
        return self.g + self.h


class MinCostFrontier(Generic[NodeT]):
    """Pops the entry with the smallest f, then smallest h, then oldest.

    Pushing a node again does not remove its older entry; callers discard
    stale entries on pop by comparing against their own cost records.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, float, int, CostEntry[NodeT]]] = []
        self._counter = 0

    def push(self, item: CostEntry[NodeT]) -> None:
        if item.g < 0 or item.h < 0:
            raise ValueError("g and h must be non-negative")
        heapq.heappush(self._heap, (item.f, item.h, self._counter, item))
        self._counter += 1

    def pop(self) -> CostEntry[NodeT]:
        if not self._heap:
            raise IndexError("pop from empty frontier")
        return heapq.heappop(self._heap)[3]

    def peek(self) -> CostEntry[NodeT]:
        if not self._heap:
            raise IndexError("peek at empty frontier")
        return self._heap[0][3]

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
