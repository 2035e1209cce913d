"""Per-call visited/closed set."""

from __future__ import annotations

from typing import Generic, Hashable, Iterator, TypeVar

NodeT = TypeVar("NodeT", bound=Hashable)


class VisitedSet(Generic[NodeT]):
    """Grows monotonically; iteration follows marking order."""

    def __init__(self) -> None:
        self._marked: dict[NodeT, None] = {}

    def mark_visited(self, node: NodeT) -> None:
        self._marked.setdefault(node, None)

    def is_visited(self, node: NodeT) -> bool:
        return node in self._marked

    def __contains__(self, node: object) -> bool:
        return node in self._marked

    def __len__(self) -> int:
        return len(self._marked)

    def __iter__(self) -> Iterator[NodeT]:
        return iter(self._marked)
