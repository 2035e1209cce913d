"""Error kinds raised by the search core."""

from __future__ import annotations


class SearchError(Exception):
    """Base class for search core errors."""


class OutOfRange(SearchError, IndexError):
    """A node id or grid cell lies outside the store's declared bounds."""


class InvalidEndpoint(SearchError, ValueError):
    """A path search start or goal is out of bounds or blocked."""


class Unreachable(SearchError, LookupError):
    """The frontier was exhausted before the goal was reached."""

    def __init__(self, start: object, goal: object) -> None:
        super().__init__(f"No path from {start} to {goal}.")
        self.start = start
        self.goal = goal
