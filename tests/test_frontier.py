import pytest

from latticewalk.search.frontier import (
    CostEntry,
    FifoFrontier,
    LifoFrontier,
    MinCostFrontier,
)
from latticewalk.search.visited import VisitedSet


def test_fifo_and_lifo_disciplines() -> None:
    fifo: FifoFrontier[int] = FifoFrontier()
    lifo: LifoFrontier[int] = LifoFrontier()
    for item in (1, 2, 3):
        fifo.push(item)
        lifo.push(item)

    assert fifo.peek() == 1
    assert lifo.peek() == 3
    assert [fifo.pop() for _ in range(3)] == [1, 2, 3]
    assert [lifo.pop() for _ in range(3)] == [3, 2, 1]
    assert fifo.is_empty() and lifo.is_empty()


def test_empty_frontier_pop_raises() -> None:
    for frontier in (FifoFrontier(), LifoFrontier(), MinCostFrontier()):
        assert len(frontier) == 0
        with pytest.raises(IndexError):
            frontier.pop()
        with pytest.raises(IndexError):
            frontier.peek()


def test_min_cost_orders_by_f_then_h_then_insertion() -> None:
    frontier: MinCostFrontier[str] = MinCostFrontier()
    frontier.push(CostEntry(node="late", g=3, h=1))
    frontier.push(CostEntry(node="far", g=1, h=3))
    frontier.push(CostEntry(node="near", g=3, h=1))
    frontier.push(CostEntry(node="cheap", g=1, h=1))

    assert frontier.peek().node == "cheap"
    popped = [frontier.pop().node for _ in range(len(frontier))]
    assert popped == ["cheap", "late", "near", "far"]


def test_min_cost_keeps_duplicate_entries() -> None:
    frontier: MinCostFrontier[str] = MinCostFrontier()
    frontier.push(CostEntry(node="a", g=5, h=0))
    frontier.push(CostEntry(node="a", g=2, h=0, parent="b"))

    first = frontier.pop()
    assert (first.node, first.g, first.parent) == ("a", 2, "b")
    assert frontier.pop().g == 5


def test_min_cost_rejects_negative_costs() -> None:
    frontier: MinCostFrontier[str] = MinCostFrontier()
    with pytest.raises(ValueError):
        frontier.push(CostEntry(node="a", g=-1, h=0))


def test_visited_set_is_monotonic_and_ordered() -> None:
    visited: VisitedSet[int] = VisitedSet()
    for node in (3, 1, 3, 2):
        visited.mark_visited(node)

    assert visited.is_visited(1)
    assert 4 not in visited
    assert len(visited) == 3
    assert list(visited) == [3, 1, 2]
