import pytest

from latticewalk.search.graph_store import AdjacencyGraph, Grid

MAZE = [
    [0, 0, 1, 0],
    [1, 0, 0, 0],
    [1, 1, 0, 1],
    [0, 0, 0, 0],
]


@pytest.fixture
def fixture_graph() -> AdjacencyGraph:
    graph = AdjacencyGraph(4)
    for u, v in [(0, 1), (0, 2), (1, 2), (2, 0), (2, 3), (3, 3)]:
        graph.add_edge(u, v)
    return graph


@pytest.fixture
def square_graph() -> AdjacencyGraph:
    graph = AdjacencyGraph(4)
    for u, v in [(0, 1), (1, 2), (2, 3), (3, 0)]:
        graph.add_undirected_edge(u, v)
    return graph


@pytest.fixture
def maze_grid() -> Grid:
    return Grid.from_values(MAZE, free_value=0)

