"""Shared test fixtures."""

from typing import Dict, List, Tuple

import pytest

GRID_WEIGHTS = {
    0: 1, 1: 7, 2: 3, 3: 7,
    4: 1, 5: 9, 6: 14, 7: 6,
    8: 1, 9: 1, 10: 4, 11: 3,
    12: 5, 13: 8, 14: 9, 15: 4,
}  # fmt: skip


def make_grid(size: int, weights: Dict[int, float]) -> Dict[int, Tuple[List[Tuple[int, float]], float]]:
    """Square grid with unit distances; neighbors listed up, down, left, right."""
    graph = {}
    for row in range(size):
        for col in range(size):
            neighbors = []
            for d_row, d_col in ((-1, 0), (1, 0), (0, -1), (0, 1)):
                r, c = row + d_row, col + d_col
                if 0 <= r < size and 0 <= c < size:
                    neighbors.append((r * size + c, 1.0))
            node = row * size + col
            graph[node] = (neighbors, weights[node])
    return graph


@pytest.fixture
def triangle_graph():
    """
    Fixture providing the directed triangle example:
        S --22--> O1 --4--> E
        S --5---> O2 --20-> E
    Weights: S=1, O1=4, O2=1, E=2
    """
    return {
        "S": ([("O1", 22.0), ("O2", 5.0)], 1.0),
        "O1": ([("E", 4.0)], 4.0),
        "O2": ([("E", 20.0)], 1.0),
        "E": ([], 2.0),
    }


@pytest.fixture
def grid_graph():
    """Fixture providing the weighted 4x4 grid (nodes 0-15, row-major)."""
    return make_grid(4, GRID_WEIGHTS)


def hexagon_graph(corner_weight: float):
    """4x4 hexagonal layout keyed by (column, row); (3, 0) carries corner_weight."""
    return {
        (0, 0): ([((0, 1), 1.0), ((1, 0), 1.0)], 1.0),
        (0, 1): ([((0, 2), 1.0), ((1, 1), 1.0), ((1, 0), 1.0), ((0, 0), 1.0)], 1.0),
        (0, 2): ([((0, 3), 1.0), ((1, 2), 1.0), ((1, 1), 1.0), ((0, 1), 1.0)], 1.0),
        (0, 3): ([((1, 3), 1.0), ((1, 2), 1.0), ((0, 2), 1.0)], 3.0),
        (1, 0): ([((1, 1), 1.0), ((2, 1), 1.0), ((2, 0), 1.0), ((0, 0), 1.0), ((0, 1), 1.0)], 2.0),
        (1, 1): (
            [((1, 2), 1.0), ((2, 2), 1.0), ((2, 1), 1.0), ((1, 0), 1.0), ((0, 1), 1.0), ((0, 2), 1.0)],
            9.0,
        ),
        (1, 2): (
            [((1, 3), 1.0), ((2, 3), 1.0), ((2, 2), 1.0), ((1, 1), 1.0), ((0, 2), 1.0), ((0, 3), 1.0)],
            4.0,
        ),
        (1, 3): ([((2, 3), 1.0), ((1, 2), 1.0), ((0, 3), 1.0)], 2.0),
        (2, 0): ([((2, 1), 1.0), ((3, 0), 1.0), ((1, 0), 1.0)], 2.0),
        (2, 1): (
            [((2, 2), 1.0), ((3, 1), 1.0), ((3, 0), 1.0), ((2, 0), 1.0), ((1, 0), 1.0), ((1, 1), 1.0)],
            6.0,
        ),
        (2, 2): (
            [((2, 3), 1.0), ((3, 2), 1.0), ((3, 1), 1.0), ((2, 1), 1.0), ((1, 1), 1.0), ((1, 2), 1.0)],
            8.0,
        ),
        (2, 3): ([((3, 3), 1.0), ((3, 2), 1.0), ((2, 2), 1.0), ((1, 2), 1.0), ((1, 3), 1.0)], 9.0),
        (3, 0): ([((3, 1), 1.0), ((2, 0), 1.0), ((2, 1), 1.0)], corner_weight),
        (3, 1): ([((3, 2), 1.0), ((3, 0), 1.0), ((2, 1), 1.0), ((2, 2), 1.0)], 4.0),
        (3, 2): ([((3, 3), 1.0), ((3, 1), 1.0), ((2, 2), 1.0), ((2, 3), 1.0)], 5.0),
        (3, 3): ([((3, 2), 1.0), ((2, 3), 1.0)], 2.0),
    }


@pytest.fixture
def two_component_graph():
    """Fixture providing two undirected components with no edges between them."""
    return {
        "A1": ([("A2", 1.0)], 0.0),
        "A2": ([("A1", 1.0), ("A3", 2.0)], 0.0),
        "A3": ([("A2", 2.0)], 0.0),
        "B1": ([("B2", 1.0)], 0.0),
        "B2": ([("B1", 1.0)], 0.0),
    }


@pytest.fixture
def hexagon_up_right_graph():
    return hexagon_graph(corner_weight=3.0)


@pytest.fixture
def hexagon_down_left_graph():
    return hexagon_graph(corner_weight=7.0)
