import pytest

from ridematch.types.dto import Edge, Neighbor


@pytest.fixture
def triangle_edges():
    #      [1]
    #   A─────B
    #    \   /
    #  [3]\ /[2]
    #      C
    return [Edge("A", "B", 1), Edge("B", "C", 2), Edge("A", "C", 3)]


@pytest.fixture
def two_triangles_edges():
    #      [1]          [4]
    #   A─────B      D─────E
    #    \   /        \   /
    #  [3]\ /[2]    [6]\ /[5]
    #      C            F
    return [
        Edge("A", "B", 1),
        Edge("B", "C", 2),
        Edge("A", "C", 3),
        Edge("D", "E", 4),
        Edge("E", "F", 5),
        Edge("D", "F", 6),
    ]


@pytest.fixture
def square_graph():
    # Directed:
    #      [1]      [1]
    #   A──────►B──────►C
    #   │               ▲
    #   │[2]        [2] │
    #   ▼               │
    #   D───────────────┘
    #
    #   E (isolated)
    return {
        "A": [Neighbor("B", 1), Neighbor("D", 2)],
        "B": [Neighbor("C", 1)],
        "C": [],
        "D": [Neighbor("C", 2)],
        "E": [],
    }


@pytest.fixture
def detour_graph():
    # The direct A->B edge is beaten by A->C->B, so B is pushed twice.
    #
    #        [5]
    #   A──────────►B
    #   │           ▲
    #   │[1]    [1] │
    #   ▼           │
    #   C───────────┘
    return {
        "A": [Neighbor("B", 5), Neighbor("C", 1)],
        "B": [],
        "C": [Neighbor("B", 1)],
    }
