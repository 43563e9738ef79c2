import pytest

from algograph.lib.graph import Graph
from algograph.lib.grid import Grid


@pytest.fixture
def dijkstra6():
    #        [4]        [2]
    #    0 ───────► 1 ───────► 3 ──[3]──┐
    #    │          │          ▲        ▼
    #   [2]        [5]        [4]       5
    #    ▼          │          │        ▲
    #    2 ◄────────┘          │        │
    #    ├─────────────────────┘        │
    #    └──[1]──► 4 ────────[3]────────┘
    #
    return Graph.from_edges(
        6,
        [
            (0, 1, 4),
            (0, 2, 2),
            (1, 3, 2),
            (1, 2, 5),
            (2, 3, 4),
            (2, 4, 1),
            (3, 5, 3),
            (4, 5, 3),
        ],
    )


@pytest.fixture
def signed5():
    # Signed weights, no negative cycle:
    #   0->1 [-1], 0->2 [4], 1->2 [3], 1->3 [2],
    #   1->4 [2], 3->2 [5], 3->1 [1], 4->3 [-3]
    #
    return Graph.from_edges(
        5,
        [
            (0, 1, -1),
            (0, 2, 4),
            (1, 2, 3),
            (1, 3, 2),
            (1, 4, 2),
            (3, 2, 5),
            (3, 1, 1),
            (4, 3, -3),
        ],
        allow_negative_weights=True,
    )


@pytest.fixture
def negative_cycle3():
    #    0 ─[-1]─► 1 ─[-2]─► 2
    #    ▲                   │
    #    └───────[-3]────────┘
    #
    return Graph.from_edges(
        3,
        [(0, 1, -1), (1, 2, -2), (2, 0, -3)],
        allow_negative_weights=True,
    )


@pytest.fixture
def all_pairs4():
    #    0 ──[3]──► 1 ──[2]──► 2
    #    │          ▲          │
    #   [5]        [1]        [1]
    #    ▼          │          │
    #    3 ─────────┘          │
    #    ▲                     │
    #    └─────────────────────┘
    #
    return Graph.from_edges(
        4,
        [(0, 1, 3), (0, 3, 5), (1, 2, 2), (3, 1, 1), (2, 3, 1)],
    )


KRUSKAL7_EDGES = [
    (0, 1, 7),
    (0, 2, 8),
    (1, 2, 3),
    (1, 3, 6),
    (2, 3, 4),
    (2, 4, 3),
    (3, 5, 1),
    (3, 4, 2),
    (4, 5, 5),
    (4, 6, 2),
    (5, 6, 6),
]


@pytest.fixture
def kruskal7():
    # Undirected, each edge stored once.
    return Graph.from_edges(7, KRUSKAL7_EDGES)


@pytest.fixture
def kruskal7_undirected():
    # Same edges, each stored in both directions.
    return Graph.from_edges(7, KRUSKAL7_EDGES, directed=False)


@pytest.fixture
def flow6():
    # Capacities:
    #   0->1 [10], 0->2 [10], 1->2 [2], 1->3 [4], 1->4 [8],
    #   2->4 [9], 2->0 [6], 3->5 [10], 4->3 [6], 4->5 [10]
    #
    # The only minimum cut separates {0, 2} from the rest: 0->1 + 2->4 = 19.
    #
    return Graph.from_edges(
        6,
        [
            (0, 1, 10),
            (0, 2, 10),
            (1, 2, 2),
            (1, 3, 4),
            (1, 4, 8),
            (2, 4, 9),
            (2, 0, 6),
            (3, 5, 10),
            (4, 3, 6),
            (4, 5, 10),
        ],
    )


@pytest.fixture
def scc5():
    #    1 ◄── 2
    #    │     ▲
    #    ▼     │
    #    0 ────┘
    #    │
    #    ▼
    #    3 ──► 4
    #
    return Graph.from_edges(5, [(1, 0), (0, 2), (2, 1), (0, 3), (3, 4)])


@pytest.fixture
def scc8():
    #   {0,1,2} ──► {3,4} ──► {5,6} ──► {7} (self-loop)
    #
    return Graph.from_edges(
        8,
        [
            (0, 1),
            (1, 2),
            (2, 0),
            (2, 3),
            (3, 4),
            (4, 3),
            (4, 5),
            (5, 6),
            (6, 5),
            (6, 7),
            (7, 7),
        ],
    )


@pytest.fixture
def dag6():
    #    5 ──► 2 ──► 3 ──► 1
    #    │                 ▲
    #    ▼                 │
    #    0 ◄── 4 ──────────┘
    #
    return Graph.from_edges(6, [(5, 2), (5, 0), (4, 0), (4, 1), (2, 3), (3, 1)])


@pytest.fixture
def cycle3():
    #    0 ──► 1 ──► 2
    #    ▲           │
    #    └───────────┘
    #
    return Graph.from_edges(3, [(0, 1), (1, 2), (2, 0)])


@pytest.fixture
def diamond6():
    #        ┌──► 1 ──► 3 ──┐
    #    0 ──┤         ▲    ▼
    #        └──► 2 ───┘    5
    #             │         ▲
    #             └──► 4 ───┘
    #
    return Graph.from_edges(
        6, [(0, 1), (0, 2), (1, 3), (2, 3), (2, 4), (3, 5), (4, 5)]
    )


@pytest.fixture
def walled_grid():
    # 10x10, wall in column 4 on rows 0-4 and 6-8; rows 5 and 9 pass through.
    grid = Grid(10, 10)
    for row in list(range(0, 5)) + list(range(6, 9)):
        grid.set_obstacle((row, 4))
    return grid
