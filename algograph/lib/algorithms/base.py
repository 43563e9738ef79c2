from __future__ import annotations

import math
from enum import IntEnum
from typing import Union

#: Represents a numeric edge weight, distance, key or capacity.
Cost = Union[int, float]

#: Distance sentinel for unreachable vertices. Never a valid finite distance.
INF: float = math.inf


class SolverStatus(IntEnum):
    """
    Outcome of a solver run.

    Anything other than OK is a valid, deterministic result of running the
    full algorithm, not an error.
    """

    OK = 0
    #: A negative cycle is reachable (Bellman-Ford) or exists (Floyd-Warshall).
    NEGATIVE_CYCLE = 1
    #: No spanning tree exists (Kruskal, Prim).
    DISCONNECTED = 2
    #: The graph has a directed cycle, so no topological order exists.
    CYCLE = 3
    #: The goal cannot be reached (A*).
    NO_PATH = 4


class Heuristic(IntEnum):
    """Cost-to-goal estimates available to A*."""

    #: |dr| + |dc|; admissible and consistent for 4-directional unit moves.
    MANHATTAN = 1


class DFSEvent(IntEnum):
    """Edge labels emitted by the labeled depth-first traversal."""

    #: Tree edge (u, v) reaching v for the first time; (v, v) for a DFS root.
    DISCOVER = 1
    #: Edge (u, v) to a vertex that was already discovered.
    NONTREE = 2
    #: All of v's edges are explored; u is v's DFS parent (or v for a root).
    FINISH = 3
