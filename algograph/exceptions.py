"""Exception types raised by algograph at the API boundary.

Only input validation failures are raised. Algorithmic "no solution" outcomes
(negative cycles, disconnected graphs, cycles, missing paths) are reported via
``SolverStatus`` on the result objects instead.
"""

from __future__ import annotations


class AlgographError(ValueError):
    """Base class for all package-specific errors."""


class OutOfRangeVertexError(AlgographError, IndexError):
    """Raised when a vertex id lies outside ``[0, n)`` of its graph."""

    def __init__(self, vertex: object, num_vertices: int) -> None:
        self.vertex = vertex
        self.num_vertices = num_vertices
        super().__init__(
            f"Vertex {vertex!r} is out of range for a graph with "
            f"{num_vertices} vertices."
        )


class NegativeWeightError(AlgographError):
    """Raised when a negative weight or capacity reaches code that forbids it."""


class InvalidEndpointsError(AlgographError):
    """Raised for illegal source/sink pairings, e.g. source equal to sink."""


__all__ = [
    "AlgographError",
    "OutOfRangeVertexError",
    "NegativeWeightError",
    "InvalidEndpointsError",
]
