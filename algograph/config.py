"""Configuration classes for algograph components."""

from dataclasses import dataclass

from algograph.lib.algorithms.base import Heuristic


@dataclass
class GraphConfig:
    """Defaults applied when a Graph is built without explicit options."""

    # Edge insertion mode: undirected graphs store both directions
    directed: bool = True

    # Negative weights are rejected at insertion unless allowed here
    allow_negative_weights: bool = False


@dataclass
class SearchConfig:
    """Defaults for grid search (A*)."""

    # Cost of a single up/down/left/right move
    step_cost: int = 1

    heuristic: Heuristic = Heuristic.MANHATTAN

    def __post_init__(self) -> None:
        if self.step_cost <= 0:
            raise ValueError(f"step_cost must be positive, got {self.step_cost}")


# Global configuration instances
GRAPH_CONFIG = GraphConfig()
SEARCH_CONFIG = SearchConfig()
