from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Hashable, Iterator, List, Mapping, Optional, Sequence, Tuple, Union

from algograph.lib.algorithms.base import Cost

#: Parent Map: predecessor per vertex, or None. A sequence indexed by vertex
#: ID for integer graphs, a mapping for grid cells.
ParentMap = Union[Sequence[Optional[Any]], Mapping[Hashable, Optional[Any]]]


def reconstruct_path(
    parents: ParentMap,
    source: Hashable,
    target: Hashable,
) -> List[Hashable]:
    """
    Walk a parent map back from ``target`` to ``source``.

    Args:
        parents: Predecessor of each node; the source (and unreached nodes)
            map to None. Mapping-based maps may simply omit unreached nodes.
        source: The node the search started from.
        target: The node to build the path to.

    Returns:
        Nodes from source to target inclusive, or an empty list when target
        is not reachable from source.

    Raises:
        ValueError: If the parent map loops back on itself.
    """
    path = [target]
    seen = {target}
    node = target
    while node != source:
        try:
            node = parents[node]
        except (KeyError, IndexError):
            return []
        if node is None:
            return []
        if node in seen:
            raise ValueError(f"Parent map contains a cycle through {node!r}.")
        seen.add(node)
        path.append(node)
    path.reverse()
    return path


@dataclass(frozen=True)
class Path:
    """
    A single path through a graph.

    Attributes:
        nodes: Nodes in order from source to destination.
        cost: Total cost of the path (sum of edge weights, or number of moves
            on a grid).
    """

    nodes: Tuple[Hashable, ...]
    cost: Cost

    def __post_init__(self) -> None:
        if not self.nodes:
            raise ValueError("A path needs at least one node.")

    def __getitem__(self, idx: int) -> Hashable:
        return self.nodes[idx]

    def __iter__(self) -> Iterator[Hashable]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)

    @property
    def src_node(self) -> Hashable:
        return self.nodes[0]

    @property
    def dst_node(self) -> Hashable:
        return self.nodes[-1]

    @property
    def hops(self) -> int:
        """Number of edges along the path."""
        return len(self.nodes) - 1

    def edge_pairs(self) -> Tuple[Tuple[Hashable, Hashable], ...]:
        """Return consecutive (u, v) pairs along the path."""
        return tuple(zip(self.nodes[:-1], self.nodes[1:]))

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self.cost < other.cost
