"""NetworkX graph conversion utilities.

This module converts between NetworkX graphs, whose nodes can be any hashable
value, and algograph's Graph, whose vertices are the integers ``0 .. n-1``.

Example:
    >>> import networkx as nx
    >>> from algograph import dijkstra
    >>> from algograph.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=4)
    >>> G.add_edge("B", "C", weight=2)
    >>>
    >>> graph, node_map = from_networkx(G)
    >>> result = dijkstra(graph, node_map.to_index["A"])
    >>>
    >>> G_out = to_networkx(graph, node_map)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Hashable, List, Optional, Tuple, Union

from algograph.lib.graph import Graph

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and vertex indices.

    Attributes:
        to_index: Maps original node names to vertex indices.
        to_name: Maps vertex indices back to original node names.

    Example:
        >>> node_map = NodeMap.from_names(["A", "B", "C"])
        >>> node_map.to_index["A"]
        0
        >>> node_map.to_name[1]
        'B'
    """

    to_index: Dict[Hashable, int] = field(default_factory=dict)
    to_name: Dict[int, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> "NodeMap":
        """Create a NodeMap from a list of node names in index order."""
        to_index = {name: i for i, name in enumerate(names)}
        to_name = {i: name for i, name in enumerate(names)}
        return cls(to_index=to_index, to_name=to_name)

    def __len__(self) -> int:
        return len(self.to_index)

    def names(self, indices) -> List[Hashable]:
        """Translate an iterable of vertex indices to node names."""
        return [self.to_name[i] for i in indices]


def from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = "weight",
    default_weight: int = 1,
    allow_negative_weights: bool = False,
) -> Tuple[Graph, NodeMap]:
    """Convert a NetworkX graph to an algograph Graph.

    Nodes are numbered in the graph's node iteration order. Directed graphs
    keep their edges as they are; undirected graphs become a Graph built with
    ``directed=False``, so each edge is stored in both directions.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        weight_attr: Edge attribute holding the weight (default: "weight").
        default_weight: Weight used when the attribute is missing.
        allow_negative_weights: Passed through to the new Graph.

    Returns:
        Tuple of (graph, node_map).

    Raises:
        TypeError: If G is not a NetworkX graph.
        NegativeWeightError: If a weight is negative and not allowed.
    """
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    node_map = NodeMap.from_names(list(G.nodes()))
    graph = Graph(
        len(node_map),
        directed=G.is_directed(),
        allow_negative_weights=allow_negative_weights,
    )
    for u, v, data in G.edges(data=True):
        graph.add_edge(
            node_map.to_index[u],
            node_map.to_index[v],
            data.get(weight_attr, default_weight),
        )
    return graph, node_map


def to_networkx(
    graph: Graph,
    node_map: Optional[NodeMap] = None,
    *,
    weight_attr: str = "weight",
) -> "nx.MultiDiGraph":
    """Convert an algograph Graph to a NetworkX MultiDiGraph.

    Every stored edge becomes one NetworkX edge, so an undirected Graph
    yields both directions of each edge.

    Args:
        graph: The Graph to convert.
        node_map: Optional NodeMap to restore original node names. If None,
            nodes are labeled 0, 1, 2, ...
        weight_attr: Edge attribute name for the weight (default: "weight").

    Returns:
        nx.MultiDiGraph with one node per vertex and one edge per stored edge.
    """
    import networkx as nx

    def name(idx: int) -> Hashable:
        if node_map is None:
            return idx
        return node_map.to_name.get(idx, idx)

    G = nx.MultiDiGraph()
    G.add_nodes_from(name(idx) for idx in graph.vertices())
    for u, v, w in graph.edges():
        G.add_edge(name(u), name(v), **{weight_attr: w})
    return G
