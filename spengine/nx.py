"""NetworkX graph conversion utilities.

Converts between NetworkX graphs and :class:`spengine.graph.Graph`. NetworkX
nodes can be any hashable; they are mapped to contiguous integer ids and the
returned :class:`NodeMap` keeps the mapping for reading results back.

Example:
    >>> import networkx as nx
    >>> from spengine.nx import from_networkx
    >>> from spengine.algorithms import find_path
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", weight=2.0)
    >>> G.add_edge("B", "C", weight=3.0)
    >>> graph, node_map = from_networkx(G)
    >>> result = find_path(graph, node_map.to_index["A"], node_map.to_index["C"])
    >>> node_map.names(result.path)
    ['A', 'B', 'C']
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Hashable, Iterable, List, Optional, Union

import networkx as nx

from spengine.graph import Graph, GraphNode, NodeID

NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]


@dataclass
class NodeMap:
    """Bidirectional mapping between node names and integer ids.

    Attributes:
        to_index: Maps original node names to ids.
        to_name: Maps ids back to original node names.
    """

    to_index: Dict[Hashable, NodeID] = field(default_factory=dict)
    to_name: Dict[NodeID, Hashable] = field(default_factory=dict)

    @classmethod
    def from_names(cls, names: List[Hashable]) -> NodeMap:
        """Create a NodeMap from node names in id order."""
        return cls(
            to_index={name: i for i, name in enumerate(names)},
            to_name={i: name for i, name in enumerate(names)},
        )

    def names(self, ids: Iterable[NodeID]) -> List[Hashable]:
        """Translate a sequence of ids (e.g. a path) into node names."""
        return [self.to_name[i] for i in ids]

    def __len__(self) -> int:
        return len(self.to_index)


def from_networkx(
    G: NxGraph,
    *,
    weight_attr: str = "weight",
    default_weight: float = 1.0,
    bidirectional: bool = False,
) -> tuple[Graph, NodeMap]:
    """Convert a NetworkX graph to a :class:`Graph`.

    Node ids follow the order of node names sorted by ``str``. Undirected
    graphs produce an edge in each direction; ``bidirectional=True`` does the
    same for directed graphs. ``x``/``y`` node attributes, when present, are
    copied to the node payload.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        weight_attr: Edge attribute holding the weight.
        default_weight: Weight used when the attribute is missing.
        bidirectional: Add the reverse of every edge.

    Returns:
        Tuple ``(graph, node_map)``.

    Raises:
        TypeError: If ``G`` is not a NetworkX graph.
        ValueError: If an edge weight is negative or not finite.
    """
    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    node_names = sorted(G.nodes(), key=str)
    node_map = NodeMap.from_names(node_names)

    graph = Graph()
    for name in node_names:
        attrs = G.nodes[name]
        graph.add_node(
            GraphNode(
                id=node_map.to_index[name],
                x=float(attrs.get("x", 0.0)),
                y=float(attrs.get("y", 0.0)),
                attrs={"name": name},
            )
        )

    both_ways = bidirectional or not G.is_directed()
    for u, v, data in G.edges(data=True):
        src = node_map.to_index[u]
        dst = node_map.to_index[v]
        weight = data.get(weight_attr, default_weight)
        if both_ways and src != dst:
            graph.add_bidirectional_edge(src, dst, weight)
        else:
            graph.add_edge(src, dst, weight)

    return graph, node_map


def to_networkx(
    graph: Graph,
    node_map: Optional[NodeMap] = None,
    *,
    weight_attr: str = "weight",
) -> nx.MultiDiGraph:
    """Convert a :class:`Graph` into a NetworkX MultiDiGraph.

    Node positions are stored as ``x``/``y`` node attributes. If ``node_map``
    is given, original node names are restored; otherwise nodes are labelled
    with their ids.
    """
    G = nx.MultiDiGraph()

    def label(node: NodeID) -> Hashable:
        if node_map is None:
            return node
        return node_map.to_name.get(node, node)

    for node in range(graph.node_count):
        payload = graph.node(node)
        G.add_node(label(node), x=payload.x, y=payload.y)

    for src, edge in graph.edges():
        G.add_edge(label(src), label(edge.to), **{weight_attr: edge.weight})

    return G
