"""Adjacency-list graph with non-negative edge weights.

`Graph` is the only structure shared between graph builders and the search
algorithms. Node identity is positional: ids form the contiguous range
``[0, node_count)``. Each node owns an ordered list of outgoing edges (and a
mirrored list of incoming edges used by backward searches); insertion order is
preserved because it decides relaxation order during a search.

Construction is strict:
  - Edges may only reference ids inside the declared range (``IndexError``).
  - Weights must be finite and non-negative (``ValueError``).
  - Node payloads cannot be registered twice (``ValueError``).

A graph is not synchronized. Searches treat it as read-only; callers must not
mutate it while a search is running.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple, Union

NodeID = int
Weight = float
AttrDict = Dict[str, Any]


@dataclass(frozen=True)
class Edge:
    """Directed edge stored in the adjacency list of its origin node.

    Attributes:
        to: Destination node id.
        weight: Finite, non-negative traversal cost.
    """

    to: NodeID
    weight: Weight


@dataclass
class GraphNode:
    """Node payload. Opaque to the algorithms.

    Attributes:
        id: Position of the node in the graph.
        x: Horizontal coordinate for display consumers.
        y: Vertical coordinate for display consumers.
        attrs: Free-form attributes.
    """

    id: NodeID
    x: float = 0.0
    y: float = 0.0
    attrs: AttrDict = field(default_factory=dict)

    def distance_to(self, other: GraphNode) -> float:
        """Euclidean distance between the two node positions."""
        return math.hypot(self.x - other.x, self.y - other.y)


def validate_weight(weight: Any) -> Weight:
    """Return ``weight`` as float, rejecting values Dijkstra cannot handle.

    Raises:
        ValueError: If the weight is not a finite number >= 0.
    """
    try:
        value = float(weight)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"Edge weight must be a number, got {weight!r}") from exc
    if not math.isfinite(value):
        raise ValueError(f"Edge weight must be finite, got {value}")
    if value < 0:
        raise ValueError(f"Edge weight must be non-negative, got {value}")
    return value


def _parse_count(value: Any, label: str) -> int:
    """Return ``value`` as int, rejecting bools, nulls and fractional numbers."""
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        raise ValueError(f"{label} must be an integer, got {value!r}")
    try:
        number = float(value)
    except ValueError as exc:
        raise ValueError(f"{label} must be an integer, got {value!r}") from exc
    if not number.is_integer():
        raise ValueError(f"{label} must be an integer, got {value!r}")
    return int(number)


class Graph:
    """Directed, weighted graph over contiguous integer node ids.

    Args:
        node_count: Number of node ids declared up front. Further ids can be
            declared one at a time through :meth:`add_node`.

    Raises:
        ValueError: If ``node_count`` is negative.
    """

    def __init__(self, node_count: int = 0) -> None:
        if node_count < 0:
            raise ValueError(f"Node count must be non-negative, got {node_count}")
        self._out: List[List[Edge]] = [[] for _ in range(node_count)]
        self._in: List[List[Edge]] = [[] for _ in range(node_count)]
        self._payloads: Dict[NodeID, GraphNode] = {}
        self._edge_count = 0

    #
    # Node management
    #
    @property
    def node_count(self) -> int:
        """Size of the id range ``[0, node_count)``."""
        return len(self._out)

    @property
    def edge_count(self) -> int:
        """Number of directed edges."""
        return self._edge_count

    @property
    def nodes(self) -> List[GraphNode]:
        """Registered node payloads in registration order."""
        return list(self._payloads.values())

    def __len__(self) -> int:
        return self.node_count

    def __contains__(self, node: object) -> bool:
        return (
            isinstance(node, int)
            and not isinstance(node, bool)
            and 0 <= node < self.node_count
        )

    def has_node(self, node: NodeID) -> bool:
        return node in self

    def validate_node(self, node: NodeID) -> None:
        """Raise ``IndexError`` unless ``node`` is a valid id of this graph."""
        if isinstance(node, bool) or not isinstance(node, int):
            raise IndexError(f"Node id must be an integer, got {node!r}")
        if not 0 <= node < self.node_count:
            raise IndexError(
                f"Node id {node} is out of range [0, {self.node_count})"
            )

    def add_node(self, node: Union[GraphNode, NodeID, None] = None) -> NodeID:
        """Register a node payload.

        The id must either lie inside the declared range or be exactly the
        next free id, in which case the range grows by one. Passing ``None``
        appends a bare node at the next free id.

        Args:
            node: Payload, bare id, or None.

        Returns:
            NodeID: The id of the registered node.

        Raises:
            ValueError: If the id skips ahead of the range, is negative, or
                already has a payload.
        """
        if node is None:
            node = GraphNode(id=self.node_count)
        elif not isinstance(node, GraphNode):
            node = GraphNode(id=node)

        node_id = node.id
        if node_id < 0 or node_id > self.node_count:
            raise ValueError(
                f"Node id {node_id} does not continue the range [0, {self.node_count})"
            )
        if node_id in self._payloads:
            raise ValueError(f"Node {node_id} already exists in this graph.")

        if node_id == self.node_count:
            self._out.append([])
            self._in.append([])
        self._payloads[node_id] = node
        return node_id

    def node(self, node: NodeID) -> GraphNode:
        """Return the payload for ``node``, creating a bare one if none was set."""
        self.validate_node(node)
        payload = self._payloads.get(node)
        if payload is None:
            payload = GraphNode(id=node)
        return payload

    #
    # Edge management
    #
    def add_edge(self, src: NodeID, dst: NodeID, weight: Weight) -> None:
        """Append a directed edge ``src -> dst`` to ``src``'s adjacency list.

        Raises:
            IndexError: If either endpoint is outside the id range.
            ValueError: If the weight is negative or not finite.
        """
        self.validate_node(src)
        self.validate_node(dst)
        weight = validate_weight(weight)
        self._out[src].append(Edge(dst, weight))
        self._in[dst].append(Edge(src, weight))
        self._edge_count += 1

    def add_bidirectional_edge(self, src: NodeID, dst: NodeID, weight: Weight) -> None:
        """Add ``src -> dst`` and ``dst -> src`` with the same weight."""
        # Validate once up front so a bad call never leaves half an edge behind
        self.validate_node(src)
        self.validate_node(dst)
        weight = validate_weight(weight)
        self.add_edge(src, dst, weight)
        self.add_edge(dst, src, weight)

    def neighbors(self, node: NodeID) -> Sequence[Edge]:
        """Outgoing edges of ``node`` in insertion order."""
        self.validate_node(node)
        return tuple(self._out[node])

    def predecessors(self, node: NodeID) -> Sequence[Edge]:
        """Incoming edges of ``node``; ``Edge.to`` holds the origin node."""
        self.validate_node(node)
        return tuple(self._in[node])

    def edges(self) -> Iterator[Tuple[NodeID, Edge]]:
        """Iterate ``(src, edge)`` pairs grouped by source, in insertion order."""
        for src, adjacency in enumerate(self._out):
            for edge in adjacency:
                yield src, edge

    def edge_weight(self, src: NodeID, dst: NodeID) -> Optional[Weight]:
        """Smallest weight among ``src -> dst`` edges, or None if there is none."""
        weights = [edge.weight for edge in self.neighbors(src) if edge.to == dst]
        return min(weights) if weights else None

    #
    # Serialization
    #
    def to_dict(self) -> Dict[str, Any]:
        """Node-link style dictionary suitable for JSON or YAML."""
        return {
            "node_count": self.node_count,
            "nodes": [
                {"id": n.id, "x": n.x, "y": n.y, **({"attrs": n.attrs} if n.attrs else {})}
                for n in self._payloads.values()
            ],
            "edges": [
                {"source": src, "target": edge.to, "weight": edge.weight}
                for src, edge in self.edges()
            ],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Graph:
        """Inverse of :meth:`to_dict`.

        ``node_count`` may be omitted, in which case it is derived from the
        node list. Edges may carry ``bidirectional: true``.

        Raises:
            ValueError: On malformed entries or invalid weights.
            IndexError: If an edge references an undeclared node.
        """
        nodes = data.get("nodes") or []
        edges = data.get("edges") or []
        if not isinstance(nodes, list):
            raise ValueError("'nodes' must be a list")
        if not isinstance(edges, list):
            raise ValueError("'edges' must be a list")

        payloads: List[GraphNode] = []
        for entry in nodes:
            if isinstance(entry, int) and not isinstance(entry, bool):
                payloads.append(GraphNode(id=entry))
                continue
            if not isinstance(entry, dict) or "id" not in entry:
                raise ValueError(f"Node entry must be a mapping with an 'id': {entry!r}")
            attrs = entry.get("attrs") or {}
            if not isinstance(attrs, dict):
                raise ValueError(f"Node 'attrs' must be a mapping: {entry!r}")
            try:
                payloads.append(
                    GraphNode(
                        id=_parse_count(entry["id"], "Node id"),
                        x=float(entry.get("x", 0.0)),
                        y=float(entry.get("y", 0.0)),
                        attrs=dict(attrs),
                    )
                )
            except (TypeError, ValueError) as exc:
                raise ValueError(f"Malformed node entry {entry!r}: {exc}") from exc

        if "node_count" in data:
            node_count = _parse_count(data["node_count"], "'node_count'")
        else:
            node_count = max((p.id for p in payloads), default=-1) + 1
        graph = cls(node_count)
        for payload in payloads:
            graph.add_node(payload)

        for entry in edges:
            if not isinstance(entry, dict):
                raise ValueError(f"Edge entry must be a mapping: {entry!r}")
            missing = {"source", "target", "weight"} - set(entry)
            if missing:
                raise ValueError(
                    f"Edge entry {entry!r} is missing {', '.join(sorted(missing))}"
                )
            if entry.get("bidirectional", False):
                graph.add_bidirectional_edge(
                    entry["source"], entry["target"], entry["weight"]
                )
            else:
                graph.add_edge(entry["source"], entry["target"], entry["weight"])
        return graph

    def __repr__(self) -> str:
        return f"Graph(node_count={self.node_count}, edge_count={self.edge_count})"
