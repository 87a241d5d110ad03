"""Search result container.

A `PathResult` is produced once per search call and never mutated afterwards.
Besides the answer (distance and path) it carries the instrumentation a
display layer replays: the settled nodes and every edge the search examined,
in examination order.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional, Tuple

from spengine.graph import NodeID

#: ``(from, to)`` pair recorded when a search examines an edge.
ExploredEdge = Tuple[NodeID, NodeID]


@dataclass(frozen=True)
class PathResult:
    """Outcome of one shortest-path search.

    Attributes:
        distance: Length of the shortest path, ``math.inf`` when unreachable.
        path: Node ids from source to target; empty when unreachable.
        explored_nodes: Nodes settled by the search (both directions for
            bidirectional search).
        explored_edges: Every examined edge in visitation order, whether or
            not it improved a distance.
        execution_time: Wall-clock seconds spent in the search loop.
            Diagnostic only.
        algorithm: Name of the algorithm that produced the result.
    """

    distance: float
    path: Tuple[NodeID, ...]
    explored_nodes: FrozenSet[NodeID] = field(default_factory=frozenset)
    explored_edges: Tuple[ExploredEdge, ...] = ()
    execution_time: float = 0.0
    algorithm: Optional[str] = None

    @classmethod
    def not_found(cls, algorithm: Optional[str] = None) -> PathResult:
        """Empty result for an unreachable target with no recorded work."""
        return cls(distance=math.inf, path=(), algorithm=algorithm)

    @property
    def found(self) -> bool:
        return bool(self.path) and math.isfinite(self.distance)

    @property
    def explored_node_count(self) -> int:
        return len(self.explored_nodes)

    @property
    def explored_edge_count(self) -> int:
        return len(self.explored_edges)

    @property
    def hop_count(self) -> int:
        """Number of edges on the path (0 for a trivial or missing path)."""
        return max(len(self.path) - 1, 0)

    def to_dict(self, include_exploration: bool = True) -> Dict[str, Any]:
        """JSON-safe representation. Infinite distance becomes ``None``.

        Args:
            include_exploration: Include explored node and edge lists.
        """
        data: Dict[str, Any] = {
            "algorithm": self.algorithm,
            "distance": self.distance if math.isfinite(self.distance) else None,
            "path": list(self.path),
            "explored_node_count": self.explored_node_count,
            "explored_edge_count": self.explored_edge_count,
            "execution_time": self.execution_time,
        }
        if include_exploration:
            data["explored_nodes"] = sorted(self.explored_nodes)
            data["explored_edges"] = [list(edge) for edge in self.explored_edges]
        return data
