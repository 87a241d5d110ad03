from __future__ import annotations

from enum import Enum
from typing import Callable, Dict

from spengine.algorithms import bidirectional, dijkstra
from spengine.graph import Graph, NodeID
from spengine.results import PathResult

#: Signature shared by every search entry point.
PathFinder = Callable[[Graph, NodeID, NodeID], PathResult]


class PathAlgorithm(str, Enum):
    """
    Shortest-path algorithms selectable by name.
    """

    #: Single-source Dijkstra stopping at the target.
    DIJKSTRA = dijkstra.ALGORITHM_NAME
    #: Forward and backward Dijkstra meeting in the middle.
    BIDIRECTIONAL = bidirectional.ALGORITHM_NAME

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def finder(self) -> PathFinder:
        return _FINDERS[self]

    @classmethod
    def from_name(cls, name: str) -> PathAlgorithm:
        """Parse a member from its value, member name or display name.

        Raises:
            ValueError: If no algorithm matches.
        """
        key = name.strip().lower().replace("-", "_").replace(" ", "_")
        for member in cls:
            if key in (
                member.value,
                member.name.lower(),
                member.display_name.lower().replace(" ", "_"),
            ):
                return member
        choices = ", ".join(member.value for member in cls)
        raise ValueError(f"Unknown algorithm '{name}'. Choose from: {choices}")


_DISPLAY_NAMES: Dict[PathAlgorithm, str] = {
    PathAlgorithm.DIJKSTRA: "Dijkstra",
    PathAlgorithm.BIDIRECTIONAL: "Bidirectional Dijkstra",
}

_FINDERS: Dict[PathAlgorithm, PathFinder] = {
    PathAlgorithm.DIJKSTRA: dijkstra.find_path,
    PathAlgorithm.BIDIRECTIONAL: bidirectional.find_path,
}


def find_path(
    graph: Graph,
    source: NodeID,
    target: NodeID,
    algorithm: PathAlgorithm = PathAlgorithm.BIDIRECTIONAL,
) -> PathResult:
    """Run ``algorithm`` on ``(graph, source, target)``.

    Args:
        graph: Graph with non-negative edge weights.
        source: Start node id.
        target: Destination node id.
        algorithm: Member of :class:`PathAlgorithm` or its string value.

    Returns:
        PathResult produced by the selected implementation.
    """
    return PathAlgorithm(algorithm).finder(graph, source, target)
