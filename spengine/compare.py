"""Side-by-side comparison of search algorithms on the same query."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

from spengine.algorithms.base import PathAlgorithm
from spengine.graph import Graph, NodeID
from spengine.logging import get_logger
from spengine.results import PathResult

logger = get_logger(__name__)

#: Relative tolerance when checking that algorithms agree on a distance.
DISTANCE_REL_TOL = 1e-9


@dataclass(frozen=True)
class Comparison:
    """Results of several algorithms for one ``(source, target)`` query.

    Attributes:
        source: Start node id.
        target: Destination node id.
        results: Result per algorithm, in the order they were run.
    """

    source: NodeID
    target: NodeID
    results: Dict[PathAlgorithm, PathResult]

    def __getitem__(self, algorithm: PathAlgorithm) -> PathResult:
        return self.results[PathAlgorithm(algorithm)]

    @property
    def distances_agree(self) -> bool:
        """True when every algorithm returned the same distance."""
        distances = [r.distance for r in self.results.values()]
        if not distances:
            return True
        first = distances[0]
        if math.isinf(first):
            return all(math.isinf(d) for d in distances)
        return all(
            math.isclose(d, first, rel_tol=DISTANCE_REL_TOL, abs_tol=1e-12)
            for d in distances
        )

    def node_savings(
        self,
        baseline: PathAlgorithm = PathAlgorithm.DIJKSTRA,
        candidate: PathAlgorithm = PathAlgorithm.BIDIRECTIONAL,
    ) -> Optional[float]:
        """Fraction of settled nodes ``candidate`` avoided relative to ``baseline``.

        Returns None when either algorithm did not run or the baseline
        settled nothing.
        """
        if baseline not in self.results or candidate not in self.results:
            return None
        base = self[baseline].explored_node_count
        if base == 0:
            return None
        return 1.0 - self[candidate].explored_node_count / base

    def edge_savings(
        self,
        baseline: PathAlgorithm = PathAlgorithm.DIJKSTRA,
        candidate: PathAlgorithm = PathAlgorithm.BIDIRECTIONAL,
    ) -> Optional[float]:
        """Fraction of examined edges ``candidate`` avoided relative to ``baseline``."""
        if baseline not in self.results or candidate not in self.results:
            return None
        base = self[baseline].explored_edge_count
        if base == 0:
            return None
        return 1.0 - self[candidate].explored_edge_count / base

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "source": self.source,
            "target": self.target,
            "distances_agree": self.distances_agree,
            "results": {
                algorithm.value: result.to_dict(include_exploration=False)
                for algorithm, result in self.results.items()
            },
        }
        if PathAlgorithm.DIJKSTRA in self.results and PathAlgorithm.BIDIRECTIONAL in self.results:
            data["node_savings"] = self.node_savings()
            data["edge_savings"] = self.edge_savings()
        return data


def compare_algorithms(
    graph: Graph,
    source: NodeID,
    target: NodeID,
    algorithms: Iterable[PathAlgorithm] = tuple(PathAlgorithm),
) -> Comparison:
    """Run each algorithm once on the same query.

    Raises:
        IndexError: If ``source`` or ``target`` is not a node of ``graph``.
    """
    results: Dict[PathAlgorithm, PathResult] = {}
    for algorithm in algorithms:
        algorithm = PathAlgorithm(algorithm)
        results[algorithm] = algorithm.finder(graph, source, target)

    comparison = Comparison(source=source, target=target, results=results)
    if not comparison.distances_agree:
        logger.warning(
            "Algorithms disagree on distance %d -> %d: %s",
            source,
            target,
            {a.value: r.distance for a, r in results.items()},
        )
    return comparison
