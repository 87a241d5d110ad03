"""Single-source Dijkstra search.

The search keeps a lazy-deletion priority queue: a node is pushed again each
time its tentative distance improves, and stale copies are skipped when they
are extracted because the node is already settled. Once the target is
settled its distance is final (all weights are non-negative), so the search
stops there.

Every examined edge is recorded in ``explored_edges`` before relaxation,
whether or not it improves a distance.
"""

from __future__ import annotations

import math
from time import perf_counter
from typing import List, Optional

from spengine.algorithms.paths import reconstruct_path
from spengine.algorithms.priority_queue import PriorityQueue
from spengine.graph import Graph, NodeID
from spengine.logging import get_logger
from spengine.results import ExploredEdge, PathResult

ALGORITHM_NAME = "dijkstra"

logger = get_logger(__name__)


def find_path(graph: Graph, source: NodeID, target: NodeID) -> PathResult:
    """Find the shortest ``source -> target`` path.

    Args:
        graph: Graph with non-negative edge weights.
        source: Start node id.
        target: Destination node id.

    Returns:
        PathResult: Distance and path (``inf`` / empty when unreachable) with
        the settled nodes and examined edges.

    Raises:
        IndexError: If ``source`` or ``target`` is not a node of ``graph``.
    """
    graph.validate_node(source)
    graph.validate_node(target)

    node_count = graph.node_count
    dist: List[float] = [math.inf] * node_count
    prev: List[Optional[NodeID]] = [None] * node_count
    settled: List[bool] = [False] * node_count
    explored_nodes: List[NodeID] = []
    explored_edges: List[ExploredEdge] = []
    queue: PriorityQueue[NodeID] = PriorityQueue()

    dist[source] = 0.0
    queue.insert(source, 0.0)

    start = perf_counter()
    while True:
        entry = queue.extract_min()
        if entry is None:
            break
        current_dist, current = entry
        if settled[current]:
            continue
        settled[current] = True
        explored_nodes.append(current)

        if current == target:
            break

        for edge in graph.neighbors(current):
            explored_edges.append((current, edge.to))
            new_dist = current_dist + edge.weight
            if new_dist < dist[edge.to]:
                dist[edge.to] = new_dist
                prev[edge.to] = current
                queue.insert(edge.to, new_dist)
    elapsed = perf_counter() - start

    distance = dist[target]
    path = reconstruct_path(prev, target) if math.isfinite(distance) else []

    logger.debug(
        "Dijkstra %d -> %d: distance=%s, settled %d nodes, examined %d edges in %.6fs",
        source,
        target,
        distance,
        len(explored_nodes),
        len(explored_edges),
        elapsed,
    )

    return PathResult(
        distance=distance,
        path=tuple(path),
        explored_nodes=frozenset(explored_nodes),
        explored_edges=tuple(explored_edges),
        execution_time=elapsed,
        algorithm=ALGORITHM_NAME,
    )


def shortest_distances(graph: Graph, source: NodeID) -> List[float]:
    """Distances from ``source`` to every node (``inf`` where unreachable).

    Runs the same lazy-deletion search as :func:`find_path` without a target
    and without instrumentation.

    Raises:
        IndexError: If ``source`` is not a node of ``graph``.
    """
    graph.validate_node(source)

    dist: List[float] = [math.inf] * graph.node_count
    settled: List[bool] = [False] * graph.node_count
    queue: PriorityQueue[NodeID] = PriorityQueue()
    dist[source] = 0.0
    queue.insert(source, 0.0)

    while queue:
        current_dist, current = queue.extract_min()  # type: ignore[misc]
        if settled[current]:
            continue
        settled[current] = True
        for edge in graph.neighbors(current):
            new_dist = current_dist + edge.weight
            if new_dist < dist[edge.to]:
                dist[edge.to] = new_dist
                queue.insert(edge.to, new_dist)
    return dist
