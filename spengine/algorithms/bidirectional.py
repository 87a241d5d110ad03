"""Bidirectional Dijkstra search.

Two Dijkstra searches run in alternation: a forward search from the source
over outgoing edges and a backward search from the target over incoming
edges. Each search is a :class:`Frontier` with its own distances, pointers,
settled flags and lazy-deletion queue.

Meeting detection:
    The best known ``source -> target`` length is updated in two places:
    - when a node is settled on one side and is already settled on the other
      (``dist_f[v] + dist_b[v]``);
    - when an edge into ``w`` is relaxed and the opposite side already has a
      finite distance for ``w``.
    The first node reached by both searches is not necessarily on the shortest
    path, so the search keeps running after the first meeting.

Termination:
    Let ``mu_f`` and ``mu_b`` be the distances of the most recently settled
    node on each side. Every unsettled node ``v`` has ``dist_f[v] >= mu_f`` and
    ``dist_b[v] >= mu_b``, so once ``mu_f + mu_b >= best`` no path through an
    unsettled node can beat ``best`` and the search stops.

Direction selection is a strategy. The default expands the side with the
smaller ``mu`` (ties go forward); any choice is correct as long as both
meeting checks and the termination bound are applied.
"""

from __future__ import annotations

import math
from time import perf_counter
from typing import Callable, List, Optional, Sequence

from spengine.algorithms.paths import reconstruct_path, walk_pointers
from spengine.algorithms.priority_queue import PriorityQueue
from spengine.graph import Edge, Graph, NodeID
from spengine.logging import get_logger
from spengine.results import ExploredEdge, PathResult

ALGORITHM_NAME = "bidirectional"

logger = get_logger(__name__)


class MeetingPoint:
    """Best ``source -> target`` candidate seen so far."""

    __slots__ = ("distance", "node")

    def __init__(self) -> None:
        self.distance: float = math.inf
        self.node: Optional[NodeID] = None

    def offer(self, node: NodeID, distance: float) -> None:
        if distance < self.distance:
            self.distance = distance
            self.node = node

    @property
    def found(self) -> bool:
        return self.node is not None and math.isfinite(self.distance)


class Frontier:
    """One direction of a bidirectional search.

    Attributes:
        origin: Node the search starts from (source or target).
        dist: Tentative distance from ``origin`` per node.
        prev: Pointer toward ``origin`` per node. For the backward frontier
            this is the next node on the way to the target.
        settled: Finalized flag per node.
        settled_nodes: Settled nodes in settle order.
        queue: Lazy-deletion priority queue of ``(distance, node)``.
        mu: Distance of the most recently settled node (lower bound for
            every unsettled node of this frontier).
    """

    __slots__ = (
        "origin",
        "dist",
        "prev",
        "settled",
        "settled_nodes",
        "queue",
        "mu",
        "_edges_of",
    )

    def __init__(
        self,
        node_count: int,
        origin: NodeID,
        edges_of: Callable[[NodeID], Sequence[Edge]],
    ) -> None:
        self.origin = origin
        self.dist: List[float] = [math.inf] * node_count
        self.prev: List[Optional[NodeID]] = [None] * node_count
        self.settled: List[bool] = [False] * node_count
        self.settled_nodes: List[NodeID] = []
        self.queue: PriorityQueue[NodeID] = PriorityQueue()
        self.mu: float = 0.0
        self._edges_of = edges_of

        self.dist[origin] = 0.0
        self.queue.insert(origin, 0.0)

    @property
    def exhausted(self) -> bool:
        return not self.queue

    def expand(
        self,
        opposite: Frontier,
        meeting: MeetingPoint,
        explored_edges: List[ExploredEdge],
    ) -> Optional[NodeID]:
        """Settle the next node of this frontier and relax its edges.

        Stale queue entries are discarded without doing anything else.

        Args:
            opposite: The frontier searching in the other direction.
            meeting: Best candidate, updated in place.
            explored_edges: Receives ``(current, neighbour)`` for every
                examined edge.

        Returns:
            The settled node, or None if the extracted entry was stale or the
            queue was empty.
        """
        entry = self.queue.extract_min()
        if entry is None:
            return None
        current_dist, current = entry
        if self.settled[current]:
            return None

        self.settled[current] = True
        self.settled_nodes.append(current)
        self.mu = current_dist

        if opposite.settled[current]:
            meeting.offer(current, self.dist[current] + opposite.dist[current])

        for edge in self._edges_of(current):
            neighbour = edge.to
            explored_edges.append((current, neighbour))

            new_dist = current_dist + edge.weight
            if new_dist < self.dist[neighbour]:
                self.dist[neighbour] = new_dist
                self.prev[neighbour] = current
                self.queue.insert(neighbour, new_dist)

            opposite_dist = opposite.dist[neighbour]
            if opposite_dist < math.inf:
                meeting.offer(neighbour, new_dist + opposite_dist)

        return current


#: Picks the frontier to expand next. Only called while at least one queue is
#: non-empty; must return a frontier with a non-empty queue.
DirectionSelector = Callable[[Frontier, Frontier], Frontier]


def balanced_direction(forward: Frontier, backward: Frontier) -> Frontier:
    """Expand the side with the smaller lower bound; ties go forward."""
    if forward.exhausted:
        return backward
    if backward.exhausted:
        return forward
    return forward if forward.mu <= backward.mu else backward


def smaller_queue_direction(forward: Frontier, backward: Frontier) -> Frontier:
    """Expand the side with fewer queued entries; ties go forward."""
    if forward.exhausted:
        return backward
    if backward.exhausted:
        return forward
    return forward if len(forward.queue) <= len(backward.queue) else backward


def find_path(
    graph: Graph,
    source: NodeID,
    target: NodeID,
    select_direction: DirectionSelector = balanced_direction,
) -> PathResult:
    """Find the shortest ``source -> target`` path searching from both ends.

    Args:
        graph: Graph with non-negative edge weights.
        source: Start node id.
        target: Destination node id.
        select_direction: Strategy choosing which frontier to expand.

    Returns:
        PathResult: ``explored_nodes`` is the union of both settled sets and
        ``explored_edges`` interleaves both directions in visitation order.
        Backward entries are ``(current, neighbour)`` in search direction,
        i.e. the reverse of the underlying graph edge.

    Raises:
        IndexError: If ``source`` or ``target`` is not a node of ``graph``.
    """
    graph.validate_node(source)
    graph.validate_node(target)

    if source == target:
        return PathResult(
            distance=0.0,
            path=(source,),
            algorithm=ALGORITHM_NAME,
        )

    forward = Frontier(graph.node_count, source, graph.neighbors)
    backward = Frontier(graph.node_count, target, graph.predecessors)
    meeting = MeetingPoint()
    explored_edges: List[ExploredEdge] = []

    start = perf_counter()
    while not (forward.exhausted and backward.exhausted):
        if forward.mu + backward.mu >= meeting.distance:
            break
        side = select_direction(forward, backward)
        other = backward if side is forward else forward
        side.expand(other, meeting, explored_edges)
    elapsed = perf_counter() - start

    explored_nodes = frozenset(forward.settled_nodes).union(backward.settled_nodes)

    logger.debug(
        "Bidirectional %d -> %d: distance=%s, meeting=%s, settled %d+%d nodes, "
        "examined %d edges in %.6fs",
        source,
        target,
        meeting.distance,
        meeting.node,
        len(forward.settled_nodes),
        len(backward.settled_nodes),
        len(explored_edges),
        elapsed,
    )

    if not meeting.found:
        return PathResult(
            distance=math.inf,
            path=(),
            explored_nodes=explored_nodes,
            explored_edges=tuple(explored_edges),
            execution_time=elapsed,
            algorithm=ALGORITHM_NAME,
        )

    assert meeting.node is not None
    head = reconstruct_path(forward.prev, meeting.node)
    tail = walk_pointers(backward.prev, backward.prev[meeting.node])

    return PathResult(
        distance=meeting.distance,
        path=tuple(head + tail),
        explored_nodes=explored_nodes,
        explored_edges=tuple(explored_edges),
        execution_time=elapsed,
        algorithm=ALGORITHM_NAME,
    )
