"""spengine: shortest-path engine for weighted graphs.

Provides single-source Dijkstra and bidirectional Dijkstra over an
adjacency-list graph. Both searches return the shortest distance and path
together with instrumentation (settled nodes, examined edges in visitation
order, elapsed time) for display layers that replay the search.

Primary API:
    Graph, Edge, GraphNode - Graph model
    find_path() - Run a search with a named algorithm
    PathAlgorithm - Algorithm selector
    PathResult - Search result
    compare_algorithms() - Run several algorithms on one query
    grid_map() - Synthetic road map generator

Example:
    from spengine import Graph, PathAlgorithm, find_path

    graph = Graph(3)
    graph.add_bidirectional_edge(0, 1, 1.0)
    graph.add_bidirectional_edge(1, 2, 1.0)

    result = find_path(graph, 0, 2, PathAlgorithm.BIDIRECTIONAL)
    result.distance  # 2.0
    result.path      # (0, 1, 2)
"""

from __future__ import annotations

from spengine import cli, logging
from spengine._version import __version__
from spengine.algorithms import PathAlgorithm, PriorityQueue, find_path
from spengine.compare import Comparison, compare_algorithms
from spengine.generators import grid_map
from spengine.graph import Edge, Graph, GraphNode, NodeID
from spengine.io import dump_graph, load_graph
from spengine.results import PathResult

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    "Edge",
    "GraphNode",
    "NodeID",
    # Algorithms
    "find_path",
    "PathAlgorithm",
    "PriorityQueue",
    # Results
    "PathResult",
    "Comparison",
    "compare_algorithms",
    # Graph sources
    "grid_map",
    "load_graph",
    "dump_graph",
    # Utilities
    "cli",
    "logging",
]
