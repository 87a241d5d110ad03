"""Synthetic road-map graphs.

`grid_map` lays nodes out on a jittered grid and connects them like a city
street plan: every node links to its right and bottom neighbours, and some
cells get a diagonal. Edge weights are Euclidean distances between node
positions, so all roads are bidirectional with equal weight both ways.
"""

from __future__ import annotations

import random
from typing import Optional

from spengine.config import GridMapConfig
from spengine.graph import Graph, GraphNode, NodeID
from spengine.logging import get_logger

logger = get_logger(__name__)


def grid_node_id(x: int, y: int, width: int) -> NodeID:
    """Id of the grid point in column ``x`` and row ``y``."""
    return y * width + x


def grid_map(
    width: int,
    height: int,
    spacing: float = 30.0,
    jitter: float = 0.2,
    diagonal_probability: float = 0.5,
    seed: Optional[int] = None,
) -> Graph:
    """Generate a ``width x height`` grid road map.

    Args:
        width: Nodes per row.
        height: Number of rows.
        spacing: Distance between neighbouring grid points before jitter.
        jitter: Maximum displacement per axis as a fraction of ``spacing``.
        diagonal_probability: Chance that a cell gets a top-left to
            bottom-right diagonal road.
        seed: Seed for the private random generator; equal seeds give equal
            maps.

    Returns:
        Graph: ``width * height`` nodes with ids ``y * width + x``.

    Raises:
        ValueError: If the parameters are out of range.
    """
    config = GridMapConfig(
        width=width,
        height=height,
        spacing=spacing,
        jitter=jitter,
        diagonal_probability=diagonal_probability,
        seed=seed,
    )
    return grid_map_from_config(config)


def grid_map_from_config(config: GridMapConfig) -> Graph:
    """Generate a grid road map described by ``config``."""
    config.validate()
    rng = random.Random(config.seed)
    width, height, spacing = config.width, config.height, config.spacing
    amplitude = spacing * config.jitter

    graph = Graph(config.node_count)
    for y in range(height):
        for x in range(width):
            graph.add_node(
                GraphNode(
                    id=grid_node_id(x, y, width),
                    x=x * spacing + rng.uniform(-amplitude, amplitude) + spacing,
                    y=y * spacing + rng.uniform(-amplitude, amplitude) + spacing,
                )
            )

    def connect(a: NodeID, b: NodeID) -> None:
        graph.add_bidirectional_edge(a, b, graph.node(a).distance_to(graph.node(b)))

    for y in range(height):
        for x in range(width):
            node_id = grid_node_id(x, y, width)
            if x < width - 1:
                connect(node_id, grid_node_id(x + 1, y, width))
            if y < height - 1:
                connect(node_id, grid_node_id(x, y + 1, width))
            if (
                x < width - 1
                and y < height - 1
                and rng.random() < config.diagonal_probability
            ):
                connect(node_id, grid_node_id(x + 1, y + 1, width))

    logger.debug(
        "Generated %dx%d grid map with %d nodes and %d edges (seed=%s)",
        width,
        height,
        graph.node_count,
        graph.edge_count,
        config.seed,
    )
    return graph
