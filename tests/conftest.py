"""Shared graph fixtures.

Undirected roads are built with ``add_bidirectional_edge``; one-way edges with
``add_edge``. Node ids are noted next to each node label.
"""

from __future__ import annotations

import pytest

from spengine.graph import Graph


@pytest.fixture
def two_nodes() -> Graph:
    #      [5]
    #  0◄───────►1
    g = Graph(2)
    g.add_bidirectional_edge(0, 1, 5)
    return g


@pytest.fixture
def line3() -> Graph:
    #      [1]      [1]
    #  0◄───────►1◄───────►2
    g = Graph(3)
    g.add_bidirectional_edge(0, 1, 1)
    g.add_bidirectional_edge(1, 2, 1)
    return g


@pytest.fixture
def diamond() -> Graph:
    #          [1]       [1]
    #   ┌────────►a(1)───────┐
    #   │                    ▼
    #  s(0)                 t(3)
    #   │                    ▲
    #   └────────►b(2)───────┘
    #         [10]       [1]
    g = Graph(4)
    g.add_edge(0, 1, 1)
    g.add_edge(0, 2, 10)
    g.add_edge(1, 3, 1)
    g.add_edge(2, 3, 1)
    return g


@pytest.fixture
def two_components() -> Graph:
    #      [1]             [2]
    #  0◄───────►1     2◄───────►3
    g = Graph(4)
    g.add_bidirectional_edge(0, 1, 1)
    g.add_bidirectional_edge(2, 3, 2)
    return g


@pytest.fixture
def decoy_meeting() -> Graph:
    # The first node settled by both searches is m, but the shortest route
    # goes through p.
    #
    #          [4]       [4]
    #   ┌────────►m(2)◄──────┐
    #   │                    │
    #  s(0)                 t(1)
    #   │                    │
    #   └────────►p(3)◄──────┘
    #         [1]       [6]
    g = Graph(4)
    g.add_bidirectional_edge(0, 2, 4)
    g.add_bidirectional_edge(2, 1, 4)
    g.add_bidirectional_edge(0, 3, 1)
    g.add_bidirectional_edge(3, 1, 6)
    return g


@pytest.fixture
def one_way_ring() -> Graph:
    #  0 ──[1]──► 1 ──[1]──► 2 ──[1]──► 3
    #  ▲                                │
    #  └───────────────[1]──────────────┘
    g = Graph(4)
    g.add_edge(0, 1, 1)
    g.add_edge(1, 2, 1)
    g.add_edge(2, 3, 1)
    g.add_edge(3, 0, 1)
    return g


@pytest.fixture
def zero_weights() -> Graph:
    #      [0]      [0]      [2]
    #  0────────►1────────►2────────►3
    #  │                             ▲
    #  └─────────────[2]─────────────┘
    g = Graph(4)
    g.add_edge(0, 1, 0)
    g.add_edge(1, 2, 0)
    g.add_edge(2, 3, 2)
    g.add_edge(0, 3, 2)
    return g
