# pylint: disable=invalid-name
import math

import pytest

from spengine.algorithms.dijkstra import find_path, shortest_distances
from spengine.graph import Graph


class TestFindPath:
    def test_single_edge(self, two_nodes):
        result = find_path(two_nodes, 0, 1)
        assert result.distance == 5
        assert result.path == (0, 1)
        assert result.algorithm == "dijkstra"

    def test_line(self, line3):
        result = find_path(line3, 0, 2)
        assert result.distance == 2
        assert result.path == (0, 1, 2)

    def test_diamond_prefers_cheap_branch(self, diamond):
        result = find_path(diamond, 0, 3)
        assert result.distance == 2
        assert result.path == (0, 1, 3)

    def test_disconnected_components(self, two_components):
        result = find_path(two_components, 0, 3)
        assert math.isinf(result.distance)
        assert result.path == ()
        assert not result.found
        # Work done before giving up is still reported
        assert result.explored_nodes == {0, 1}
        assert result.explored_edges == ((0, 1), (1, 0))

    def test_source_equals_target(self, line3):
        result = find_path(line3, 1, 1)
        assert result.distance == 0
        assert result.path == (1,)
        assert result.explored_nodes == {1}
        assert result.explored_edges == ()

    def test_directed_edges_are_one_way(self, one_way_ring):
        assert find_path(one_way_ring, 0, 3).path == (0, 1, 2, 3)
        assert find_path(one_way_ring, 3, 0).path == (3, 0)
        assert find_path(one_way_ring, 1, 0).distance == 3

    def test_zero_weight_edges(self, zero_weights):
        result = find_path(zero_weights, 0, 2)
        assert result.distance == 0
        assert result.path == (0, 1, 2)

        result = find_path(zero_weights, 0, 3)
        assert result.distance == 2


class TestInstrumentation:
    def test_diamond_exploration_order(self, diamond):
        result = find_path(diamond, 0, 3)
        # Search stops as soon as the target is settled: b is never expanded
        assert result.explored_nodes == {0, 1, 3}
        assert result.explored_edges == ((0, 1), (0, 2), (1, 3))

    def test_every_examined_edge_is_recorded(self, line3):
        result = find_path(line3, 0, 2)
        # (1, 0) does not improve anything but is still recorded
        assert result.explored_edges == ((0, 1), (1, 0), (1, 2))

    def test_execution_time_is_reported(self, line3):
        result = find_path(line3, 0, 2)
        assert result.execution_time >= 0.0

    def test_stale_entries_are_skipped(self):
        # Node 2 is queued twice (10 via 0, then 2 via 1). The stale copy is
        # extracted before the target and must not expand node 2 again.
        g = Graph(5)
        g.add_edge(0, 2, 10)
        g.add_edge(0, 1, 1)
        g.add_edge(1, 2, 1)
        g.add_edge(2, 3, 1)
        g.add_edge(3, 4, 20)
        result = find_path(g, 0, 4)
        assert result.distance == 23
        assert result.path == (0, 1, 2, 3, 4)
        assert result.explored_edges.count((2, 3)) == 1
        assert len(result.explored_edges) == 5


class TestPreconditions:
    @pytest.mark.parametrize("source,target", [(-1, 0), (0, 3), (5, 1), (0, -2)])
    def test_out_of_range_ids(self, line3, source, target):
        with pytest.raises(IndexError):
            find_path(line3, source, target)

    def test_non_integer_id(self, line3):
        with pytest.raises(IndexError):
            find_path(line3, "0", 2)


class TestShortestDistances:
    def test_all_distances(self, diamond):
        assert shortest_distances(diamond, 0) == [0, 1, 10, 2]

    def test_unreachable_are_infinite(self, two_components):
        dist = shortest_distances(two_components, 2)
        assert math.isinf(dist[0]) and math.isinf(dist[1])
        assert dist[2:] == [0, 2]

    def test_invalid_source(self, diamond):
        with pytest.raises(IndexError):
            shortest_distances(diamond, 4)
