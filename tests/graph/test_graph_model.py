import math

import pytest

from spengine.graph import Edge, Graph, GraphNode, validate_weight


def test_declared_node_count():
    g = Graph(3)
    assert g.node_count == 3
    assert len(g) == 3
    assert g.edge_count == 0
    assert g.nodes == []
    assert 2 in g and 3 not in g and -1 not in g


def test_negative_node_count_rejected():
    with pytest.raises(ValueError):
        Graph(-1)


def test_add_edge_preserves_insertion_order():
    g = Graph(4)
    g.add_edge(0, 3, 2.0)
    g.add_edge(0, 1, 1.0)
    g.add_edge(0, 2, 1.0)
    assert g.neighbors(0) == (Edge(3, 2.0), Edge(1, 1.0), Edge(2, 1.0))
    assert g.neighbors(1) == ()
    assert g.edge_count == 3


def test_predecessors_mirror_outgoing_edges():
    g = Graph(3)
    g.add_edge(0, 2, 4.0)
    g.add_edge(1, 2, 1.5)
    assert g.predecessors(2) == (Edge(0, 4.0), Edge(1, 1.5))
    assert g.predecessors(0) == ()


def test_bidirectional_edge_adds_both_directions():
    g = Graph(2)
    g.add_bidirectional_edge(0, 1, 3)
    assert g.neighbors(0) == (Edge(1, 3.0),)
    assert g.neighbors(1) == (Edge(0, 3.0),)
    assert g.edge_count == 2


def test_parallel_edges_and_edge_weight():
    g = Graph(2)
    g.add_edge(0, 1, 5)
    g.add_edge(0, 1, 2)
    assert g.edge_weight(0, 1) == 2
    assert g.edge_weight(1, 0) is None


@pytest.mark.parametrize("src,dst", [(0, 3), (3, 0), (-1, 1), (1, 10)])
def test_add_edge_out_of_range(src, dst):
    g = Graph(3)
    with pytest.raises(IndexError):
        g.add_edge(src, dst, 1.0)
    # Storage never grows on a bad edge
    assert g.node_count == 3
    assert g.edge_count == 0


@pytest.mark.parametrize("weight", [-1, -0.001, math.inf, math.nan, "heavy", None])
def test_invalid_weights_rejected(weight):
    g = Graph(2)
    with pytest.raises(ValueError):
        g.add_edge(0, 1, weight)
    assert g.edge_count == 0


def test_bidirectional_edge_is_all_or_nothing():
    g = Graph(2)
    with pytest.raises(ValueError):
        g.add_bidirectional_edge(0, 1, -5)
    with pytest.raises(IndexError):
        g.add_bidirectional_edge(0, 2, 1)
    assert g.edge_count == 0


def test_validate_weight_accepts_zero_and_ints():
    assert validate_weight(0) == 0.0
    assert validate_weight(7) == 7.0
    assert isinstance(validate_weight(7), float)


class TestNodes:
    def test_add_node_appends_next_id(self):
        g = Graph()
        assert g.add_node(GraphNode(id=0, x=1.0, y=2.0)) == 0
        assert g.add_node() == 1
        assert g.add_node(2) == 2
        assert g.node_count == 3
        assert [n.id for n in g.nodes] == [0, 1, 2]
        assert g.node(0).x == 1.0

    def test_add_node_inside_declared_range(self):
        g = Graph(3)
        g.add_node(GraphNode(id=2, x=5.0))
        assert g.node_count == 3
        assert g.node(2).x == 5.0
        # Nodes without a payload still exist
        assert g.node(1) == GraphNode(id=1)

    def test_non_contiguous_id_rejected(self):
        g = Graph(2)
        with pytest.raises(ValueError):
            g.add_node(GraphNode(id=5))
        with pytest.raises(ValueError):
            g.add_node(GraphNode(id=-1))

    def test_duplicate_node_rejected(self):
        g = Graph()
        g.add_node(0)
        with pytest.raises(ValueError):
            g.add_node(0)

    def test_node_lookup_out_of_range(self):
        with pytest.raises(IndexError):
            Graph(1).node(1)

    def test_neighbors_of_invalid_node(self):
        with pytest.raises(IndexError):
            Graph(1).neighbors(1)

    def test_boolean_is_not_a_node_id(self):
        with pytest.raises(IndexError):
            Graph(2).validate_node(True)

    def test_distance_between_nodes(self):
        a = GraphNode(id=0, x=0.0, y=0.0)
        b = GraphNode(id=1, x=3.0, y=4.0)
        assert a.distance_to(b) == 5.0


class TestSerialization:
    def test_round_trip(self):
        g = Graph()
        g.add_node(GraphNode(id=0, x=1.0, y=1.0))
        g.add_node(GraphNode(id=1, x=2.0, y=3.0, attrs={"name": "B"}))
        g.add_edge(0, 1, 2.5)

        data = g.to_dict()
        assert data["node_count"] == 2
        assert data["edges"] == [{"source": 0, "target": 1, "weight": 2.5}]

        copy = Graph.from_dict(data)
        assert copy.node_count == 2
        assert copy.neighbors(0) == (Edge(1, 2.5),)
        assert copy.node(1).attrs == {"name": "B"}

    def test_node_count_derived_from_nodes(self):
        g = Graph.from_dict({"nodes": [2, 0, 1], "edges": []})
        assert g.node_count == 3

    def test_bidirectional_flag(self):
        g = Graph.from_dict(
            {
                "node_count": 2,
                "edges": [{"source": 0, "target": 1, "weight": 1, "bidirectional": True}],
            }
        )
        assert g.edge_count == 2

    def test_edge_missing_fields(self):
        with pytest.raises(ValueError, match="weight"):
            Graph.from_dict({"node_count": 2, "edges": [{"source": 0, "target": 1}]})

    def test_edge_to_unknown_node(self):
        with pytest.raises(IndexError):
            Graph.from_dict(
                {"node_count": 2, "edges": [{"source": 0, "target": 2, "weight": 1}]}
            )

    def test_malformed_sections(self):
        with pytest.raises(ValueError):
            Graph.from_dict({"nodes": {"a": 1}})
        with pytest.raises(ValueError):
            Graph.from_dict({"nodes": [{"x": 1.0}]})
        with pytest.raises(ValueError):
            Graph.from_dict({"node_count": 1, "edges": ["0->1"]})

    @pytest.mark.parametrize(
        "data",
        [
            {"nodes": [{"id": 0, "x": None}]},
            {"nodes": [{"id": 0, "y": None}]},
            {"nodes": [{"id": 0, "x": "left"}]},
            {"nodes": [{"id": 0, "attrs": ["a", "b"]}]},
            {"nodes": [{"id": None}]},
            {"nodes": [{"id": 1.5}]},
            {"node_count": None},
            {"node_count": 2.7},
            {"node_count": "many"},
            {"node_count": True},
        ],
    )
    def test_wrong_value_types_raise_value_error(self, data):
        with pytest.raises(ValueError):
            Graph.from_dict(data)

    def test_integral_node_count_accepted(self):
        assert Graph.from_dict({"node_count": 3.0}).node_count == 3


def test_bool_is_not_a_node_id():
    g = Graph(2)
    assert True not in g and False not in g
    assert not g.has_node(True)
    with pytest.raises(IndexError):
        g.validate_node(True)
