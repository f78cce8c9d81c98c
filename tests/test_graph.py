"""Tests for Graph and MutableGraph."""

import pytest

from hyperweave import (
    CoreConfig,
    DiEdge,
    Graph,
    HyperEdge,
    MutableGraph,
    TripleEdge,
    UnDiEdge,
)


class TestReadOperations:
    """Tests for membership, lookup and set views."""

    def test_order_and_size(self, mixed_graph):
        assert mixed_graph.order == 6
        assert mixed_graph.graph_size == 4
        assert mixed_graph.size == 4

    def test_contains(self, mixed_graph):
        assert 1 in mixed_graph
        assert "missing" not in mixed_graph
        assert UnDiEdge(4, 3) in mixed_graph
        assert DiEdge(2, 1) not in mixed_graph
        assert ["unhashable"] not in mixed_graph

    def test_get_and_find(self, mixed_graph):
        assert mixed_graph.get(HyperEdge(5, 4, 1)) == HyperEdge(1, 4, 5)
        assert mixed_graph.find(DiEdge(9, 9)) is None
        with pytest.raises(KeyError):
            mixed_graph.get("missing")

    def test_set_views(self, mixed_graph):
        assert mixed_graph.nodes == {1, 2, 3, 4, 5, "isolated"}
        assert len(mixed_graph.edges) == 4
        assert mixed_graph.nodes & {1, 99} == {1}

    def test_repr(self, mixed_graph):
        assert repr(mixed_graph) == "Graph(order=6, size=4)"


class TestDegrees:
    """Tests for degree figures."""

    def test_node_degree(self, mixed_graph):
        assert mixed_graph.degree(1) == 2
        assert mixed_graph.degree(5) == 1
        assert mixed_graph.degree("isolated") == 0

    def test_degree_of_missing_node_raises(self, mixed_graph):
        with pytest.raises(KeyError):
            mixed_graph.degree("missing")

    def test_degree_sequence(self, mixed_graph):
        assert mixed_graph.degree_seq == [2, 2, 2, 2, 1, 0]
        assert mixed_graph.min_degree == 0
        assert mixed_graph.max_degree == 2

    def test_total_degree_is_sum_of_degrees(self, mixed_graph):
        assert mixed_graph.total_degree == 9
        assert mixed_graph.total_degree == sum(mixed_graph.degree_seq)

    def test_loops_count_twice(self):
        g = Graph.from_(edges=[UnDiEdge(1, 1), HyperEdge(1, 1, 2)])
        assert g.degree(1) == 4
        assert g.degree(2) == 1

    def test_degrees_without_incidence_index(self, mixed_graph):
        scanning = Graph.from_(
            mixed_graph.nodes, mixed_graph.edges, config=CoreConfig(index_incidences=False)
        )
        assert scanning.degrees() == mixed_graph.degrees()
        assert set(scanning.incident_edges(3)) == set(mixed_graph.incident_edges(3))

    def test_empty_graph_degrees(self):
        g = Graph.empty()
        assert g.degree_seq == []
        assert g.min_degree == 0
        assert g.max_degree == 0
        assert g.total_degree == 0


class TestShape:
    """Tests for hyper and directed flags, neighbors and stats."""

    def test_is_hyper(self, mixed_graph, triples):
        assert mixed_graph.is_hyper
        assert Graph.from_(edges=triples).is_hyper
        assert not Graph.from_(edges=[DiEdge(1, 2)]).is_hyper

    def test_is_directed(self, mixed_graph):
        assert not mixed_graph.is_directed
        assert Graph.from_(edges=[DiEdge(1, 2), TripleEdge(1, 2, 3)]).is_directed
        assert not Graph.empty().is_directed

    def test_neighbors(self, mixed_graph):
        assert mixed_graph.neighbors(1) == {2, 4, 5}
        assert mixed_graph.neighbors("isolated") == set()

    def test_stats(self, mixed_graph):
        s = mixed_graph.stats()
        assert s.order == 6
        assert s.size == 4
        assert s.total_degree == 9
        assert s.is_connected is False
        assert s.edges_by_kind == {"DiEdge": 2, "UnDiEdge": 1, "HyperEdge": 1}


class TestConnectivity:
    """Tests for components and weak connectivity."""

    def test_components(self, mixed_graph):
        found = mixed_graph.components()
        assert found == [{1, 2, 3, 4, 5}, {"isolated"}]
        assert not mixed_graph.is_connected

    def test_direction_ignored(self):
        g = Graph.from_(edges=[DiEdge(1, 2), DiEdge(3, 2)])
        assert g.is_connected

    def test_hyperedge_joins_all_ends(self):
        assert Graph.from_(edges=[HyperEdge(1, 2, 3), DiEdge(4, 3)]).is_connected

    def test_trivial_graphs_are_connected(self):
        assert Graph.empty().is_connected
        assert Graph.apply(1).is_connected
        assert not Graph.apply(1, 2).is_connected


class TestImmutableGraph:
    """Tests for Graph values."""

    def test_no_mutators(self, mixed_graph):
        assert not hasattr(mixed_graph, "add")
        assert not hasattr(mixed_graph, "remove_node")

    def test_hashable(self):
        first = Graph.from_(edges=[UnDiEdge(1, 2)])
        second = Graph.from_(edges=[UnDiEdge(2, 1)])
        assert first == second
        assert len({first, second}) == 1

    def test_to_mutable_copies(self, mixed_graph):
        copy = mixed_graph.to_mutable()
        copy.add_edge(DiEdge("isolated", 1))
        assert copy.graph_size == 5
        assert mixed_graph.graph_size == 4


class TestMutableGraph:
    """Tests for in-place mutation."""

    @pytest.fixture()
    def g(self):
        return MutableGraph.from_(edges=[DiEdge(1, 2), DiEdge(2, 3), HyperEdge(3, 4, 5)])

    def test_add_dedups_and_auto_inserts(self, g):
        assert g.add(DiEdge(5, 6)) is True
        assert g.add(DiEdge(5, 6)) is False
        assert 6 in g.nodes
        assert g.add_node(6) is False
        assert g.add_node(7) is True

    def test_add_all(self, g):
        assert g.add_all([DiEdge(1, 2), DiEdge(2, 1), 9]) == 2

    def test_remove_node_removes_incident_edges(self, g):
        assert g.remove_node(3) is True
        assert set(g.edges) == {DiEdge(1, 2)}
        assert g.nodes == {1, 2, 4, 5}
        assert g.degree(4) == 0
        assert g.remove_node(3) is False

    def test_remove_edge_keeps_ends(self, g):
        assert g.remove_edge(HyperEdge(5, 4, 3)) is True
        assert g.remove_edge(HyperEdge(5, 4, 3)) is False
        assert {3, 4, 5} <= g.nodes
        assert g.degree(5) == 0

    def test_invariant_after_mutations(self, g):
        g.remove_node(2)
        g.add(UnDiEdge(1, 8))
        g.remove_edge(UnDiEdge(8, 1))
        for edge in g.edges:
            assert all(end in g.nodes for end in edge.ends)

    def test_clear(self, g):
        g.clear()
        assert g.order == 0
        assert g.graph_size == 0

    def test_freeze(self, g):
        frozen = g.freeze()
        g.add(DiEdge(7, 8))
        assert isinstance(frozen, Graph)
        assert frozen.graph_size == 3

    def test_not_hashable(self, g):
        with pytest.raises(TypeError):
            hash(g)
