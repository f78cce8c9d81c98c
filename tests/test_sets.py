"""Tests for NodeSet and EdgeSet."""

import pytest

from hyperweave import DiEdge, HyperEdge, UnDiEdge
from hyperweave.engine.sets import EdgeSet, NodeSet


@pytest.fixture(params=[True, False], ids=["indexed", "scanning"])
def edge_set(request):
    """Edge set over a fresh node set, with and without the incidence index."""
    return EdgeSet(NodeSet(), index_incidences=request.param)


class TestNodeSet:
    """Tests for NodeSet."""

    def test_insert_returns_stored_instance(self):
        nodes = NodeSet()
        first = (1, "a")
        stored, added = nodes.insert(first)
        assert added is True
        assert stored is first

        duplicate = (1, "a")
        stored, added = nodes.insert(duplicate)
        assert added is False
        assert stored is first
        assert len(nodes) == 1

    def test_contains_and_discard(self):
        nodes = NodeSet()
        nodes.insert("x")
        assert "x" in nodes
        assert ["unhashable"] not in nodes
        assert nodes.discard("x") is True
        assert nodes.discard("x") is False
        assert len(nodes) == 0


class TestEdgeSet:
    """Tests for EdgeSet, with and without the incidence index."""

    def test_insert_auto_inserts_ends(self, edge_set):
        _, added = edge_set.insert(DiEdge(1, 2))
        assert added is True
        assert set(edge_set.nodes) == {1, 2}

    def test_duplicate_insert_is_noop(self, edge_set):
        original = UnDiEdge(1, 2)
        edge_set.insert(original)
        stored, added = edge_set.insert(UnDiEdge(2, 1))
        assert added is False
        assert stored is original
        assert len(edge_set) == 1

    def test_existing_ends_not_duplicated(self, edge_set):
        edge_set.nodes.insert(1)
        edge_set.insert(HyperEdge(1, 2, 3))
        assert len(edge_set.nodes) == 3

    def test_incident(self, edge_set):
        edge_set.insert(DiEdge(1, 2))
        edge_set.insert(DiEdge(2, 3))
        edge_set.insert(HyperEdge(3, 4, 5))
        assert set(edge_set.incident(2)) == {DiEdge(1, 2), DiEdge(2, 3)}
        assert edge_set.incident(99) == []

    def test_discard_keeps_ends(self, edge_set):
        edge_set.insert(DiEdge(1, 2))
        assert edge_set.discard(DiEdge(1, 2)) is True
        assert edge_set.discard(DiEdge(1, 2)) is False
        assert DiEdge(1, 2) not in edge_set
        assert set(edge_set.nodes) == {1, 2}
        assert edge_set.incident(1) == []

    def test_non_edges_are_not_contained(self, edge_set):
        edge_set.insert(DiEdge(1, 2))
        assert (1, 2) not in edge_set
