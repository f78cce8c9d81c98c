"""Tests for GraphBuilder."""

import pytest

from hyperweave import (
    BuilderConsumedError,
    CoreConfig,
    DiEdge,
    Graph,
    GraphBuilder,
    MutableGraph,
    UnDiEdge,
)


class TestGraphBuilder:
    """Tests for the single-use graph builder."""

    def test_add_reports_changes(self):
        builder = GraphBuilder(Graph)
        assert builder.add(1) is True
        assert builder.add(1) is False
        assert builder.add(DiEdge(1, 2)) is True
        assert builder.add(DiEdge(1, 2)) is False
        # Node 2 was auto-inserted by the edge
        assert builder.add(2) is False

    def test_add_all_counts_new_elements(self):
        builder = GraphBuilder(Graph)
        assert builder.add_all([1, 1, UnDiEdge(1, 2), UnDiEdge(2, 1), 3]) == 3

    def test_result_builds_graph_class(self):
        builder = GraphBuilder(MutableGraph)
        builder.add(DiEdge("a", "b"))
        g = builder.result()
        assert isinstance(g, MutableGraph)
        assert g.order == 2
        assert g.graph_size == 1

    def test_builder_is_single_use(self):
        builder = GraphBuilder(Graph)
        builder.result()
        with pytest.raises(BuilderConsumedError):
            builder.add(1)
        with pytest.raises(BuilderConsumedError):
            builder.size_hint(10)
        with pytest.raises(BuilderConsumedError, match="already called"):
            builder.result()

    def test_size_hint_does_not_change_content(self):
        hinted = GraphBuilder(Graph)
        hinted.size_hint(1)
        hinted.add_all([DiEdge(i, i + 1) for i in range(10)])
        plain = GraphBuilder(Graph)
        plain.add_all([DiEdge(i, i + 1) for i in range(10)])
        assert hinted.expected_size == 1
        assert hinted.result() == plain.result()

    def test_size_hint_defaults_to_order_hint(self):
        builder = GraphBuilder(Graph, CoreConfig(order_hint=12))
        assert builder.expected_size == 12
        assert builder.result().config.order_hint == 12
