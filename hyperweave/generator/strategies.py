"""Hypothesis strategies producing generated graphs.

Hypothesis supplies the seed; the graph itself is synthesized by
``GraphGen`` from a ``random.Random`` seeded with it, so failing examples
shrink towards small seeds and replay deterministically.
"""

from __future__ import annotations

import random
from typing import Any

from hypothesis import strategies as st

from hyperweave.engine.graph import BaseGraph, Graph
from hyperweave.generator.random_graph import GraphGen

seeds = st.integers(min_value=0, max_value=2**32 - 1)


@st.composite
def graphs(draw: st.DrawFn, gen: GraphGen[Any]) -> BaseGraph:
    """Graphs drawn from ``gen``."""
    return gen.draw(random.Random(draw(seeds)))


@st.composite
def node_sets(draw: st.DrawFn, gen: GraphGen[Any]) -> set[Any]:
    """Sets of exactly ``gen.order`` distinct nodes."""
    return gen.node_set(random.Random(draw(seeds)))


def tiny_connected_int_di_graphs(graph_cls: type[BaseGraph] = Graph) -> st.SearchStrategy[Any]:
    return graphs(GraphGen.tiny_connected_int_di(graph_cls))


def small_connected_int_di_graphs(graph_cls: type[BaseGraph] = Graph) -> st.SearchStrategy[Any]:
    return graphs(GraphGen.small_connected_int_di(graph_cls))
