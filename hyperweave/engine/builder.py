"""Incremental graph builder backing every factory entry point."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Generic, TypeVar

from hyperweave.engine.core import GraphCore
from hyperweave.engine.graph import BaseGraph
from hyperweave.errors import BuilderConsumedError
from hyperweave.models import CoreConfig

G = TypeVar("G", bound=BaseGraph)


class GraphBuilder(Generic[G]):
    """Single-use accumulator turning nodes and edges into a graph.

    Each parameter is either an edge (anything satisfying ``EdgeLike``) or a
    bare node. Duplicates are ignored; edge ends are added as nodes.

    Example:
        builder = Graph.new_builder()
        builder.add(1)
        builder.add(DiEdge(1, 2))
        g = builder.result()

    Raises:
        BuilderConsumedError: If used again after ``result()``
    """

    def __init__(self, graph_cls: type[G], config: CoreConfig | None = None) -> None:
        self._graph_cls = graph_cls
        self._core: GraphCore | None = GraphCore(config)
        self._size_hint = self._core.config.order_hint

    def _live_core(self) -> GraphCore:
        if self._core is None:
            raise BuilderConsumedError("GraphBuilder.result() was already called")
        return self._core

    def add(self, param: Any) -> bool:
        """Add a node or an edge. Returns True if it was not already present."""
        return self._live_core().add(param)

    def add_all(self, params: Iterable[Any]) -> int:
        """Add several parameters. Returns how many of them were new."""
        core = self._live_core()
        return sum(1 for param in params if core.add(param))

    def size_hint(self, size: int) -> None:
        """Record the expected number of parameters.

        Python dicts grow on demand, so the hint is informational only.
        """
        self._live_core()
        self._size_hint = size

    @property
    def expected_size(self) -> int:
        return self._size_hint

    def result(self) -> G:
        """Finish building. The builder cannot be used afterwards."""
        core = self._live_core()
        self._core = None
        return self._graph_cls(core)
