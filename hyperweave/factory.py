"""Graph factory protocol: the construction entry points for graph values.

Every entry point builds through a fresh ``GraphBuilder`` and therefore
applies the same rules: duplicates (by node equality or edge identity) are
dropped silently and edge ends are added to the node set. They differ only
in the shape of their input.

Example:
    ```python
    from hyperweave import DiEdge, immutable

    g = immutable.apply(1, DiEdge(1, 2), DiEdge(2, 3))
    h = immutable.from_(nodes=[1], edges=[DiEdge(1, 2), DiEdge(2, 3)])
    assert g == h
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Generic, TypeVar

from hyperweave.engine.builder import GraphBuilder
from hyperweave.engine.edges import EdgeLike, edge_kind
from hyperweave.engine.graph import BaseGraph, Graph, MutableGraph
from hyperweave.models import DEFAULT_CONFIG, CoreConfig

G = TypeVar("G", bound=BaseGraph)


class GraphFactory(Generic[G]):
    """Construction entry points for one graph class.

    Args:
        graph_cls: ``Graph`` for immutable values, ``MutableGraph`` for mutable ones
        default_config: Configuration used when a call passes ``config=None``
    """

    def __init__(self, graph_cls: type[G], default_config: CoreConfig = DEFAULT_CONFIG) -> None:
        self.graph_cls = graph_cls
        self.default_config = default_config

    def __repr__(self) -> str:
        return f"GraphFactory({self.graph_cls.__name__})"

    def new_builder(self, *, config: CoreConfig | None = None) -> GraphBuilder[G]:
        return GraphBuilder(self.graph_cls, config if config is not None else self.default_config)

    def empty(self, *, config: CoreConfig | None = None) -> G:
        """Create a graph with no nodes and no edges."""
        return self.new_builder(config=config).result()

    def apply(self, *params: Any, config: CoreConfig | None = None) -> G:
        """Create a graph from nodes and edges supplied in any order.

        Args:
            *params: Bare nodes and/or edges; edge ends need not be listed

        Returns:
            New graph holding every node and every distinct edge
        """
        builder = self.new_builder(config=config)
        builder.size_hint(len(params))
        builder.add_all(params)
        return builder.result()

    def from_(
        self,
        nodes: Iterable[Any] = (),
        edges: Iterable[EdgeLike] = (),
        *,
        config: CoreConfig | None = None,
    ) -> G:
        """Create a graph from a node collection and an edge collection.

        Args:
            nodes: Isolated nodes, plus optionally any non-isolated ones
            edges: Edges of the graph; their ends are added to the node set

        Returns:
            New graph holding ``nodes``, all edge ends and all distinct ``edges``
        """
        builder = self.new_builder(config=config)
        builder.add_all(nodes)
        builder.add_all(edges)
        return builder.result()

    def from_stream(
        self,
        node_streams: Iterable[Iterable[Any]] = (),
        nodes: Iterable[Any] = (),
        edge_streams: Iterable[Iterable[EdgeLike]] = (),
        edges: Iterable[EdgeLike] = (),
        *,
        config: CoreConfig | None = None,
    ) -> G:
        """Create a graph from input streams merged with literal collections.

        Streams are read to exhaustion. Only isolated nodes have to be
        supplied through ``node_streams`` or ``nodes``; ends of streamed or
        literal edges are added automatically.

        Args:
            node_streams: Iterables of nodes (e.g. ``NodeInputStream``)
            nodes: Literal nodes
            edge_streams: Iterables of edges (e.g. ``EdgeInputStream``)
            edges: Literal edges
        """
        builder = self.new_builder(config=config)
        for stream in node_streams:
            builder.add_all(stream)
        builder.add_all(nodes)
        for stream in edge_streams:
            builder.add_all(stream)
        builder.add_all(edges)
        return builder.result()

    def fill(
        self,
        count: int,
        elem: Callable[[], Any],
        *,
        config: CoreConfig | None = None,
    ) -> G:
        """Create a graph from ``count`` evaluations of ``elem``.

        Args:
            count: Number of times ``elem`` is called
            elem: Zero-argument callable returning a node or an edge

        Raises:
            ValueError: If count is negative
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got: {count}")
        builder = self.new_builder(config=config)
        builder.size_hint(count)
        for _ in range(count):
            builder.add(elem())
        return builder.result()

    def from_dict(self, data: dict[str, Any], *, config: CoreConfig | None = None) -> G:
        """Create a graph from the dict produced by ``to_dict()``.

        Raises:
            ValueError: If an edge names an unknown edge kind
        """
        edges = [edge_kind(entry["kind"]).from_data(entry) for entry in data.get("edges", [])]
        return self.from_(data.get("nodes", []), edges, config=config)


immutable: GraphFactory[Graph] = GraphFactory(Graph)
mutable: GraphFactory[MutableGraph] = GraphFactory(MutableGraph)
