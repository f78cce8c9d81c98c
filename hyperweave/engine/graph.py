"""Graph values: a read-only ``Graph`` and a mutating ``MutableGraph``.

Both front-ends wrap a ``GraphCore``; they differ only in which operations
they expose. Graphs are created through the factory classmethods
(``Graph.from_``, ``Graph.apply``, ...) or a ``GraphBuilder``, never by
filling a core by hand.

Example:
    ```python
    g = Graph.from_(edges=[DiEdge(1, 2), DiEdge(2, 3), DiEdge(1, 2)])
    g.order        # 3
    g.graph_size   # 2
    g.degree(2)    # 2
    ```
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable, Iterator, Set
from typing import TYPE_CHECKING, Any

from hyperweave.engine import traversal
from hyperweave.engine.core import GraphCore
from hyperweave.engine.edges import EdgeLike
from hyperweave.models import CoreConfig, GraphStats

if TYPE_CHECKING:
    from hyperweave.engine.builder import GraphBuilder
    from hyperweave.factory import GraphFactory


class _SetView(Set):
    """Live read-only set view over a node or edge set."""

    def __init__(self, source: Any) -> None:
        self._source = source

    @classmethod
    def _from_iterable(cls, it: Iterable[Any]) -> frozenset[Any]:
        return frozenset(it)

    def __contains__(self, item: object) -> bool:
        return item in self._source

    def __iter__(self) -> Iterator[Any]:
        return iter(self._source)

    def __len__(self) -> int:
        return len(self._source)

    def __repr__(self) -> str:
        return "{" + ", ".join(repr(item) for item in self._source) + "}"


class BaseGraph:
    """Read operations shared by immutable and mutable graphs."""

    def __init__(self, core: GraphCore) -> None:
        self._core = core

    # ========== Factory protocol ==========

    @classmethod
    def factory(cls) -> GraphFactory:
        from hyperweave.factory import GraphFactory

        return GraphFactory(cls)

    @classmethod
    def empty(cls, *, config: CoreConfig | None = None) -> Any:
        """Create a graph with no nodes and no edges."""
        return cls.factory().empty(config=config)

    @classmethod
    def apply(cls, *params: Any, config: CoreConfig | None = None) -> Any:
        """Create a graph from nodes and/or edges given in any order."""
        return cls.factory().apply(*params, config=config)

    @classmethod
    def from_(
        cls,
        nodes: Iterable[Any] = (),
        edges: Iterable[EdgeLike] = (),
        *,
        config: CoreConfig | None = None,
    ) -> Any:
        """Create a graph from a node collection and an edge collection."""
        return cls.factory().from_(nodes, edges, config=config)

    @classmethod
    def from_stream(
        cls,
        node_streams: Iterable[Iterable[Any]] = (),
        nodes: Iterable[Any] = (),
        edge_streams: Iterable[Iterable[EdgeLike]] = (),
        edges: Iterable[EdgeLike] = (),
        *,
        config: CoreConfig | None = None,
    ) -> Any:
        """Create a graph from node/edge streams merged with literal collections."""
        return cls.factory().from_stream(
            node_streams, nodes, edge_streams, edges, config=config
        )

    @classmethod
    def fill(cls, count: int, elem: Callable[[], Any], *, config: CoreConfig | None = None) -> Any:
        """Create a graph from ``count`` results of calling ``elem``."""
        return cls.factory().fill(count, elem, config=config)

    @classmethod
    def from_dict(cls, data: dict[str, Any], *, config: CoreConfig | None = None) -> Any:
        """Create a graph from the output of ``to_dict()``."""
        return cls.factory().from_dict(data, config=config)

    @classmethod
    def new_builder(cls, *, config: CoreConfig | None = None) -> GraphBuilder:
        return cls.factory().new_builder(config=config)

    # ========== Node and edge sets ==========

    @property
    def config(self) -> CoreConfig:
        return self._core.config

    @property
    def nodes(self) -> Set[Any]:
        return _SetView(self._core.nodes)

    @property
    def edges(self) -> Set[EdgeLike]:
        return _SetView(self._core.edges)

    @property
    def order(self) -> int:
        """Number of nodes."""
        return len(self._core.nodes)

    @property
    def graph_size(self) -> int:
        """Number of edges."""
        return len(self._core.edges)

    size = graph_size

    def __contains__(self, element: object) -> bool:
        if isinstance(element, EdgeLike):
            return element in self._core.edges
        return element in self._core.nodes

    def find(self, element: Any) -> Any:
        """The stored node or edge equal to ``element``, or None."""
        if isinstance(element, EdgeLike):
            return self._core.edges.get(element)
        return self._core.nodes.get(element)

    def get(self, element: Any) -> Any:
        """The stored node or edge equal to ``element``.

        Raises:
            KeyError: If ``element`` is not in the graph
        """
        if element not in self:
            raise KeyError(element)
        return self.find(element)

    # ========== Incidence and degrees ==========

    def _require_node(self, node: Any) -> None:
        if node not in self._core.nodes:
            raise KeyError(node)

    def incident_edges(self, node: Any) -> list[EdgeLike]:
        """All edges having ``node`` as an end."""
        self._require_node(node)
        return self._core.edges.incident(node)

    def neighbors(self, node: Any) -> set[Any]:
        """Nodes sharing an edge with ``node``, excluding ``node`` itself."""
        result = {end for edge in self.incident_edges(node) for end in edge.ends}
        result.discard(node)
        return result

    def degree(self, node: Any) -> int:
        """Number of edge ends at ``node``; loops and repeated hyperedge ends count twice."""
        self._require_node(node)
        return self._core.degree(node)

    def degrees(self) -> dict[Any, int]:
        return self._core.degrees()

    @property
    def degree_seq(self) -> list[int]:
        """Node degrees in descending order."""
        return sorted(self._core.degrees().values(), reverse=True)

    @property
    def min_degree(self) -> int:
        return min(self._core.degrees().values(), default=0)

    @property
    def max_degree(self) -> int:
        return max(self._core.degrees().values(), default=0)

    @property
    def total_degree(self) -> int:
        """Sum of all node degrees, equal to the sum of all edge arities."""
        return sum(len(edge.ends) for edge in self._core.edges)

    @property
    def is_hyper(self) -> bool:
        """True if some edge is a hyperedge kind or has more than two ends."""
        return any(
            getattr(edge, "hyper", False) or len(edge.ends) > 2 for edge in self._core.edges
        )

    @property
    def is_directed(self) -> bool:
        """True if the graph has edges and all of them are directed."""
        return bool(self._core.edges) and all(edge.directed for edge in self._core.edges)

    # ========== Connectivity ==========

    @property
    def is_connected(self) -> bool:
        return traversal.is_connected(self)

    def components(self) -> list[set[Any]]:
        return traversal.components(self)

    # ========== Reporting and conversion ==========

    def stats(self) -> GraphStats:
        degrees = self._core.degrees().values()
        by_kind = Counter(type(edge).__name__ for edge in self._core.edges)
        return GraphStats(
            order=self.order,
            size=self.graph_size,
            total_degree=self.total_degree,
            min_degree=min(degrees, default=0),
            max_degree=max(degrees, default=0),
            is_hyper=self.is_hyper,
            is_connected=self.is_connected,
            edges_by_kind=dict(by_kind),
        )

    def to_dict(self) -> dict[str, Any]:
        """Export nodes and edges as a JSON-shaped dict."""
        return {
            "nodes": list(self._core.nodes),
            "edges": [edge.to_dict() for edge in self._core.edges],
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BaseGraph):
            return NotImplemented
        return self.nodes == other.nodes and self.edges == other.edges

    def __repr__(self) -> str:
        return f"{type(self).__name__}(order={self.order}, size={self.graph_size})"


class Graph(BaseGraph):
    """Immutable graph. Safe to share between threads once built."""

    _hash: int | None = None

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((frozenset(self._core.nodes), frozenset(self._core.edges)))
        return self._hash

    def to_mutable(self) -> MutableGraph:
        """A mutable copy of this graph."""
        return MutableGraph(self._core.copy())


class MutableGraph(BaseGraph):
    """Graph with in-place add/remove.

    Every mutation applies the same deduplication and end auto-insertion rule
    as construction. Not synchronized: guard shared instances externally.
    """

    __hash__ = None  # type: ignore[assignment]

    def add(self, param: Any) -> bool:
        """Add a node or an edge. Returns True if the graph changed."""
        return self._core.add(param)

    def add_node(self, node: Any) -> bool:
        return self._core.add_node(node)

    def add_edge(self, edge: EdgeLike) -> bool:
        """Add an edge and any of its ends not yet in the graph."""
        return self._core.add_edge(edge)

    def add_all(self, params: Iterable[Any]) -> int:
        """Add nodes and/or edges. Returns the number of new elements."""
        return sum(1 for param in params if self._core.add(param))

    def remove_node(self, node: Any) -> bool:
        """Remove a node and all its incident edges. Returns True if present."""
        return self._core.remove_node(node)

    def remove_edge(self, edge: EdgeLike) -> bool:
        """Remove an edge, keeping its ends. Returns True if present."""
        return self._core.remove_edge(edge)

    def clear(self) -> None:
        self._core.clear()

    def freeze(self) -> Graph:
        """An immutable copy of this graph."""
        return Graph(self._core.copy())
