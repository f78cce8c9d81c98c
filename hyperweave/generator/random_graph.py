"""Random graphs with a given order, degree range and connectivity.

``GraphGen`` synthesizes graphs for property-based tests:

1. draw exactly ``order`` distinct nodes (bounded rejection sampling);
2. when connectivity is required, join every node to a growing connected
   part so the graph has a single component;
3. raise each node to the minimum degree, then add random edges until the
   total degree reaches the expected total (or an edge budget is used up),
   rejecting self-loops, duplicates and edges exceeding the maximum degree;
4. build the result with ``graph_cls.from_``.

Order and connectivity are hard constraints: when they cannot be met within
the attempt budget ``GenerationExhaustedError`` is raised. Degree targets are
soft; see ``Metrics`` for the tolerances a result is checked against.

Example:
    ```python
    gen = GraphGen.tiny_connected_int_di(Graph)
    g = gen.draw(random.Random(7))
    assert gen.metrics.verify(g).valid
    ```
"""

from __future__ import annotations

import logging
import random
from collections import deque
from collections.abc import Callable, Hashable, Sequence
from typing import Any, Generic, TypeVar

from hyperweave.engine.edges import DiEdge, EdgeLike
from hyperweave.engine.graph import BaseGraph, Graph
from hyperweave.errors import GenerationExhaustedError
from hyperweave.models import CoreConfig, Metrics, NodeDegreeRange

logger = logging.getLogger(__name__)

G = TypeVar("G", bound=BaseGraph)

NodeFactory = Callable[[random.Random], Any]
EdgeBudget = int | Callable[[random.Random], int] | None

# Upper arity drawn for hyperedge kinds without a maximum arity.
HYPER_ARITY_CAP = 4

TINY_INT = Metrics(order=5, node_degrees=NodeDegreeRange(min_degree=2, max_degree=4))
SMALL_INT = Metrics(order=20, node_degrees=NodeDegreeRange(min_degree=2, max_degree=5))


def int_nodes(order: int) -> NodeFactory:
    """Node factory drawing ints from ``0 .. 4 * order``."""
    upper = 4 * order

    def draw(rng: random.Random) -> int:
        return rng.randint(0, upper)

    return draw


class GraphGen(Generic[G]):
    """Random graph generator.

    Args:
        graph_cls: ``Graph`` or ``MutableGraph``
        order: Exact number of nodes
        node_factory: ``rng -> node``; may return duplicates
        node_degrees: Target degree range, as a ``NodeDegreeRange`` or (min, max)
        edge_kinds: Non-empty pool of edge kinds to draw edges from
        connected: Require a single component
        edge_budget: Number of edges to aim for, or ``rng -> int``; when None
            edges are added until the expected total degree is reached
        config: Construction configuration for the result
        max_node_draws: Node factory calls before giving up
            (default ``100 * order + 100``)
        max_edge_attempts: Rejected edges tolerated per phase
            (default ``200 * order``)

    Raises:
        ValueError: If ``edge_kinds`` is empty
        pydantic.ValidationError: If order or degree range are invalid
    """

    def __init__(
        self,
        graph_cls: type[G],
        order: int,
        node_factory: NodeFactory,
        node_degrees: NodeDegreeRange | tuple[int, int],
        edge_kinds: Sequence[Any],
        *,
        connected: bool = True,
        edge_budget: EdgeBudget = None,
        config: CoreConfig | None = None,
        max_node_draws: int | None = None,
        max_edge_attempts: int | None = None,
    ) -> None:
        if not edge_kinds:
            raise ValueError("edge_kinds must contain at least one edge kind")
        if isinstance(node_degrees, tuple):
            node_degrees = NodeDegreeRange(min_degree=node_degrees[0], max_degree=node_degrees[1])
        self.graph_cls = graph_cls
        self.metrics = Metrics(order=order, node_degrees=node_degrees, connected=connected)
        self.node_factory = node_factory
        self.edge_kinds = list(edge_kinds)
        self.edge_budget = edge_budget
        self.config = config
        self.max_node_draws = max_node_draws if max_node_draws is not None else 100 * order + 100
        self.max_edge_attempts = max_edge_attempts if max_edge_attempts is not None else 200 * order

    @classmethod
    def from_metrics(
        cls,
        graph_cls: type[G],
        metrics: Metrics,
        node_factory: NodeFactory,
        edge_kinds: Sequence[Any],
        **kwargs: Any,
    ) -> GraphGen[G]:
        return cls(
            graph_cls,
            metrics.order,
            node_factory,
            metrics.node_degrees,
            edge_kinds,
            connected=metrics.connected,
            **kwargs,
        )

    @classmethod
    def tiny_connected_int_di(cls, graph_cls: type[G] = Graph) -> GraphGen[G]:  # type: ignore[assignment]
        """Connected ``DiEdge`` graphs of 5 int nodes with degrees 2..4."""
        return cls.from_metrics(graph_cls, TINY_INT, int_nodes(TINY_INT.order), [DiEdge])

    @classmethod
    def small_connected_int_di(cls, graph_cls: type[G] = Graph) -> GraphGen[G]:  # type: ignore[assignment]
        """Connected ``DiEdge`` graphs of 20 int nodes with degrees 2..5."""
        return cls.from_metrics(graph_cls, SMALL_INT, int_nodes(SMALL_INT.order), [DiEdge])

    @property
    def order(self) -> int:
        return self.metrics.order

    def _node_list(self, rng: random.Random) -> list[Any]:
        found: dict[Any, None] = {}
        draws = 0
        while len(found) < self.order:
            if draws >= self.max_node_draws:
                raise GenerationExhaustedError(
                    f"Drew {draws} nodes but found only {len(found)} distinct values, "
                    f"expected {self.order}"
                )
            found.setdefault(self.node_factory(rng), None)
            draws += 1
        if draws > self.order:
            logger.debug("Node sampling needed %d draws for %d nodes", draws, self.order)
        return list(found)

    def node_set(self, rng: random.Random | None = None) -> set[Any]:
        """Exactly ``order`` distinct nodes.

        Raises:
            GenerationExhaustedError: If ``max_node_draws`` calls of the node
                factory do not yield enough distinct values
        """
        return set(self._node_list(rng if rng is not None else random.Random()))

    def draw(self, rng: random.Random | None = None) -> G:
        """Generate one graph.

        Raises:
            GenerationExhaustedError: If the order or the requested
                connectivity cannot be reached
        """
        rng = rng if rng is not None else random.Random()
        nodes = self._node_list(rng)
        edges = _Synthesis(self, rng, nodes).run()
        return self.graph_cls.from_(nodes, edges, config=self.config)  # type: ignore[return-value]


class _Synthesis:
    """State of a single ``GraphGen.draw`` call."""

    def __init__(self, gen: GraphGen[Any], rng: random.Random, nodes: list[Any]) -> None:
        self.gen = gen
        self.rng = rng
        self.nodes = nodes
        self.lo = gen.metrics.node_degrees.min_degree
        self.hi = gen.metrics.node_degrees.max_degree
        self.degree: dict[Any, int] = dict.fromkeys(nodes, 0)
        self.edges: dict[Hashable, EdgeLike] = {}
        self.kinds = [kind for kind in gen.edge_kinds if _min_arity(kind) <= len(nodes)]

    def run(self) -> list[EdgeLike]:
        if not self.kinds:
            if self.gen.metrics.connected and len(self.nodes) > 1:
                raise GenerationExhaustedError(
                    f"No edge kind in the pool fits a graph of order {len(self.nodes)}"
                )
            logger.warning("No edge kind fits order %d; generating isolated nodes", len(self.nodes))
            return []
        if self.gen.metrics.connected:
            self._connect()
        self._raise_to_min_degree()
        self._fill()
        return list(self.edges.values())

    @property
    def total_degree(self) -> int:
        return sum(self.degree.values())

    # ========== Edge construction ==========

    def _pick_kind(self) -> tuple[Any, int]:
        kind = self.rng.choice(self.kinds)
        low = _min_arity(kind)
        high = _max_arity(kind)
        high = max(low, HYPER_ARITY_CAP) if high is None else high
        return kind, self.rng.randint(low, min(high, len(self.nodes)))

    def _make(self, kind: Any, ends: list[Any]) -> EdgeLike:
        self.rng.shuffle(ends)
        extras_of = getattr(kind, "random_extras", None)
        extras = extras_of(self.rng) if extras_of is not None else {}
        return kind(*ends, **extras)

    def _try_add(self, edge: EdgeLike, cap: int | None) -> bool:
        """Store ``edge`` unless it is a loop, a duplicate or exceeds ``cap``."""
        ends = edge.ends
        if len(set(ends)) < len(ends):
            return False
        if edge.identity() in self.edges:
            return False
        if cap is not None and any(self.degree[end] >= cap for end in ends):
            return False
        self.edges[edge.identity()] = edge
        for end in ends:
            self.degree[end] += 1
        return True

    # ========== Phases ==========

    def _connect(self) -> None:
        order = list(self.nodes)
        self.rng.shuffle(order)
        connected = [order[0]]
        pending = deque(order[1:])
        attempts = 0
        while pending:
            if attempts >= self.gen.max_edge_attempts:
                raise GenerationExhaustedError(
                    f"Could not connect {len(pending)} remaining nodes "
                    f"after {attempts} attempts"
                )
            kind, arity = self._pick_kind()
            fresh = [pending.popleft() for _ in range(min(arity - 1, len(pending)))]
            need = arity - len(fresh)
            pool = [n for n in connected if self.degree[n] < self.hi]
            if len(pool) < need:
                pool = self._least_loaded(connected, need)
            if len(pool) < need:
                pending.extendleft(reversed(fresh))
                attempts += 1
                continue
            edge = self._make(kind, self.rng.sample(pool, need) + fresh)
            if not self._try_add(edge, cap=None):
                pending.extendleft(reversed(fresh))
                attempts += 1
                continue
            connected.extend(fresh)

    def _least_loaded(self, candidates: list[Any], count: int) -> list[Any]:
        """The ``count`` candidates with the lowest degree, ties in random order."""
        ranked = list(candidates)
        self.rng.shuffle(ranked)
        ranked.sort(key=self.degree.__getitem__)
        return ranked[:count]

    def _raise_to_min_degree(self) -> None:
        for relaxed in (False, True):
            attempts = 0
            while attempts < self.gen.max_edge_attempts:
                deficit = [n for n in self.nodes if self.degree[n] < self.lo]
                if not deficit:
                    return
                node = self.rng.choice(deficit)
                kind, arity = self._pick_kind()
                partners = self._partners(node, arity - 1, relaxed)
                if partners is None:
                    attempts += 1
                    continue
                cap = None if relaxed else self.hi
                if not self._try_add(self._make(kind, [node] + partners), cap):
                    attempts += 1
            if not relaxed:
                logger.debug("Relaxing maximum degree %d to reach minimum degree %d", self.hi, self.lo)
        missing = [n for n in self.nodes if self.degree[n] < self.lo]
        if missing:
            logger.warning(
                "Minimum degree %d not reached for %d of %d nodes", self.lo, len(missing), len(self.nodes)
            )

    def _partners(self, node: Any, count: int, relaxed: bool) -> list[Any] | None:
        others = [n for n in self.nodes if n != node]
        if relaxed:
            # Lowest degrees first, ties in random order
            self.rng.shuffle(others)
            others.sort(key=self.degree.__getitem__)
            window = others[: 2 * count]
            if len(window) < count:
                return None
            return self.rng.sample(window, count)
        below_min = [n for n in others if self.degree[n] < self.lo]
        below_max = [n for n in others if self.lo <= self.degree[n] < self.hi]
        chosen = self.rng.sample(below_min, min(count, len(below_min)))
        remaining = count - len(chosen)
        if remaining > len(below_max):
            return None
        return chosen + self.rng.sample(below_max, remaining)

    def _fill(self) -> None:
        budget = self.gen.edge_budget
        if callable(budget):
            budget = budget(self.rng)
        expected = self.gen.metrics.expected_total_degree
        attempts = 0
        while attempts < self.gen.max_edge_attempts:
            if budget is not None:
                if len(self.edges) >= budget:
                    return
            elif self.total_degree >= expected:
                return
            kind, arity = self._pick_kind()
            pool = [n for n in self.nodes if self.degree[n] < self.hi]
            if len(pool) < arity:
                attempts += 1
                continue
            if not self._try_add(self._make(kind, self.rng.sample(pool, arity)), cap=self.hi):
                attempts += 1
        logger.debug(
            "Edge attempts exhausted at %d edges, total degree %d", len(self.edges), self.total_degree
        )


def _min_arity(kind: Any) -> int:
    return getattr(kind, "min_arity", 2)


def _max_arity(kind: Any) -> int | None:
    return getattr(kind, "max_arity", 2)
