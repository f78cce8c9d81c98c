"""Pydantic models for Hyperweave configuration and reports.

These are the value records passed across the public API: the construction
configuration threaded through every factory call, the degree/order metrics
a generated graph is checked against, and the reports produced by checks.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

if TYPE_CHECKING:
    from hyperweave.engine.graph import BaseGraph

# Allowed excess of the realized maximum degree over the requested one.
SIMPLE_DEGREE_TOLERANCE = 1
HYPER_DEGREE_TOLERANCE = 8


class CoreConfig(BaseModel):
    """Construction configuration shared by all factory entry points.

    Attributes:
        order_hint: Expected number of nodes, used as the default builder
            size hint. Never affects graph content.
        index_incidences: Adjacency strategy. When True the edge set keeps a
            node -> incident edges index; when False incident edges are found
            by scanning the edge set.
    """

    model_config = ConfigDict(frozen=True)

    order_hint: int = Field(default=4000, ge=0)
    index_incidences: bool = True


DEFAULT_CONFIG = CoreConfig()


class NodeDegreeRange(BaseModel):
    """Inclusive range of permitted node degrees."""

    model_config = ConfigDict(frozen=True)

    min_degree: int = Field(ge=0)
    max_degree: int = Field(ge=0)

    @model_validator(mode="after")
    def _check_bounds(self) -> NodeDegreeRange:
        if self.min_degree > self.max_degree:
            raise ValueError(
                f"min_degree must not exceed max_degree, got: "
                f"{self.min_degree} > {self.max_degree}"
            )
        return self

    @property
    def mean(self) -> float:
        return (self.min_degree + self.max_degree) / 2

    def __contains__(self, degree: int) -> bool:
        return self.min_degree <= degree <= self.max_degree


class MetricsReport(BaseModel):
    """Result of checking a graph against ``Metrics``.

    Contains a pass/fail flag and one message per violated bound.
    """

    valid: bool
    errors: list[str] = Field(default_factory=list)


class Metrics(BaseModel):
    """Order, degree and connectivity bounds a generated graph must meet.

    The degree bounds are checked with a tolerance: exact degree sequences
    are not always reachable with random (hyper)edge insertion, so the
    realized maximum degree may exceed ``node_degrees.max_degree`` by
    ``max_degree_tolerance`` and the total degree may deviate from
    ``expected_total_degree`` by ``max_degree_deviation``. A connected
    simple graph may always reach ``spanning_total_degree``, even when that
    exceeds the expected total.
    """

    model_config = ConfigDict(frozen=True)

    order: int = Field(ge=1)
    node_degrees: NodeDegreeRange
    connected: bool = True
    degree_deviation: int | None = Field(default=None, ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def expected_total_degree(self) -> int:
        return int(self.order * self.node_degrees.mean)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def max_degree_deviation(self) -> int:
        if self.degree_deviation is not None:
            return self.degree_deviation
        return max(2, self.expected_total_degree // 5)

    @property
    def spanning_total_degree(self) -> int:
        """Total degree of a spanning tree: the least a connected simple graph can have."""
        return 2 * (self.order - 1)

    @staticmethod
    def max_degree_tolerance(is_hyper: bool) -> int:
        return HYPER_DEGREE_TOLERANCE if is_hyper else SIMPLE_DEGREE_TOLERANCE

    def verify(self, graph: BaseGraph) -> MetricsReport:
        """Check ``graph`` against these metrics.

        Args:
            graph: Any immutable or mutable graph

        Returns:
            MetricsReport listing every violated bound
        """
        errors: list[str] = []
        lo = self.node_degrees.min_degree
        hi = self.node_degrees.max_degree

        if graph.order != self.order:
            errors.append(f"order is {graph.order}, expected {self.order}")
        if self.connected and not graph.is_connected:
            errors.append(f"graph has {len(graph.components())} components, expected 1")

        if graph.order:
            tolerance = self.max_degree_tolerance(graph.is_hyper)
            if graph.min_degree < lo:
                errors.append(f"minimum degree is {graph.min_degree}, expected >= {lo}")
            if graph.max_degree > hi + tolerance:
                errors.append(
                    f"maximum degree is {graph.max_degree}, expected <= {hi} + {tolerance}"
                )

        lowest = self.expected_total_degree - self.max_degree_deviation
        highest = self.expected_total_degree + self.max_degree_deviation
        if self.connected and not graph.is_hyper:
            highest = max(highest, self.spanning_total_degree)
        if not lowest <= graph.total_degree <= highest:
            errors.append(
                f"total degree is {graph.total_degree}, expected {lowest}..{highest}"
            )

        return MetricsReport(valid=not errors, errors=errors)


class GraphStats(BaseModel):
    """Summary counts for a graph.

    Reports order, size and degree figures, with edge counts broken down by
    edge kind.
    """

    order: int
    size: int
    total_degree: int
    min_degree: int
    max_degree: int
    is_hyper: bool
    is_connected: bool
    edges_by_kind: dict[str, int]
