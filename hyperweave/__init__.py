"""Hyperweave: deduplicating graph construction and random graph synthesis."""

__version__ = "0.1.0"

from hyperweave.engine import (
    DiEdge,
    DiHyperEdge,
    Edge,
    EdgeInputStream,
    EdgeLike,
    Graph,
    GraphBuilder,
    HyperEdge,
    LDiEdge,
    LkDiEdge,
    LkUnDiEdge,
    LUnDiEdge,
    MutableGraph,
    NodeInputStream,
    TripleEdge,
    UnDiEdge,
    WDiEdge,
    WDiHyperEdge,
    WHyperEdge,
    WkDiEdge,
    WkDiHyperEdge,
    WkHyperEdge,
    WkUnDiEdge,
    WUnDiEdge,
    load_graph,
    register_edge_kind,
    save_graph,
)
from hyperweave.errors import (
    BuilderConsumedError,
    GenerationExhaustedError,
    HyperweaveError,
    MalformedEdgeError,
)
from hyperweave.factory import GraphFactory, immutable, mutable
from hyperweave.generator import GraphGen
from hyperweave.models import (
    DEFAULT_CONFIG,
    CoreConfig,
    GraphStats,
    Metrics,
    MetricsReport,
    NodeDegreeRange,
)

__all__ = [
    "BuilderConsumedError",
    "CoreConfig",
    "DEFAULT_CONFIG",
    "DiEdge",
    "DiHyperEdge",
    "Edge",
    "EdgeInputStream",
    "EdgeLike",
    "GenerationExhaustedError",
    "Graph",
    "GraphBuilder",
    "GraphFactory",
    "GraphGen",
    "GraphStats",
    "HyperEdge",
    "HyperweaveError",
    "LDiEdge",
    "LUnDiEdge",
    "LkDiEdge",
    "LkUnDiEdge",
    "MalformedEdgeError",
    "Metrics",
    "MetricsReport",
    "MutableGraph",
    "NodeDegreeRange",
    "NodeInputStream",
    "TripleEdge",
    "UnDiEdge",
    "WDiEdge",
    "WDiHyperEdge",
    "WHyperEdge",
    "WUnDiEdge",
    "WkDiEdge",
    "WkDiHyperEdge",
    "WkHyperEdge",
    "WkUnDiEdge",
    "__version__",
    "immutable",
    "load_graph",
    "mutable",
    "register_edge_kind",
    "save_graph",
]
