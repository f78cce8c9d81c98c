from hyperweave.engine.builder import GraphBuilder
from hyperweave.engine.core import GraphCore
from hyperweave.engine.edges import (
    DiEdge,
    DiHyperEdge,
    Edge,
    EdgeLike,
    HyperEdge,
    LDiEdge,
    LkDiEdge,
    LkUnDiEdge,
    LUnDiEdge,
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
    edge_kind,
    edge_kinds,
    register_edge_kind,
)
from hyperweave.engine.graph import BaseGraph, Graph, MutableGraph
from hyperweave.engine.persistence import load_graph, save_graph
from hyperweave.engine.sets import EdgeSet, NodeSet
from hyperweave.engine.streams import EdgeInputStream, NodeInputStream
from hyperweave.engine.traversal import component_of, components, is_connected

__all__ = [
    "BaseGraph",
    "DiEdge",
    "DiHyperEdge",
    "Edge",
    "EdgeInputStream",
    "EdgeLike",
    "EdgeSet",
    "Graph",
    "GraphBuilder",
    "GraphCore",
    "HyperEdge",
    "LDiEdge",
    "LUnDiEdge",
    "LkDiEdge",
    "LkUnDiEdge",
    "MutableGraph",
    "NodeInputStream",
    "NodeSet",
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
    "component_of",
    "components",
    "edge_kind",
    "edge_kinds",
    "is_connected",
    "load_graph",
    "register_edge_kind",
    "save_graph",
]
