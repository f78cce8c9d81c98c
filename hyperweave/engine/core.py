"""The node/edge store shared by immutable and mutable graphs.

``GraphCore`` pairs a ``NodeSet`` with an ``EdgeSet`` and applies the one
rule every graph value relies on: each end of each stored edge is a stored
node. Edges auto-insert their ends; removing a node removes its incident
edges.
"""

from __future__ import annotations

from collections import Counter
from typing import Any

from hyperweave.engine.edges import EdgeLike
from hyperweave.engine.sets import EdgeSet, NodeSet
from hyperweave.models import DEFAULT_CONFIG, CoreConfig


class GraphCore:
    """Node and edge storage with indexed incidence lookup.

    Not synchronized: concurrent mutation requires external locking.
    """

    def __init__(self, config: CoreConfig | None = None) -> None:
        self.config = config if config is not None else DEFAULT_CONFIG
        self.nodes = NodeSet()
        self.edges = EdgeSet(self.nodes, index_incidences=self.config.index_incidences)

    def copy(self) -> GraphCore:
        """Shallow copy: new sets holding the same node and edge values."""
        new_core = GraphCore(self.config)
        for node in self.nodes:
            new_core.nodes.insert(node)
        for edge in self.edges:
            new_core.edges.insert(edge)
        return new_core

    # ========== Insertion ==========

    def add(self, param: Any) -> bool:
        """Add a node or an edge. Returns True if the store changed."""
        if isinstance(param, EdgeLike):
            return self.add_edge(param)
        return self.add_node(param)

    def add_node(self, node: Any) -> bool:
        return self.nodes.insert(node)[1]

    def add_edge(self, edge: EdgeLike) -> bool:
        return self.edges.insert(edge)[1]

    # ========== Removal ==========

    def remove_node(self, node: Any) -> bool:
        """Remove a node together with all its incident edges.

        Returns:
            True if the node was present
        """
        if node not in self.nodes:
            return False
        for edge in self.edges.incident(node):
            self.edges.discard(edge)
        return self.nodes.discard(node)

    def remove_edge(self, edge: EdgeLike) -> bool:
        """Remove an edge; its ends stay in the graph."""
        return self.edges.discard(edge)

    def clear(self) -> None:
        self.edges.clear()
        self.nodes.clear()

    # ========== Degrees ==========

    def degree(self, node: Any) -> int:
        """Number of occurrences of ``node`` among the ends of all edges."""
        return sum(edge.ends.count(node) for edge in self.edges.incident(node))

    def degrees(self) -> dict[Any, int]:
        """Degree of every node, isolated nodes included."""
        counts = Counter(end for edge in self.edges for end in edge.ends)
        return {node: counts.get(node, 0) for node in self.nodes}
