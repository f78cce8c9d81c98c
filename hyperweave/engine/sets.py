"""Deduplicated node and edge containers.

Nodes are keyed by value equality, edges by structural identity (see
``hyperweave.engine.edges``). Insertion is idempotent: inserting an element
equal to a stored one returns the stored instance and changes nothing.
Inserting an edge also inserts its ends into the paired node set, so the
edge set never refers to a node that is not stored.
"""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Hashable, Iterator
from typing import Any

from hyperweave.engine.edges import EdgeLike

_MISSING: Any = object()


class NodeSet:
    """Mapping from node value to its single stored instance."""

    def __init__(self) -> None:
        self._nodes: dict[Any, Any] = {}

    def insert(self, node: Any) -> tuple[Any, bool]:
        """Insert a node.

        Returns:
            Tuple of (stored node, added) where added is False for duplicates
        """
        stored = self._nodes.get(node, _MISSING)
        if stored is not _MISSING:
            return stored, False
        self._nodes[node] = node
        return node, True

    def get(self, node: Any, default: Any = None) -> Any:
        return self._nodes.get(node, default)

    def discard(self, node: Any) -> bool:
        """Remove a node. Returns True if it was present."""
        return self._nodes.pop(node, _MISSING) is not _MISSING

    def clear(self) -> None:
        self._nodes.clear()

    def __contains__(self, node: object) -> bool:
        try:
            return node in self._nodes
        except TypeError:
            return False

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._nodes)


class EdgeSet:
    """Edges keyed by structural identity, with auto-insertion of their ends.

    Args:
        nodes: Node set receiving the ends of every inserted edge
        index_incidences: Keep a node -> incident edge identities index.
            Without it, incident edges are found by scanning all edges.
    """

    def __init__(self, nodes: NodeSet, index_incidences: bool = True) -> None:
        self._nodes = nodes
        self._edges: dict[Hashable, EdgeLike] = {}
        self._index_incidences = index_incidences
        self._node_to_edges: dict[Any, set[Hashable]] = defaultdict(set)

    @property
    def nodes(self) -> NodeSet:
        return self._nodes

    def insert(self, edge: EdgeLike) -> tuple[EdgeLike, bool]:
        """Insert an edge, adding any missing ends to the node set.

        Returns:
            Tuple of (stored edge, added) where added is False for duplicates
        """
        key = edge.identity()
        stored = self._edges.get(key)
        if stored is not None:
            return stored, False
        for end in edge.ends:
            self._nodes.insert(end)
        self._edges[key] = edge
        if self._index_incidences:
            for end in edge.ends:
                self._node_to_edges[end].add(key)
        return edge, True

    def get(self, edge: EdgeLike, default: EdgeLike | None = None) -> EdgeLike | None:
        return self._edges.get(edge.identity(), default)

    def discard(self, edge: EdgeLike) -> bool:
        """Remove an edge; its ends stay in the node set. Returns True if present."""
        key = edge.identity()
        stored = self._edges.pop(key, None)
        if stored is None:
            return False
        if self._index_incidences:
            for end in stored.ends:
                keys = self._node_to_edges.get(end)
                if keys is None:
                    continue
                keys.discard(key)
                # Drop empty index entries
                if not keys:
                    del self._node_to_edges[end]
        return True

    def incident(self, node: Any) -> list[EdgeLike]:
        """All stored edges having ``node`` among their ends."""
        if self._index_incidences:
            keys = self._node_to_edges.get(node, set())
            return [self._edges[key] for key in keys]
        return [edge for edge in self._edges.values() if node in edge.ends]

    def clear(self) -> None:
        self._edges.clear()
        self._node_to_edges.clear()

    def __contains__(self, edge: object) -> bool:
        if not isinstance(edge, EdgeLike):
            return False
        return edge.identity() in self._edges

    def __len__(self) -> int:
        return len(self._edges)

    def __iter__(self) -> Iterator[EdgeLike]:
        return iter(self._edges.values())
