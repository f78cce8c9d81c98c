"""Component search over graphs.

Connectivity is weak: edge direction is ignored and every end of a
hyperedge is reachable from every other end.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from hyperweave.engine.graph import BaseGraph


def component_of(graph: BaseGraph, start: Any) -> set[Any]:
    """All nodes reachable from ``start``, including ``start`` itself.

    Raises:
        KeyError: If ``start`` is not a node of ``graph``
    """
    if start not in graph.nodes:
        raise KeyError(start)
    seen = {start}
    queue: deque[Any] = deque([start])
    while queue:
        node = queue.popleft()
        for edge in graph.incident_edges(node):
            for end in edge.ends:
                if end not in seen:
                    seen.add(end)
                    queue.append(end)
    return seen


def components(graph: BaseGraph) -> list[set[Any]]:
    """Weakly connected components, largest first."""
    remaining = set(graph.nodes)
    found: list[set[Any]] = []
    while remaining:
        component = component_of(graph, next(iter(remaining)))
        remaining -= component
        found.append(component)
    found.sort(key=len, reverse=True)
    return found


def is_connected(graph: BaseGraph) -> bool:
    """True if ``graph`` has at most one component.

    The empty graph and single-node graphs count as connected.
    """
    if graph.order <= 1:
        return True
    return len(component_of(graph, next(iter(graph.nodes)))) == graph.order
