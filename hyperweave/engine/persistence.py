"""JSON save/load for graph values.

The file holds the dict produced by ``to_dict()``:

    {"nodes": [...], "edges": [{"kind": "DiEdge", "ends": [...], ...}, ...]}

JSON has no tuples, so lists are read back as tuples to keep node values
hashable.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from hyperweave.engine.graph import BaseGraph, Graph
from hyperweave.models import CoreConfig


def _validate_path(path: str | Path) -> Path:
    """Resolve a file path, rejecting paths with null bytes.

    Raises:
        ValueError: If path is invalid
    """
    if "\x00" in str(path):
        raise ValueError(f"Invalid path (contains null bytes): {str(path)!r}")
    return Path(path).resolve()


def _hashable(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(_hashable(item) for item in value)
    return value


def _decode(data: dict[str, Any]) -> dict[str, Any]:
    return {
        "nodes": [_hashable(node) for node in data.get("nodes", [])],
        "edges": [
            {
                **edge,
                "ends": [_hashable(end) for end in edge["ends"]],
                **({"label": _hashable(edge["label"])} if "label" in edge else {}),
            }
            for edge in data.get("edges", [])
        ],
    }


def save_graph(graph: BaseGraph, path: str | Path) -> None:
    """Save a graph to a JSON file.

    Args:
        graph: The graph to save; nodes must be JSON-representable
        path: Output file path

    Raises:
        ValueError: If path is invalid
        TypeError: If a node or edge field cannot be encoded as JSON
    """
    validated_path = _validate_path(path)
    validated_path.parent.mkdir(parents=True, exist_ok=True)
    with open(validated_path, "w", encoding="utf-8") as f:
        json.dump(graph.to_dict(), f, indent=2, ensure_ascii=False)


def load_graph(
    path: str | Path,
    graph_cls: type[BaseGraph] = Graph,
    *,
    config: CoreConfig | None = None,
) -> Any:
    """Load a graph from a JSON file written by ``save_graph``.

    Args:
        path: Input file path
        graph_cls: ``Graph`` or ``MutableGraph``
        config: Construction configuration (default when None)

    Raises:
        ValueError: If path is invalid or an edge kind is unknown
        FileNotFoundError: If the file does not exist
    """
    validated_path = _validate_path(path)
    with open(validated_path, encoding="utf-8") as f:
        data = json.load(f)
    return graph_cls.from_dict(_decode(data), config=config)
