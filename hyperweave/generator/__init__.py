from hyperweave.generator.random_graph import (
    HYPER_ARITY_CAP,
    SMALL_INT,
    TINY_INT,
    GraphGen,
    int_nodes,
)

__all__ = [
    "GraphGen",
    "HYPER_ARITY_CAP",
    "SMALL_INT",
    "TINY_INT",
    "int_nodes",
]
