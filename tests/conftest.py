"""Shared fixtures for Hyperweave tests."""

import random
from dataclasses import dataclass

import pytest

from hyperweave import DiEdge, Graph, HyperEdge, TripleEdge, UnDiEdge


@dataclass(frozen=True)
class IRI:
    value: str


@dataclass(frozen=True)
class Label:
    value: str


@dataclass(frozen=True)
class BlankNode:
    id: int


@pytest.fixture()
def rng():
    """Seeded random source."""
    return random.Random(42)


@pytest.fixture()
def rdf_nodes():
    """Five distinct RDF terms: two subjects, one predicate, two objects."""
    return {
        "s1": IRI("s-1"),
        "s2": IRI("s-2"),
        "p": IRI("p-1"),
        "o1": Label("l-1"),
        "o2": BlankNode(1),
    }


@pytest.fixture()
def triples(rdf_nodes):
    """Two statements sharing their predicate."""
    n = rdf_nodes
    return [
        TripleEdge(n["s1"], n["p"], n["o1"]),
        TripleEdge(n["s2"], n["p"], n["o2"]),
    ]


@pytest.fixture()
def mixed_graph():
    """Graph with directed, undirected and hyper edges plus an isolated node.

    Nodes (6): 1, 2, 3, 4, 5, "isolated"

    Edges (4):
        DiEdge(1, 2), DiEdge(2, 3), UnDiEdge(3, 4), HyperEdge(1, 4, 5)
    """
    return Graph.from_(
        nodes=["isolated"],
        edges=[DiEdge(1, 2), DiEdge(2, 3), UnDiEdge(3, 4), HyperEdge(1, 4, 5)],
    )
