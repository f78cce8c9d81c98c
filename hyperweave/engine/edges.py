"""Edge kinds and the structural identity rule used for deduplication.

Every edge exposes its end sequence, whether it is directed (ordered ends)
and the extended-key components folded into its identity. Two edges are the
same graph element iff their identities are equal:

    (directed, ends under the ordering rule, extended key)

Directed edges compare their ends as sequences; undirected edges compare
them as multisets. Payload fields (e.g. the weight of a ``WDiEdge``) are
carried along but do not take part in identity; key fields (e.g. the weight
of a ``WkDiEdge``) do.

New kinds are added by satisfying ``EdgeLike``; subclassing ``Edge`` and
setting its class attributes is the short way to do that.
"""

from __future__ import annotations

import random
from collections import Counter
from collections.abc import Hashable, Iterator, Mapping
from typing import Any, ClassVar, Protocol, runtime_checkable

from hyperweave.errors import MalformedEdgeError

_EDGE_KINDS: dict[str, type[Edge]] = {}

_LABEL_ALPHABET = "abcdefgh"


@runtime_checkable
class EdgeLike(Protocol):
    """Capability contract of an edge, as seen by sets, builders and graphs."""

    @property
    def ends(self) -> tuple[Any, ...]: ...

    @property
    def directed(self) -> bool: ...

    def key_extra(self) -> tuple[Any, ...]: ...

    def identity(self) -> Hashable: ...


def register_edge_kind(cls: type[Edge]) -> type[Edge]:
    """Class decorator adding an edge kind to the catalog under its class name."""
    _EDGE_KINDS[cls.__name__] = cls
    return cls


def edge_kind(name: str) -> type[Edge]:
    """Look up a registered edge kind by name.

    Raises:
        ValueError: If no kind is registered under ``name``
    """
    try:
        return _EDGE_KINDS[name]
    except KeyError:
        raise ValueError(
            f"Unknown edge kind: {name!r}. Known kinds: {sorted(_EDGE_KINDS)}"
        ) from None


def edge_kinds() -> list[str]:
    """Names of all registered edge kinds."""
    return sorted(_EDGE_KINDS)


class Edge:
    """Base edge: an immutable sequence of node ends.

    Class attributes describe the kind:
        directed: Ends are ordered (source first) when True
        hyper: The kind is a hyperedge kind regardless of its arity
        min_arity / max_arity: Permitted number of ends (max None = unbounded)
        key_fields: Attribute names folded into identity
        payload_fields: Attribute names carried but not part of identity

    Raises:
        MalformedEdgeError: If the number of ends is outside the kind's arity
    """

    directed: ClassVar[bool] = False
    hyper: ClassVar[bool] = False
    min_arity: ClassVar[int] = 2
    max_arity: ClassVar[int | None] = 2
    key_fields: ClassVar[tuple[str, ...]] = ()
    payload_fields: ClassVar[tuple[str, ...]] = ()

    def __init__(self, *ends: Any) -> None:
        n = len(ends)
        if n < self.min_arity or (self.max_arity is not None and n > self.max_arity):
            raise MalformedEdgeError(
                f"{type(self).__name__} takes {self._arity_text()} ends, got: {n}"
            )
        object.__setattr__(self, "_ends", tuple(ends))
        object.__setattr__(self, "_hash", None)

    @classmethod
    def _arity_text(cls) -> str:
        if cls.max_arity is None:
            return f"at least {cls.min_arity}"
        if cls.max_arity == cls.min_arity:
            return f"exactly {cls.min_arity}"
        return f"{cls.min_arity} to {cls.max_arity}"

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ========== Contract ==========

    @property
    def ends(self) -> tuple[Any, ...]:
        return self._ends

    def key_extra(self) -> tuple[Any, ...]:
        return tuple(getattr(self, name) for name in self.key_fields)

    def identity(self) -> Hashable:
        if self.directed:
            ends_key: Hashable = self._ends
        else:
            ends_key = frozenset(Counter(self._ends).items())
        return (self.directed, ends_key, self.key_extra())

    # ========== Value behaviour ==========

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, EdgeLike):
            return NotImplemented
        return self.identity() == other.identity()

    def __hash__(self) -> int:
        if self._hash is None:
            object.__setattr__(self, "_hash", hash(self.identity()))
        return self._hash

    def __len__(self) -> int:
        return len(self._ends)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._ends)

    def __getitem__(self, index: int) -> Any:
        return self._ends[index]

    def __repr__(self) -> str:
        parts = [repr(end) for end in self._ends]
        parts.extend(f"{name}={getattr(self, name)!r}" for name in self._field_names())
        return f"{type(self).__name__}({', '.join(parts)})"

    @property
    def arity(self) -> int:
        return len(self._ends)

    @property
    def node_set(self) -> frozenset[Any]:
        """Distinct ends of this edge."""
        return frozenset(self._ends)

    @property
    def is_loop(self) -> bool:
        """True if some node appears more than once among the ends."""
        return len(set(self._ends)) < len(self._ends)

    # ========== Conversion ==========

    @classmethod
    def _field_names(cls) -> tuple[str, ...]:
        return tuple(dict.fromkeys(cls.key_fields + cls.payload_fields))

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"kind": type(self).__name__, "ends": list(self._ends)}
        for name in self._field_names():
            data[name] = getattr(self, name)
        return data

    @classmethod
    def from_data(cls, data: Any) -> Edge:
        """Build an edge of this kind from raw data.

        ``data`` is either a sequence of ends or a mapping with an ``ends``
        entry plus any key/payload fields of the kind.
        """
        if isinstance(data, Mapping):
            extras = {name: data[name] for name in cls._field_names() if name in data}
            return cls(*data["ends"], **extras)
        return cls(*data)

    @classmethod
    def random_extras(cls, rng: random.Random) -> dict[str, Any]:
        """Constructor keywords for key/payload fields of a randomly generated edge."""
        return {}


@register_edge_kind
class UnDiEdge(Edge):
    """Undirected edge between two nodes."""


@register_edge_kind
class DiEdge(Edge):
    """Directed edge from ``source`` to ``target``."""

    directed = True

    @property
    def source(self) -> Any:
        return self._ends[0]

    @property
    def target(self) -> Any:
        return self._ends[1]


@register_edge_kind
class HyperEdge(Edge):
    """Undirected hyperedge over two or more nodes."""

    hyper = True
    max_arity = None


@register_edge_kind
class DiHyperEdge(Edge):
    """Directed hyperedge: the first end is the source, the rest are targets."""

    directed = True
    hyper = True
    max_arity = None

    @property
    def source(self) -> Any:
        return self._ends[0]

    @property
    def targets(self) -> tuple[Any, ...]:
        return self._ends[1:]


@register_edge_kind
class TripleEdge(DiHyperEdge):
    """RDF-style statement: a directed 3-ary hyperedge.

    ``subject``, ``predicate`` and ``object`` are views over positions 0, 1
    and 2. Identity is that of any directed hyperedge with the same ends.
    """

    min_arity = 3
    max_arity = 3

    @property
    def subject(self) -> Any:
        return self._ends[0]

    @property
    def predicate(self) -> Any:
        return self._ends[1]

    @property
    def object(self) -> Any:
        return self._ends[2]


# ========== Weighted and labeled kinds ==========


class _Weighted(Edge):
    payload_fields = ("weight",)

    def __init__(self, *ends: Any, weight: float = 1.0) -> None:
        super().__init__(*ends)
        if isinstance(weight, bool) or not isinstance(weight, (int, float)):
            raise MalformedEdgeError(
                f"{type(self).__name__} weight must be a number, got: {type(weight).__name__}"
            )
        object.__setattr__(self, "weight", weight)

    @classmethod
    def random_extras(cls, rng: random.Random) -> dict[str, Any]:
        return {"weight": float(rng.randint(1, 100))}


class _Labeled(Edge):
    payload_fields = ("label",)

    def __init__(self, *ends: Any, label: Any = None) -> None:
        super().__init__(*ends)
        try:
            hash(label)
        except TypeError:
            raise MalformedEdgeError(
                f"{type(self).__name__} label must be hashable, got: {type(label).__name__}"
            ) from None
        object.__setattr__(self, "label", label)

    @classmethod
    def random_extras(cls, rng: random.Random) -> dict[str, Any]:
        return {"label": rng.choice(_LABEL_ALPHABET)}


@register_edge_kind
class WUnDiEdge(_Weighted, UnDiEdge):
    """Weighted undirected edge; the weight is not part of identity."""


@register_edge_kind
class WDiEdge(_Weighted, DiEdge):
    """Weighted directed edge; the weight is not part of identity."""


@register_edge_kind
class WHyperEdge(_Weighted, HyperEdge):
    """Weighted undirected hyperedge; the weight is not part of identity."""


@register_edge_kind
class WDiHyperEdge(_Weighted, DiHyperEdge):
    """Weighted directed hyperedge; the weight is not part of identity."""


@register_edge_kind
class WkUnDiEdge(WUnDiEdge):
    """Key-weighted undirected edge: edges differing in weight are distinct."""

    key_fields = ("weight",)


@register_edge_kind
class WkDiEdge(WDiEdge):
    """Key-weighted directed edge: edges differing in weight are distinct."""

    key_fields = ("weight",)


@register_edge_kind
class WkHyperEdge(WHyperEdge):
    """Key-weighted undirected hyperedge."""

    key_fields = ("weight",)


@register_edge_kind
class WkDiHyperEdge(WDiHyperEdge):
    """Key-weighted directed hyperedge."""

    key_fields = ("weight",)


@register_edge_kind
class LUnDiEdge(_Labeled, UnDiEdge):
    """Labeled undirected edge; the label is not part of identity."""


@register_edge_kind
class LDiEdge(_Labeled, DiEdge):
    """Labeled directed edge; the label is not part of identity."""


@register_edge_kind
class LkUnDiEdge(LUnDiEdge):
    """Key-labeled undirected edge: edges differing in label are distinct."""

    key_fields = ("label",)


@register_edge_kind
class LkDiEdge(LDiEdge):
    """Key-labeled directed edge: edges differing in label are distinct."""

    key_fields = ("label",)
