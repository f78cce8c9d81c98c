"""Node and edge input streams consumed by ``from_stream``.

A stream is any iterable; these wrappers add the conversion from raw records
to nodes or edges. Streams are read once, to exhaustion.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

from hyperweave.engine.edges import Edge, EdgeLike


class NodeInputStream:
    """Yields nodes from an iterable of raw records.

    Args:
        records: Source records
        convert: Optional record -> node conversion (identity by default)
    """

    def __init__(
        self, records: Iterable[Any], convert: Callable[[Any], Any] | None = None
    ) -> None:
        self._records = records
        self._convert = convert

    def __iter__(self) -> Iterator[Any]:
        if self._convert is None:
            yield from self._records
        else:
            for record in self._records:
                yield self._convert(record)


class EdgeInputStream:
    """Yields edges of one kind from raw edge data.

    Each row is converted with ``kind.from_data(row)``: a sequence of ends,
    or a mapping with ``ends`` plus key/payload fields.

    Args:
        kind: Edge kind used to build every edge of the stream
        rows: Raw edge data
    """

    def __init__(self, kind: type[Edge], rows: Iterable[Any]) -> None:
        self.kind = kind
        self._rows = rows

    def __iter__(self) -> Iterator[EdgeLike]:
        for row in self._rows:
            yield self.kind.from_data(row)
