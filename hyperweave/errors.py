"""Exceptions raised by Hyperweave."""


class HyperweaveError(Exception):
    """Base class for all Hyperweave errors."""


class MalformedEdgeError(HyperweaveError, ValueError):
    """An edge violates its kind's validity rule (e.g. wrong number of ends)."""


class GenerationExhaustedError(HyperweaveError, RuntimeError):
    """The random generator ran out of attempts before meeting a hard constraint.

    Hard constraints are the requested order and, when asked for, connectivity.
    Degree targets are soft and never raise this error.
    """


class BuilderConsumedError(HyperweaveError, RuntimeError):
    """A graph builder was used after ``result()`` was called."""
