"""Custom exception types used across :mod:`idxgraph`."""

from __future__ import annotations


class IdxGraphError(Exception):
    """Base class for all package-specific errors."""


class InputError(IdxGraphError, ValueError):
    """Raised for invalid user input such as out-of-range vertex ids."""


class NegativeWeightError(InputError):
    """Raised when Dijkstra meets an edge with a negative weight."""


class ConfigError(IdxGraphError, ValueError):
    """Raised for invalid configuration options."""


class QueueError(IdxGraphError, LookupError):
    """Raised when an indexed priority queue contract is violated."""


class KeyIndexError(QueueError):
    """Raised for a key index outside ``[0, capacity)``."""


class DuplicateKeyError(QueueError):
    """Raised when inserting a key index that is already present."""


class MissingKeyError(QueueError):
    """Raised when a key index has no value in the queue."""


class QueueEmptyError(QueueError):
    """Raised on ``peek``/``extract`` from an empty queue."""


class NullValueError(QueueError):
    """Raised when ``None`` is given where a value is required."""


class AlgorithmError(IdxGraphError, RuntimeError):
    """Raised when algorithm invariants are violated at runtime."""


__all__ = [
    "IdxGraphError",
    "InputError",
    "NegativeWeightError",
    "ConfigError",
    "QueueError",
    "KeyIndexError",
    "DuplicateKeyError",
    "MissingKeyError",
    "QueueEmptyError",
    "NullValueError",
    "AlgorithmError",
]
