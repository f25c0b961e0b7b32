"""Indexed D-ary min priority queue.

Values are addressed by an integer *key index* ``ki`` in ``[0, capacity)``.
Two arrays tie key indexes to heap slots:

* ``pm[ki]`` -- position of ``ki`` in the heap array, ``-1`` when absent;
* ``im[pos]`` -- key index stored at heap position ``pos``.

They are kept mutual inverses over ``[0, size)``, which makes locating a
key ``O(1)`` and lets :meth:`IndexedDaryMinPQ.decrease` run in
``O(log_D n)``. Children of position ``i`` are ``D*i+1 .. D*i+D`` and its
parent is ``(i-1) // D``.

All ordering goes through a three-way ``compare(a, b)`` returning a
negative number, zero or a positive number. Entries only move on a strict
``compare < 0``, so equal values never swap.

The queue does not own the lifetime of its values: ``update``, ``decrease``,
``increase``, ``delete`` and ``extract`` hand back whatever value they
remove. An optional ``on_discard`` callback is applied to the values still
stored when the queue is closed.
"""

from __future__ import annotations

import operator
from types import TracebackType
from typing import Any, Callable, Generic, Iterator, List, Optional, Tuple, TypeVar

from .deprecation import deprecated_alias
from .exceptions import (
    AlgorithmError,
    ConfigError,
    DuplicateKeyError,
    KeyIndexError,
    MissingKeyError,
    NullValueError,
    QueueEmptyError,
    QueueError,
)

T = TypeVar("T")
Compare = Callable[[Any, Any], int]


def natural_compare(a: Any, b: Any) -> int:
    """Three-way comparison using the values' own ``<`` operator."""
    if a < b:
        return -1
    if b < a:
        return 1
    return 0


class IndexedDaryMinPQ(Generic[T]):
    """Min priority queue keyed by integer index with decrease-key support.

    Args:
        degree: Branching factor ``D`` (at least ``2``).
        capacity: Number of distinct key indexes ``N`` (at least ``1``).
        compare: Three-way comparison over values; natural ordering when
            omitted.
        on_discard: Called with every value still stored when the queue
            is closed.

    Raises:
        ConfigError: If ``degree`` or ``capacity`` is invalid.

    Examples:
        ```python
        >>> pq = IndexedDaryMinPQ(3, 10)
        >>> for ki, v in [(0, 7), (1, 2), (2, 9)]:
        ...     pq.insert(ki, v)
        >>> pq.peek_key_index(), pq.extract()
        (1, 2)
        ```
    """

    def __init__(
        self,
        degree: int,
        capacity: int,
        compare: Optional[Compare] = None,
        on_discard: Optional[Callable[[T], None]] = None,
    ) -> None:
        if isinstance(degree, bool) or not isinstance(degree, int) or degree < 2:
            raise ConfigError(f"degree must be an integer >= 2, got {degree!r}")
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise ConfigError(f"capacity must be a positive integer, got {capacity!r}")
        self.D = degree
        self.N = capacity
        self._compare: Compare = compare or natural_compare
        self._on_discard = on_discard
        self._sz = 0
        self._closed = False
        self._pm: List[int] = [-1] * capacity
        self._im: List[int] = [-1] * capacity
        self._values: List[Optional[T]] = [None] * capacity

    # ---- contract checks ------------------------------------------------

    def _check_key(self, ki: int) -> int:
        msg = f"key index {ki!r} out of bounds [0, {self.N})"
        if isinstance(ki, bool):
            raise KeyIndexError(msg)
        try:
            i = operator.index(ki)
        except TypeError:
            raise KeyIndexError(msg) from None
        if not (0 <= i < self.N):
            raise KeyIndexError(msg)
        return i

    def _require_key(self, ki: int) -> None:
        if not self.contains(ki):
            raise MissingKeyError(f"key index {ki} is not in the queue")

    def _require_value(self, value: Optional[T]) -> None:
        if value is None:
            raise NullValueError("value cannot be None")

    def _require_nonempty(self) -> None:
        if self._sz == 0:
            raise QueueEmptyError("priority queue underflow")

    # ---- heap internals -------------------------------------------------

    def _less(self, i: int, j: int) -> bool:
        """Whether the value at heap position ``i`` is strictly below ``j``'s."""
        return self._compare(self._values[self._im[i]], self._values[self._im[j]]) < 0

    def _swap(self, i: int, j: int) -> None:
        im = self._im
        self._pm[im[j]] = i
        self._pm[im[i]] = j
        im[i], im[j] = im[j], im[i]

    def _min_child(self, i: int) -> int:
        """Return the position of ``i``'s least child, or ``-1`` if it has none."""
        first = self.D * i + 1
        last = min(self._sz, first + self.D)
        best = -1
        for j in range(first, last):
            if best == -1 or self._less(j, best):
                best = j
        return best

    def _sift_down(self, i: int) -> None:
        j = self._min_child(i)
        while j != -1 and self._less(j, i):
            self._swap(i, j)
            i = j
            j = self._min_child(i)

    def _sift_up(self, i: int) -> None:
        while i > 0:
            parent = (i - 1) // self.D
            if not self._less(i, parent):
                break
            self._swap(i, parent)
            i = parent

    # ---- public API -----------------------------------------------------

    def size(self) -> int:
        """Return the number of stored entries."""
        return self._sz

    def is_empty(self) -> bool:
        """Return whether the queue holds no entries."""
        return self._sz == 0

    def contains(self, ki: int) -> bool:
        """Return whether key index ``ki`` currently has a value.

        Raises:
            KeyIndexError: If ``ki`` is outside ``[0, capacity)``.
        """
        return self._pm[self._check_key(ki)] != -1

    def value_of(self, ki: int) -> T:
        """Return the value bound to ``ki``."""
        self._require_key(ki)
        return self._values[ki]  # type: ignore[return-value]

    def insert(self, ki: int, value: T) -> None:
        """Bind ``value`` to the absent key index ``ki``.

        Raises:
            KeyIndexError: If ``ki`` is out of bounds.
            DuplicateKeyError: If ``ki`` already has a value.
            NullValueError: If ``value`` is ``None``.
            QueueError: If the queue was closed.
        """
        if self._closed:
            raise QueueError("queue is closed")
        ki = self._check_key(ki)
        if self._pm[ki] != -1:
            raise DuplicateKeyError(f"key index {ki} already exists")
        self._require_value(value)
        pos = self._sz
        self._pm[ki] = pos
        self._im[pos] = ki
        self._values[ki] = value
        self._sz += 1
        self._sift_up(pos)

    def peek_key_index(self) -> int:
        """Return the key index at the root without removing it."""
        self._require_nonempty()
        return self._im[0]

    def peek(self) -> T:
        """Return a minimum value without removing it."""
        self._require_nonempty()
        return self._values[self._im[0]]  # type: ignore[return-value]

    def extract_key_index(self) -> int:
        """Remove the minimum entry and return its key index."""
        ki = self.peek_key_index()
        self.delete(ki)
        return ki

    def extract(self) -> T:
        """Remove the minimum entry and return its value."""
        return self.delete(self.peek_key_index())

    def delete(self, ki: int) -> T:
        """Remove ``ki`` from the queue and return the value it held."""
        self._require_key(ki)
        i = self._pm[ki]
        self._sz -= 1
        last = self._sz
        self._swap(i, last)
        if i < last:
            self._sift_down(i)
            self._sift_up(i)
        value = self._values[ki]
        self._values[ki] = None
        self._pm[ki] = -1
        self._im[last] = -1
        return value  # type: ignore[return-value]

    def update(self, ki: int, value: T) -> T:
        """Replace the value of ``ki`` and return the previous one."""
        self._require_key(ki)
        self._require_value(value)
        old = self._values[ki]
        self._values[ki] = value
        self._sift_up(self._pm[ki])
        self._sift_down(self._pm[ki])
        return old  # type: ignore[return-value]

    def decrease(self, ki: int, value: T) -> Optional[T]:
        """Lower the value of ``ki`` to ``value`` if it is strictly smaller.

        Returns:
            The replaced value, or ``None`` when ``value`` is not strictly
            smaller and the queue is left unchanged.
        """
        self._require_key(ki)
        self._require_value(value)
        old = self._values[ki]
        if self._compare(value, old) >= 0:
            return None
        self._values[ki] = value
        self._sift_up(self._pm[ki])
        return old

    def increase(self, ki: int, value: T) -> Optional[T]:
        """Raise the value of ``ki`` to ``value`` if it is strictly larger.

        Returns:
            The replaced value, or ``None`` when ``value`` is not strictly
            larger and the queue is left unchanged.
        """
        self._require_key(ki)
        self._require_value(value)
        old = self._values[ki]
        if self._compare(old, value) >= 0:
            return None
        self._values[ki] = value
        self._sift_down(self._pm[ki])
        return old

    def validate(self) -> None:
        """Check the map and heap invariants.

        Raises:
            AlgorithmError: On the first broken invariant.
        """
        if not (0 <= self._sz <= self.N):
            raise AlgorithmError(f"size {self._sz} outside [0, {self.N}]")
        for pos in range(self._sz):
            ki = self._im[pos]
            if not (0 <= ki < self.N) or self._pm[ki] != pos:
                raise AlgorithmError(f"pm/im mismatch at heap position {pos}")
        occupied = 0
        for ki in range(self.N):
            present = self._pm[ki] != -1
            if present != (self._values[ki] is not None):
                raise AlgorithmError(f"value slot of key index {ki} disagrees with pm")
            if present:
                occupied += 1
                if self._im[self._pm[ki]] != ki:
                    raise AlgorithmError(f"im does not invert pm for key index {ki}")
        if occupied != self._sz:
            raise AlgorithmError(f"{occupied} occupied slots but size is {self._sz}")
        for pos in range(1, self._sz):
            if self._less(pos, (pos - 1) // self.D):
                raise AlgorithmError(f"heap order broken at position {pos}")

    def close(self) -> None:
        """Release every stored value through ``on_discard`` and empty the queue."""
        if self._closed:
            return
        remaining = [self._values[self._im[pos]] for pos in range(self._sz)]
        self._pm = [-1] * self.N
        self._im = [-1] * self.N
        self._values = [None] * self.N
        self._sz = 0
        self._closed = True
        if self._on_discard is not None:
            for value in remaining:
                self._on_discard(value)  # type: ignore[arg-type]

    # ---- legacy names ---------------------------------------------------

    @deprecated_alias("peek", since="0.2.0", remove_in="0.3.0")
    def peek_min_value(self) -> T:
        """Alias of :meth:`peek`."""
        return self.peek()

    @deprecated_alias("peek_key_index", since="0.2.0", remove_in="0.3.0")
    def peek_min_key_index(self) -> int:
        """Alias of :meth:`peek_key_index`."""
        return self.peek_key_index()

    @deprecated_alias("extract", since="0.2.0", remove_in="0.3.0")
    def poll_min_value(self) -> T:
        """Alias of :meth:`extract`."""
        return self.extract()

    @deprecated_alias("extract_key_index", since="0.2.0", remove_in="0.3.0")
    def poll_min_key_index(self) -> int:
        """Alias of :meth:`extract_key_index`."""
        return self.extract_key_index()

    # ---- Python protocol ------------------------------------------------

    def __len__(self) -> int:
        return self._sz

    def __bool__(self) -> bool:
        return self._sz > 0

    def __contains__(self, ki: object) -> bool:
        try:
            return self.contains(ki)  # type: ignore[arg-type]
        except KeyIndexError:
            return False

    def __iter__(self) -> Iterator[Tuple[int, T]]:
        """Yield ``(ki, value)`` pairs in heap-array order."""
        for pos in range(self._sz):
            ki = self._im[pos]
            yield ki, self._values[ki]  # type: ignore[misc]

    def __enter__(self) -> "IndexedDaryMinPQ[T]":
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        items = ", ".join(f"{ki}: {v!r}" for ki, v in self)
        return f"{type(self).__name__}(D={self.D}, N={self.N}, [{items}])"


class IndexedBinaryMinPQ(IndexedDaryMinPQ[T]):
    """The ``D = 2`` special case of :class:`IndexedDaryMinPQ`."""

    def __init__(
        self,
        capacity: int,
        compare: Optional[Compare] = None,
        on_discard: Optional[Callable[[T], None]] = None,
    ) -> None:
        super().__init__(2, capacity, compare=compare, on_discard=on_discard)


__all__ = ["Compare", "IndexedBinaryMinPQ", "IndexedDaryMinPQ", "natural_compare"]
