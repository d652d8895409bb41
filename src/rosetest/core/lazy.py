"""Immutable lazy sequences.

Implements a deferred, possibly-infinite sequence consumed structurally:
head() returns the first element together with the remainder, and never
advances shared state. Consuming a sequence leaves the original binding
valid, so any suffix can be replayed.

Design Philosophy:
    - Sequence is immutable (frozen dataclass around a thunk)
    - Empty is a state (head() returns None), not an exception
    - Nothing is computed until head() is called
    - Sequences built from Python iterators memoize each forced cell, so a
      replay observes the same elements even though the iterator is one-shot

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from itertools import islice

__all__ = ["LazySequence"]


@dataclass(frozen=True, slots=True)
class LazySequence[T]:
    """Deferred sequence of T.

    Example:
        >>> seq = LazySequence.from_iterable([1, 2, 3])
        >>> first, rest = seq.head()
        >>> first
        1
        >>> rest.take(5)
        [2, 3]
        >>> seq.take(5)  # Original unchanged
        [1, 2, 3]
    """

    force: Callable[[], tuple[T, LazySequence[T]] | None] = field(repr=False)

    def head(self) -> tuple[T, LazySequence[T]] | None:
        """Force the first cell.

        Returns:
            (first element, remainder) or None if the sequence is empty
        """
        return self.force()

    def is_empty(self) -> bool:
        """Check for emptiness (forces the first cell only)."""
        return self.force() is None

    def __iter__(self) -> Iterator[T]:
        cell = self.force()
        while cell is not None:
            value, rest = cell
            yield value
            cell = rest.force()

    def __repr__(self) -> str:
        return "LazySequence(...)"

    def take(self, count: int) -> list[T]:
        """Force at most count elements from the front.

        Args:
            count: Maximum number of elements (infinite sequences are safe)

        Returns:
            List of up to count elements
        """
        return list(islice(self, max(count, 0)))

    def map[U](self, fn: Callable[[T], U]) -> LazySequence[U]:
        """Lazily apply fn to every element."""

        def force() -> tuple[U, LazySequence[U]] | None:
            cell = self.force()
            if cell is None:
                return None
            value, rest = cell
            return fn(value), rest.map(fn)

        return LazySequence(force)

    def append(self, other: LazySequence[T]) -> LazySequence[T]:
        """Lazily concatenate other after this sequence."""

        def force() -> tuple[T, LazySequence[T]] | None:
            cell = self.force()
            if cell is None:
                return other.force()
            value, rest = cell
            return value, rest.append(other)

        return LazySequence(force)

    @staticmethod
    def empty() -> LazySequence[T]:
        """Sequence with no elements."""
        return LazySequence(_no_cell)

    @staticmethod
    def singleton(value: T) -> LazySequence[T]:
        """Sequence with exactly one element."""
        return LazySequence.cons(value, LazySequence.empty())

    @staticmethod
    def cons(
        value: T, rest: LazySequence[T] | Callable[[], LazySequence[T]]
    ) -> LazySequence[T]:
        """Prepend value to rest.

        Args:
            value: New first element
            rest: Remainder, or a zero-argument callable producing it on demand
        """
        if isinstance(rest, LazySequence):
            tail = rest
            return LazySequence(lambda: (value, tail))
        make_tail = rest
        return LazySequence(lambda: (value, LazySequence(lambda: make_tail().force())))

    @staticmethod
    def from_iterable(source: Iterable[T] | Callable[[], Iterable[T]]) -> LazySequence[T]:
        """Build a sequence from an iterable or an iterable factory.

        A factory (zero-argument callable) is invoked each time the first
        cell is forced, so a pure factory gives a pure sequence. A one-shot
        iterator is wrapped with per-cell memoization. A re-iterable
        collection is re-iterated on each force of the first cell.

        Example:
            >>> halves = LazySequence.from_iterable(lambda: (10 // 2**i for i in range(1, 4)))
            >>> list(halves)
            [5, 2, 1]
        """
        if callable(source):
            factory = source
            return LazySequence(lambda: _memoized(iter(factory())).force())
        iterable = source
        if iter(iterable) is iterable:
            return _memoized(iter(iterable))
        return LazySequence(lambda: _memoized(iter(iterable)).force())


def _no_cell() -> None:
    return None


def _memoized[T](iterator: Iterator[T]) -> LazySequence[T]:
    """Wrap a live iterator; each cell pulls once and remembers its result."""
    memo: list[tuple[T, LazySequence[T]] | None] = []

    def force() -> tuple[T, LazySequence[T]] | None:
        if not memo:
            try:
                value = next(iterator)
            except StopIteration:
                memo.append(None)
            else:
                memo.append((value, _memoized(iterator)))
        return memo[0]

    return LazySequence(force)
