"""Fuzzer capability.

A Fuzzer wraps a seed-driven generator of candidate trees: one draw yields
both a value and every smaller alternative that shrinking may try. rosetest
ships no fuzzers for specific data shapes; custom() is the single point
where a value generator and a shrink function become a Fuzzer.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from rosetest.core import CandidateTree, Generator

__all__ = ["Fuzzer"]


@dataclass(frozen=True, slots=True)
class Fuzzer[T]:
    """Generator of values together with their shrink trees.

    Attributes:
        generator: Produces one CandidateTree per draw

    Example:
        >>> def toward_zero(n: int) -> list[int]:
        ...     return [0, n // 2] if n > 1 else ([0] if n == 1 else [])
        >>> percent = Fuzzer.custom(Generator.int_range(0, 100), toward_zero)
    """

    generator: Generator[CandidateTree[T]]

    @staticmethod
    def custom(generator: Generator[T], shrinker: Callable[[T], Iterable[T]]) -> Fuzzer[T]:
        """Build a fuzzer from a value generator and a shrink function.

        Args:
            generator: Produces root values
            shrinker: Returns candidates smaller than its argument, most
                aggressive first. Must eventually return nothing along every
                path or shrinking only stops at the step budget.
        """
        return Fuzzer(generator.map(lambda value: CandidateTree.unfold(value, shrinker)))

    @staticmethod
    def constant(value: T) -> Fuzzer[T]:
        """Always produce value, which cannot shrink."""
        return Fuzzer(Generator.constant(CandidateTree.singleton(value)))

    def map[U](self, fn: Callable[[T], U]) -> Fuzzer[U]:
        """Transform generated values; shrink candidates are transformed too."""
        return Fuzzer(self.generator.map(lambda tree: tree.map(fn)))
