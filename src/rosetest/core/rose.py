"""Candidate (rose) trees for shrinking.

A CandidateTree holds one generated value and a lazy sequence of child
trees, each holding a strictly "smaller" alternative, ordered from most to
least aggressively reduced. Children are only built when forced, so the
tree may be infinite.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from .lazy import LazySequence

__all__ = ["CandidateTree"]


@dataclass(frozen=True, slots=True)
class CandidateTree[T]:
    """Rose tree node: a value plus lazily computed shrink candidates.

    Attributes:
        value: Generated value at this node
        children: Smaller alternatives, most aggressive reduction first

    Example:
        >>> def halve(n: int) -> list[int]:
        ...     return [0, n // 2] if n > 1 else ([0] if n == 1 else [])
        >>> tree = CandidateTree.unfold(8, halve)
        >>> [child.value for child in tree.children]
        [0, 4]
    """

    value: T
    children: LazySequence[CandidateTree[T]] = field(default_factory=LazySequence.empty)

    @staticmethod
    def singleton(value: T) -> CandidateTree[T]:
        """Tree with no shrink candidates."""
        return CandidateTree(value)

    @staticmethod
    def unfold(value: T, shrinker: Callable[[T], Iterable[T]]) -> CandidateTree[T]:
        """Grow a tree from a root value and a shrink function.

        The shrinker is called lazily, once per forced node, and must
        return candidates that are smaller than its argument. Every child
        is itself unfolded with the same shrinker.

        Args:
            value: Root value
            shrinker: Function from a value to its smaller candidates

        Returns:
            Tree rooted at value
        """
        candidates = LazySequence.from_iterable(lambda: shrinker(value))
        return CandidateTree(
            value, candidates.map(lambda smaller: CandidateTree.unfold(smaller, shrinker))
        )

    def map[U](self, fn: Callable[[T], U]) -> CandidateTree[U]:
        """Apply fn to every value in the tree, lazily below the root."""
        return CandidateTree(fn(self.value), self.children.map(lambda child: child.map(fn)))
