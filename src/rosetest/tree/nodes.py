"""Declarative test tree node definitions.

A test tree describes what to run, not how: leaves hold checks that still
need a seed and a run count. distribute() turns it into a RunnerTree.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from rosetest.core import Seed
from rosetest.expectation import ResultValue

__all__ = ["Batch", "Check", "Labeled", "Leaf", "TestSpecTree"]

type Check = Callable[[Seed, int], Sequence[ResultValue]]


@dataclass(frozen=True, slots=True)
class Leaf:
    """Single check: (seed, run count) -> result values."""

    check: Check


@dataclass(frozen=True, slots=True)
class Labeled:
    """Subtree with a description."""

    name: str
    subtree: TestSpecTree


@dataclass(frozen=True, slots=True)
class Batch:
    """Ordered group of subtrees without a description of its own."""

    children: tuple[TestSpecTree, ...]


type TestSpecTree = Leaf | Labeled | Batch
