"""Executable runner tree node definitions.

Mirrors the test tree: Leaf becomes Runnable (a thunk already bound to its
seed and run count), Labeled and Batch keep their shape.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

from rosetest.core import Seed
from rosetest.expectation import ResultValue

__all__ = ["BatchRunner", "LabeledRunner", "Runnable", "RunnerTree"]


@dataclass(frozen=True, slots=True)
class Runnable:
    """Deferred check bound to its seed and run count.

    Attributes:
        thunk: Zero-argument computation yielding the check's results
        seed: Seed the thunk closes over
        run_count: Run count the thunk closes over
    """

    thunk: Callable[[], list[ResultValue]] = field(repr=False, compare=False)
    seed: Seed
    run_count: int

    def run(self) -> list[ResultValue]:
        """Execute the check. Results are recomputed on every call."""
        return self.thunk()


@dataclass(frozen=True, slots=True)
class LabeledRunner:
    """Runner subtree with a description."""

    name: str
    subtree: RunnerTree


@dataclass(frozen=True, slots=True)
class BatchRunner:
    """Ordered group of runner subtrees."""

    children: tuple[RunnerTree, ...]


type RunnerTree = Runnable | LabeledRunner | BatchRunner
