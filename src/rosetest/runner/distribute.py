"""Seed distribution: TestSpecTree -> RunnerTree.

Walks the test tree depth-first, left-to-right. Every leaf splits the
current seed into its own independent seed and the seed carried on to the
next leaf, so a leaf's seed depends only on the initial seed and the leaf's
position in traversal order. Re-running with the same seed reproduces every
fuzz failure.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from rosetest.constants import MIN_RUN_COUNT
from rosetest.core import Generator, Seed
from rosetest.diagnostics import ErrorTemplate
from rosetest.expectation import ResultValue, from_diagnostic
from rosetest.tree import Batch, Check, Labeled, Leaf, TestSpecTree

from .nodes import BatchRunner, LabeledRunner, Runnable, RunnerTree

__all__ = ["distribute"]

logger = logging.getLogger(__name__)

_independent_seed = Generator.independent_seed()


def distribute(run_count: int, seed: Seed, spec: TestSpecTree) -> RunnerTree:
    """Bind every leaf of spec to a distinct seed and the run count.

    Args:
        run_count: Draws per fuzz check; must be at least 1
        seed: Initial seed
        spec: Test tree to make executable

    Returns:
        RunnerTree with the same Labeled/Batch shape as spec. If run_count
        is below the minimum, a single Runnable that reports the problem as
        a failing result instead (never raised).

    Example:
        >>> runner = distribute(100, Seed.initial(42), Batch((Leaf(check_a), Leaf(check_b))))
        >>> first, second = runner.children
        >>> first.seed != second.seed
        True
    """
    if run_count < MIN_RUN_COUNT:
        diagnostic = ErrorTemplate.invalid_run_count(run_count)
        logger.warning("Not distributing seeds: %s", diagnostic.message)
        result = from_diagnostic(diagnostic)
        return Runnable(lambda: [result], seed, run_count)

    runner, _ = _distribute(run_count, seed, spec)
    return runner


def _distribute(run_count: int, seed: Seed, spec: TestSpecTree) -> tuple[RunnerTree, Seed]:
    """Returns the runner for spec and the seed for whatever follows it."""
    match spec:
        case Leaf(check=check):
            this_seed, next_seed = _independent_seed.step(seed)
            return Runnable(_bind(check, this_seed, run_count), this_seed, run_count), next_seed
        case Labeled(name=name, subtree=subtree):
            runner, next_seed = _distribute(run_count, seed, subtree)
            return LabeledRunner(name, runner), next_seed
        case Batch(children=children):
            runners: list[RunnerTree] = []
            for child in children:
                runner, seed = _distribute(run_count, seed, child)
                runners.append(runner)
            return BatchRunner(tuple(runners)), seed


def _bind(check: Check, seed: Seed, run_count: int) -> Callable[[], list[ResultValue]]:
    def thunk() -> list[ResultValue]:
        return list(check(seed, run_count))

    return thunk
