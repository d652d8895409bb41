"""Flattening and sequential execution of runner trees.

flatten() lists every Runnable with the labels on its path, in traversal
order. run_tree() executes each one once and pairs its labels with its
results. Display is left to the caller.

Python 3.13+.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rosetest.expectation import ResultValue

from .classify import Failure, get_failure, is_todo
from .nodes import BatchRunner, LabeledRunner, Runnable, RunnerTree

__all__ = ["LeafReport", "SeededRunner", "flatten", "run_tree"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class SeededRunner:
    """One executable leaf with the labels leading to it.

    Attributes:
        labels: Descriptions from outermost group to the leaf
        runnable: Bound check
    """

    labels: tuple[str, ...]
    runnable: Runnable

    def run(self) -> list[ResultValue]:
        """Execute the leaf's check."""
        return self.runnable.run()


@dataclass(frozen=True, slots=True)
class LeafReport:
    """Results of executing one leaf."""

    labels: tuple[str, ...]
    results: tuple[ResultValue, ...]

    @property
    def failures(self) -> tuple[Failure, ...]:
        """Failure details, including todo placeholders."""
        return tuple(
            failure for result in self.results if (failure := get_failure(result)) is not None
        )

    @property
    def passed(self) -> bool:
        """True if no result failed."""
        return not self.failures

    @property
    def is_todo(self) -> bool:
        """True if any result is a todo placeholder."""
        return any(is_todo(result) for result in self.results)


def flatten(tree: RunnerTree) -> list[SeededRunner]:
    """List every leaf of tree depth-first with its labels (outermost first)."""
    runners: list[SeededRunner] = []
    _collect(tree, (), runners)
    return runners


def _collect(tree: RunnerTree, labels: tuple[str, ...], out: list[SeededRunner]) -> None:
    match tree:
        case Runnable():
            out.append(SeededRunner(labels, tree))
        case LabeledRunner(name=name, subtree=subtree):
            _collect(subtree, (*labels, name), out)
        case BatchRunner(children=children):
            for child in children:
                _collect(child, labels, out)


def run_tree(tree: RunnerTree) -> list[LeafReport]:
    """Execute every leaf once, sequentially, in traversal order."""
    reports: list[LeafReport] = []
    for runner in flatten(tree):
        report = LeafReport(runner.labels, tuple(runner.run()))
        logger.debug(
            "Ran %s: %s",
            " > ".join(runner.labels) or "<unlabeled>",
            "passed" if report.passed else "failed",
        )
        reports.append(report)

    todo_count = sum(1 for report in reports if report.is_todo)
    failed_count = sum(1 for report in reports if not report.passed) - todo_count
    logger.info(
        "Ran %d tests: %d passed, %d failed, %d todo",
        len(reports),
        len(reports) - failed_count - todo_count,
        failed_count,
        todo_count,
    )
    return reports
