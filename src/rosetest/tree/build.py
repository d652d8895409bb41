"""Authoring helpers for test trees.

Builds TestSpecTree values from descriptions and plain Python callables.
Malformed trees (blank descriptions, empty groups, duplicate names) are not
raised: each becomes a failing leaf tagged FailureReason.INVALID, so one
bad group never hides the results of the others.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Callable, Sequence
from dataclasses import replace

from rosetest.config import RunConfig
from rosetest.diagnostics import Diagnostic, ErrorTemplate
from rosetest.expectation import ResultValue, from_diagnostic
from rosetest.expectation import todo as todo_result
from rosetest.fuzz import Fuzzer, Property, evaluate, fuzz_check

from .nodes import Batch, Labeled, Leaf, TestSpecTree

__all__ = ["concat", "describe", "fuzz", "test", "todo"]

logger = logging.getLogger(__name__)


def _failing(diagnostic: Diagnostic, labels: tuple[str, ...] = ()) -> Leaf:
    if labels:
        diagnostic = replace(diagnostic, labels=labels)
    logger.warning("Invalid test tree:\n%s", diagnostic.format_error())
    result = from_diagnostic(diagnostic)
    return Leaf(lambda _seed, _run_count: [result])


def _child_labels(tree: TestSpecTree) -> list[str]:
    """Labels visible directly under a group (batches are transparent)."""
    match tree:
        case Labeled(name=name):
            return [name]
        case Batch(children=children):
            return [label for child in children for label in _child_labels(child)]
        case Leaf():
            return []


def _duplicates(tests: Sequence[TestSpecTree]) -> tuple[str, ...]:
    counts = Counter(label for tree in tests for label in _child_labels(tree))
    return tuple(label for label, count in counts.items() if count > 1)


def test(description: str, fn: Callable[[], ResultValue | None]) -> TestSpecTree:
    """Single check run once per execution; seed and run count are ignored.

    Args:
        description: What the test checks
        fn: Returns a result value or None, or raises AssertionError
    """
    name = description.strip()
    if not name:
        return _failing(ErrorTemplate.blank_description("test"))
    return Labeled(name, Leaf(lambda _seed, _run_count: [evaluate(lambda _: fn(), None)]))


def fuzz[T](
    fuzzer: Fuzzer[T],
    description: str,
    fn: Property[T],
    *,
    config: RunConfig | None = None,
) -> TestSpecTree:
    """Property check over fuzzed values, shrunk on failure.

    Args:
        fuzzer: Source of values and shrink trees
        description: What the property asserts
        fn: Property evaluated on each generated value
        config: Supplies the shrink step budget
    """
    name = description.strip()
    if not name:
        return _failing(ErrorTemplate.blank_description("fuzz"))
    return Labeled(name, Leaf(fuzz_check(fuzzer, fn, config=config)))


def todo(description: str) -> TestSpecTree:
    """Placeholder for a test that has not been written yet."""
    name = description.strip()
    if not name:
        return _failing(ErrorTemplate.blank_description("todo"))
    result = todo_result(name)
    return Labeled(name, Leaf(lambda _seed, _run_count: [result]))


def describe(description: str, tests: Sequence[TestSpecTree]) -> TestSpecTree:
    """Labeled group of tests.

    Reported as a failing leaf when the description is blank, the group is
    empty, or two direct children share a label.
    """
    name = description.strip()
    if not name:
        return _failing(ErrorTemplate.blank_description("describe"))
    if not tests:
        return Labeled(name, _failing(ErrorTemplate.empty_group(name), (name,)))
    duplicates = _duplicates(tests)
    if duplicates:
        diagnostic = ErrorTemplate.duplicate_description(name, duplicates)
        return Labeled(name, _failing(diagnostic, (name,)))
    return Labeled(name, Batch(tuple(tests)))


def concat(tests: Sequence[TestSpecTree]) -> TestSpecTree:
    """Unlabeled group of tests; an empty group is reported as failing."""
    if not tests:
        return _failing(ErrorTemplate.empty_batch())
    return Batch(tuple(tests))
