"""Property checks over fuzzed values.

fuzz_check() builds the leaf check for a property: draw run_count values,
evaluate the property on each, and on the first real failure shrink the
offending value to a minimal counterexample before reporting it.

Properties may return a result value, return None (treated as a pass), or
raise AssertionError (treated as a failure carrying the assertion message),
so plain ``assert`` statements work inside them. Any other return value
becomes a failure tagged INVALID. Any other exception propagates unchanged.

Python 3.13+.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from rosetest.config import RunConfig
from rosetest.core import Seed
from rosetest.diagnostics import ErrorTemplate
from rosetest.enums import FailureReason
from rosetest.expectation import PASS, Fail, Pass, ResultValue, from_diagnostic, with_given

from .fuzzer import Fuzzer
from .shrink import ShrinkCursor, generate, step

__all__ = ["Property", "ShrinkOutcome", "evaluate", "fuzz_check", "shrink"]

logger = logging.getLogger(__name__)

type Property[T] = Callable[[T], ResultValue | None]


@dataclass(frozen=True, slots=True)
class ShrinkOutcome[T]:
    """Result of shrinking one failure.

    Attributes:
        value: Smallest value found that still fails
        result: The failing result produced by that value
        steps: Number of candidates evaluated
        exhausted: True if the candidate tree ran out, False if the step
            budget stopped the search first
    """

    value: T
    result: Fail
    steps: int
    exhausted: bool


def evaluate[T](fn: Property[T], value: T) -> ResultValue:
    """Run a property on one value, normalizing None and AssertionError.

    Any return other than None, Pass, or Fail (a bare False, say) is a
    failure tagged INVALID rather than a silent pass.
    """
    try:
        result = fn(value)
    except AssertionError as exc:
        return Fail(str(exc) or ErrorTemplate.assertion_failed().message)
    match result:
        case None:
            return PASS
        case Pass() | Fail():
            return result
        case _:
            return from_diagnostic(ErrorTemplate.invalid_result(result))


def _reproduced(result: ResultValue) -> Fail | None:
    """Failure that counts as reproducing the bug; a todo placeholder does not."""
    if isinstance(result, Fail) and result.reason is not FailureReason.TODO:
        return result
    return None


def shrink[T](
    fn: Property[T],
    value: T,
    result: Fail,
    cursor: ShrinkCursor[T],
    *,
    max_steps: int,
) -> ShrinkOutcome[T]:
    """Search for the smallest value that still makes fn fail.

    Args:
        fn: Property being checked
        value: Root value that failed
        result: Failing result for value
        cursor: Cursor generated together with value
        max_steps: Upper bound on candidates evaluated

    Returns:
        The last failing value seen and its result
    """
    minimal_value, minimal_result = value, result
    caused_pass = False
    steps = 0
    while steps < max_steps:
        candidate = step(caused_pass, cursor)
        if candidate is None:
            logger.debug("Shrink finished after %d steps: %r", steps, minimal_value)
            return ShrinkOutcome(minimal_value, minimal_result, steps, exhausted=True)
        value, cursor = candidate
        steps += 1
        failure = _reproduced(evaluate(fn, value))
        caused_pass = failure is None
        if failure is not None:
            minimal_value, minimal_result = value, failure
    logger.debug(
        "Shrink budget of %d steps exhausted; stopping at %r", max_steps, minimal_value
    )
    return ShrinkOutcome(minimal_value, minimal_result, steps, exhausted=False)


def fuzz_check[T](
    fuzzer: Fuzzer[T],
    fn: Property[T],
    *,
    config: RunConfig | None = None,
) -> Callable[[Seed, int], list[ResultValue]]:
    """Build the leaf check for a property over fuzzed values.

    Args:
        fuzzer: Source of values and shrink trees
        fn: Property to check on every value
        config: Supplies max_shrink_steps (default: RunConfig())

    Returns:
        Check taking (seed, run_count). It returns [PASS] if every draw
        passes, the todo result as is if the property is a placeholder, or
        a single shrunk failure whose ``given`` is repr() of the minimal
        value.

    Raises (when the check runs):
        FuzzerError: If the fuzzer itself raises
    """
    max_steps = (config or RunConfig()).max_shrink_steps
    draw = generate(fuzzer)

    def check(seed: Seed, run_count: int) -> list[ResultValue]:
        for run in range(run_count):
            (value, cursor), seed = draw.step(seed)
            result = evaluate(fn, value)
            if not isinstance(result, Fail):
                continue
            if result.reason is FailureReason.TODO:
                return [result]
            logger.debug("Run %d of %d failed on %r; shrinking", run + 1, run_count, value)
            outcome = shrink(fn, value, result, cursor, max_steps=max_steps)
            return [with_given(outcome.result, repr(outcome.value))]
        return [PASS]

    return check
