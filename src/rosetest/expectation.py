"""Result values produced by checks.

A check yields Pass or Fail. Fail carries a message, the textual form of
the generated input when the failure came from a fuzz check, and a
FailureReason tag that separates real failures from configuration errors
and todo placeholders.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from rosetest.diagnostics import Diagnostic, ErrorTemplate
from rosetest.enums import FailureReason

__all__ = [
    "PASS",
    "Fail",
    "Pass",
    "ResultValue",
    "equal",
    "fail",
    "from_diagnostic",
    "todo",
    "with_given",
]


@dataclass(frozen=True, slots=True)
class Pass:
    """Successful check."""


@dataclass(frozen=True, slots=True)
class Fail:
    """Failed check.

    Attributes:
        message: Human-readable failure description
        given: repr() of the generated input for fuzz failures, else None
        reason: Why the check failed (assertion, equality, invalid, todo)
    """

    message: str
    given: str | None = None
    reason: FailureReason = FailureReason.CUSTOM


type ResultValue = Pass | Fail

PASS = Pass()


def fail(message: str) -> Fail:
    """Explicit failure with a custom message."""
    return Fail(message)


def todo(message: str) -> Fail:
    """Placeholder marker for a test that is not written yet."""
    return Fail(message, reason=FailureReason.TODO)


def equal(expected: object, actual: object) -> ResultValue:
    """Pass if actual == expected, otherwise fail with both values.

    Example:
        >>> equal(4, 2 + 2)
        Pass()
        >>> equal(4, 5).message
        'Expected 4, got 5'
    """
    if expected == actual:
        return PASS
    return Fail(ErrorTemplate.not_equal(expected, actual).message, reason=FailureReason.EQUALITY)


def from_diagnostic(diagnostic: Diagnostic) -> Fail:
    """Configuration error or unusable check result reported as a failing result."""
    return Fail(diagnostic.message, reason=FailureReason.INVALID)


def with_given(result: ResultValue, given: str) -> ResultValue:
    """Attach the offending generated input to a failure; Pass is unchanged."""
    match result:
        case Fail():
            return replace(result, given=given)
        case _:
            return result
