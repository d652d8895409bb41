"""Result classification for display layers.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from rosetest.enums import FailureReason
from rosetest.expectation import Fail, ResultValue

__all__ = ["Failure", "get_failure", "is_todo"]


@dataclass(frozen=True, slots=True)
class Failure:
    """Failure detail extracted from a result.

    Attributes:
        given: Offending generated input for fuzz failures, else None
        message: Failure message
    """

    given: str | None
    message: str


def get_failure(result: ResultValue) -> Failure | None:
    """Failure detail for a failing result, None for a pass.

    Todo placeholders are failures too; use is_todo() to tell them apart.

    Example:
        >>> get_failure(PASS) is None
        True
        >>> get_failure(Fail("m", "g"))
        Failure(given='g', message='m')
    """
    match result:
        case Fail(message=message, given=given):
            return Failure(given=given, message=message)
        case _:
            return None


def is_todo(result: ResultValue) -> bool:
    """True only for results produced by the todo placeholder."""
    return isinstance(result, Fail) and result.reason is FailureReason.TODO
