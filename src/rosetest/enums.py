"""Enumerations for rosetest type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class FailureReason(StrEnum):
    """Why a check produced a failing result.

    StrEnum provides automatic string conversion: str(FailureReason.TODO) == "todo"
    """

    CUSTOM = "custom"
    """Explicit assertion failure raised or returned by a check"""

    EQUALITY = "equality"
    """An equal() comparison between expected and actual values failed"""

    INVALID = "invalid"
    """Configuration error reported as a result value (bad run count, blank label)"""

    TODO = "todo"
    """Placeholder for a test that has not been written yet"""


__all__ = [
    "FailureReason",
]
