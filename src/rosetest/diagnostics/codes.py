"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Run configuration errors (reported as failing leaves)
        2000-2999: Authoring errors (malformed test trees)
        3000-3999: Check failures (bare assertions, unusable check results)
        4000-4999: Fuzzer errors (generator failures, fatal)
    """

    # Run configuration (1000-1999)
    INVALID_RUN_COUNT = 1001
    INVALID_SHRINK_BUDGET = 1002

    # Authoring (2000-2999)
    BLANK_DESCRIPTION = 2001
    EMPTY_GROUP = 2002
    DUPLICATE_DESCRIPTION = 2003
    EMPTY_BATCH = 2004

    # Check failures (3000-3999)
    ASSERTION_FAILED = 3001
    NOT_EQUAL = 3002
    INVALID_RESULT = 3003

    # Fuzzer errors (4000-4999)
    FUZZER_FAILED = 4001


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        labels: Test labels (outermost first) the diagnostic applies to
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    labels: tuple[str, ...] | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Delegates to DiagnosticFormatter for consistent output.

        Example output:
            error[INVALID_RUN_COUNT]: Run count must be at least 1, got 0
              = help: Pass a positive run count to distribute()

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
