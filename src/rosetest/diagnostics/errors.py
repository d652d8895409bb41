"""rosetest exception hierarchy with structured diagnostics.

Almost every abnormal condition in rosetest is reported as a failing result
value rather than raised. The exceptions here cover the remaining cases:
invalid configuration objects and fuzzers whose own generator raises.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class RoseTestError(Exception):
    """Base exception for all rosetest errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize RoseTestError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class ConfigurationError(RoseTestError):
    """Invalid configuration object.

    Raised from RunConfig construction. Run counts are NOT validated
    here; distribute() reports those as failing leaves instead.
    """


class FuzzerError(RoseTestError):
    """A fuzzer's generator raised while producing a candidate tree.

    Distinct from a failing check: the value under test was never produced,
    so there is nothing to shrink. Always chained to the original exception.
    """
