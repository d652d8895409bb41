"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from rosetest.constants import MIN_RUN_COUNT

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Failing leaves built by distribute() and the authoring helpers take their
    message text from these diagnostics as well, so runners see one wording
    per error case.
    """

    @staticmethod
    def invalid_run_count(run_count: int) -> Diagnostic:
        """Run count below the minimum.

        Args:
            run_count: The run count that was passed to distribute()

        Returns:
            Diagnostic for INVALID_RUN_COUNT
        """
        msg = f"Test runner run count must be at least {MIN_RUN_COUNT}, not {run_count}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_RUN_COUNT,
            message=msg,
            hint=f"Pass a run count of {MIN_RUN_COUNT} or more",
        )

    @staticmethod
    def invalid_shrink_budget(max_steps: int) -> Diagnostic:
        """Shrink step budget is not positive.

        Args:
            max_steps: The rejected budget

        Returns:
            Diagnostic for INVALID_SHRINK_BUDGET
        """
        msg = f"max_shrink_steps must be positive, got {max_steps}"
        return Diagnostic(
            code=DiagnosticCode.INVALID_SHRINK_BUDGET,
            message=msg,
            hint="Use a positive step budget or leave the default",
        )

    @staticmethod
    def blank_description(kind: str) -> Diagnostic:
        """Test or group created with an empty or whitespace-only description.

        Args:
            kind: Authoring helper that received it ("test", "describe", ...)

        Returns:
            Diagnostic for BLANK_DESCRIPTION
        """
        msg = f"This `{kind}` has a blank description"
        return Diagnostic(
            code=DiagnosticCode.BLANK_DESCRIPTION,
            message=msg,
            hint="Give it a description that says what is being checked",
        )

    @staticmethod
    def empty_group(description: str) -> Diagnostic:
        """describe() called with no tests.

        Args:
            description: The group description

        Returns:
            Diagnostic for EMPTY_GROUP
        """
        msg = f"This `describe {description!r}` has no tests in it"
        return Diagnostic(
            code=DiagnosticCode.EMPTY_GROUP,
            message=msg,
            hint="Add at least one test, or use todo() as a placeholder",
        )

    @staticmethod
    def duplicate_description(description: str, duplicates: tuple[str, ...]) -> Diagnostic:
        """A group contains several direct children with the same label.

        Args:
            description: The group description
            duplicates: Labels that occur more than once, in first-seen order

        Returns:
            Diagnostic for DUPLICATE_DESCRIPTION
        """
        names = ", ".join(repr(name) for name in duplicates)
        msg = f"The group {description!r} contains multiple tests named {names}"
        return Diagnostic(
            code=DiagnosticCode.DUPLICATE_DESCRIPTION,
            message=msg,
            hint="Rename the tests so that every name in a group is unique",
        )

    @staticmethod
    def empty_batch() -> Diagnostic:
        """concat() called with no tests.

        Returns:
            Diagnostic for EMPTY_BATCH
        """
        return Diagnostic(
            code=DiagnosticCode.EMPTY_BATCH,
            message="This `concat` has no tests in it",
            hint="Pass at least one test to concat()",
        )

    @staticmethod
    def assertion_failed() -> Diagnostic:
        """A check raised AssertionError without a message.

        Returns:
            Diagnostic for ASSERTION_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.ASSERTION_FAILED,
            message="Assertion failed",
        )

    @staticmethod
    def not_equal(expected: object, actual: object) -> Diagnostic:
        """equal() comparison failed.

        Args:
            expected: Expected value
            actual: Value produced by the code under test

        Returns:
            Diagnostic for NOT_EQUAL
        """
        msg = f"Expected {expected!r}, got {actual!r}"
        return Diagnostic(code=DiagnosticCode.NOT_EQUAL, message=msg)

    @staticmethod
    def invalid_result(value: object) -> Diagnostic:
        """A check returned something other than a result value or None.

        Args:
            value: What the check returned

        Returns:
            Diagnostic for INVALID_RESULT
        """
        msg = f"Check returned {value!r}; return a result value or None"
        return Diagnostic(
            code=DiagnosticCode.INVALID_RESULT,
            message=msg,
            hint="Return PASS, a Fail from fail() or equal(), or None; or use assert",
        )

    @staticmethod
    def fuzzer_failed(error: BaseException) -> Diagnostic:
        """A fuzzer's generator raised while building a candidate tree.

        Args:
            error: The exception raised by the generator

        Returns:
            Diagnostic for FUZZER_FAILED
        """
        msg = f"Fuzzer raised {type(error).__name__} while generating a value: {error}"
        return Diagnostic(
            code=DiagnosticCode.FUZZER_FAILED,
            message=msg,
            hint="Fix the fuzzer's generator or shrink function; checks never ran",
        )
