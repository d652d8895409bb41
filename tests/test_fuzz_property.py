"""Tests for property evaluation, shrinking, and fuzz_check().

PYTEST_DONT_REWRITE: property bodies here use plain assert messages.
"""

from __future__ import annotations

import logging

import pytest
from hypothesis import given, settings

from rosetest.config import RunConfig
from rosetest.core import CandidateTree, Generator, LazySequence, Seed
from rosetest.enums import FailureReason
from rosetest.expectation import PASS, Fail, ResultValue, equal, fail, todo
from rosetest.fuzz import Fuzzer, ShrinkCursor, evaluate, fuzz_check, generate, shrink
from tests.strategies import int_fuzzer, seeds, shrink_toward

# ============================================================================
# EVALUATE
# ============================================================================


class TestEvaluate:
    """Normalization of property outcomes."""

    def test_result_value_passes_through(self) -> None:
        """Returned results are kept as they are."""
        assert evaluate(lambda n: equal(1, n), 1) == PASS
        assert evaluate(lambda _: fail("nope"), 0) == Fail("nope")

    def test_none_is_pass(self) -> None:
        """A property returning None passed."""
        assert evaluate(lambda _: None, 0) == PASS

    def test_assertion_error_is_failure(self) -> None:
        """assert statements become failures carrying their message."""

        def prop(n: int) -> None:
            assert n > 5, f"{n} is too small"

        assert evaluate(prop, 1) == Fail("1 is too small")

    def test_bare_assertion_gets_default_message(self) -> None:
        """An assertion without a message still reports something."""

        def prop(_n: int) -> None:
            raise AssertionError

        assert evaluate(prop, 1) == Fail("Assertion failed")

    def test_bare_false_is_invalid_failure(self) -> None:
        """A property returning False did not pass."""
        result = evaluate(lambda _: False, 0)

        assert result == Fail(
            "Check returned False; return a result value or None",
            reason=FailureReason.INVALID,
        )

    @pytest.mark.parametrize("returned", [True, 0, "ok", [PASS]])
    def test_non_result_return_is_invalid(self, returned: object) -> None:
        """Truthy or falsy, any non-result return is rejected."""
        result = evaluate(lambda _: returned, 0)

        assert isinstance(result, Fail)
        assert result.reason is FailureReason.INVALID
        assert result.message.startswith(f"Check returned {returned!r};")

    def test_other_exceptions_propagate(self) -> None:
        """Only AssertionError is converted."""

        def prop(_n: int) -> None:
            msg = "bug in the property"
            raise KeyError(msg)

        with pytest.raises(KeyError):
            evaluate(prop, 1)


# ============================================================================
# SHRINK
# ============================================================================


def _start(value: int) -> tuple[int, ShrinkCursor[int]]:
    """Root value and cursor for unfold(value, toward 0)."""
    fuzzer = Fuzzer(Generator.constant(CandidateTree.unfold(value, shrink_toward(0))))
    (root, cursor), _ = generate(fuzzer).step(Seed.initial(0))
    return root, cursor


class TestShrink:
    """Test shrink() directly."""

    def test_finds_minimal_failure(self) -> None:
        """'n < 17' fails first at 17."""
        root, cursor = _start(80)

        def prop(n: int) -> ResultValue:
            return PASS if n < 17 else fail(f"{n} too big")

        outcome = shrink(prop, root, fail("80 too big"), cursor, max_steps=1000)

        assert outcome.value == 17
        assert outcome.result == Fail("17 too big")
        assert outcome.exhausted

    def test_respects_step_budget(self) -> None:
        """The search stops after max_steps evaluations."""
        root, cursor = _start(80)

        def prop(n: int) -> ResultValue:
            return fail("positive") if n > 0 else PASS

        outcome = shrink(prop, root, fail("positive"), cursor, max_steps=2)

        assert outcome.steps == 2
        assert not outcome.exhausted

    def test_root_kept_when_nothing_smaller_fails(self) -> None:
        """If every candidate passes, the root is the minimum."""
        root, cursor = _start(10)

        def prop(n: int) -> ResultValue:
            return fail("ten") if n == 10 else PASS

        outcome = shrink(prop, root, fail("ten"), cursor, max_steps=100)

        assert outcome.value == 10
        assert outcome.result == Fail("ten")

    def test_todo_candidate_does_not_count_as_failure(self) -> None:
        """A todo result during shrinking is treated as not reproducing."""
        root, cursor = _start(10)

        def prop(n: int) -> ResultValue:
            return todo("later") if n < 10 else fail("big")

        outcome = shrink(prop, root, fail("big"), cursor, max_steps=100)

        assert outcome.value == 10


# ============================================================================
# FUZZ CHECK
# ============================================================================


class TestFuzzCheck:
    """Test the leaf check built by fuzz_check()."""

    def test_all_passing(self) -> None:
        """Every draw passing yields a single PASS."""
        check = fuzz_check(int_fuzzer(0, 100), lambda n: equal(n, n))

        assert check(Seed.initial(1), 50) == [PASS]

    def test_failure_is_shrunk_and_given_is_repr(self) -> None:
        """The reported failure carries the minimal input."""
        check = fuzz_check(int_fuzzer(0, 100), lambda n: PASS if n < 10 else fail("too big"))

        results = check(Seed.initial(1), 100)

        assert results == [Fail("too big", given="10")]

    def test_given_uses_repr(self) -> None:
        """String inputs are reported quoted."""
        fuzzer = int_fuzzer(0, 5).map(lambda n: "x" * n)
        check = fuzz_check(fuzzer, lambda s: fail("bad"))

        assert check(Seed.initial(3), 10) == [Fail("bad", given="''")]

    def test_todo_is_returned_without_shrinking(self) -> None:
        """A todo property is reported as is."""
        check = fuzz_check(int_fuzzer(), lambda _n: todo("write me"))

        assert check(Seed.initial(0), 10) == [todo("write me")]

    def test_bare_false_property_fails_and_shrinks(self) -> None:
        """A property returning False is shrunk like any other failure."""
        check = fuzz_check(int_fuzzer(0, 100), lambda _n: False)

        assert check(Seed.initial(1), 10) == [
            Fail(
                "Check returned False; return a result value or None",
                given="0",
                reason=FailureReason.INVALID,
            )
        ]

    def test_deterministic_for_same_seed(self) -> None:
        """Same seed and run count, same result."""
        check = fuzz_check(int_fuzzer(0, 1000), lambda n: PASS if n % 7 else fail("multiple of 7"))

        assert check(Seed.initial(8), 100) == check(Seed.initial(8), 100)

    def test_runs_exactly_run_count_draws_when_passing(self) -> None:
        """The property is evaluated once per run when nothing fails."""
        calls: list[int] = []

        def prop(n: int) -> None:
            calls.append(n)

        fuzz_check(int_fuzzer(), prop)(Seed.initial(4), 25)

        assert len(calls) == 25

    def test_stops_at_first_failure(self) -> None:
        """No further draws are made after a failure is shrunk."""
        calls: list[int] = []

        def prop(n: int) -> ResultValue:
            calls.append(n)
            return fail("always")

        results = fuzz_check(int_fuzzer(0, 0), prop)(Seed.initial(4), 25)

        assert results == [Fail("always", given="0")]
        assert len(calls) == 1

    def test_config_limits_shrinking(self) -> None:
        """max_shrink_steps bounds the number of shrink evaluations."""
        calls: list[int] = []

        def prop(n: int) -> ResultValue:
            calls.append(n)
            return fail("always")

        fuzzer = Fuzzer(Generator.constant(_countdown(1000)))
        fuzz_check(fuzzer, prop, config=RunConfig(max_shrink_steps=5))(Seed.initial(0), 1)

        assert len(calls) == 1 + 5

    def test_logs_shrinking(self, caplog: pytest.LogCaptureFixture) -> None:
        """Shrinking is logged at DEBUG."""
        check = fuzz_check(int_fuzzer(0, 100), lambda n: PASS if n < 3 else fail("big"))

        with caplog.at_level(logging.DEBUG, logger="rosetest.fuzz.property"):
            check(Seed.initial(1), 100)

        assert any("shrinking" in record.getMessage() for record in caplog.records)

    @given(seed=seeds)
    @settings(max_examples=100)
    def test_reason_is_preserved(self, seed: Seed) -> None:
        """PROPERTY: the shrunk failure keeps its FailureReason."""
        check = fuzz_check(int_fuzzer(0, 100), lambda n: equal(0, n))

        (result,) = check(seed, 100)

        if isinstance(result, Fail):
            assert result.reason is FailureReason.EQUALITY
            assert result.given == "1"


def _countdown(start: int) -> CandidateTree[int]:
    """Tree whose only path is start, start-1, ..., 0."""
    children = LazySequence.cons(start - 1, LazySequence.empty()) if start > 0 else None
    if children is None:
        return CandidateTree.singleton(start)
    return CandidateTree(start, children.map(_countdown))
