"""Fuzz value generation and the shrink protocol.

generate() turns a Fuzzer into a generator of (value, ShrinkCursor) pairs.
step() walks the candidate tree behind a cursor, one candidate per call,
steered by whether the previously presented value made the check pass:

    failed -> descend into that candidate's children (down)
    passed -> abandon it and try its next sibling (over)

Both are pure. A cursor is never modified; every step returns a new one, so
an earlier cursor can be replayed to revisit the same candidates.

Python 3.13+.
"""

from __future__ import annotations

from rosetest.core import CandidateTree, Generator, LazySequence, Seed
from rosetest.diagnostics import ErrorTemplate, FuzzerError

from .fuzzer import Fuzzer

__all__ = ["ShrinkCursor", "generate", "step"]


class ShrinkCursor[T]:
    """Opaque position in a candidate tree.

    Holds the children of the current candidate (tried when it failed) and
    its remaining siblings (tried when it passed). Neither sequence is
    exposed; step() is the only way to move.

    Example:
        >>> (value, cursor), _ = generate(fuzzer).step(seed)
        >>> next_step = cursor.step(caused_pass=False)
        >>> if next_step is not None:
        ...     smaller, cursor = next_step
    """

    __slots__ = ("_down", "_over")

    def __init__(
        self,
        down: LazySequence[CandidateTree[T]],
        over: LazySequence[CandidateTree[T]],
    ) -> None:
        self._down = down
        self._over = over

    def __repr__(self) -> str:
        return "ShrinkCursor(...)"

    def step(self, caused_pass: bool) -> tuple[T, ShrinkCursor[T]] | None:
        """Method form of step(caused_pass, self)."""
        return step(caused_pass, self)


def generate[T](fuzzer: Fuzzer[T]) -> Generator[tuple[T, ShrinkCursor[T]]]:
    """Adapt a fuzzer into a generator of values with fresh shrink cursors.

    Each draw yields the root value and a cursor positioned at the root's
    children, with no siblings. The root value itself is never produced
    by step(); callers track whether they are presenting the root or a
    shrink candidate.

    Raises (on draw):
        FuzzerError: If the fuzzer's generator raises
    """

    def run(seed: Seed) -> tuple[tuple[T, ShrinkCursor[T]], Seed]:
        try:
            tree, following = fuzzer.generator.step(seed)
        except Exception as exc:  # pylint: disable=broad-exception-caught
            raise FuzzerError(ErrorTemplate.fuzzer_failed(exc)) from exc
        return (tree.value, ShrinkCursor(tree.children, LazySequence.empty())), following

    return Generator(run)


def step[T](caused_pass: bool, cursor: ShrinkCursor[T]) -> tuple[T, ShrinkCursor[T]] | None:
    """Advance to the next shrink candidate.

    Args:
        caused_pass: True if the value presented last made the check pass
            (did not reproduce the failure), False if it failed
        cursor: Cursor returned alongside that value

    Returns:
        (next candidate value, cursor for it), or None when no candidates
        remain on this path; the last failing value is then the minimal
        counterexample.

    Raises:
        FuzzerError: If the fuzzer's shrink function raises while the next
            candidate is forced
    """
    source = cursor._over if caused_pass else cursor._down  # noqa: SLF001 - same module
    try:
        cell = source.head()
    except Exception as exc:  # pylint: disable=broad-exception-caught
        raise FuzzerError(ErrorTemplate.fuzzer_failed(exc)) from exc
    if cell is None:
        return None
    tree, siblings = cell
    return tree.value, ShrinkCursor(tree.children, siblings)
