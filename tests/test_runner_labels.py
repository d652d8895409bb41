"""Tests for format_labels()."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from rosetest.runner import format_labels


def _down(description: str) -> str:
    return "↓ " + description


def _cross(test: str) -> str:
    return "✗ " + test


class TestFormatLabels:
    """Leaf first, then enclosing groups innermost to outermost."""

    def test_nested_example(self) -> None:
        """Three labels are reordered with the right formatter each."""
        assert format_labels(_down, _cross, ["top", "nested", "leaf"]) == [
            "✗ leaf",
            "↓ nested",
            "↓ top",
        ]

    def test_single_label(self) -> None:
        """A lone label is the test."""
        assert format_labels(_down, _cross, ["only"]) == ["✗ only"]

    def test_empty_labels_dropped(self) -> None:
        """Empty strings are removed before formatting."""
        assert format_labels(_down, _cross, ["", "top", "", "leaf", ""]) == ["✗ leaf", "↓ top"]

    def test_all_empty(self) -> None:
        """Nothing to show gives an empty list."""
        assert format_labels(_down, _cross, []) == []
        assert format_labels(_down, _cross, ["", ""]) == []

    def test_accepts_tuples(self) -> None:
        """Labels from flatten() are tuples."""
        assert format_labels(str.upper, str.lower, ("Group", "Test")) == ["test", "GROUP"]

    @given(st.lists(st.text(max_size=5), max_size=8))
    def test_length_matches_non_empty(self, labels: list[str]) -> None:
        """PROPERTY: one output line per non-empty label."""
        assert len(format_labels(_down, _cross, labels)) == sum(1 for label in labels if label)

    @given(st.lists(st.text(min_size=1, max_size=5), min_size=1, max_size=8))
    def test_identity_formatters_reverse(self, labels: list[str]) -> None:
        """PROPERTY: with identity formatters the result is the reversed labels."""
        assert format_labels(str, str, labels) == labels[::-1]
