"""Label formatting shared by every runner.

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Callable, Sequence

__all__ = ["format_labels"]


def format_labels(
    format_description: Callable[[str], str],
    format_test: Callable[[str], str],
    labels: Sequence[str],
) -> list[str]:
    """Arrange labels for display, leaf first.

    Args:
        format_description: Wraps each enclosing group description
        format_test: Wraps the leaf test description
        labels: Outermost first; the last non-empty label is the leaf

    Returns:
        Leaf label, then group labels innermost to outermost. Empty labels
        are dropped before formatting.

    Example:
        >>> format_labels(lambda d: "↓ " + d, lambda t: "✗ " + t, ["top", "nested", "leaf"])
        ['✗ leaf', '↓ nested', '↓ top']
    """
    present = [label for label in labels if label]
    if not present:
        return []
    *descriptions, leaf = present
    return [format_test(leaf), *(format_description(d) for d in reversed(descriptions))]
