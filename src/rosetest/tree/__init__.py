"""Declarative test trees and the helpers that author them.

Exports:
    Leaf, Labeled, Batch: TestSpecTree variants
    TestSpecTree: Union of the variants
    Check: Leaf check signature (seed, run count) -> result values
    test, fuzz, todo, describe, concat: Authoring helpers

Python 3.13+.
"""

from .build import concat, describe, fuzz, test, todo
from .nodes import Batch, Check, Labeled, Leaf, TestSpecTree

__all__ = [
    "Batch",
    "Check",
    "Labeled",
    "Leaf",
    "TestSpecTree",
    "concat",
    "describe",
    "fuzz",
    "test",
    "todo",
]
