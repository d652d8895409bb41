"""Fuzz value generation and shrinking.

Exports:
    Fuzzer: Generator of values together with their shrink trees
    ShrinkCursor: Opaque position in a candidate tree
    generate: Fuzzer -> Generator of (value, ShrinkCursor)
    step: One shrink transition driven by pass/fail feedback
    fuzz_check: Leaf check running and shrinking a property
    shrink: Shrink one failing value to a minimal counterexample

Python 3.13+.
"""

from .fuzzer import Fuzzer
from .property import Property, ShrinkOutcome, evaluate, fuzz_check, shrink
from .shrink import ShrinkCursor, generate, step

__all__ = [
    "Fuzzer",
    "Property",
    "ShrinkCursor",
    "ShrinkOutcome",
    "evaluate",
    "fuzz_check",
    "generate",
    "shrink",
    "step",
]
