"""Hypothesis strategies and fixtures for rosetest property-based testing.

Strategies are organized by domain:

- trees: Seeds, labels, recursive test trees, shape helpers
- fuzzers: Integer fuzzer and shrinkers built on Fuzzer.custom()

Usage:
    from tests.strategies import spec_trees, seeds
    from tests.strategies.fuzzers import int_fuzzer, shrink_toward
"""

from .fuzzers import int_bounds, int_fuzzer, shrink_toward
from .trees import (
    labels,
    passing_leaf,
    runner_shape,
    seed_echo_leaf,
    seeds,
    spec_shape,
    spec_trees,
)

__all__ = [
    "int_bounds",
    "int_fuzzer",
    "labels",
    "passing_leaf",
    "runner_shape",
    "seed_echo_leaf",
    "seeds",
    "shrink_toward",
    "spec_shape",
    "spec_trees",
]
