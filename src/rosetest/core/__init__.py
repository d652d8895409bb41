"""Core data structures shared by the fuzz and runner layers.

Everything here is pure and immutable:

    core <- fuzz <- tree <- runner

Exports:
    LazySequence: Deferred, possibly-infinite sequence with structural consumption
    CandidateTree: Rose tree of a generated value and its shrink candidates
    Seed: Splittable 64-bit generator state
    Generator: Pure seed -> (value, seed) function with map/and_then

Python 3.13+.
"""

from .lazy import LazySequence
from .rose import CandidateTree
from .seed import Generator, Seed

__all__ = ["CandidateTree", "Generator", "LazySequence", "Seed"]
