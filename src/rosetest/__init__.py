"""rosetest - Execution and shrinking engine for property-based tests.

Turns a declarative tree of tests into executable leaves, gives every
randomized leaf its own reproducible seed, runs the checks, and shrinks
failing fuzz inputs by walking lazily generated candidate (rose) trees.

Public API:
    test, fuzz, todo, describe, concat - Build test trees
    distribute - Bind a test tree to a run count and seed
    run_tree, flatten - Execute a runner tree
    get_failure, is_todo, format_labels - Helpers for display layers
    Fuzzer - Value generator with shrink trees
    generate, step - Drive generation and shrinking by hand
    Seed, Generator - Splittable seeds and pure generators
    RunConfig - Run count, seed, and shrink budget

Exceptions:
    RoseTestError - Base exception class
    ConfigurationError - Invalid RunConfig
    FuzzerError - A fuzzer's own generator or shrinker raised

Submodules:
    rosetest.core - LazySequence, CandidateTree, Seed, Generator
    rosetest.expectation - Result values (Pass, Fail, equal, todo)
    rosetest.diagnostics - Error codes, templates and formatting
"""

from .config import RunConfig
from .core import Generator, Seed
from .diagnostics import ConfigurationError, FuzzerError, RoseTestError
from .fuzz import Fuzzer, generate, step
from .runner import distribute, flatten, format_labels, get_failure, is_todo, run_tree
from .tree import concat, describe, fuzz, test, todo

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("rosetest")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ConfigurationError",
    "Fuzzer",
    "FuzzerError",
    "Generator",
    "RoseTestError",
    "RunConfig",
    "Seed",
    "__version__",
    "concat",
    "describe",
    "distribute",
    "flatten",
    "format_labels",
    "fuzz",
    "generate",
    "get_failure",
    "is_todo",
    "run_tree",
    "step",
    "test",
    "todo",
]
