"""Executable runner trees.

Exports:
    distribute: TestSpecTree -> RunnerTree with per-leaf seeds
    Runnable, LabeledRunner, BatchRunner: RunnerTree variants
    get_failure, is_todo, Failure: Result classification
    format_labels: Canonical label ordering for display
    flatten, run_tree, SeededRunner, LeafReport: Sequential execution

Python 3.13+.
"""

from .classify import Failure, get_failure, is_todo
from .distribute import distribute
from .execute import LeafReport, SeededRunner, flatten, run_tree
from .labels import format_labels
from .nodes import BatchRunner, LabeledRunner, Runnable, RunnerTree

__all__ = [
    "BatchRunner",
    "Failure",
    "LabeledRunner",
    "LeafReport",
    "Runnable",
    "RunnerTree",
    "SeededRunner",
    "distribute",
    "flatten",
    "format_labels",
    "get_failure",
    "is_todo",
    "run_tree",
]
