"""Fuzz testing infrastructure for rosetest.

This package contains:
- shadow_shrink: Eager reference implementation of the shrink walk
- test_shrink_oracle: State machine comparing ShrinkCursor against the shadow
- test_distribute_intensive: Large-tree seeding and end-to-end runs

Python 3.13+.
"""
