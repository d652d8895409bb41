"""Shared constants for rosetest.

Centralized configuration defaults used across the tree, runner, and fuzz
packages. Placing constants here avoids circular imports and provides a
single source of truth.

Constants are grouped by domain:
- Run limits: Run-count floor and default
- Shrink limits: Upper bound on shrink steps per failure
- Seeds: Default initial seed

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Run limits
    "MIN_RUN_COUNT",
    "DEFAULT_RUN_COUNT",
    # Shrink limits
    "DEFAULT_MAX_SHRINK_STEPS",
    # Seeds
    "DEFAULT_SEED",
    "SEED_MASK",
]

# ============================================================================
# RUN LIMITS
# ============================================================================

# A fuzz check must draw at least one value; anything lower is reported as a
# failing leaf by distribute(), never raised.
MIN_RUN_COUNT: int = 1

# Number of draws per fuzz check when the caller does not choose one.
DEFAULT_RUN_COUNT: int = 100

# ============================================================================
# SHRINK LIMITS
# ============================================================================

# Upper bound on step() calls spent shrinking one failure. Well-formed
# shrinkers terminate long before this; the bound protects against shrink
# functions that never make progress.
DEFAULT_MAX_SHRINK_STEPS: int = 10_000

# ============================================================================
# SEEDS
# ============================================================================

DEFAULT_SEED: int = 0

# Seeds are 64-bit unsigned integers.
SEED_MASK: int = (1 << 64) - 1
