"""Run configuration.

Provides a single frozen dataclass bundling the parameters a runner passes
to distribute() and fuzz_check(): run count, initial seed, and shrink budget.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from rosetest.constants import DEFAULT_MAX_SHRINK_STEPS, DEFAULT_RUN_COUNT, DEFAULT_SEED
from rosetest.core.seed import Seed
from rosetest.diagnostics import ConfigurationError, ErrorTemplate

__all__ = ["RunConfig"]


@dataclass(frozen=True, slots=True)
class RunConfig:
    """Immutable configuration for a test run.

    All fields have sensible defaults; ``RunConfig()`` with no arguments
    produces a usable configuration.

    Attributes:
        run_count: Draws per fuzz check (default: 100). Not validated here:
            a run count below the minimum is reported by ``distribute()`` as
            a failing leaf so the rest of the run still reports.
        seed: Integer the initial ``Seed`` is derived from (default: 0).
        max_shrink_steps: Upper bound on shrink steps per failure
            (default: 10000).

    Example:
        >>> config = RunConfig(run_count=500, seed=42)
        >>> config.initial_seed() == Seed.initial(42)
        True
    """

    run_count: int = DEFAULT_RUN_COUNT
    seed: int = DEFAULT_SEED
    max_shrink_steps: int = DEFAULT_MAX_SHRINK_STEPS

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ConfigurationError: If max_shrink_steps is not positive.
        """
        if self.max_shrink_steps <= 0:
            raise ConfigurationError(
                ErrorTemplate.invalid_shrink_budget(self.max_shrink_steps)
            )

    def initial_seed(self) -> Seed:
        """Seed derived from the configured integer."""
        return Seed.initial(self.seed)
