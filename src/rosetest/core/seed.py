"""Splittable pseudo-random seeds and pure generators.

Seeds are immutable 64-bit states stepped with SplitMix64 output mixing.
split() derives an independent child seed plus the seed to continue with,
deterministically, so test trees can hand every leaf its own stream without
any global random state.

Generators are pure functions from a seed to (value, next seed), composed
with map() and and_then().

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from rosetest.constants import SEED_MASK

__all__ = ["Generator", "Seed"]

_GOLDEN_GAMMA = 0x9E3779B97F4A7C15
_WORD_BITS = 64


def _mix64(z: int) -> int:
    z = ((z ^ (z >> 30)) * 0xBF58476D1CE4E5B9) & SEED_MASK
    z = ((z ^ (z >> 27)) * 0x94D049BB133111EB) & SEED_MASK
    return z ^ (z >> 31)


def _mix_gamma(z: int) -> int:
    """Derive an odd increment with enough bit transitions."""
    z = ((z ^ (z >> 33)) * 0xFF51AFD7ED558CCD) & SEED_MASK
    z = ((z ^ (z >> 33)) * 0xC4CEB9FE1A85EC53) & SEED_MASK
    z = (z ^ (z >> 33)) | 1
    if (z ^ (z >> 1)).bit_count() < 24:
        z ^= 0xAAAAAAAAAAAAAAAA
    return z


@dataclass(frozen=True, slots=True)
class Seed:
    """Immutable generator state.

    Attributes:
        state: Current 64-bit state
        gamma: Odd 64-bit increment, fixed for the lifetime of a stream
    """

    state: int
    gamma: int = _GOLDEN_GAMMA

    @staticmethod
    def initial(value: int) -> Seed:
        """Seed derived from an arbitrary integer (negative values wrap)."""
        return Seed(_mix64(value & SEED_MASK))

    def next_int(self) -> tuple[int, Seed]:
        """Draw one 64-bit unsigned integer.

        Returns:
            (output, seed to use for the next draw)
        """
        state = (self.state + self.gamma) & SEED_MASK
        return _mix64(state), Seed(state, self.gamma)

    def split(self) -> tuple[Seed, Seed]:
        """Derive an independent seed.

        Returns:
            (independent child seed, seed to continue with). Neither equals
            self, and calling split() on the same seed always returns the
            same pair.
        """
        child_state, following = self.next_int()
        child_gamma, following = following.next_int()
        return Seed(child_state, _mix_gamma(child_gamma)), following


@dataclass(frozen=True, slots=True)
class Generator[T]:
    """Pure random generator: a function from a seed to (value, next seed).

    Example:
        >>> dice = Generator.int_range(1, 6)
        >>> value, _ = dice.step(Seed.initial(42))
        >>> 1 <= value <= 6
        True
    """

    run: Callable[[Seed], tuple[T, Seed]]

    def step(self, seed: Seed) -> tuple[T, Seed]:
        """Generate one value."""
        return self.run(seed)

    def sample(self, seed: Seed, count: int) -> list[T]:
        """Generate count values, threading the seed between draws."""
        values, _ = _draw_many(self, count, seed)
        return values

    def map[U](self, fn: Callable[[T], U]) -> Generator[U]:
        """Transform generated values without consuming extra randomness."""

        def run(seed: Seed) -> tuple[U, Seed]:
            value, following = self.run(seed)
            return fn(value), following

        return Generator(run)

    def and_then[U](self, fn: Callable[[T], Generator[U]]) -> Generator[U]:
        """Chain a generator whose choice depends on the value drawn."""

        def run(seed: Seed) -> tuple[U, Seed]:
            value, following = self.run(seed)
            return fn(value).run(following)

        return Generator(run)

    @staticmethod
    def constant(value: T) -> Generator[T]:
        """Always produce value; the seed is returned unchanged."""
        return Generator(lambda seed: (value, seed))

    @staticmethod
    def independent_seed() -> Generator[Seed]:
        """Produce a fresh seed independent of the one threaded onward."""
        return Generator(lambda seed: seed.split())

    @staticmethod
    def int_range(low: int, high: int) -> Generator[int]:
        """Uniform integers in [low, high], inclusive.

        Raises:
            ValueError: If low > high
        """
        if low > high:
            msg = f"int_range low ({low}) must be <= high ({high})"
            raise ValueError(msg)
        span = high - low + 1
        words = max(1, -(-span.bit_length() // _WORD_BITS))
        space = 1 << (words * _WORD_BITS)
        # Rejection sampling keeps the distribution uniform.
        limit = space - (space % span)

        def run(seed: Seed) -> tuple[int, Seed]:
            while True:
                drawn = 0
                for _ in range(words):
                    word, seed = seed.next_int()
                    drawn = (drawn << _WORD_BITS) | word
                if drawn < limit:
                    return low + drawn % span, seed

        return Generator(run)

    @staticmethod
    def list_of(count: int, element: Generator[T]) -> Generator[list[T]]:
        """Exactly count values drawn from element."""
        return Generator(lambda seed: _draw_many(element, count, seed))


def _draw_many[T](element: Generator[T], count: int, seed: Seed) -> tuple[list[T], Seed]:
    values: list[T] = []
    for _ in range(count):
        value, seed = element.run(seed)
        values.append(value)
    return values, seed
