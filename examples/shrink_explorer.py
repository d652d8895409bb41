"""Driving generation and shrinking by hand.

Runners that want to show every shrink step (or evaluate candidates in a
separate process) can use generate() and step() directly instead of the
fuzz() leaf check. The property here is "n < 37"; the walk ends at 37.
"""

from rosetest import Fuzzer, Generator, Seed, generate, step


def shrink_int(n: int) -> list[int]:
    """Candidates toward zero: zero, half, one less."""
    if n <= 0:
        return []
    return list(dict.fromkeys(c for c in (0, n // 2, n - 1) if c < n))


def still_fails(n: int) -> bool:
    return n >= 37


fuzzer = Fuzzer.custom(Generator.int_range(500, 1000), shrink_int)
(value, cursor), _ = generate(fuzzer).step(Seed.initial(7))
print(f"generated {value}")

smallest = value
caused_pass = False
while (candidate := step(caused_pass, cursor)) is not None:
    value, cursor = candidate
    caused_pass = not still_fails(value)
    print(f"  try {value:>4}: {'pass' if caused_pass else 'FAIL'}")
    if not caused_pass:
        smallest = value

print(f"smallest failing input: {smallest}")
# Output: smallest failing input: 37
