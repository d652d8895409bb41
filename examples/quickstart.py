"""Quickstart example for rosetest.

This example builds a small test tree, binds it to a seed, runs it, and
prints the results the way a terminal runner would.

Note: rosetest ships no value fuzzers of its own. The integer fuzzer below
is built with Fuzzer.custom() from a generator and a shrink function.
"""

from rosetest import (
    Fuzzer,
    Generator,
    RunConfig,
    describe,
    distribute,
    format_labels,
    fuzz,
    run_tree,
    test,
    todo,
)
from rosetest.expectation import equal, fail


def shrink_int(n: int) -> list[int]:
    """Candidates toward zero: zero, half, one less."""
    if n <= 0:
        return []
    return list(dict.fromkeys(c for c in (0, n // 2, n - 1) if c < n))


ints = Fuzzer.custom(Generator.int_range(0, 1000), shrink_int)

# Example 1: Building a test tree
print("=" * 50)
print("Example 1: Building a Test Tree")
print("=" * 50)

suite = describe(
    "arithmetic",
    [
        test("two plus two", lambda: equal(4, 2 + 2)),
        fuzz(ints, "doubling is even", lambda n: equal(0, (n * 2) % 2)),
        fuzz(ints, "numbers are small", lambda n: None if n < 100 else fail("too big")),
        todo("division by zero"),
    ],
)
print(suite)

# Example 2: Distributing seeds and running
print("\n" + "=" * 50)
print("Example 2: Running With a Fixed Seed")
print("=" * 50)

config = RunConfig(run_count=100, seed=42)
runner = distribute(config.run_count, config.initial_seed(), suite)

for report in run_tree(runner):
    if report.passed:
        mark = "✓"
    elif report.is_todo:
        mark = "…"
    else:
        mark = "✗"
    lines = format_labels(lambda d: "↓ " + d, lambda t, m=mark: f"{m} {t}", report.labels)
    print("\n".join(lines))
    for failure in report.failures:
        if failure.given is not None:
            print(f"    given: {failure.given}")
        print(f"    {failure.message}")
# The "numbers are small" failure always shrinks to the boundary:
#     given: 100
#     too big

# Example 3: Invalid trees are reported, not raised
print("\n" + "=" * 50)
print("Example 3: Invalid Trees")
print("=" * 50)

broken = describe(
    "duplicates",
    [test("same", lambda: None), test("same", lambda: None)],
)
for report in run_tree(distribute(1, config.initial_seed(), broken)):
    print(report.labels, [failure.message for failure in report.failures])
# Output: ('duplicates',) ["The group 'duplicates' contains multiple tests named 'same'"]

for report in run_tree(distribute(0, config.initial_seed(), suite)):
    print(report.labels, [failure.message for failure in report.failures])
# Output: () ['Test runner run count must be at least 1, not 0']
