"""Dynamic-programming problems."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence


def climb_stairs(n: int) -> int:
    """Return the number of ways to climb ``n`` steps taking 1 or 2 at a time."""
    if n < 0:
        return 0
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return current


def generate(num_rows: int) -> list[list[int]]:
    """Return the first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 0:
        raise ValueError(f"num_rows must not be negative, got {num_rows}")
    rows: list[list[int]] = []
    for _ in range(num_rows):
        if not rows:
            rows.append([1])
            continue
        above = rows[-1]
        rows.append([a + b for a, b in zip([0, *above], [*above, 0])])
    return rows


def max_profit(prices: Iterable[int]) -> int:
    """Return the best profit from one buy followed by one sale, or 0."""
    lowest = math.inf
    best = 0
    for price in prices:
        if price < lowest:
            lowest = price
        else:
            best = max(best, price - lowest)
    return best


def rob(nums: Sequence[int]) -> int:
    """Return the largest total of values with no two adjacent ones taken."""
    if not nums:
        raise ValueError("nums must not be empty")
    two_back, one_back = 0, nums[0]
    for num in nums[1:]:
        two_back, one_back = one_back, max(one_back, two_back + num)
    return one_back


def num_squares(n: int) -> int:
    """Return the fewest perfect squares that add up to ``n``."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    counts = [0] * (n + 1)
    for i in range(1, n + 1):
        counts[i] = 1 + min(counts[i - j * j] for j in range(1, math.isqrt(i) + 1))
    return counts[n]


def coin_change(coins: Iterable[int], amount: int) -> int:
    """Return the fewest coins making up ``amount``, or -1 if it cannot be made."""
    if amount < 0:
        raise ValueError(f"amount must not be negative, got {amount}")
    denominations = list(coins)
    if any(coin < 0 for coin in denominations):
        raise ValueError("coin values must not be negative")
    fewest: list[int | None] = [0] + [None] * amount
    for i in range(1, amount + 1):
        options = [
            fewest[i - coin]
            for coin in denominations
            if 0 < coin <= i and fewest[i - coin] is not None
        ]
        fewest[i] = min(options) + 1 if options else None
    result = fewest[amount]
    return -1 if result is None else result