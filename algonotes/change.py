"""Greedy coin change."""

from __future__ import annotations

import bisect
from collections.abc import Iterable

DEFAULT_COINS = (1, 2, 5, 10, 20, 50, 100, 200, 500, 2000)


def make_change(amount: int, coins: Iterable[int] = DEFAULT_COINS) -> list[int]:
    """Pay ``amount`` greedily, always taking the largest coin that fits.

    Returns the coins used, largest first. Raises ValueError when a coin is
    not positive or the remainder is smaller than every coin.
    """
    denominations = sorted(coins)
    if not denominations or denominations[0] <= 0:
        raise ValueError("coins must be a non-empty set of positive values")
    paid: list[int] = []
    while amount > 0:
        index = bisect.bisect_right(denominations, amount) - 1
        if index < 0:
            raise ValueError(f"no coin fits the remaining amount {amount}")
        coin = denominations[index]
        paid.append(coin)
        amount -= coin
    return paid