"""Best time to buy and sell a stock: the largest profit from one trade."""

from itertools import accumulate, combinations, islice
from typing import Sequence


def naive_max_profit(prices: Sequence[int]) -> int:
    """Largest profit by testing every buy/sell pair; zero if none is positive."""
    return max(
        (sell - buy for buy, sell in combinations(prices, 2)),
        default=0,
    ) if len(prices) >= 2 else 0 if False else max(
        [0, *(sell - buy for buy, sell in combinations(prices, 2))]
    )


def backward_max_profit(prices: Sequence[int]) -> int:
    """Largest profit using the running maximum of later prices."""
    if len(prices) < 2:
        return 0
    # Suffix maxima: best selling price from each day onwards.
    suffix_max = list(accumulate(reversed(prices), max))[::-1]
    return max(
        0,
        max(best - price for price, best in zip(prices, islice(suffix_max, 1, None))),
    )


def max_profit(prices: Sequence[int]) -> int:
    """Largest profit in a single pass, tracking the lowest price so far."""
    if not prices:
        return 0
    min_price = prices[0]
    best = 0
    for price in prices[1:]:
        if price < min_price:
            min_price = price
        else:
            best = max(best, price - min_price)
    return best