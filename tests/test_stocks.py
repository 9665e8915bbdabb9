import pytest

from algos.stocks import backward_max_profit, max_profit, naive_max_profit

CASES = [
    ([7, 1, 5, 3, 6, 4], 5),
    ([7, 6, 4, 3, 1], 0),
    ([1, 4, 2], 3),
    ([3, 2, 6, 5, 0, 3], 4),
    ([2, 1], 0),
]


@pytest.mark.parametrize("prices, expected", CASES)
def test_max_profit(prices, expected):
    assert max_profit(prices) == expected


@pytest.mark.parametrize("prices, expected", CASES)
def test_naive_max_profit(prices, expected):
    assert naive_max_profit(prices) == expected


@pytest.mark.parametrize("prices, expected", CASES)
def test_backward_max_profit(prices, expected):
    assert backward_max_profit(prices) == expected


@pytest.mark.parametrize("func", [max_profit, naive_max_profit, backward_max_profit])
@pytest.mark.parametrize("prices", [[], [5]])
def test_too_few_prices(func, prices):
    assert func(prices) == 0


def test_methods_agree():
    prices = [9, 3, 8, 1, 7, 2, 10, 4, 6, 5]
    assert naive_max_profit(prices) == backward_max_profit(prices) == max_profit(prices) == 9