import pytest

from algos.fib import fib


def test_first_values():
    assert [fib(n) for n in range(7)] == [0, 1, 1, 2, 3, 5, 8]


def test_fib_twenty():
    assert fib(20) == 6765


def test_recurrence_holds():
    for n in range(2, 40):
        assert fib(n) == fib(n - 1) + fib(n - 2)


def test_negative_rejected():
    with pytest.raises(ValueError):
        fib(-1)