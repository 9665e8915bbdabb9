import pytest

from algos.collatz import MAX_LENGTH, collatz_length, collatz_step


def test_collatz_length_eleven():
    assert collatz_length(11) == 15


def test_collatz_length_one():
    assert collatz_length(1) == 1


def test_collatz_length_two():
    assert collatz_length(2) == 2


def test_collatz_length_zero_hits_cap():
    assert collatz_length(0) == MAX_LENGTH + 1


@pytest.mark.parametrize(
    "n, expected",
    [(0, 0), (1, 1), (2, 1), (10, 5), (3, 10), (11, 34)],
)
def test_collatz_step(n, expected):
    assert collatz_step(n) == expected