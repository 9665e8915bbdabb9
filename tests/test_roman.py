import pytest

from algos.roman import roman_to_int, roman_to_int_naive

CASES = [
    ("III", 3),
    ("LVIII", 58),
    ("MCMXCIV", 1994),
    ("IV", 4),
    ("", 0),
]


@pytest.mark.parametrize("numeral, expected", CASES)
def test_roman_to_int(numeral, expected):
    assert roman_to_int(numeral) == expected


@pytest.mark.parametrize("numeral, expected", CASES)
def test_roman_to_int_naive(numeral, expected):
    assert roman_to_int_naive(numeral) == expected


def test_naive_rejects_invalid_symbol():
    with pytest.raises(ValueError):
        roman_to_int_naive("XQ")


def test_fast_ignores_invalid_symbol():
    assert roman_to_int("XQ") == 10