import pytest

from algos.first_word import first_word


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", ""),
        ("Hello", "Hello"),
        ("Hello World", "Hello"),
        (" leading", ""),
        ("a b c", "a"),
    ],
)
def test_first_word(text, expected):
    assert first_word(text) == expected