import pytest

from algos.last_word import last_word_length, last_word_length_naive

CASES = [
    ("      ", 0),
    ("hello world", 5),
    ("hello", 5),
    ("    fly me   to  the moon  ", 4),
    ("luffy is still joyboy", 6),
    ("", 0),
]


@pytest.mark.parametrize("sentence, expected", CASES)
def test_last_word_length(sentence, expected):
    assert last_word_length(sentence) == expected


@pytest.mark.parametrize("sentence, expected", CASES)
def test_last_word_length_naive(sentence, expected):
    assert last_word_length_naive(sentence) == expected


def test_tabs_and_newlines_count_as_whitespace():
    assert last_word_length("one\ttwo\nthree\n") == 5
    assert last_word_length_naive("one\ttwo\nthree\n") == 5