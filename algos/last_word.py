"""Length of the last word in a sentence."""

from itertools import takewhile


def last_word_length_naive(sentence: str) -> int:
    """Count characters backwards from the end, ignoring trailing whitespace."""
    trimmed = sentence.rstrip()
    return sum(1 for _ in takewhile(lambda ch: not ch.isspace(), reversed(trimmed)))


def last_word_length(sentence: str) -> int:
    """Return the length, in UTF-8 bytes, of the last whitespace-separated word.

    A sentence without words gives zero.
    """
    words = sentence.split()
    if not words:
        return 0
    return len(words[-1].encode("utf-8"))