"""Conversion of Roman numerals to integers."""

_SINGLE = {"I": 1, "V": 5, "X": 10, "L": 50, "C": 100, "D": 500, "M": 1000}
_PAIRS = {"IV": 4, "IX": 9, "XL": 40, "XC": 90, "CD": 400, "CM": 900}


def roman_to_int_naive(numeral: str) -> int:
    """Convert by reading subtractive pairs first, then single symbols.

    Raises ValueError for a symbol that is not a Roman numeral.
    """
    total = 0
    pos = 0
    while pos < len(numeral):
        pair = numeral[pos : pos + 2]
        if len(pair) == 2 and pair in _PAIRS:
            total += _PAIRS[pair]
            pos += 2
            continue
        letter = numeral[pos]
        try:
            total += _SINGLE[letter]
        except KeyError:
            raise ValueError(f"Numeral {letter!r} is invalid") from None
        pos += 1
    return total


def roman_to_int(numeral: str) -> int:
    """Convert by scanning right to left; unknown symbols count as zero."""
    total = 0
    previous = 0
    for char in reversed(numeral):
        value = _SINGLE.get(char, 0)
        total += -value if value < previous else value
        previous = value
    return total