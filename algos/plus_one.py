"""Add one to a number held as a list of decimal digits."""

from typing import List, Sequence


def get_plus_one(digits: Sequence[int], idx: int) -> List[int]:
    """Return a new digit list with one added at position idx, carrying leftwards."""
    result = list(digits)
    while True:
        if result[idx] < 9:
            result[idx] += 1
            return result
        result[idx] = 0
        if idx == 0:
            return [1, *result]
        idx -= 1


def plus_one(digits: Sequence[int]) -> List[int]:
    """Return the digits of the number plus one."""
    if not digits:
        raise ValueError("digits must not be empty")
    return get_plus_one(digits, len(digits) - 1)