"""Small vector and matrix helpers."""

import math
from typing import List, Sequence


def transpose(matrix: Sequence[Sequence[int]]) -> List[List[int]]:
    """Return the transpose of a rectangular matrix given as rows."""
    return [list(column) for column in zip(*matrix)]


def magnitude(vector: Sequence[float]) -> float:
    """Return the Euclidean length of a vector."""
    return math.sqrt(sum(value * value for value in vector))


def normalize(vector: Sequence[float]) -> List[float]:
    """Return the vector scaled to unit length."""
    length = magnitude(vector)
    return [value / length for value in vector]