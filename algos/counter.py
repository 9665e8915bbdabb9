"""Counting how often each value has been seen."""

from collections import Counter
from typing import Generic, Hashable, TypeVar

T = TypeVar("T", bound=Hashable)


class ValueCounter(Generic[T]):
    """Tally of hashable values."""

    def __init__(self) -> None:
        self._values: Counter = Counter()

    def count(self, value: T) -> None:
        """Record one occurrence of value."""
        self._values[value] += 1

    def times_seen(self, value: T) -> int:
        """Return how many times value has been recorded."""
        return self._values[value]