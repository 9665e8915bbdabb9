"""Longest prefix shared by every string in a list."""

from itertools import takewhile
from typing import Sequence


def longest_common_prefix(strs: Sequence[str]) -> str:
    """Return the longest common prefix; empty for an empty list."""
    if not strs:
        return ""
    shared = takewhile(lambda chars: len(set(chars)) == 1, zip(*strs))
    return "".join(chars[0] for chars in shared)