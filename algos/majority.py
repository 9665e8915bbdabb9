"""The element that occurs most often in a sequence."""

from collections import Counter
from typing import Sequence


def majority_element(nums: Sequence[int]) -> int:
    """Return the first element seen more than len/2 times.

    Without such an element, the most frequent one is returned, and -1
    for an empty sequence.
    """
    half = len(nums) // 2
    counts: Counter[int] = Counter()
    for num in nums:
        counts[num] += 1
        if counts[num] > half:
            return num
    if not counts:
        return -1
    return counts.most_common(1)[0][0]