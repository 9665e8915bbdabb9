"""Largest sum of a contiguous sub-array (Kadane's algorithm)."""

from typing import Sequence


def max_sub_array(nums: Sequence[int]) -> int:
    """Return the largest sum of a non-empty contiguous run; zero for no input."""
    if not nums:
        return 0
    current = best = nums[0]
    for num in nums[1:]:
        current = max(num, current + num)
        best = max(best, current)
    return best