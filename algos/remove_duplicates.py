"""Remove duplicates from a sorted list in place, keeping each value once."""

from typing import List


def remove_sorted_duplicates(nums: List[int]) -> int:
    """Gather the unique values at the front of nums and return their count."""
    if not nums:
        raise ValueError("nums must not be empty")

    unique_idx = len(nums) - 1
    unique_value = nums[unique_idx]
    num_unique = 1

    for ii in range(len(nums) - 1, -1, -1):
        if nums[ii] < unique_value:
            # Shift the block of unique values down next to the new one.
            nums[ii + 1 : ii + 1 + num_unique] = nums[unique_idx : unique_idx + num_unique]
            unique_idx = ii
            unique_value = nums[ii]
            num_unique += 1

    nums[:num_unique] = nums[unique_idx : unique_idx + num_unique]
    return num_unique