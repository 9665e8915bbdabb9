"""Remove every occurrence of a value by swapping it to the back, in place."""

from typing import List, Optional, Sequence


def get_swap_idx(
    array: Sequence[int], current_idx: int, last_idx: int, value: int
) -> Optional[int]:
    """Return the highest index above current_idx, up to last_idx, not holding value."""
    for idx in range(last_idx, current_idx, -1):
        if array[idx] != value:
            return idx
    return None


def remove_element(array: List[int], value: int) -> int:
    """Move occurrences of value to the end and return how many others remain."""
    if not array:
        return 0
    last_idx = len(array) - 1
    for ii, item in enumerate(array):
        if item != value:
            continue
        swap_idx = get_swap_idx(array, ii, last_idx, value)
        if swap_idx is None:
            return ii
        array[ii], array[swap_idx] = array[swap_idx], value
        last_idx = swap_idx - 1
    return last_idx + 1