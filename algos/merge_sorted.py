"""Merge a sorted list into the zero-padded tail of another, in place."""

from typing import List, Sequence


def merge_sorted(nums1: List[int], m: int, nums2: List[int], n: int) -> None:
    """Merge by swapping into nums2 and re-sorting it; both lists are modified.

    nums1 holds m sorted values followed by n padding slots; nums2 holds n
    sorted values.
    """
    if len(nums1) != m + n:
        raise ValueError(f"nums1 must have length m + n = {m + n}, got {len(nums1)}")
    if len(nums2) != n:
        raise ValueError(f"nums2 must have length n = {n}, got {len(nums2)}")
    if n == 0:
        return

    jj = 0
    for ii in range(len(nums1)):
        if ii < m and nums1[ii] > nums2[jj]:
            nums1[ii], nums2[jj] = nums2[jj], nums1[ii]
            # One bubble pass restores the order of nums2.
            for kk in range(len(nums2) - 1):
                if nums2[kk + 1] < nums2[kk]:
                    nums2[kk], nums2[kk + 1] = nums2[kk + 1], nums2[kk]
        if ii >= m:
            nums1[ii], nums2[jj] = nums2[jj], nums1[ii]
            jj += 1


def merge_sorted_optimal(nums1: List[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge from the back with two pointers, placing the largest value last."""
    i, j, k = m - 1, n - 1, m + n - 1
    while j >= 0:
        if i >= 0 and nums1[i] > nums2[j]:
            nums1[k] = nums1[i]
            i -= 1
        else:
            nums1[k] = nums2[j]
            j -= 1
        k -= 1