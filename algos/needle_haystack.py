"""Index of the first occurrence of one string in another."""


def find_needle(needle: str, haystack: str) -> int:
    """Return the first index of needle in haystack, 0 for an empty needle, -1 if absent."""
    return haystack.find(needle)