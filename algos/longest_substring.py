"""Length of the longest substring without repeated characters."""


def longest_substring_length(text: str) -> int:
    """Return the length of the longest run of distinct characters."""
    seen: set[str] = set()
    best = 0
    start = 0
    for end, char in enumerate(text):
        while char in seen:
            seen.remove(text[start])
            start += 1
        seen.add(char)
        best = max(best, end - start + 1)
    return best