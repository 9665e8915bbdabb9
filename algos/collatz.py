"""Collatz sequence steps and lengths."""

MAX_LENGTH = 100


def collatz_step(n: int) -> int:
    """Return the next Collatz value; 0 and 1 map to themselves."""
    if n in (0, 1):
        return n
    if n % 2 == 0:
        return n // 2
    return 3 * n + 1


def collatz_length(n: int) -> int:
    """Return the length of the sequence from n down to 1, capped just past MAX_LENGTH."""
    length = 1
    while n != 1:
        n = collatz_step(n)
        length += 1
        if length > MAX_LENGTH:
            break
    return length