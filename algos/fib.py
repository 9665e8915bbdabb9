"""Fibonacci numbers."""


def fib(n: int) -> int:
    """Return the n-th Fibonacci number, starting 0, 1, 1, 2, 3, ..."""
    if n < 0:
        raise ValueError("n must not be negative")
    a, b = 0, 1
    for _ in range(n):
        a, b = b, a + b
    return a