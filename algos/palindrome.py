"""Palindrome test over alphanumeric characters, ignoring case."""


def is_valid_palindrome(text: str) -> bool:
    """Return True if the alphanumeric characters read the same both ways."""
    chars = [ch.upper() for ch in text if ch.isalnum()]
    return chars == chars[::-1]