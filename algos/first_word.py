"""First space-separated word of a text."""


def first_word(text: str) -> str:
    """Return the text up to its first space, or the whole text if there is none."""
    return text.partition(" ")[0]