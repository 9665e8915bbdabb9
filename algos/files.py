"""Reading small text files: a stored count and a diary entry."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Union

_INTEGER = re.compile(r"[+-]?[0-9]+")
_I32_MIN, _I32_MAX = -(2**31), 2**31 - 1

PathLike = Union[str, "os.PathLike[str]"]


def read_count(path: PathLike) -> int:
    """Return the 32-bit integer that is the whole content of a UTF-8 file.

    Raises OSError if the file cannot be read and ValueError if it does not
    hold exactly one integer in range, with no surrounding whitespace.
    """
    text = Path(path).read_text(encoding="utf-8")
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid digit found in string: {text!r}")
    count = int(text)
    if not _I32_MIN <= count <= _I32_MAX:
        raise ValueError(f"number out of range for a 32-bit integer: {text!r}")
    return count


def read_diary(path: PathLike = "diary.txt") -> str:
    """Return a message with the diary's text and size, or why it could not be read."""
    try:
        with open(path, "rb") as diary:
            raw = diary.read()
    except OSError as err:
        return f"The diary could not be opened: {err}"
    try:
        contents = raw.decode("utf-8")
    except UnicodeDecodeError:
        return "Could not read file content"
    return f"Dear diary: {contents} ({len(raw)} bytes)"