"""String problems: word reversal and zigzag conversion."""

from __future__ import annotations


def _words(text: str) -> list[str]:
    return [word for word in text.split(" ") if word]


def count_words(text: str) -> int:
    """Return the number of space-separated words in ``text``."""
    return len(_words(text))


def reverse_words(text: str) -> str:
    """Return the words of ``text`` in reverse order, joined by single spaces."""
    return " ".join(reversed(_words(text)))


def zigzag_rows(text: str, rows: int) -> list[str]:
    """Write ``text`` in a zigzag over ``rows`` rows and return each row."""
    if rows < 1:
        raise ValueError("rows must be at least 1")
    if rows == 1:
        return [text]
    lines = [""] * rows
    level = 0
    step = 1
    for ch in text:
        lines[level] += ch
        if level == 0:
            step = 1
        elif level == rows - 1:
            step = -1
        level += step
    return lines


def zigzag_convert(text: str, rows: int) -> str:
    """Return the zigzag rows of ``text`` read one after another."""
    return "".join(zigzag_rows(text, rows))