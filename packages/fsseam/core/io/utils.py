"""Utility functions for filesystem operations."""

import re

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(content: str) -> list[str]:
    """
    Split text into lines the same way for every FileSystem implementation.

    Recognizes ``\\r\\n``, ``\\n`` and ``\\r`` as terminators. A single
    trailing terminator does not produce an empty final line, so a file
    written with a newline at the end reads back with the same line count.

    Args:
        content: Text to split

    Returns:
        Ordered list of lines without terminators

    Example:
        >>> split_lines("a\\nb")
        ['a', 'b']
        >>> split_lines("a\\r\\nb\\n")
        ['a', 'b']
        >>> split_lines("")
        []
    """
    if not content:
        return []
    lines = _LINE_BREAK.split(content)
    if lines[-1] == "":
        lines.pop()
    return lines
