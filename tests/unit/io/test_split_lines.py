"""Tests for the shared line-splitting rule."""

import pytest

from fsseam.core.io import split_lines


@pytest.mark.parametrize(
    ("content", "expected"),
    [
        ("a\nb", ["a", "b"]),
        ("c", ["c"]),
        ("", []),
        ("a\n", ["a"]),
        ("a\r\nb\r\n", ["a", "b"]),
        ("a\rb", ["a", "b"]),
        ("a\n\nb", ["a", "", "b"]),
        ("a\n\n", ["a", ""]),
        ("\n", [""]),
    ],
)
def test_split_lines(content: str, expected: list[str]):
    """Each terminator style splits; only one trailing terminator is dropped."""
    assert split_lines(content) == expected
