"""String helpers: palindrome check, reversal and length-first sorting."""

from __future__ import annotations

from collections.abc import Iterable


def is_palindrome(text: str) -> bool:
    """Whether ``text`` reads the same forwards and backwards."""
    return all(
        text[i] == text[-1 - i] for i in range(len(text) // 2)
    )


def reverse_string(text: str) -> str:
    """Return ``text`` with its characters in reverse order."""
    return text[::-1]


def sort_by_length(lines: Iterable[str]) -> list[str]:
    """Sort longest first; strings of equal length in lexicographic order."""
    return sorted(lines, key=lambda line: (-len(line), line))