"""String comparison and inspection helpers."""

from __future__ import annotations


def is_palindrome(text: str) -> bool:
    """Return True if ``text`` reads the same in both directions."""
    return text == text[::-1]


def strings_equal(x: str, y: str) -> bool:
    """Return True if both strings hold exactly the same characters."""
    return x == y


def my_strcmp(s1: str, s2: str) -> int:
    """Compare strings character by character, returning -1, 0 or 1."""
    for a, b in zip(s1, s2):
        if a < b:
            return -1
        if a > b:
            return 1
    if len(s1) > len(s2):
        return 1
    if len(s1) < len(s2):
        return -1
    return 0


def partition_string(s: str) -> int:
    """Count the pieces in a greedy split of ``s`` into runs of unique characters.

    An empty string counts as one piece.
    """
    count = 1
    seen: set[str] = set()
    for ch in s:
        if ch in seen:
            count += 1
            seen = {ch}
        else:
            seen.add(ch)
    return count