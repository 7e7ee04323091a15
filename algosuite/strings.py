"""Algorithms over strings."""

from __future__ import annotations

from functools import lru_cache
from itertools import zip_longest

_CLOSING = {")": "(", "]": "[", "}": "{"}
_OPENING = frozenset(_CLOSING.values())
_VOWELS = frozenset("aeiou")


def is_valid_parentheses(s: str) -> bool:
    """Whether every bracket in ``s`` is closed by the matching kind in the right order."""
    stack: list[str] = []
    for char in s:
        if char in _OPENING:
            stack.append(char)
        elif not stack or stack.pop() != _CLOSING.get(char):
            return False
    return not stack


def simplify_path(path: str) -> str:
    """Canonical form of an absolute Unix-style path."""
    parts: list[str] = []
    for part in path.split("/"):
        if part == "..":
            if parts:
                parts.pop()
        elif part and part != ".":
            parts.append(part)
    return "/" + "/".join(parts)


def is_scramble(s1: str, s2: str) -> bool:
    """Whether ``s2`` is obtained from ``s1`` by recursively swapping split halves."""

    @lru_cache(maxsize=None)
    def scramble(first: str, second: str) -> bool:
        if first == second:
            return True
        if len(first) != len(second):
            return False
        size = len(first)
        for cut in range(1, size):
            if scramble(first[:cut], second[size - cut:]) and scramble(
                first[cut:], second[: size - cut]
            ):
                return True
            if scramble(first[:cut], second[:cut]) and scramble(first[cut:], second[cut:]):
                return True
        return False

    return scramble(s1, s2)


def longest_palindrome_subseq(s: str) -> int:
    """Length of the longest palindromic subsequence of ``s``."""
    size = len(s)
    if size == 0:
        return 0
    below = [0] * size
    for start in range(size - 1, -1, -1):
        row = [0] * size
        row[start] = 1
        for end in range(start + 1, size):
            if s[start] == s[end]:
                row[end] = 2 + below[end - 1]
            else:
                row[end] = max(below[end], row[end - 1])
        below = row
    return below[-1]


def min_insertions(s: str) -> int:
    """Fewest character insertions that turn ``s`` into a palindrome."""
    return len(s) - longest_palindrome_subseq(s)


def max_vowels(s: str, k: int) -> int:
    """Most vowels in any window of ``k`` consecutive characters."""
    if k <= 0:
        raise ValueError("window length must be positive")
    flags = [char in _VOWELS for char in s]
    best = 0
    window = 0
    for index, is_vowel in enumerate(flags):
        window += is_vowel
        if index >= k:
            window -= flags[index - k]
        best = max(best, window)
    return best


def merge_alternately(s1: str, s2: str) -> str:
    """Interleave the characters of both strings, then append the longer one's rest."""
    return "".join(a + b for a, b in zip_longest(s1, s2, fillvalue=""))


def remove_stars(s: str) -> str:
    """Remove each ``*`` together with the closest kept character to its left."""
    kept: list[str] = []
    for char in s:
        if char == "*":
            if not kept:
                raise ValueError("a star has no character to its left to remove")
            kept.pop()
        else:
            kept.append(char)
    return "".join(kept)


def partition_string(s: str) -> int:
    """Fewest pieces ``s`` splits into so that no piece repeats a character."""
    pieces = 1
    seen: set[str] = set()
    for char in s:
        if char in seen:
            pieces += 1
            seen = {char}
        else:
            seen.add(char)
    return pieces