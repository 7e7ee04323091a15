"""Enumeration of combinatorial structures."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def _balanced(prefix: str, opens_left: int, closes_left: int) -> Iterator[str]:
    if opens_left == 0 and closes_left == 0:
        yield prefix
        return
    if closes_left > 0:
        yield from _balanced(prefix + ")", opens_left, closes_left - 1)
    if opens_left > 0:
        yield from _balanced(prefix + "(", opens_left - 1, closes_left + 1)


def generate_parentheses(n: int) -> list[str]:
    """All well-formed strings of ``n`` bracket pairs, closing tried before opening."""
    if n < 0:
        raise ValueError("the number of pairs cannot be negative")
    return list(_balanced("", n, 0))


def _arrangements(items: list[int], start: int) -> Iterator[list[int]]:
    if start == len(items):
        yield list(items)
        return
    items = list(items)
    for index in range(start, len(items)):
        items[start], items[index] = items[index], items[start]
        yield from _arrangements(items, start + 1)


def permutations(nums: Sequence[int]) -> list[list[int]]:
    """Every ordering of ``nums``; sorted distinct input gives lexicographic order."""
    return list(_arrangements(list(nums), 0))


def _choices(items: Sequence[int], start: int, chosen: list[int]) -> Iterator[list[int]]:
    if start == len(items):
        yield list(chosen)
        return
    chosen.append(items[start])
    yield from _choices(items, start + 1, chosen)
    chosen.pop()
    yield from _choices(items, start + 1, chosen)


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Every subset of ``nums``, those including an element listed before those without."""
    return list(_choices(list(nums), 0, []))