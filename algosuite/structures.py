"""Small stateful data structures."""

from __future__ import annotations

import heapq


class _TrieNode:
    __slots__ = ("children", "terminal")

    def __init__(self) -> None:
        self.children: dict[str, _TrieNode] = {}
        self.terminal = False


class WordDictionary:
    """A set of words searchable with ``.`` matching any single character."""

    def __init__(self) -> None:
        self._root = _TrieNode()

    def add_word(self, word: str) -> None:
        node = self._root
        for char in word:
            node = node.children.setdefault(char, _TrieNode())
        node.terminal = True

    def search(self, word: str) -> bool:
        frontier = [self._root]
        for char in word:
            if char == ".":
                frontier = [child for node in frontier for child in node.children.values()]
            else:
                frontier = [node.children[char] for node in frontier if char in node.children]
            if not frontier:
                return False
        return any(node.terminal for node in frontier)


class BrowserHistory:
    """Back and forward navigation over visited pages of a single tab."""

    def __init__(self, homepage: str) -> None:
        self._pages = [homepage]
        self._current = 0

    def visit(self, url: str) -> None:
        """Open ``url``, discarding any forward history."""
        del self._pages[self._current + 1:]
        self._pages.append(url)
        self._current += 1

    def back(self, steps: int) -> str:
        self._current = max(0, self._current - steps)
        return self._pages[self._current]

    def forward(self, steps: int) -> str:
        self._current = min(len(self._pages) - 1, self._current + steps)
        return self._pages[self._current]


class SmallestInfiniteSet:
    """The set of all positive integers, with removal of its minimum and re-insertion."""

    def __init__(self) -> None:
        self._next = 1
        self._returned: list[int] = []
        self._members: set[int] = set()

    def pop_smallest(self) -> int:
        if self._returned:
            value = heapq.heappop(self._returned)
            self._members.remove(value)
            return value
        value = self._next
        self._next += 1
        return value

    def add_back(self, num: int) -> None:
        if num < 1:
            raise ValueError("only positive integers belong to the set")
        if num < self._next and num not in self._members:
            self._members.add(num)
            heapq.heappush(self._returned, num)