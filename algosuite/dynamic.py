"""Dynamic-programming algorithms."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from functools import lru_cache
from itertools import accumulate

MOD = 10**9 + 7

_PASS_DAYS = (1, 7, 30)


def min_path_sum(grid: Sequence[Sequence[int]]) -> int:
    """Smallest sum along a path from top-left to bottom-right moving right or down."""
    if not grid or not grid[0]:
        raise ValueError("the grid must have at least one cell")
    row = list(accumulate(grid[0]))
    for cells in grid[1:]:
        current: list[int] = []
        for col, cell in enumerate(cells):
            above = row[col]
            current.append(cell + (above if col == 0 else min(above, current[-1])))
        row = current
    return row[-1]


def climb_stairs(n: int) -> int:
    """Ways to climb ``n`` steps taking one or two at a time."""
    if n < 0:
        raise ValueError("the number of steps cannot be negative")
    if n <= 2:
        return n
    before, current = 1, 2
    for _ in range(n - 2):
        before, current = current, before + current
    return current


def rob(nums: Sequence[int]) -> int:
    """Largest total from houses with no two adjacent ones robbed."""
    if not nums:
        raise ValueError("rob() needs at least one house")
    if len(nums) == 1:
        return nums[0]
    before, best = nums[0], max(nums[0], nums[1])
    for value in nums[2:]:
        before, best = best, max(best, before + value)
    return best


def maximal_square(matrix: Sequence[Sequence[str]]) -> int:
    """Area of the largest square made only of ``'1'`` cells."""
    if not matrix or not matrix[0]:
        return 0
    width = len(matrix[0])
    above = [0] * width
    best = 0
    for row in matrix:
        current: list[int] = []
        for col, cell in enumerate(row):
            if cell == "1":
                size = 1
                if col > 0:
                    size += min(above[col], current[col - 1], above[col - 1])
                best = max(best, size)
            else:
                size = 0
            current.append(size)
        above = current
    return best * best


def profitable_schemes(
    n: int, min_profit: int, group: Sequence[int], profit: Sequence[int]
) -> int:
    """Crime subsets using at most ``n`` members and earning at least ``min_profit``."""
    table = [[0] * (min_profit + 1) for _ in range(n + 1)]
    table[0][0] = 1
    for members, gain in zip(group, profit, strict=True):
        for used in range(n, members - 1, -1):
            for earned in range(min_profit, -1, -1):
                source = table[used - members][max(0, earned - gain)]
                table[used][earned] = (table[used][earned] + source) % MOD
    return sum(row[min_profit] for row in table) % MOD


def mincost_tickets(days: Sequence[int], costs: Sequence[int]) -> int:
    """Cheapest cover of the sorted travel ``days`` by 1-, 7- and 30-day passes."""
    if not days:
        raise ValueError("mincost_tickets() needs at least one travel day")
    if len(costs) != len(_PASS_DAYS):
        raise ValueError("costs must give the 1-, 7- and 30-day pass prices")
    travel = set(days)
    last_day = days[-1]
    spent = [0] * (last_day + 1)
    for day in range(1, last_day + 1):
        if day not in travel:
            spent[day] = spent[day - 1]
        else:
            spent[day] = min(
                price + spent[max(day - span, 0)] for price, span in zip(costs, _PASS_DAYS)
            )
    return spent[last_day]


def max_satisfaction(satisfaction: Sequence[int]) -> int:
    """Largest like-time coefficient from cooking a chosen subset of dishes."""
    total = 0
    running = 0
    for value in sorted(satisfaction, reverse=True):
        running += value
        if running <= 0:
            break
        total += running
    return total


def number_of_arrays(s: str, k: int) -> int:
    """Ways to split digit string ``s`` into numbers in ``[1, k]`` without leading zeros."""
    size = len(s)
    ways = [0] * size + [1]
    for start in range(size - 1, -1, -1):
        if s[start] == "0":
            continue
        value = 0
        total = 0
        for end in range(start, size):
            value = value * 10 + int(s[end])
            if value > k:
                break
            total += ways[end + 1]
        ways[start] = total % MOD
    return ways[0]


def pizza_cut_ways(pizza: Sequence[str], k: int) -> int:
    """Ways to cut ``pizza`` into ``k`` pieces each holding an apple (``'A'``)."""
    if k < 1:
        raise ValueError("the number of pieces must be positive")
    if not pizza or not pizza[0]:
        raise ValueError("the pizza must have at least one cell")
    rows, cols = len(pizza), len(pizza[0])
    apples = [[0] * (cols + 1) for _ in range(rows + 1)]
    for i in range(rows - 1, -1, -1):
        for j in range(cols - 1, -1, -1):
            apples[i][j] = (
                (pizza[i][j] == "A")
                + apples[i + 1][j]
                + apples[i][j + 1]
                - apples[i + 1][j + 1]
            )

    @lru_cache(maxsize=None)
    def cut(top: int, left: int, pieces: int) -> int:
        here = apples[top][left]
        if here < pieces:
            return 0
        if pieces == 1:
            return 1
        total = sum(
            cut(row, left, pieces - 1)
            for row in range(top + 1, rows)
            if here - apples[row][left] > 0 and apples[row][left] >= pieces - 1
        )
        total += sum(
            cut(top, col, pieces - 1)
            for col in range(left + 1, cols)
            if here - apples[top][col] > 0 and apples[top][col] >= pieces - 1
        )
        return total % MOD

    return cut(0, 0, k)


def num_ways_to_form(words: Sequence[str], target: str) -> int:
    """Ways to build ``target`` taking letters from strictly increasing columns of ``words``."""
    if not words:
        raise ValueError("num_ways_to_form() needs at least one word")
    if len({len(word) for word in words}) != 1:
        raise ValueError("all words must have the same length")
    ways = [1] + [0] * len(target)
    for column in zip(*words):
        counts = Counter(column)
        for index in range(len(target) - 1, -1, -1):
            ways[index + 1] = (ways[index + 1] + ways[index] * counts[target[index]]) % MOD
    return ways[-1]


def max_value_of_coins(piles: Sequence[Sequence[int]], k: int) -> int:
    """Largest total of at most ``k`` coins taken from the tops of the piles."""
    if k < 0:
        raise ValueError("the number of coins cannot be negative")
    best = [0] * (k + 1)
    for pile in piles:
        prefix = list(accumulate(pile[:k], initial=0))
        best = [
            max(prefix[taken] + best[budget - taken] for taken in range(min(budget, len(prefix) - 1) + 1))
            for budget in range(k + 1)
        ]
    return best[k]