"""Algorithms over sequences of integers."""

from __future__ import annotations

import heapq
from bisect import bisect_left
from collections import Counter
from collections.abc import MutableSequence, Sequence
from functools import reduce
from itertools import accumulate, groupby
from operator import xor


def two_sum(nums: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return indices ``(i, j)``, ``i < j``, with ``nums[i] + nums[j] == target``, or None."""
    seen: dict[int, int] = {}
    for index, num in enumerate(nums):
        partner = seen.get(target - num)
        if partner is not None:
            return partner, index
        seen[num] = index
    return None


def max_area(height: Sequence[int]) -> int:
    """Largest amount of water held between two of the given wall heights."""
    best = 0
    left, right = 0, len(height) - 1
    while left < right:
        best = max(best, (right - left) * min(height[left], height[right]))
        if height[left] > height[right]:
            right -= 1
        else:
            left += 1
    return best


def three_sum(nums: Sequence[int]) -> list[list[int]]:
    """All distinct sorted triplets summing to zero, in lexicographic order."""
    ordered = sorted(nums)
    found: set[tuple[int, int, int]] = set()
    for i, first in enumerate(ordered):
        lo, hi = i + 1, len(ordered) - 1
        while lo < hi:
            total = first + ordered[lo] + ordered[hi]
            if total == 0:
                found.add((first, ordered[lo], ordered[hi]))
                lo += 1
                hi -= 1
            elif total < 0:
                lo += 1
            else:
                hi -= 1
    return [list(triplet) for triplet in sorted(found)]


def remove_duplicates(nums: MutableSequence[int]) -> int:
    """Compact the distinct values of a sorted list to its front; return their count."""
    unique = [value for value, _ in groupby(nums)]
    nums[: len(unique)] = unique
    return len(unique)


def next_permutation(nums: MutableSequence[int]) -> None:
    """Rearrange ``nums`` in place into the next permutation in lexicographic order."""
    size = len(nums)
    pivot = next((i for i in range(size - 2, -1, -1) if nums[i] < nums[i + 1]), None)
    start = 0
    if pivot is not None:
        swap_at = next(i for i in range(size - 1, pivot, -1) if nums[i] > nums[pivot])
        nums[pivot], nums[swap_at] = nums[swap_at], nums[pivot]
        start = pivot + 1
    nums[start:] = nums[start:][::-1]


def max_subarray(nums: Sequence[int]) -> int:
    """Largest sum of a non-empty contiguous run."""
    if not nums:
        raise ValueError("max_subarray() needs at least one number")
    best = nums[0]
    running = 0
    for num in nums:
        running += num
        best = max(best, running)
        running = max(running, 0)
    return best


def merge_intervals(intervals: Sequence[Sequence[int]]) -> list[list[int]]:
    """Merge overlapping ``[start, end]`` intervals; the result is sorted."""
    merged: list[list[int]] = []
    for start, end in sorted(list(interval) for interval in intervals):
        if merged and start <= merged[-1][1]:
            merged[-1][1] = max(merged[-1][1], end)
        else:
            merged.append([start, end])
    return merged


def sort_colors(nums: MutableSequence[int]) -> None:
    """Sort a list of 0s, 1s and 2s in place in a single pass."""
    if any(value not in (0, 1, 2) for value in nums):
        raise ValueError("sort_colors() accepts only the values 0, 1 and 2")
    low, mid, high = 0, 0, len(nums) - 1
    while mid <= high:
        value = nums[mid]
        if value == 0:
            nums[low], nums[mid] = nums[mid], nums[low]
            low += 1
            mid += 1
        elif value == 1:
            mid += 1
        else:
            nums[mid], nums[high] = nums[high], nums[mid]
            high -= 1


def merge_sorted(nums1: MutableSequence[int], m: int, nums2: Sequence[int], n: int) -> None:
    """Merge the first ``n`` of ``nums2`` into ``nums1`` (holding ``m`` values) in place."""
    i, j = m - 1, n - 1
    while i >= 0 and j >= 0:
        if nums1[i] >= nums2[j]:
            nums1[i + j + 1] = nums1[i]
            i -= 1
        else:
            nums1[i + j + 1] = nums2[j]
            j -= 1
    nums1[: j + 1] = nums2[: j + 1]


def max_profit(prices: Sequence[int]) -> int:
    """Best profit from one purchase followed by one later sale."""
    profit = 0
    lowest: int | None = None
    for price in prices:
        if lowest is None or price < lowest:
            lowest = price
        else:
            profit = max(profit, price - lowest)
    return profit


def can_complete_circuit(gas: Sequence[int], cost: Sequence[int]) -> int:
    """Starting station for a full circuit, or -1 when there is none."""
    start = 0
    surplus = 0
    total = 0
    for index, (fuel, needed) in enumerate(zip(gas, cost, strict=True)):
        total += fuel - needed
        surplus += fuel - needed
        if surplus < 0:
            surplus = 0
            start = index + 1
    return -1 if total < 0 else start


def single_number(nums: Sequence[int]) -> int:
    """The value that appears once when every other value appears twice."""
    if not nums:
        raise ValueError("single_number() needs at least one number")
    return reduce(xor, nums)


def max_product(nums: Sequence[int]) -> int:
    """Largest product of a non-empty contiguous run."""
    if not nums:
        raise ValueError("max_product() needs at least one number")
    low = high = 1
    best = nums[0]
    for num in nums:
        if num < 0:
            low, high = high, low
        high = max(high * num, num)
        low = min(low * num, num)
        best = max(best, high)
    return best


def min_subarray_len(target: int, nums: Sequence[int]) -> int:
    """Length of the shortest run whose sum reaches ``target``, or 0."""
    if target <= 0:
        raise ValueError("target must be positive")
    best: int | None = None
    left = 0
    window = 0
    for right, num in enumerate(nums):
        window += num
        while window >= target:
            length = right + 1 - left
            best = length if best is None else min(best, length)
            window -= nums[left]
            left += 1
    return best or 0


def find_duplicate(nums: Sequence[int]) -> int | None:
    """First value in ``nums`` that occurs more than once, or None."""
    counts = Counter(nums)
    return next((num for num in nums if counts[num] > 1), None)


def third_max(nums: Sequence[int]) -> int:
    """Third largest distinct value, or the largest when there are fewer than three."""
    if not nums:
        raise ValueError("third_max() needs at least one number")
    top = heapq.nlargest(3, set(nums))
    return top[2] if len(top) == 3 else top[0]


def can_place_flowers(flowerbed: Sequence[int], n: int) -> bool:
    """Whether ``n`` flowers fit in empty plots with no two adjacent."""
    zeros = 1
    plantable = 0
    for plot in flowerbed:
        if plot == 0:
            zeros += 1
        else:
            plantable += max(zeros - 1, 0) // 2
            zeros = 0
    return plantable + zeros // 2 >= n


def num_rescue_boats(people: Sequence[int], limit: int) -> int:
    """Fewest boats, each carrying at most two people and ``limit`` weight."""
    ordered = sorted(people)
    light, heavy = 0, len(ordered) - 1
    boats = 0
    while light <= heavy:
        if ordered[light] + ordered[heavy] <= limit:
            light += 1
        heavy -= 1
        boats += 1
    return boats


def validate_stack_sequences(pushed: Sequence[int], popped: Sequence[int]) -> bool:
    """Whether ``popped`` can result from pushing ``pushed`` onto a stack in order."""
    stack: list[int] = []
    next_pop = 0
    for value in pushed:
        stack.append(value)
        while stack and next_pop < len(popped) and stack[-1] == popped[next_pop]:
            stack.pop()
            next_pop += 1
    return not stack


def last_stone_weight(stones: Sequence[int]) -> int:
    """Weight of the stone left after repeatedly smashing the two heaviest, or 0."""
    heap = [-stone for stone in stones]
    heapq.heapify(heap)
    while len(heap) > 1:
        heaviest = -heapq.heappop(heap)
        second = -heapq.heappop(heap)
        if heaviest != second:
            heapq.heappush(heap, second - heaviest)
    return -heap[0] if heap else 0


def distance_between_bus_stops(distance: Sequence[int], start: int, destination: int) -> int:
    """Shortest distance between two stops on a circular route."""
    lo, hi = sorted((start, destination))
    forward = sum(distance[lo:hi])
    return min(forward, sum(distance) - forward)


def largest_altitude(gain: Sequence[int]) -> int:
    """Highest altitude reached when starting at 0 and applying each gain."""
    return max(accumulate(gain, initial=0))


def successful_pairs(spells: Sequence[int], potions: Sequence[int], success: int) -> list[int]:
    """For each spell, the number of potions whose product with it reaches ``success``."""
    ordered = sorted(potions)

    def count_for(spell: int) -> int:
        return len(ordered) - bisect_left(ordered, success, key=lambda potion: spell * potion)

    return [count_for(spell) for spell in spells]


def zero_filled_subarray(nums: Sequence[int]) -> int:
    """Number of contiguous runs consisting only of zeros."""
    runs = (sum(1 for _ in group) for value, group in groupby(nums) if value == 0)
    return sum(run * (run + 1) // 2 for run in runs)


def minimize_array_value(nums: Sequence[int]) -> int:
    """Smallest possible maximum after moving value leftwards between neighbours."""
    best = 0
    for count, total in enumerate(accumulate(nums), start=1):
        best = max(best, -(-total // count))
    return best