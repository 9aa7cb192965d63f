"""Classic array exercises: searching, rotating, de-duplicating and summing."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from heapq import merge
from itertools import combinations, groupby
from operator import xor


def find_in_grid(grid: Sequence[Sequence[int]], target: int) -> tuple[int, int] | None:
    """Return the (row, column) of the first cell equal to ``target``, or None."""
    for i, row in enumerate(grid):
        for j, value in enumerate(row):
            if value == target:
                return i, j
    return None


def row_sums(grid: Iterable[Iterable[int]]) -> list[int]:
    """Return the sum of every row of a two-dimensional grid."""
    return [sum(row) for row in grid]


def find_mode(values: Iterable[int]) -> int:
    """Return the most frequent value; ties go to the value seen first."""
    counts = Counter(values)
    if not counts:
        raise ValueError("mode of an empty sequence")
    return counts.most_common(1)[0][0]


def missing_number(values: Iterable[int], n: int) -> int:
    """Return the smallest number in 1..n that is absent from ``values``."""
    ordered = sorted(values)
    for expected in range(1, n + 1):
        if expected > len(ordered) or ordered[expected - 1] != expected:
            return expected
    raise ValueError(f"no number in 1..{n} is missing")


def rotate_right(values: Sequence[int], k: int) -> list[int]:
    """Return ``values`` rotated ``k`` places to the right."""
    n = len(values)
    if n == 0:
        return []
    result = [0] * n
    for i, value in enumerate(values):
        result[(i + k) % n] = value
    return result


def rotate_left(values: Sequence[int], d: int) -> list[int]:
    """Return ``values`` rotated ``d`` places to the left, by three reversals."""
    n = len(values)
    if n == 0:
        return []
    d %= n
    return list(reversed(list(reversed(values[:d])) + list(reversed(values[d:]))))


def is_sorted_rotated(nums: Sequence[int]) -> bool:
    """Tell whether ``nums`` is a non-decreasing array rotated some number of times."""
    if not nums:
        return True
    drops = sum(1 for prev, cur in zip(nums, nums[1:]) if prev > cur)
    if nums[-1] > nums[0]:
        drops += 1
    return drops <= 1


def find_triplets(values: Sequence[int], target: int) -> list[list[int]]:
    """Return the distinct sorted triplets of ``values`` that add up to ``target``."""
    found: list[list[int]] = []
    for triple in combinations(values, 3):
        if sum(triple) == target:
            candidate = sorted(triple)
            if candidate not in found:
                found.append(candidate)
    return found


def find_duplicate(values: Sequence[int]) -> int:
    """Return the repeated value of an array holding 1..n-1 plus one duplicate."""
    return reduce(xor, values, 0) ^ reduce(xor, range(len(values)), 0)


def pivot_index(nums: Sequence[int]) -> int | None:
    """Return the first index whose left and right sums are equal, or None."""
    total = sum(nums)
    left = 0
    for i, value in enumerate(nums):
        if total - left - value == left:
            return i
        left += value
    return None


def array_max(values: Iterable[int]) -> int:
    """Return the largest value; raises ValueError when empty."""
    return max(values)


def array_min(values: Iterable[int]) -> int:
    """Return the smallest value; raises ValueError when empty."""
    return min(values)


def array_sum(values: Iterable[int]) -> int:
    """Return the sum of all values."""
    return sum(values)


def remove_duplicates(values: Iterable[int]) -> list[int]:
    """Return a sorted sequence with consecutive duplicates collapsed."""
    return [key for key, _ in groupby(values)]


def reverse_array(values: Iterable[int]) -> list[int]:
    """Return the values in reverse order."""
    return list(values)[::-1]


def subarray_with_sum(values: Sequence[int], target: int) -> tuple[int, int] | None:
    """Return 1-based inclusive bounds of the first window of non-negative
    values summing to ``target``, or None if there is none."""
    start = 0
    current = 0
    for end, value in enumerate(values):
        current += value
        while current > target and start <= end:
            current -= values[start]
            start += 1
        if current == target and start <= end:
            return start + 1, end + 1
    return None


def swap_alternate(values: Sequence[int]) -> list[int]:
    """Return ``values`` with each pair of neighbours (0,1), (2,3), ... swapped."""
    result = list(values)
    result[0:len(result) - 1:2], result[1::2] = result[1::2], result[0:len(result) - 1:2]
    return result


def merge_sorted(nums1: Sequence[int], m: int, nums2: Sequence[int], n: int) -> list[int]:
    """Merge the first ``m`` items of ``nums1`` with the first ``n`` of ``nums2``."""
    if m < 0 or n < 0 or m > len(nums1) or n > len(nums2):
        raise ValueError("m and n must fit within the given sequences")
    return list(merge(nums1[:m], nums2[:n]))


def zero_filled_subarrays(nums: Iterable[int]) -> int:
    """Return how many contiguous subarrays consist only of zeros."""
    total = 0
    for key, run in groupby(nums):
        if key == 0:
            length = sum(1 for _ in run)
            total += length * (length + 1) // 2
    return total