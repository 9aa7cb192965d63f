"""Searching exercises built around linear and binary search."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from decimal import Decimal


def linear_search(values: Sequence[int], target: int) -> bool:
    """Tell whether ``target`` occurs anywhere in ``values``."""
    return any(value == target for value in values)


def binary_search(values: Sequence[int], target: int) -> int | None:
    """Return an index of ``target`` in the sorted ``values``, or None."""
    start, end = 0, len(values) - 1
    while start <= end:
        middle = start + (end - start) // 2
        if values[middle] == target:
            return middle
        if values[middle] < target:
            start = middle + 1
        else:
            end = middle - 1
    return None


def binary_search_recursive(values: Sequence[int], key: int) -> int | None:
    """Return an index of ``key`` in the sorted ``values``, searching recursively."""

    def search(start: int, end: int) -> int | None:
        if start > end:
            return None
        middle = start + (end - start) // 2
        if values[middle] == key:
            return middle
        if values[middle] > key:
            return search(start, middle - 1)
        return search(middle + 1, end)

    return search(0, len(values) - 1)


def last_occurrence(values: Sequence[int], target: int) -> int | None:
    """Return the last index of ``target`` in the sorted ``values``, or None."""
    start, end = 0, len(values) - 1
    found: int | None = None
    while start <= end:
        middle = start + (end - start) // 2
        if values[middle] == target:
            found = middle
            start = middle + 1
        elif values[middle] > target:
            end = middle - 1
        else:
            start = middle + 1
    return found


def rotation_pivot(values: Sequence[int]) -> int:
    """Return the index where a rotated sorted array wraps round to its smallest value.

    An array that is not rotated at all yields its last index.
    """
    if not values:
        raise ValueError("pivot of an empty sequence")
    start, end = 0, len(values) - 1
    first = values[0]
    while start < end:
        middle = start + (end - start) // 2
        if values[middle] >= first:
            start = middle + 1
        else:
            end = middle
    return start


def peak_index_in_mountain(values: Sequence[int]) -> int:
    """Return the index of the peak of a strictly rising then falling array."""
    if not values:
        raise ValueError("peak of an empty sequence")
    start, end = 0, len(values) - 1
    while start < end:
        middle = start + (end - start) // 2
        if values[middle] < values[middle + 1]:
            start = middle + 1
        else:
            end = middle
    return start


def integer_sqrt(n: int) -> int:
    """Return the floor of the square root of a non-negative integer."""
    if n < 0:
        raise ValueError("square root of a negative number")
    start, end = 0, n
    answer = 0
    while start <= end:
        middle = start + (end - start) // 2
        square = middle * middle
        if square == n:
            return middle
        if square > n:
            end = middle - 1
        else:
            answer = middle
            start = middle + 1
    return answer


def sqrt_with_precision(n: int, precision: int) -> float:
    """Return the square root of ``n`` truncated to ``precision`` decimal places."""
    if precision < 0:
        raise ValueError("precision must be non-negative")
    answer = Decimal(integer_sqrt(n))
    target = Decimal(n)
    step = Decimal(1)
    for _ in range(precision):
        step /= 10
        candidate = answer
        while candidate * candidate < target:
            answer = candidate
            candidate += step
    return float(answer)


def matrix_median(matrix: Sequence[Sequence[int]]) -> int:
    """Return the median of a matrix whose rows are each sorted, with an odd cell count."""
    rows = [row for row in matrix if row]
    if not rows:
        raise ValueError("median of an empty matrix")
    start = min(row[0] for row in rows)
    end = max(row[-1] for row in rows)
    wanted = sum(len(row) for row in rows) // 2
    while start <= end:
        middle = start + (end - start) // 2
        at_most = sum(bisect_right(row, middle) for row in rows)
        if at_most > wanted:
            end = middle - 1
        else:
            start = middle + 1
    return start


def _can_place_cows(stalls: Sequence[int], cows: int, distance: int) -> bool:
    placed = 1
    position = stalls[0]
    for stall in stalls:
        if stall - position >= distance:
            placed += 1
            position = stall
            if placed == cows:
                return True
    return False


def aggressive_cows(stalls: Sequence[int], k: int) -> int:
    """Return the largest minimum distance at which ``k`` cows fit into ``stalls``."""
    if k < 2:
        raise ValueError("at least two cows are needed")
    if k > len(stalls):
        raise ValueError("more cows than stalls")
    ordered = sorted(stalls)
    start, end = 0, ordered[-1] - ordered[0]
    best = 0
    while start <= end:
        middle = start + (end - start) // 2
        if _can_place_cows(ordered, k, middle):
            best = middle
            start = middle + 1
        else:
            end = middle - 1
    return best


def _fits(items: Sequence[int], limit: int, groups: int) -> bool:
    used = 1
    load = 0
    for item in items:
        if load + item <= limit:
            load += item
        else:
            used += 1
            load = item
            if item > limit or used > groups:
                return False
    return True


def _min_largest_share(items: Sequence[int], groups: int) -> int:
    if groups < 1:
        raise ValueError("at least one student is needed")
    start, end = 0, sum(items)
    best = end
    while start <= end:
        middle = start + (end - start) // 2
        if _fits(items, middle, groups):
            best = middle
            end = middle - 1
        else:
            start = middle + 1
    return best


def allocate_books(pages: Sequence[int], students: int) -> int:
    """Return the smallest possible largest page load when books are shared
    out in order among ``students``."""
    return _min_largest_share(pages, students)


def min_test_time(times: Sequence[int], students: int) -> int:
    """Return the least time in which ``students`` can work through the
    chapters in order, each chapter taking its given time."""
    return _min_largest_share(times, students)