"""Sorting algorithms, each returning a new sorted list."""

from __future__ import annotations

from collections.abc import Iterable


def sort_012(values: Iterable[int]) -> list[int]:
    """Sort a sequence made only of 0, 1 and 2 in one pass (Dutch flag)."""
    items = list(values)
    if any(value not in (0, 1, 2) for value in items):
        raise ValueError("values must be 0, 1 or 2")
    low, mid, high = 0, 0, len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items


def bubble_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted by bubble sort."""
    items = list(values)
    for size in range(len(items), 1, -1):
        for i in range(size - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
    return items


def selection_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted by selection sort."""
    items = list(values)
    for start in range(len(items) - 1):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        items[start], items[smallest] = items[smallest], items[start]
    return items


def _merge_count(left: list[int], right: list[int]) -> tuple[list[int], int]:
    merged: list[int] = []
    inversions = 0
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
            inversions += len(left) - i
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged, inversions


def _sort_count(items: list[int]) -> tuple[list[int], int]:
    if len(items) <= 1:
        return items, 0
    middle = (len(items) - 1) // 2 + 1
    left, left_count = _sort_count(items[:middle])
    right, right_count = _sort_count(items[middle:])
    merged, split_count = _merge_count(left, right)
    return merged, left_count + right_count + split_count


def merge_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted by merge sort."""
    return _sort_count(list(values))[0]


def count_inversions(values: Iterable[int]) -> int:
    """Return the number of pairs i < j with values[i] > values[j]."""
    return _sort_count(list(values))[1]


def _partition(items: list[int], start: int, end: int) -> int:
    pivot = items[start]
    position = start + sum(1 for value in items[start + 1:end + 1] if value <= pivot)
    items[start], items[position] = items[position], items[start]
    i, j = start, end
    while i < position and j > position:
        while i < position and items[i] <= pivot:
            i += 1
        while j > position and items[j] > pivot:
            j -= 1
        if i < position and j > position:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    return position


def quick_sort(values: Iterable[int]) -> list[int]:
    """Return the values sorted by quicksort with the first element as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        start, end = pending.pop()
        if start >= end:
            continue
        pivot = _partition(items, start, end)
        pending.append((start, pivot - 1))
        pending.append((pivot + 1, end))
    return items