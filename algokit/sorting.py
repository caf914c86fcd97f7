"""Classic comparison sorts. Each returns a new list and leaves its input alone."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Any


def bubble_sort(items: Iterable[Any]) -> list:
    """Sort by repeatedly swapping adjacent elements that are out of order."""
    result = list(items)
    n = len(result)
    for done in range(n - 1):
        for j in range(n - done - 1):
            if result[j] > result[j + 1]:
                result[j], result[j + 1] = result[j + 1], result[j]
    return result


def insertion_sort(items: Iterable[Any]) -> list:
    """Sort by inserting each element into the sorted prefix before it."""
    result: list = []
    for element in items:
        position = len(result)
        while position > 0 and result[position - 1] > element:
            position -= 1
        result.insert(position, element)
    return result


def merge(left: Iterable[Any], right: Iterable[Any]) -> list:
    """Merge two sorted sequences; ties take the element from ``left`` first."""
    left, right = list(left), list(right)
    merged = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(items: Iterable[Any]) -> list:
    """Stable top-down merge sort."""
    result = list(items)
    if len(result) <= 1:
        return result
    middle = (len(result) + 1) // 2
    return merge(merge_sort(result[:middle]), merge_sort(result[middle:]))


def partition(items: MutableSequence, low: int, high: int) -> int:
    """Lomuto partition of ``items[low:high + 1]`` in place around ``items[high]``.

    Returns the final index of the pivot.
    """
    pivot = items[high]
    boundary = low - 1
    for j in range(low, high):
        if items[j] <= pivot:
            boundary += 1
            items[boundary], items[j] = items[j], items[boundary]
    items[boundary + 1], items[high] = items[high], items[boundary + 1]
    return boundary + 1


def quick_sort(items: Iterable[Any]) -> list:
    """Quicksort using the last element of each range as pivot."""
    result = list(items)
    pending = [(0, len(result) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            pivot = partition(result, low, high)
            pending.append((pivot + 1, high))
            pending.append((low, pivot - 1))
    return result


def selection_sort(items: Iterable[Any]) -> list:
    """Sort by moving the smallest remaining element to the front."""
    result = list(items)
    n = len(result)
    for i in range(n - 1):
        smallest = min(range(i, n), key=result.__getitem__)
        result[i], result[smallest] = result[smallest], result[i]
    return result