"""Classic comparison sorts and helpers for sorted sequences."""

from __future__ import annotations

import bisect
from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using bubble sort with a shrinking pass."""
    items = list(values)
    size = len(items)
    for done in range(size - 1):
        for j in range(size - done - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def bubble_sort_flagged(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using bubble sort that stops once a pass makes no swap."""
    items = list(values)
    swapped = True
    while swapped:
        swapped = False
        for j in range(len(items) - 1):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
                swapped = True
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using insertion sort."""
    items = list(values)
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and key < items[j]:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key
    return items


def merge(left: Sequence[Any], right: Sequence[Any]) -> list[Any]:
    """Merge two sorted sequences into one sorted list, taking from the left on ties."""
    merged: list[Any] = []
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


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using top-down merge sort."""
    items = list(values)
    if len(items) < 2:
        return items
    middle = (len(items) - 1) // 2 + 1
    return merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def partition(values: MutableSequence[Any], low: int, high: int) -> int:
    """Partition ``values[low:high + 1]`` around its last element, in place.

    Returns the final index of the pivot.
    """
    pivot = values[high]
    boundary = low - 1
    for j in range(low, high):
        if values[j] < pivot:
            boundary += 1
            values[j], values[boundary] = values[boundary], values[j]
    values[boundary + 1], values[high] = values[high], values[boundary + 1]
    return boundary + 1


def _quick_sort(items: list[Any], low: int, high: int) -> None:
    while low < high:
        pivot_index = partition(items, low, high)
        # Recurse into the smaller side to bound the stack depth.
        if pivot_index - low < high - pivot_index:
            _quick_sort(items, low, pivot_index - 1)
            low = pivot_index + 1
        else:
            _quick_sort(items, pivot_index + 1, high)
            high = pivot_index - 1


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using quicksort with a last-element pivot."""
    items = list(values)
    _quick_sort(items, 0, len(items) - 1)
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Return a sorted copy using selection sort."""
    items = list(values)
    size = len(items)
    for i in range(size - 1):
        smallest = i
        for j in range(i + 1, size):
            if items[j] < items[smallest]:
                smallest = j
        items[i], items[smallest] = items[smallest], items[i]
    return items


def insert_sorted(values: MutableSequence[Any], element: Any) -> int:
    """Insert ``element`` into the sorted list ``values`` after any equal items.

    Returns the index at which it was placed.
    """
    index = bisect.bisect_right(values, element)
    values.insert(index, element)
    return index


def format_values(values: Iterable[Any]) -> str:
    """Render values as ``[a] [b] ...`` with a trailing space after each."""
    return "".join(f"[{value}] " for value in values)