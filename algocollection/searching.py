"""Linear and binary searches over sequences.

Searches return the index of the match, or -1 when there is none.
"""

from __future__ import annotations

from collections.abc import Sequence
from itertools import pairwise
from typing import Any


def binary_search(values: Sequence[Any], target: Any) -> int:
    """Return an index of ``target`` in the sorted ``values``, or -1."""
    low, high = 0, len(values) - 1
    while low <= high:
        mid = low + (high - low) // 2
        if values[mid] == target:
            return mid
        if values[mid] > target:
            high = mid - 1
        else:
            low = mid + 1
    return -1


def checked_binary_search(values: Sequence[Any], target: Any) -> int:
    """Binary search that first verifies ``values`` is sorted.

    Raises ValueError if ``values`` is not in non-decreasing order.
    """
    if any(a > b for a, b in pairwise(values)):
        raise ValueError("given sequence is not sorted")
    return binary_search(values, target)


def first_occurrence(values: Sequence[Any], target: Any) -> int:
    """Return the lowest index of ``target`` in the sorted ``values``, or -1."""
    low, high = 0, len(values) - 1
    found = -1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            found = mid
            high = mid - 1
        elif target > values[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return found


def last_occurrence(values: Sequence[Any], target: Any) -> int:
    """Return the highest index of ``target`` in the sorted ``values``, or -1."""
    low, high = 0, len(values) - 1
    found = -1
    while low <= high:
        mid = (low + high) // 2
        if values[mid] == target:
            found = mid
            low = mid + 1
        elif target > values[mid]:
            low = mid + 1
        else:
            high = mid - 1
    return found


def linear_search(values: Sequence[Any], target: Any) -> int:
    """Return the first index of ``target`` scanning left to right, or -1."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return -1


def first_and_last(values: Sequence[Any], target: Any) -> tuple[int, int] | None:
    """Return ``(first, last)`` indices of ``target`` in any sequence, or None."""
    first = last = -1
    for index, value in enumerate(values):
        if value != target:
            continue
        if first == -1:
            first = index
        last = index
    if first == -1:
        return None
    return first, last