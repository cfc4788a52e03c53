"""Array and matrix utilities: subarray sums, prefix sums, traversals and more."""

from __future__ import annotations

from collections import Counter
from collections.abc import Hashable, Iterable, Iterator, Sequence
from itertools import accumulate, combinations, pairwise
from typing import Any


def max_subarray_sum(values: Sequence[int]) -> int:
    """Kadane's scan seeded with the first element.

    A running sum that would go negative is reset to zero; the best value
    starts at ``values[0]``, so an all-negative input yields its first element.
    Raises ValueError on an empty sequence.
    """
    if not values:
        raise ValueError("max_subarray_sum() requires a non-empty sequence")
    current = best = values[0]
    for value in values[1:]:
        if current + value < 0:
            current = 0
        else:
            current += value
            best = max(best, current)
    return best


def kadane(values: Iterable[int]) -> int:
    """Largest subarray sum, counting the empty subarray (never negative)."""
    current = largest = 0
    for value in values:
        current = max(current + value, 0)
        largest = max(largest, current)
    return largest


def max_subarray_brute_force(values: Sequence[int]) -> int:
    """Largest sum over all non-empty contiguous subarrays, by exhaustive search.

    Raises ValueError on an empty sequence.
    """
    if not values:
        raise ValueError("max_subarray_brute_force() requires a non-empty sequence")
    return max(
        sum(values[start:end])
        for start in range(len(values))
        for end in range(start + 1, len(values) + 1)
    )


class PrefixSum:
    """Range-sum queries over a sequence, using 1-based inclusive bounds."""

    def __init__(self, values: Iterable[int]) -> None:
        self._prefix = [0, *accumulate(values)]

    def __len__(self) -> int:
        return len(self._prefix) - 1

    def query(self, left: int, right: int) -> int:
        """Sum of elements ``left`` through ``right`` (1-based, inclusive)."""
        if not 1 <= left <= right <= len(self):
            raise IndexError(f"invalid range [{left}, {right}] for length {len(self)}")
        return self._prefix[right] - self._prefix[left - 1]


class PrefixSum2D:
    """Rectangle-sum queries over a matrix, using 1-based inclusive bounds."""

    def __init__(self, matrix: Sequence[Sequence[int]]) -> None:
        self.rows = len(matrix)
        self.cols = len(matrix[0]) if matrix else 0
        if any(len(row) != self.cols for row in matrix):
            raise ValueError("matrix rows must all have the same length")
        self._prefix = [[0] * (self.cols + 1) for _ in range(self.rows + 1)]
        for i, row in enumerate(matrix, start=1):
            for j, value in enumerate(row, start=1):
                self._prefix[i][j] = (
                    value
                    + self._prefix[i - 1][j]
                    + self._prefix[i][j - 1]
                    - self._prefix[i - 1][j - 1]
                )

    def query(self, top: int, left: int, bottom: int, right: int) -> int:
        """Sum of the rectangle from (top, left) to (bottom, right), 1-based inclusive."""
        if not (1 <= top <= bottom <= self.rows and 1 <= left <= right <= self.cols):
            raise IndexError(
                f"invalid rectangle ({top}, {left})-({bottom}, {right}) "
                f"for a {self.rows}x{self.cols} matrix"
            )
        p = self._prefix
        return p[bottom][right] - p[top - 1][right] - p[bottom][left - 1] + p[top - 1][left - 1]


def spiral_order(matrix: Sequence[Sequence[Any]]) -> list[Any]:
    """Elements of ``matrix`` read clockwise from the outside in."""
    result: list[Any] = []
    if not matrix:
        return result
    start_row, end_row = 0, len(matrix) - 1
    start_col, end_col = 0, len(matrix[0]) - 1
    while start_row <= end_row and start_col <= end_col:
        result.extend(matrix[start_row][col] for col in range(start_col, end_col + 1))
        result.extend(matrix[row][end_col] for row in range(start_row + 1, end_row + 1))
        if start_row != end_row:
            result.extend(
                matrix[end_row][col] for col in range(end_col - 1, start_col - 1, -1)
            )
        if start_col != end_col:
            result.extend(
                matrix[row][start_col] for row in range(end_row - 1, start_row, -1)
            )
        start_row += 1
        start_col += 1
        end_row -= 1
        end_col -= 1
    return result


def all_pairs(values: Iterable[Any]) -> list[tuple[Any, Any]]:
    """Every pair ``(values[i], values[j])`` with ``i < j``, in index order."""
    return list(combinations(values, 2))


def subarrays(values: Sequence[Any]) -> Iterator[list[Any]]:
    """Yield every non-empty contiguous subarray, grouped by start index."""
    for start in range(len(values)):
        for end in range(start + 1, len(values) + 1):
            yield list(values[start:end])


def delete_value(values: Iterable[Any], value: Any) -> list[Any]:
    """Return a copy of ``values`` without the first occurrence of ``value``.

    Raises ValueError if ``value`` is not present.
    """
    items = list(values)
    try:
        items.remove(value)
    except ValueError:
        raise ValueError(f"{value!r} is not present") from None
    return items


def _shape(matrix: Sequence[Sequence[Any]]) -> tuple[int, int]:
    cols = len(matrix[0]) if matrix else 0
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return len(matrix), cols


def matrix_add(
    first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Element-wise sum of two matrices of the same shape."""
    if _shape(first) != _shape(second):
        raise ValueError("matrices must have the same shape")
    return [[a + b for a, b in zip(row_a, row_b)] for row_a, row_b in zip(first, second)]


def matrix_multiply(
    first: Sequence[Sequence[int]], second: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Matrix product of ``first`` (n x k) and ``second`` (k x m)."""
    _, inner = _shape(first)
    rows_second, _ = _shape(second)
    if inner != rows_second:
        raise ValueError("inner dimensions do not match")
    columns = list(zip(*second))
    return [[sum(a * b for a, b in zip(row, col)) for col in columns] for row in first]


def next_smaller_elements(values: Sequence[int]) -> list[int]:
    """For each element, the nearest strictly smaller element to its right, or -1."""
    result = [-1] * len(values)
    stack: list[int] = []
    for index in range(len(values) - 1, -1, -1):
        item = values[index]
        while stack and stack[-1] >= item:
            stack.pop()
        result[index] = stack[-1] if stack else -1
        stack.append(item)
    return result


def next_smaller_elements_brute_force(values: Sequence[int]) -> list[int]:
    """Quadratic version of :func:`next_smaller_elements`."""
    return [
        next((later for later in values[i + 1 :] if later < value), -1)
        for i, value in enumerate(values)
    ]


def previous_smaller_elements(values: Sequence[int]) -> list[int]:
    """For each element, the nearest strictly smaller element to its left, or -1."""
    result: list[int] = []
    stack: list[int] = []
    for item in values:
        while stack and stack[-1] >= item:
            stack.pop()
        result.append(stack[-1] if stack else -1)
        stack.append(item)
    return result


def is_strictly_increasing(values: Iterable[Any]) -> bool:
    """True if every element is greater than the one before it."""
    return all(b > a for a, b in pairwise(values))


def subsets(values: Sequence[Any]) -> list[list[Any]]:
    """All subsets, each element first excluded and then included."""
    result: list[list[Any]] = []
    chosen: list[Any] = []

    def _generate(index: int) -> None:
        if index == len(values):
            result.append(list(chosen))
            return
        _generate(index + 1)
        chosen.append(values[index])
        _generate(index + 1)
        chosen.pop()

    _generate(0)
    return result


def frequencies(values: Iterable[Hashable]) -> Counter:
    """Occurrence count of each value; missing values count as zero."""
    return Counter(values)


def sorted_frequencies(items: Iterable[Any]) -> list[tuple[Any, int]]:
    """Distinct items in sorted order, each paired with its count."""
    return sorted(Counter(items).items())