"""Dynamic-programming classics: 0/1 knapsack and rod cutting."""

from __future__ import annotations

from collections.abc import Sequence


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Best total value of items whose total weight fits within ``capacity``.

    Each item is taken at most once. Raises ValueError if the sequences differ
    in length or a weight or the capacity is negative.
    """
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0 or any(weight < 0 for weight in weights):
        raise ValueError("capacity and weights must be non-negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def rod_cut_memo(prices: Sequence[int]) -> int:
    """Best revenue from cutting a rod of length ``len(prices)``, top-down.

    ``prices[i]`` is the price of a piece of length ``i + 1``.
    """
    memo: dict[int, int] = {}

    def _best(length: int) -> int:
        if length <= 0:
            return 0
        if length not in memo:
            memo[length] = max(
                _best(length - cut) + prices[cut - 1] for cut in range(1, length + 1)
            )
        return memo[length]

    return _best(len(prices))


def rod_cut(prices: Sequence[int]) -> int:
    """Best revenue from cutting a rod of length ``len(prices)``, bottom-up."""
    best = [0] * (len(prices) + 1)
    for length in range(1, len(prices) + 1):
        best[length] = max(
            best[length - cut] + prices[cut - 1] for cut in range(1, length + 1)
        )
    return best[len(prices)]