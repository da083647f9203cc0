"""Classic dynamic-programming algorithms."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import islice
from typing import Protocol, TypeVar


class _Comparable(Protocol):
    def __lt__(self, other: object, /) -> bool: ...

    def __gt__(self, other: object, /) -> bool: ...


C = TypeVar("C", bound=_Comparable)


def coin_change(denominations: Sequence[int], change: int) -> list[int]:
    """Return the fewest coins from ``denominations`` summing to ``change``.

    Coins are listed in the order they are taken back out of the table,
    starting from the full amount. Raises ValueError when the amount cannot
    be made or is negative.
    """
    if change < 0:
        raise ValueError("change must be non-negative")

    # Each entry holds (fewest coins, last coin used); None marks unreachable.
    counts: list[int | None] = [0] + [None] * change
    last_coin: list[int] = [0] * (change + 1)

    for amount in range(1, change + 1):
        best: int | None = None
        for coin in denominations:
            rest = amount - coin
            if rest < 0 or rest > amount:
                continue
            rest_count = counts[rest]
            if rest_count is None:
                continue
            if best is None or best > rest_count:
                best = rest_count
                last_coin[amount] = coin
        if best is not None and last_coin[amount] != 0:
            counts[amount] = best + 1

    if counts[change] is None:
        raise ValueError(f"amount {change} cannot be made from {list(denominations)}")

    picked: list[int] = []
    amount = change
    while amount > 0:
        coin = last_coin[amount]
        picked.append(coin)
        amount -= coin
    return picked


def coin_row(coins: Sequence[int]) -> tuple[list[int], int]:
    """Pick non-adjacent coins of maximum total value.

    Returns the picked coins in their original order and their total.
    """
    if not coins:
        raise ValueError("coin row must not be empty")

    values = [0, *coins]
    best = [0] * len(values)
    best[1] = values[1]
    for i in range(2, len(values)):
        best[i] = max(values[i] + best[i - 2], best[i - 1])
    total = best[-1]

    picked: list[int] = []
    i = len(best) - 1
    while i >= 1:
        if best[i] == best[i - 1]:
            i -= 1
        else:
            picked.append(values[i])
            i -= 2
    picked.reverse()
    return picked, total


def _check_fibonacci_index(n: int) -> None:
    if n < 0:
        raise ValueError("Fibonacci index must be non-negative")


def fibonacci_iterative(n: int) -> int:
    """Return the ``n``-th Fibonacci number, computed bottom-up."""
    _check_fibonacci_index(n)
    previous, current = 0, 1
    for _ in range(n):
        previous, current = current, previous + current
    return previous


def fibonacci_recursive(n: int) -> int:
    """Return the ``n``-th Fibonacci number, computed top-down with memoisation."""
    _check_fibonacci_index(n)
    memo: dict[int, int] = {0: 0, 1: 1}

    def fib(k: int) -> int:
        if k not in memo:
            memo[k] = fib(k - 1) + fib(k - 2)
        return memo[k]

    return fib(n)


def kadane(arr: Sequence[int]) -> int:
    """Return the maximum sum of a non-empty contiguous subarray."""
    if not arr:
        raise ValueError("array must not be empty")
    running = best = arr[0]
    for value in islice(arr, 1, None):
        running = max(running, 0) + value
        best = max(best, running)
    return best


def _check_knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> None:
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if capacity < 0:
        raise ValueError("capacity must be non-negative")


def bounded_knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Return the best value of a 0/1 knapsack where each item is used at most once."""
    _check_knapsack(weights, values, capacity)
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        previous = best.copy()
        for room in range(1, capacity + 1):
            if room - weight >= 0:
                best[room] = max(previous[room], value + previous[room - weight])
    return best[capacity]


def unbounded_knapsack(weights: Sequence[int], values: Sequence[int], capacity: int) -> int:
    """Return the best value of a knapsack where each item may be reused."""
    _check_knapsack(weights, values, capacity)
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(1, capacity + 1):
            if room - weight >= 0:
                best[room] = max(best[room], value + best[room - weight])
    return best[capacity]


def longest_increasing_subsequence(seq: Sequence[C]) -> list[C]:
    """Return a longest strictly increasing subsequence of ``seq``.

    Among chains of equal length, the one ending latest in ``seq`` wins.
    """
    if not seq:
        raise ValueError("sequence must not be empty")

    predecessor: list[int | None] = []
    length: list[int] = []
    end = 0
    for i, item in enumerate(seq):
        best: int | None = None
        for j, earlier in enumerate(islice(seq, i)):
            if item > earlier and (best is None or length[j] > length[best]):
                best = j
        predecessor.append(best)
        length.append(1 if best is None else length[best] + 1)
        if length[i] >= length[end]:
            end = i

    result: list[C] = []
    node: int | None = end
    while node is not None:
        result.append(seq[node])
        node = predecessor[node]
    result.reverse()
    return result