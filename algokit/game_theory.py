"""Sprague-Grundy values for subtraction games such as Nim."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


def _mex(values: Iterable[int]) -> int:
    """Return the smallest non-negative integer missing from ``values``."""
    seen = set(values)
    mex = 0
    while mex in seen:
        mex += 1
    return mex


def grundy_numbers(n: int, moves: Sequence[int]) -> list[int]:
    """Return the Grundy numbers of piles holding 0 to ``n`` stones.

    A move removes one of the amounts in ``moves`` from a pile. A pile with
    no legal move is terminal and has Grundy number 0; every other pile has
    the minimum excludant of the Grundy numbers of the piles it can reach.
    """
    if n < 0:
        raise ValueError("pile size must be non-negative")
    if any(move <= 0 for move in moves):
        raise ValueError("every move must remove at least one stone")

    numbers: list[int] = []
    for stones in range(n + 1):
        reachable = (numbers[stones - move] for move in moves if stones - move >= 0)
        numbers.append(_mex(reachable))
    return numbers