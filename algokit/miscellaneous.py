"""Subset enumeration, Gray codes and the fractional knapsack."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")


def subsets(items: Sequence[T]) -> list[list[T]]:
    """Return every subset of ``items``.

    Subsets come in binary counting order: bit ``i`` of the counter selects
    ``items[i]``, so the empty subset is first and the full set is last.
    """
    return [
        [item for bit, item in enumerate(items) if mask >> bit & 1]
        for mask in range(1 << len(items))
    ]


def gray_code(n: int) -> list[str]:
    """Return the ``n``-bit reflected binary Gray code as strings of digits."""
    if n < 1:
        raise ValueError("a Gray code needs at least one bit")
    codes = ["0", "1"]
    for _ in range(n - 1):
        codes = ["0" + code for code in codes] + ["1" + code for code in reversed(codes)]
    return codes


def fractional_knapsack(
    weights: Sequence[float], values: Sequence[float], capacity: float
) -> float:
    """Return the best value when items may be taken in fractions.

    Items are taken greedily by value per unit of weight; the first item that
    does not fit strictly below the remaining capacity is taken in part.
    """
    items = sorted(
        zip(weights, values, strict=True),
        key=lambda item: item[1] / item[0] if item[0] else math.inf,
        reverse=True,
    )

    total = 0.0
    for weight, value in items:
        if weight < capacity:
            total += value
            capacity -= weight
        else:
            if weight:
                total += capacity / weight * value
            break
    return total