"""Greatest common divisors."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce


def gcd(m: int, n: int) -> int:
    """Return the non-negative greatest common divisor of ``m`` and ``n`` (Euclid)."""
    while n != 0:
        m, n = n, m % n
    return abs(m)


def gcd_list(values: Iterable[int]) -> int:
    """Return the greatest common divisor of a non-empty collection of integers."""
    items = list(values)
    if not items:
        raise ValueError("gcd of an empty collection is undefined")
    return reduce(gcd, items, items[0])