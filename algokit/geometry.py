"""Lattice-polygon geometry."""

from __future__ import annotations


def picks_theorem(internal_points: int, border_points: int) -> int:
    """Return the area of a lattice polygon by Pick's theorem.

    The area is ``I + B / 2 - 1``; the half of the border count is
    truncated to an integer.
    """
    if internal_points < 0 or border_points < 0:
        raise ValueError("point counts must be non-negative")
    return internal_points + border_points // 2 - 1