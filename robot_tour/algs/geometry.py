"""
Distance helpers for the circular domain shared by all algorithms.
"""

from __future__ import annotations

from typing import Sequence

VERBOSE: bool = False


def log(*args, **kwargs) -> None:  # pragma: no cover
    if VERBOSE:
        print(*args, **kwargs)


def domain_size(lowest: float, highest: float) -> float:
    """Number of unit steps needed to walk once around [lowest, highest]."""
    return highest - lowest + 1


def circular_distance(a: float, b: float, lowest: float, highest: float) -> float:
    """Return the shorter of the two directional distances between a and b.

    Moving one step past ``highest`` lands on ``lowest``, so with bounds
    [-21, 11] the points -21 and 11 are a single step apart.
    """
    direct = abs(a - b)
    return min(direct, domain_size(lowest, highest) - direct)


def tour_length(order: Sequence[float], lowest: float, highest: float) -> float:
    """Sum of circular distances between consecutive entries of ``order``.

    No closing edge is added; a closed tour already repeats its first point.
    """
    return sum(
        circular_distance(a, b, lowest, highest) for a, b in zip(order, order[1:])
    )


__all__ = [
    "VERBOSE",
    "log",
    "domain_size",
    "circular_distance",
    "tour_length",
]
