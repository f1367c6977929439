"""Input validation and the shared problem definition for both tour solvers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Tuple

from robot_tour.algs.geometry import circular_distance, domain_size

__all__ = [
    "Visit",
    "Node",
    "TourProblem",
    "TourInputError",
    "InvalidBounds",
    "InitialPointOutOfBounds",
    "DuplicatePoint",
    "PointOutOfBounds",
    "build_problem",
]


# ---------------------------------------------------------------------------
#  Error taxonomy
# ---------------------------------------------------------------------------
class TourInputError(ValueError):
    """Base class for every structural input problem."""


class InvalidBounds(TourInputError):
    pass


class InitialPointOutOfBounds(TourInputError):
    pass


class DuplicatePoint(TourInputError):
    pass


class PointOutOfBounds(TourInputError):
    pass


# ---------------------------------------------------------------------------
#  Node model
# ---------------------------------------------------------------------------
class Visit(Enum):
    UNVISITED = "U"
    VISITED = "V"


class Node:
    """A point on the board plus the bookkeeping an algorithm needs.

    Two nodes compare equal when their values match, whatever their
    visitation state or scratch distance.
    """

    __slots__ = ("value", "visit", "distance")

    def __init__(self, value: float, visit: Visit = Visit.UNVISITED) -> None:
        self.value = value
        self.visit = visit
        self.distance: float = 0

    @property
    def visited(self) -> bool:
        return self.visit is Visit.VISITED

    def mark_visited(self) -> None:
        self.visit = Visit.VISITED

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Node):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    def __repr__(self) -> str:
        return f"Node({self.value!r}, {self.visit.value})"


# ---------------------------------------------------------------------------
#  Problem definition
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class TourProblem:
    """Bounds, start point and the ascending tuple of points to visit.

    ``points`` always contains ``initial_point``. Instances are immutable;
    algorithms take private :class:`Node` copies through :meth:`nodes`.
    """

    lowest: float
    highest: float
    initial_point: float
    points: Tuple[float, ...]

    @property
    def domain_size(self) -> float:
        return domain_size(self.lowest, self.highest)

    @property
    def initial_index(self) -> int:
        return self.points.index(self.initial_point)

    def distance(self, a: float, b: float) -> float:
        return circular_distance(a, b, self.lowest, self.highest)

    def nodes(self) -> List[Node]:
        """Fresh, unvisited nodes in canonical (ascending) order."""
        return [Node(value) for value in self.points]

    def describe(self) -> str:
        return "\n".join(
            [
                f"Lowest Point: {self.lowest}",
                f"Highest Point: {self.highest}",
                f"Initial Point: {self.initial_point}",
                "Points To Visit: ",
                " ".join(str(p) for p in self.points),
            ]
        )


def _is_finite(value: float) -> bool:
    # ints are exact at any size; only floats can be inf or nan.
    return not isinstance(value, float) or math.isfinite(value)


def _in_bounds(value: float, lowest: float, highest: float) -> bool:
    return _is_finite(value) and lowest <= value <= highest


def build_problem(
    lowest: float,
    highest: float,
    initial_point: float,
    points_to_visit: Iterable[float],
) -> TourProblem:
    """Validate raw input and return the canonical :class:`TourProblem`.

    Checks run in a fixed order and the first failure is raised.
    """
    points = list(points_to_visit)

    if not (_is_finite(lowest) and _is_finite(highest)) or lowest >= highest:
        raise InvalidBounds(
            f"Invalid bounds: lowest point must be less than highest point "
            f"(got lowest={lowest}, highest={highest})."
        )

    if not _in_bounds(initial_point, lowest, highest):
        raise InitialPointOutOfBounds(
            f"Out of bounds: initial point must be within bounds [{lowest}, {highest}] "
            f"(got {initial_point})."
        )

    seen = set()
    for point in points:
        if point in seen:
            raise DuplicatePoint(f"Invalid points: duplicate points found in the set: {point}.")
        seen.add(point)

    for point in points:
        if not _in_bounds(point, lowest, highest):
            raise PointOutOfBounds(
                f"Some point outside bounds [{lowest}, {highest}]: {point}."
            )

    seen.add(initial_point)
    return TourProblem(
        lowest=lowest,
        highest=highest,
        initial_point=initial_point,
        points=tuple(sorted(seen)),
    )
