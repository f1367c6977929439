from __future__ import annotations

import itertools
import random
from typing import List, Sequence, Tuple

from hypothesis import strategies as st
from hypothesis.strategies import composite

from robot_tour.algs.geometry import tour_length
from robot_tour.algs.problem import TourProblem, build_problem
from robot_tour.algs.result import TourResult

__all__ = [
    "rng",
    "gen_instance",
    "tour_instances",
    "check_tour_valid",
    "oracle_min_tour_length",
]


# ---------------------------------------------------------------------------
#  Random generators
# ---------------------------------------------------------------------------
def rng(seed: int) -> random.Random:
    return random.Random(seed)


def gen_instance(
    rnd: random.Random,
    n: int,
    *,
    min_span: int = 8,
    max_span: int = 60,
) -> Tuple[int, int, int, List[int]]:
    """Return (lowest, highest, initial_point, points) with n unique points."""
    if n <= 0:
        raise ValueError("n must be positive")
    span = rnd.randint(max(min_span, n), max(max_span, n))
    lowest = rnd.randint(-span, span)
    highest = lowest + span
    points = rnd.sample(range(lowest, highest + 1), n)
    initial = rnd.choice(points) if rnd.random() < 0.5 else rnd.randint(lowest, highest)
    return lowest, highest, initial, points


@composite
def tour_instances(draw, max_points: int = 6) -> TourProblem:
    lowest = draw(st.integers(min_value=-40, max_value=40))
    span = draw(st.integers(min_value=1, max_value=50))
    highest = lowest + span
    values = st.integers(min_value=lowest, max_value=highest)
    points = draw(st.lists(values, min_size=0, max_size=max_points, unique=True))
    initial = draw(values)
    return build_problem(lowest, highest, initial, points)


# ---------------------------------------------------------------------------
#  Checks and oracles
# ---------------------------------------------------------------------------
def check_tour_valid(problem: TourProblem, result: TourResult) -> None:
    order = result.order
    if order[0] != problem.initial_point or order[-1] != problem.initial_point:
        raise AssertionError(f"Tour {order} does not start and end at {problem.initial_point}")
    if len(order) != len(problem.points) + 1:
        raise AssertionError(f"Tour {order} has wrong length for {problem.points}")
    if sorted(order[:-1]) != sorted(problem.points):
        raise AssertionError(f"Tour {order} does not visit every point exactly once")
    expected = tour_length(order, problem.lowest, problem.highest)
    if result.total_distance != expected:
        raise AssertionError(
            f"Reported distance {result.total_distance} != recomputed {expected}"
        )


def oracle_min_tour_length(problem: TourProblem) -> float:
    """Brute force over itertools.permutations, independent of the solver."""
    others: Sequence[float] = [p for p in problem.points if p != problem.initial_point]
    start = problem.initial_point
    best = None
    for perm in itertools.permutations(others):
        length = tour_length((start, *perm, start), problem.lowest, problem.highest)
        if best is None or length < best:
            best = length
    return best if best is not None else 0
