"""Algorithm package entry points: both solvers share one call signature."""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

import robot_tour.algs.heuristics as heuristics
import robot_tour.algs.reference as reference
from robot_tour.algs.heuristics import nearest_neighbor_tour
from robot_tour.algs.problem import TourProblem
from robot_tour.algs.reference import permutation_tour
from robot_tour.algs.result import TourResult

TourAlgorithm = Callable[..., TourResult]

ALGORITHMS: Dict[str, TourAlgorithm] = {
    "heuristic": nearest_neighbor_tour,
    "permutation": permutation_tour,
}


def get_algorithm(name: str) -> TourAlgorithm:
    try:
        return ALGORITHMS[name]
    except KeyError:
        raise ValueError(
            f"Unknown tour algorithm: {name!r} (expected one of {sorted(ALGORITHMS)})"
        ) from None


def solve(
    problem: TourProblem,
    algorithm: str = "heuristic",
    debug: Optional[Dict[str, Any]] = None,
) -> TourResult:
    return get_algorithm(algorithm)(problem, debug=debug)


__all__ = [
    "ALGORITHMS",
    "TourAlgorithm",
    "get_algorithm",
    "solve",
    "nearest_neighbor_tour",
    "permutation_tour",
    "heuristics",
    "reference",
]
