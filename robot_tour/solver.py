"""Caller-facing facade around one problem and one algorithm.

Input errors are captured at construction time and reported through
``has_error`` / ``error_message`` instead of being raised, so a driver can
check the flag before asking for a solution.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from robot_tour.algs import get_algorithm
from robot_tour.algs.problem import TourInputError, TourProblem, build_problem
from robot_tour.algs.result import TourResult

__all__ = ["TourSolver"]


class TourSolver:
    """Solve a tour problem at most once and serve the cached answer."""

    def __init__(
        self,
        lowest: float,
        highest: float,
        initial_point: float,
        points_to_visit: Iterable[float],
        algorithm: str = "heuristic",
    ) -> None:
        self.algorithm = algorithm
        self._solve = get_algorithm(algorithm)

        self.problem: Optional[TourProblem] = None
        self.error: Optional[TourInputError] = None
        try:
            self.problem = build_problem(lowest, highest, initial_point, points_to_visit)
        except TourInputError as exc:
            self.error = exc

        self.debug: Dict[str, Any] = {}
        self.solve_count: int = 0
        self._result: Optional[TourResult] = None

    # ---- error reporting ----

    @property
    def has_error(self) -> bool:
        return self.error is not None

    @property
    def error_message(self) -> str:
        return str(self.error) if self.error is not None else ""

    # ---- solution ----

    def result(self) -> TourResult:
        if self.problem is None:
            raise RuntimeError(
                f"Cannot solve an invalid tour problem: {self.error_message}"
            )
        if self._result is None:
            self._result = self._solve(self.problem, debug=self.debug)
            self.solve_count += 1
        return self._result

    def solution(self) -> str:
        return self.result().render()

    def execution_time_ms(self) -> float:
        """Wall-clock duration of the solve, or 0.0 if it has not run yet."""
        return self._result.elapsed_ms if self._result is not None else 0.0

    def input_parameters(self) -> str:
        if self.problem is None:
            return f"Invalid input: {self.error_message}"
        return self.problem.describe()

    def __repr__(self) -> str:
        state = "error" if self.has_error else ("solved" if self._result else "pending")
        return f"TourSolver(algorithm={self.algorithm!r}, state={state})"
