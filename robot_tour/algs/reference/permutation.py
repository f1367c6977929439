"""Exhaustive permutation search – the exact reference solver.

Every ordering of the points to visit is enumerated and the shortest closed
tour is kept, so the answer is guaranteed optimal. The price is O(n!) branches
(each closed and scored in O(n)), which stops being practical at around ten
points.
"""

from __future__ import annotations

from dataclasses import dataclass
from math import inf
from time import perf_counter
from typing import Any, Dict, Iterator, Optional, Tuple

from robot_tour.algs.geometry import log
from robot_tour.algs.problem import TourProblem
from robot_tour.algs.result import TourResult
from robot_tour.common.constants import PERMUTATION_PRACTICAL_LIMIT

__all__ = ["Path", "enumerate_paths", "permutation_tour"]

NAME = "NearestNeighborPermutation"


# ---------------------------------------------------------------------------
#  Path value
# ---------------------------------------------------------------------------
@dataclass(frozen=True, slots=True)
class Path:
    """Ordered visit sequence with its accumulated circular distance.

    ``total_distance`` is the sum over consecutive pairs only; the closing
    edge counts once the start point is appended explicitly.
    """

    values: Tuple[float, ...] = ()
    total_distance: float = 0

    def extended(self, value: float, problem: TourProblem) -> "Path":
        step = problem.distance(self.values[-1], value) if self.values else 0
        return Path(self.values + (value,), self.total_distance + step)


# ---------------------------------------------------------------------------
#  Enumeration
# ---------------------------------------------------------------------------
def _permute(
    problem: TourProblem,
    visited: int,
    full: int,
    path: Path,
    stats: Dict[str, int],
) -> Iterator[Path]:
    if visited == full:
        yield path
        return
    for idx, value in enumerate(problem.points):
        bit = 1 << idx
        if visited & bit:
            continue
        stats["branches"] += 1
        # Each branch gets its own mask and path value; siblings never see it.
        yield from _permute(problem, visited | bit, full, path.extended(value, problem), stats)


def enumerate_paths(
    problem: TourProblem,
    stats: Optional[Dict[str, int]] = None,
) -> Iterator[Path]:
    """Yield every open path from the start point, in generation order.

    Points are tried in ascending value order at every depth, so the
    sequence is deterministic for a given problem.
    """
    if stats is None:
        stats = {}
    stats.setdefault("branches", 0)
    start = problem.initial_index
    full = (1 << len(problem.points)) - 1
    root = Path().extended(problem.initial_point, problem)
    return _permute(problem, 1 << start, full, root, stats)


def permutation_tour(
    problem: TourProblem,
    *,
    debug: Optional[Dict[str, Any]] = None,
) -> TourResult:
    t0 = perf_counter()

    n = len(problem.points) - 1
    if n > PERMUTATION_PRACTICAL_LIMIT:
        log(f"Permutation: {n} points to order, expect a long run")

    stats: Dict[str, int] = {"branches": 0}
    best: Optional[Path] = None
    best_distance = inf
    candidates = 0

    for path in enumerate_paths(problem, stats):
        closed = path.extended(problem.initial_point, problem)
        candidates += 1
        # Strict comparison keeps the earliest generated tour among ties.
        if closed.total_distance < best_distance:
            best_distance = closed.total_distance
            best = closed

    if best is None:
        raise RuntimeError("Permutation search produced no candidate tour")

    log(f"Permutation: {candidates} candidates, best distance {best_distance}")

    elapsed_ms = (perf_counter() - t0) * 1000.0

    if debug is not None:
        debug.clear()
        debug.update(
            {
                "candidate_count": candidates,
                "branches": stats["branches"],
                "best_distance": best_distance,
            }
        )

    return TourResult(
        algorithm=NAME,
        order=best.values,
        total_distance=best.total_distance,
        elapsed_ms=elapsed_ms,
    )
