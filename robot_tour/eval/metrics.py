"""Evaluation metrics comparing the heuristic against the exact search."""

from __future__ import annotations

from typing import Any, Dict, Iterable, Sequence

import numpy as np

from robot_tour.algs import nearest_neighbor_tour, permutation_tour
from robot_tour.algs.problem import TourProblem

__all__ = [
    "optimality_gap",
    "gap_summary",
    "compare_algorithms",
    "summarize_comparisons",
]


def optimality_gap(heuristic_distance: float, optimal_distance: float) -> float:
    """Relative excess of the heuristic tour over the optimum."""
    if optimal_distance <= 0.0:
        return 0.0
    return (heuristic_distance - optimal_distance) / optimal_distance


def gap_summary(gaps: Sequence[float]) -> dict[str, float]:
    if not gaps:
        return {"count": 0.0}
    arr = np.array(gaps, dtype=float)
    return {
        "count": float(arr.size),
        "mean": float(arr.mean()),
        "p50": float(np.percentile(arr, 50)),
        "p95": float(np.percentile(arr, 95)),
        "max": float(arr.max()),
        "suboptimal_share": float(np.mean(arr > 0.0)),
    }


def compare_algorithms(problem: TourProblem) -> Dict[str, Any]:
    """Run both solvers on ``problem`` and report distances, gap and timings."""
    heuristic = nearest_neighbor_tour(problem)
    exact = permutation_tour(problem)
    return {
        "points": len(problem.points),
        "heuristic_distance": heuristic.total_distance,
        "optimal_distance": exact.total_distance,
        "gap": optimality_gap(heuristic.total_distance, exact.total_distance),
        "heuristic_ms": heuristic.elapsed_ms,
        "permutation_ms": exact.elapsed_ms,
    }


def summarize_comparisons(rows: Iterable[Dict[str, Any]]) -> Dict[str, Any]:
    rows = list(rows)
    summary: Dict[str, Any] = {"gap": gap_summary([row["gap"] for row in rows])}
    if rows:
        summary["heuristic_ms_mean"] = float(np.mean([row["heuristic_ms"] for row in rows]))
        summary["permutation_ms_mean"] = float(np.mean([row["permutation_ms"] for row in rows]))
    return summary
