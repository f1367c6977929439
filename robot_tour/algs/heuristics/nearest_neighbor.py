"""Nearest-neighbor heuristic for the circular robot tour.

From the initial point, walk to the nearest unvisited point and repeat until
none remain, then return to the start. Runs in O(n^2) time and is *not*
optimal: with bounds [-21, 11], start 0 and points {-21, -5, -1, 0, 1, 3, 11}
it hops left and right across the board instead of sweeping once around it.
"""

from __future__ import annotations

from math import inf
from time import perf_counter
from typing import Any, Dict, List, Optional

from robot_tour.algs.geometry import log
from robot_tour.algs.problem import Node, TourProblem
from robot_tour.algs.result import TourResult

__all__ = ["nearest_neighbor_tour"]

NAME = "NearestNeighborHeuristic"


def _nearest_unvisited(nodes: List[Node], current: Node, problem: TourProblem) -> Optional[Node]:
    """Return the closest unvisited node; ties go to the lowest value."""
    best: Optional[Node] = None
    best_distance = inf
    for node in nodes:
        if node.visited:
            continue
        node.distance = problem.distance(current.value, node.value)
        if node.distance < best_distance:
            best_distance = node.distance
            best = node
    return best


def nearest_neighbor_tour(
    problem: TourProblem,
    *,
    debug: Optional[Dict[str, Any]] = None,
) -> TourResult:
    t0 = perf_counter()

    nodes = problem.nodes()
    start = nodes[problem.initial_index]
    start.mark_visited()

    order = [start.value]
    total = 0.0
    evaluations = 0
    current = start

    while True:
        evaluations += sum(1 for node in nodes if not node.visited)
        nearest = _nearest_unvisited(nodes, current, problem)
        if nearest is None:
            break
        nearest.mark_visited()
        order.append(nearest.value)
        total += nearest.distance
        log(f"NN: {current.value} -> {nearest.value} (+{nearest.distance})")
        current = nearest

    total += problem.distance(current.value, start.value)
    order.append(start.value)

    elapsed_ms = (perf_counter() - t0) * 1000.0

    if debug is not None:
        debug.clear()
        debug.update(
            {
                "steps": len(order) - 1,
                "distance_evaluations": evaluations,
            }
        )

    return TourResult(
        algorithm=NAME,
        order=tuple(order),
        total_distance=total,
        elapsed_ms=elapsed_ms,
    )
