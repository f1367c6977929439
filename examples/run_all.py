#!/usr/bin/env python3
"""examples/run_all.py – smoke-test for both tour algorithms.

Run this file directly, or execute `python -m examples.run_all` from the project
root. It prints small, illustrative outputs for:

  1. Nearest-neighbor heuristic
  2. Exhaustive permutation search
  3. A side-by-side comparison on the zig-zag instance
"""

from __future__ import annotations

from typing import Any, Dict

import robot_tour.algs.geometry as geometry
from robot_tour.algs.heuristics import nearest_neighbor_tour
from robot_tour.algs.problem import build_problem
from robot_tour.algs.reference import permutation_tour
from robot_tour.eval.metrics import compare_algorithms

# Activate verbose internal logging so the user can see the algorithmic traces.
geometry.VERBOSE = True

SEP = "=" * 80

ZIGZAG = dict(lowest=-21, highest=11, initial_point=0, points_to_visit=[-21, -5, -1, 0, 1, 3, 11])


def _hdr(title: str) -> None:
    print(f"\n{SEP}\n{title}\n{SEP}\n")

# ---------------------------------------------------------------------------
# 1. Nearest neighbor
# ---------------------------------------------------------------------------

def run_heuristic_example() -> None:
    _hdr("Nearest-Neighbor Heuristic")
    problem = build_problem(1, 8, 1, [3, 5, 8])
    print(problem.describe(), "\n")

    debug: Dict[str, Any] = {}
    result = nearest_neighbor_tour(problem, debug=debug)
    print(f"Tour                     : {result}")
    print(f"Total distance           : {result.total_distance}")
    print(f"Distance evaluations     : {debug['distance_evaluations']}")
    print(f"Elapsed: {result.elapsed_ms:.3f} ms")

# ---------------------------------------------------------------------------
# 2. Permutation search
# ---------------------------------------------------------------------------

def run_permutation_example() -> None:
    _hdr("Exhaustive Permutation Search")
    problem = build_problem(1, 8, 1, [3, 5, 8])
    print(problem.describe(), "\n")

    debug: Dict[str, Any] = {}
    result = permutation_tour(problem, debug=debug)
    print(f"Tour                     : {result}")
    print(f"Total distance           : {result.total_distance}")
    print(f"Candidate tours          : {debug['candidate_count']}")
    print(f"Elapsed: {result.elapsed_ms:.3f} ms")

# ---------------------------------------------------------------------------
# 3. Comparison
# ---------------------------------------------------------------------------

def run_comparison_example() -> None:
    _hdr("Heuristic vs. Optimum on the zig-zag instance")
    geometry.VERBOSE = False
    row = compare_algorithms(build_problem(**ZIGZAG))
    for key, value in row.items():
        print(f"{key:<25}: {value}")

# ---------------------------------------------------------------------------
# Main entry
# ---------------------------------------------------------------------------

def main() -> None:
    run_heuristic_example()
    run_permutation_example()
    run_comparison_example()


if __name__ == "__main__":
    main()
