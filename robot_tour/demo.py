from __future__ import annotations

import argparse
import json
from typing import Iterable, List

import robot_tour.algs.geometry as geometry
from robot_tour.solver import TourSolver

PRESETS = {
    "board": {
        "lowest": -21,
        "highest": 11,
        "initial": 0,
        "points": [-21, -11, -6, -5, -1, 0, 1, 5, 7, 11],
    },
    "hopscotch": {
        "lowest": -21,
        "highest": 11,
        "initial": 0,
        "points": [-21, -5, -1, 0, 1, 3, 11],
    },
    "small": {
        "lowest": 1,
        "highest": 8,
        "initial": 1,
        "points": [3, 5, 7],
    },
}


def parse_points(point_string: str) -> List[int]:
    data = json.loads(point_string)
    if not isinstance(data, list):
        raise ValueError("points must be a JSON list, e.g. [1, 5, -3]")
    return [int(entry) for entry in data]


def run(lowest: int, highest: int, initial: int, points: List[int]) -> int:
    solvers = [
        TourSolver(lowest, highest, initial, points, algorithm="heuristic"),
        TourSolver(lowest, highest, initial, points, algorithm="permutation"),
    ]

    # Both solvers validate the same input, so one error check is enough.
    if solvers[0].has_error:
        print(solvers[0].error_message)
        print()
        return 1

    print(solvers[0].input_parameters())
    print()
    for solver in solvers:
        print(f"The {solver.algorithm} algorithm returned the following path:")
        print(solver.solution())
        print(f"Total Distance: {solver.result().total_distance}")
        print(f"Execution Time: {solver.execution_time_ms():.3f}ms")
        print()
    return 0


def main(argv: Iterable[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Robot tour optimization on a circular board")
    parser.add_argument("--preset", choices=PRESETS.keys(), default="board")
    parser.add_argument("--lowest", type=int, help="Override the lowest point")
    parser.add_argument("--highest", type=int, help="Override the highest point")
    parser.add_argument("--initial", type=int, help="Override the initial point")
    parser.add_argument("--points", type=str, help="JSON list of points to visit")
    parser.add_argument("--verbose", action="store_true", help="Print solver progress")
    args = parser.parse_args(list(argv) if argv is not None else None)

    geometry.VERBOSE = args.verbose

    preset = dict(PRESETS[args.preset])
    if args.points:
        preset["points"] = parse_points(args.points)
    for key in ("lowest", "highest", "initial"):
        value = getattr(args, key)
        if value is not None:
            preset[key] = value

    return run(preset["lowest"], preset["highest"], preset["initial"], preset["points"])


if __name__ == "__main__":
    raise SystemExit(main())
