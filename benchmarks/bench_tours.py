from __future__ import annotations

import argparse
import math
import random
import statistics
from typing import List, Sequence, Tuple

from robot_tour.algs.problem import TourProblem, build_problem
from robot_tour.common.constants import RNG_SEEDS
from robot_tour.eval.metrics import compare_algorithms, gap_summary


def percentile(sorted_values: Sequence[float], pct: float) -> float:
    if not sorted_values:
        return float("nan")
    if pct <= 0:
        return sorted_values[0]
    if pct >= 1:
        return sorted_values[-1]
    idx = (len(sorted_values) - 1) * pct
    lo = math.floor(idx)
    hi = math.ceil(idx)
    if lo == hi:
        return sorted_values[int(idx)]
    weight = idx - lo
    return sorted_values[lo] * (1.0 - weight) + sorted_values[hi] * weight


def generate_instance(rng: random.Random, *, n: int, span: int) -> TourProblem:
    lowest = rng.randint(-span, 0)
    highest = lowest + span
    points = rng.sample(range(lowest, highest + 1), n)
    initial = rng.choice(points)
    return build_problem(lowest, highest, initial, points)


def timing_line(label: str, durations: List[float]) -> str:
    durations = sorted(durations)
    mean = statistics.fmean(durations) if durations else float("nan")
    median = statistics.median(durations) if durations else float("nan")
    return (
        f"{label}: mean={mean:.3f}ms,median={median:.3f}ms,"
        f"p90={percentile(durations, 0.9):.3f}ms,max={durations[-1] if durations else float('nan'):.3f}ms"
    )


def run_benchmark(args: argparse.Namespace) -> None:
    rng = random.Random(args.seed)
    greedy_ms: List[float] = []
    exact_ms: List[float] = []
    gaps: List[float] = []

    for iteration in range(args.warmup + args.runs):
        problem = generate_instance(rng, n=args.n, span=args.span)
        row = compare_algorithms(problem)
        if iteration < args.warmup:
            continue
        greedy_ms.append(row["heuristic_ms"])
        exact_ms.append(row["permutation_ms"])
        gaps.append(row["gap"])

    print(timing_line("heuristic", greedy_ms))
    print(timing_line("permutation", exact_ms))
    summary = gap_summary(gaps)
    print(",".join(f"gap_{key}={value:.4f}" for key, value in summary.items()))


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Benchmark nearest-neighbor vs permutation tours")
    parser.add_argument("--n", type=int, default=7, help="Points per instance (including start)")
    parser.add_argument("--span", type=int, default=40, help="highest - lowest")
    parser.add_argument("--runs", type=int, default=50)
    parser.add_argument("--warmup", type=int, default=3)
    parser.add_argument("--seed", type=int, default=RNG_SEEDS["bench"])
    args = parser.parse_args(argv)
    if args.n > args.span + 1:
        parser.error("--n cannot exceed the number of points in the domain")
    return args


def _main(argv: Tuple[str, ...] | None = None) -> None:
    run_benchmark(parse_args(argv))


if __name__ == "__main__":
    _main()
