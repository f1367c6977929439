from __future__ import annotations

import pytest

from robot_tour import ALGORITHMS, TourSolver, get_algorithm, solve
from robot_tour.algs.problem import DuplicatePoint, InvalidBounds, build_problem


@pytest.mark.parametrize("algorithm", ["heuristic", "permutation"])
def test_solver_solution_is_closed_tour(algorithm: str, hopscotch: dict) -> None:
    solver = TourSolver(**hopscotch, algorithm=algorithm)
    assert not solver.has_error
    assert solver.error_message == ""
    values = [int(v) for v in solver.solution().split()]
    assert values[0] == values[-1] == 0
    assert sorted(values[:-1]) == sorted(set(hopscotch["points_to_visit"]) | {0})
    assert len(values) == 8


def test_solver_heuristic_solution_string(hopscotch: dict) -> None:
    solver = TourSolver(**hopscotch)
    assert solver.solution() == "0 -1 1 3 -5 -21 11 0"


@pytest.mark.parametrize("algorithm", ["heuristic", "permutation"])
def test_solver_is_idempotent(algorithm: str, hopscotch: dict) -> None:
    solver = TourSolver(**hopscotch, algorithm=algorithm)
    assert solver.solve_count == 0
    assert solver.execution_time_ms() == 0.0
    first = solver.solution()
    elapsed = solver.execution_time_ms()
    second = solver.solution()
    assert first == second
    assert solver.solve_count == 1
    assert solver.execution_time_ms() == elapsed
    assert solver.result() is solver.result()


def test_solvers_do_not_share_state(hopscotch: dict) -> None:
    greedy = TourSolver(**hopscotch, algorithm="heuristic")
    exact = TourSolver(**hopscotch, algorithm="permutation")
    greedy_before = greedy.solution()
    exact.solution()
    assert greedy.solution() == greedy_before
    assert exact.result().total_distance < greedy.result().total_distance


@pytest.mark.parametrize(
    "args,error",
    [
        ((5, 2, 3, [3]), InvalidBounds),
        ((0, 10, 0, [1, 1, 2]), DuplicatePoint),
    ],
)
def test_solver_captures_input_errors(args, error) -> None:
    solver = TourSolver(*args, algorithm="permutation")
    assert solver.has_error
    assert isinstance(solver.error, error)
    assert solver.error_message == str(solver.error)
    assert "Invalid input" in solver.input_parameters()
    with pytest.raises(RuntimeError):
        solver.solution()
    assert solver.solve_count == 0


@pytest.mark.parametrize(
    "args,fragment",
    [
        ((5, 2, 3, [3]), "lowest point must be less than highest point"),
        ((0, 10, 100, [1]), "initial point must be within bounds"),
        ((0, 10, 0, [1, 1, 2]), "duplicate points found"),
        ((0, 10, 0, [1, 20]), "point outside bounds"),
    ],
)
def test_solver_error_message_wording(args, fragment: str) -> None:
    assert fragment in TourSolver(*args).error_message


def test_solver_handles_integers_beyond_float_range() -> None:
    huge = 10**400
    solver = TourSolver(0, huge, 5, [1, 2], algorithm="permutation")
    assert not solver.has_error
    assert solver.solution() == "5 1 2 5"
    assert solver.result().total_distance == 8

    invalid = TourSolver(0, 10, 5, [1, huge])
    assert invalid.has_error
    assert "point outside bounds" in invalid.error_message


def test_solver_input_parameters(hopscotch: dict) -> None:
    text = TourSolver(**hopscotch).input_parameters()
    assert "Initial Point: 0" in text
    assert "-21 -5 -1 0 1 3 11" in text


def test_solver_unknown_algorithm() -> None:
    with pytest.raises(ValueError) as exc_info:
        TourSolver(0, 10, 0, [1], algorithm="annealing")
    assert "unknown tour algorithm" in str(exc_info.value).lower()


def test_solver_debug_populated_after_solve(hopscotch: dict) -> None:
    solver = TourSolver(**hopscotch, algorithm="permutation")
    assert solver.debug == {}
    solver.solution()
    assert solver.debug["candidate_count"] == 720


def test_registry_functions_share_contract() -> None:
    problem = build_problem(0, 10, 0, [2, 5, 9])
    assert set(ALGORITHMS) == {"heuristic", "permutation"}
    for name in ALGORITHMS:
        result = solve(problem, name)
        assert result.order[0] == result.order[-1] == 0
        assert get_algorithm(name) is ALGORITHMS[name]
