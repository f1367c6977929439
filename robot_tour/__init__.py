# Geometry & problem model
from .algs.geometry import circular_distance, domain_size, tour_length
from .algs.problem import (
    DuplicatePoint,
    InitialPointOutOfBounds,
    InvalidBounds,
    Node,
    PointOutOfBounds,
    TourInputError,
    TourProblem,
    Visit,
    build_problem,
)
from .algs.result import TourResult

# Solvers
from .algs import ALGORITHMS, get_algorithm, solve
from .algs.heuristics import nearest_neighbor_tour
from .algs.reference import permutation_tour
from .solver import TourSolver

from .common.constants import (
    DEFAULT_SEED,
    PERMUTATION_PRACTICAL_LIMIT,
    RNG_SEEDS,
    seed_everywhere,
)

__all__ = [
    # geometry
    "circular_distance",
    "domain_size",
    "tour_length",
    # problem
    "Node",
    "Visit",
    "TourProblem",
    "build_problem",
    "TourInputError",
    "InvalidBounds",
    "InitialPointOutOfBounds",
    "DuplicatePoint",
    "PointOutOfBounds",
    # solvers
    "TourResult",
    "ALGORITHMS",
    "get_algorithm",
    "solve",
    "nearest_neighbor_tour",
    "permutation_tour",
    "TourSolver",
    # config
    "DEFAULT_SEED",
    "PERMUTATION_PRACTICAL_LIMIT",
    "RNG_SEEDS",
    "seed_everywhere",
]
