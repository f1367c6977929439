from __future__ import annotations

import os
import random
from typing import Dict

import numpy as np

DEFAULT_SEED: int = 1337

RNG_SEEDS: Dict[str, int] = {
    "tests": DEFAULT_SEED,
    "bench": 4242,
}

# Exhaustive search stays interactive up to roughly this many points to visit.
PERMUTATION_PRACTICAL_LIMIT: int = 10


def seed_everywhere(seed: int) -> None:
    """Seed all supported RNG backends deterministically."""
    random.seed(seed)
    os.environ["PYTHONHASHSEED"] = str(seed)
    np.random.seed(seed)


__all__ = [
    "DEFAULT_SEED",
    "RNG_SEEDS",
    "PERMUTATION_PRACTICAL_LIMIT",
    "seed_everywhere",
]
