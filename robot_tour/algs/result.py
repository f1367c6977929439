from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

__all__ = ["TourResult"]


@dataclass(frozen=True, slots=True)
class TourResult:
    """Closed tour produced by a solver together with its cost and timing."""

    algorithm: str
    order: Tuple[float, ...]
    total_distance: float
    elapsed_ms: float = 0.0

    def __post_init__(self) -> None:
        object.__setattr__(self, "order", tuple(self.order))
        if len(self.order) < 2 or self.order[0] != self.order[-1]:
            raise ValueError("a tour must start and end at the same point")

    @property
    def interior(self) -> Tuple[float, ...]:
        """Visited points between the departure and the final return."""
        return self.order[1:-1]

    def render(self) -> str:
        return " ".join(str(value) for value in self.order)

    def __str__(self) -> str:
        return self.render()
