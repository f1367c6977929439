"""Fast, approximate tour constructors."""

from __future__ import annotations

from robot_tour.algs.heuristics.nearest_neighbor import nearest_neighbor_tour

__all__ = ["nearest_neighbor_tour"]
