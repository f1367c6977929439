"""Exact reference solvers for the circular robot tour."""

from __future__ import annotations

from robot_tour.algs.reference.permutation import Path, enumerate_paths, permutation_tour

__all__ = ["Path", "enumerate_paths", "permutation_tour"]
