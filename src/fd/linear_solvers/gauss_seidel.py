"""Gauss-Seidel pressure solver."""

from .base import PressureSolver
from .relaxation import gauss_seidel_sweep


class GaussSeidel(PressureSolver):
    """Lexicographic in-place Gauss-Seidel relaxation."""

    name = "GaussSeidel"

    def sweep(self, p, rhs, dx, dy, rhs_shift):
        gauss_seidel_sweep(p, rhs, dx, dy, rhs_shift)
