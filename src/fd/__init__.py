"""Finite difference package for the staggered (MAC) grid.

This package contains the discretizations, the iterative pressure solvers
and the kernels of the projection time step.
"""

from .discretization import CentralDifferences, DonorCell, Discretization
from .linear_solvers import GaussSeidel, SOR, PressureSolver, PressureSolverResult, create_pressure_solver

__all__ = [
    "Discretization",
    "CentralDifferences",
    "DonorCell",
    "PressureSolver",
    "PressureSolverResult",
    "GaussSeidel",
    "SOR",
    "create_pressure_solver",
]
