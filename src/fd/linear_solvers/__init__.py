"""Iterative solvers for the pressure Poisson equation."""

from datastructures.config import ConfigurationError, PRESSURE_SOLVERS

from .base import PressureSolver, PressureSolverResult
from .gauss_seidel import GaussSeidel
from .sor import SOR


def create_pressure_solver(name, epsilon, maximum_number_of_iterations, omega=1.0, compatible_rhs=True):
    """Build the pressure solver selected by name ('SOR' or 'GaussSeidel')."""
    if name == "SOR":
        return SOR(epsilon, maximum_number_of_iterations, omega, compatible_rhs=compatible_rhs)
    if name == "GaussSeidel":
        return GaussSeidel(epsilon, maximum_number_of_iterations, compatible_rhs=compatible_rhs)
    raise ConfigurationError(f"Unknown pressure solver '{name}', expected one of {PRESSURE_SOLVERS}")


__all__ = [
    "PressureSolver",
    "PressureSolverResult",
    "GaussSeidel",
    "SOR",
    "create_pressure_solver",
]
