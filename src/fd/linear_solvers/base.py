"""Iterative pressure solver interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from loguru import logger

from .relaxation import interior_mean, rms_residual, set_pressure_boundary


@dataclass
class PressureSolverResult:
    """Outcome of one pressure solve.

    Parameters
    ----------
    iterations : int
        Number of sweeps performed.
    residual : float
        RMS residual after the last sweep.
    converged : bool
        True if the residual reached the tolerance before the iteration cap.
    """
    iterations: int
    residual: float
    converged: bool


class PressureSolver(ABC):
    """Relaxation solver for Laplace(p) = rhs with homogeneous Neumann boundaries.

    The solver does not own a grid. ``solve`` borrows one for the duration
    of the call and updates its pressure field in place.

    Parameters
    ----------
    epsilon : float
        Tolerance on the RMS residual over the interior cells.
    maximum_number_of_iterations : int
        Sweep budget. Running out of it is reported, not raised.
    compatible_rhs : bool, optional
        Solve against rhs minus its interior mean. A pure Neumann problem has
        a solution only for zero-mean rhs; without the shift the residual is
        bounded below by |mean(rhs)|. Default is True.
    """

    name = None

    def __init__(self, epsilon, maximum_number_of_iterations, compatible_rhs=True):
        if epsilon <= 0:
            raise ValueError(f"epsilon must be positive, got {epsilon}")
        if maximum_number_of_iterations < 0:
            raise ValueError(f"Iteration cap must not be negative, got {maximum_number_of_iterations}")
        self.epsilon = float(epsilon)
        self.maximum_number_of_iterations = int(maximum_number_of_iterations)
        self.compatible_rhs = compatible_rhs

    @abstractmethod
    def sweep(self, p, rhs, dx, dy, rhs_shift):
        """Update the interior of the pressure storage array once, in place."""

    def residual(self, grid):
        """RMS residual of the current pressure field, ghost layer refreshed first."""
        p = grid.p.data
        rhs = grid.rhs.data
        rhs_shift = interior_mean(rhs) if self.compatible_rhs else 0.0
        set_pressure_boundary(p)
        return float(rms_residual(p, rhs, grid.dx, grid.dy, rhs_shift))

    def solve(self, grid):
        """Relax the pressure of ``grid`` until the residual meets epsilon or the budget is spent.

        Parameters
        ----------
        grid : StaggeredGrid
            Grid whose ``p`` is updated and whose ``rhs`` is read.

        Returns
        -------
        PressureSolverResult
        """
        p = grid.p.data
        rhs = grid.rhs.data
        dx, dy = grid.dx, grid.dy
        rhs_shift = interior_mean(rhs) if self.compatible_rhs else 0.0

        iterations = 0
        set_pressure_boundary(p)
        residual = rms_residual(p, rhs, dx, dy, rhs_shift)

        while residual > self.epsilon and iterations < self.maximum_number_of_iterations:
            self.sweep(p, rhs, dx, dy, rhs_shift)
            iterations += 1
            set_pressure_boundary(p)
            residual = rms_residual(p, rhs, dx, dy, rhs_shift)

        converged = residual <= self.epsilon
        if not converged:
            logger.warning(
                f"{self.name} did not converge: residual {residual:.3e} > {self.epsilon:.1e} "
                f"after {iterations} iterations"
            )
        return PressureSolverResult(iterations=iterations, residual=float(residual), converged=converged)
