"""Successive over-relaxation pressure solver."""

from .base import PressureSolver
from .relaxation import sor_sweep


class SOR(PressureSolver):
    """Gauss-Seidel sweep blended with the previous value by ``omega``.

    Parameters
    ----------
    epsilon : float
        Residual tolerance.
    maximum_number_of_iterations : int
        Sweep budget.
    omega : float
        Relaxation factor in (0, 2). omega = 1 is Gauss-Seidel.
    compatible_rhs : bool, optional
        See :class:`PressureSolver`.
    """

    name = "SOR"

    def __init__(self, epsilon, maximum_number_of_iterations, omega, compatible_rhs=True):
        super().__init__(epsilon, maximum_number_of_iterations, compatible_rhs=compatible_rhs)
        if not 0.0 < omega < 2.0:
            raise ValueError(f"SOR diverges for omega outside (0, 2), got {omega}")
        self.omega = float(omega)

    def sweep(self, p, rhs, dx, dy, rhs_shift):
        sor_sweep(p, rhs, dx, dy, rhs_shift, self.omega)
