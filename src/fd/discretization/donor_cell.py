"""Donor-cell discretization."""

from .convection import DONOR_CELL
from .convection import upwind
from .discretization import Discretization


class DonorCell(Discretization):
    """Convective terms blended between donor-cell and central differences.

    Parameters
    ----------
    n_cells : tuple of int
        Number of cells (nx, ny).
    mesh_width : tuple of float
        Mesh spacing (dx, dy).
    alpha : float
        Upwind weight in [0, 1]. 0 gives central differences, 1 pure
        donor-cell.
    """

    scheme = DONOR_CELL

    def __init__(self, n_cells, mesh_width, alpha):
        super().__init__(n_cells, mesh_width)
        if not 0.0 <= alpha <= 1.0:
            raise ValueError(f"Donor-cell weight alpha must lie in [0, 1], got {alpha}")
        self.alpha = float(alpha)

    def compute_du2_dx(self, i, j):
        self.u.require_interior(i, j)
        return upwind.du2_dx(self.u.data, i + 1, j + 1, self.dx, self.alpha)

    def compute_duv_dy(self, i, j):
        self.u.require_interior(i, j)
        return upwind.duv_dy(self.u.data, self.v.data, i + 1, j + 1, self.dy, self.alpha)

    def compute_duv_dx(self, i, j):
        self.v.require_interior(i, j)
        return upwind.duv_dx(self.u.data, self.v.data, i + 1, j + 1, self.dx, self.alpha)

    def compute_dv2_dy(self, i, j):
        self.v.require_interior(i, j)
        return upwind.dv2_dy(self.v.data, i + 1, j + 1, self.dy, self.alpha)
