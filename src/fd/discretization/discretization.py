"""Abstract discretization operator on the staggered grid."""

from abc import ABC, abstractmethod

from meshing import StaggeredGrid

from .diffusion.central_diff import d2_dx2, d2_dy2
from .gradient.staggered_gradient import dp_dx, dp_dy


class Discretization(StaggeredGrid, ABC):
    """Staggered grid plus the derivative terms of the momentum equations.

    All ``compute_*`` methods take logical indices of the point where the
    term is evaluated (u location for the u-equation terms, v location for
    the v-equation terms), verify that it is an interior point and read the
    grid without modifying it.

    Subclasses set the ``scheme`` tag and implement the convective terms.
    Diffusion and pressure gradient are shared by all schemes.

    Parameters
    ----------
    n_cells : tuple of int
        Number of cells (nx, ny).
    mesh_width : tuple of float
        Mesh spacing (dx, dy).
    """

    scheme = None
    alpha = 0.0

    # ------------------------------------------------------------------
    # Diffusion
    # ------------------------------------------------------------------
    def compute_d2u_dx2(self, i, j):
        self.u.require_interior(i, j)
        return d2_dx2(self.u.data, i + 1, j + 1, self.dx)

    def compute_d2u_dy2(self, i, j):
        self.u.require_interior(i, j)
        return d2_dy2(self.u.data, i + 1, j + 1, self.dy)

    def compute_d2v_dx2(self, i, j):
        self.v.require_interior(i, j)
        return d2_dx2(self.v.data, i + 1, j + 1, self.dx)

    def compute_d2v_dy2(self, i, j):
        self.v.require_interior(i, j)
        return d2_dy2(self.v.data, i + 1, j + 1, self.dy)

    # ------------------------------------------------------------------
    # Pressure gradient
    # ------------------------------------------------------------------
    def compute_dp_dx(self, i, j):
        self.u.require_interior(i, j)
        return dp_dx(self.p.data, i + 1, j + 1, self.dx)

    def compute_dp_dy(self, i, j):
        self.v.require_interior(i, j)
        return dp_dy(self.p.data, i + 1, j + 1, self.dy)

    # ------------------------------------------------------------------
    # Convection
    # ------------------------------------------------------------------
    @abstractmethod
    def compute_du2_dx(self, i, j):
        """d(u^2)/dx at u(i, j)."""

    @abstractmethod
    def compute_duv_dy(self, i, j):
        """d(uv)/dy at u(i, j)."""

    @abstractmethod
    def compute_duv_dx(self, i, j):
        """d(uv)/dx at v(i, j)."""

    @abstractmethod
    def compute_dv2_dy(self, i, j):
        """d(v^2)/dy at v(i, j)."""
