"""Central difference discretization."""

from .convection import CENTRAL_DIFFERENCES
from .convection import central
from .discretization import Discretization


class CentralDifferences(Discretization):
    """All terms with symmetric second-order stencils."""

    scheme = CENTRAL_DIFFERENCES
    alpha = 0.0

    def compute_du2_dx(self, i, j):
        self.u.require_interior(i, j)
        return central.du2_dx(self.u.data, i + 1, j + 1, self.dx)

    def compute_duv_dy(self, i, j):
        self.u.require_interior(i, j)
        return central.duv_dy(self.u.data, self.v.data, i + 1, j + 1, self.dy)

    def compute_duv_dx(self, i, j):
        self.v.require_interior(i, j)
        return central.duv_dx(self.u.data, self.v.data, i + 1, j + 1, self.dx)

    def compute_dv2_dy(self, i, j):
        self.v.require_interior(i, j)
        return central.dv2_dy(self.v.data, i + 1, j + 1, self.dy)
