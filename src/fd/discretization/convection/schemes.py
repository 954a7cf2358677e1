"""Scheme tags and dispatch of the convective terms.

Discretizations are a closed set tagged by an integer so the bulk numba
kernels can branch per cell without calling back into Python objects.
"""

from numba import njit

from . import central, upwind

CENTRAL_DIFFERENCES = 0
DONOR_CELL = 1

SCHEME_NAMES = {
    CENTRAL_DIFFERENCES: "CentralDifferences",
    DONOR_CELL: "DonorCell",
}

_central_du2_dx = central.du2_dx
_central_duv_dy = central.duv_dy
_central_duv_dx = central.duv_dx
_central_dv2_dy = central.dv2_dy
_upwind_du2_dx = upwind.du2_dx
_upwind_duv_dy = upwind.duv_dy
_upwind_duv_dx = upwind.duv_dx
_upwind_dv2_dy = upwind.dv2_dy


@njit(cache=True)
def convection_u(u, v, i, j, dx, dy, scheme, alpha):
    """d(u^2)/dx + d(uv)/dy at u(i, j) for the tagged scheme."""
    if scheme == DONOR_CELL:
        return _upwind_du2_dx(u, i, j, dx, alpha) + _upwind_duv_dy(u, v, i, j, dy, alpha)
    return _central_du2_dx(u, i, j, dx) + _central_duv_dy(u, v, i, j, dy)


@njit(cache=True)
def convection_v(u, v, i, j, dx, dy, scheme, alpha):
    """d(uv)/dx + d(v^2)/dy at v(i, j) for the tagged scheme."""
    if scheme == DONOR_CELL:
        return _upwind_duv_dx(u, v, i, j, dx, alpha) + _upwind_dv2_dy(v, i, j, dy, alpha)
    return _central_duv_dx(u, v, i, j, dx) + _central_dv2_dy(v, i, j, dy)
