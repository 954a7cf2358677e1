"""Donor-cell (upwind) convective terms blended with central differences.

Each face flux is ``k * phi_donor`` where ``k`` is the transporting velocity
averaged to the face and ``phi_donor`` the transported quantity taken from
the upstream side of the face. The returned value is

    (1 - alpha) * central + alpha * donor_cell

so alpha = 0 reproduces central differences and alpha = 1 is pure upwind.
"""

from numba import njit

from .central import du2_dx as central_du2_dx
from .central import duv_dy as central_duv_dy
from .central import duv_dx as central_duv_dx
from .central import dv2_dy as central_dv2_dy


@njit(cache=True)
def _donor(k, phi_upstream_low, phi_upstream_high):
    # Transport towards +x/+y takes the lower-index neighbour.
    if k > 0.0:
        return k * phi_upstream_low
    return k * phi_upstream_high


@njit(cache=True)
def du2_dx(u, i, j, dx, alpha):
    """d(u^2)/dx at u(i, j)."""
    k_right = 0.5 * (u[i, j] + u[i + 1, j])
    k_left = 0.5 * (u[i - 1, j] + u[i, j])
    donor = (_donor(k_right, u[i, j], u[i + 1, j]) - _donor(k_left, u[i - 1, j], u[i, j])) / dx
    return (1.0 - alpha) * central_du2_dx(u, i, j, dx) + alpha * donor


@njit(cache=True)
def duv_dy(u, v, i, j, dy, alpha):
    """d(uv)/dy at u(i, j), transported by v."""
    k_top = 0.5 * (v[i, j] + v[i + 1, j])
    k_bottom = 0.5 * (v[i, j - 1] + v[i + 1, j - 1])
    donor = (_donor(k_top, u[i, j], u[i, j + 1]) - _donor(k_bottom, u[i, j - 1], u[i, j])) / dy
    return (1.0 - alpha) * central_duv_dy(u, v, i, j, dy) + alpha * donor


@njit(cache=True)
def duv_dx(u, v, i, j, dx, alpha):
    """d(uv)/dx at v(i, j), transported by u."""
    k_right = 0.5 * (u[i, j] + u[i, j + 1])
    k_left = 0.5 * (u[i - 1, j] + u[i - 1, j + 1])
    donor = (_donor(k_right, v[i, j], v[i + 1, j]) - _donor(k_left, v[i - 1, j], v[i, j])) / dx
    return (1.0 - alpha) * central_duv_dx(u, v, i, j, dx) + alpha * donor


@njit(cache=True)
def dv2_dy(v, i, j, dy, alpha):
    """d(v^2)/dy at v(i, j)."""
    k_top = 0.5 * (v[i, j] + v[i, j + 1])
    k_bottom = 0.5 * (v[i, j - 1] + v[i, j])
    donor = (_donor(k_top, v[i, j], v[i, j + 1]) - _donor(k_bottom, v[i, j - 1], v[i, j])) / dy
    return (1.0 - alpha) * central_dv2_dy(v, i, j, dy) + alpha * donor
