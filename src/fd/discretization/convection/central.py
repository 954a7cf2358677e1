"""Central difference approximation of the convective terms.

Velocities are averaged to the faces of the control volume around the
staggered point, so the products are formed from two-point means.
"""

from numba import njit


@njit(cache=True)
def du2_dx(u, i, j, dx):
    """d(u^2)/dx at u(i, j)."""
    u_right = 0.5 * (u[i, j] + u[i + 1, j])
    u_left = 0.5 * (u[i - 1, j] + u[i, j])
    return (u_right * u_right - u_left * u_left) / dx


@njit(cache=True)
def duv_dy(u, v, i, j, dy):
    """d(uv)/dy at u(i, j)."""
    v_top = 0.5 * (v[i, j] + v[i + 1, j])
    v_bottom = 0.5 * (v[i, j - 1] + v[i + 1, j - 1])
    u_top = 0.5 * (u[i, j] + u[i, j + 1])
    u_bottom = 0.5 * (u[i, j - 1] + u[i, j])
    return (v_top * u_top - v_bottom * u_bottom) / dy


@njit(cache=True)
def duv_dx(u, v, i, j, dx):
    """d(uv)/dx at v(i, j)."""
    u_right = 0.5 * (u[i, j] + u[i, j + 1])
    u_left = 0.5 * (u[i - 1, j] + u[i - 1, j + 1])
    v_right = 0.5 * (v[i, j] + v[i + 1, j])
    v_left = 0.5 * (v[i - 1, j] + v[i, j])
    return (u_right * v_right - u_left * v_left) / dx


@njit(cache=True)
def dv2_dy(v, i, j, dy):
    """d(v^2)/dy at v(i, j)."""
    v_top = 0.5 * (v[i, j] + v[i, j + 1])
    v_bottom = 0.5 * (v[i, j - 1] + v[i, j])
    return (v_top * v_top - v_bottom * v_bottom) / dy
