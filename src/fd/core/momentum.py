"""Explicit momentum prediction (preliminary velocities F and G)."""

from numba import njit

from fd.discretization.convection.schemes import convection_u, convection_v
from fd.discretization.diffusion.central_diff import d2_dx2, d2_dy2


@njit(cache=True)
def compute_preliminary_velocities(u, v, f, g, dx, dy, dt, Re, g_x, g_y, scheme, alpha):
    """F and G at all interior velocity points, written in place.

    F = u + dt * ((1/Re) * (u_xx + u_yy) - d(u^2)/dx - d(uv)/dy + g_x)
    G = v + dt * ((1/Re) * (v_xx + v_yy) - d(uv)/dx - d(v^2)/dy + g_y)

    All arrays are raw storage; edge and ghost values of f, g are left
    untouched.
    """
    ni, nj = u.shape
    for j in range(1, nj - 1):
        for i in range(1, ni - 1):
            diffusion = d2_dx2(u, i, j, dx) + d2_dy2(u, i, j, dy)
            convection = convection_u(u, v, i, j, dx, dy, scheme, alpha)
            f[i, j] = u[i, j] + dt * (diffusion / Re - convection + g_x)

    ni, nj = v.shape
    for j in range(1, nj - 1):
        for i in range(1, ni - 1):
            diffusion = d2_dx2(v, i, j, dx) + d2_dy2(v, i, j, dy)
            convection = convection_v(u, v, i, j, dx, dy, scheme, alpha)
            g[i, j] = v[i, j] + dt * (diffusion / Re - convection + g_y)
