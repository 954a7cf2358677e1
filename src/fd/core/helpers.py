import numpy as np
from numba import njit


@njit(cache=True)
def compute_right_hand_side(f, g, rhs, dx, dy, dt):
    """
    Divergence of the preliminary velocities over dt at every interior pressure cell.
    Writes rhs in place; the ghost layer of rhs is not touched.
    """
    ni, nj = rhs.shape
    inv_dt = 1.0 / dt
    for j in range(1, nj - 1):
        for i in range(1, ni - 1):
            div_f = (f[i, j] - f[i - 1, j]) / dx
            div_g = (g[i, j] - g[i, j - 1]) / dy
            rhs[i, j] = inv_dt * (div_f + div_g)


@njit(cache=True)
def max_divergence(u, v, dx, dy):
    """
    Largest absolute discrete divergence of (u, v) over the physical cells.
    """
    nx = u.shape[0] - 1
    ny = v.shape[1] - 1
    largest = 0.0
    for j in range(ny):
        for i in range(nx):
            div = (u[i + 1, j + 1] - u[i, j + 1]) / dx + (v[i + 1, j + 1] - v[i + 1, j]) / dy
            if abs(div) > largest:
                largest = abs(div)
    return largest


def kinetic_energy(grid):
    """0.5 * sum(u^2 + v^2) * dx * dy with velocities averaged to the cell centres."""
    u = grid.u.data
    v = grid.v.data
    u_c = 0.5 * (u[:-1, 1:-1] + u[1:, 1:-1])
    v_c = 0.5 * (v[1:-1, :-1] + v[1:-1, 1:])
    return 0.5 * float(np.sum(u_c * u_c + v_c * v_c)) * grid.dx * grid.dy
