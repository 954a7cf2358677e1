from numba import njit

from fd.discretization.gradient.staggered_gradient import dp_dx, dp_dy


@njit(cache=True)
def velocity_correction(u, v, f, g, p, dx, dy, dt):
    """
    Project the preliminary velocities: u = F - dt * dp/dx, v = G - dt * dp/dy.
    Only interior velocity points are written.
    """
    ni, nj = u.shape
    for j in range(1, nj - 1):
        for i in range(1, ni - 1):
            u[i, j] = f[i, j] - dt * dp_dx(p, i, j, dx)

    ni, nj = v.shape
    for j in range(1, nj - 1):
        for i in range(1, ni - 1):
            v[i, j] = g[i, j] - dt * dp_dy(p, i, j, dy)
