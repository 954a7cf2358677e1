"""Central difference second derivatives for the diffusion terms.

All kernels take storage indices (logical index + 1) into the raw field
arrays and read the four direct neighbours of (i, j).
"""

from numba import njit


@njit(cache=True)
def d2_dx2(phi, i, j, dx):
    """Second x-derivative of a staggered quantity at its own location."""
    return (phi[i + 1, j] - 2.0 * phi[i, j] + phi[i - 1, j]) / (dx * dx)


@njit(cache=True)
def d2_dy2(phi, i, j, dy):
    """Second y-derivative of a staggered quantity at its own location."""
    return (phi[i, j + 1] - 2.0 * phi[i, j] + phi[i, j - 1]) / (dy * dy)
