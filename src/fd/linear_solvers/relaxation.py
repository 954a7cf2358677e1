"""Numba kernels for the pressure Poisson equation on the staggered grid.

Arrays are the raw storage of p and rhs with one ghost layer on every
side; the interior is ``[1, ni - 1) x [1, nj - 1)``. The discrete equation
per interior cell is

    (p[i+1,j] - 2p[i,j] + p[i-1,j]) / dx^2
  + (p[i,j+1] - 2p[i,j] + p[i,j-1]) / dy^2 = rhs[i,j] - rhs_shift

The kernels are sequential: Gauss-Seidel and SOR results depend on the
sweep order.
"""

import numpy as np
from numba import njit


@njit(cache=True)
def set_pressure_boundary(p):
    """Homogeneous Neumann condition: copy the nearest interior value into the ghost layer.

    Bottom/top are written first, left/right afterwards, so the corners
    hold the side value.
    """
    ni, nj = p.shape
    for i in range(ni):
        p[i, 0] = p[i, 1]
        p[i, nj - 1] = p[i, nj - 2]
    for j in range(nj):
        p[0, j] = p[1, j]
        p[ni - 1, j] = p[ni - 2, j]


@njit(cache=True)
def interior_mean(a):
    ni, nj = a.shape
    total = 0.0
    for j in range(1, nj - 1):
        for i in range(1, ni - 1):
            total += a[i, j]
    return total / ((ni - 2) * (nj - 2))


@njit(cache=True)
def rms_residual(p, rhs, dx, dy, rhs_shift):
    """Root mean square of (Laplace(p) - rhs) over the interior cells."""
    ni, nj = p.shape
    dx2 = dx * dx
    dy2 = dy * dy
    total = 0.0
    for j in range(1, nj - 1):
        for i in range(1, ni - 1):
            laplace = (p[i + 1, j] - 2.0 * p[i, j] + p[i - 1, j]) / dx2 + (
                p[i, j + 1] - 2.0 * p[i, j] + p[i, j - 1]
            ) / dy2
            r = laplace - (rhs[i, j] - rhs_shift)
            total += r * r
    return np.sqrt(total / ((ni - 2) * (nj - 2)))


@njit(cache=True)
def gauss_seidel_sweep(p, rhs, dx, dy, rhs_shift):
    """One in-place lexicographic sweep (j outer, i inner)."""
    ni, nj = p.shape
    dx2 = dx * dx
    dy2 = dy * dy
    factor = 0.5 * dx2 * dy2 / (dx2 + dy2)
    for j in range(1, nj - 1):
        for i in range(1, ni - 1):
            p[i, j] = factor * (
                (p[i + 1, j] + p[i - 1, j]) / dx2
                + (p[i, j + 1] + p[i, j - 1]) / dy2
                - (rhs[i, j] - rhs_shift)
            )


@njit(cache=True)
def sor_sweep(p, rhs, dx, dy, rhs_shift, omega):
    """Gauss-Seidel sweep with the update blended by the relaxation factor omega."""
    ni, nj = p.shape
    dx2 = dx * dx
    dy2 = dy * dy
    factor = 0.5 * dx2 * dy2 / (dx2 + dy2)
    for j in range(1, nj - 1):
        for i in range(1, ni - 1):
            p_gauss_seidel = factor * (
                (p[i + 1, j] + p[i - 1, j]) / dx2
                + (p[i, j + 1] + p[i, j - 1]) / dy2
                - (rhs[i, j] - rhs_shift)
            )
            p[i, j] = (1.0 - omega) * p[i, j] + omega * p_gauss_seidel
