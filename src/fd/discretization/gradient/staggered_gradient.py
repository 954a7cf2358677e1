"""Pressure gradient at velocity locations of the staggered grid.

On the MAC grid u(i, j) lies halfway between p(i, j) and p(i+1, j) and
v(i, j) halfway between p(i, j) and p(i, j+1), so a single difference is
second order accurate.
"""

from numba import njit


@njit(cache=True)
def dp_dx(p, i, j, dx):
    return (p[i + 1, j] - p[i, j]) / dx


@njit(cache=True)
def dp_dy(p, i, j, dy):
    return (p[i, j + 1] - p[i, j]) / dy
