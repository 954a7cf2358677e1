"""Dirichlet velocity boundary values on the staggered grid."""


def apply_velocity_boundary_values(grid, bottom, top, left, right):
    """Set the edge and ghost values of u, v and copy them to f, g.

    Velocity components normal to an edge lie on it and are assigned
    directly. Tangential components lie half a cell off the edge, so the
    ghost value mirrors the interior neighbour: ``2 * bc - interior``.

    Bottom/top are written before left/right, so the corner values are
    those of the side edges.

    Parameters
    ----------
    grid : StaggeredGrid
        Grid to update in place.
    bottom, top, left, right : tuple of float
        Prescribed (u, v) on each edge.
    """
    u, v, f, g = grid.u, grid.v, grid.f, grid.g

    # bottom and top
    for i in range(u.i_begin, u.i_end):
        u[i, u.j_begin] = 2.0 * bottom[0] - u[i, u.j_begin + 1]
        u[i, u.j_end - 1] = 2.0 * top[0] - u[i, u.j_end - 2]
    for i in range(v.i_begin, v.i_end):
        v[i, v.j_begin] = bottom[1]
        v[i, v.j_end - 1] = top[1]

    # left and right
    for j in range(u.j_begin, u.j_end):
        u[u.i_begin, j] = left[0]
        u[u.i_end - 1, j] = right[0]
    for j in range(v.j_begin, v.j_end):
        v[v.i_begin, j] = 2.0 * left[1] - v[v.i_begin + 1, j]
        v[v.i_end - 1, j] = 2.0 * right[1] - v[v.i_end - 2, j]

    # f and g take the velocity boundary values, in the same order
    for i in range(f.i_begin, f.i_end):
        f[i, f.j_begin] = u[i, u.j_begin]
        f[i, f.j_end - 1] = u[i, u.j_end - 1]
    for i in range(g.i_begin, g.i_end):
        g[i, g.j_begin] = v[i, v.j_begin]
        g[i, g.j_end - 1] = v[i, v.j_end - 1]
    for j in range(f.j_begin, f.j_end):
        f[f.i_begin, j] = u[u.i_begin, j]
        f[f.i_end - 1, j] = u[u.i_end - 1, j]
    for j in range(g.j_begin, g.j_end):
        g[g.i_begin, j] = v[v.i_begin, j]
        g[g.i_end - 1, j] = v[v.i_end - 1, j]
