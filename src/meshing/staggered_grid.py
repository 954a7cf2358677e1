"""Staggered (MAC) grid holding all fields of a simulation.

Layout for ``n_cells = (nx, ny)``:

======  ============  ============  ===============  ===============
field   storage       offset        logical i        logical j
======  ============  ============  ===============  ===============
u, f    (nx+1, ny+2)  (0, dy/2)     [-1, nx)         [-1, ny+1)
v, g    (nx+2, ny+1)  (dx/2, 0)     [-1, nx+1)       [-1, ny)
p, rhs  (nx+2, ny+2)  (dx/2, dy/2)  [-1, nx+1)       [-1, ny+1)
======  ============  ============  ===============  ===============

Logical u(i, j) sits on the right face of cell (i, j), v(i, j) on its top
face and p(i, j) at its centre.
"""

import numpy as np

from .field_variable import FieldVariable


class StaggeredGrid:
    """Owner of the six staggered fields u, v, p, f, g and rhs.

    Fields are allocated once here and only ever mutated in place.

    Parameters
    ----------
    n_cells : tuple of int
        Number of cells (nx, ny).
    mesh_width : tuple of float
        Mesh spacing (dx, dy).
    """

    def __init__(self, n_cells, mesh_width):
        nx, ny = int(n_cells[0]), int(n_cells[1])
        dx, dy = float(mesh_width[0]), float(mesh_width[1])
        if nx < 1 or ny < 1:
            raise ValueError(f"Need at least one cell per direction, got {(nx, ny)}")
        if dx <= 0.0 or dy <= 0.0:
            raise ValueError(f"Mesh width must be positive, got {(dx, dy)}")

        self.n_cells = (nx, ny)
        self.mesh_width = (dx, dy)

        u_size, u_offset = (nx + 1, ny + 2), (0.0, dy / 2.0)
        v_size, v_offset = (nx + 2, ny + 1), (dx / 2.0, 0.0)
        p_size, p_offset = (nx + 2, ny + 2), (dx / 2.0, dy / 2.0)

        self.u = FieldVariable("u", u_size, u_offset, self.mesh_width)
        self.v = FieldVariable("v", v_size, v_offset, self.mesh_width)
        self.p = FieldVariable("p", p_size, p_offset, self.mesh_width)
        self.f = FieldVariable("f", u_size, u_offset, self.mesh_width)
        self.g = FieldVariable("g", v_size, v_offset, self.mesh_width)
        self.rhs = FieldVariable("rhs", p_size, p_offset, self.mesh_width)

    @property
    def dx(self):
        return self.mesh_width[0]

    @property
    def dy(self):
        return self.mesh_width[1]

    @property
    def fields(self):
        """All fields keyed by name."""
        return {
            "u": self.u,
            "v": self.v,
            "p": self.p,
            "f": self.f,
            "g": self.g,
            "rhs": self.rhs,
        }

    def cell_centers(self):
        """Cell-centre coordinates of the physical cells as (x, y), each shape (nx, ny)."""
        nx, ny = self.n_cells
        x = (np.arange(nx) + 0.5) * self.dx
        y = (np.arange(ny) + 0.5) * self.dy
        return np.meshgrid(x, y, indexing="ij")
