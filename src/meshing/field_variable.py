"""
FieldVariable: one staggered scalar quantity on the MAC grid.

Indexing Conventions:
- Logical indices (i, j) are simulation coordinates. The ghost layer sits at
  logical index -1 on the left/bottom and at the last valid index on the
  right/top.
- Storage indices are logical indices shifted by +1 in both directions, so
  ``data[i + 1, j + 1]`` holds the value of logical cell (i, j).
- The valid logical range is [i_begin, i_end) x [j_begin, j_end) with
  i_begin = j_begin = -1 and end = storage extent - 1.

Geometry:
- ``offset`` is the shift (in length units) of the stored value inside a cell.
  Storage index s along x sits at ``s * dx - offset[0]`` (same for y).
"""

import numpy as np


class IndexOutOfRangeError(IndexError):
    """Access outside the valid logical range of a field.

    Parameters
    ----------
    field_name : str
        Name of the field that was accessed.
    index : tuple of int
        Offending logical index (i, j).
    i_range, j_range : tuple of int
        Valid half-open logical ranges [begin, end).
    """

    def __init__(self, field_name, index, i_range, j_range):
        self.field_name = field_name
        self.index = tuple(index)
        self.i_range = tuple(i_range)
        self.j_range = tuple(j_range)
        super().__init__(
            f"Index {self.index} of field '{field_name}' out of range: "
            f"i in [{i_range[0]}, {i_range[1]}), j in [{j_range[0]}, {j_range[1]})"
        )


class FieldVariable:
    """Bounds-checked 2-D field with ghost layer and staggering offset.

    Parameters
    ----------
    name : str
        Field name used in error messages and output.
    size : tuple of int
        Storage extents (rows along x, columns along y), ghost layers included.
    offset : tuple of float
        Position of the stored value within a cell, in length units.
    mesh_width : tuple of float
        Mesh spacing (dx, dy).
    """

    def __init__(self, name, size, offset, mesh_width):
        self.name = name
        self.size = (int(size[0]), int(size[1]))
        self.offset = (float(offset[0]), float(offset[1]))
        self.mesh_width = (float(mesh_width[0]), float(mesh_width[1]))
        self.data = np.zeros(self.size, dtype=np.float64)

        self.i_begin = -1
        self.j_begin = -1
        self.i_end = self.size[0] - 1
        self.j_end = self.size[1] - 1

    def __repr__(self):
        return (
            f"FieldVariable(name={self.name!r}, size={self.size}, "
            f"i=[{self.i_begin}, {self.i_end}), j=[{self.j_begin}, {self.j_end}))"
        )

    def _check(self, i, j):
        if not (self.i_begin <= i < self.i_end and self.j_begin <= j < self.j_end):
            raise IndexOutOfRangeError(
                self.name, (i, j), (self.i_begin, self.i_end), (self.j_begin, self.j_end)
            )

    def __getitem__(self, index):
        i, j = index
        self._check(i, j)
        return float(self.data[i + 1, j + 1])

    def __setitem__(self, index, value):
        i, j = index
        self._check(i, j)
        self.data[i + 1, j + 1] = value

    def require_interior(self, i, j):
        """Raise unless (i, j) is a valid stencil centre (not a ghost/edge value)."""
        i_range = (self.i_begin + 1, self.i_end - 1)
        j_range = (self.j_begin + 1, self.j_end - 1)
        if not (i_range[0] <= i < i_range[1] and j_range[0] <= j < j_range[1]):
            raise IndexOutOfRangeError(self.name, (i, j), i_range, j_range)

    def max_abs(self):
        """Maximum absolute value over the full range, ghost layer included."""
        return float(np.max(np.abs(self.data)))

    def interpolate_at(self, x, y):
        """Bilinear interpolation at the physical position (x, y).

        Positions outside the stored points are extrapolated from the
        nearest pair of rows/columns.
        """
        dx, dy = self.mesh_width
        sx = (x + self.offset[0]) / dx
        sy = (y + self.offset[1]) / dy

        i0 = min(max(int(np.floor(sx)), 0), self.size[0] - 2)
        j0 = min(max(int(np.floor(sy)), 0), self.size[1] - 2)
        tx = sx - i0
        ty = sy - j0

        d = self.data
        bottom = (1.0 - tx) * d[i0, j0] + tx * d[i0 + 1, j0]
        top = (1.0 - tx) * d[i0, j0 + 1] + tx * d[i0 + 1, j0 + 1]
        return float((1.0 - ty) * bottom + ty * top)
