"""Tests for the staggered grid storage and logical index mapping."""

import numpy as np
import pytest

from meshing import FieldVariable, IndexOutOfRangeError, StaggeredGrid


class TestLayout:
    def test_storage_sizes(self, grid):
        nx, ny = grid.n_cells
        assert grid.u.size == (nx + 1, ny + 2)
        assert grid.f.size == grid.u.size
        assert grid.v.size == (nx + 2, ny + 1)
        assert grid.g.size == grid.v.size
        assert grid.p.size == (nx + 2, ny + 2)
        assert grid.rhs.size == grid.p.size

    def test_logical_ranges_start_in_ghost_layer(self, grid):
        nx, ny = grid.n_cells
        for field in grid.fields.values():
            assert field.i_begin == -1
            assert field.j_begin == -1
        assert (grid.u.i_end, grid.u.j_end) == (nx, ny + 1)
        assert (grid.v.i_end, grid.v.j_end) == (nx + 1, ny)
        assert (grid.p.i_end, grid.p.j_end) == (nx + 1, ny + 1)

    def test_offsets(self, grid):
        dx, dy = grid.mesh_width
        assert grid.u.offset == (0.0, dy / 2)
        assert grid.v.offset == (dx / 2, 0.0)
        assert grid.p.offset == (dx / 2, dy / 2)

    def test_mesh_width_shared(self, grid):
        for field in grid.fields.values():
            assert field.mesh_width == (0.2, 0.25)
        assert grid.dx == 0.2
        assert grid.dy == 0.25

    @pytest.mark.parametrize("n_cells, mesh_width", [((0, 3), (0.1, 0.1)), ((3, 3), (0.0, 0.1))])
    def test_invalid_construction(self, n_cells, mesh_width):
        with pytest.raises(ValueError):
            StaggeredGrid(n_cells, mesh_width)

    def test_cell_centers(self, grid):
        X, Y = grid.cell_centers()
        assert X.shape == grid.n_cells
        assert X[0, 0] == pytest.approx(0.1)
        assert Y[0, 0] == pytest.approx(0.125)
        assert X[-1, -1] == pytest.approx(0.9)
        assert Y[-1, -1] == pytest.approx(0.875)


class TestIndexing:
    def test_round_trip_every_field_every_index(self, grid):
        for name, field in grid.fields.items():
            for i in range(field.i_begin, field.i_end):
                for j in range(field.j_begin, field.j_end):
                    value = 1000.0 * i + j + 0.5 + len(name)
                    field[i, j] = value
                    assert field[i, j] == value

    def test_storage_shift(self, grid):
        grid.p[-1, -1] = 3.0
        grid.p[2, 1] = 7.0
        assert grid.p.data[0, 0] == 3.0
        assert grid.p.data[3, 2] == 7.0

    def test_writes_do_not_leak_into_other_fields(self, grid):
        grid.u[0, 0] = 1.0
        assert grid.f[0, 0] == 0.0
        assert np.count_nonzero(grid.u.data) == 1

    @pytest.mark.parametrize("index", [(-2, 0), (0, -2), (5, 0), (0, 5)])
    def test_out_of_range_read(self, grid, index):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            grid.u[index]
        err = exc_info.value
        assert err.field_name == "u"
        assert err.index == index
        assert err.i_range == (-1, 5)
        assert err.j_range == (-1, 5)
        assert "'u'" in str(err)

    def test_out_of_range_write(self, grid):
        with pytest.raises(IndexOutOfRangeError):
            grid.v[0, grid.v.j_end] = 1.0
        assert not np.any(grid.v.data)

    def test_error_is_index_error(self, grid):
        with pytest.raises(IndexError):
            grid.rhs[grid.rhs.i_end, 0]

    def test_require_interior(self, grid):
        grid.u.require_interior(0, 0)
        grid.u.require_interior(grid.u.i_end - 2, grid.u.j_end - 2)
        with pytest.raises(IndexOutOfRangeError):
            grid.u.require_interior(-1, 0)
        with pytest.raises(IndexOutOfRangeError):
            grid.u.require_interior(grid.u.i_end - 1, 0)


class TestFieldVariable:
    def test_max_abs_includes_ghost_layer(self):
        field = FieldVariable("q", (4, 4), (0.0, 0.0), (1.0, 1.0))
        field[1, 1] = 0.5
        field[-1, -1] = -3.0
        assert field.max_abs() == 3.0

    def test_interpolation_reproduces_linear_field(self, grid):
        dx, dy = grid.mesh_width
        for field in (grid.u, grid.v, grid.p):
            s = np.arange(field.size[0]) * dx - field.offset[0]
            t = np.arange(field.size[1]) * dy - field.offset[1]
            S, T = np.meshgrid(s, t, indexing="ij")
            field.data[:] = 2.0 * S - 3.0 * T + 1.0

            for x, y in [(0.0, 0.0), (0.33, 0.71), (1.0, 1.0), (0.5, 0.125)]:
                assert field.interpolate_at(x, y) == pytest.approx(2.0 * x - 3.0 * y + 1.0)

    def test_repr(self, grid):
        assert "u" in repr(grid.u)
