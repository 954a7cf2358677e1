"""Tests for the text, ParaView and HDF5 output writers."""

import h5py
import numpy as np
import pytest
import pyvista as pv

from fd.discretization import CentralDifferences
from ldc import MACSolver
from utils import OutputWriterHDF5, OutputWriterParaview, OutputWriterText


@pytest.fixture
def discretization():
    d = CentralDifferences((4, 3), (0.25, 1 / 3))
    d.u.data[:] = 1.0
    d.v.data[:] = -2.0
    d.p.data[:] = np.arange(d.p.data.size).reshape(d.p.size)
    return d


class TestEvery:
    def test_every_second_call_writes(self, discretization, tmp_path):
        writer = OutputWriterText(discretization, tmp_path, every=2)
        written = [writer.write_file(t) for t in (0.1, 0.2, 0.3, 0.4, 0.5)]
        assert [w is not None for w in written] == [True, False, True, False, True]
        assert sorted(p.name for p in tmp_path.iterdir()) == [
            "output_0000.txt",
            "output_0001.txt",
            "output_0002.txt",
        ]

    def test_every_must_be_positive(self, discretization, tmp_path):
        with pytest.raises(ValueError):
            OutputWriterText(discretization, tmp_path, every=0)


class TestText:
    def test_contains_time_and_all_fields(self, discretization, tmp_path):
        path = OutputWriterText(discretization, tmp_path).write_file(0.75)
        text = path.read_text()
        assert text.startswith("t: 0.75")
        for name in ("u", "v", "p", "f", "g", "rhs"):
            assert f"\n{name} (" in text

    def test_rows_listed_from_top(self, discretization, tmp_path):
        path = OutputWriterText(discretization, tmp_path).write_file(0.0)
        lines = path.read_text().splitlines()
        start = lines.index(next(line for line in lines if line.startswith("p (")))
        first_row, last_row = lines[start + 3], lines[start + 3 + discretization.p.size[1] - 1]
        assert first_row.split("|")[0].strip() == str(discretization.p.j_end - 1)
        assert last_row.split("|")[0].strip() == "-1"

    def test_does_not_modify_fields(self, discretization, tmp_path):
        before = {k: f.data.copy() for k, f in discretization.fields.items()}
        OutputWriterText(discretization, tmp_path).write_file(0.0)
        for k, f in discretization.fields.items():
            np.testing.assert_array_equal(f.data, before[k])


class TestParaview:
    def test_point_data_on_cell_nodes(self, discretization, tmp_path):
        path = OutputWriterParaview(discretization, tmp_path).write_file(1.5)
        assert path.suffix == ".vti"

        mesh = pv.read(path)
        assert mesh.n_points == 5 * 4
        velocity = np.asarray(mesh.point_data["velocity"])
        np.testing.assert_allclose(velocity[:, 0], 1.0)
        np.testing.assert_allclose(velocity[:, 1], -2.0)
        np.testing.assert_allclose(velocity[:, 2], 0.0)
        assert "pressure" in mesh.point_data

    def test_pressure_interpolated_in_x_fastest_order(self, discretization, tmp_path):
        path = OutputWriterParaview(discretization, tmp_path).write_file(0.0)
        pressure = np.asarray(pv.read(path).point_data["pressure"])
        d = discretization
        assert pressure[1] == pytest.approx(d.p.interpolate_at(d.dx, 0.0))
        assert pressure[5] == pytest.approx(d.p.interpolate_at(0.0, d.dy))


class TestHDF5:
    def test_snapshots_appended(self, discretization, tmp_path):
        writer = OutputWriterHDF5(discretization, tmp_path)
        writer.write_file(0.1)
        discretization.u.data[:] = 3.0
        writer.write_file(0.2)

        with h5py.File(writer.path, "r") as f:
            assert sorted(f.keys()) == ["snapshot_00000", "snapshot_00001"]
            assert f["snapshot_00000"].attrs["time"] == 0.1
            assert f["snapshot_00001"].attrs["time"] == 0.2
            np.testing.assert_array_equal(f["snapshot_00001/u"][()], 3.0)
            assert f["snapshot_00000/p"].shape == discretization.p.size
            assert tuple(f.attrs["n_cells"]) == (4, 3)

    def test_with_solver(self, tmp_path):
        solver = MACSolver(Re=100.0, nx=4, ny=4, Lx=1.0, Ly=1.0, end_time=0.2, maximum_dt=0.05)
        writer = OutputWriterHDF5(solver.discretization, tmp_path, every=2)
        solver.add_output_writer(writer)
        solver.solve()

        with h5py.File(writer.path, "r") as f:
            times = [f[k].attrs["time"] for k in sorted(f.keys())]
        assert times == solver.time_series.time[::2]
