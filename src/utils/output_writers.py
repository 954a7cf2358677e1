"""Output sinks writing field snapshots after every time step.

Writers read the discretization and never modify it. Each call to
``write_file(current_time)`` counts as one step; with ``every=n`` only every
n-th step produces a file.
"""

from abc import ABC, abstractmethod
from pathlib import Path

import h5py
import numpy as np
import pyvista as pv


class OutputWriter(ABC):
    """Base output sink.

    Parameters
    ----------
    discretization : StaggeredGrid
        Grid to read from.
    output_dir : str or Path, optional
        Directory for the written files. Default is 'out'.
    every : int, optional
        Write every n-th call only. Default is 1.
    """

    def __init__(self, discretization, output_dir="out", every=1):
        if every < 1:
            raise ValueError(f"every must be at least 1, got {every}")
        self.discretization = discretization
        self.output_dir = Path(output_dir)
        self.every = int(every)
        self.file_no = 0
        self._calls = 0

    def write_file(self, current_time):
        """Write a snapshot for ``current_time`` if this call is due.

        Returns
        -------
        Path or None
            Written file, or None if the call was skipped.
        """
        self._calls += 1
        if (self._calls - 1) % self.every != 0:
            return None
        self.output_dir.mkdir(parents=True, exist_ok=True)
        path = self._write(current_time)
        self.file_no += 1
        return path

    @abstractmethod
    def _write(self, current_time):
        """Write one snapshot and return its path."""


class OutputWriterText(OutputWriter):
    """Human readable tables of all six fields, top row first."""

    def _write(self, current_time):
        d = self.discretization
        path = self.output_dir / f"output_{self.file_no:04d}.txt"

        lines = [
            f"t: {current_time}",
            f"nCells: {d.n_cells[0]}x{d.n_cells[1]}, dx: {d.dx}, dy: {d.dy}",
            "",
        ]
        for field in d.fields.values():
            lines.extend(format_field(field))
            lines.append("")

        path.write_text("\n".join(lines))
        return path


def format_field(field, width=12):
    """Table of a field over its full logical range, rows from j_end - 1 down to j_begin."""
    lines = [
        f"{field.name} ({field.size[0]}x{field.size[1]}), "
        f"i: [{field.i_begin}, {field.i_end}), j: [{field.j_begin}, {field.j_end})"
    ]
    header = " " * 6 + "|" + "".join(f"{i:>{width}}" for i in range(field.i_begin, field.i_end))
    lines.append(header)
    lines.append("-" * len(header))
    for j in range(field.j_end - 1, field.j_begin - 1, -1):
        row = "".join(f"{field[i, j]:>{width}.4e}" for i in range(field.i_begin, field.i_end))
        lines.append(f"{j:>6}|{row}")
    return lines


class OutputWriterParaview(OutputWriter):
    """VTK image data (.vti) on the cell nodes with interpolated pressure and velocity."""

    def _write(self, current_time):
        d = self.discretization
        nx, ny = d.n_cells
        path = self.output_dir / f"output_{self.file_no:04d}.vti"

        image = pv.ImageData(
            dimensions=(nx + 1, ny + 1, 1),
            spacing=(d.dx, d.dy, 1.0),
            origin=(0.0, 0.0, 0.0),
        )

        # VTK point order: x fastest
        n_points = (nx + 1) * (ny + 1)
        pressure = np.zeros(n_points)
        velocity = np.zeros((n_points, 3))
        index = 0
        for j in range(ny + 1):
            y = j * d.dy
            for i in range(nx + 1):
                x = i * d.dx
                pressure[index] = d.p.interpolate_at(x, y)
                velocity[index, 0] = d.u.interpolate_at(x, y)
                velocity[index, 1] = d.v.interpolate_at(x, y)
                index += 1

        image.point_data["pressure"] = pressure
        image.point_data["velocity"] = velocity
        image.field_data["time"] = np.array([current_time])
        image.save(path)
        return path


class OutputWriterHDF5(OutputWriter):
    """All snapshots of a run in one HDF5 file, one group per written step.

    Groups are named ``snapshot_<n>`` and hold the raw storage arrays of u, v
    and p (ghost layers included) with the simulated time as attribute.
    """

    def __init__(self, discretization, output_dir="out", every=1, filename="snapshots.h5"):
        super().__init__(discretization, output_dir=output_dir, every=every)
        self.path = self.output_dir / filename

    def _write(self, current_time):
        d = self.discretization
        mode = "w" if self.file_no == 0 else "a"
        with h5py.File(self.path, mode) as f:
            if mode == "w":
                f.attrs["n_cells"] = d.n_cells
                f.attrs["mesh_width"] = d.mesh_width
            grp = f.create_group(f"snapshot_{self.file_no:05d}")
            grp.attrs["time"] = current_time
            for name in ("u", "v", "p"):
                grp.create_dataset(name, data=d.fields[name].data)
        return self.path
