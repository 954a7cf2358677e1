"""LDC results plotter for single and multiple runs."""

from pathlib import Path

import h5py
import matplotlib.pyplot as plt
import seaborn as sns
import pandas as pd
import numpy as np
from loguru import logger


def load_run(h5_path):
    """Read a file written by ``LidDrivenCavitySolver.save`` into DataFrames.

    Parameters
    ----------
    h5_path : str or Path
        Path to HDF5 file.

    Returns
    -------
    fields : pd.DataFrame
        Cell-centred fields (x, y, u, v, p, velocity_magnitude).
    time_series : pd.DataFrame
        One row per accepted time step.
    metadata : pd.DataFrame
        Single row with configuration and run info.
    """
    h5_path = Path(h5_path)
    if not h5_path.exists():
        raise FileNotFoundError(f"HDF5 file not found: {h5_path}")

    with h5py.File(h5_path, "r") as f:
        metadata = {}
        for key, val in f.attrs.items():
            if isinstance(val, bytes):
                val = val.decode()
            elif isinstance(val, np.ndarray):
                val = tuple(val.tolist())
            metadata[key] = val

        fields = {key: f["fields"][key][()] for key in f["fields"] if key != "grid_points"}
        time_series = {key: f["time_series"][key][()] for key in f["time_series"]}

    return pd.DataFrame(fields), pd.DataFrame(time_series), pd.DataFrame([metadata])


class LDCPlotter:
    """Plotter for lid-driven cavity simulation results.

    Parameters
    ----------
    runs : dict, str, Path, or list
        Single run or list of runs. Can be:
        - str/Path: Path to HDF5 file
        - dict: Dictionary with 'h5_path' (and optionally 'label')
        - list: List of any of the above

    Attributes
    ----------
    fields : pd.DataFrame
        Cell-centred fields (x, y, u, v, p) for all runs
    time_series : pd.DataFrame
        Per-step history (time, dt, pressure iterations and residual) for all runs
    metadata : pd.DataFrame
        Configuration and run info for all runs

    Examples
    --------
    >>> plotter = LDCPlotter('run.h5')
    >>> plotter.plot_time_history()

    >>> plotter = LDCPlotter([
    ...     {'h5_path': 'sor.h5', 'label': 'SOR'},
    ...     {'h5_path': 'gs.h5', 'label': 'Gauss-Seidel'}
    ... ])
    """

    def __init__(self, runs):
        if not isinstance(runs, list):
            runs = [runs]

        fields_list = []
        time_series_list = []
        metadata_list = []

        for run in runs:
            if isinstance(run, (str, Path)):
                run = {"h5_path": run, "label": Path(run).stem}

            h5_path = Path(run["h5_path"])
            label = run.get("label", h5_path.stem)

            fields_df, time_series_df, metadata_df = load_run(h5_path)
            fields_list.append(fields_df.assign(run=label))
            time_series_list.append(time_series_df.assign(run=label, step=lambda df: range(len(df))))
            metadata_list.append(metadata_df.assign(run=label))

        self.fields = pd.concat(fields_list, ignore_index=True)
        self.time_series = pd.concat(time_series_list, ignore_index=True)
        self.metadata = pd.concat(metadata_list, ignore_index=True)

    def _require_single_run(self):
        """Check that only single run is loaded (for field plotting)."""
        if self.metadata['run'].nunique() > 1:
            raise ValueError("Field plotting only available for single run.")

    def _structured(self, column):
        """Reshape a cell-centred column to (ny, nx) with unique sorted x and y."""
        x = np.unique(self.fields['x'].values)
        y = np.unique(self.fields['y'].values)
        values = self.fields[column].values.reshape(len(x), len(y)).T
        return x, y, values

    def _save(self, fig, output_path, what):
        if output_path:
            fig.savefig(output_path, bbox_inches="tight", dpi=300)
            logger.info(f"{what} plot saved to: {output_path}")

    def plot_time_history(self, output_path=None):
        """Plot time step width and pressure solver effort over simulated time.

        Parameters
        ----------
        output_path : str or Path, optional
            Path to save figure. If None, figure is not saved.
        """
        n_runs = self.metadata['run'].nunique()

        long = self.time_series.melt(
            id_vars=["run", "time"],
            value_vars=["dt", "pressure_iterations", "pressure_residual"],
            var_name="quantity",
        )

        g = sns.relplot(
            data=long,
            x="time",
            y="value",
            row="quantity",
            hue="run" if n_runs > 1 else None,
            kind="line",
            height=2.8,
            aspect=2.6,
            linewidth=1.5,
            facet_kws={"sharey": False},
            legend="auto" if n_runs > 1 else False,
        )
        g.set_titles("{row_name}")
        g.set_xlabels("Time")
        g.set_ylabels("")
        for ax in g.axes.flat:
            ax.grid(True, alpha=0.3)
        g.axes.flat[-1].set_yscale("log")

        if n_runs == 1:
            Re = self.metadata['Re'].iloc[0]
            g.figure.suptitle(f"Time History (Re = {Re:.0f})", fontweight="bold", y=1.02)
        else:
            g.figure.suptitle("Time History Comparison", fontweight="bold", y=1.02)

        self._save(g.figure, output_path, "Time history")

    def plot_velocity_fields(self, output_path=None):
        """Plot velocity components (u and v) at the cell centres.

        Only available for single-run plotting.

        Parameters
        ----------
        output_path : str or Path, optional
            Path to save figure. If None, figure is not saved.
        """
        self._require_single_run()

        Re = self.metadata['Re'].iloc[0]
        fig, axes = plt.subplots(1, 2, figsize=(12, 5))

        for ax, name in zip(axes, ("u", "v")):
            x, y, values = self._structured(name)
            cf = ax.contourf(x, y, values, levels=20, cmap="RdBu_r")
            ax.set_xlabel("x")
            ax.set_ylabel("y")
            ax.set_title(f"{name.upper()} velocity", fontweight="bold")
            ax.set_aspect("equal")
            plt.colorbar(cf, ax=ax, label=name)

        fig.suptitle(f"Velocity Components (Re = {Re:.0f})", fontweight="bold")
        fig.tight_layout()

        self._save(fig, output_path, "Velocity fields")

    def plot_pressure(self, output_path=None):
        """Plot pressure field.

        Only available for single-run plotting.

        Parameters
        ----------
        output_path : str or Path, optional
            Path to save figure. If None, figure is not saved.
        """
        self._require_single_run()

        Re = self.metadata['Re'].iloc[0]
        fig, ax = plt.subplots(figsize=(8, 7))

        x, y, p = self._structured("p")
        cf = ax.contourf(x, y, p, levels=20, cmap="coolwarm")
        ax.set_xlabel("x")
        ax.set_ylabel("y")
        ax.set_title(f"Pressure Field (Re = {Re:.0f})", fontweight="bold")
        ax.set_aspect("equal")
        plt.colorbar(cf, ax=ax, label="Pressure")
        fig.tight_layout()

        self._save(fig, output_path, "Pressure")

    def plot_velocity_magnitude(self, output_path=None):
        """Plot velocity magnitude with streamlines.

        The cell centres already form a uniform grid, so the streamlines are
        drawn directly from the stored fields.

        Only available for single-run plotting.

        Parameters
        ----------
        output_path : str or Path, optional
            Path to save figure. If None, figure is not saved.
        """
        self._require_single_run()

        Re = self.metadata['Re'].iloc[0]

        x, y, u = self._structured("u")
        _, _, v = self._structured("v")
        vel_mag = np.sqrt(u**2 + v**2)

        fig, ax = plt.subplots(figsize=(8, 7))
        cf = ax.contourf(x, y, vel_mag, levels=20, cmap="coolwarm")

        stream = ax.streamplot(
            x, y, u, v,
            color='white', linewidth=1, density=1.5,
            arrowsize=1.2, arrowstyle='->'
        )
        stream.lines.set_alpha(0.6)

        ax.set_xlabel("x")
        ax.set_ylabel("y")
        ax.set_title(f"Velocity Magnitude with Streamlines (Re = {Re:.0f})", fontweight="bold")
        ax.set_aspect("equal")
        plt.colorbar(cf, ax=ax, label="Velocity magnitude")
        fig.tight_layout()

        self._save(fig, output_path, "Velocity magnitude")
