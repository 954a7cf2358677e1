"""Abstract base solver for lid-driven cavity problem."""

from abc import ABC, abstractmethod
from dataclasses import asdict, replace
from pathlib import Path
import time

import h5py
import numpy as np
from loguru import logger

from datastructures import TimeSeries


class LidDrivenCavitySolver(ABC):
    """Abstract base solver for time-dependent lid-driven cavity problems.

    Handles:
    - Configuration management
    - Time loop up to the end time, output sinks after every step
    - Result storage

    Subclasses must:
    - Set Config class attribute
    - Implement step() - advance ``self.time`` by one accepted time step
    - Implement _create_result_fields() - create result dataclass
    - Extend __init__() for solver-specific setup
    """

    Config = None

    def __init__(self, config=None, output_writers=None, **kwargs):
        """Initialize solver with configuration.

        Parameters
        ----------
        config : Config, optional
            Configuration object. If not provided, kwargs are used to create config.
        output_writers : list, optional
            Objects with a ``write_file(current_time)`` method, called after
            every accepted time step.
        **kwargs
            Configuration parameters passed to Config class if config is None.
        """
        if config is None:
            if self.Config is None:
                raise ValueError("Subclass must define Config class attribute")
            config = self.Config(**kwargs)
        elif kwargs:
            config = replace(config, **kwargs)

        self.config = config
        self.output_writers = list(output_writers or [])

        self.time = 0.0
        self.end_time = config.end_time
        self.time_series = TimeSeries()

    @abstractmethod
    def step(self):
        """Advance the solution by one accepted time step.

        Must update ``self.time`` and never step beyond ``self.end_time``.
        """

    @abstractmethod
    def _create_result_fields(self):
        """Return a Fields dataclass of the current solution."""

    def add_output_writer(self, writer):
        self.output_writers.append(writer)

    def _store_results(self):
        """Store solve results in self.fields and self.metadata."""
        self.fields = self._create_result_fields()

        ts = self.time_series
        self.metadata = replace(
            self.config,
            n_steps=len(ts),
            final_time=self.time,
            converged=len(ts) > 0 and bool(all(ts.pressure_converged)),
            final_residual=ts.pressure_residual[-1] if len(ts) else None,
        )

    def solve(self, end_time=None):
        """Run the simulation from the current time up to the end time.

        Stores results in solver attributes:
        - self.fields : Fields dataclass with solution fields
        - self.time_series : TimeSeries dataclass with per-step history
        - self.metadata : config dataclass with run info filled in

        Parameters
        ----------
        end_time : float, optional
            Simulated time to stop at. If None, uses config.end_time.
        """
        if end_time is not None:
            self.end_time = end_time

        logger.info(f"Starting {type(self).__name__} at t={self.time:g}, end time {self.end_time:g}")
        time_start = time.time()

        while self.time < self.end_time:
            self.step()
            for writer in self.output_writers:
                writer.write_file(self.time)

        logger.info(
            f"Reached t={self.time:g} after {len(self.time_series)} steps "
            f"in {time.time() - time_start:.2f} seconds"
        )

        self._store_results()

    def save(self, filepath):
        """Save results to HDF5 file.

        Parameters
        ----------
        filepath : str or Path
            Output file path.
        """
        filepath = Path(filepath)
        filepath.parent.mkdir(parents=True, exist_ok=True)

        fields_dict = asdict(self.fields)
        time_series_dict = asdict(self.time_series)
        metadata_dict = asdict(self.metadata)

        with h5py.File(filepath, "w") as f:
            # Metadata as root-level attributes
            for key, val in metadata_dict.items():
                if val is None:
                    continue
                f.attrs[key] = val

            fields_grp = f.create_group("fields")
            for key, val in fields_dict.items():
                fields_grp.create_dataset(key, data=val)
            fields_grp.create_dataset(
                "velocity_magnitude", data=np.sqrt(fields_dict["u"] ** 2 + fields_dict["v"] ** 2)
            )

            ts_grp = f.create_group("time_series")
            for key, val in time_series_dict.items():
                ts_grp.create_dataset(key, data=np.asarray(val))

        logger.info(f"Results saved to: {filepath}")
