"""Time series data structures."""
from dataclasses import dataclass, asdict, field
from typing import List
import pandas as pd


@dataclass
class TimeSeries:
    """Per-step history of a time-dependent run.

    Parameters
    ----------
    time : List[float]
        Simulated time after each accepted step.
    dt : List[float]
        Accepted time step width.
    pressure_iterations : List[int]
        Sweeps used by the pressure solver.
    pressure_residual : List[float]
        Final RMS residual of the pressure solve.
    pressure_converged : List[bool]
        Whether the pressure solve met its tolerance.
    kinetic_energy : List[float]
        Kinetic energy 0.5 * sum(u^2 + v^2) dA over the physical cells.
    max_divergence : List[float]
        Largest absolute discrete divergence after the velocity update.
    """
    time: List[float] = field(default_factory=list)
    dt: List[float] = field(default_factory=list)
    pressure_iterations: List[int] = field(default_factory=list)
    pressure_residual: List[float] = field(default_factory=list)
    pressure_converged: List[bool] = field(default_factory=list)
    kinetic_energy: List[float] = field(default_factory=list)
    max_divergence: List[float] = field(default_factory=list)

    def __len__(self):
        return len(self.time)

    def to_dataframe(self) -> pd.DataFrame:
        """Convert time series to DataFrame for analysis and plotting.

        Returns
        -------
        pd.DataFrame
            One column per recorded quantity, index is the step number.
        """
        return pd.DataFrame(asdict(self))
