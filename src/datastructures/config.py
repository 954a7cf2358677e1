"""Configuration and metadata data structures."""
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Tuple

import pandas as pd
from loguru import logger

PRESSURE_SOLVERS = ("SOR", "GaussSeidel")


class ConfigurationError(ValueError):
    """Invalid or unrecognized simulation parameter."""


@dataclass
class Info:
    """Base solver metadata, config and run info.

    Parameters
    ----------
    Re : float
        Reynolds number.
    nx : int, optional
        Number of cells in x-direction. Default is 20.
    ny : int, optional
        Number of cells in y-direction. Default is 20.
    Lx : float, optional
        Domain length in x-direction. Default is 2.
    Ly : float, optional
        Domain length in y-direction. Default is 2.
    end_time : float, optional
        Simulated time at which the run stops. Default is 10.
    method : str, optional
        Solver method name. Default is None.
    n_steps : int, optional
        Number of accepted time steps. Default is None.
    final_time : float, optional
        Simulated time reached. Default is None.
    converged : bool, optional
        Whether every pressure solve met its tolerance. Default is False.
    final_residual : float, optional
        Pressure residual of the last step. Default is None.
    """
    # Physics parameters (required)
    Re: float

    # Grid parameters (with defaults)
    nx: int = 20
    ny: int = 20

    # Physics parameters (with defaults)
    Lx: float = 2.0
    Ly: float = 2.0

    # Run config
    end_time: float = 10.0
    method: str = None

    # Run info
    n_steps: int = None
    final_time: float = None
    converged: bool = False
    final_residual: float = None

    def __post_init__(self):
        if self.Re <= 0:
            raise ConfigurationError(f"Reynolds number must be positive, got {self.Re}")
        if self.nx != int(self.nx) or self.ny != int(self.ny):
            raise ConfigurationError(f"Cell counts must be integers, got nx={self.nx}, ny={self.ny}")
        if self.nx < 1 or self.ny < 1:
            raise ConfigurationError(f"Need at least one cell per direction, got nx={self.nx}, ny={self.ny}")
        self.nx = int(self.nx)
        self.ny = int(self.ny)
        if self.Lx <= 0 or self.Ly <= 0:
            raise ConfigurationError(f"Domain size must be positive, got Lx={self.Lx}, Ly={self.Ly}")
        if self.end_time < 0:
            raise ConfigurationError(f"End time must not be negative, got {self.end_time}")

    @property
    def mesh_width(self) -> Tuple[float, float]:
        return self.Lx / self.nx, self.Ly / self.ny

    def to_dataframe(self) -> pd.DataFrame:
        """Convert config/metadata to single-row DataFrame.

        Returns
        -------
        pd.DataFrame
            Single-row DataFrame with all configuration and metadata fields.
        """
        return pd.DataFrame([asdict(self)])


@dataclass
class MACinfo(Info):
    """Staggered-grid (MAC) specific parameters.

    Inherits all parameters from Info and adds the MAC scheme parameters.

    Parameters
    ----------
    g_x, g_y : float, optional
        Body force (gravity) components. Default is 0.
    dirichlet_bottom, dirichlet_top, dirichlet_left, dirichlet_right : tuple of float, optional
        Prescribed (u, v) velocity on each domain edge. Default is a lid
        moving with u = 1 on top and no-slip elsewhere.
    use_donor_cell : bool, optional
        Donor-cell convection if True, central differences otherwise. Default is True.
    alpha : float, optional
        Donor-cell upwind weight. Default is 0.5.
    tau : float, optional
        Safety factor for the time step width. Default is 0.5.
    maximum_dt : float, optional
        Upper bound on the time step width. Default is 0.1.
    pressure_solver : str, optional
        'SOR' or 'GaussSeidel'. Default is 'SOR'.
    omega : float, optional
        SOR relaxation factor. Default is 1.6.
    epsilon : float, optional
        Pressure residual tolerance. Default is 1e-5.
    maximum_number_of_iterations : int, optional
        Iteration cap of a single pressure solve. Default is 10000.
    """
    g_x: float = 0.0
    g_y: float = 0.0
    dirichlet_bottom: Tuple[float, float] = (0.0, 0.0)
    dirichlet_top: Tuple[float, float] = (1.0, 0.0)
    dirichlet_left: Tuple[float, float] = (0.0, 0.0)
    dirichlet_right: Tuple[float, float] = (0.0, 0.0)
    use_donor_cell: bool = True
    alpha: float = 0.5
    tau: float = 0.5
    maximum_dt: float = 0.1
    pressure_solver: str = "SOR"
    omega: float = 1.6
    epsilon: float = 1e-5
    maximum_number_of_iterations: int = 10000

    def __post_init__(self):
        super().__post_init__()
        for name in ("dirichlet_bottom", "dirichlet_top", "dirichlet_left", "dirichlet_right"):
            value = tuple(float(c) for c in getattr(self, name))
            if len(value) != 2:
                raise ConfigurationError(f"{name} needs two components, got {value}")
            setattr(self, name, value)
        if self.pressure_solver not in PRESSURE_SOLVERS:
            raise ConfigurationError(
                f"Unknown pressure solver '{self.pressure_solver}', expected one of {PRESSURE_SOLVERS}"
            )
        if not 0.0 <= self.alpha <= 1.0:
            raise ConfigurationError(f"Donor-cell alpha must lie in [0, 1], got {self.alpha}")
        if not 0.0 < self.tau <= 1.0:
            raise ConfigurationError(f"Safety factor tau must lie in (0, 1], got {self.tau}")
        if self.maximum_dt <= 0:
            raise ConfigurationError(f"maximum_dt must be positive, got {self.maximum_dt}")
        if not 0.0 < self.omega < 2.0:
            raise ConfigurationError(f"SOR omega must lie in (0, 2), got {self.omega}")
        if self.epsilon <= 0:
            raise ConfigurationError(f"epsilon must be positive, got {self.epsilon}")
        if self.maximum_number_of_iterations < 1:
            raise ConfigurationError(
                f"maximum_number_of_iterations must be at least 1, got {self.maximum_number_of_iterations}"
            )
        self.maximum_number_of_iterations = int(self.maximum_number_of_iterations)

    @classmethod
    def from_file(cls, path, **overrides):
        """Load parameters from a ``key = value`` parameter file.

        Lines starting with ``#`` and trailing ``#`` comments are ignored, as
        are lines without ``=``. Unknown keys are logged and skipped.

        Parameters
        ----------
        path : str or Path
            Parameter file.
        **overrides
            Values that take precedence over the file.

        Returns
        -------
        MACinfo
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Parameter file not found: {path}")

        kwargs = {}
        vectors = {}
        for line_number, raw in enumerate(path.read_text().splitlines(), start=1):
            line = raw.split("#", 1)[0].strip()
            if "=" not in line:
                continue
            key, value = (part.strip() for part in line.split("=", 1))

            if key in _VECTOR_KEYS:
                name, component = _VECTOR_KEYS[key]
                vectors.setdefault(name, {})[component] = _parse_float(key, value, line_number)
            elif key in _SCALAR_KEYS:
                name, parse = _SCALAR_KEYS[key]
                kwargs[name] = parse(key, value, line_number)
            else:
                logger.warning(f"{path.name}:{line_number}: ignoring unknown parameter '{key}'")

        defaults = {f.name: f.default for f in fields(cls)}
        for name, components in vectors.items():
            current = list(defaults[name])
            for component, value in components.items():
                current[component] = value
            kwargs[name] = tuple(current)

        kwargs.update(overrides)
        if "Re" not in kwargs:
            raise ConfigurationError(f"{path.name}: missing Reynolds number 're'")
        return cls(**kwargs)


def _parse_float(key, value, line_number):
    try:
        return float(value)
    except ValueError:
        raise ConfigurationError(f"line {line_number}: '{key}' expects a number, got '{value}'") from None


def _parse_int(key, value, line_number):
    number = _parse_float(key, value, line_number)
    if number != int(number):
        raise ConfigurationError(f"line {line_number}: '{key}' expects an integer, got '{value}'")
    return int(number)


def _parse_bool(key, value, line_number):
    lowered = value.lower()
    if lowered in ("true", "1", "yes"):
        return True
    if lowered in ("false", "0", "no"):
        return False
    raise ConfigurationError(f"line {line_number}: '{key}' expects true/false, got '{value}'")


def _parse_str(key, value, line_number):
    return value


_SCALAR_KEYS = {
    "physicalSizeX": ("Lx", _parse_float),
    "physicalSizeY": ("Ly", _parse_float),
    "gX": ("g_x", _parse_float),
    "gY": ("g_y", _parse_float),
    "endTime": ("end_time", _parse_float),
    "re": ("Re", _parse_float),
    "nCellsX": ("nx", _parse_int),
    "nCellsY": ("ny", _parse_int),
    "useDonorCell": ("use_donor_cell", _parse_bool),
    "alpha": ("alpha", _parse_float),
    "tau": ("tau", _parse_float),
    "maximumDt": ("maximum_dt", _parse_float),
    "pressureSolver": ("pressure_solver", _parse_str),
    "omega": ("omega", _parse_float),
    "epsilon": ("epsilon", _parse_float),
    "maximumNumberOfIterations": ("maximum_number_of_iterations", _parse_int),
}

# Keys holding one component of a boundary velocity pair.
_VECTOR_KEYS = {
    "dirichletBottomX": ("dirichlet_bottom", 0),
    "dirichletBottomY": ("dirichlet_bottom", 1),
    "dirichletTopX": ("dirichlet_top", 0),
    "dirichletTopY": ("dirichlet_top", 1),
    "dirichletLeftX": ("dirichlet_left", 0),
    "dirichletLeftY": ("dirichlet_left", 1),
    "dirichletRightX": ("dirichlet_right", 0),
    "dirichletRightY": ("dirichlet_right", 1),
}
