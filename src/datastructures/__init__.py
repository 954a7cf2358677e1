"""Data structures for solver configuration and results.

This module defines the configuration and result data structures
for the staggered-grid lid-driven cavity solver.
"""

from .config import ConfigurationError, Info, MACinfo, PRESSURE_SOLVERS
from .fields import Fields
from .time_series import TimeSeries

__all__ = [
    # Configuration and metadata
    "ConfigurationError",
    "Info",
    "MACinfo",
    "PRESSURE_SOLVERS",
    # Fields
    "Fields",
    # Time series
    "TimeSeries",
]
