"""Lid-driven cavity solver framework.

This module provides the time-dependent staggered-grid solver.

Solver Hierarchy:
-----------------
LidDrivenCavitySolver (abstract base - time loop, results, output sinks)
└── MACSolver (finite differences on a staggered grid with projection method)
"""

from datastructures import ConfigurationError, Fields, Info, MACinfo, TimeSeries

from .base_solver import LidDrivenCavitySolver
from .mac_solver import MACSolver

__all__ = [
    # Base classes
    "LidDrivenCavitySolver",
    # Configurations
    "Info",
    "MACinfo",
    "ConfigurationError",
    # Data structures
    "Fields",
    "TimeSeries",
    # Concrete solvers
    "MACSolver",
]
