"""Finite difference discretizations on the staggered grid.

Discretization Hierarchy:
-------------------------
StaggeredGrid (field storage)
└── Discretization (abstract - diffusion and pressure gradient)
    ├── CentralDifferences
    └── DonorCell (upwind blended with central via alpha)
"""

from .central_differences import CentralDifferences
from .convection import CENTRAL_DIFFERENCES, DONOR_CELL, SCHEME_NAMES
from .discretization import Discretization
from .donor_cell import DonorCell

__all__ = [
    "Discretization",
    "CentralDifferences",
    "DonorCell",
    "CENTRAL_DIFFERENCES",
    "DONOR_CELL",
    "SCHEME_NAMES",
]
