"""Convective term stencils (central differences and donor-cell)."""

from .schemes import (
    CENTRAL_DIFFERENCES,
    DONOR_CELL,
    SCHEME_NAMES,
    convection_u,
    convection_v,
)

__all__ = [
    "CENTRAL_DIFFERENCES",
    "DONOR_CELL",
    "SCHEME_NAMES",
    "convection_u",
    "convection_v",
]
