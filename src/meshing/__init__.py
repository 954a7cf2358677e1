"""Staggered grid storage for the MAC finite difference scheme."""

from .field_variable import FieldVariable, IndexOutOfRangeError
from .staggered_grid import StaggeredGrid

__all__ = [
    "FieldVariable",
    "IndexOutOfRangeError",
    "StaggeredGrid",
]
