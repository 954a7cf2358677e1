"""Utilities: project paths, output writers and plotting."""

from pathlib import Path

from .ldc_plotter import LDCPlotter, load_run
from .output_writers import (
    OutputWriter,
    OutputWriterHDF5,
    OutputWriterParaview,
    OutputWriterText,
)


def get_project_root() -> Path:
    """Repository root, the directory holding ``pyproject.toml``."""
    path = Path(__file__).resolve()
    for parent in path.parents:
        if (parent / "pyproject.toml").exists():
            return parent
    return path.parents[2]


__all__ = [
    "get_project_root",
    "LDCPlotter",
    "load_run",
    "OutputWriter",
    "OutputWriterText",
    "OutputWriterParaview",
    "OutputWriterHDF5",
]
