"""Shared fixtures for the MAC solver tests."""

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest
from loguru import logger

from fd.discretization import CentralDifferences, DonorCell
from meshing import StaggeredGrid


@pytest.fixture
def grid():
    """Non-square 5x4 grid, dx != dy."""
    return StaggeredGrid((5, 4), (0.2, 0.25))


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


def fill_velocities(grids, rng):
    """Write the same random u and v into every grid."""
    u = rng.uniform(-1.0, 1.0, size=grids[0].u.size)
    v = rng.uniform(-1.0, 1.0, size=grids[0].v.size)
    for g in grids:
        g.u.data[:] = u
        g.v.data[:] = v


@pytest.fixture
def central_and_donor(rng):
    """Central differences and donor-cell with alpha = 0 on identical random velocities."""
    central = CentralDifferences((6, 5), (0.1, 0.15))
    donor = DonorCell((6, 5), (0.1, 0.15), alpha=0.0)
    fill_velocities([central, donor], rng)
    return central, donor


@pytest.fixture
def log_messages():
    """Collect loguru output for the duration of a test."""
    messages = []
    handler_id = logger.add(messages.append, level="DEBUG", format="{level}|{message}")
    yield messages
    logger.remove(handler_id)
