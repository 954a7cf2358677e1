"""Building blocks of one projection time step."""

from .boundary import apply_velocity_boundary_values
from .corrections import velocity_correction
from .helpers import compute_right_hand_side, kinetic_energy, max_divergence
from .momentum import compute_preliminary_velocities
from .time_step import clamp_to_end_time, compute_time_step_width, convection_limit, diffusion_limit

__all__ = [
    "apply_velocity_boundary_values",
    "compute_preliminary_velocities",
    "compute_right_hand_side",
    "velocity_correction",
    "compute_time_step_width",
    "clamp_to_end_time",
    "convection_limit",
    "diffusion_limit",
    "kinetic_energy",
    "max_divergence",
]
