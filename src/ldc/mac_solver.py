"""Staggered-grid (MAC) solver for the lid-driven cavity.

This module implements explicit time stepping with a pressure projection:
boundary values, stable time step width, preliminary velocities F and G,
pressure Poisson equation and velocity correction.
"""

from dataclasses import replace

from loguru import logger

from datastructures import Fields, MACinfo
from fd.core import (
    apply_velocity_boundary_values,
    clamp_to_end_time,
    compute_preliminary_velocities,
    compute_right_hand_side,
    compute_time_step_width,
    kinetic_energy,
    max_divergence,
    velocity_correction,
)
from fd.discretization import CentralDifferences, DonorCell, SCHEME_NAMES
from fd.linear_solvers import create_pressure_solver

from .base_solver import LidDrivenCavitySolver


class MACSolver(LidDrivenCavitySolver):
    """Finite difference solver on a staggered grid with projection method.

    Parameters
    ----------
    config : MACinfo, optional
        Physics, grid, boundary and solver parameters.
    output_writers : list, optional
        Output sinks called with the current time after every step.
    **kwargs
        Configuration parameters passed to MACinfo.
    """

    Config = MACinfo

    def __init__(self, config=None, output_writers=None, **kwargs):
        super().__init__(config=config, output_writers=output_writers, **kwargs)
        cfg = self.config

        n_cells = (cfg.nx, cfg.ny)
        if cfg.use_donor_cell:
            self.discretization = DonorCell(n_cells, cfg.mesh_width, cfg.alpha)
        else:
            self.discretization = CentralDifferences(n_cells, cfg.mesh_width)

        self.pressure_solver = create_pressure_solver(
            cfg.pressure_solver, cfg.epsilon, cfg.maximum_number_of_iterations, omega=cfg.omega
        )
        self.config = replace(cfg, method=self._method_label())

        self.dt = 0.0
        self.last_pressure_result = None

        logger.info(
            f"MAC solver: Re={cfg.Re:g}, grid {cfg.nx}x{cfg.ny}, "
            f"dx={self.discretization.dx:g}, dy={self.discretization.dy:g}, "
            f"{self.config.method}"
        )

    # ------------------------------------------------------------------
    # Steps of one time step
    # ------------------------------------------------------------------
    def apply_boundary_values(self):
        cfg = self.config
        apply_velocity_boundary_values(
            self.discretization,
            bottom=cfg.dirichlet_bottom,
            top=cfg.dirichlet_top,
            left=cfg.dirichlet_left,
            right=cfg.dirichlet_right,
        )

    def compute_time_step_width(self):
        d = self.discretization
        self.dt = compute_time_step_width(
            self.config.Re,
            d.dx,
            d.dy,
            d.u.max_abs(),
            d.v.max_abs(),
            self.config.tau,
            self.config.maximum_dt,
        )
        return self.dt

    def compute_preliminary_velocities(self):
        d = self.discretization
        compute_preliminary_velocities(
            d.u.data, d.v.data, d.f.data, d.g.data,
            d.dx, d.dy, self.dt, self.config.Re, self.config.g_x, self.config.g_y,
            d.scheme, d.alpha,
        )

    def compute_right_hand_side(self):
        d = self.discretization
        compute_right_hand_side(d.f.data, d.g.data, d.rhs.data, d.dx, d.dy, self.dt)

    def compute_pressure(self):
        self.last_pressure_result = self.pressure_solver.solve(self.discretization)
        return self.last_pressure_result

    def compute_velocities(self):
        d = self.discretization
        velocity_correction(d.u.data, d.v.data, d.f.data, d.g.data, d.p.data, d.dx, d.dy, self.dt)

    # ------------------------------------------------------------------
    def step(self):
        """Advance by one time step, landing exactly on the end time if it is reached."""
        if self.time >= self.end_time:
            raise ValueError(f"End time {self.end_time:g} already reached (t={self.time:g}), no step left")

        self.apply_boundary_values()
        self.compute_time_step_width()

        self.dt, is_final = clamp_to_end_time(self.time, self.dt, self.end_time)
        self.time = self.end_time if is_final else self.time + self.dt
        if is_final:
            logger.info(f"Final time step, dt={self.dt:.4e}")

        self.compute_preliminary_velocities()
        self.compute_right_hand_side()
        result = self.compute_pressure()
        self.compute_velocities()

        self._record_step(result)
        logger.debug(
            f"t={self.time:.6f} dt={self.dt:.4e} pressure: {result.iterations} it, "
            f"residual {result.residual:.3e}"
        )

    def _record_step(self, result):
        d = self.discretization
        ts = self.time_series
        ts.time.append(self.time)
        ts.dt.append(self.dt)
        ts.pressure_iterations.append(result.iterations)
        ts.pressure_residual.append(result.residual)
        ts.pressure_converged.append(result.converged)
        ts.kinetic_energy.append(kinetic_energy(d))
        ts.max_divergence.append(float(max_divergence(d.u.data, d.v.data, d.dx, d.dy)))

    def _method_label(self):
        d = self.discretization
        label = SCHEME_NAMES[d.scheme]
        if isinstance(d, DonorCell):
            label += f"(alpha={d.alpha:g})"
        return f"{label} + {self.pressure_solver.name}"

    def _create_result_fields(self):
        return Fields.from_grid(self.discretization)

