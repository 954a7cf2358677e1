"""Tests for time step width selection and clamping to the end time."""

import math

import pytest

from fd.core import clamp_to_end_time, compute_time_step_width, convection_limit, diffusion_limit


class TestDiffusionLimit:
    def test_square_mesh(self):
        assert diffusion_limit(100.0, 0.1, 0.1) == pytest.approx(100.0 * 0.1**2 / 4)

    def test_non_square_mesh(self):
        dx, dy = 0.1, 0.2
        expected = (100.0 / 2) * dx**2 * dy**2 / (dx**2 + dy**2)
        assert diffusion_limit(100.0, dx, dy) == pytest.approx(expected)
        assert diffusion_limit(100.0, dx, dy) == pytest.approx(0.4)

    def test_formulas_agree_on_square_mesh(self):
        dx = 0.05
        harmonic = (250.0 / 2) * dx**4 / (2 * dx**2)
        assert diffusion_limit(250.0, dx, dx) == pytest.approx(harmonic)


class TestConvectionLimit:
    def test_cfl(self):
        assert convection_limit(0.1, 2.0) == pytest.approx(0.05)

    def test_zero_velocity_imposes_no_bound(self):
        assert convection_limit(0.1, 0.0) == math.inf


class TestTimeStepWidth:
    def test_fluid_at_rest_is_bounded_by_diffusion(self):
        dt = compute_time_step_width(100.0, 0.1, 0.1, 0.0, 0.0, tau=0.5, maximum_dt=10.0)
        assert math.isfinite(dt)
        assert dt == pytest.approx(0.5 * 0.25)

    def test_maximum_dt_caps_step(self):
        dt = compute_time_step_width(100.0, 0.1, 0.1, 0.0, 0.0, tau=0.5, maximum_dt=0.01)
        assert dt == 0.01

    def test_convection_bound_wins(self):
        dt = compute_time_step_width(1000.0, 0.1, 0.2, 4.0, 1.0, tau=0.8, maximum_dt=1.0)
        assert dt == pytest.approx(0.8 * 0.1 / 4.0)

    def test_v_bound_uses_dy(self):
        dt = compute_time_step_width(1000.0, 0.1, 0.2, 0.0, 10.0, tau=1.0, maximum_dt=1.0)
        assert dt == pytest.approx(0.02)


class TestClampToEndTime:
    def test_step_within_end_time_unchanged(self):
        assert clamp_to_end_time(0.0, 0.1, 1.0) == (0.1, False)

    def test_step_overshooting_is_shortened(self):
        dt, is_final = clamp_to_end_time(0.9, 0.25, 1.0)
        assert is_final
        assert dt == pytest.approx(0.1)
        assert dt < 0.25

    def test_step_landing_exactly_is_final(self):
        dt, is_final = clamp_to_end_time(0.5, 0.5, 1.0)
        assert is_final
        assert dt == 0.5
