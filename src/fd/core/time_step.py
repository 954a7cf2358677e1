"""Time step width selection for the explicit scheme."""

import math


def diffusion_limit(Re, dx, dy):
    """Stability bound of the explicit diffusion term.

    ``Re * dx * dy / 4`` on a square mesh, otherwise
    ``(Re / 2) * dx^2 dy^2 / (dx^2 + dy^2)``.
    """
    if dx == dy:
        return Re * dx * dy / 4.0
    dx2 = dx * dx
    dy2 = dy * dy
    return (Re / 2.0) * (dx2 * dy2) / (dx2 + dy2)


def convection_limit(h, velocity_max):
    """CFL bound ``h / max|velocity|``; a velocity maximum of zero imposes no bound."""
    if velocity_max == 0.0:
        return math.inf
    return h / velocity_max


def compute_time_step_width(Re, dx, dy, u_max, v_max, tau, maximum_dt):
    """Smallest of the diffusion and convection bounds, scaled by tau and capped by maximum_dt.

    Parameters
    ----------
    Re : float
        Reynolds number.
    dx, dy : float
        Mesh widths.
    u_max, v_max : float
        Maximum absolute velocities over the full fields.
    tau : float
        Safety factor in (0, 1].
    maximum_dt : float
        Upper bound on the returned step.

    Returns
    -------
    float
        Time step width, always finite and positive.
    """
    bound = min(
        diffusion_limit(Re, dx, dy),
        convection_limit(dx, u_max),
        convection_limit(dy, v_max),
    )
    return min(tau * bound, maximum_dt)


def clamp_to_end_time(current_time, dt, end_time):
    """Shorten ``dt`` so that the step does not overshoot ``end_time``.

    Returns
    -------
    dt : float
        Possibly shortened step width.
    is_final : bool
        True if the step lands on ``end_time``.
    """
    if current_time + dt >= end_time:
        return end_time - current_time, True
    return dt, False
