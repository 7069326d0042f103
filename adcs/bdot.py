"""B-dot detumbling control law."""

from __future__ import annotations

from adcs.vector import Vec3

CONTROL_CONSTANT = 67200.0
MAX_COIL_CURRENT = 0.158  # amperes, across all coils


def bdot_control(mag: Vec3, last_mag: Vec3, delta_t: float) -> Vec3:
    """Return the coil currents [A] that oppose the change of the magnetic field.

    ``mag`` and ``last_mag`` are successive field readings in microtesla taken
    ``delta_t`` apart. The result's magnitude is capped at 0.158 A.
    Raises ZeroDivisionError when ``delta_t`` is zero.
    """
    derivative = (mag - last_mag).scaled(1.0 / delta_t)
    coils_output = mag.cross(-derivative).scaled(CONTROL_CONSTANT)

    magnitude = coils_output.magnitude()
    if magnitude > MAX_COIL_CURRENT:
        coils_output = coils_output.scaled(MAX_COIL_CURRENT / magnitude)
    return coils_output