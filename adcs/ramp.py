"""Trapezoidal ramp command generator."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class RampController:
    """Parameters of a ramp: rise, plateau and fall, all in milliseconds.

    ``starting_ms`` may lie in the future; no command is produced before it.
    ``plateau_height`` may be negative.
    """

    starting_ms: int
    left_leg_length_ms: int
    right_leg_length_ms: int
    plateau_length_ms: int
    plateau_height: float

    def __post_init__(self) -> None:
        durations = (
            self.starting_ms,
            self.left_leg_length_ms,
            self.right_leg_length_ms,
            self.plateau_length_ms,
        )
        if any(value < 0 for value in durations):
            raise ValueError("ramp times must not be negative")

    def linear_command(self, t_curr: int) -> float:
        """Return the linear ramp command at time ``t_curr`` [ms]."""
        if t_curr < 0:
            raise ValueError("time must not be negative")

        rise_end = self.starting_ms + self.left_leg_length_ms
        plateau_end = rise_end + self.plateau_length_ms
        fall_end = plateau_end + self.right_leg_length_ms

        if t_curr < self.starting_ms:
            return 0.0
        if t_curr < rise_end:
            slope = self.plateau_height / self.left_leg_length_ms
            return (t_curr - self.starting_ms) * slope
        if t_curr < plateau_end:
            return self.plateau_height
        if t_curr < fall_end:
            slope = self.plateau_height / self.right_leg_length_ms
            return self.plateau_height - (t_curr - plateau_end) * slope
        return 0.0