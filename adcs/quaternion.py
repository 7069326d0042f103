"""Quaternions for representing rotations."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from adcs.vector import NORM_TOLERANCE, Vec3, ZeroLengthError


@dataclass(frozen=True)
class Quat:
    """An immutable quaternion made of a scalar and a vector part."""

    scalar: float = 0.0
    vector: Vec3 = field(default_factory=Vec3)

    def scaled(self, scalar: float) -> Quat:
        """Return the quaternion multiplied by ``scalar``."""
        return Quat(scalar * self.scalar, self.vector.scaled(scalar))

    def __mul__(self, other: Quat) -> Quat:
        """Hamilton product; combines rotations and is not commutative."""
        if not isinstance(other, Quat):
            return NotImplemented
        new_scalar = self.scalar * other.scalar - self.vector.dot(other.vector)
        new_vector = (
            other.vector.scaled(self.scalar)
            + self.vector.scaled(other.scalar)
            + self.vector.cross(other.vector)
        )
        return Quat(new_scalar, new_vector)

    def magnitude(self) -> float:
        """Return the length of the quaternion."""
        return math.sqrt(self.scalar * self.scalar + self.vector.dot(self.vector))

    def normalized(self) -> Quat:
        """Return the quaternion stretched to unit length.

        Raises ZeroLengthError when the length is below 1e-6.
        """
        mag = self.magnitude()
        if abs(mag) < NORM_TOLERANCE:
            raise ZeroLengthError("cannot normalize a zero-length quaternion")
        return self.scaled(1 / mag)

    def conjugate(self) -> Quat:
        """Return the quaternion with its vector part negated."""
        return Quat(self.scalar, self.vector.scaled(-1.0))

    def inverse(self) -> Quat:
        """Return the normalized conjugate."""
        return self.conjugate().normalized()

    @classmethod
    def from_axis_angle(cls, angle: float, axis: Vec3) -> Quat:
        """Build the rotation of ``angle`` radians about ``axis``.

        An axis too short to normalize is used as given.
        """
        try:
            unit = axis.normalized()
        except ZeroLengthError:
            unit = axis
        return cls(math.cos(angle / 2), unit.scaled(math.sin(angle / 2)))

    def rotate(self, vector: Vec3) -> Vec3:
        """Apply the rotation this quaternion represents to ``vector``."""
        wrapped = self * Quat(0.0, vector) * self.conjugate()
        return wrapped.vector