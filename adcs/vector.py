"""Three-dimensional vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

NORM_TOLERANCE = 1e-6


class ZeroLengthError(ValueError):
    """Raised when a vector or quaternion too short to normalize is normalized."""


@dataclass(frozen=True)
class Vec3:
    """An immutable 3D vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def dot(self, other: Vec3) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vec3) -> Vec3:
        """Return ``self x other``; the cross product is not commutative."""
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def magnitude(self) -> float:
        """Return the (non-negative) length of the vector."""
        return math.sqrt(self.dot(self))

    def normalized(self) -> Vec3:
        """Return the vector stretched to unit length.

        Raises ZeroLengthError when the length is below 1e-6.
        """
        mag = self.magnitude()
        if abs(mag) < NORM_TOLERANCE:
            raise ZeroLengthError("cannot normalize a zero-length vector")
        return self.scaled(1 / mag)

    def bisect(self, other: Vec3) -> Vec3:
        """Return the average of two vectors; its length is not normalized."""
        return (self + other).scaled(0.5)

    def scaled(self, scalar: float) -> Vec3:
        """Return the vector multiplied by ``scalar``."""
        return Vec3(scalar * self.x, scalar * self.y, scalar * self.z)

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __neg__(self) -> Vec3:
        return self.scaled(-1.0)