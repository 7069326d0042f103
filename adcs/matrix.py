"""3x3 matrices."""

from __future__ import annotations

from dataclasses import dataclass

from adcs.vector import Vec3

SINGULAR_TOLERANCE = 1e-6


class SingularMatrixError(ValueError):
    """Raised when inverting a matrix whose determinant is (nearly) zero."""


@dataclass(frozen=True)
class Mat3:
    """An immutable 3x3 matrix; rows are x, y, z and columns 1, 2, 3."""

    x1: float = 0.0
    x2: float = 0.0
    x3: float = 0.0
    y1: float = 0.0
    y2: float = 0.0
    y3: float = 0.0
    z1: float = 0.0
    z2: float = 0.0
    z3: float = 0.0

    @classmethod
    def from_columns(cls, first: Vec3, second: Vec3, third: Vec3) -> Mat3:
        """Build a matrix whose columns are the given vectors."""
        return cls(
            first.x, second.x, third.x,
            first.y, second.y, third.y,
            first.z, second.z, third.z,
        )

    def transpose(self) -> Mat3:
        """Return the transposed matrix."""
        return Mat3(
            self.x1, self.y1, self.z1,
            self.x2, self.y2, self.z2,
            self.x3, self.y3, self.z3,
        )

    def scaled(self, scalar: float) -> Mat3:
        """Return the matrix with every element multiplied by ``scalar``."""
        return Mat3(
            scalar * self.x1, scalar * self.x2, scalar * self.x3,
            scalar * self.y1, scalar * self.y2, scalar * self.y3,
            scalar * self.z1, scalar * self.z2, scalar * self.z3,
        )

    def __matmul__(self, other):
        if isinstance(other, Vec3):
            return self.apply(other)
        if not isinstance(other, Mat3):
            return NotImplemented
        a, b = self, other
        return Mat3(
            a.x1 * b.x1 + a.x2 * b.y1 + a.x3 * b.z1,
            a.x1 * b.x2 + a.x2 * b.y2 + a.x3 * b.z2,
            a.x1 * b.x3 + a.x2 * b.y3 + a.x3 * b.z3,
            a.y1 * b.x1 + a.y2 * b.y1 + a.y3 * b.z1,
            a.y1 * b.x2 + a.y2 * b.y2 + a.y3 * b.z2,
            a.y1 * b.x3 + a.y2 * b.y3 + a.y3 * b.z3,
            a.z1 * b.x1 + a.z2 * b.y1 + a.z3 * b.z1,
            a.z1 * b.x2 + a.z2 * b.y2 + a.z3 * b.z2,
            a.z1 * b.x3 + a.z2 * b.y3 + a.z3 * b.z3,
        )

    def apply(self, vector: Vec3) -> Vec3:
        """Return the product of this matrix with a column vector."""
        return Vec3(
            self.x1 * vector.x + self.x2 * vector.y + self.x3 * vector.z,
            self.y1 * vector.x + self.y2 * vector.y + self.y3 * vector.z,
            self.z1 * vector.x + self.z2 * vector.y + self.z3 * vector.z,
        )

    def det(self) -> float:
        """Return the determinant."""
        return (
            self.x1 * (self.y2 * self.z3 - self.z2 * self.y3)
            - self.x2 * (self.y1 * self.z3 - self.z1 * self.y3)
            + self.x3 * (self.y1 * self.z2 - self.z1 * self.y2)
        )

    def inverse(self) -> Mat3:
        """Return the inverse matrix.

        Raises SingularMatrixError when the determinant is below 1e-6 in size.
        """
        determinant = self.det()
        if abs(determinant) < SINGULAR_TOLERANCE:
            raise SingularMatrixError("matrix is singular")
        m = self
        adjugate = Mat3(
            m.y2 * m.z3 - m.y3 * m.z2,
            m.x3 * m.z2 - m.x2 * m.z3,
            m.x2 * m.y3 - m.x3 * m.y2,
            m.y3 * m.z1 - m.y1 * m.z3,
            m.x1 * m.z3 - m.x3 * m.z1,
            m.x3 * m.y1 - m.x1 * m.y3,
            m.y1 * m.z2 - m.y2 * m.z1,
            m.x2 * m.z1 - m.x1 * m.z2,
            m.x1 * m.y2 - m.x2 * m.y1,
        )
        return adjugate.scaled(1 / determinant)