"""TRIAD attitude determination from two vector observations."""

from __future__ import annotations

from adcs.matrix import Mat3
from adcs.vector import Vec3, ZeroLengthError


class TriadError(ValueError):
    """Raised when the observations cannot form an orthonormal triad."""


def _triad_basis(sun: Vec3, mag: Vec3) -> Mat3:
    try:
        first = mag.normalized()
        second = mag.cross(sun).normalized()
        third = first.cross(second).normalized()
    except ZeroLengthError as exc:
        raise TriadError("cannot build a triad from these vectors") from exc
    return Mat3.from_columns(first, second, third)


def triad(bod_sun: Vec3, bod_mag: Vec3, ref_sun: Vec3, ref_mag: Vec3) -> Mat3:
    """Return the direction cosine matrix rotating the reference frame to the body frame.

    The vectors need not be normalized. Raises TriadError when a vector is
    zero or the sun and magnetic field vectors are parallel.
    """
    body = _triad_basis(bod_sun, bod_mag)
    reference = _triad_basis(ref_sun, ref_mag)
    return body @ reference.transpose()