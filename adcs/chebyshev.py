"""Chebyshev interpolation of ephemeris coefficients."""

from __future__ import annotations

import math
from typing import Sequence

MAX_COEFFICIENTS = 18

Triple = tuple[float, float, float]


def split(tt: float) -> tuple[float, float]:
    """Split a number into an integer part and a non-negative fraction.

    For negative input the integer part is the next more negative integer.
    """
    whole = float(int(tt))
    fraction = tt - whole
    if tt >= 0.0 or fraction == 0.0:
        return whole, fraction
    return whole - 1.0, fraction + 1.0


class ChebyshevInterpolator:
    """Evaluates Chebyshev series, caching polynomial values between calls."""

    def __init__(self) -> None:
        self._pc = [0.0] * MAX_COEFFICIENTS
        self._vc = [0.0] * MAX_COEFFICIENTS
        self._pc[0] = 1.0
        self._vc[1] = 1.0
        self._np = 2
        self._nv = 3
        self._twot = 0.0

    def interpolate(
        self, buf: Sequence[float], t: Sequence[float], ncf: int, na: int
    ) -> tuple[Triple, Triple]:
        """Return position and velocity from a block of coefficients.

        ``buf`` holds ``na`` sub-intervals of three components with ``ncf``
        coefficients each. ``t[0]`` is the fractional time within the whole
        interval (0..1) and ``t[1]`` the interval length in time units.
        """
        if not 1 <= ncf <= MAX_COEFFICIENTS:
            raise ValueError(f"ncf must be between 1 and {MAX_COEFFICIENTS}")

        pc, vc = self._pc, self._vc
        dna = float(na)
        dt1 = float(int(t[0]))
        temp = dna * t[0]
        subinterval = int(temp - dt1)

        tc = 2.0 * (math.fmod(temp, 1.0) + dt1) - 1.0

        if tc != pc[1]:
            self._np = 2
            self._nv = 3
            pc[1] = tc
            self._twot = tc + tc
        twot = self._twot

        if self._np < ncf:
            for i in range(self._np, ncf):
                pc[i] = twot * pc[i - 1] - pc[i - 2]
            self._np = ncf

        base = subinterval * 3 * ncf

        def component(i: int) -> Sequence[float]:
            start = base + i * ncf
            return buf[start:start + ncf]

        position = tuple(
            sum(p * c for p, c in zip(reversed(pc[:ncf]), reversed(component(i))))
            for i in range(3)
        )

        vfac = (2.0 * dna) / t[1]
        vc[2] = 2.0 * twot
        if self._nv < ncf:
            for i in range(self._nv, ncf):
                vc[i] = twot * vc[i - 1] + pc[i - 1] + pc[i - 1] - vc[i - 2]
            self._nv = ncf

        velocity = tuple(
            vfac
            * sum(
                v * c
                for v, c in zip(reversed(vc[1:ncf]), reversed(component(i)[1:]))
            )
            for i in range(3)
        )

        return position, velocity  # type: ignore[return-value]