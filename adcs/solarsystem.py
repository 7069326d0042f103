"""Solar system body positions from an open JPL ephemeris."""

from __future__ import annotations

from typing import Sequence

from adcs.ephemeris import JPLEphemeris

Triple = tuple[float, float, float]

SUN = 10
MOON = 11

# Origin codes: 0 solar system barycenter, 1 Sun, 2 Earth.
_CENTERS = {0: 11, 1: 10, 2: 2}


def _target_for(body: int) -> int:
    if not 1 <= body <= 11:
        raise ValueError(f"invalid body {body}; expected 1..11")
    if body == SUN:
        return 10
    if body == MOON:
        return 9
    return body - 1


def _center_for(origin: int) -> int:
    try:
        return _CENTERS[origin]
    except KeyError:
        raise ValueError(f"invalid origin {origin}; expected 0, 1 or 2") from None


def solarsystem_hp(
    ephemeris: JPLEphemeris, tjd: Sequence[float], body: int, origin: int
) -> tuple[Triple, Triple]:
    """Return position [AU] and velocity [AU/day] of ``body`` for a split date.

    ``tjd`` is a TDB Julian date split in two parts in any way, for the
    highest precision. Bodies are Mercury = 1, ..., Pluto = 9, Sun = 10,
    Moon = 11; ``origin`` is 0 for the solar system barycenter, 1 for the
    Sun and 2 for the Earth. Raises ValueError for an invalid body or origin.
    """
    target = _target_for(body)
    center = _center_for(origin)
    return ephemeris.planet_ephemeris((tjd[0], tjd[1]), target, center)


def solarsystem(
    ephemeris: JPLEphemeris, tjd: float, body: int, origin: int
) -> tuple[Triple, Triple]:
    """Return position [AU] and velocity [AU/day] of ``body`` at TDB date ``tjd``.

    The whole date goes into the first part of the split date, which is
    adequate for all but the most precise work. See ``solarsystem_hp``
    for the numbering of bodies and origins.
    """
    return solarsystem_hp(ephemeris, (tjd, 0.0), body, origin)