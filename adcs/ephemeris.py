"""Reader for JPL binary planetary ephemeris files."""

from __future__ import annotations

import struct
from typing import BinaryIO, Sequence

from adcs.chebyshev import ChebyshevInterpolator, split

Triple = tuple[float, float, float]

# Record lengths in bytes, by DE number.
_RECORD_LENGTHS = {
    200: 6608,
    403: 8144,
    405: 8144,
    421: 8144,
    404: 5824,
    406: 5824,
}

# Header layout: (size in bytes, struct format or None for skipped text,
# error code when the read comes up short).
_TITLE = (252, 2)
_NAMES = (2400, 3)

EARTH = 2
MOON = 9
SOLAR_SYSTEM_BARYCENTER = 11
EARTH_MOON_BARYCENTER = 12

_ZERO: Triple = (0.0, 0.0, 0.0)


class EphemerisError(Exception):
    """Raised when an ephemeris file cannot be opened, read or evaluated.

    ``code`` follows the ephemeris manager's numbering: 1 for a missing or
    unreadable file, 2-10 for a short header (and 2 for an epoch out of range
    in ``state``), 11 for an unknown DE number.
    """

    def __init__(self, message: str, code: int) -> None:
        super().__init__(message)
        self.code = code


def _read_exact(file: BinaryIO, size: int, code: int) -> bytes:
    data = file.read(size)
    if len(data) != size:
        raise EphemerisError("error reading ephemeris file header", code)
    return data


class JPLEphemeris:
    """An open JPL direct-access ephemeris file.

    Positions come in AU and velocities in AU/day unless ``km`` is set, in
    which case the file's native kilometre units are kept.
    """

    def __init__(
        self,
        file: BinaryIO,
        *,
        ss: Triple,
        au: float,
        em_ratio: float,
        ipt: Sequence[tuple[int, int, int]],
        lpt: Triple,
        de_number: int,
        record_length: int,
        km: bool = False,
    ) -> None:
        self._file: BinaryIO | None = file
        self.ss = ss
        self.au = au
        self.em_ratio = em_ratio
        self.ipt = tuple(ipt)
        self.lpt = lpt
        self.de_number = de_number
        self.record_length = record_length
        self.km = km
        self._record_number = 0
        self._buffer: tuple[float, ...] = ()
        self._interpolator = ChebyshevInterpolator()

    @classmethod
    def open(cls, path) -> JPLEphemeris:
        """Open the ephemeris file at ``path`` and read its header."""
        try:
            file = open(path, "rb")
        except OSError as exc:
            raise EphemerisError(f"cannot open ephemeris file {path}", 1) from exc

        try:
            _read_exact(file, *_TITLE)
            _read_exact(file, *_NAMES)
            ss = struct.unpack("=3d", _read_exact(file, 24, 4))
            _read_exact(file, 4, 5)  # number of constants
            (au,) = struct.unpack("=d", _read_exact(file, 8, 6))
            (em_ratio,) = struct.unpack("=d", _read_exact(file, 8, 7))
            flat = struct.unpack("=36i", _read_exact(file, 36 * 4, 8))
            (denum,) = struct.unpack("=i", _read_exact(file, 4, 9))
            lpt = struct.unpack("=3i", _read_exact(file, 12, 10))

            record_length = _RECORD_LENGTHS.get(denum)
            if record_length is None:
                raise EphemerisError(f"unknown ephemeris DE{denum}", 11)
        except BaseException:
            file.close()
            raise

        ipt = [tuple(flat[i:i + 3]) for i in range(0, 36, 3)]
        return cls(
            file,
            ss=ss,
            au=au,
            em_ratio=em_ratio,
            ipt=ipt,
            lpt=lpt,
            de_number=denum,
            record_length=record_length,
        )

    @property
    def jd_begin(self) -> float:
        """First Julian date covered by the file."""
        return self.ss[0]

    @property
    def jd_end(self) -> float:
        """Last Julian date covered by the file."""
        return self.ss[1]

    @property
    def closed(self) -> bool:
        """Whether the underlying file has been closed."""
        return self._file is None

    def close(self) -> None:
        """Close the file and drop the record buffer."""
        if self._file is not None:
            self._file.close()
            self._file = None
        self._buffer = ()

    def __enter__(self) -> JPLEphemeris:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _load_record(self, record_number: int) -> None:
        if self._file is None:
            raise EphemerisError("ephemeris file is closed", 1)
        self._file.seek((record_number - 1) * self.record_length)
        data = self._file.read(self.record_length)
        if len(data) != self.record_length:
            self.close()
            raise EphemerisError("error reading ephemeris file", 1)
        count = self.record_length // 8
        self._buffer = struct.unpack(f"={count}d", data[: count * 8])
        self._record_number = record_number

    def state(self, jed: Sequence[float], target: int) -> tuple[Triple, Triple]:
        """Interpolate barycentric position and velocity of ``target``.

        ``jed`` is a TDB Julian date split into two parts in any way. Targets
        are 0 Mercury ... 8 Pluto, 9 geocentric Moon, 10 Sun, with 2 the
        Earth-Moon barycenter. Raises EphemerisError with code 2 for an epoch
        outside the file and code 1 when the record cannot be read.
        """
        if self._file is None:
            raise EphemerisError("ephemeris file is closed", 1)
        if not 0 <= target < len(self.ipt):
            raise ValueError(f"invalid target {target}")

        ss0, ss1, span = self.ss
        if self.km:
            interval = span * 86400.0
            aufac = 1.0
        else:
            interval = span
            aufac = 1.0 / self.au

        whole, frac = split(jed[0] - 0.5)
        extra_whole, fraction = split(jed[1])
        whole += extra_whole + 0.5
        frac += fraction
        extra_whole, fraction = split(frac)
        whole += extra_whole

        if whole < ss0 or whole + fraction > ss1:
            raise EphemerisError("epoch out of range", 2)

        record_number = int((whole - ss0) / span) + 3
        if whole == ss1:
            record_number -= 2
        t0 = ((whole - ((record_number - 3) * span + ss0)) + fraction) / span

        if record_number != self._record_number:
            self._load_record(record_number)

        offset, ncf, na = self.ipt[target]
        position, velocity = self._interpolator.interpolate(
            self._buffer[offset - 1:], (t0, interval), ncf, na
        )
        pos = tuple(p * aufac for p in position)
        vel = tuple(v * aufac for v in velocity)
        return pos, vel  # type: ignore[return-value]

    def planet_ephemeris(
        self, tjd: Sequence[float], target: int, center: int
    ) -> tuple[Triple, Triple]:
        """Return position and velocity of ``target`` relative to ``center``.

        Bodies are numbered 0 Mercury ... 8 Pluto, 9 Moon, 10 Sun,
        11 solar system barycenter, 12 Earth-Moon barycenter. ``tjd`` is a
        split TDB Julian date.
        """
        for body in (target, center):
            if not 0 <= body <= EARTH_MOON_BARYCENTER:
                raise ValueError(f"invalid body {body}")

        jed = (tjd[0], tjd[1])

        if target == center:
            return _ZERO, _ZERO

        pos_earth, vel_earth = _ZERO, _ZERO
        pos_moon, vel_moon = _ZERO, _ZERO
        bodies = (target, center)

        if MOON in bodies or EARTH_MOON_BARYCENTER in bodies:
            pos_earth, vel_earth = self.state(jed, EARTH)
        if EARTH in bodies:
            pos_moon, vel_moon = self.state(jed, MOON)

        def lookup(body: int) -> tuple[Triple, Triple]:
            if body == SOLAR_SYSTEM_BARYCENTER:
                return _ZERO, _ZERO
            if body == EARTH_MOON_BARYCENTER:
                return pos_earth, vel_earth
            return self.state(jed, body)

        target_pos, target_vel = lookup(target)
        center_pos, center_vel = lookup(center)

        if target == EARTH and center == MOON:
            return _negate(center_pos), _negate(center_vel)
        if target == MOON and center == EARTH:
            return target_pos, target_vel

        ratio = 1.0 + self.em_ratio

        def earth_from_barycenter(bary: Triple, moon: Triple) -> Triple:
            return tuple(b - m / ratio for b, m in zip(bary, moon))  # type: ignore[return-value]

        def moon_from_geocentric(moon: Triple, bary: Triple) -> Triple:
            return tuple((b - m / ratio) + m for m, b in zip(moon, bary))  # type: ignore[return-value]

        if target == EARTH:
            target_pos = earth_from_barycenter(target_pos, pos_moon)
            target_vel = earth_from_barycenter(target_vel, vel_moon)
        elif center == EARTH:
            center_pos = earth_from_barycenter(center_pos, pos_moon)
            center_vel = earth_from_barycenter(center_vel, vel_moon)
        elif target == MOON:
            target_pos = moon_from_geocentric(target_pos, pos_earth)
            target_vel = moon_from_geocentric(target_vel, vel_earth)
        elif center == MOON:
            center_pos = moon_from_geocentric(center_pos, pos_earth)
            center_vel = moon_from_geocentric(center_vel, vel_earth)

        position = tuple(t - c for t, c in zip(target_pos, center_pos))
        velocity = tuple(t - c for t, c in zip(target_vel, center_vel))
        return position, velocity  # type: ignore[return-value]


def _negate(values: Triple) -> Triple:
    return tuple(-v for v in values)  # type: ignore[return-value]