# adcs

This package provides attitude determination and control routines for a small satellite.
It is written in plain Python and needs no third-party libraries.

## Contents

- `adcs.vector`: `Vec3` is an immutable 3-vector. It is iterable and supports
  `dot`, `cross`, `magnitude`, `normalized`, `bisect`, `scaled`, `+`, `-` and
  unary `-`. Normalizing a vector shorter than 1e-6 raises `ZeroLengthError`,
  which is a `ValueError`.
- `adcs.matrix`: `Mat3` is an immutable 3×3 matrix whose fields are `x1` to
  `z3`, with rows x, y, z and columns 1, 2, 3. It offers `from_columns`,
  `transpose`, `scaled`, `det`, `inverse` and `apply`, which multiplies the
  matrix by a vector. The `@` operator multiplies by a matrix or by a `Vec3`.
  Inverting a matrix whose determinant is below 1e-6 in size raises
  `SingularMatrixError`.
- `adcs.quaternion`: `Quat` has a scalar part and a `Vec3` part. It supports
  `*` (the Hamilton product), `scaled`, `magnitude`, `normalized`,
  `conjugate`, `inverse` (the normalized conjugate), `from_axis_angle` and
  `rotate`.
- `adcs.bdot`: `bdot_control(mag, last_mag, delta_t)` returns magnetorquer
  coil currents in amperes. They oppose the change in the measured field,
  and their total magnitude is capped at 0.158 A.
- `adcs.ramp`: `RampController(starting_ms, left_leg_length_ms,
  right_leg_length_ms, plateau_length_ms, plateau_height)` describes a
  trapezoidal profile. `linear_command(t_curr)` returns the command at a given
  millisecond. The command is 0 before the start and after the fall. Negative
  times raise `ValueError`.
- `adcs.triad`: `triad(bod_sun, bod_mag, ref_sun, ref_mag)` returns the
  direction cosine matrix that rotates the reference frame into the body
  frame. It raises `TriadError` when a vector is zero or the sun and field
  vectors are parallel.
- `adcs.constants`: astronomical and physical constants, such as `T0`, `C`,
  `AU`, `AU_KM`, `ERAD`, `RMASS`, `TWOPI`, `ASEC2RAD`, `DEG2RAD` and
  `RAD2DEG`.
- `adcs.chebyshev`:
  - `split(tt)` breaks a number into an integer part and a non-negative
    fraction.
  - `ChebyshevInterpolator.interpolate(buf, t, ncf, na)` evaluates a block of
    Chebyshev coefficients and returns a position and a velocity.
- `adcs.ephemeris`: `JPLEphemeris.open(path)` reads the header of a binary
  JPL planetary ephemeris file. The supported files are DE200, DE403, DE404,
  DE405, DE406 and DE421.
  - The object is a context manager.
  - It exposes `jd_begin`, `jd_end`, `de_number` and `closed`.
  - `state(jed, target)` interpolates one body.
  - `planet_ephemeris(tjd, target, center)` gives one body relative to
    another. Bodies are numbered 0 Mercury … 8 Pluto, 9 Moon, 10 Sun,
    11 solar system barycenter and 12 Earth-Moon barycenter.
  - Failures raise `EphemerisError`, and its `code` attribute tells them
    apart. Code 1 means the file is missing or unreadable. Codes 2–10 mean a
    short header. Code 2 from `state` means the epoch is out of range.
    Code 11 means an unknown DE number.
- `adcs.solarsystem`: `solarsystem(ephemeris, tjd, body, origin)` and
  `solarsystem_hp(ephemeris, tjd, body, origin)` take a split Julian date.
  Both return the position in AU and the velocity in AU/day of a body in an
  open `JPLEphemeris`. Bodies are Mercury = 1 … Pluto = 9, Sun = 10 and
  Moon = 11. The origin is 0 for the barycenter, 1 for the Sun and 2 for the
  Earth.

## Example

```python
import math

from adcs.quaternion import Quat
from adcs.triad import triad
from adcs.vector import Vec3

attitude = triad(
    Vec3(1.0, 0.0, 0.0),   # measured sun
    Vec3(0.0, 0.0, 1.0),   # measured field
    Vec3(0.0, 1.0, 0.0),   # reference sun
    Vec3(0.0, 0.0, 1.0),   # reference field
)
print(attitude @ Vec3(0.0, 1.0, 0.0))

q = Quat.from_axis_angle(math.pi / 2, Vec3(0.0, 0.0, 1.0))
print(q.rotate(Vec3(1.0, 0.0, 0.0)))
```

To look up bodies you need a JPL ephemeris file, which does not ship with the
package:

```python
from adcs.ephemeris import JPLEphemeris
from adcs.solarsystem import solarsystem

with JPLEphemeris.open("JPLEPH") as eph:
    position, velocity = solarsystem(eph, 2451545.0, 3, 0)
```

## What it does not do

The package has no geomagnetic field model and no closed-form sun position.
For `triad`, you have to supply the reference sun and field vectors yourself.

It has no PID controller and no sensor filtering or calibration helpers.

It does not talk to satellite hardware, and it has no detumbling loop. The
`bdot_control` function only computes a command; sending that command to the
coils is up to the caller.

## Running the tests

```
pip install -e ".[test]"
pytest
```