"""Astronomical and physical constants."""

# TDB Julian date of epoch J2000.0.
T0 = 2451545.00000000

# Speed of light in meters/second.
C = 299792458.0

# Light-time for one astronomical unit in seconds (DE-405).
AU_SEC = 499.0047838061

# Speed of light in AU/day; 86400 / AU_SEC.
C_AUDAY = 173.1446326846693

# Astronomical unit in meters; AU_SEC * C.
AU = 1.4959787069098932e11

# Astronomical unit in kilometers.
AU_KM = 1.4959787069098932e8

# Heliocentric gravitational constant in m^3/s^2 (DE-405).
GS = 1.32712440017987e20

# Geocentric gravitational constant in m^3/s^2 (DE-405).
GE = 3.98600433e14

# Equatorial radius of Earth in meters (IERS Conventions 2003).
ERAD = 6378136.6

# Earth ellipsoid flattening, 1 / 298.25642 (IERS Conventions 2003).
F = 0.003352819697896

# Rotational angular velocity of Earth in rad/s (IERS Conventions 2003).
ANGVEL = 7.2921150e-5

# Reciprocal masses (Sun mass / body mass), DE-405:
# Earth-Moon barycenter, Mercury, ..., Pluto, Sun, Moon.
RMASS = (
    328900.561400,
    6023600.0,
    408523.71,
    332946.050895,
    3098708.0,
    1047.3486,
    3497.898,
    22902.98,
    19412.24,
    135200000.0,
    1.0,
    27068700.387534,
)

# 2 * pi in radians.
TWOPI = 6.283185307179586476925287

# Arcseconds in 360 degrees.
ASEC360 = 1296000.0

# Angle conversions.
ASEC2RAD = 4.848136811095359935899141e-6
DEG2RAD = 0.017453292519943296
RAD2DEG = 57.295779513082321