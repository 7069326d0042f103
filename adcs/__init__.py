"""Vector, matrix and quaternion math, TRIAD, B-dot and ramp control, and JPL ephemeris lookup for small-satellite attitude work."""

__version__ = "0.1.0"