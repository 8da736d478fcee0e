from __future__ import annotations

from math import fmod

J2000_TT = 2451545.0  # JD(TT) at J2000.0


def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    # fmod of a tiny negative value can round up to exactly 360
    return 0.0 if y >= 360.0 else y


def julian_centuries(jde: float) -> float:
    """Julian centuries from J2000.0 in TT."""
    return (jde - J2000_TT) / 36525.0


def deg_to_seconds_of_time(deg: float) -> float:
    """Hour angle in degrees -> seconds of time (15 deg per hour)."""
    return deg * 240.0
