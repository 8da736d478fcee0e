"""
soltime.astro.geodesy
---------------------
Dip of the horizon for an elevated observer and refraction in a standard atmosphere.
"""

from __future__ import annotations

import math

MEAN_EARTH_RADIUS = 6372000.0      # metres, spherical model
EQUATORIAL_RADIUS = 6378137.0      # metres, WGS84
POLAR_RADIUS = 6356752.3           # metres, WGS84

# empirical extra dip from refraction along the line of sight, arc seconds per sqrt(metre)
_DIP_REFRACTION = 19.0


def spherical_dip(altitude: float) -> float:
    """
    Geometric dip of the horizon on a spherical Earth plus an empirical
    refraction term proportional to sqrt(altitude) (degrees).
    """
    if altitude == 0:
        return 0.0
    r = MEAN_EARTH_RADIUS
    return math.degrees(math.acos(r / (r + altitude))) + math.sqrt(altitude) * (_DIP_REFRACTION / 3600)


def prime_vertical_radius(latitude: float) -> float:
    """Radius of curvature of the WGS84 ellipsoid in the prime vertical (metres)."""
    lat = math.radians(latitude)
    r1 = EQUATORIAL_RADIUS * math.cos(lat)
    r2 = POLAR_RADIUS * math.sin(lat)
    return EQUATORIAL_RADIUS * EQUATORIAL_RADIUS / math.sqrt(r1 * r1 + r2 * r2)


def ellipsoidal_dip(latitude: float, altitude: float) -> float:
    """Geometric dip of the horizon on the WGS84 ellipsoid (degrees)."""
    if altitude == 0:
        return 0.0
    r = prime_vertical_radius(latitude)
    return math.degrees(math.acos(r / (r + altitude)))


def refraction_factor(altitude: float) -> float:
    """
    Scale factor for horizontal refraction at the given altitude in the
    ICAO standard atmosphere, relative to 1010 hPa and 10 °C.
    """
    temperature = 15.0 - 0.0065 * altitude          # °C
    pressure = 1013.25 * max(0.0, 1.0 - 0.0065 * altitude / 288.15) ** 5.255  # hPa
    return (pressure / 1010.0) * (283.0 / (273.0 + temperature))
