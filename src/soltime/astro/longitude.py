"""
soltime.astro.longitude
-----------------------
Solar mean elements, apparent ecliptic longitude and the equation of time.

Two precision levels:
- low: mean longitude + 3-term equation of centre (Meeus ch. 25),
- high: 49-term periodic series of Bretagnon & Simon ("Planetary Programs
  and Tables from -4000 to +2800") plus aberration and nutation.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np

from .angles import wrap_deg


def _horner(T: float, coeffs: Tuple[float, ...]) -> float:
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * T + c
    return acc


@dataclass(frozen=True)
class SolarMeanModel:
    """Polynomial coefficients (ascending powers of T) of the solar mean elements."""
    name: str
    mean_longitude: Tuple[float, ...]
    mean_anomaly: Tuple[float, ...]
    eccentricity: Tuple[float, ...]

    def L0(self, T: float) -> float:
        """Geometric mean longitude (degrees, sign-preserving remainder of 360)."""
        return math.fmod(_horner(T, self.mean_longitude), 360.0)

    def M(self, T: float) -> float:
        """Mean anomaly (degrees, unreduced)."""
        return _horner(T, self.mean_anomaly)

    def e(self, T: float) -> float:
        """Eccentricity of the Earth's orbit."""
        return _horner(T, self.eccentricity)


# Meeus (25.2), (25.3), (25.4)
MEEUS = SolarMeanModel(
    name="meeus",
    mean_longitude=(280.46646, 36000.76983, 0.0003032),
    mean_anomaly=(357.52911, 35999.05029, -0.0001537),
    eccentricity=(0.016708634, -0.000042037, -0.0000001267),
)

# Calendrical Calculations (3rd ed.)
CALENDRICAL = SolarMeanModel(
    name="calendrical",
    mean_longitude=(280.46645, 36000.76983, 0.0003032),
    mean_anomaly=(357.5291, 35999.0503, -0.0001559, 0.00000048),
    eccentricity=(0.016708617, -0.000042037, -0.0000001236),
)


# ------------------------------------------------------------
# Low precision
# ------------------------------------------------------------

def equation_of_center(T: float, model: SolarMeanModel = MEEUS) -> float:
    """Equation of centre (degrees), three sine terms."""
    m = math.radians(model.M(T))
    return (
        math.sin(m) * (1.914602 - (0.004817 + 0.000014 * T) * T)
        + math.sin(2 * m) * (0.019993 - 0.000101 * T)
        + math.sin(3 * m) * 0.000289
    )


def apparent_longitude_low(T: float, model: SolarMeanModel = MEEUS) -> float:
    """Apparent longitude with the leading nutation/aberration correction (degrees, unreduced)."""
    omega = math.radians(125.04 - 1934.136 * T)
    return model.L0(T) + equation_of_center(T, model) - 0.00569 - 0.00478 * math.sin(omega)


# ------------------------------------------------------------
# High precision (49-term series)
# ------------------------------------------------------------

# amplitude, phase (deg), frequency (deg per Julian century)
_SERIES_49 = np.array([
    (403406, 270.54861, 0.9287892),
    (195207, 340.19128, 35999.1376958),
    (119433, 63.91854, 35999.4089666),
    (112392, 331.2622, 35998.7287385),
    (3891, 317.843, 71998.20261),
    (2819, 86.631, 71998.4403),
    (1721, 240.052, 36000.35726),
    (660, 310.26, 71997.4812),
    (350, 247.23, 32964.4678),
    (334, 260.87, -19.441),
    (314, 297.82, 445267.1117),
    (268, 343.14, 45036.884),
    (242, 166.79, 3.1008),
    (234, 81.53, 22518.4434),
    (158, 3.5, -19.9739),
    (132, 132.75, 65928.9345),
    (129, 182.95, 9038.0293),
    (114, 162.03, 3034.7684),
    (99, 29.8, 33718.148),
    (93, 266.4, 3034.448),
    (86, 249.2, -2280.773),
    (78, 157.6, 29929.992),
    (72, 257.8, 31556.493),
    (68, 185.1, 149.588),
    (64, 69.9, 9037.75),
    (46, 8.0, 107997.405),
    (38, 197.1, -4444.176),
    (37, 250.4, 151.771),
    (32, 65.3, 67555.316),
    (29, 162.7, 31556.08),
    (28, 341.5, -4561.54),
    (27, 291.6, 107996.706),
    (27, 98.5, 1221.655),
    (25, 146.7, 62894.167),
    (24, 110.0, 31437.369),
    (21, 5.2, 14578.298),
    (21, 342.6, -31931.757),
    (20, 230.9, 34777.243),
    (18, 256.1, 1221.999),
    (17, 45.3, 62894.511),
    (14, 242.9, -4442.039),
    (13, 115.2, 107997.909),
    (13, 151.8, 119.066),
    (13, 285.3, 16859.071),
    (12, 53.3, -4.578),
    (10, 126.6, 26895.292),
    (10, 205.7, -39.127),
    (10, 85.9, 12297.536),
    (10, 146.1, 90073.778),
], dtype=float)
_SERIES_49.flags.writeable = False

LONGITUDE_TERMS = len(_SERIES_49)


def aberration(T: float) -> float:
    """Aberration correction (degrees)."""
    return 0.0000974 * math.cos(math.radians(177.63 + 35999.01848 * T)) - 0.005575


def apparent_solar_longitude(T: float, nutation_deg: float) -> float:
    """Apparent solar longitude in [0, 360) from the 49-term series."""
    amp, phase, freq = _SERIES_49[:, 0], _SERIES_49[:, 1], _SERIES_49[:, 2]
    p49 = float(np.sum(amp * np.sin(np.radians(phase + freq * T))))
    lon = (
        282.7771834 + 36000.76953744 * T
        + 5.729577951308232 * p49 / 1_000_000
        + aberration(T)
        + nutation_deg
    )
    return wrap_deg(lon)


# ------------------------------------------------------------
# Shared derived quantities
# ------------------------------------------------------------

def declination_deg(longitude_deg: float, obliquity_deg: float) -> float:
    """Declination of a body on the ecliptic (latitude 0)."""
    return math.degrees(math.asin(
        math.sin(math.radians(obliquity_deg)) * math.sin(math.radians(longitude_deg))))


def right_ascension_deg(longitude_deg: float, obliquity_deg: float) -> float:
    """Right ascension in [0, 360) of a body on the ecliptic."""
    lam = math.radians(longitude_deg)
    y = math.cos(math.radians(obliquity_deg)) * math.sin(lam)
    return wrap_deg(math.degrees(math.atan2(y, math.cos(lam))))


def equation_of_time_seconds(T: float, obliquity_deg: float, model: SolarMeanModel = MEEUS) -> float:
    """
    Equation of time in seconds (Meeus p.185, lower accuracy model).

    Uses the expansion in y = tan²(ε/2) and the orbit eccentricity; good
    to better than a minute.
    """
    tan_half = math.tan(math.radians(obliquity_deg / 2))
    y = tan_half * tan_half
    l2 = math.radians(2 * model.L0(T))
    e = model.e(T)
    m = math.radians(model.M(T))
    sin_m = math.sin(m)
    eot = (
        y * math.sin(l2)
        - 2 * e * sin_m
        + 4 * e * y * sin_m * math.cos(l2)
        - y * y * math.sin(2 * l2) / 2
        - 5 * e * e * math.sin(2 * m) / 4
    )
    return math.degrees(eot) * 240
