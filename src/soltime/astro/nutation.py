"""
soltime.astro.nutation
----------------------
Nutation and obliquity of the ecliptic (Meeus, Astronomical Algorithms, ch. 22).

The 63-row periodic table is held as a read-only numpy array. Each row is
  (D, M, M', F, Ω multipliers, a, b, c, d)
and contributes sin(arg)·(a + b·T) to Δψ and cos(arg)·(c + d·T) to Δε,
in units of 0.0001 arc seconds.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

import numpy as np

_TABLE_22A = np.array([
    [0, 0, 0, 0, 1, -171996, -174.2, 92025, 8.9],
    [-2, 0, 0, 2, 2, -13187, -1.6, 5736, -3.1],
    [0, 0, 0, 2, 2, -2274, -0.2, 977, -0.5],
    [0, 0, 0, 0, 2, 2062, 0.2, -895, 0.5],
    [0, 1, 0, 0, 0, 1426, -3.4, 54, -0.1],
    [0, 0, 1, 0, 0, 712, 0.1, -7, 0],
    [-2, 1, 0, 2, 2, -517, 1.2, 224, -0.6],
    [0, 0, 0, 2, 1, -386, -0.4, 200, 0],
    [0, 0, 1, 2, 2, -301, 0, 129, -0.1],
    [-2, -1, 0, 2, 2, 217, -0.5, -95, 0.3],
    [-2, 0, 1, 0, 0, -158, 0, 0, 0],
    [-2, 0, 0, 2, 1, 129, 0.1, -70, 0],
    [0, 0, -1, 2, 2, 123, 0, -53, 0],
    [2, 0, 0, 0, 0, 63, 0, 0, 0],
    [0, 0, 1, 0, 1, 63, 0.1, -33, 0],
    [2, 0, -1, 2, 2, -59, 0, 26, 0],
    [0, 0, -1, 0, 1, -58, -0.1, 32, 0],
    [0, 0, 1, 2, 1, -51, 0, 27, 0],
    [-2, 0, 2, 0, 0, 48, 0, 0, 0],
    [0, 0, -2, 2, 1, 46, 0, -24, 0],
    [2, 0, 0, 2, 2, -38, 0, 16, 0],
    [0, 0, 2, 2, 2, -31, 0, 13, 0],
    [0, 0, 2, 0, 0, 29, 0, 0, 0],
    [-2, 0, 1, 2, 2, 29, 0, -12, 0],
    [0, 0, 0, 2, 0, 26, 0, 0, 0],
    [-2, 0, 0, 2, 0, -22, 0, 0, 0],
    [0, 0, -1, 2, 1, 21, 0, -10, 0],
    [0, 2, 0, 0, 0, 17, -0.1, 0, 0],
    [2, 0, -1, 0, 1, 16, 0, -8, 0],
    [-2, 2, 0, 2, 2, -16, 0.1, 7, 0],
    [0, 1, 0, 0, 1, -15, 0, 9, 0],
    [-2, 0, 1, 0, 1, -13, 0, 7, 0],
    [0, -1, 0, 0, 1, -12, 0, 6, 0],
    [0, 0, 2, -2, 0, 11, 0, 0, 0],
    [2, 0, -1, 2, 1, -10, 0, 5, 0],
    [2, 0, 1, 2, 2, -8, 0, 3, 0],
    [0, 1, 0, 2, 2, 7, 0, -3, 0],
    [-2, 1, 1, 0, 0, -7, 0, 0, 0],
    [0, -1, 0, 2, 2, -7, 0, 3, 0],
    [2, 0, 0, 2, 1, -7, 0, 3, 0],
    [2, 0, 1, 0, 0, 6, 0, 0, 0],
    [-2, 0, 2, 2, 2, 6, 0, -3, 0],
    [-2, 0, 1, 2, 1, 6, 0, -3, 0],
    [2, 0, -2, 0, 1, -6, 0, 3, 0],
    [2, 0, 0, 0, 1, -6, 0, 3, 0],
    [0, -1, 1, 0, 0, 5, 0, 0, 0],
    [-2, -1, 0, 2, 1, -5, 0, 3, 0],
    [-2, 0, 0, 0, 1, -5, 0, 3, 0],
    [0, 0, 2, 2, 1, -5, 0, 3, 0],
    [-2, 0, 2, 0, 1, 4, 0, 0, 0],
    [-2, 1, 0, 2, 1, 4, 0, 0, 0],
    [0, 0, 1, -2, 0, 4, 0, 0, 0],
    [-1, 0, 1, 0, 0, -4, 0, 0, 0],
    [-2, 1, 0, 0, 0, -4, 0, 0, 0],
    [1, 0, 0, 0, 0, -4, 0, 0, 0],
    [0, 0, 1, 2, 0, 3, 0, 0, 0],
    [0, 0, -2, 2, 2, -3, 0, 0, 0],
    [-1, -1, 1, 0, 0, -3, 0, 0, 0],
    [0, 1, 1, 0, 0, -3, 0, 0, 0],
    [0, -1, 1, 2, 2, -3, 0, 0, 0],
    [2, -1, -1, 2, 2, -3, 0, 0, 0],
    [0, 0, 3, 2, 2, -3, 0, 0, 0],
    [2, -1, 0, 2, 2, -3, 0, 0, 0],
], dtype=float)
_TABLE_22A.flags.writeable = False

_MULTIPLIERS = _TABLE_22A[:, :5]
_PSI_A, _PSI_B = _TABLE_22A[:, 5], _TABLE_22A[:, 6]
_EPS_C, _EPS_D = _TABLE_22A[:, 7], _TABLE_22A[:, 8]

NUTATION_TERMS = len(_TABLE_22A)

_UNIT_DEG = 0.0001 / 3600.0


@dataclass(frozen=True)
class Nutation:
    """Nutation in longitude (Δψ) and in obliquity (Δε), degrees."""
    longitude: float
    obliquity: float


def fundamental_args_rad(T: float) -> np.ndarray:
    """D, M, M', F, Ω (Meeus 22) in radians, as a length-5 array."""
    D = 297.85036 + (445267.11148 + (-0.0019142 + T / 189474.0) * T) * T
    M = 357.52772 + (35999.050340 + (-0.0001603 - T / 300000.0) * T) * T
    Mp = 134.96298 + (477198.867398 + (0.0086972 + T / 56250.0) * T) * T
    F = 93.27191 + (483202.017538 + (-0.0036825 + T / 327270.0) * T) * T
    Om = 125.04452 + (-1934.136261 + (0.0020708 + T / 450000.0) * T) * T
    return np.radians(np.array([D, M, Mp, F, Om]))


def nutation(T: float) -> Nutation:
    """Full 63-term nutation at Julian century T."""
    args = _MULTIPLIERS @ fundamental_args_rad(T)
    d_psi = float(np.sum(np.sin(args) * (_PSI_A + _PSI_B * T)))
    d_eps = float(np.sum(np.cos(args) * (_EPS_C + _EPS_D * T)))
    return Nutation(longitude=d_psi * _UNIT_DEG, obliquity=d_eps * _UNIT_DEG)


def nutation_in_longitude_short(T: float) -> float:
    """Two-term Δψ (degrees), Calendrical Calculations style."""
    a = math.radians(124.90 + (-1934.134 + 0.002063 * T) * T)
    b = math.radians(201.11 + (72001.5377 + 0.00057 * T) * T)
    return -0.004778 * math.sin(a) - 0.0003667 * math.sin(b)


def mean_obliquity(T: float) -> float:
    """Mean obliquity of the ecliptic, IAU 1980 (Meeus 22.2), degrees."""
    return 23.0 + 26.0 / 60.0 + (21.448 + (-46.815 + (-0.00059 + 0.001813 * T) * T) * T) / 3600.0


def true_obliquity(T: float, nut: Optional[Nutation] = None) -> float:
    """Mean obliquity plus the full nutation in obliquity; pass ``nut`` to reuse a computed series."""
    if nut is None:
        nut = nutation(T)
    return mean_obliquity(T) + nut.obliquity


def true_obliquity_short(T: float) -> float:
    """Mean obliquity with the leading nutation term only (Meeus 25.8)."""
    return mean_obliquity(T) + 0.00256 * math.cos(math.radians(125.04 - 1934.136 * T))
