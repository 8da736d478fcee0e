"""
soltime.calculators.meeus
-------------------------
High-precision calculator based mainly on Jean Meeus, "Astronomical
Algorithms" (2nd ed.): full 63-term nutation, 49-term solar longitude and a
fixed-point solver for the hour angle.

The observer's altitude is taken into account with the WGS84 spheroid and
refraction in a standard atmosphere. Local topography and weather are not.

Supported features (degrees): right-ascension, declination, nutation,
obliquity, mean-anomaly, solar-longitude, solar-latitude.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Optional

from ..astro import geodesy
from ..astro import longitude as lon
from ..astro.angles import deg_to_seconds_of_time, julian_centuries
from ..astro.nutation import nutation, true_obliquity, true_obliquity_short
from ..config import load_settings
from ..core.types import (
    DECLINATION, MEAN_ANOMALY, NUTATION, OBLIQUITY, RIGHT_ASCENSION, SOLAR_LATITUDE, SOLAR_LONGITUDE,
    STD_REFRACTION, STD_ZENITH, SUN_RADIUS, Precision, SolarEvent, TimeScale,
)
from ..reference import time_scales as ts

logger = logging.getLogger(__name__)

# successive hour-angle estimates closer than this (seconds) end the solver
CONVERGENCE_SECONDS = 15.0


@dataclass(frozen=True)
class HourAngleSolution:
    seconds: float      # hour angle in seconds of time, negative before noon
    iterations: int


def _declination_rad(T: float) -> float:
    nut = nutation(T)
    return math.radians(lon.declination_deg(
        lon.apparent_solar_longitude(T, nut.longitude), true_obliquity(T, nut)))


def local_hour_angle(jde: float, latitude: float, zenith: float, *, rise: bool) -> float:
    """Hour angle of the event in seconds of time (negative for rise), NaN if none."""
    dec = _declination_rad(julian_centuries(jde))
    lat = math.radians(latitude)
    cos_h = (math.cos(math.radians(zenith)) - math.sin(dec) * math.sin(lat)) / (math.cos(dec) * math.cos(lat))
    if cos_h > 1.0 or cos_h < -1.0:
        return math.nan
    h = deg_to_seconds_of_time(math.degrees(math.acos(cos_h)))
    return -h if rise else h


def solve_hour_angle(
    jde_noon: float,
    latitude: float,
    zenith: float,
    *,
    rise: bool,
    max_iterations: Optional[int] = None,
) -> Optional[HourAngleSolution]:
    """
    Re-evaluate the hour angle at the previously estimated instant until two
    successive estimates differ by less than CONVERGENCE_SECONDS.

    Returns None when the sun does not reach ``zenith`` at any step or when
    the iteration cap is exhausted.
    """
    if max_iterations is None:
        max_iterations = load_settings().max_iterations
    new_h = 0.0
    for i in range(1, max_iterations + 1):
        old_h = new_h
        new_h = local_hour_angle(jde_noon + old_h / 86400, latitude, zenith, rise=rise)
        if math.isnan(new_h):
            return None
        if abs(new_h - old_h) < CONVERGENCE_SECONDS:
            logger.debug("hour angle converged after %d iterations", i)
            return HourAngleSolution(seconds=new_h, iterations=i)
    logger.warning(
        "hour angle did not converge within %d iterations (latitude=%s, zenith=%s)",
        max_iterations, latitude, zenith,
    )
    return None


@dataclass(frozen=True)
class MeeusCalculator:
    name: str = "TIME4J"

    def sunrise(self, d: date, latitude: float, longitude: float, zenith: float) -> Optional[SolarEvent]:
        return self._event(d, latitude, longitude, zenith, rise=True)

    def sunset(self, d: date, latitude: float, longitude: float, zenith: float) -> Optional[SolarEvent]:
        return self._event(d, latitude, longitude, zenith, rise=False)

    def equation_of_time(self, jde: float) -> float:
        # lower accuracy model (Meeus p.185) with the short obliquity correction
        T = julian_centuries(jde)
        return lon.equation_of_time_seconds(T, true_obliquity_short(T), lon.MEEUS)

    def declination(self, jde: float) -> float:
        return self.get_feature(jde, DECLINATION)

    def right_ascension(self, jde: float) -> float:
        return self.get_feature(jde, RIGHT_ASCENSION)

    def get_feature(self, jde: float, name: str) -> float:
        T = julian_centuries(jde)
        if name == DECLINATION:
            return math.degrees(_declination_rad(T))
        if name == RIGHT_ASCENSION:
            nut = nutation(T)
            return lon.right_ascension_deg(
                lon.apparent_solar_longitude(T, nut.longitude), true_obliquity(T, nut))
        if name == NUTATION:
            return nutation(T).longitude
        if name == OBLIQUITY:
            return true_obliquity(T)
        if name == MEAN_ANOMALY:
            return lon.MEEUS.M(T)
        if name == SOLAR_LONGITUDE:
            return lon.apparent_solar_longitude(T, nutation(T).longitude)
        if name == SOLAR_LATITUDE:
            return 0.0  # approximation used by this model
        return math.nan

    def geodetic_angle(self, latitude: float, altitude: int) -> float:
        return geodesy.ellipsoidal_dip(latitude, altitude)

    def zenith_angle(self, latitude: float, altitude: int) -> float:
        if altitude == 0:
            return STD_ZENITH
        refraction = geodesy.refraction_factor(altitude) * STD_REFRACTION
        return 90 + self.geodetic_angle(latitude, altitude) + (SUN_RADIUS + refraction) / 60.0

    def _event(self, d: date, latitude: float, longitude: float, zenith: float, *, rise: bool) -> Optional[SolarEvent]:
        noon = ts.local_event(d, 12, longitude, self.equation_of_time)
        solution = solve_hour_angle(ts.to_jde(noon), latitude, zenith, rise=rise)
        if solution is None:
            return None
        instant = ts.floor_seconds(noon + timedelta(seconds=solution.seconds))
        return SolarEvent(instant=instant, precision=Precision.SECOND, scale=TimeScale.UT)
