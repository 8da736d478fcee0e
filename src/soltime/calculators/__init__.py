"""Standard solar calculators.

Each member of StdSolarCalculator is itself usable as a SolarCalculator;
calls are forwarded to the stateless implementation it wraps.
"""

from __future__ import annotations

from datetime import date
from enum import Enum
from typing import Optional

from ..core.calculator import SolarCalculator
from ..core.types import SolarEvent
from .cc import CalendricalCalculator
from .meeus import MeeusCalculator
from .noaa import NoaaCalculator
from .simple import SimpleCalculator


class StdSolarCalculator(Enum):
    SIMPLE = SimpleCalculator()
    NOAA = NoaaCalculator()
    CC = CalendricalCalculator()
    TIME4J = MeeusCalculator()

    @property
    def calculator(self) -> SolarCalculator:
        return self.value

    def sunrise(self, d: date, latitude: float, longitude: float, zenith: float) -> Optional[SolarEvent]:
        return self.value.sunrise(d, latitude, longitude, zenith)

    def sunset(self, d: date, latitude: float, longitude: float, zenith: float) -> Optional[SolarEvent]:
        return self.value.sunset(d, latitude, longitude, zenith)

    def equation_of_time(self, jde: float) -> float:
        return self.value.equation_of_time(jde)

    def declination(self, jde: float) -> float:
        return self.value.declination(jde)

    def right_ascension(self, jde: float) -> float:
        return self.value.right_ascension(jde)

    def get_feature(self, jde: float, name: str) -> float:
        return self.value.get_feature(jde, name)

    def geodetic_angle(self, latitude: float, altitude: int) -> float:
        return self.value.geodetic_angle(latitude, altitude)

    def zenith_angle(self, latitude: float, altitude: int) -> float:
        return self.value.zenith_angle(latitude, altitude)


__all__ = [
    "StdSolarCalculator",
    "SimpleCalculator",
    "NoaaCalculator",
    "CalendricalCalculator",
    "MeeusCalculator",
]
