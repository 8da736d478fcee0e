from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime, timezone
from enum import Enum

# Feature names understood by SolarCalculator.get_feature()
DECLINATION = "declination"
RIGHT_ASCENSION = "right-ascension"
NUTATION = "nutation"
OBLIQUITY = "obliquity"
MEAN_ANOMALY = "mean-anomaly"
SOLAR_LONGITUDE = "solar-longitude"
SOLAR_LATITUDE = "solar-latitude"

# Apparent solar radius and standard horizontal refraction (arc minutes)
SUN_RADIUS = 16.0
STD_REFRACTION = 34.0
STD_ZENITH = 90.0 + (SUN_RADIUS + STD_REFRACTION) / 60.0


class TimeScale(Enum):
    """
    Counting scale of a calculated instant.

    UT counts from the start of the leap-second era (1972-01-01),
    POSIX from the Unix epoch. Both count 86400 seconds per day.
    """
    UT = date(1972, 1, 1)
    POSIX = date(1970, 1, 1)

    @property
    def epoch(self) -> datetime:
        d = self.value
        return datetime(d.year, d.month, d.day, tzinfo=timezone.utc)


class Precision(Enum):
    MINUTE = 60
    SECOND = 1


class Twilight(Enum):
    """Zenith angles (degrees) of the twilight definitions."""
    CIVIL = 96.0
    NAUTICAL = 102.0
    ASTRONOMICAL = 108.0

    @property
    def zenith(self) -> float:
        return self.value


@dataclass(frozen=True)
class GeoPosition:
    latitude: float       # degrees, north positive
    longitude: float      # degrees, east positive
    altitude: int = 0     # metres above sea level


@dataclass(frozen=True)
class SolarEvent:
    """A calculated sunrise/sunset instant in UTC."""
    instant: datetime
    precision: Precision
    scale: TimeScale

    def local(self, tz) -> datetime:
        """Same instant converted to the given tzinfo."""
        return self.instant.astimezone(tz)
