"""soltime public API.

Sunrise, sunset and related solar quantities from four interchangeable
calculators (SIMPLE, NOAA, CC, TIME4J).
"""

from . import _bootstrap

_bootstrap.install()

from .api import (
    list_calculators,
    get_calculator,
    register_calculator,
    sunrise,
    sunset,
)
from .calculators import StdSolarCalculator
from .core.calculator import SolarCalculator
from .core.errors import SoltimeError, UnknownCalculatorError
from .core.types import GeoPosition, Precision, SolarEvent, TimeScale, Twilight, STD_ZENITH
from .solar_time import SolarTime

__all__ = [
    "list_calculators",
    "get_calculator",
    "register_calculator",
    "sunrise",
    "sunset",
    "StdSolarCalculator",
    "SolarCalculator",
    "SolarTime",
    "SoltimeError",
    "UnknownCalculatorError",
    "GeoPosition",
    "Precision",
    "SolarEvent",
    "TimeScale",
    "Twilight",
    "STD_ZENITH",
]
