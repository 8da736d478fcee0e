from __future__ import annotations
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional, Protocol

from .errors import UnknownCalculatorError
from .types import SolarEvent


class SolarCalculator(Protocol):
    """
    Contract shared by all solar calculators.

    Arguments named ``jde`` are Julian days in ephemeris time (TT).
    Angles are degrees, longitudes positive east, altitudes in metres.
    """
    name: str

    def sunrise(self, d: date, latitude: float, longitude: float, zenith: float) -> Optional[SolarEvent]:
        """Moment the sun's centre reaches ``zenith`` in the morning, or None if it never does."""
        ...

    def sunset(self, d: date, latitude: float, longitude: float, zenith: float) -> Optional[SolarEvent]:
        """Moment the sun's centre reaches ``zenith`` in the evening, or None if it never does."""
        ...

    def equation_of_time(self, jde: float) -> float:
        """Apparent minus mean solar time in seconds."""
        ...

    def declination(self, jde: float) -> float: ...

    def right_ascension(self, jde: float) -> float: ...

    def get_feature(self, jde: float, name: str) -> float:
        """Named auxiliary quantity, or NaN if this calculator does not support ``name``."""
        ...

    def geodetic_angle(self, latitude: float, altitude: int) -> float: ...

    def zenith_angle(self, latitude: float, altitude: int) -> float: ...


@dataclass
class CalculatorRegistry:
    _calculators: Dict[str, SolarCalculator]

    def get(self, name: str) -> SolarCalculator:
        if name not in self._calculators:
            raise UnknownCalculatorError(f"Unknown calculator '{name}'. Available: {sorted(self._calculators)}")
        return self._calculators[name]

    def list(self) -> List[str]:
        return sorted(self._calculators.keys())

    def register(self, calculator: SolarCalculator, *, overwrite: bool = False) -> None:
        name = calculator.name
        if (not overwrite) and (name in self._calculators):
            raise KeyError(f"Calculator '{name}' already exists. Use overwrite=True to replace.")
        self._calculators[name] = calculator
