from __future__ import annotations

from datetime import date
from typing import List, Optional

from .core.calculator import CalculatorRegistry, SolarCalculator
from .core.types import STD_ZENITH, SolarEvent

_registry: Optional[CalculatorRegistry] = None

def set_registry(reg: CalculatorRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalculatorRegistry:
    if _registry is None:
        raise RuntimeError("Calculator registry not initialized")
    return _registry

def list_calculators() -> List[str]:
    return _reg().list()

def get_calculator(name: str) -> SolarCalculator:
    return _reg().get(name)

def register_calculator(calculator: SolarCalculator, *, overwrite: bool = False) -> None:
    _reg().register(calculator, overwrite=overwrite)

def sunrise(
    d: date,
    latitude: float,
    longitude: float,
    *,
    zenith: float = STD_ZENITH,
    calculator: str = "NOAA",
) -> Optional[SolarEvent]:
    return get_calculator(calculator).sunrise(d, latitude, longitude, zenith)

def sunset(
    d: date,
    latitude: float,
    longitude: float,
    *,
    zenith: float = STD_ZENITH,
    calculator: str = "NOAA",
) -> Optional[SolarEvent]:
    return get_calculator(calculator).sunset(d, latitude, longitude, zenith)
