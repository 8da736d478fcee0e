from __future__ import annotations
from soltime.core.calculator import CalculatorRegistry
from soltime.calculators import StdSolarCalculator


def build_registry() -> CalculatorRegistry:
    """Registry holding the four standard calculators under their enum names."""
    return CalculatorRegistry({member.name: member for member in StdSolarCalculator})


def install() -> None:
    """Make the standard registry the one used by soltime.api."""
    from soltime.api import set_registry
    set_registry(build_registry())
