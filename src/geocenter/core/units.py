"""
Unit systems and the sphere radius each one implies.

Earth is treated as a perfect sphere; the radius constant is the only thing a
unit system changes.
"""

from __future__ import annotations

from enum import Enum


class UnitSystem(str, Enum):
    MILES = "M"
    KILOMETERS = "K"

    @property
    def earth_radius(self) -> float:
        return EARTH_RADIUS[self]


EARTH_RADIUS: dict[UnitSystem, float] = {
    UnitSystem.MILES: 3958.756,
    UnitSystem.KILOMETERS: 6371.0,
}


def parse_units(indicator: str | None) -> UnitSystem:
    """Pick a unit system from a loose indicator ("miles", "km", "K", ...).

    Only the first character matters: `k`/`K` selects kilometers, anything
    else (including None or "") selects miles.
    """
    if indicator and str(indicator)[:1].upper() == "K":
        return UnitSystem.KILOMETERS
    return UnitSystem.MILES
