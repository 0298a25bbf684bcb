"""
GeoDistance: the library's public entry point.

One instance is bound to a unit system (miles or kilometers) for its whole
lifetime; every distance it returns, and every radius it accepts, is in those
units. Instances hold no other state and are safe to share between threads.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable

from geocenter.centers.midpoint import compute_midpoint
from geocenter.centers.minimum_distance import distance_to_point_list, find_minimum_distance_point
from geocenter.config.settings import Settings, get_settings
from geocenter.core import geo
from geocenter.core.units import UnitSystem, parse_units
from geocenter.domain.models import Bounds, DistanceResult, GeoPoint, as_geo_point
from geocenter.geometry.bounds import BoundsCheck, compute_bounds, is_in_bounds

logger = logging.getLogger(__name__)


def _as_points(points: Iterable[Any] | None) -> list[GeoPoint]:
    return [as_geo_point(p) for p in points or []]


class GeoDistance:
    """Great-circle distances, bounding boxes and centers on a spherical Earth."""

    def __init__(self, units: str | None = None):
        self._units = parse_units(units)
        self._earth_radius = self._units.earth_radius

    def __repr__(self) -> str:
        return f"GeoDistance(units={self._units.name.lower()!r})"

    @property
    def units(self) -> UnitSystem:
        return self._units

    @property
    def earth_radius(self) -> float:
        return self._earth_radius

    # Conversions are exposed for callers that work in radians.
    to_radians = staticmethod(geo.to_radians)
    to_degrees = staticmethod(geo.to_degrees)
    radian_distance = staticmethod(geo.radian_distance)

    @staticmethod
    def geo_to_radians(point: Any) -> geo.RadianPoint:
        return geo.geo_to_radians(as_geo_point(point))

    @staticmethod
    def geo_to_degrees(point: geo.RadianPoint) -> GeoPoint:
        return geo.geo_to_degrees(point)

    def distance(self, a: Any, b: Any) -> float:
        """Great-circle distance between two degree points, in instance units."""
        c = geo.radian_distance(self.geo_to_radians(a), self.geo_to_radians(b))
        d = self._earth_radius * c
        if math.isnan(d):
            logger.debug("Distance between %r and %r evaluated to NaN; returning 0", a, b)
            return 0.0
        return d

    def bounds(self, radius: Any, center: Any) -> Bounds:
        """Bounding rectangle for everything within `radius` of `center`.

        Credit for this technique: Jan Matuschek,
        http://JanMatuschek.de/LatitudeLongitudeBoundingCoordinates
        """
        return compute_bounds(radius, as_geo_point(center), earth_radius=self._earth_radius)

    def is_in_bounds(self, point: Any, bounds: Bounds) -> bool:
        return is_in_bounds(as_geo_point(point), bounds)

    def bounds_check(self, radius: Any, center: Any) -> BoundsCheck:
        """Compute the rectangle once and return a reusable, callable containment test."""
        return BoundsCheck(bounds=self.bounds(radius, center))

    get_bounds_check_function = bounds_check

    def compute_midpoint(self, points: Iterable[Any]) -> GeoPoint:
        """Geographic center of gravity of `points`; raises `ValueError` when empty."""
        return compute_midpoint(_as_points(points))

    def compute_minimum_distance_point(self, points: Iterable[Any] | None) -> DistanceResult:
        """Point with the smallest total distance to `points` (within ~0.1 units)."""
        return find_minimum_distance_point(_as_points(points), earth_radius=self._earth_radius)

    def distance_to_point_list(self, from_point: Any, to_points: Iterable[Any] | None) -> DistanceResult:
        return distance_to_point_list(
            as_geo_point(from_point), _as_points(to_points), earth_radius=self._earth_radius
        )


def build_engine(settings: Settings | None = None) -> GeoDistance:
    """Create a `GeoDistance` using `engine.units` from settings."""
    settings = settings or get_settings()
    return GeoDistance(settings.engine.units)
