"""
Bounding rectangles around a point.

`compute_bounds` follows Jan Matuschek's technique
(http://JanMatuschek.de/LatitudeLongitudeBoundingCoordinates): a lat/lng box
that contains every point within `radius` of the center. Near a pole the box
becomes a full longitude band; near the antimeridian it wraps, which is
reported as `min_lng > max_lng`.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

from geocenter.core.geo import HALF_PI, TWO_PI, geo_to_radians, to_degrees
from geocenter.domain.models import Bounds, GeoPoint, as_geo_point

MIN_LAT = -HALF_PI
MAX_LAT = HALF_PI
MIN_LNG = -math.pi
MAX_LNG = math.pi


def _valid_radius(radius: Any) -> float | None:
    try:
        r = float(radius)
    except (TypeError, ValueError):
        return None
    if math.isnan(r) or r <= 0:
        return None
    return r


def compute_bounds(radius: Any, center: GeoPoint, *, earth_radius: float) -> Bounds:
    """Rectangle containing all points within `radius` (same units as `earth_radius`) of `center`.

    A missing, non-numeric or non-positive radius yields a zero-area rectangle at `center`.
    """
    r = _valid_radius(radius)
    if r is None:
        return Bounds(min_lat=center.lat, max_lat=center.lat, min_lng=center.lng, max_lng=center.lng)

    c = geo_to_radians(center)
    rad_dist = r / earth_radius
    min_lat = c.lat - rad_dist
    max_lat = c.lat + rad_dist

    if min_lat > MIN_LAT and max_lat < MAX_LAT:
        delta_lng = math.asin(min(1.0, math.sin(rad_dist) / math.cos(c.lat)))
        min_lng = c.lng - delta_lng
        max_lng = c.lng + delta_lng
        if min_lng < MIN_LNG:
            min_lng += TWO_PI
        if max_lng > MAX_LNG:
            max_lng -= TWO_PI
    else:
        # The circle reaches a pole: every longitude is in range.
        min_lat = max(min_lat, MIN_LAT)
        max_lat = min(max_lat, MAX_LAT)
        min_lng = MIN_LNG
        max_lng = MAX_LNG

    return Bounds(
        min_lat=to_degrees(min_lat),
        max_lat=to_degrees(max_lat),
        min_lng=to_degrees(min_lng),
        max_lng=to_degrees(max_lng),
    )


def is_in_bounds(point: GeoPoint, bounds: Bounds) -> bool:
    """Inclusive containment test; handles rectangles that wrap the antimeridian."""
    if not (bounds.min_lat <= point.lat <= bounds.max_lat):
        return False
    if bounds.wraps_antimeridian:
        return point.lng >= bounds.min_lng or point.lng <= bounds.max_lng
    return bounds.min_lng <= point.lng <= bounds.max_lng


@dataclass(frozen=True)
class BoundsCheck:
    """A precomputed rectangle for testing many points against one center/radius."""

    bounds: Bounds

    def contains(self, point: Any) -> bool:
        return is_in_bounds(as_geo_point(point), self.bounds)

    def __call__(self, point: Any) -> bool:
        return self.contains(point)
