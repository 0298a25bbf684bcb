"""
Spherical geometry primitives.

Everything in here works on radians. Degree-based values only cross this
boundary through `geo_to_radians` / `geo_to_degrees`.

Formulas follow http://www.movable-type.co.uk/scripts/latlong.html (Haversine,
destination point) and http://www.geomidpoint.com/calculation.html (Cartesian
averaging).
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

from geocenter.domain.models import GeoPoint

HALF_PI = math.pi / 2
TWO_PI = 2 * math.pi


@dataclass(frozen=True)
class RadianPoint:
    """A latitude/longitude pair in radians."""

    lat: float
    lng: float


@dataclass(frozen=True)
class CenteringPoint:
    """A radian point plus its unit-sphere Cartesian coordinates."""

    lat: float
    lng: float
    x: float
    y: float
    z: float


def to_radians(degrees: float) -> float:
    return degrees * math.pi / 180


def to_degrees(rad: float) -> float:
    return rad * 180 / math.pi


def geo_to_radians(point: GeoPoint) -> RadianPoint:
    return RadianPoint(lat=to_radians(point.lat), lng=to_radians(point.lng))


def geo_to_degrees(point: RadianPoint | CenteringPoint) -> GeoPoint:
    return GeoPoint(lat=to_degrees(point.lat), lng=to_degrees(point.lng))


def project(point: RadianPoint) -> CenteringPoint:
    """Attach unit-sphere x/y/z to a radian point."""
    cos_lat = math.cos(point.lat)
    return CenteringPoint(
        lat=point.lat,
        lng=point.lng,
        x=cos_lat * math.cos(point.lng),
        y=cos_lat * math.sin(point.lng),
        z=math.sin(point.lat),
    )


def unproject(x: float, y: float, z: float) -> CenteringPoint:
    """Inverse of `project`; the vector does not need to be unit length.

    At a pole (x == y == 0) longitude comes out as 0.
    """
    return CenteringPoint(
        lat=math.atan2(z, math.sqrt(x * x + y * y)),
        lng=math.atan2(y, x),
        x=x,
        y=y,
        z=z,
    )


def to_centering_points(points: Iterable[GeoPoint]) -> list[CenteringPoint]:
    return [project(geo_to_radians(p)) for p in points]


def average_coordinates(points: Sequence[CenteringPoint]) -> CenteringPoint:
    """3-D centroid of `points`, projected back onto lat/lng."""
    if not points:
        raise ValueError("points must not be empty")
    n = len(points)
    x = sum(p.x for p in points) / n
    y = sum(p.y for p in points) / n
    z = sum(p.z for p in points) / n
    return unproject(x, y, z)


def radian_distance(a: RadianPoint | CenteringPoint, b: RadianPoint | CenteringPoint) -> float:
    """Central angle between two radian points (Haversine)."""
    d_lat = b.lat - a.lat
    d_lng = b.lng - a.lng
    h = math.sin(d_lat / 2) ** 2 + math.cos(a.lat) * math.cos(b.lat) * math.sin(d_lng / 2) ** 2
    # Rounding can push h a hair outside [0, 1].
    h = min(1.0, max(0.0, h))
    return 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))


def sum_radian_distance(origin: RadianPoint | CenteringPoint, points: Iterable[CenteringPoint]) -> float:
    return sum(radian_distance(origin, p) for p in points)


def destination_point(start: RadianPoint | CenteringPoint, bearing: float, distance: float) -> RadianPoint:
    """Point reached from `start` along `bearing` (0 = north, clockwise) after `distance` radians."""
    sin_lat = math.sin(start.lat)
    cos_lat = math.cos(start.lat)
    lat = math.asin(sin_lat * math.cos(distance) + cos_lat * math.sin(distance) * math.cos(bearing))
    lng = start.lng + math.atan2(
        math.sin(bearing) * math.sin(distance) * cos_lat,
        math.cos(distance) - sin_lat * math.sin(lat),
    )

    # Reflect over the pole.
    if abs(lat) > HALF_PI:
        lat = math.pi - lat - TWO_PI * (1 if lat < -HALF_PI else 0)
        lng = lng - math.pi
    if lng > math.pi:
        lng = lng - TWO_PI
    elif lng < -math.pi:
        lng = lng + TWO_PI
    return RadianPoint(lat=lat, lng=lng)
