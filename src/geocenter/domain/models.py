"""
Domain models (Pydantic).

These are the values that cross the library boundary:
- `GeoPoint`: caller-facing lat/lng in decimal degrees
- `Bounds`: a lat/lng rectangle (may wrap across the antimeridian)
- `DistanceResult`: a candidate center plus its total/average distance to a point set

Radian and Cartesian intermediates never leave `geocenter.core.geo`.
"""

from __future__ import annotations

from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field


class GeoPoint(BaseModel):
    """A geographic point in decimal degrees."""

    model_config = ConfigDict(frozen=True)

    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)


class Bounds(BaseModel):
    """Bounding rectangle in degrees.

    `min_lng > max_lng` is valid: the rectangle crosses the ±180° meridian and
    longitude containment becomes `lng >= min_lng or lng <= max_lng`.
    """

    model_config = ConfigDict(frozen=True)

    min_lat: float
    max_lat: float
    min_lng: float
    max_lng: float

    @property
    def wraps_antimeridian(self) -> bool:
        return self.min_lng > self.max_lng


class DistanceResult(BaseModel):
    """A center point with its summed and averaged great-circle distance to a point set."""

    model_config = ConfigDict(frozen=True)

    point: GeoPoint
    avg_dist: float = 0.0
    total_dist: float = 0.0


def as_geo_point(value: Any) -> GeoPoint:
    """Coerce loose coordinate input into a `GeoPoint`.

    Accepted shapes: `GeoPoint`, objects with `lat`/`lng` attributes, mappings with
    `lat` and `lng` (or `lon`) keys, and `(lat, lng)` pairs.
    """
    if isinstance(value, GeoPoint):
        return value
    if isinstance(value, Mapping):
        lng = value.get("lng", value.get("lon"))
        if "lat" not in value or lng is None:
            raise ValueError(f"point mapping needs 'lat' and 'lng' keys, got {sorted(value)}")
        return GeoPoint(lat=float(value["lat"]), lng=float(lng))
    if hasattr(value, "lat") and hasattr(value, "lng"):
        return GeoPoint(lat=float(value.lat), lng=float(value.lng))
    if isinstance(value, (tuple, list)) and len(value) == 2:
        return GeoPoint(lat=float(value[0]), lng=float(value[1]))
    raise ValueError(f"Cannot interpret {value!r} as a lat/lng point")
