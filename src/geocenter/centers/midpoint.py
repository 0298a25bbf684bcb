"""Geographic midpoint (center of gravity) of a point set."""

from __future__ import annotations

from typing import Sequence

from geocenter.core.geo import average_coordinates, geo_to_degrees, to_centering_points
from geocenter.domain.models import GeoPoint


def compute_midpoint(points: Sequence[GeoPoint]) -> GeoPoint:
    """Average the points' unit-sphere vectors and project the result back to lat/lng.

    The averaged vector lies inside the sphere; only its direction is used.
    Raises `ValueError` for an empty sequence.
    """
    if not points:
        raise ValueError("compute_midpoint needs at least one point")
    return geo_to_degrees(average_coordinates(to_centering_points(points)))
