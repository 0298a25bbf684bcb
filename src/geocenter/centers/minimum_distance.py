"""
Center of minimum distance: the point with the smallest summed great-circle
distance to a point set (a geometric median on the sphere).

Adapted from http://www.geomidpoint.com/calculation.html ("Center of minimum distance"):

1. Start at the 3-D centroid of the points.
2. Try every input point as a center; keep the best.
3. Around the current best, test a ring of 8 points at compass bearings.
   Move to the best improving ring point and retry at the same radius until a
   ring brings no improvement, then halve the radius. The first ring is a
   quarter circle (pi/2 radians) and the radius is halved 17 times.

The ring count, halvings and margin below are tuned constants: 16 halvings are
enough for ~0.1 mile accuracy, 17 keeps a safety step. Changing them changes
the accuracy of the result.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Sequence

from geocenter.core.geo import (
    CenteringPoint,
    RadianPoint,
    average_coordinates,
    destination_point,
    geo_to_degrees,
    geo_to_radians,
    sum_radian_distance,
    to_centering_points,
)
from geocenter.domain.models import DistanceResult, GeoPoint

logger = logging.getLogger(__name__)

INITIAL_TEST_RADIUS = math.pi / 2
RADIUS_HALVINGS = 17
RING_POINTS = 8
# Added to the running best before the first ring at each radius so the ring
# loop always runs at least once.
IMPROVEMENT_MARGIN = 200000


@dataclass(frozen=True)
class _Best:
    point: RadianPoint | CenteringPoint
    total: float


def _pick_best(
    candidates: Sequence[RadianPoint | CenteringPoint],
    points: Sequence[CenteringPoint],
    current: _Best,
) -> _Best:
    best = current
    for candidate in candidates:
        total = sum_radian_distance(candidate, points)
        if total < best.total:
            best = _Best(point=candidate, total=total)
    return best


def _ring(center: RadianPoint | CenteringPoint, radius: float) -> list[RadianPoint]:
    step = 2 * math.pi / RING_POINTS
    return [destination_point(center, step * i, radius) for i in range(RING_POINTS)]


def _refine(best: _Best, points: Sequence[CenteringPoint]) -> tuple[_Best, int]:
    rings = 0
    test_radius = INITIAL_TEST_RADIUS
    for _ in range(RADIUS_HALVINGS):
        previous = best.total + IMPROVEMENT_MARGIN
        while best.total < previous:
            previous = best.total
            best = _pick_best(_ring(best.point, test_radius), points, best)
            rings += 1
        test_radius /= 2
    return best, rings


def find_minimum_distance_point(points: Sequence[GeoPoint], *, earth_radius: float) -> DistanceResult:
    """Locate the center of minimum distance for `points`.

    Empty input gives the (0, 0) point with zero distances; a single point is
    returned unchanged with zero distances.
    """
    if not points:
        return DistanceResult(point=GeoPoint(lat=0, lng=0))
    if len(points) == 1:
        return DistanceResult(point=points[0])

    centering = to_centering_points(points)
    midpoint = average_coordinates(centering)
    best = _Best(point=midpoint, total=sum_radian_distance(midpoint, centering))
    best = _pick_best(centering, centering, best)
    best, rings = _refine(best, centering)

    total = best.total * earth_radius
    logger.debug(
        "Minimum distance search over %d points: %d rings, total=%.6f rad", len(points), rings, best.total
    )
    return DistanceResult(point=geo_to_degrees(best.point), total_dist=total, avg_dist=total / len(points))


def distance_to_point_list(
    origin: GeoPoint, points: Sequence[GeoPoint], *, earth_radius: float
) -> DistanceResult:
    """Summed and averaged great-circle distance from `origin` to each of `points`."""
    if not points:
        return DistanceResult(point=origin)
    total = sum_radian_distance(geo_to_radians(origin), to_centering_points(points)) * earth_radius
    return DistanceResult(point=origin, total_dist=total, avg_dist=total / len(points))
