"""Spherical-Earth distances, bounding boxes and geographic centers."""

from geocenter.domain.models import Bounds, DistanceResult, GeoPoint
from geocenter.engine import GeoDistance, build_engine
from geocenter.core.units import UnitSystem

__all__ = ["Bounds", "DistanceResult", "GeoDistance", "GeoPoint", "UnitSystem", "build_engine"]
