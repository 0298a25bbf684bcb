"""Shared fixtures: one engine per unit system and a handful of reference locations."""

from __future__ import annotations

import pytest

from geocenter import GeoDistance, GeoPoint

SAMPLE_LOC: dict[str, GeoPoint] = {
    "butte": GeoPoint(lat=46.0038, lng=-112.5348),  # Butte, Montana, USA
    "billings": GeoPoint(lat=45.7589, lng=-108.483),  # Billings, Montana, USA
    "bozeman": GeoPoint(lat=45.6751, lng=-111.0428),  # Bozeman, Montana, USA
    "fiji": GeoPoint(lat=-17.7798, lng=177.8037),  # Fiji, South Pacific
    "amsam": GeoPoint(lat=-14.2822, lng=-170.7314),  # American Samoa
    "mcmurdo": GeoPoint(lat=-77.8431, lng=166.6879),  # McMurdo Station, Antarctica
    "southnz": GeoPoint(lat=-45.7854, lng=168.5981),  # Southern New Zealand, near Lumsden
}


def really_close(a: float, b: float, closeness: float = 0.0005) -> bool:
    """Relative closeness (0.05% by default); falls back to (a+1)/(b+1) when b is 0."""
    ratio = a / b if b != 0 else (a + 1) / (b + 1)
    return abs(1 - ratio) < closeness


@pytest.fixture
def miles() -> GeoDistance:
    return GeoDistance("M")


@pytest.fixture
def km() -> GeoDistance:
    return GeoDistance("K")


@pytest.fixture
def loc() -> dict[str, GeoPoint]:
    return SAMPLE_LOC
