import math

import pytest

from geocenter import Bounds, GeoPoint
from geocenter.core.geo import destination_point, geo_to_degrees, geo_to_radians


def test_bounding_rectangle_surrounds_center(miles, loc):
    bounds = miles.bounds(100, loc["butte"])
    assert isinstance(bounds, Bounds)
    assert bounds.max_lat > loc["butte"].lat
    assert bounds.min_lat < loc["butte"].lat
    assert bounds.min_lng < loc["butte"].lng < bounds.max_lng
    assert miles.is_in_bounds(loc["butte"], bounds)


def test_bounds_check_function(miles, loc):
    check = miles.get_bounds_check_function(100, loc["butte"])
    assert check(loc["bozeman"]) is True
    assert check(loc["billings"]) is False

    check = miles.bounds_check(2500, loc["southnz"])
    assert check.contains(loc["mcmurdo"])


def test_bounds_reaching_a_pole_cover_every_longitude(miles, loc):
    south_pole = GeoPoint(lat=-90, lng=0)
    bounds = miles.bounds(850, loc["mcmurdo"])
    assert bounds.min_lat == pytest.approx(-90)
    assert (bounds.min_lng, bounds.max_lng) == pytest.approx((-180, 180))
    assert miles.is_in_bounds(south_pole, bounds)

    assert not miles.is_in_bounds(south_pole, miles.bounds(830, loc["mcmurdo"]))


def test_bounds_wrap_across_antimeridian(miles, loc):
    bounds = miles.bounds(500, loc["fiji"])
    assert bounds.min_lng > bounds.max_lng
    assert bounds.wraps_antimeridian

    assert miles.is_in_bounds(GeoPoint(lat=-17.78, lng=179.9), bounds)
    assert miles.is_in_bounds(GeoPoint(lat=-17.78, lng=-179.5), bounds)
    assert miles.is_in_bounds(loc["fiji"], bounds)
    assert not miles.is_in_bounds(loc["amsam"], bounds)
    assert not miles.is_in_bounds(GeoPoint(lat=-17.78, lng=0), bounds)


def test_wide_rectangle_around_new_zealand_wraps_to_samoa(miles, loc):
    check = miles.bounds_check(2500, loc["southnz"])
    assert check.bounds.wraps_antimeridian
    assert check(loc["amsam"])
    assert check(loc["fiji"])
    assert not check(loc["butte"])


@pytest.mark.parametrize("bearing_deg", [0, 90, 180, 270])
def test_points_just_inside_radius_are_in_bounds(miles, loc, bearing_deg):
    radius = 300
    bounds = miles.bounds(radius, loc["butte"])
    angular = 0.999 * radius / miles.earth_radius
    edge = destination_point(geo_to_radians(loc["butte"]), math.radians(bearing_deg), angular)
    assert miles.is_in_bounds(geo_to_degrees(edge), bounds)


@pytest.mark.parametrize("radius", [0, -5, float("nan"), None, "far"])
def test_non_positive_or_non_numeric_radius_gives_degenerate_rectangle(miles, loc, radius):
    bounds = miles.bounds(radius, loc["butte"])
    assert bounds == Bounds(
        min_lat=loc["butte"].lat,
        max_lat=loc["butte"].lat,
        min_lng=loc["butte"].lng,
        max_lng=loc["butte"].lng,
    )
    assert miles.is_in_bounds(loc["butte"], bounds)


def test_radius_is_interpreted_in_engine_units(miles, km, loc):
    assert km.bounds(160.934, loc["butte"]).max_lat == pytest.approx(
        miles.bounds(100, loc["butte"]).max_lat, rel=1e-5
    )
