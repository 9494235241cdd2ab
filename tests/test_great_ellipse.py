import math

import pytest
from pytest import approx

from spheroidal import DomainError, GeoPoint, GreatEllipse, Spheroid
from spheroidal.utils import logging as logging_utils

from tests.functions import angle_difference, assert_points_equal

# Quarter meridian of WGS84, in meters
WGS84_QUARTER_MERIDIAN = 10_001_965.729313


def _haversine(r, p1, p2):
    lat1, lat2 = math.radians(p1.latitude), math.radians(p2.latitude)
    d_lat = lat2 - lat1
    d_lon = math.radians(p2.longitude - p1.longitude)
    var1 = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lon / 2) ** 2
    return r * 2 * math.atan2(math.sqrt(var1), math.sqrt(1 - var1))


def test_great_ellipse_spheroid():
    wgs84 = Spheroid.wgs1984()
    assert GreatEllipse(wgs84).spheroid == wgs84
    assert repr(GreatEllipse(wgs84)) == f'<GreatEllipse({wgs84!r})>'


def test_inverse_equator():
    wgs84 = Spheroid.wgs1984()
    s12, azi1, azi2 = GreatEllipse(wgs84).inverse(GeoPoint(0., 0.), GeoPoint(0., 90.))
    assert s12 == approx(math.pi * wgs84.a / 2, abs=1e-6)
    assert azi1 == approx(90., abs=1e-12)
    assert azi2 == approx(90., abs=1e-12)

    # Westward
    s12, azi1, azi2 = GreatEllipse(wgs84).inverse(GeoPoint(0., 10.), GeoPoint(0., -20.))
    assert s12 == approx(math.pi * wgs84.a / 6, abs=1e-6)
    assert azi1 == approx(-90., abs=1e-12)
    assert azi2 == approx(-90., abs=1e-12)


def test_inverse_meridian():
    # The great ellipse through the poles is the meridian ellipse
    wgs84 = Spheroid.wgs1984()
    s12, azi1, azi2 = GreatEllipse(wgs84).inverse(GeoPoint(0., 0.), GeoPoint(90., 0.))
    assert s12 == approx(WGS84_QUARTER_MERIDIAN, abs=1e-3)
    assert azi1 == approx(0., abs=1e-12)
    assert azi2 == approx(0., abs=1e-12)

    s12, azi1, azi2 = GreatEllipse(wgs84).inverse(GeoPoint(-90., 30.), GeoPoint(90., 30.))
    assert s12 == approx(2 * WGS84_QUARTER_MERIDIAN, abs=1e-3)

    s12, azi1, azi2 = GreatEllipse(wgs84).inverse(GeoPoint(45., 30.), GeoPoint(10., 30.))
    assert angle_difference(azi1, 180.) == approx(0., abs=1e-9)
    assert angle_difference(azi2, 180.) == approx(0., abs=1e-9)


def test_inverse_antimeridian():
    wgs84 = Spheroid.wgs1984()
    s12, azi1, _ = GreatEllipse(wgs84).inverse(GeoPoint(0., 179.), GeoPoint(0., -179.))
    assert s12 == approx(math.pi * wgs84.a / 90, abs=1e-6)
    assert azi1 == approx(90., abs=1e-12)


def test_inverse_coincident():
    solver = GreatEllipse(Spheroid.wgs1984())
    for p in (GeoPoint(0., 0.), GeoPoint(37.5, -122.), GeoPoint(-89.9, 45.), GeoPoint(90., 0.)):
        s12, _, _ = solver.inverse(p, p)
        assert s12 == approx(0., abs=1e-9)


def test_inverse_sphere_matches_great_circle():
    r = 6371000.
    solver = GreatEllipse(Spheroid.sphere(r))
    pairs = [
        (GeoPoint(10., 20.), GeoPoint(-30., 120.)),
        (GeoPoint(51.5, -0.1), GeoPoint(40.7, -74.)),
        (GeoPoint(-33.9, 151.2), GeoPoint(35.7, 139.7)),
        (GeoPoint(0., 0.), GeoPoint(0.001, 0.001)),
    ]
    for p1, p2 in pairs:
        s12, _, _ = solver.inverse(p1, p2)
        assert s12 == approx(_haversine(r, p1, p2), rel=1e-9)


def test_inverse_sphere_antipodal():
    r = 6371000.
    solver = GreatEllipse(Spheroid.sphere(r))
    s12, _, _ = solver.inverse(GeoPoint(0., 0.), GeoPoint(0., 180.))
    assert s12 == approx(math.pi * r, rel=1e-15)

    s12, _, _ = solver.inverse(GeoPoint(30., 40.), GeoPoint(-30., -140.))
    assert s12 == approx(math.pi * r, rel=1e-12)


def test_inverse_spheroid_antipodal():
    # One of the many equally short tracks is chosen: here the meridian ellipse
    wgs84 = Spheroid.wgs1984()
    s12, _, _ = GreatEllipse(wgs84).inverse(GeoPoint(0., 0.), GeoPoint(0., 180.))
    assert s12 == approx(2 * WGS84_QUARTER_MERIDIAN, abs=1e-3)


def test_inverse_symmetry():
    for spheroid in (Spheroid.wgs1984(), Spheroid.srm_max(), Spheroid.sphere(6371000.)):
        solver = GreatEllipse(spheroid)
        pairs = [
            (GeoPoint(10., 20.), GeoPoint(-30., 120.)),
            (GeoPoint(89.5, -170.), GeoPoint(-60., 15.)),
            (GeoPoint(-5., 179.5), GeoPoint(5., -179.5)),
        ]
        for p1, p2 in pairs:
            s12, azi1, azi2 = solver.inverse(p1, p2)
            s21, azi1r, azi2r = solver.inverse(p2, p1)
            assert s12 == approx(s21, abs=1e-6)
            assert angle_difference(azi1, azi2r - 180) == approx(0., abs=1e-9)
            assert angle_difference(azi2, azi1r - 180) == approx(0., abs=1e-9)


def test_direct_equator():
    wgs84 = Spheroid.wgs1984()
    p2, azi2 = GreatEllipse(wgs84).direct(GeoPoint(0., 0.), 90., 1_000_000.)
    assert_points_equal(p2, GeoPoint(0., math.degrees(1_000_000. / wgs84.a)))
    assert azi2 == approx(90., abs=1e-12)

    # Crosses the antimeridian
    p2, _ = GreatEllipse(wgs84).direct(GeoPoint(0., 179.), 90., math.pi * wgs84.a / 90)
    assert_points_equal(p2, GeoPoint(0., -179.))


def test_direct_meridian():
    wgs84 = Spheroid.wgs1984()
    p2, _ = GreatEllipse(wgs84).direct(GeoPoint(0., 25.), 0., WGS84_QUARTER_MERIDIAN)
    assert p2.latitude == approx(90., abs=1e-8)

    # One meter short of the pole, where the meridian's radius of curvature is a**2 / b
    p2, azi2 = GreatEllipse(wgs84).direct(GeoPoint(0., 25.), 0., WGS84_QUARTER_MERIDIAN - 1)
    assert p2.latitude == approx(90. - math.degrees(wgs84.b / wgs84.a ** 2), abs=1e-10)
    assert p2.longitude == approx(25., abs=1e-9)
    assert azi2 == approx(0., abs=1e-9)

    p2, azi2 = GreatEllipse(wgs84).direct(GeoPoint(0., 25.), 180., WGS84_QUARTER_MERIDIAN / 2)
    assert p2.longitude == approx(25., abs=1e-12)
    assert p2.latitude < -44.
    assert angle_difference(azi2, 180.) == approx(0., abs=1e-9)


def test_direct_zero_distance():
    solver = GreatEllipse(Spheroid.wgs1984())
    p1 = GeoPoint(37.5, -122.)
    p2, azi2 = solver.direct(p1, 33., 0.)
    assert_points_equal(p1, p2, abs_tol=1e-12)
    assert azi2 == approx(33., abs=1e-9)


@pytest.mark.parametrize('spheroid', [
    Spheroid.wgs1984(), Spheroid.srm_max(), Spheroid.sphere(6371000.)
])
def test_direct_inverse_consistency(spheroid):
    solver = GreatEllipse(spheroid)
    half_circumference = math.pi * spheroid.b
    for lat1, lon1 in ((0., 0.), (37.5, -122.), (-60., 150.), (89., 10.), (-12.25, -179.)):
        p1 = GeoPoint(lat1, lon1)
        for azi1 in (-180., -135., -45., 0., 10., 90., 123.4, 179.):
            for fraction in (0.001, 0.1, 0.5, 0.9):
                s12 = fraction * half_circumference
                p2, azi2 = solver.direct(p1, azi1, s12)
                s12_inv, azi1_inv, azi2_inv = solver.inverse(p1, p2)
                assert s12_inv == approx(s12, rel=1e-6)
                assert angle_difference(azi1_inv, azi1) == approx(0., abs=1e-6)
                assert angle_difference(azi2_inv, azi2) == approx(0., abs=1e-6)


def test_inverse_antipodal_warns(caplog, monkeypatch):
    monkeypatch.setattr(logging_utils, '_WARNINGS', set())
    _ = GreatEllipse(Spheroid.sphere(6371000.)).inverse(GeoPoint(0., 0.), GeoPoint(0., 180.))
    assert 'antipodal points are indeterminate' in caplog.text


def test_direct_non_finite():
    solver = GreatEllipse(Spheroid.wgs1984())
    for distance in (math.inf, -math.inf, math.nan):
        with pytest.raises(DomainError):
            _ = solver.direct(GeoPoint(0., 0.), 45., distance)

    with pytest.raises(DomainError):
        _ = solver.direct(GeoPoint(0., 0.), math.nan, 1000.)
