import math

import numpy as np
import pytest
from pyproj import Transformer

from local_xy import (WGS84_A, WGS84_E2, local_xy_from_wgs84, radii_of_curvature,
                      wgs84_from_local_xy)

def test_wgs84_constants():
    assert WGS84_A == 6378137.0
    assert WGS84_E2 == pytest.approx(0.0818191908426215 ** 2, abs=1e-14)

def test_radii_at_equator():
    rho_lat, rho_lon = radii_of_curvature(0.0)
    assert rho_lat == pytest.approx(WGS84_A * (1.0 - WGS84_E2))
    assert rho_lon == pytest.approx(WGS84_A)

def test_rho_lon_vanishes_at_pole():
    _, rho_lon = radii_of_curvature(90.0)
    assert abs(rho_lon) < 1e-3

@pytest.mark.parametrize("ref_lat,ref_lon", [
    (0.0, 0.0),
    (29.4497, -98.6122),
    (-33.8688, 151.2093),
    (64.1466, -21.9426),
    (-88.5, 45.0),
    (88.5, -170.0),
])
@pytest.mark.parametrize("dx,dy", [(0.0, 0.0), (120.5, -33.0), (-49000.0, 0.0), (30000.0, 40000.0)])
def test_roundtrip(ref_lat, ref_lon, dx, dy):
    lat, lon = wgs84_from_local_xy(dx, dy, ref_lat, ref_lon)
    x, y = local_xy_from_wgs84(lat, lon, ref_lat, ref_lon)
    lat2, lon2 = wgs84_from_local_xy(x, y, ref_lat, ref_lon)
    assert abs(lat - lat2) < 1e-9
    assert abs(lon - lon2) < 1e-9
    assert x == pytest.approx(dx, abs=1e-6)
    assert y == pytest.approx(dy, abs=1e-6)

@pytest.mark.parametrize("ref_lat,ref_lon", [(0.0, 0.0), (29.4497, -98.6122), (-45.123456789, 170.5)])
def test_origin_maps_to_zero(ref_lat, ref_lon):
    assert local_xy_from_wgs84(ref_lat, ref_lon, ref_lat, ref_lon) == (0.0, 0.0)

def test_one_arc_second_north_at_equator():
    x, y = local_xy_from_wgs84(1.0 / 3600.0, 0.0, 0.0, 0.0)
    assert x == 0.0
    # meridional arc-second at the equator
    assert y == pytest.approx(30.715, abs=1e-3)
    assert abs(y - 30.87) < 0.2

def test_scalar_results_are_floats():
    x, y = local_xy_from_wgs84(29.45, -98.61, 29.4497, -98.6122)
    assert type(x) is float and type(y) is float

def test_monotonic_in_latitude_and_longitude():
    lats = np.linspace(29.40, 29.50, 11)
    _, ys = local_xy_from_wgs84(lats, np.full_like(lats, -98.6122), 29.4497, -98.6122)
    assert np.all(np.diff(ys) > 0)

    lons = np.linspace(-98.70, -98.50, 11)
    xs, _ = local_xy_from_wgs84(np.full_like(lons, 29.4497), lons, 29.4497, -98.6122)
    assert np.all(np.diff(xs) > 0)

def test_arrays_match_scalars():
    lats = [29.4497, 29.46, 29.41]
    lons = [-98.6122, -98.60, -98.65]
    xs, ys = local_xy_from_wgs84(lats, lons, 29.4497, -98.6122)
    assert isinstance(xs, np.ndarray)
    for lat, lon, x, y in zip(lats, lons, xs, ys):
        assert (x, y) == local_xy_from_wgs84(lat, lon, 29.4497, -98.6122)

    back_lat, back_lon = wgs84_from_local_xy(xs, ys, 29.4497, -98.6122)
    np.testing.assert_allclose(back_lat, lats, atol=1e-9)
    np.testing.assert_allclose(back_lon, lons, atol=1e-9)

@pytest.mark.parametrize("ref_lat,ref_lon", [(29.4497, -98.6122), (45.0, 7.0), (-60.0, -70.0)])
@pytest.mark.parametrize("bearing", [0.0, 45.0, 90.0, 200.0])
def test_close_to_azimuthal_equidistant_near_origin(ref_lat, ref_lon, bearing):
    aeqd = Transformer.from_crs(
        "EPSG:4326",
        f"+proj=aeqd +lat_0={ref_lat} +lon_0={ref_lon} +x_0=0 +y_0=0 +datum=WGS84 +units=m +no_defs",
        always_xy=True,
    )
    d = 1000.0
    ex, ey = d * math.sin(math.radians(bearing)), d * math.cos(math.radians(bearing))
    lon, lat = aeqd.transform(ex, ey, direction="INVERSE")
    x, y = local_xy_from_wgs84(lat, lon, ref_lat, ref_lon)
    assert math.hypot(x - ex, y - ey) < 0.5
