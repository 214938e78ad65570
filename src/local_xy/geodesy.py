from __future__ import annotations
from typing import Sequence, Tuple, Union
import math

# Numeric / geo stack
try:
    import numpy as np
    from pyproj import Geod
except Exception as e:
    raise ImportError(
        "local_xy.geodesy requires numpy and pyproj. "
        "Install with: pip install local-xy"
    ) from e

Number = Union[int, float]
ArrayLike = Union[Number, Sequence[Number], "np.ndarray"]

# WGS84 ellipsoid, taken from PROJ's definition
_WGS84 = Geod(ellps="WGS84")
WGS84_A = float(_WGS84.a)                 # semi-major axis (m), 6378137.0
WGS84_F = float(_WGS84.f)                 # flattening, 1/298.257223563
WGS84_E2 = WGS84_F * (2.0 - WGS84_F)      # first eccentricity squared

def _as_result(v):
    """
    Returns a Python float for 0-d input, the numpy array otherwise.
    """
    return float(v) if np.ndim(v) == 0 else v

def _radians(deg: float) -> float:
    # same rounding as the vectorized path so offsets at the origin are exactly zero
    return float(np.radians(deg))

def radii_of_curvature(reference_latitude: float) -> Tuple[float, float]:
    """
    Computes the local radii used to turn angular offsets into meters.

    Args:
        reference_latitude (float): Latitude in degrees at which the radii are evaluated.

    Returns:
        Tuple[float, float]:
            rho_lat (float): Meridional radius of curvature in meters.
            rho_lon (float): Transverse radius of curvature scaled by cos(latitude), in meters.
                Tends to zero at the poles.
    """
    lat = math.radians(reference_latitude)
    s = math.sin(lat)
    p = 1.0 - WGS84_E2 * s * s
    rho_lat = WGS84_A * (1.0 - WGS84_E2) / math.pow(p, 1.5)
    rho_lon = WGS84_A / math.sqrt(p) * math.cos(lat)
    return rho_lat, rho_lon

def _offsets_from_wgs84(latitude, longitude, reference_latitude_rad, reference_longitude_rad,
                        rho_lat, rho_lon):
    # unrotated (east, north) offsets in meters
    dy = (np.radians(latitude) - reference_latitude_rad) * rho_lat
    dx = (np.radians(longitude) - reference_longitude_rad) * rho_lon
    return dx, dy

def _wgs84_from_offsets(dx, dy, reference_latitude, reference_longitude, rho_lat, rho_lon):
    latitude = reference_latitude + np.degrees(np.divide(dy, rho_lat))
    longitude = reference_longitude + np.degrees(np.divide(dx, rho_lon))
    return latitude, longitude

def local_xy_from_wgs84(
    latitude: ArrayLike,
    longitude: ArrayLike,
    reference_latitude: float,
    reference_longitude: float,
):
    """
    Transforms WGS84 lat/lon into an ortho-rectified LocalXY frame with no heading.

    This is a first order local tangent plane approximation. It is good to tens of
    kilometers around the reference point and degrades with distance and towards the
    poles, where the transverse radius goes to zero.

    Args:
        latitude (ArrayLike): Latitude(s) in degrees.
        longitude (ArrayLike): Longitude(s) in degrees.
        reference_latitude (float): Reference WGS84 latitude in degrees.
        reference_longitude (float): Reference WGS84 longitude in degrees.

    Returns:
        Tuple: x (east) and y (north) in meters. Floats for scalar input, numpy arrays otherwise.
    """
    rho_lat, rho_lon = radii_of_curvature(reference_latitude)
    x, y = _offsets_from_wgs84(latitude, longitude,
                               _radians(reference_latitude), _radians(reference_longitude),
                               rho_lat, rho_lon)
    return _as_result(x), _as_result(y)

def wgs84_from_local_xy(
    x: ArrayLike,
    y: ArrayLike,
    reference_latitude: float,
    reference_longitude: float,
):
    """
    Transforms LocalXY coordinates back into WGS84 lat/lon.

    Exact inverse of local_xy_from_wgs84 for the same reference point. Assumes the
    LocalXY data was generated with respect to the WGS84 datum.

    Args:
        x (ArrayLike): X (east) coordinate(s) in meters.
        y (ArrayLike): Y (north) coordinate(s) in meters.
        reference_latitude (float): Reference WGS84 latitude in degrees.
        reference_longitude (float): Reference WGS84 longitude in degrees.

    Returns:
        Tuple: latitude and longitude in degrees. Floats for scalar input, numpy arrays otherwise.
    """
    rho_lat, rho_lon = radii_of_curvature(reference_latitude)
    lat, lon = _wgs84_from_offsets(x, y, reference_latitude, reference_longitude, rho_lat, rho_lon)
    return _as_result(lat), _as_result(lon)
