import logging
from .types import GeoPoint, LocalPoint
from .geodesy import (WGS84_A, WGS84_E2, WGS84_F, local_xy_from_wgs84,
                      radii_of_curvature, wgs84_from_local_xy)
from .origin import OriginConfig, OriginEvent, origin_event_from_message
from .util import LocalXyWgs84Util
from .geoframe import gdf_to_local_xy, local_xy_to_gdf

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "GeoPoint","LocalPoint",
    "WGS84_A","WGS84_F","WGS84_E2",
    "radii_of_curvature","local_xy_from_wgs84","wgs84_from_local_xy",
    "OriginEvent","OriginConfig","origin_event_from_message",
    "LocalXyWgs84Util",
    "gdf_to_local_xy","local_xy_to_gdf",
]
