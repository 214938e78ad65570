from __future__ import annotations
from typing import Sequence, Union

# Geo stack
try:
    import geopandas as gpd
    from shapely.geometry import Point
except Exception as e:
    raise ImportError(
        "local_xy.geoframe requires GeoPandas and Shapely. "
        "Install with: pip install local-xy"
    ) from e

from .util import LocalXyWgs84Util

Number = Union[int, float]

def _as_arrays(x: Union[Number, Sequence[Number]]) -> list[float]:
    """
    Converts a number or sequence of numbers into a list of floats.
    """
    if isinstance(x, (list, tuple)):
        return list(map(float, x))
    if hasattr(x, "tolist"):
        v = x.tolist()
        return list(map(float, v)) if isinstance(v, list) else [float(v)]
    return [float(x)]

def _require_origin(util: LocalXyWgs84Util) -> None:
    if not util.initialized:
        raise ValueError("LocalXY origin is not initialized")

def gdf_to_local_xy(gdf: gpd.GeoDataFrame, util: LocalXyWgs84Util) -> gpd.GeoDataFrame:
    """
    Converts the point geometries of a GeoDataFrame into the LocalXY frame of ``util``.

    Args:
        gdf (gpd.GeoDataFrame): Points in any geographic CRS; a frame without CRS is taken as EPSG:4326.
        util (LocalXyWgs84Util): An initialized converter.

    Returns:
        gpd.GeoDataFrame: A copy with Point(x, y) geometries in meters and no CRS.

    Raises:
        ValueError: If the converter is not initialized or a geometry is not a point.
    """
    _require_origin(util)
    src = gdf if gdf.crs is None else gdf.to_crs("EPSG:4326")
    if len(src) and not (src.geometry.geom_type == "Point").all():
        raise ValueError("gdf_to_local_xy only supports Point geometries")

    pts = []
    for lon, lat in zip(src.geometry.x.tolist(), src.geometry.y.tolist()):
        x, y, _ = util.to_local_xy(lat, lon)
        pts.append(Point(x, y))
    attrs = gdf.drop(columns=gdf.geometry.name)
    return gpd.GeoDataFrame(attrs, geometry=pts, crs=None)

def local_xy_to_gdf(
    x: Union[Number, Sequence[Number]],
    y: Union[Number, Sequence[Number]],
    util: LocalXyWgs84Util,
) -> gpd.GeoDataFrame:
    """
    Builds an EPSG:4326 GeoDataFrame from LocalXY coordinates.

    Args:
        x (Union[Number, Sequence[Number]]): X coordinate(s) in meters.
        y (Union[Number, Sequence[Number]]): Y coordinate(s) in meters.
        util (LocalXyWgs84Util): An initialized converter.

    Returns:
        gpd.GeoDataFrame: One point per input coordinate, in lon/lat order.

    Raises:
        ValueError: If the converter is not initialized or x and y differ in length.
    """
    _require_origin(util)
    xs = _as_arrays(x); ys = _as_arrays(y)
    if len(xs) != len(ys):
        raise ValueError("x and y must have the same length")
    lats, lons = [], []
    for xi, yi in zip(xs, ys):
        lat, lon, _ = util.to_wgs84(xi, yi)
        lats.append(lat); lons.append(lon)
    return gpd.GeoDataFrame(geometry=gpd.points_from_xy(lons, lats), crs="EPSG:4326")
