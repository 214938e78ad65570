from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Tuple
import logging, math, threading
from .geodesy import _offsets_from_wgs84, _radians, _wgs84_from_offsets, radii_of_curvature
from .origin import OriginConfig, OriginEvent
from .types import GeoPoint, LocalPoint

log = logging.getLogger(__name__)

@dataclass(frozen=True)
class _Origin:
    # degree values are kept as supplied so accessors return them unchanged
    latitude: float
    longitude: float
    heading: float
    altitude: float
    frame: str
    latitude_rad: float
    longitude_rad: float
    rho_lat: float
    rho_lon: float
    cos_heading: float
    sin_heading: float

def _make_origin(latitude: float, longitude: float, heading: float, altitude: float, frame: str) -> _Origin:
    rho_lat, rho_lon = radii_of_curvature(latitude)
    heading_rad = math.radians(heading)
    return _Origin(
        latitude=float(latitude), longitude=float(longitude),
        heading=float(heading), altitude=float(altitude), frame=str(frame),
        latitude_rad=_radians(latitude), longitude_rad=_radians(longitude),
        rho_lat=rho_lat, rho_lon=rho_lon,
        cos_heading=math.cos(heading_rad), sin_heading=math.sin(heading_rad),
    )

class LocalXyWgs84Util:
    """
    Converts between WGS84 lat/lon and a LocalXY frame bound to one origin.

    The LocalXY +X axis points ``reference_heading`` degrees counterclockwise from east,
    so a heading of 0 gives an east/north frame and 90 puts +X on north.

    A converter built without a reference latitude/longitude starts uninitialized and is
    initialized once by set_origin(). Until then the conversions return ok=False and the
    reference accessors return 0. The origin never changes after initialization.
    """
    def __init__(self,
                 reference_latitude: Optional[float] = None,
                 reference_longitude: Optional[float] = None,
                 reference_heading: float = 0.0,
                 reference_altitude: float = 0.0,
                 frame: str = ""):
        """
        Initializes the converter.

        Args:
            reference_latitude (Optional[float]): Reference latitude in degrees. None leaves the converter uninitialized.
            reference_longitude (Optional[float]): Reference longitude in degrees. None leaves the converter uninitialized.
            reference_heading (float, optional): Reference heading in degrees. Defaults to 0.
            reference_altitude (float, optional): Reference altitude in meters. Defaults to 0.
            frame (str, optional): Coordinate frame identifier. Defaults to "".
        """
        self._lock = threading.Lock()
        self._heading = float(reference_heading)
        self._origin: Optional[_Origin] = None
        if (reference_latitude is None) != (reference_longitude is None):
            raise ValueError("reference_latitude and reference_longitude must be given together")
        if reference_latitude is not None:
            self._origin = _make_origin(reference_latitude, reference_longitude,
                                        reference_heading, reference_altitude, frame)

    @classmethod
    def from_config(cls, config: OriginConfig) -> "LocalXyWgs84Util":
        """
        Creates an initialized converter from an OriginConfig.
        """
        return cls(config.latitude, config.longitude, config.heading, config.altitude, config.frame)

    def set_origin(self, event: OriginEvent) -> bool:
        """
        Establishes the origin of an uninitialized converter.

        Only the first call has an effect. The heading given at construction is kept.

        Args:
            event (OriginEvent): Origin latitude, longitude, altitude and frame.

        Returns:
            bool: True if this call initialized the converter, False if it already was.
        """
        with self._lock:
            if self._origin is not None:
                log.warning("LocalXY origin already set, ignoring origin (%.8f, %.8f) in frame '%s'",
                            event.latitude, event.longitude, event.frame)
                return False
            self._origin = _make_origin(event.latitude, event.longitude,
                                        self._heading, event.altitude, event.frame)
        log.info("LocalXY origin set to lat=%.8f lon=%.8f alt=%.3f heading=%.3f frame='%s'",
                 event.latitude, event.longitude, event.altitude, self._heading, event.frame)
        return True

    def _snapshot(self) -> Optional[_Origin]:
        with self._lock:
            return self._origin

    # ---------- Accessors ----------
    @property
    def initialized(self) -> bool:
        return self._snapshot() is not None

    @property
    def reference_latitude(self) -> float:
        o = self._snapshot()
        return o.latitude if o else 0.0

    @property
    def reference_longitude(self) -> float:
        o = self._snapshot()
        return o.longitude if o else 0.0

    @property
    def reference_heading(self) -> float:
        o = self._snapshot()
        return o.heading if o else 0.0

    @property
    def reference_altitude(self) -> float:
        o = self._snapshot()
        return o.altitude if o else 0.0

    @property
    def frame(self) -> str:
        o = self._snapshot()
        return o.frame if o else ""

    # ---------- Conversions ----------
    def to_local_xy(self, latitude: float, longitude: float) -> Tuple[float, float, bool]:
        """
        Converts WGS84 latitude and longitude to LocalXY.

        Args:
            latitude (float): Latitude in degrees.
            longitude (float): Longitude in degrees.

        Returns:
            Tuple[float, float, bool]: x and y in meters from the origin, and whether the
                conversion was possible. x and y are meaningless when the flag is False.
        """
        o = self._snapshot()
        if o is None:
            return 0.0, 0.0, False
        dx, dy = _offsets_from_wgs84(latitude, longitude, o.latitude_rad, o.longitude_rad,
                                     o.rho_lat, o.rho_lon)
        x = dx * o.cos_heading + dy * o.sin_heading
        y = -dx * o.sin_heading + dy * o.cos_heading
        return float(x), float(y), True

    def to_wgs84(self, x: float, y: float) -> Tuple[float, float, bool]:
        """
        Converts LocalXY to WGS84 latitude and longitude.

        Args:
            x (float): X coordinate in meters from the origin.
            y (float): Y coordinate in meters from the origin.

        Returns:
            Tuple[float, float, bool]: latitude and longitude in degrees, and whether the
                conversion was possible.
        """
        o = self._snapshot()
        if o is None:
            return 0.0, 0.0, False
        dx = x * o.cos_heading - y * o.sin_heading
        dy = x * o.sin_heading + y * o.cos_heading
        lat, lon = _wgs84_from_offsets(dx, dy, o.latitude, o.longitude, o.rho_lat, o.rho_lon)
        return float(lat), float(lon), True

    def to_local_point(self, point: GeoPoint) -> Optional[LocalPoint]:
        x, y, ok = self.to_local_xy(point.latitude, point.longitude)
        return LocalPoint(x, y) if ok else None

    def to_geo_point(self, point: LocalPoint) -> Optional[GeoPoint]:
        x, y, ok = self.to_wgs84(point.x, point.y)
        return GeoPoint(x, y) if ok else None

    def __repr__(self) -> str:
        o = self._snapshot()
        if o is None:
            return "LocalXyWgs84Util(uninitialized)"
        return (f"LocalXyWgs84Util(lat={o.latitude}, lon={o.longitude}, "
                f"heading={o.heading}, alt={o.altitude}, frame={o.frame!r})")
