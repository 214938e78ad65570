from dataclasses import dataclass

@dataclass
class GeoPoint:
    """
    Represents a WGS84 geodetic position.

    Range is not checked; out-of-range values are converted arithmetically.

    Attributes:
        latitude (float): Latitude in degrees.
        longitude (float): Longitude in degrees.
    """
    latitude: float = 0.0
    longitude: float = 0.0

@dataclass
class LocalPoint:
    """
    Represents a position in a LocalXY frame.

    Attributes:
        x (float): X coordinate in meters from the origin.
        y (float): Y coordinate in meters from the origin.
    """
    x: float = 0.0
    y: float = 0.0
