# local_xy/origin.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Mapping, Optional
import json

@dataclass(frozen=True)
class OriginEvent:
    """
    External configuration event that establishes a LocalXY origin.

    Heading is not part of the event; it is fixed when the converter is built.

    Attributes:
        latitude (float): Origin latitude in degrees.
        longitude (float): Origin longitude in degrees.
        altitude (float): Origin altitude in meters (default is 0.0).
        frame (str): Coordinate frame identifier of the origin (default is "").
    """
    latitude: float
    longitude: float
    altitude: float = 0.0
    frame: str = ""

def _frame_id(msg: Any) -> str:
    header = getattr(msg, "header", None)
    return str(getattr(header, "frame_id", "") or "") if header is not None else ""

def origin_event_from_message(msg: Any) -> OriginEvent:
    """
    Builds an OriginEvent from an origin message.

    Accepts GPS fix style messages (``latitude``, ``longitude``, ``altitude``), stamped
    poses where ``pose.position`` holds x=longitude, y=latitude, z=altitude, and plain
    mappings with ``latitude``/``longitude`` and optional ``altitude``/``frame`` keys.

    Args:
        msg (Any): The origin message.

    Returns:
        OriginEvent: The event carried by the message.

    Raises:
        TypeError: If the message has none of the supported shapes.
    """
    if isinstance(msg, OriginEvent):
        return msg
    if isinstance(msg, Mapping):
        if "latitude" not in msg or "longitude" not in msg:
            raise TypeError("origin mapping needs 'latitude' and 'longitude' keys")
        return OriginEvent(float(msg["latitude"]), float(msg["longitude"]),
                           float(msg.get("altitude", 0.0)), str(msg.get("frame", "")))
    if hasattr(msg, "latitude") and hasattr(msg, "longitude"):
        return OriginEvent(float(msg.latitude), float(msg.longitude),
                           float(getattr(msg, "altitude", 0.0)), _frame_id(msg))
    position = getattr(getattr(msg, "pose", None), "position", None)
    if position is not None:
        return OriginEvent(float(position.y), float(position.x),
                           float(getattr(position, "z", 0.0)), _frame_id(msg))
    raise TypeError(f"unsupported origin message type: {type(msg).__name__}")

@dataclass
class OriginConfig:
    """
    Static origin configuration for a LocalXY converter.

    Attributes:
        latitude (float): Reference latitude in degrees.
        longitude (float): Reference longitude in degrees.
        heading (float): Reference heading in degrees, counterclockwise from east.
        altitude (float): Reference altitude in meters.
        frame (str): Coordinate frame identifier.
    """
    latitude: float
    longitude: float
    heading: float = 0.0
    altitude: float = 0.0
    frame: str = ""

    # ---------- Factories ----------
    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OriginConfig":
        """
        Creates an OriginConfig from a mapping.

        Args:
            data (Mapping[str, Any]): Keys latitude, longitude and optionally heading, altitude, frame.

        Returns:
            OriginConfig: The parsed configuration.

        Raises:
            ValueError: If latitude or longitude is missing or not numeric.
        """
        missing = [k for k in ("latitude", "longitude") if data.get(k) is None]
        if missing:
            raise ValueError(f"origin config missing {', '.join(missing)}")
        try:
            return cls(
                latitude=float(data["latitude"]),
                longitude=float(data["longitude"]),
                heading=float(data.get("heading", 0.0)),
                altitude=float(data.get("altitude", 0.0)),
                frame=str(data.get("frame", "")),
            )
        except (TypeError, ValueError) as e:
            raise ValueError(f"invalid origin config: {e}") from e

    @classmethod
    def from_json(cls, filepath: str, key: Optional[str] = None) -> "OriginConfig":
        """
        Creates an OriginConfig from a JSON file.

        Args:
            filepath (str): Path to the JSON file.
            key (Optional[str]): Top-level key holding the origin object, if it is nested.

        Returns:
            OriginConfig: The parsed configuration.
        """
        with open(filepath, "r") as f:
            data = json.load(f)
        if key is not None:
            data = data[key]
        return cls.from_dict(data)
