# positions.py
"""
Value types produced by the NMEA and GPX decoders.

Coordinates are stored as signed decimal degrees (North and East positive),
elevation in metres. Two constructors mirror the two input notations:

- NMEA:  ddmm.mmmm / dddmm.mmmm plus a hemisphere character
- GPX:   decimal degrees as attribute text
"""

from __future__ import annotations

import datetime as dt
import math
import re
from dataclasses import dataclass

# Plain decimal notation only; float() alone would also take "1_0", "nan", "1e3".
NUMBER = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)", re.ASCII)


def _to_float(text: str, what: str) -> float:
    if not isinstance(text, str) or NUMBER.fullmatch(text.strip()) is None:
        raise ValueError(f"Non-numeric {what}: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"Non-finite {what}: {text!r}")
    return value


def ddmm_to_decimal(value: str, hemi: str, is_lat: bool) -> float:
    """Convert ddmm.mmmm (latitude) or dddmm.mmmm (longitude) to decimal degrees."""
    raw = _to_float(value, "latitude" if is_lat else "longitude")
    if raw < 0:
        raise ValueError(f"Negative NMEA coordinate: {value!r}")
    deg = int(raw // 100)
    minutes = raw - deg * 100
    if minutes >= 60.0:
        raise ValueError(f"Minutes out of range in {value!r}")
    decimal = deg + minutes / 60.0

    valid = ("N", "S") if is_lat else ("E", "W")
    if hemi not in valid:
        raise ValueError(f"Invalid hemisphere {hemi!r}, expected one of {valid}")
    if hemi in ("S", "W"):
        decimal = -decimal
    return decimal


@dataclass(frozen=True)
class Position:
    latitude: float
    longitude: float
    elevation: float = 0.0

    def __post_init__(self) -> None:
        if not -90.0 <= self.latitude <= 90.0:
            raise ValueError(f"Latitude out of range: {self.latitude}")
        if not -180.0 <= self.longitude <= 180.0:
            raise ValueError(f"Longitude out of range: {self.longitude}")
        if not math.isfinite(self.elevation):
            raise ValueError(f"Non-finite elevation: {self.elevation}")

    @classmethod
    def from_nmea(
        cls,
        lat: str,
        lat_dir: str,
        lon: str,
        lon_dir: str,
        elevation: str = "0",
    ) -> "Position":
        """Build a Position from NMEA ddmm.mmmm fields and hemisphere characters."""
        return cls(
            latitude=ddmm_to_decimal(lat, lat_dir, is_lat=True),
            longitude=ddmm_to_decimal(lon, lon_dir, is_lat=False),
            elevation=_to_float(elevation, "elevation"),
        )

    @classmethod
    def from_degrees(cls, lat: str, lon: str, elevation: str = "0") -> "Position":
        """Build a Position from decimal-degree text, as found in GPX attributes."""
        return cls(
            latitude=_to_float(lat, "latitude"),
            longitude=_to_float(lon, "longitude"),
            elevation=_to_float(elevation, "elevation"),
        )

    def as_dict(self) -> dict:
        return {"lat": self.latitude, "lon": self.longitude, "ele": self.elevation}


@dataclass(frozen=True)
class RoutePoint:
    position: Position
    name: str = ""


@dataclass(frozen=True)
class TrackPoint:
    position: Position
    name: str
    timestamp: dt.datetime


__all__ = ["Position", "RoutePoint", "TrackPoint", "ddmm_to_decimal"]
