"""
GPX route and track decoding.

Structure accepted:

    gpx > rte > rtept+
    gpx > trk > (trkseg > trkpt+)+ | trkpt+

Point elements carry `lat`/`lon` attributes and optional `ele` and `name`
children; track points also need a `time` child (YYYY-MM-DDTHH:MM:SSZ).
A GPX document is parsed as one unit: the first missing or malformed
construct aborts the whole parse.
"""

from __future__ import annotations

import datetime as dt
import logging
import xml.etree.ElementTree as ET
from typing import List, Optional

from .errors import InvalidData, MalformedDocument, MalformedTimestamp, MissingAttribute, MissingElement
from .positions import Position, RoutePoint, TrackPoint

logger = logging.getLogger(__name__)

GPX = "gpx"
RTE, RTEPT = "rte", "rtept"
TRK, TRKSEG, TRKPT = "trk", "trkseg", "trkpt"
LAT, LON, ELE, NAME, TIME = "lat", "lon", "ele", "name", "time"

TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def _local_name(tag: str) -> str:
    # "{http://www.topografix.com/GPX/1/1}trkpt" -> "trkpt"
    return tag.rsplit("}", 1)[-1]


class GPXElement:
    """Read-only view of one XML element, addressed by local tag names."""

    __slots__ = ("_element",)

    def __init__(self, element: ET.Element) -> None:
        self._element = element

    @property
    def name(self) -> str:
        return _local_name(self._element.tag)

    def children_named(self, tag: str) -> List["GPXElement"]:
        return [GPXElement(child) for child in self._element if _local_name(child.tag) == tag]

    def attribute(self, name: str) -> Optional[str]:
        return self._element.get(name)

    def leaf_text(self) -> str:
        return self._element.text or ""

    def __repr__(self) -> str:
        return f"GPXElement({self.name!r})"


def load_root(source: str, is_file_name: bool = False) -> GPXElement:
    """Parse GPX text, or the file it names, into its root element."""
    try:
        if is_file_name:
            root = ET.parse(source).getroot()
        else:
            root = ET.fromstring(source)
    except ET.ParseError as exc:
        raise MalformedDocument(f"Malformed GPX document: {exc}") from exc
    return GPXElement(root)


def require_root(root: GPXElement) -> GPXElement:
    if root.name != GPX:
        raise MissingElement(GPX)
    return root


def require_child(element: GPXElement, name: str, index: int = 0) -> GPXElement:
    children = element.children_named(name)
    if not 0 <= index < len(children):
        raise MissingElement(name)
    return children[index]


def parse_position(element: GPXElement) -> Position:
    lat = element.attribute(LAT)
    if lat is None:
        raise MissingAttribute(LAT)
    lon = element.attribute(LON)
    if lon is None:
        raise MissingAttribute(LON)

    ele = "0"
    elevations = element.children_named(ELE)
    if elevations:
        ele = elevations[0].leaf_text()

    try:
        return Position.from_degrees(lat, lon, ele)
    except ValueError as exc:
        raise InvalidData(f"{element.name}: {exc}") from exc


def parse_name(element: GPXElement) -> str:
    names = element.children_named(NAME)
    if not names:
        return ""
    return names[0].leaf_text().strip()


def parse_time(element: GPXElement) -> dt.datetime:
    text = require_child(element, TIME).leaf_text()
    try:
        stamp = dt.datetime.strptime(text.strip(), TIME_FORMAT)
    except ValueError:
        raise MalformedTimestamp(text) from None
    return stamp.replace(tzinfo=dt.timezone.utc)


def parse_route_point(element: GPXElement) -> RoutePoint:
    return RoutePoint(parse_position(element), parse_name(element))


def parse_track_point(element: GPXElement) -> TrackPoint:
    return TrackPoint(parse_position(element), parse_name(element), parse_time(element))


def _track_points(container: GPXElement) -> List[TrackPoint]:
    points = container.children_named(TRKPT)
    if not points:
        raise MissingElement(TRKPT)
    return [parse_track_point(p) for p in points]


def parse_route(source: str, is_file_name: bool = False) -> List[RoutePoint]:
    """Parse GPX data containing a route, from text or from a file."""
    rte = require_child(require_root(load_root(source, is_file_name)), RTE)
    points = rte.children_named(RTEPT)
    if not points:
        raise MissingElement(RTEPT)
    result = [parse_route_point(p) for p in points]
    logger.debug("Parsed route with %d points", len(result))
    return result


def parse_track(source: str, is_file_name: bool = False) -> List[TrackPoint]:
    """Parse GPX data containing a track, from text or from a file."""
    trk = require_child(require_root(load_root(source, is_file_name)), TRK)

    segments = trk.children_named(TRKSEG)
    result: List[TrackPoint] = []
    if segments:
        for seg in segments:
            result.extend(_track_points(seg))
    else:
        result = _track_points(trk)
    logger.debug("Parsed track with %d points in %d segment(s)", len(result), len(segments))
    return result


__all__ = [
    "GPXElement",
    "load_root",
    "require_root",
    "require_child",
    "parse_position",
    "parse_name",
    "parse_time",
    "parse_route_point",
    "parse_track_point",
    "parse_route",
    "parse_track",
]
