"""Positions from NMEA 0183 logs (GLL, GGA, RMC) and GPX routes/tracks."""

from .errors import (
    GNSSLogError,
    InvalidData,
    MalformedDocument,
    MalformedTimestamp,
    MissingAttribute,
    MissingElement,
    UnsupportedFormat,
)
from .gpx_parser import parse_route, parse_track
from .nmea_log import LineOutcome, SkipReason, interpret_log, positions_from_file, positions_from_log
from .nmea_parser import (
    SentenceData,
    SentenceFormat,
    checksum_ok,
    interpret_sentence_data,
    is_supported_format,
    is_well_formed,
    parse_sentence_data,
)
from .positions import Position, RoutePoint, TrackPoint

__version__ = "0.1.0"
