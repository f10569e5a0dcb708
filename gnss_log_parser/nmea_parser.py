import re
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Tuple

from .errors import InvalidData, UnsupportedFormat
from .positions import Position

# $GP + 3-letter format code, payload of word chars / . , -, then *hh
SENTENCE_LINE = re.compile(r"\$GP([A-Z]{3}),[\w.,-]*\*[0-9A-Fa-f]{2}", re.ASCII)
CHECKSUM_SUFFIX = re.compile(r"[0-9A-Fa-f]{2}")


class FieldSchema(NamedTuple):
    latitude: int
    latitude_direction: int
    longitude: int
    longitude_direction: int
    elevation: Optional[int] = None


class SentenceFormat(str, Enum):
    GLL = "GLL"
    GGA = "GGA"
    RMC = "RMC"

    @property
    def schema(self) -> FieldSchema:
        """Indices of the position fields inside SentenceData.data_fields."""
        if self is SentenceFormat.GLL:
            return FieldSchema(0, 1, 2, 3)
        if self is SentenceFormat.GGA:
            return FieldSchema(1, 2, 3, 4, elevation=8)
        return FieldSchema(2, 3, 4, 5)


SUPPORTED_FORMATS = frozenset(f.value for f in SentenceFormat)


@dataclass(frozen=True)
class SentenceData:
    format: str
    data_fields: Tuple[str, ...]


def is_supported_format(code: str) -> bool:
    """True for exactly 'GLL', 'GGA' or 'RMC'."""
    return code in SUPPORTED_FORMATS


def is_well_formed(candidate: str) -> bool:
    """True if the whole candidate matches $GP<FMT>,<payload>*<hh>."""
    return SENTENCE_LINE.fullmatch(candidate) is not None


def checksum_of(sentence: str) -> int:
    """XOR of the characters between the leading '$' and the first '*'."""
    body, _, _ = sentence[1:].partition("*")
    calc = 0
    for ch in body:
        calc ^= ord(ch)
    return calc & 0xFF


def checksum_ok(sentence: str) -> bool:
    """Validate NMEA checksum."""
    if "*" not in sentence:
        return False
    _, _, checksum_str = sentence.rpartition("*")
    if not CHECKSUM_SUFFIX.fullmatch(checksum_str):
        return False
    return int(checksum_str, 16) == checksum_of(sentence)


def parse_sentence_data(sentence: str) -> SentenceData:
    """Split a well-formed sentence into its format code and data fields."""
    if not is_well_formed(sentence):
        raise ValueError(f"Not a well-formed NMEA sentence: {sentence!r}")
    payload, _, _ = sentence[7:].partition("*")
    return SentenceData(format=sentence[3:6], data_fields=tuple(payload.split(",")))


def interpret_sentence_data(data: SentenceData) -> Position:
    """Map the fields of a GLL, GGA or RMC sentence to a Position."""
    if not is_supported_format(data.format):
        raise UnsupportedFormat(data.format)
    schema = SentenceFormat(data.format).schema
    fields = data.data_fields

    try:
        lat = fields[schema.latitude]
        lat_dir = fields[schema.latitude_direction]
        lon = fields[schema.longitude]
        lon_dir = fields[schema.longitude_direction]
        if not lat_dir or not lon_dir:
            raise InvalidData(f"{data.format}: empty hemisphere field")

        if schema.elevation is not None:
            return Position.from_nmea(lat, lat_dir[0], lon, lon_dir[0], fields[schema.elevation])
        return Position.from_nmea(lat, lat_dir[0], lon, lon_dir[0])
    except InvalidData:
        raise
    except (IndexError, ValueError) as exc:
        raise InvalidData(f"{data.format}: data fields incorrect ({exc})") from exc


__all__ = [
    "SENTENCE_LINE",
    "FieldSchema",
    "SentenceFormat",
    "SentenceData",
    "is_supported_format",
    "is_well_formed",
    "checksum_of",
    "checksum_ok",
    "parse_sentence_data",
    "interpret_sentence_data",
]
