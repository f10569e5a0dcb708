"""
Best-effort extraction of positions from a multi-line NMEA log.

Each line is classified into a LineOutcome instead of raising: a malformed,
checksum-corrupted, unsupported or unusable sentence is skipped and the rest
of the log is still processed.
"""

from __future__ import annotations

import enum
import logging
import os
from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from .errors import InvalidData, UnsupportedFormat
from .nmea_parser import checksum_ok, interpret_sentence_data, is_well_formed, parse_sentence_data
from .positions import Position

logger = logging.getLogger(__name__)

# Undecodable bytes become U+FFFD so a corrupted sentence fails the grammar
# check instead of silently losing the byte.
LOG_ENCODING = "ascii"
LOG_ERRORS = "replace"


class SkipReason(enum.Enum):
    MALFORMED = "malformed"
    BAD_CHECKSUM = "bad_checksum"
    UNSUPPORTED_FORMAT = "unsupported_format"
    INVALID_DATA = "invalid_data"


@dataclass(frozen=True)
class LineOutcome:
    line: str
    position: Optional[Position] = None
    format: Optional[str] = None
    skipped: Optional[SkipReason] = None

    @property
    def ok(self) -> bool:
        return self.position is not None


def interpret_line(line: str) -> LineOutcome:
    """Classify one log line; never raises."""
    sentence = line.rstrip("\r\n")

    if not is_well_formed(sentence):
        return LineOutcome(sentence, skipped=SkipReason.MALFORMED)
    if not checksum_ok(sentence):
        return LineOutcome(sentence, skipped=SkipReason.BAD_CHECKSUM)

    data = parse_sentence_data(sentence)
    try:
        position = interpret_sentence_data(data)
    except UnsupportedFormat:
        return LineOutcome(sentence, format=data.format, skipped=SkipReason.UNSUPPORTED_FORMAT)
    except InvalidData as exc:
        logger.debug("Invalid %s data in %r: %s", data.format, sentence, exc)
        return LineOutcome(sentence, format=data.format, skipped=SkipReason.INVALID_DATA)
    return LineOutcome(sentence, position=position, format=data.format)


def interpret_log(lines: Iterable[str]) -> List[LineOutcome]:
    """One outcome per line, in input order."""
    return [interpret_line(line) for line in lines]


def positions_from_log(lines: Iterable[str]) -> List[Position]:
    """Positions of the valid sentences in a log, preserving input order."""
    positions: List[Position] = []
    for lineno, line in enumerate(lines, start=1):
        outcome = interpret_line(line)
        if outcome.position is None:
            logger.debug("Skipping line %d (%s)", lineno, outcome.skipped.value)
            continue
        positions.append(outcome.position)
    return positions


def positions_from_file(path: Union[str, os.PathLike]) -> List[Position]:
    with open(path, "r", encoding=LOG_ENCODING, errors=LOG_ERRORS) as f:
        return positions_from_log(f)


def skip_summary(outcomes: Iterable[LineOutcome]) -> Counter:
    """Count skipped lines per SkipReason."""
    return Counter(o.skipped for o in outcomes if o.skipped is not None)


__all__ = [
    "SkipReason",
    "LineOutcome",
    "interpret_line",
    "interpret_log",
    "positions_from_log",
    "positions_from_file",
    "skip_summary",
    "LOG_ENCODING",
    "LOG_ERRORS",
]
