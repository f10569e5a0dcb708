# main.py
"""
gnss-log-parser command line.

    gnss-log-parser [--log-level LEVEL] nmea FILE [--stats]
    gnss-log-parser [--log-level LEVEL] gpx FILE --route|--track

Each extracted point is printed as one JSON object per line:

  {"lat": 48.1173, "lon": 11.516667, "ele": 545.4}
  {"name": "Newton", "lat": 52.9581, "lon": -1.1542, "ele": 48.0, "time": "2026-10-19T07:00:00+00:00"}
"""

from __future__ import annotations

import json
import logging
import sys
from typing import Dict

from .config import parse_args
from .errors import GNSSLogError
from .gpx_parser import parse_route, parse_track
from .nmea_log import LOG_ENCODING, LOG_ERRORS, interpret_log, positions_from_file, skip_summary

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def _emit(obj: Dict) -> None:
    print(json.dumps(obj))


def cmd_nmea(path: str, stats: bool = False) -> int:
    if stats:
        with open(path, "r", encoding=LOG_ENCODING, errors=LOG_ERRORS) as f:
            outcomes = interpret_log(f)
        positions = [o.position for o in outcomes if o.position is not None]
        summary = skip_summary(outcomes)
        logger.info(
            "%d line(s), %d position(s), skipped: %s",
            len(outcomes),
            len(positions),
            ", ".join(f"{reason.value}={n}" for reason, n in summary.items()) or "none",
        )
    else:
        positions = positions_from_file(path)
    for pos in positions:
        _emit(pos.as_dict())
    return 0


def cmd_gpx(path: str, kind: str) -> int:
    if kind == "route":
        for rp in parse_route(path, is_file_name=True):
            _emit({"name": rp.name, **rp.position.as_dict()})
    else:
        for tp in parse_track(path, is_file_name=True):
            _emit({"name": tp.name, **tp.position.as_dict(), "time": tp.timestamp.isoformat()})
    return 0


def configure_logging(level: str) -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


def main(argv=None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)
    try:
        if args.command == "nmea":
            return cmd_nmea(args.file, stats=args.stats)
        return cmd_gpx(args.file, args.kind)
    except (GNSSLogError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 2


def run() -> None:
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass


if __name__ == "__main__":
    run()
