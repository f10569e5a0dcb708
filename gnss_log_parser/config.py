import argparse

DEFAULT_LOG_LEVEL = "INFO"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="gnss-log-parser",
        description="Extract positions from NMEA logs and GPX files",
    )
    parser.add_argument(
        "--log-level",
        dest="log_level",
        default=DEFAULT_LOG_LEVEL,
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    nmea = sub.add_parser("nmea", help="Print positions found in an NMEA log")
    nmea.add_argument("file", help="NMEA log file")
    nmea.add_argument("--stats", action="store_true", help="Log a summary of skipped lines")

    gpx = sub.add_parser("gpx", help="Print the points of a GPX route or track")
    gpx.add_argument("file", help="GPX file")
    kind = gpx.add_mutually_exclusive_group(required=True)
    kind.add_argument("--route", action="store_const", dest="kind", const="route")
    kind.add_argument("--track", action="store_const", dest="kind", const="track")

    return parser.parse_args(argv)
