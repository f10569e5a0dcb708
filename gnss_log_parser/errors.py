# errors.py
"""Exception taxonomy shared by the NMEA and GPX decoders."""


class GNSSLogError(Exception):
    """Base class for every error raised by gnss_log_parser."""


class UnsupportedFormat(GNSSLogError, ValueError):
    """Sentence looks like NMEA but its format code is not GLL, GGA or RMC."""

    def __init__(self, format_code: str) -> None:
        super().__init__(f"Unsupported sentence format {format_code!r}, should be 'GLL', 'GGA' or 'RMC'")
        self.format = format_code


class InvalidData(GNSSLogError, ValueError):
    """A field is present but unusable (missing index, non-numeric, empty hemisphere)."""


class MissingElement(GNSSLogError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Missing '{name}' element.")
        self.name = name


class MissingAttribute(GNSSLogError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Missing '{name}' attribute.")
        self.name = name


class MalformedTimestamp(GNSSLogError, ValueError):
    def __init__(self, text: str) -> None:
        super().__init__(f"Malformed date/time content: {text}")
        self.text = text


class MalformedDocument(GNSSLogError):
    """The GPX source is not well-formed XML."""


__all__ = [
    "GNSSLogError",
    "UnsupportedFormat",
    "InvalidData",
    "MissingElement",
    "MissingAttribute",
    "MalformedTimestamp",
    "MalformedDocument",
]
