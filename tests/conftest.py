"""Shared pytest configuration and fixtures."""

import sys
from pathlib import Path

import pytest

from nmea_samples import GGA_MUNICH, GLL_SOLENT, RMC_SOLENT

# Ensure the project root is in the path for imports
PROJECT_ROOT = Path(__file__).parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def mixed_log():
    """A log with one valid line of each format among assorted junk."""
    return [
        GLL_SOLENT + "\r\n",
        "\n",
        "garbage line\n",
        "$GPGGA,123519,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*00\n",
        GGA_MUNICH + "\n",
        "$GPXYZ,4807.038,N,01131.000,E*75\n",
        "$GPRMC,,V,,,,,,,,,,N*53\n",
        RMC_SOLENT,
    ]
