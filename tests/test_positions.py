"""Tests for the Position value type and its NMEA / GPX constructors."""

import dataclasses

import pytest

from gnss_log_parser.positions import Position, RoutePoint, ddmm_to_decimal


class TestDdmmToDecimal:

    def test_latitude(self):
        # 48 degrees, 7.038 minutes
        assert ddmm_to_decimal("4807.038", "N", is_lat=True) == pytest.approx(48.1173, rel=1e-4)

    def test_longitude_three_digit_degrees(self):
        assert ddmm_to_decimal("15101.123", "E", is_lat=False) == pytest.approx(151.018717, abs=1e-6)

    def test_south_and_west_negative(self):
        assert ddmm_to_decimal("3348.456", "S", is_lat=True) < 0
        assert ddmm_to_decimal("00146.328", "W", is_lat=False) < 0

    def test_wrong_hemisphere_for_axis(self):
        with pytest.raises(ValueError):
            ddmm_to_decimal("4807.038", "E", is_lat=True)
        with pytest.raises(ValueError):
            ddmm_to_decimal("01131.000", "N", is_lat=False)

    @pytest.mark.parametrize(
        "value",
        ["", " ", "abc", "4860.000", "-4807.038", "nan", "inf", "48_07.038", "4.807038e3"],
    )
    def test_invalid_values(self, value):
        with pytest.raises(ValueError):
            ddmm_to_decimal(value, "N", is_lat=True)


class TestPosition:

    def test_from_nmea_default_elevation(self):
        pos = Position.from_nmea("5057.970", "N", "00146.328", "W")
        assert pos.latitude == pytest.approx(50.966167, abs=1e-6)
        assert pos.longitude == pytest.approx(-1.772133, abs=1e-6)
        assert pos.elevation == 0.0

    def test_from_nmea_with_elevation(self):
        pos = Position.from_nmea("4807.038", "N", "01131.000", "E", "545.4")
        assert pos.elevation == pytest.approx(545.4)

    def test_from_degrees(self):
        pos = Position.from_degrees("52.9581", "-1.1542", "48.5")
        assert pos == Position(52.9581, -1.1542, 48.5)

    @pytest.mark.parametrize(
        "lat, lon, ele",
        [
            ("90.5", "0", "0"),
            ("-91", "0", "0"),
            ("0", "180.1", "0"),
            ("0", "-181", "0"),
            ("x", "0", "0"),
            ("0", "0", "inf"),
            ("5_2", "0", "0"),
            ("0", "0", "1_0"),
            ("0x1", "0", "0"),
        ],
    )
    def test_from_degrees_rejects(self, lat, lon, ele):
        with pytest.raises(ValueError):
            Position.from_degrees(lat, lon, ele)

    def test_bounds_inclusive(self):
        assert Position.from_degrees("90", "-180").latitude == 90.0
        assert Position.from_degrees("-90", "180").longitude == 180.0

    def test_immutable(self):
        pos = Position(1.0, 2.0)
        with pytest.raises(dataclasses.FrozenInstanceError):
            pos.latitude = 3.0

    def test_as_dict(self):
        assert Position(1.0, 2.0, 3.0).as_dict() == {"lat": 1.0, "lon": 2.0, "ele": 3.0}

    def test_route_point_default_name(self):
        assert RoutePoint(Position(1.0, 2.0)).name == ""

    def test_plain_decimal_notation(self):
        pos = Position.from_degrees("+.5", "-7.", "10")
        assert (pos.latitude, pos.longitude, pos.elevation) == (0.5, -7.0, 10.0)
