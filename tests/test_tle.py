"""Tests for TLE parsing."""

import pytest

from n2yo.core.tle import TLE, parse_tle
from n2yo.data.models import Info, TleResponse

# ISS (ZARYA), a well-known reference
ISS_LINE1 = "1 25544U 98067A   24045.54896019  .00016717  00000-0  30093-3 0  9993"
ISS_LINE2 = "2 25544  51.6412 207.4925 0004948 290.5508 178.9792 15.49583488439596"
N2YO_TLE = f"{ISS_LINE1}\r\n{ISS_LINE2}"

# NOAA 19, used to build a mismatched pair
NOAA_LINE2 = "2 33591  99.1954 120.4286 0013592 253.6233 106.3451 14.12970431773254"


class TestParseTLE:
    def test_parse_crlf(self) -> None:
        tle = parse_tle(N2YO_TLE, name="SPACE STATION")
        assert tle.norad_id == 25544
        assert tle.name == "SPACE STATION"
        assert tle.line1 == ISS_LINE1
        assert tle.line2 == ISS_LINE2

    def test_parse_lf(self) -> None:
        tle = parse_tle(f"{ISS_LINE1}\n{ISS_LINE2}\n")
        assert tle.norad_id == 25544
        assert tle.name == ""

    def test_orbital_elements_reasonable(self) -> None:
        tle = parse_tle(N2YO_TLE)
        assert 51.0 < tle.inclination_deg < 52.0
        assert 0.0 < tle.eccentricity < 0.01
        assert 15.0 < tle.mean_motion_rev_per_day < 16.0
        assert 0.0 <= tle.raan_deg < 360.0

    def test_epoch_parsed(self) -> None:
        tle = parse_tle(N2YO_TLE)
        assert tle.epoch.year == 2024
        assert tle.epoch.month == 2  # day 45 ~ Feb 14
        assert tle.epoch.day == 14
        assert tle.epoch.utcoffset() is not None

    def test_bstar(self) -> None:
        tle = parse_tle(N2YO_TLE)
        assert abs(tle.bstar - 3.0093e-4) < 1e-7

    def test_satrec_available(self) -> None:
        tle = parse_tle(N2YO_TLE)
        assert tle.satrec is not None

    def test_str_contains_lines(self) -> None:
        tle = parse_tle(N2YO_TLE, name="SPACE STATION")
        text = str(tle)
        assert text.splitlines() == ["SPACE STATION", ISS_LINE1, ISS_LINE2]

    def test_single_line_raises(self) -> None:
        with pytest.raises(ValueError, match="Expected 2 TLE lines"):
            parse_tle(ISS_LINE1)

    def test_empty_raises(self) -> None:
        with pytest.raises(ValueError, match="Expected 2 TLE lines, got 0"):
            parse_tle("")

    def test_invalid_line1_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid TLE line 1"):
            parse_tle(f"garbage\r\n{ISS_LINE2}")

    def test_invalid_line2_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid TLE line 2"):
            parse_tle(f"{ISS_LINE1}\r\ngarbage")

    def test_swapped_lines_raise(self) -> None:
        with pytest.raises(ValueError, match="Invalid TLE line 1"):
            parse_tle(f"{ISS_LINE2}\r\n{ISS_LINE1}")

    def test_mismatched_objects_raise(self) -> None:
        with pytest.raises(ValueError, match="different objects"):
            parse_tle(f"{ISS_LINE1}\r\n{NOAA_LINE2}")

    def test_mismatched_objects_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("ERROR", logger="n2yo.core.tle"):
            with pytest.raises(ValueError):
                parse_tle(f"{ISS_LINE1}\r\n{NOAA_LINE2}")
        assert "different objects" in caplog.text


class TestTleResponse:
    def test_to_tle_uses_satellite_name(self) -> None:
        response = TleResponse(
            info=Info(satid=25544, satname="SPACE STATION", transactionscount=1),
            tle=N2YO_TLE,
        )
        tle = response.to_tle()
        assert isinstance(tle, TLE)
        assert tle.name == "SPACE STATION"
        assert tle.norad_id == response.info.satid

    def test_to_tle_with_empty_text_raises(self) -> None:
        response = TleResponse(
            info=Info(satid=99999, satname="UNKNOWN", transactionscount=1),
            tle="",
        )
        with pytest.raises(ValueError):
            response.to_tle()
