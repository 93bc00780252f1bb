"""Typed records for N2YO JSON responses.

Each record is decoded with ``from_dict`` from the parsed JSON body. Field
names on the wire are kept exactly as N2YO sends them (partly camelCase);
the Python attributes use snake_case.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, TypeVar

import numpy as np
from numpy.typing import NDArray

from n2yo.core.tle import TLE, parse_tle

logger = logging.getLogger(__name__)

T = TypeVar("T")


# ---------------------------------------------------------------------------
# Field access helpers
# ---------------------------------------------------------------------------

def _mapping(data: Any, what: str) -> Mapping[str, Any]:
    if not isinstance(data, Mapping):
        logger.error("Expected a JSON object for %s, got %s", what, type(data).__name__)
        raise ValueError(f"Expected a JSON object for {what}, got {type(data).__name__}")
    return data


def _get(data: Mapping[str, Any], key: str) -> Any:
    try:
        return data[key]
    except KeyError:
        logger.error("Missing required field %r", key)
        raise ValueError(f"Missing required field {key!r}") from None


def _float(data: Mapping[str, Any], key: str) -> float:
    value = _get(data, key)
    # bool is an int subclass but never a valid number on the wire
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        logger.error("Field %r must be a number, got %r", key, value)
        raise ValueError(f"Field {key!r} must be a number, got {value!r}")
    return float(value)


def _int(data: Mapping[str, Any], key: str) -> int:
    value = _get(data, key)
    if isinstance(value, bool) or not isinstance(value, int):
        logger.error("Field %r must be an integer, got %r", key, value)
        raise ValueError(f"Field {key!r} must be an integer, got {value!r}")
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = _get(data, key)
    if not isinstance(value, str):
        logger.error("Field %r must be a string, got %r", key, value)
        raise ValueError(f"Field {key!r} must be a string, got {value!r}")
    return value


def _records(
    data: Mapping[str, Any], key: str, decode: Callable[[Any], T]
) -> tuple[T, ...]:
    value = _get(data, key)
    if not isinstance(value, list):
        logger.error("Field %r must be a list, got %s", key, type(value).__name__)
        raise ValueError(f"Field {key!r} must be a list, got {type(value).__name__}")
    return tuple(decode(item) for item in value)


def _utc(timestamp: int) -> datetime:
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


# ---------------------------------------------------------------------------
# Common envelope
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Info:
    """Envelope attached to every satellite-specific response.

    Attributes:
        satid: NORAD catalog number.
        satname: Satellite name as known to N2YO.
        transactionscount: API transactions used in the last 60 minutes.
    """

    satid: int
    satname: str
    transactionscount: int

    @classmethod
    def from_dict(cls, data: Any) -> Info:
        data = _mapping(data, "info")
        return cls(
            satid=_int(data, "satid"),
            satname=_str(data, "satname"),
            transactionscount=_int(data, "transactionscount"),
        )


# ---------------------------------------------------------------------------
# TLE
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TleResponse:
    """Response of the ``tle`` endpoint.

    Attributes:
        info: Satellite envelope.
        tle: Both element lines joined by CRLF.
    """

    info: Info
    tle: str

    @classmethod
    def from_dict(cls, data: Any) -> TleResponse:
        data = _mapping(data, "tle response")
        return cls(info=Info.from_dict(_get(data, "info")), tle=_str(data, "tle"))

    def to_tle(self) -> TLE:
        """Parse the element lines into a :class:`~n2yo.core.tle.TLE`.

        Raises:
            ValueError: If the lines are not a valid element set.
        """
        return parse_tle(self.tle, name=self.info.satname)


# ---------------------------------------------------------------------------
# Positions
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class SatellitePosition:
    """Satellite geometry at one instant, seen from the observer.

    Attributes:
        latitude: Sub-satellite latitude in degrees.
        longitude: Sub-satellite longitude in degrees.
        altitude: Altitude above the ellipsoid in km.
        azimuth: Azimuth from the observer in degrees.
        elevation: Elevation from the observer in degrees.
        right_ascension: Right ascension in degrees.
        declination: Declination in degrees.
        timestamp: Unix time (UTC) of the sample.
    """

    latitude: float
    longitude: float
    altitude: float
    azimuth: float
    elevation: float
    right_ascension: float
    declination: float
    timestamp: int

    @classmethod
    def from_dict(cls, data: Any) -> SatellitePosition:
        data = _mapping(data, "position")
        return cls(
            latitude=_float(data, "satlatitude"),
            longitude=_float(data, "satlongitude"),
            altitude=_float(data, "sataltitude"),
            azimuth=_float(data, "azimuth"),
            elevation=_float(data, "elevation"),
            right_ascension=_float(data, "ra"),
            declination=_float(data, "dec"),
            timestamp=_int(data, "timestamp"),
        )

    @property
    def time(self) -> datetime:
        return _utc(self.timestamp)


@dataclass(frozen=True)
class PositionsResponse:
    """Response of the ``positions`` endpoint, one sample per second."""

    info: Info
    positions: tuple[SatellitePosition, ...]

    @classmethod
    def from_dict(cls, data: Any) -> PositionsResponse:
        data = _mapping(data, "positions response")
        return cls(
            info=Info.from_dict(_get(data, "info")),
            positions=_records(data, "positions", SatellitePosition.from_dict),
        )

    def to_array(self) -> NDArray[np.float64]:
        """Ground track as an array of shape (n, 3): latitude, longitude, altitude."""
        if not self.positions:
            return np.empty((0, 3), dtype=np.float64)
        return np.array(
            [(p.latitude, p.longitude, p.altitude) for p in self.positions],
            dtype=np.float64,
        )


# ---------------------------------------------------------------------------
# Passes
# ---------------------------------------------------------------------------

class _PassTimes:
    """Aware UTC datetimes for the start/max/end timestamps of a pass."""

    start_utc: int
    max_utc: int
    end_utc: int

    @property
    def start_time(self) -> datetime:
        return _utc(self.start_utc)

    @property
    def max_time(self) -> datetime:
        return _utc(self.max_utc)

    @property
    def end_time(self) -> datetime:
        return _utc(self.end_utc)


@dataclass(frozen=True)
class SatelliteVisualPass(_PassTimes):
    """An optically visible pass.

    Azimuths and elevations are in degrees, ``*_utc`` values are Unix
    timestamps, ``mag`` is the visual magnitude (100000 when unknown) and
    ``duration`` the visible time in seconds.
    """

    start_az: float
    start_az_compass: str
    start_el: float
    start_utc: int
    max_az: float
    max_az_compass: str
    max_el: float
    max_utc: int
    end_az: float
    end_az_compass: str
    end_el: float
    end_utc: int
    mag: float
    duration: int

    @classmethod
    def from_dict(cls, data: Any) -> SatelliteVisualPass:
        data = _mapping(data, "visual pass")
        return cls(
            start_az=_float(data, "startAz"),
            start_az_compass=_str(data, "startAzCompass"),
            start_el=_float(data, "startEl"),
            start_utc=_int(data, "startUTC"),
            max_az=_float(data, "maxAz"),
            max_az_compass=_str(data, "maxAzCompass"),
            max_el=_float(data, "maxEl"),
            max_utc=_int(data, "maxUTC"),
            end_az=_float(data, "endAz"),
            end_az_compass=_str(data, "endAzCompass"),
            end_el=_float(data, "endEl"),
            end_utc=_int(data, "endUTC"),
            mag=_float(data, "mag"),
            duration=_int(data, "duration"),
        )


@dataclass(frozen=True)
class SatelliteRadioPass(_PassTimes):
    """A pass above the horizon, for radio contact.

    Only the peak carries an elevation; start and end are at the horizon.
    """

    start_az: float
    start_az_compass: str
    start_utc: int
    max_az: float
    max_az_compass: str
    max_el: float
    max_utc: int
    end_az: float
    end_az_compass: str
    end_utc: int

    @classmethod
    def from_dict(cls, data: Any) -> SatelliteRadioPass:
        data = _mapping(data, "radio pass")
        return cls(
            start_az=_float(data, "startAz"),
            start_az_compass=_str(data, "startAzCompass"),
            start_utc=_int(data, "startUTC"),
            max_az=_float(data, "maxAz"),
            max_az_compass=_str(data, "maxAzCompass"),
            max_el=_float(data, "maxEl"),
            max_utc=_int(data, "maxUTC"),
            end_az=_float(data, "endAz"),
            end_az_compass=_str(data, "endAzCompass"),
            end_utc=_int(data, "endUTC"),
        )


@dataclass(frozen=True)
class VisualPassesResponse:
    """Response of the ``visualpasses`` endpoint."""

    info: Info
    passes: tuple[SatelliteVisualPass, ...]

    @classmethod
    def from_dict(cls, data: Any) -> VisualPassesResponse:
        data = _mapping(data, "visual passes response")
        return cls(
            info=Info.from_dict(_get(data, "info")),
            passes=_records(data, "passes", SatelliteVisualPass.from_dict),
        )


@dataclass(frozen=True)
class RadioPassesResponse:
    """Response of the ``radiopasses`` endpoint."""

    info: Info
    passes: tuple[SatelliteRadioPass, ...]

    @classmethod
    def from_dict(cls, data: Any) -> RadioPassesResponse:
        data = _mapping(data, "radio passes response")
        return cls(
            info=Info.from_dict(_get(data, "info")),
            passes=_records(data, "passes", SatelliteRadioPass.from_dict),
        )


# ---------------------------------------------------------------------------
# Above
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AboveInfo:
    """Envelope of the ``above`` endpoint.

    ``category`` is the display name chosen by the server (for example
    ``"Amateur radio"``), not a :class:`SatelliteCategory` member.
    """

    category: str
    transactionscount: int
    satcount: int

    @classmethod
    def from_dict(cls, data: Any) -> AboveInfo:
        data = _mapping(data, "info")
        return cls(
            category=_str(data, "category"),
            transactionscount=_int(data, "transactionscount"),
            satcount=_int(data, "satcount"),
        )


@dataclass(frozen=True)
class SatelliteInfo:
    """A satellite currently within the search radius."""

    satid: int
    satname: str
    int_designator: str
    launch_date: str
    latitude: float
    longitude: float
    altitude: float

    @classmethod
    def from_dict(cls, data: Any) -> SatelliteInfo:
        data = _mapping(data, "satellite")
        return cls(
            satid=_int(data, "satid"),
            satname=_str(data, "satname"),
            int_designator=_str(data, "intDesignator"),
            launch_date=_str(data, "launchDate"),
            latitude=_float(data, "satlat"),
            longitude=_float(data, "satlng"),
            altitude=_float(data, "satalt"),
        )


@dataclass(frozen=True)
class AboveResponse:
    """Response of the ``above`` endpoint."""

    info: AboveInfo
    above: tuple[SatelliteInfo, ...]

    @classmethod
    def from_dict(cls, data: Any) -> AboveResponse:
        data = _mapping(data, "above response")
        return cls(
            info=AboveInfo.from_dict(_get(data, "info")),
            above=_records(data, "above", SatelliteInfo.from_dict),
        )
