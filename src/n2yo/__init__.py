"""
n2yo: Python client for the N2YO satellite-tracking API.

Fetch TLEs, future positions, visual and radio pass predictions, and the
satellites currently above an observer, decoded into typed records.
"""

from __future__ import annotations

__version__ = "0.1.0-dev"

from n2yo.api.client import N2yoClient
from n2yo.api.errors import N2yoError, ParseError, RequestError, ResponseError
from n2yo.core.tle import TLE, parse_tle
from n2yo.data.categories import SatelliteCategory
from n2yo.data.models import (
    AboveInfo,
    AboveResponse,
    Info,
    PositionsResponse,
    RadioPassesResponse,
    SatelliteInfo,
    SatellitePosition,
    SatelliteRadioPass,
    SatelliteVisualPass,
    TleResponse,
    VisualPassesResponse,
)
from n2yo.utils.constants import DEFAULT_BASE_URL

__all__ = [
    "__version__",
    "N2yoClient",
    "DEFAULT_BASE_URL",
    "N2yoError",
    "RequestError",
    "ResponseError",
    "ParseError",
    "SatelliteCategory",
    "Info",
    "TleResponse",
    "SatellitePosition",
    "PositionsResponse",
    "SatelliteVisualPass",
    "VisualPassesResponse",
    "SatelliteRadioPass",
    "RadioPassesResponse",
    "AboveInfo",
    "SatelliteInfo",
    "AboveResponse",
    "TLE",
    "parse_tle",
]
