"""N2YO REST API client.

Provides typed access to the N2YO satellite-tracking service: current
TLEs, future positions, visual and radio pass predictions, and the
satellites currently above an observer.

Every call is a single blocking GET. Nothing is cached or retried.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, TypeVar

import numpy as np
import requests

from n2yo.api.errors import ParseError, RequestError, ResponseError
from n2yo.data.categories import SatelliteCategory
from n2yo.data.models import (
    AboveResponse,
    PositionsResponse,
    RadioPassesResponse,
    TleResponse,
    VisualPassesResponse,
)
from n2yo.utils.constants import DEFAULT_BASE_URL, SUCCESS_STATUS

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _coord(value: float) -> str:
    """Render a float path parameter in plain positional notation (0.0 -> '0')."""
    return np.format_float_positional(float(value), trim="-")


@dataclass(frozen=True)
class N2yoClient:
    """Client for the N2YO REST API.

    Get an API key by registering at https://www.n2yo.com/login/.

    Args:
        api_key: Your N2YO API key.
        base_url: API base URL. Defaults to production.

    Example::

        client = N2yoClient(api_key="ABCDEF-GHIJKL-MNOPQR-1234")
        iss = client.tle(25544)
        print(iss.info.satname, iss.tle)
    """

    api_key: str = field(repr=False)
    base_url: str = DEFAULT_BASE_URL

    def _request_url(self, path: str) -> str:
        return f"{self.base_url}{path}&apiKey={self.api_key}"

    def _get(self, path: str, decode: Callable[[Any], R]) -> R:
        """Fetch ``path`` and decode the JSON body.

        Args:
            path: Endpoint path with all parameters filled in.
            decode: ``from_dict`` of the expected response record.

        Returns:
            The decoded response record.

        Raises:
            RequestError: If no response was received.
            ResponseError: If the status code is not 200.
            ParseError: If the body does not decode into the record.
        """
        logger.debug("GET %s", path)
        try:
            response = requests.get(self._request_url(path))
        except requests.RequestException as e:
            logger.error("N2YO request to %s failed: %s", path, e)
            raise RequestError(f"N2YO request to {path} failed: {e}") from e

        if response.status_code != SUCCESS_STATUS:
            logger.error("N2YO returned HTTP %d for %s", response.status_code, path)
            raise ResponseError(response)

        try:
            result = decode(response.json())
        except ValueError as e:
            logger.error("Could not decode N2YO response for %s: %s", path, e)
            raise ParseError(
                f"Could not decode N2YO response for {path}: {e}", body=response.text
            ) from e

        logger.debug("Decoded %s for %s", type(result).__name__, path)
        return result

    def tle(self, satellite_id: int) -> TleResponse:
        """Fetch the current two-line element set of a satellite.

        Args:
            satellite_id: NORAD catalog number.

        Returns:
            The satellite envelope and its TLE (lines joined by CRLF).
        """
        return self._get(f"/satellite/tle/{satellite_id}", TleResponse.from_dict)

    def positions(
        self,
        satellite_id: int,
        observer_lat: float,
        observer_lng: float,
        observer_alt: float,
        seconds: int,
    ) -> PositionsResponse:
        """Fetch future positions of a satellite, one per second.

        Args:
            satellite_id: NORAD catalog number.
            observer_lat: Observer latitude in decimal degrees.
            observer_lng: Observer longitude in decimal degrees.
            observer_alt: Observer altitude above sea level in meters.
            seconds: Number of samples to return (the server caps this at 300).

        Returns:
            The satellite envelope and the samples in time order.
        """
        path = (
            f"/satellite/positions/{satellite_id}/"
            f"{_coord(observer_lat)}/{_coord(observer_lng)}/{_coord(observer_alt)}/{seconds}"
        )
        return self._get(path, PositionsResponse.from_dict)

    def visual_passes(
        self,
        satellite_id: int,
        observer_lat: float,
        observer_lng: float,
        observer_alt: float,
        days: int,
        min_visibility: int,
    ) -> VisualPassesResponse:
        """Predict optically visible passes over the observer.

        Args:
            satellite_id: NORAD catalog number.
            observer_lat: Observer latitude in decimal degrees.
            observer_lng: Observer longitude in decimal degrees.
            observer_alt: Observer altitude above sea level in meters.
            days: Prediction window in days (the server caps this at 10).
            min_visibility: Minimum seconds the satellite must be visible.

        Returns:
            The satellite envelope and the predicted passes.
        """
        path = (
            f"/satellite/visualpasses/{satellite_id}/"
            f"{_coord(observer_lat)}/{_coord(observer_lng)}/{_coord(observer_alt)}/{days}/{min_visibility}"
        )
        return self._get(path, VisualPassesResponse.from_dict)

    def radio_passes(
        self,
        satellite_id: int,
        observer_lat: float,
        observer_lng: float,
        observer_alt: float,
        days: int,
        min_elevation: int,
    ) -> RadioPassesResponse:
        """Predict passes suitable for radio contact.

        Args:
            satellite_id: NORAD catalog number.
            observer_lat: Observer latitude in decimal degrees.
            observer_lng: Observer longitude in decimal degrees.
            observer_alt: Observer altitude above sea level in meters.
            days: Prediction window in days (the server caps this at 10).
            min_elevation: Minimum peak elevation in degrees.

        Returns:
            The satellite envelope and the predicted passes.
        """
        path = (
            f"/satellite/radiopasses/{satellite_id}/"
            f"{_coord(observer_lat)}/{_coord(observer_lng)}/{_coord(observer_alt)}/{days}/{min_elevation}"
        )
        return self._get(path, RadioPassesResponse.from_dict)

    def above(
        self,
        observer_lat: float,
        observer_lng: float,
        observer_alt: float,
        search_radius: int,
        category: SatelliteCategory | int = SatelliteCategory.ALL,
    ) -> AboveResponse:
        """List satellites currently within ``search_radius`` of the zenith.

        Args:
            observer_lat: Observer latitude in decimal degrees.
            observer_lng: Observer longitude in decimal degrees.
            observer_alt: Observer altitude above sea level in meters.
            search_radius: Search radius in degrees (0-90).
            category: Category filter; ``SatelliteCategory.ALL`` for every object.

        Returns:
            The category envelope and the satellites overhead.
        """
        path = (
            f"/above/{_coord(observer_lat)}/{_coord(observer_lng)}/{_coord(observer_alt)}/"
            f"{search_radius}/{int(category)}"
        )
        return self._get(path, AboveResponse.from_dict)
