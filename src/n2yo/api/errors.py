"""Exceptions raised by the N2YO client.

Every client operation fails in one of three ways: the request never got a
response (``RequestError``), the response status was not 200
(``ResponseError``), or the body could not be decoded into the expected
record (``ParseError``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import requests


class N2yoError(Exception):
    """Base class for all N2YO client errors."""


class RequestError(N2yoError):
    """The HTTP request failed before a response was received.

    The underlying ``requests`` exception is chained as ``__cause__``.
    """


class ResponseError(N2yoError):
    """The server answered with a status other than 200.

    Attributes:
        status_code: HTTP status code of the response.
        body: Raw response text.
        response: The ``requests.Response`` for further inspection.
    """

    def __init__(self, response: requests.Response) -> None:
        self.status_code: int = response.status_code
        self.body: str = response.text
        self.response = response
        super().__init__(f"N2YO request failed with HTTP {self.status_code}: {self.body!r}")


class ParseError(N2yoError):
    """A 200 response body did not match the expected JSON shape.

    Attributes:
        body: Raw response text.
    """

    def __init__(self, message: str, body: str = "") -> None:
        self.body = body
        super().__init__(message)
