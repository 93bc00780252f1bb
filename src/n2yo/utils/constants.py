"""Endpoint configuration for the N2YO REST API."""

from __future__ import annotations

DEFAULT_BASE_URL: str = "https://www.n2yo.com/rest/v1"
"""Production base URL of the N2YO REST API (version 1)."""

SUCCESS_STATUS: int = 200
"""The only HTTP status treated as success."""
