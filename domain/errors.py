"""
Domain: error taxonomy for the price table fetcher and the lead sink.

Every price fetch failure is one of:
- ConfigurationError: credential missing or unusable. Raised before any network call.
- AuthError: the token endpoint rejected the signed assertion.
- FetchError: the spreadsheet endpoint rejected the authenticated request.

Malformed spreadsheet rows are never errors; they are dropped during table assembly.
"""

from __future__ import annotations

from typing import Optional


class PriceFetchError(Exception):
    """Base class for failures of the price fetch pipeline."""


class ConfigurationError(PriceFetchError):
    """Required configuration is absent or malformed."""


class UpstreamError(PriceFetchError):
    """
    A remote endpoint answered with a non-2xx status.

    Carries the status code and the raw response body so the caller can surface it.
    """

    def __init__(self, message: str, status_code: Optional[int] = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class AuthError(UpstreamError):
    """The token endpoint did not issue an access token."""


class FetchError(UpstreamError):
    """The spreadsheet values endpoint did not return the requested range."""


class LeadSinkError(Exception):
    """A lead could not be delivered to the lead sink."""


__all__ = [
    "AuthError",
    "ConfigurationError",
    "FetchError",
    "LeadSinkError",
    "PriceFetchError",
    "UpstreamError",
]
