"""
Google OAuth2 token endpoint.

Exchanges a signed JWT assertion for a short-lived bearer token using the
jwt-bearer grant (RFC 7523). One POST per call; no retry, no caching.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from domain.errors import AuthError

logger = logging.getLogger(__name__)

JWT_BEARER_GRANT_TYPE: str = "urn:ietf:params:oauth:grant-type:jwt-bearer"


def exchange_assertion(
    assertion: str,
    token_uri: str,
    *,
    session: Optional[Any] = None,
    timeout: Optional[float] = None,
) -> str:
    """
    Trade a signed assertion for an access token.

    Args:
        assertion: Compact RS256 JWT.
        token_uri: OAuth2 token endpoint (the assertion's audience).
        session: requests.Session (or anything with a compatible `post`); defaults to `requests`.
        timeout: Passed through to requests. None means the client default.

    Returns:
        The opaque bearer token.

    Raises:
        AuthError: On a non-2xx response, a non-JSON body, or a body without access_token.
    """

    http = session or requests
    response = http.post(
        token_uri,
        data={"grant_type": JWT_BEARER_GRANT_TYPE, "assertion": assertion},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
        timeout=timeout,
    )

    if not 200 <= response.status_code < 300:
        logger.warning("Token endpoint rejected assertion: HTTP %s", response.status_code)
        raise AuthError(
            f"Token exchange failed with HTTP {response.status_code}: {response.text}",
            status_code=response.status_code,
            body=response.text,
        )

    try:
        payload = response.json()
    except ValueError as exc:
        raise AuthError(
            "Token endpoint returned a non-JSON body",
            status_code=response.status_code,
            body=response.text,
        ) from exc

    access_token = payload.get("access_token") if isinstance(payload, dict) else None
    if not access_token:
        raise AuthError(
            "Token endpoint response has no access_token",
            status_code=response.status_code,
            body=response.text,
        )

    return str(access_token)


__all__ = ["JWT_BEARER_GRANT_TYPE", "exchange_assertion"]
