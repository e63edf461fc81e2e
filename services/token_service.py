"""
Service account token acquisition.

Mints a fresh RS256 assertion for every call and exchanges it for a bearer
token. Signing goes through PyJWT (cryptography backend) behind
`sign_assertion`, so the encoding rules can be tested without a network.

Assertion layout:
- header: {"alg": "RS256", "typ": "JWT"}
- claims: iss, scope, aud, iat, exp (= iat + 3600)
- signature: RSASSA-PKCS1-v1_5 / SHA-256 over base64url(header).base64url(claims)
"""

from __future__ import annotations

import time
from typing import Any, Mapping, Optional

import jwt
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from domain.credential import ServiceAccountCredential
from repositories.google_oauth_repository import exchange_assertion

SPREADSHEETS_READONLY_SCOPE: str = "https://www.googleapis.com/auth/spreadsheets.readonly"
ASSERTION_LIFETIME_SECONDS: int = 3600
SIGNING_ALGORITHM: str = "RS256"


def build_claims(
    credential: ServiceAccountCredential,
    *,
    scope: str = SPREADSHEETS_READONLY_SCOPE,
    issued_at: Optional[int] = None,
) -> dict[str, Any]:
    """Claim set for a jwt-bearer grant. issued_at defaults to now (whole seconds)."""

    iat = int(time.time()) if issued_at is None else int(issued_at)
    return {
        "iss": credential.client_email,
        "scope": scope,
        "aud": credential.token_uri,
        "iat": iat,
        "exp": iat + ASSERTION_LIFETIME_SECONDS,
    }


def sign_assertion(claims: Mapping[str, Any], private_key: RSAPrivateKey | str) -> str:
    """
    Sign a claim set into a compact JWT.

    Args:
        claims: JSON-serializable claims.
        private_key: Imported RSA key or its PEM text.

    Returns:
        header.claims.signature, each part unpadded base64url.
    """

    return jwt.encode(
        dict(claims),
        private_key,
        algorithm=SIGNING_ALGORITHM,
        headers={"typ": "JWT"},
    )


def acquire_access_token(
    credential: ServiceAccountCredential,
    *,
    session: Optional[Any] = None,
    timeout: Optional[float] = None,
    issued_at: Optional[int] = None,
) -> str:
    """
    Obtain a bearer token for the read-only spreadsheets scope.

    No token is cached; every call performs a full exchange.

    Raises:
        ConfigurationError: If the credential's key cannot be imported (no network call is made).
        AuthError: If the token endpoint rejects the assertion.
    """

    assertion = sign_assertion(
        build_claims(credential, issued_at=issued_at),
        credential.signing_key(),
    )
    return exchange_assertion(assertion, credential.token_uri, session=session, timeout=timeout)


__all__ = [
    "ASSERTION_LIFETIME_SECONDS",
    "SIGNING_ALGORITHM",
    "SPREADSHEETS_READONLY_SCOPE",
    "acquire_access_token",
    "build_claims",
    "sign_assertion",
]
