"""
Domain: service account credential.

A ServiceAccountCredential is the non-human identity the price fetcher uses to
authenticate against the spreadsheet API.

Contract excerpts implemented here:
- client_email and private_key are required.
- private_key must be an RSA private key in PEM form. Google issues PKCS8
  ("BEGIN PRIVATE KEY"); traditional PKCS1 ("BEGIN RSA PRIVATE KEY") is
  accepted too.
- A missing or malformed credential is a ConfigurationError and is detected
  before any network call is attempted.
- The credential is immutable and is never persisted by this component.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Mapping

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.rsa import RSAPrivateKey

from .errors import ConfigurationError

DEFAULT_TOKEN_URI: str = "https://oauth2.googleapis.com/token"


def load_rsa_private_key(private_key_pem: str) -> RSAPrivateKey:
    """
    Import a PEM encoded RSA private key (PKCS8 or PKCS1).

    Raises:
        ConfigurationError: If the text is not a loadable, unencrypted RSA key.
    """

    if not private_key_pem or not private_key_pem.strip():
        raise ConfigurationError("Service account private_key is empty")

    # Keys pasted into env vars often carry literal "\n" sequences.
    pem = private_key_pem.replace("\\n", "\n").strip().encode("utf-8")

    try:
        key = serialization.load_pem_private_key(pem, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise ConfigurationError(f"Service account private_key is not a valid PEM key: {exc}") from exc

    if not isinstance(key, RSAPrivateKey):
        raise ConfigurationError("Service account private_key must be an RSA key")

    return key


@dataclass(frozen=True, slots=True)
class ServiceAccountCredential:
    """
    Pure domain entity for a service account credential.

    The key is validated at construction, so holding an instance means the
    signing step cannot fail on key import.
    """

    client_email: str
    private_key: str
    token_uri: str = DEFAULT_TOKEN_URI

    def __post_init__(self) -> None:
        if not self.client_email or not self.client_email.strip():
            raise ConfigurationError("Service account client_email is missing")
        if not self.token_uri:
            raise ConfigurationError("Service account token_uri is empty")
        load_rsa_private_key(self.private_key)

    def signing_key(self) -> RSAPrivateKey:
        """Return the imported RSA key used to sign assertions."""

        return load_rsa_private_key(self.private_key)

    @classmethod
    def from_info(cls, info: Mapping[str, Any]) -> "ServiceAccountCredential":
        """
        Build a credential from a parsed service account document.

        Only client_email, private_key and (optionally) token_uri are read; the
        rest of Google's key file is ignored.
        """

        client_email = info.get("client_email")
        private_key = info.get("private_key")

        if not isinstance(client_email, str) or not client_email:
            raise ConfigurationError("Service account document has no client_email")
        if not isinstance(private_key, str) or not private_key:
            raise ConfigurationError("Service account document has no private_key")

        token_uri = info.get("token_uri") or DEFAULT_TOKEN_URI
        return cls(client_email=client_email, private_key=private_key, token_uri=str(token_uri))

    @classmethod
    def from_json(cls, document: str | None) -> "ServiceAccountCredential":
        """Parse the JSON credential document supplied through configuration."""

        if not document or not document.strip():
            raise ConfigurationError("GOOGLE_SERVICE_ACCOUNT_KEY not configured")

        try:
            info = json.loads(document)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Service account key is not valid JSON: {exc}") from exc

        if not isinstance(info, dict):
            raise ConfigurationError("Service account key must be a JSON object")

        return cls.from_info(info)

    def __repr__(self) -> str:
        # Never echo key material into logs or tracebacks.
        return f"ServiceAccountCredential(client_email={self.client_email!r}, token_uri={self.token_uri!r})"


__all__ = [
    "DEFAULT_TOKEN_URI",
    "ServiceAccountCredential",
    "load_rsa_private_key",
]
