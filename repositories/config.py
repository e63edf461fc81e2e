"""
Process-wide configuration.

Values come from the environment, optionally seeded from a `.env` file at the
project root. Nothing here is cached: every call re-reads the environment so
that the service account key is loaded fresh for each invocation.

Environment variables:
- GOOGLE_SERVICE_ACCOUNT_KEY: JSON service account document (required for prices)
- PRICE_SPREADSHEET_ID: spreadsheet holding the price list
- PRICE_SHEET_RANGE: A1 range to read (model, storage, price columns)
- LEAD_SINK_URL: endpoint the evaluation flow posts leads to
- LOG_LEVEL: logging level for the API process
"""

from __future__ import annotations

import os
from pathlib import Path

from dotenv import load_dotenv

from domain.credential import ServiceAccountCredential
from domain.errors import ConfigurationError

# Look for .env in the project root
env_path = Path(__file__).parent.parent / ".env"
load_dotenv(dotenv_path=env_path)

SERVICE_ACCOUNT_ENV: str = "GOOGLE_SERVICE_ACCOUNT_KEY"
DEFAULT_SPREADSHEET_ID: str = "1io6QA_SGAyLa38713OJ39WYMEalaR3DECP1UbCHOzHg"
DEFAULT_PRICE_RANGE: str = "Лист1!A:C"


def load_service_account_credential() -> ServiceAccountCredential:
    """
    Read and validate the service account credential.

    Raises:
        ConfigurationError: If the variable is unset, not JSON, or holds an unusable key.
    """

    return ServiceAccountCredential.from_json(os.getenv(SERVICE_ACCOUNT_ENV))


def get_spreadsheet_id() -> str:
    return os.getenv("PRICE_SPREADSHEET_ID") or DEFAULT_SPREADSHEET_ID


def get_price_range() -> str:
    return os.getenv("PRICE_SHEET_RANGE") or DEFAULT_PRICE_RANGE


def get_lead_sink_url() -> str:
    url = (os.getenv("LEAD_SINK_URL") or "").strip()
    if not url:
        raise ConfigurationError(
            "Missing environment variable: LEAD_SINK_URL. "
            "Set LEAD_SINK_URL to the lead sink endpoint (e.g. https://host/leads)."
        )
    return url


def get_log_level() -> str:
    return (os.getenv("LOG_LEVEL") or "INFO").upper()


__all__ = [
    "DEFAULT_PRICE_RANGE",
    "DEFAULT_SPREADSHEET_ID",
    "SERVICE_ACCOUNT_ENV",
    "get_lead_sink_url",
    "get_log_level",
    "get_price_range",
    "get_spreadsheet_id",
    "load_service_account_credential",
]
