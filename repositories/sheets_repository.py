"""
Google Sheets values repository.

Reads a cell range with a bearer token and returns the provider's raw 2D
array of strings. Interpretation of the cells belongs to the domain layer.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional
from urllib.parse import quote

import requests

from domain.errors import FetchError

logger = logging.getLogger(__name__)

SHEETS_API_BASE: str = "https://sheets.googleapis.com/v4/spreadsheets"

RawRows = List[List[Any]]


def values_url(spreadsheet_id: str, range_spec: str) -> str:
    """Build the values endpoint URL; the range may hold non-ASCII sheet names."""

    return f"{SHEETS_API_BASE}/{quote(spreadsheet_id, safe='')}/values/{quote(range_spec, safe='!:')}"


def fetch_range(
    access_token: str,
    spreadsheet_id: str,
    range_spec: str,
    *,
    session: Optional[Any] = None,
    timeout: Optional[float] = None,
) -> RawRows:
    """
    Fetch a range of cells.

    Args:
        access_token: Bearer token from the token exchange.
        spreadsheet_id: Spreadsheet to read.
        range_spec: A1 notation, e.g. "Лист1!A:C".
        session: requests.Session (or anything with a compatible `get`); defaults to `requests`.
        timeout: Passed through to requests. None means the client default.

    Returns:
        Rows as lists of cell strings, header row included. Empty list if the range is empty.

    Raises:
        FetchError: On a non-2xx response or a non-JSON body.
    """

    http = session or requests
    response = http.get(
        values_url(spreadsheet_id, range_spec),
        headers={"Authorization": f"Bearer {access_token}"},
        timeout=timeout,
    )

    if not 200 <= response.status_code < 300:
        logger.warning("Sheets API rejected range %s: HTTP %s", range_spec, response.status_code)
        raise FetchError(
            f"Spreadsheet fetch failed with HTTP {response.status_code}: {response.text}",
            status_code=response.status_code,
            body=response.text,
        )

    try:
        payload = response.json()
    except ValueError as exc:
        raise FetchError(
            "Spreadsheet endpoint returned a non-JSON body",
            status_code=response.status_code,
            body=response.text,
        ) from exc

    values = payload.get("values") if isinstance(payload, dict) else None
    rows: RawRows = [list(row) for row in values or [] if isinstance(row, list)]
    logger.info("Fetched %d rows from %s", len(rows), range_spec)
    return rows


__all__ = ["RawRows", "SHEETS_API_BASE", "fetch_range", "values_url"]
