"""
Price table service.

Linear pipeline, one invocation per request:

    credential -> assertion -> token -> raw rows -> normalized table

The credential is read from configuration on every call. The token exchange
completes before the sheet read starts. Nothing is cached between calls.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

from domain.credential import ServiceAccountCredential
from domain.price_table import PriceTableResult, assemble_price_table
from repositories import config
from repositories.sheets_repository import fetch_range
from services.token_service import acquire_access_token

logger = logging.getLogger(__name__)


def fetch_price_table(
    *,
    credential: Optional[ServiceAccountCredential] = None,
    spreadsheet_id: Optional[str] = None,
    range_spec: Optional[str] = None,
    session: Optional[Any] = None,
    timeout: Optional[float] = None,
) -> PriceTableResult:
    """
    Fetch and normalize the price sheet.

    Args:
        credential: Service account to use. Loaded from configuration when omitted.
        spreadsheet_id: Defaults to PRICE_SPREADSHEET_ID.
        range_spec: Defaults to PRICE_SHEET_RANGE.
        session: Shared HTTP session for both calls; defaults to `requests`.
        timeout: Per-request timeout; None keeps the client default.

    Returns:
        PriceTableResult with the price lookup and the dropped-row count.

    Raises:
        ConfigurationError: Credential missing or malformed (no network call made).
        AuthError: Token exchange rejected.
        FetchError: Spreadsheet read rejected.

    Example:
        result = fetch_price_table()
        result.prices["iPhone 15"]["128GB"]  # 30000
    """

    if credential is None:
        credential = config.load_service_account_credential()

    spreadsheet_id = spreadsheet_id or config.get_spreadsheet_id()
    range_spec = range_spec or config.get_price_range()

    access_token = acquire_access_token(credential, session=session, timeout=timeout)
    rows = fetch_range(access_token, spreadsheet_id, range_spec, session=session, timeout=timeout)

    result = assemble_price_table(rows)
    logger.info(
        "Built price table: %d models, %d entries, %d rows dropped",
        len(result.prices),
        result.entry_count,
        result.dropped_rows,
    )
    return result


__all__ = ["fetch_price_table"]
