"""
Domain: price table normalization and assembly.

The price sheet is maintained by hand, so cells arrive in many spellings
("iphone 15", "256 гб", "45 000 ₽"). This module turns raw spreadsheet rows
into a nested lookup: model -> storage -> price.

Contract excerpts implemented here:
- The first row is a header and is always skipped.
- Rows with fewer than 3 cells are dropped.
- A row is admitted only if model and storage are non-empty and price > 0.
- Later rows for the same (model, storage) overwrite earlier ones.
- Assembly never raises; malformed rows are dropped and counted.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Dict, Sequence

logger = logging.getLogger(__name__)

PriceTable = Dict[str, Dict[str, int]]

_IPHONE_RE = re.compile(r"iphone", re.IGNORECASE)
_WHITESPACE_RE = re.compile(r"\s+")
_GIGABYTE_RE = re.compile(r"гб|gb", re.IGNORECASE)
_NON_DIGIT_RE = re.compile(r"[^0-9]")

# Longer digit runs are junk cells, not prices.
MAX_PRICE_DIGITS: int = 18


def _cell_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value)


def normalize_model(raw: Any) -> str:
    """
    Canonicalize a model name.

    Example:
        normalize_model("iphone  16   pro max")  # "iPhone 16 pro max"
    """

    text = _cell_text(raw).strip()
    text = _IPHONE_RE.sub("iPhone", text)
    return _WHITESPACE_RE.sub(" ", text)


def normalize_storage(raw: Any) -> str:
    """
    Canonicalize a storage label.

    Example:
        normalize_storage("256 гб")  # "256GB"
        normalize_storage("1 tb")    # "1tb", only gigabyte suffixes are rewritten
    """

    text = _WHITESPACE_RE.sub("", _cell_text(raw).strip())
    return _GIGABYTE_RE.sub("GB", text)


def normalize_price(raw: Any) -> int:
    """
    Parse a free-form price cell into an integer.

    Every non-digit character is discarded; an empty result, or one longer
    than MAX_PRICE_DIGITS, means 0.

    Example:
        normalize_price("45 000 ₽")  # 45000
        normalize_price("—")         # 0
    """

    digits = _NON_DIGIT_RE.sub("", _cell_text(raw))
    if not digits or len(digits) > MAX_PRICE_DIGITS:
        return 0
    return int(digits)


@dataclass(frozen=True, slots=True)
class PriceTableResult:
    """
    Assembled price table plus a diagnostic count of rejected rows.

    dropped_rows counts non-header rows that did not make it into the table.
    """

    prices: PriceTable = field(default_factory=dict)
    dropped_rows: int = 0

    @property
    def entry_count(self) -> int:
        return sum(len(by_storage) for by_storage in self.prices.values())


def assemble_price_table(raw_rows: Sequence[Sequence[Any]] | None) -> PriceTableResult:
    """
    Build a PriceTable from the provider's 2D array of cells.

    Args:
        raw_rows: Rows as returned by the spreadsheet API, header first.

    Returns:
        PriceTableResult with every admitted (model, storage, price).
    """

    prices: PriceTable = {}
    dropped = 0

    if not raw_rows:
        return PriceTableResult(prices=prices, dropped_rows=0)

    for index, row in enumerate(raw_rows[1:], start=2):
        if row is None or len(row) < 3:
            dropped += 1
            logger.debug("Dropping sheet row %d: fewer than 3 cells", index)
            continue

        model = normalize_model(row[0])
        storage = normalize_storage(row[1])
        price = normalize_price(row[2])

        if not model or not storage or price <= 0:
            dropped += 1
            logger.debug(
                "Dropping sheet row %d: model=%r storage=%r price=%d", index, model, storage, price
            )
            continue

        prices.setdefault(model, {})[storage] = price

    return PriceTableResult(prices=prices, dropped_rows=dropped)


def build_price_table(raw_rows: Sequence[Sequence[Any]] | None) -> PriceTable:
    """Pure row-to-table conversion. Malformed rows are skipped, never raised."""

    return assemble_price_table(raw_rows).prices


def lookup_price(prices: PriceTable, model: str, storage: str) -> int:
    """Return the price for a model/storage pair, or 0 when the sheet has none."""

    return prices.get(normalize_model(model), {}).get(normalize_storage(storage), 0)


__all__ = [
    "PriceTable",
    "PriceTableResult",
    "assemble_price_table",
    "build_price_table",
    "lookup_price",
    "normalize_model",
    "normalize_price",
    "normalize_storage",
]
