"""
Domain: Lead entity.

A Lead is one completed evaluation captured by the wizard and handed to the
lead sink.

Contract excerpts implemented here:
- The record is flat: model, storage, battery, scratches, defects, sim,
  accessories, estimated_price, sale_timeline.
- model and storage are required; the remaining answers may be absent.
- estimated_price is a non-negative integer (0 when the price sheet has no entry).
- A Lead is immutable once built.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping, Optional

LEAD_FIELDS = (
    "model",
    "storage",
    "battery",
    "scratches",
    "defects",
    "sim",
    "accessories",
    "estimated_price",
    "sale_timeline",
)


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


@dataclass(frozen=True, slots=True)
class LeadRecord:
    """
    Pure domain entity for a Lead.

    Notes:
    - This entity does not decide whether a phone qualifies; the wizard does.
      Only qualifying evaluations ever become a LeadRecord.
    """

    model: str
    storage: str
    battery: Optional[str] = None
    scratches: Optional[str] = None
    defects: Optional[str] = None
    sim: Optional[str] = None
    accessories: Optional[str] = None
    estimated_price: int = 0
    sale_timeline: Optional[str] = None

    def __post_init__(self) -> None:
        if not self.model or not self.model.strip():
            raise ValueError("model is required")
        if not self.storage or not self.storage.strip():
            raise ValueError("storage is required")
        if isinstance(self.estimated_price, bool) or not isinstance(self.estimated_price, int):
            raise ValueError("estimated_price must be an integer")
        if self.estimated_price < 0:
            raise ValueError("estimated_price must be >= 0")

    def to_payload(self) -> dict[str, Any]:
        """Flat JSON-ready mapping in the lead sink's field order."""

        return asdict(self)

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "LeadRecord":
        """
        Build a LeadRecord from a loosely typed mapping (JSON body, table row).

        Unknown keys are ignored. A missing or null estimated_price becomes 0.
        """

        price = payload.get("estimated_price")
        return cls(
            model=str(payload.get("model") or "").strip(),
            storage=str(payload.get("storage") or "").strip(),
            battery=_optional_text(payload.get("battery")),
            scratches=_optional_text(payload.get("scratches")),
            defects=_optional_text(payload.get("defects")),
            sim=_optional_text(payload.get("sim")),
            accessories=_optional_text(payload.get("accessories")),
            estimated_price=int(price) if price is not None else 0,
            sale_timeline=_optional_text(payload.get("sale_timeline")),
        )


__all__ = ["LEAD_FIELDS", "LeadRecord"]
