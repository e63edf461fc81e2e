"""
Lead repository (persistence).

This module provides *only* persistence operations for the LeadRecord entity.
No qualification rules (battery threshold, defects) belong here.
"""

from __future__ import annotations

from typing import Any, Optional

from domain.lead import LeadRecord
from repositories.client import get_supabase

# Supabase table name for Lead records.
# Keep this aligned with your database schema.
_LEADS_TABLE: str = "leads"


def _lead_to_row(lead: LeadRecord) -> dict[str, Any]:
    """Convert a domain LeadRecord to a Supabase row payload."""

    return lead.to_payload()


def insert_lead(lead: LeadRecord, *, client: Optional[Any] = None) -> dict[str, Any]:
    """
    Insert a new LeadRecord.

    Returns:
        The inserted row as echoed by Supabase (or the payload we sent if the
        backend returned no representation).

    Raises:
        ConfigurationError: If Supabase settings are missing.
        RuntimeError: If the insert fails.
    """

    db = client or get_supabase()
    payload = _lead_to_row(lead)
    response = db.table(_LEADS_TABLE).insert(payload).execute()

    error = getattr(response, "error", None)
    if error:
        raise RuntimeError(f"Failed to insert lead: {error}")

    data = getattr(response, "data", None)
    if isinstance(data, list) and data:
        return data[0]
    return payload


__all__ = ["insert_lead"]
