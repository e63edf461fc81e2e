"""
HTTP client for the lead sink function.

The evaluation flow does not write to the database itself; it posts the flat
lead record to the lead sink endpoint (`POST /leads`) and reads back success
or failure.
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from domain.errors import LeadSinkError
from domain.lead import LeadRecord

logger = logging.getLogger(__name__)


class HttpLeadSink:
    """Delivers leads to the lead sink over HTTP."""

    def __init__(self, url: str, *, session: Optional[Any] = None, timeout: Optional[float] = None) -> None:
        if not url:
            raise ValueError("url is required")
        self.url = url
        self.session = session or requests
        self.timeout = timeout

    def submit(self, lead: LeadRecord) -> None:
        """
        Post one lead.

        Raises:
            LeadSinkError: On transport failure or any non-2xx response.
        """

        try:
            response = self.session.post(self.url, json=lead.to_payload(), timeout=self.timeout)
        except requests.RequestException as exc:
            raise LeadSinkError(f"Lead sink unreachable: {exc}") from exc

        if not 200 <= response.status_code < 300:
            raise LeadSinkError(f"Lead sink returned HTTP {response.status_code}: {response.text}")

        logger.info("Lead delivered for %s %s", lead.model, lead.storage)


__all__ = ["HttpLeadSink"]
