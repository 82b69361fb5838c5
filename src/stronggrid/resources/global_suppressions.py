"""Global unsubscribes.

See https://sendgrid.com/docs/API_Reference/Web_API_v3/Suppression_Management/global_suppressions.html
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from ..infrastructure.deserialization import WholeBody, ensure_success, parse_response
from ..protocols import HttpClient


class GlobalSuppressions:
    """Manage addresses that must not receive any email."""

    def __init__(self, client: HttpClient, endpoint: str = "/asm/suppressions/global") -> None:
        self._client = client
        self._endpoint = endpoint

    def is_unsubscribed(
        self, email_address: str, *, cancellation: threading.Event | None = None
    ) -> bool:
        """Return True when the address is in the global suppression group.

        SendGrid answers `{"recipient_email": ...}` for suppressed addresses and an
        empty body (or `{}`) otherwise.
        """
        response = self._client.get(
            f"{self._endpoint}/{email_address}", cancellation=cancellation
        )
        ensure_success(response)
        if not response.content.strip():
            return False
        payload = parse_response(response, dict[str, object], WholeBody())
        return "recipient_email" in payload

    def add(
        self, email_addresses: Iterable[str], *, cancellation: threading.Event | None = None
    ) -> None:
        data: dict[str, object] = {"recipient_emails": list(email_addresses)}
        response = self._client.post(self._endpoint, data, cancellation=cancellation)
        ensure_success(response)

    def remove(self, email_address: str, *, cancellation: threading.Event | None = None) -> None:
        response = self._client.delete(
            f"{self._endpoint}/{email_address}", cancellation=cancellation
        )
        ensure_success(response)
