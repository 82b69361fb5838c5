"""Invalid email suppressions.

See https://sendgrid.com/docs/API_Reference/Web_API_v3/invalid_emails.html
"""

from __future__ import annotations

import threading
from collections.abc import Iterable
from datetime import datetime

from ..infrastructure.deserialization import ensure_success, parse_response
from ..models import InvalidEmail, to_unix_seconds
from ..protocols import HttpClient


class InvalidEmails:
    """List and remove addresses that bounced as invalid."""

    def __init__(
        self, client: HttpClient, endpoint: str = "/suppression/invalid_emails"
    ) -> None:
        self._client = client
        self._endpoint = endpoint

    def get_all(
        self,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
        limit: int = 25,
        offset: int = 0,
        *,
        cancellation: threading.Event | None = None,
    ) -> list[InvalidEmail]:
        """Return invalid emails, optionally within a date range (naive datetimes are UTC)."""
        params: dict[str, str | int | None] = {
            "start_time": to_unix_seconds(start_date) if start_date else None,
            "end_time": to_unix_seconds(end_date) if end_date else None,
            "limit": limit,
            "offset": offset,
        }
        response = self._client.get(self._endpoint, params=params, cancellation=cancellation)
        return parse_response(response, list[InvalidEmail])

    def get(
        self, email_address: str, *, cancellation: threading.Event | None = None
    ) -> list[InvalidEmail]:
        response = self._client.get(
            f"{self._endpoint}/{email_address}", cancellation=cancellation
        )
        return parse_response(response, list[InvalidEmail])

    def delete_all(self, *, cancellation: threading.Event | None = None) -> None:
        response = self._client.delete(
            self._endpoint, {"delete_all": True}, cancellation=cancellation
        )
        ensure_success(response)

    def delete_many(
        self,
        email_addresses: Iterable[str],
        *,
        cancellation: threading.Event | None = None,
    ) -> None:
        data: dict[str, object] = {"emails": list(email_addresses)}
        response = self._client.delete(self._endpoint, data, cancellation=cancellation)
        ensure_success(response)

    def delete(self, email_address: str, *, cancellation: threading.Event | None = None) -> None:
        response = self._client.delete(
            f"{self._endpoint}/{email_address}", cancellation=cancellation
        )
        ensure_success(response)
