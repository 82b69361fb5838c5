"""Contact lists.

See https://sendgrid.com/docs/API_Reference/Web_API_v3/Marketing_Campaigns/contactdb.html
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from ..infrastructure.deserialization import KeyedField, ensure_success, parse_response
from ..models import Contact, ContactList
from ..protocols import HttpClient


class Lists:
    """Create and manage contact lists and their membership."""

    def __init__(self, client: HttpClient, endpoint: str = "/contactdb/lists") -> None:
        self._client = client
        self._endpoint = endpoint

    def create(self, name: str, *, cancellation: threading.Event | None = None) -> ContactList:
        response = self._client.post(self._endpoint, {"name": name}, cancellation=cancellation)
        return parse_response(response, ContactList)

    def get_all(self, *, cancellation: threading.Event | None = None) -> list[ContactList]:
        response = self._client.get(self._endpoint, cancellation=cancellation)
        return parse_response(response, list[ContactList], KeyedField("lists"))

    def get(self, list_id: int, *, cancellation: threading.Event | None = None) -> ContactList:
        response = self._client.get(f"{self._endpoint}/{list_id}", cancellation=cancellation)
        return parse_response(response, ContactList)

    def update(
        self,
        list_id: int,
        name: str,
        *,
        cancellation: threading.Event | None = None,
    ) -> None:
        response = self._client.patch(
            f"{self._endpoint}/{list_id}", {"name": name}, cancellation=cancellation
        )
        ensure_success(response)

    def delete(self, list_id: int, *, cancellation: threading.Event | None = None) -> None:
        response = self._client.delete(f"{self._endpoint}/{list_id}", cancellation=cancellation)
        ensure_success(response)

    def delete_many(
        self,
        list_ids: Iterable[int],
        *,
        cancellation: threading.Event | None = None,
    ) -> None:
        data: list[object] = list(list_ids)
        response = self._client.delete(self._endpoint, data, cancellation=cancellation)
        ensure_success(response)

    def get_recipients(
        self,
        list_id: int,
        records_per_page: int = 100,
        page: int = 1,
        *,
        cancellation: threading.Event | None = None,
    ) -> list[Contact]:
        response = self._client.get(
            f"{self._endpoint}/{list_id}/recipients",
            params={"page_size": records_per_page, "page": page},
            cancellation=cancellation,
        )
        return parse_response(response, list[Contact], KeyedField("recipients"))

    def add_recipient(
        self,
        list_id: int,
        contact_id: str,
        *,
        cancellation: threading.Event | None = None,
    ) -> None:
        response = self._client.post(
            f"{self._endpoint}/{list_id}/recipients/{contact_id}", cancellation=cancellation
        )
        ensure_success(response)

    def remove_recipient(
        self,
        list_id: int,
        contact_id: str,
        *,
        cancellation: threading.Event | None = None,
    ) -> None:
        response = self._client.delete(
            f"{self._endpoint}/{list_id}/recipients/{contact_id}", cancellation=cancellation
        )
        ensure_success(response)

    def add_recipients(
        self,
        list_id: int,
        contact_ids: Iterable[str],
        *,
        cancellation: threading.Event | None = None,
    ) -> None:
        data: list[object] = list(contact_ids)
        response = self._client.post(
            f"{self._endpoint}/{list_id}/recipients", data, cancellation=cancellation
        )
        ensure_success(response)
