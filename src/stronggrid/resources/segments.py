"""Contact segments built from search conditions.

See https://sendgrid.com/docs/API_Reference/Web_API_v3/Marketing_Campaigns/contactdb.html
"""

from __future__ import annotations

import threading
from collections.abc import Sequence

from ..infrastructure.deserialization import KeyedField, ensure_success, parse_response
from ..models import Contact, SearchCondition, Segment
from ..protocols import HttpClient


def _segment_payload(
    name: str | None,
    list_id: int | None,
    conditions: Sequence[SearchCondition] | None,
) -> dict[str, object]:
    data: dict[str, object] = {}
    if name:
        data["name"] = name
    if list_id is not None:
        data["list_id"] = list_id
    if conditions is not None:
        data["conditions"] = [condition.to_payload() for condition in conditions]
    return data


class Segments:
    """Create and manage segments of the contact database."""

    def __init__(self, client: HttpClient, endpoint: str = "/contactdb/segments") -> None:
        self._client = client
        self._endpoint = endpoint

    def create(
        self,
        name: str,
        list_id: int | None,
        conditions: Sequence[SearchCondition],
        *,
        cancellation: threading.Event | None = None,
    ) -> Segment:
        data = _segment_payload(name, list_id, conditions)
        response = self._client.post(self._endpoint, data, cancellation=cancellation)
        return parse_response(response, Segment)

    def get_all(self, *, cancellation: threading.Event | None = None) -> list[Segment]:
        response = self._client.get(self._endpoint, cancellation=cancellation)
        return parse_response(response, list[Segment], KeyedField("segments"))

    def get(self, segment_id: int, *, cancellation: threading.Event | None = None) -> Segment:
        response = self._client.get(f"{self._endpoint}/{segment_id}", cancellation=cancellation)
        return parse_response(response, Segment)

    def update(
        self,
        segment_id: int,
        name: str | None = None,
        list_id: int | None = None,
        conditions: Sequence[SearchCondition] | None = None,
        *,
        cancellation: threading.Event | None = None,
    ) -> Segment:
        """Update a segment; only the supplied values are sent."""
        data = _segment_payload(name, list_id, conditions)
        response = self._client.patch(
            f"{self._endpoint}/{segment_id}", data, cancellation=cancellation
        )
        return parse_response(response, Segment)

    def delete(
        self,
        segment_id: int,
        delete_contacts: bool = False,
        *,
        cancellation: threading.Event | None = None,
    ) -> None:
        """Delete a segment, optionally deleting the contacts it contains."""
        response = self._client.delete(
            f"{self._endpoint}/{segment_id}",
            params={"delete_contacts": "true" if delete_contacts else "false"},
            cancellation=cancellation,
        )
        ensure_success(response)

    def get_recipients(
        self,
        segment_id: int,
        records_per_page: int = 100,
        page: int = 1,
        *,
        cancellation: threading.Event | None = None,
    ) -> list[Contact]:
        response = self._client.get(
            f"{self._endpoint}/{segment_id}/recipients",
            params={"page_size": records_per_page, "page": page},
            cancellation=cancellation,
        )
        return parse_response(response, list[Contact], KeyedField("recipients"))
