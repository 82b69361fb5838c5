"""Sender identities for Marketing Campaigns.

See https://sendgrid.com/docs/API_Reference/Web_API_v3/Marketing_Campaigns/sender_identities.html
"""

from __future__ import annotations

import threading

from ..infrastructure.deserialization import ensure_success, parse_response
from ..models import MailAddress, SenderIdentity
from ..protocols import HttpClient


def _sender_payload(
    *,
    nickname: str | None = None,
    from_address: MailAddress | None = None,
    reply_to: MailAddress | None = None,
    address: str | None = None,
    address_2: str | None = None,
    city: str | None = None,
    state: str | None = None,
    zip: str | None = None,
    country: str | None = None,
) -> dict[str, object]:
    data: dict[str, object] = {}
    if nickname:
        data["nickname"] = nickname
    if from_address is not None:
        data["from"] = from_address.to_payload()
    if reply_to is not None:
        data["reply_to"] = reply_to.to_payload()
    text_fields = {
        "address": address,
        "address_2": address_2,
        "city": city,
        "state": state,
        "zip": zip,
        "country": country,
    }
    data.update({key: value for key, value in text_fields.items() if value})
    return data


class SenderIdentities:
    """Create and manage sender identities."""

    def __init__(self, client: HttpClient, endpoint: str = "/senders") -> None:
        self._client = client
        self._endpoint = endpoint

    def create(
        self,
        nickname: str,
        from_address: MailAddress,
        reply_to: MailAddress,
        address: str,
        address_2: str | None,
        city: str,
        state: str | None,
        zip: str | None,
        country: str,
        *,
        cancellation: threading.Event | None = None,
    ) -> SenderIdentity:
        data = _sender_payload(
            nickname=nickname,
            from_address=from_address,
            reply_to=reply_to,
            address=address,
            address_2=address_2,
            city=city,
            state=state,
            zip=zip,
            country=country,
        )
        response = self._client.post(self._endpoint, data, cancellation=cancellation)
        return parse_response(response, SenderIdentity)

    def get_all(self, *, cancellation: threading.Event | None = None) -> list[SenderIdentity]:
        response = self._client.get(self._endpoint, cancellation=cancellation)
        return parse_response(response, list[SenderIdentity])

    def get(self, sender_id: int, *, cancellation: threading.Event | None = None) -> SenderIdentity:
        response = self._client.get(f"{self._endpoint}/{sender_id}", cancellation=cancellation)
        return parse_response(response, SenderIdentity)

    def update(
        self,
        sender_id: int,
        *,
        nickname: str | None = None,
        from_address: MailAddress | None = None,
        reply_to: MailAddress | None = None,
        address: str | None = None,
        address_2: str | None = None,
        city: str | None = None,
        state: str | None = None,
        zip: str | None = None,
        country: str | None = None,
        cancellation: threading.Event | None = None,
    ) -> SenderIdentity:
        """Update a sender identity; only the supplied values are sent."""
        data = _sender_payload(
            nickname=nickname,
            from_address=from_address,
            reply_to=reply_to,
            address=address,
            address_2=address_2,
            city=city,
            state=state,
            zip=zip,
            country=country,
        )
        response = self._client.patch(
            f"{self._endpoint}/{sender_id}", data, cancellation=cancellation
        )
        return parse_response(response, SenderIdentity)

    def delete(self, sender_id: int, *, cancellation: threading.Event | None = None) -> None:
        response = self._client.delete(f"{self._endpoint}/{sender_id}", cancellation=cancellation)
        ensure_success(response)

    def resend_verification(
        self, sender_id: int, *, cancellation: threading.Event | None = None
    ) -> None:
        response = self._client.post(
            f"{self._endpoint}/{sender_id}/resend_verification", cancellation=cancellation
        )
        ensure_success(response)
