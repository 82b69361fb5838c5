"""Contacts (also called recipients) in the Marketing Campaigns contact database.

See https://sendgrid.com/docs/API_Reference/Web_API_v3/Marketing_Campaigns/contactdb.html
"""

from __future__ import annotations

import threading
from collections.abc import Iterable, Sequence

from ..exceptions import ContactImportError, ResponseParseError
from ..infrastructure.deserialization import KeyedField, ensure_success, parse_response
from ..models import Contact, CustomField, ImportResult, SearchCondition
from ..protocols import HttpClient


def contact_payload(contact: Contact) -> dict[str, object]:
    """Serialize a contact the way the contactdb endpoints expect it.

    Standard fields are only sent when non-empty; custom fields are flattened
    into top-level `name: value` pairs with dates as unix seconds.
    """
    payload: dict[str, object] = {}
    if contact.id:
        payload["id"] = contact.id
    if contact.email:
        payload["email"] = contact.email
    if contact.first_name:
        payload["first_name"] = contact.first_name
    if contact.last_name:
        payload["last_name"] = contact.last_name
    for custom_field in contact.custom_fields:
        payload[custom_field.name] = custom_field.payload_value()
    return payload


def _raise_for_import_errors(result: ImportResult) -> None:
    if result.error_count > 0:
        raise ContactImportError([error.message for error in result.errors])


class Contacts:
    """Create, update, search and delete contacts."""

    def __init__(self, client: HttpClient, endpoint: str = "/contactdb/recipients") -> None:
        self._client = client
        self._endpoint = endpoint

    def create(
        self,
        email: str,
        first_name: str | None = None,
        last_name: str | None = None,
        custom_fields: Sequence[CustomField] | None = None,
        *,
        cancellation: threading.Event | None = None,
    ) -> str:
        """Create one contact and return its identifier.

        Raises:
            ContactImportError: If SendGrid rejected the contact (e.g. invalid email).
        """
        contact = Contact(
            email=email,
            first_name=first_name,
            last_name=last_name,
            custom_fields=list(custom_fields or []),
        )
        result = self.import_contacts([contact], cancellation=cancellation)
        _raise_for_import_errors(result)
        if len(result.persisted_recipients) != 1:
            raise ResponseParseError("Expected exactly one persisted recipient.")
        return result.persisted_recipients[0]

    def update(
        self,
        email: str,
        first_name: str | None = None,
        last_name: str | None = None,
        custom_fields: Sequence[CustomField] | None = None,
        *,
        cancellation: threading.Event | None = None,
    ) -> None:
        """Update the contact identified by `email`.

        Raises:
            ContactImportError: If SendGrid reported an error for the contact.
        """
        contact = Contact(
            email=email,
            first_name=first_name,
            last_name=last_name,
            custom_fields=list(custom_fields or []),
        )
        response = self._client.patch(
            self._endpoint, [contact_payload(contact)], cancellation=cancellation
        )
        _raise_for_import_errors(parse_response(response, ImportResult))

    def import_contacts(
        self,
        contacts: Iterable[Contact],
        *,
        cancellation: threading.Event | None = None,
    ) -> ImportResult:
        """Add contacts in bulk; per-record failures are reported in the result."""
        data: list[object] = [contact_payload(contact) for contact in contacts]
        response = self._client.post(self._endpoint, data, cancellation=cancellation)
        return parse_response(response, ImportResult)

    def delete(
        self,
        contact_ids: str | Iterable[str],
        *,
        cancellation: threading.Event | None = None,
    ) -> None:
        ids: list[object] = [contact_ids] if isinstance(contact_ids, str) else list(contact_ids)
        response = self._client.delete(self._endpoint, ids, cancellation=cancellation)
        ensure_success(response)

    def get(self, contact_id: str, *, cancellation: threading.Event | None = None) -> Contact:
        response = self._client.get(f"{self._endpoint}/{contact_id}", cancellation=cancellation)
        return parse_response(response, Contact)

    def get_page(
        self,
        records_per_page: int = 100,
        page: int = 1,
        *,
        cancellation: threading.Event | None = None,
    ) -> list[Contact]:
        response = self._client.get(
            self._endpoint,
            params={"page_size": records_per_page, "page": page},
            cancellation=cancellation,
        )
        return parse_response(response, list[Contact], KeyedField("recipients"))

    def get_billable_count(self, *, cancellation: threading.Event | None = None) -> int:
        response = self._client.get(f"{self._endpoint}/billable_count", cancellation=cancellation)
        return parse_response(response, int, KeyedField("recipient_count"))

    def get_total_count(self, *, cancellation: threading.Event | None = None) -> int:
        response = self._client.get(f"{self._endpoint}/count", cancellation=cancellation)
        return parse_response(response, int, KeyedField("recipient_count"))

    def search(
        self,
        conditions: Sequence[SearchCondition] | None,
        list_id: int | None = None,
        *,
        cancellation: threading.Event | None = None,
    ) -> list[Contact]:
        """Return the contacts matching every condition, optionally within one list."""
        data: dict[str, object] = {}
        if list_id is not None:
            data["list_id"] = list_id
        if conditions is not None:
            data["conditions"] = [condition.to_payload() for condition in conditions]
        response = self._client.post(
            f"{self._endpoint}/search", data, cancellation=cancellation
        )
        return parse_response(response, list[Contact], KeyedField("recipients"))
