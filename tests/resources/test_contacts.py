"""Tests for the Contacts resource."""

from __future__ import annotations

import threading
from datetime import UTC, datetime

import pytest

from stronggrid.exceptions import ContactImportError, ResponseParseError
from stronggrid.models import (
    ConditionOperator,
    Contact,
    CustomField,
    LogicalOperator,
    SearchCondition,
)
from stronggrid.resources import Contacts, contact_payload
from tests.fakes import FakeHttpClient

ENDPOINT = "/contactdb/recipients"

SINGLE_RECIPIENT = {
    "created_at": 1422313607,
    "email": "jones@example.com",
    "first_name": None,
    "id": "YUBh",
    "last_clicked": None,
    "last_emailed": None,
    "last_name": "Jones",
    "last_opened": None,
    "updated_at": 1422313790,
    "custom_fields": [{"id": 23, "name": "pet", "value": "Indiana", "type": "text"}],
}

MULTIPLE_RECIPIENTS = {
    "recipients": [
        {
            **SINGLE_RECIPIENT,
            "custom_fields": [
                {"id": 23, "name": "pet", "value": "Indiana", "type": "text"},
                {"id": 24, "name": "age", "value": "43", "type": "number"},
            ],
        }
    ]
}

IMPORT_OK = {
    "error_count": 0,
    "error_indices": [],
    "new_count": 1,
    "persisted_recipients": ["YUBh"],
    "updated_count": 0,
}

IMPORT_FAILED = {
    "error_count": 1,
    "error_indices": [0],
    "errors": [{"error_indices": [0], "message": "Invalid email."}],
    "new_count": 0,
    "persisted_recipients": [],
    "updated_count": 0,
}


@pytest.fixture
def contacts(fake_http_client: FakeHttpClient) -> Contacts:
    return Contacts(fake_http_client, ENDPOINT)


class TestContactPayload:
    """Tests for contact serialization."""

    def test_empty_standard_fields_are_omitted(self) -> None:
        payload = contact_payload(Contact(email="jones@example.com", first_name=""))
        assert payload == {"email": "jones@example.com"}

    def test_custom_fields_are_flattened(self) -> None:
        contact = Contact(
            email="jones@example.com",
            last_name="Jones",
            custom_fields=[
                CustomField(name="pet", value="Indiana"),
                CustomField(name="age", type="number", value=43),
                CustomField(
                    name="joined",
                    type="date",
                    value=datetime(2015, 1, 26, 23, 6, 47, tzinfo=UTC),
                ),
            ],
        )

        assert contact_payload(contact) == {
            "email": "jones@example.com",
            "last_name": "Jones",
            "pet": "Indiana",
            "age": 43,
            "joined": 1422313607,
        }


class TestContactsReads:
    """Tests for contact lookups."""

    def test_get(self, contacts: Contacts, fake_http_client: FakeHttpClient) -> None:
        fake_http_client.respond_with(200, SINGLE_RECIPIENT)

        contact = contacts.get("YUBh")

        assert fake_http_client.last_call.method == "GET"
        assert fake_http_client.last_call.path == f"{ENDPOINT}/YUBh"
        assert contact.email == "jones@example.com"
        assert contact.first_name is None
        assert contact.custom_fields[0].value == "Indiana"

    def test_get_page(self, contacts: Contacts, fake_http_client: FakeHttpClient) -> None:
        fake_http_client.respond_with(200, MULTIPLE_RECIPIENTS)

        page = contacts.get_page(records_per_page=25, page=3)

        assert fake_http_client.last_call.path == ENDPOINT
        assert fake_http_client.last_call.params == {"page_size": 25, "page": 3}
        assert len(page) == 1
        age = page[0].custom_fields[1]
        assert age.name == "age"
        assert age.value == 43

    def test_get_billable_count(
        self, contacts: Contacts, fake_http_client: FakeHttpClient
    ) -> None:
        fake_http_client.respond_with(200, {"recipient_count": 2})

        assert contacts.get_billable_count() == 2
        assert fake_http_client.last_call.path == f"{ENDPOINT}/billable_count"

    def test_get_total_count(self, contacts: Contacts, fake_http_client: FakeHttpClient) -> None:
        fake_http_client.respond_with(200, {"recipient_count": 3})

        assert contacts.get_total_count() == 3
        assert fake_http_client.last_call.path == f"{ENDPOINT}/count"

    def test_search(self, contacts: Contacts, fake_http_client: FakeHttpClient) -> None:
        fake_http_client.respond_with(200, MULTIPLE_RECIPIENTS)
        conditions = [
            SearchCondition(
                field="last_name", value="Jones", operator=ConditionOperator.EQUAL
            ),
            SearchCondition(
                field="email",
                value="example.com",
                operator=ConditionOperator.CONTAINS,
                logical_operator=LogicalOperator.AND,
            ),
        ]

        result = contacts.search(conditions, list_id=5)

        call = fake_http_client.last_call
        assert call.method == "POST"
        assert call.path == f"{ENDPOINT}/search"
        assert call.body == {
            "list_id": 5,
            "conditions": [
                {"field": "last_name", "value": "Jones", "operator": "eq", "and_or": ""},
                {
                    "field": "email",
                    "value": "example.com",
                    "operator": "contains",
                    "and_or": "and",
                },
            ],
        }
        assert [contact.id for contact in result] == ["YUBh"]

    def test_search_without_conditions_sends_empty_object(
        self, contacts: Contacts, fake_http_client: FakeHttpClient
    ) -> None:
        fake_http_client.respond_with(200, {"recipients": []})

        result = contacts.search(None)

        call = fake_http_client.last_call
        assert (call.method, call.path) == ("POST", f"{ENDPOINT}/search")
        assert call.body == {}
        assert result == []

    def test_cancellation_is_passed_through(
        self, contacts: Contacts, fake_http_client: FakeHttpClient
    ) -> None:
        fake_http_client.respond_with(200, {"recipient_count": 0})
        event = threading.Event()

        contacts.get_total_count(cancellation=event)

        assert fake_http_client.last_call.cancellation is event


class TestContactsWrites:
    """Tests for contact creation, update and deletion."""

    def test_create_returns_persisted_id(
        self, contacts: Contacts, fake_http_client: FakeHttpClient
    ) -> None:
        fake_http_client.respond_with(201, IMPORT_OK)

        contact_id = contacts.create(
            "jones@example.com",
            last_name="Jones",
            custom_fields=[CustomField(name="pet", value="Indiana")],
        )

        assert contact_id == "YUBh"
        call = fake_http_client.last_call
        assert call.method == "POST"
        assert call.path == ENDPOINT
        assert call.body == [{"email": "jones@example.com", "last_name": "Jones", "pet": "Indiana"}]

    def test_create_raises_on_reported_errors(
        self, contacts: Contacts, fake_http_client: FakeHttpClient
    ) -> None:
        fake_http_client.respond_with(201, IMPORT_FAILED)

        with pytest.raises(ContactImportError) as exc_info:
            contacts.create("not-an-email")

        assert exc_info.value.messages == ("Invalid email.",)
        assert str(exc_info.value) == "Invalid email."

    def test_create_requires_exactly_one_persisted_id(
        self, contacts: Contacts, fake_http_client: FakeHttpClient
    ) -> None:
        fake_http_client.respond_with(201, {**IMPORT_OK, "persisted_recipients": []})

        with pytest.raises(ResponseParseError):
            contacts.create("jones@example.com")

    def test_update_patches_one_contact(
        self, contacts: Contacts, fake_http_client: FakeHttpClient
    ) -> None:
        fake_http_client.respond_with(201, {**IMPORT_OK, "new_count": 0, "updated_count": 1})

        contacts.update("jones@example.com", first_name="Bob")

        call = fake_http_client.last_call
        assert call.method == "PATCH"
        assert call.body == [{"email": "jones@example.com", "first_name": "Bob"}]

    def test_update_raises_on_reported_errors(
        self, contacts: Contacts, fake_http_client: FakeHttpClient
    ) -> None:
        fake_http_client.respond_with(201, IMPORT_FAILED)

        with pytest.raises(ContactImportError):
            contacts.update("not-an-email")

    def test_import_contacts(self, contacts: Contacts, fake_http_client: FakeHttpClient) -> None:
        fake_http_client.respond_with(201, {**IMPORT_OK, "new_count": 2})

        result = contacts.import_contacts(
            [Contact(email="a@example.com"), Contact(email="b@example.com")]
        )

        assert fake_http_client.last_call.body == [
            {"email": "a@example.com"},
            {"email": "b@example.com"},
        ]
        assert result.new_count == 2
        assert result.error_count == 0

    def test_delete_single_id_is_sent_as_array(
        self, contacts: Contacts, fake_http_client: FakeHttpClient
    ) -> None:
        fake_http_client.respond_with(204)

        contacts.delete("YUBh")

        call = fake_http_client.last_call
        assert call.method == "DELETE"
        assert call.path == ENDPOINT
        assert call.body == ["YUBh"]

    def test_delete_many(self, contacts: Contacts, fake_http_client: FakeHttpClient) -> None:
        fake_http_client.respond_with(204)

        contacts.delete(["a", "b"])

        assert fake_http_client.last_call.body == ["a", "b"]
