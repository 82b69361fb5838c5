"""Tests for the InvalidEmails and GlobalSuppressions resources."""

from __future__ import annotations

from datetime import UTC, datetime

import pytest

from stronggrid.exceptions import ApiError
from stronggrid.resources import GlobalSuppressions, InvalidEmails
from tests.fakes import FakeHttpClient

INVALID_EMAILS = [
    {
        "created": 1449953655,
        "email": "user1@example.com",
        "reason": "Mail domain mentioned in email address is unknown",
    },
    {"created": 1449939373, "email": "user2@example.com", "reason": "Mail server not found"},
]


@pytest.fixture
def invalid_emails(fake_http_client: FakeHttpClient) -> InvalidEmails:
    return InvalidEmails(fake_http_client)


@pytest.fixture
def suppressions(fake_http_client: FakeHttpClient) -> GlobalSuppressions:
    return GlobalSuppressions(fake_http_client)


class TestInvalidEmails:
    """Tests for invalid email suppressions."""

    def test_get_all_without_dates(
        self, invalid_emails: InvalidEmails, fake_http_client: FakeHttpClient
    ) -> None:
        fake_http_client.respond_with(200, INVALID_EMAILS)

        result = invalid_emails.get_all()

        assert fake_http_client.last_call.path == "/suppression/invalid_emails"
        assert fake_http_client.last_call.params == {
            "start_time": None,
            "end_time": None,
            "limit": 25,
            "offset": 0,
        }
        assert [item.email for item in result] == ["user1@example.com", "user2@example.com"]
        assert result[0].created == datetime.fromtimestamp(1449953655, tz=UTC)

    def test_get_all_sends_unix_timestamps(
        self, invalid_emails: InvalidEmails, fake_http_client: FakeHttpClient
    ) -> None:
        fake_http_client.respond_with(200, [])

        invalid_emails.get_all(
            start_date=datetime(2015, 1, 1),
            end_date=datetime(2015, 1, 2, tzinfo=UTC),
            limit=10,
            offset=5,
        )

        assert fake_http_client.last_call.params == {
            "start_time": 1420070400,
            "end_time": 1420156800,
            "limit": 10,
            "offset": 5,
        }

    def test_get_single_address(
        self, invalid_emails: InvalidEmails, fake_http_client: FakeHttpClient
    ) -> None:
        fake_http_client.respond_with(200, INVALID_EMAILS[:1])

        result = invalid_emails.get("user1@example.com")

        assert fake_http_client.last_call.path == "/suppression/invalid_emails/user1@example.com"
        assert result[0].reason == "Mail domain mentioned in email address is unknown"

    def test_delete_all(
        self, invalid_emails: InvalidEmails, fake_http_client: FakeHttpClient
    ) -> None:
        fake_http_client.respond_with(204)

        invalid_emails.delete_all()

        assert fake_http_client.last_call.method == "DELETE"
        assert fake_http_client.last_call.body == {"delete_all": True}

    def test_delete_many(
        self, invalid_emails: InvalidEmails, fake_http_client: FakeHttpClient
    ) -> None:
        fake_http_client.respond_with(204)

        invalid_emails.delete_many(["a@example.com", "b@example.com"])

        assert fake_http_client.last_call.body == {"emails": ["a@example.com", "b@example.com"]}

    def test_delete_single(
        self, invalid_emails: InvalidEmails, fake_http_client: FakeHttpClient
    ) -> None:
        fake_http_client.respond_with(204)

        invalid_emails.delete("a@example.com")

        assert fake_http_client.last_call.path == "/suppression/invalid_emails/a@example.com"
        assert fake_http_client.last_call.body is None


class TestGlobalSuppressions:
    """Tests for global unsubscribes."""

    def test_suppressed_address(
        self, suppressions: GlobalSuppressions, fake_http_client: FakeHttpClient
    ) -> None:
        fake_http_client.respond_with(200, {"recipient_email": "a@example.com"})

        assert suppressions.is_unsubscribed("a@example.com") is True
        assert fake_http_client.last_call.path == "/asm/suppressions/global/a@example.com"

    @pytest.mark.parametrize("body", ["", "{}"])
    def test_unsuppressed_address(
        self, suppressions: GlobalSuppressions, fake_http_client: FakeHttpClient, body: str
    ) -> None:
        fake_http_client.respond_with(200, text=body)

        assert suppressions.is_unsubscribed("a@example.com") is False

    def test_lookup_failure_raises(
        self, suppressions: GlobalSuppressions, fake_http_client: FakeHttpClient
    ) -> None:
        fake_http_client.respond_with(500, text="oops")

        with pytest.raises(ApiError):
            suppressions.is_unsubscribed("a@example.com")

    def test_add(self, suppressions: GlobalSuppressions, fake_http_client: FakeHttpClient) -> None:
        fake_http_client.respond_with(201, {"recipient_emails": ["a@example.com"]})

        suppressions.add(["a@example.com"])

        call = fake_http_client.last_call
        assert (call.method, call.path) == ("POST", "/asm/suppressions/global")
        assert call.body == {"recipient_emails": ["a@example.com"]}

    def test_remove(
        self, suppressions: GlobalSuppressions, fake_http_client: FakeHttpClient
    ) -> None:
        fake_http_client.respond_with(204)

        suppressions.remove("a@example.com")

        call = fake_http_client.last_call
        assert (call.method, call.path) == ("DELETE", "/asm/suppressions/global/a@example.com")
