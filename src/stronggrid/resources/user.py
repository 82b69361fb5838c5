"""Information about the current user account.

See https://sendgrid.com/docs/API_Reference/Web_API_v3/user.html
"""

from __future__ import annotations

import threading

from ..infrastructure.deserialization import KeyedField, ensure_success, parse_response
from ..models import Account, UserCredits, UserProfile
from ..protocols import HttpClient


class User:
    """Read and update the profile, credentials and permissions of the API key's user."""

    def __init__(self, client: HttpClient, endpoint: str = "/user/profile") -> None:
        self._client = client
        self._endpoint = endpoint

    def get_profile(self, *, cancellation: threading.Event | None = None) -> UserProfile:
        response = self._client.get(self._endpoint, cancellation=cancellation)
        return parse_response(response, UserProfile)

    def update_profile(
        self,
        *,
        address: str | None = None,
        city: str | None = None,
        company: str | None = None,
        country: str | None = None,
        first_name: str | None = None,
        last_name: str | None = None,
        phone: str | None = None,
        state: str | None = None,
        website: str | None = None,
        zip: str | None = None,
        cancellation: threading.Event | None = None,
    ) -> UserProfile:
        """Update the profile; empty or omitted values are left unchanged."""
        values = {
            "address": address,
            "city": city,
            "company": company,
            "country": country,
            "first_name": first_name,
            "last_name": last_name,
            "phone": phone,
            "state": state,
            "website": website,
            "zip": zip,
        }
        data: dict[str, object] = {key: value for key, value in values.items() if value}
        response = self._client.patch(self._endpoint, data, cancellation=cancellation)
        return parse_response(response, UserProfile)

    def get_account(self, *, cancellation: threading.Event | None = None) -> Account:
        response = self._client.get("/user/account", cancellation=cancellation)
        return parse_response(response, Account)

    def get_email(self, *, cancellation: threading.Event | None = None) -> str:
        response = self._client.get("/user/email", cancellation=cancellation)
        return parse_response(response, str, KeyedField("email"))

    def update_email(self, email: str, *, cancellation: threading.Event | None = None) -> str:
        response = self._client.put("/user/email", {"email": email}, cancellation=cancellation)
        return parse_response(response, str, KeyedField("email"))

    def get_username(self, *, cancellation: threading.Event | None = None) -> str:
        response = self._client.get("/user/username", cancellation=cancellation)
        return parse_response(response, str, KeyedField("username"))

    def update_username(
        self, username: str, *, cancellation: threading.Event | None = None
    ) -> str:
        response = self._client.put(
            "/user/username", {"username": username}, cancellation=cancellation
        )
        return parse_response(response, str, KeyedField("username"))

    def get_credits(self, *, cancellation: threading.Event | None = None) -> UserCredits:
        response = self._client.get("/user/credits", cancellation=cancellation)
        return parse_response(response, UserCredits)

    def update_password(
        self,
        old_password: str,
        new_password: str,
        *,
        cancellation: threading.Event | None = None,
    ) -> None:
        data: dict[str, object] = {"old_password": old_password, "new_password": new_password}
        response = self._client.put("/user/password", data, cancellation=cancellation)
        ensure_success(response)

    def get_permissions(self, *, cancellation: threading.Event | None = None) -> list[str]:
        """Return the scopes granted to the API key."""
        response = self._client.get("/scopes", cancellation=cancellation)
        return parse_response(response, list[str], KeyedField("scopes"))
