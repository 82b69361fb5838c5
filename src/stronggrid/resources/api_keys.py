"""API keys.

See https://sendgrid.com/docs/API_Reference/Web_API_v3/API_Keys/api_keys.html
"""

from __future__ import annotations

import threading
from collections.abc import Iterable

from ..infrastructure.deserialization import KeyedField, ensure_success, parse_response
from ..models import ApiKey
from ..protocols import HttpClient


class ApiKeys:
    """Create, inspect and revoke API keys."""

    def __init__(self, client: HttpClient, endpoint: str = "/api_keys") -> None:
        self._client = client
        self._endpoint = endpoint

    def create(
        self,
        name: str,
        scopes: Iterable[str] | None = None,
        *,
        cancellation: threading.Event | None = None,
    ) -> ApiKey:
        """Create a key; the secret is only returned by this call."""
        data: dict[str, object] = {"name": name}
        if scopes is not None:
            data["scopes"] = list(scopes)
        response = self._client.post(self._endpoint, data, cancellation=cancellation)
        return parse_response(response, ApiKey)

    def get(self, key_id: str, *, cancellation: threading.Event | None = None) -> ApiKey:
        response = self._client.get(f"{self._endpoint}/{key_id}", cancellation=cancellation)
        return parse_response(response, ApiKey)

    def get_all(self, *, cancellation: threading.Event | None = None) -> list[ApiKey]:
        response = self._client.get(self._endpoint, cancellation=cancellation)
        return parse_response(response, list[ApiKey], KeyedField("result"))

    def delete(self, key_id: str, *, cancellation: threading.Event | None = None) -> None:
        response = self._client.delete(f"{self._endpoint}/{key_id}", cancellation=cancellation)
        ensure_success(response)

    def update(
        self,
        key_id: str,
        name: str,
        scopes: Iterable[str] | None = None,
        *,
        cancellation: threading.Event | None = None,
    ) -> ApiKey:
        """Rename a key, replacing its scopes as well when they are given.

        SendGrid only accepts scope changes through PUT; a rename alone is a PATCH.
        """
        path = f"{self._endpoint}/{key_id}"
        if scopes is None:
            response = self._client.patch(path, {"name": name}, cancellation=cancellation)
        else:
            data: dict[str, object] = {"name": name, "scopes": list(scopes)}
            response = self._client.put(path, data, cancellation=cancellation)
        return parse_response(response, ApiKey)
