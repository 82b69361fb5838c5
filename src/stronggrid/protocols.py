"""Protocol definitions for dependency injection.

These protocols define the abstract interfaces that resource wrappers and the
HTTP client depend on, enabling isolated unit testing with fake implementations.
"""

from __future__ import annotations

import threading
from collections.abc import Mapping
from typing import Literal, Protocol, runtime_checkable

import requests

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE"]
JsonBody = Mapping[str, object] | list[object]
QueryParams = Mapping[str, str | int | None]


@runtime_checkable
class RetryStrategy(Protocol):
    """Decides whether a response should be retried and how long to wait first.

    `max_retries` is the retry budget. The HTTP client stops resending once an
    attempt exceeds it, whatever `should_retry` answers.
    """

    max_retries: int

    def should_retry(self, attempt: int, response: requests.Response) -> bool:
        """Return True when the request that produced `response` should be resent.

        Args:
            attempt: 1-based number of the physical request that just completed.
            response: The response received for that attempt.
        """
        ...

    def get_next_delay(self, attempt: int, response: requests.Response) -> float:
        """Return the number of seconds to wait before the next attempt."""
        ...


@runtime_checkable
class HttpClient(Protocol):
    """Abstract HTTP client for SendGrid JSON API requests."""

    def send(
        self,
        method: HttpMethod,
        path: str,
        body: JsonBody | None = None,
        *,
        params: QueryParams | None = None,
        cancellation: threading.Event | None = None,
    ) -> requests.Response:
        """Send a request relative to the base URL and return the final response.

        Args:
            method: HTTP verb.
            path: Endpoint path relative to the base URL.
            body: Optional JSON body (object or array).
            params: Optional query string parameters; None values are omitted.
            cancellation: Optional event that aborts the call when set.

        Raises:
            TransportError: If no HTTP response was received.
            RequestCancelledError: If `cancellation` was set during the call.
        """
        ...

    def get(
        self,
        path: str,
        *,
        params: QueryParams | None = None,
        cancellation: threading.Event | None = None,
    ) -> requests.Response: ...

    def post(
        self,
        path: str,
        body: JsonBody | None = None,
        *,
        params: QueryParams | None = None,
        cancellation: threading.Event | None = None,
    ) -> requests.Response: ...

    def put(
        self,
        path: str,
        body: JsonBody | None = None,
        *,
        params: QueryParams | None = None,
        cancellation: threading.Event | None = None,
    ) -> requests.Response: ...

    def patch(
        self,
        path: str,
        body: JsonBody | None = None,
        *,
        params: QueryParams | None = None,
        cancellation: threading.Event | None = None,
    ) -> requests.Response: ...

    def delete(
        self,
        path: str,
        body: JsonBody | None = None,
        *,
        params: QueryParams | None = None,
        cancellation: threading.Event | None = None,
    ) -> requests.Response: ...
