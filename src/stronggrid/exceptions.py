"""Custom exceptions for the StrongGrid client.

Every failure a call can produce is raised as a subclass of StrongGridError so
callers can branch on the kind of failure without inspecting messages.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Self

import requests


class StrongGridError(Exception):
    """Base exception for all client errors."""

    pass


def _summarise_body(body: str, limit: int = 300) -> str:
    compact = " ".join(body.split())
    if len(compact) > limit:
        compact = compact[:limit] + "..."
    return compact


class ApiError(StrongGridError):
    """Raised when the API answers with a non-success HTTP status.

    Carries the status code, the raw body and any `errors[].message` values
    SendGrid included in the body.
    """

    def __init__(
        self,
        status_code: int,
        body: str,
        messages: Sequence[str] = (),
        *,
        reason: str = "",
    ) -> None:
        self.status_code = status_code
        self.body = body
        self.messages = tuple(messages)
        self.reason = reason
        detail = "; ".join(self.messages) if self.messages else _summarise_body(body)
        label = f"{status_code} {reason}".strip()
        super().__init__(f"SendGrid API returned {label}: {detail or '<empty body>'}")

    @classmethod
    def from_response(cls, response: requests.Response, messages: Sequence[str] = ()) -> ApiError:
        """Build the most specific ApiError subclass for a failed response."""
        body = response.text or ""
        reason = response.reason or ""
        if response.status_code in (401, 403):
            return AuthenticationError(response.status_code, body, messages, reason=reason)
        if response.status_code == 429:
            from .infrastructure.resilience import parse_retry_after

            return RateLimitError(
                response.status_code,
                body,
                messages,
                reason=reason,
                retry_after=parse_retry_after(response.headers),
            )
        return cls(response.status_code, body, messages, reason=reason)


class AuthenticationError(ApiError):
    """Raised when the API rejects the credentials (401 or 403).

    Usually an invalid or revoked API key, or a key missing the needed scope.
    """


class RateLimitError(ApiError):
    """Raised when the API is still rate limiting after the retry budget is spent.

    `retry_after` holds the seconds the server asked callers to wait, when the
    final response carried a usable Retry-After header.
    """

    def __init__(
        self,
        status_code: int,
        body: str,
        messages: Sequence[str] = (),
        *,
        reason: str = "",
        retry_after: int | None = None,
    ) -> None:
        super().__init__(status_code, body, messages, reason=reason)
        self.retry_after = retry_after


class TransportError(StrongGridError):
    """Raised when the request never produced an HTTP response (DNS, TLS, timeout)."""

    def __init__(self, method: str, url: str, detail: str) -> None:
        self.method = method
        self.url = url
        super().__init__(f"{method} {url} failed before a response was received: {detail}")

    @classmethod
    def for_request(cls, method: str, url: str, error: requests.RequestException) -> Self:
        return cls(method, url, f"{type(error).__name__}: {error}")


class RequestCancelledError(StrongGridError):
    """Raised when a caller cancels a request before it completes."""

    def __init__(self, method: str, url: str, attempt: int) -> None:
        self.method = method
        self.url = url
        self.attempt = attempt
        super().__init__(f"{method} {url} was cancelled (attempt {attempt}).")


class ResponseParseError(StrongGridError):
    """Raised when a successful response body cannot be turned into the expected type."""

    @classmethod
    def for_malformed_json(cls, schema: object) -> Self:
        return cls(f"Response body is not valid JSON (expected {schema}).")

    @classmethod
    def for_missing_key(cls, key: str) -> Self:
        return cls(f"Response body has no '{key}' property.")

    @classmethod
    def for_invalid_payload(cls, schema: object) -> Self:
        return cls(f"Response payload does not match {schema}.")


class ContactImportError(StrongGridError):
    """Raised when SendGrid accepts a contact write but reports per-record errors."""

    def __init__(self, messages: Sequence[str]) -> None:
        self.messages = tuple(messages)
        super().__init__("\n".join(self.messages) or "Contact import reported errors.")


class MissingApiKeyError(StrongGridError):
    """Raised when a client is built without an API key."""

    def __init__(self) -> None:
        super().__init__(
            "A SendGrid API key is required.\n"
            "Set SENDGRID_API_KEY in the environment or .env, or pass api_key explicitly."
        )
