"""Pydantic-based deserialization of SendGrid responses.

Usage example:
    from stronggrid.infrastructure.deserialization import KeyedField, parse_response
    from stronggrid.models import Contact

    contacts = parse_response(response, list[Contact], KeyedField("recipients"))
    total = parse_response(response, int, KeyedField("recipient_count"))
"""

from __future__ import annotations

from dataclasses import dataclass

import requests
from pydantic import TypeAdapter, ValidationError

from ..exceptions import ApiError, ResponseParseError


@dataclass(frozen=True)
class WholeBody:
    """Deserialize the entire response body."""


@dataclass(frozen=True)
class KeyedField:
    """Deserialize the value stored under `name` in the top-level JSON object."""

    name: str


Unwrap = WholeBody | KeyedField


def _error_messages(response: requests.Response) -> list[str]:
    # SendGrid failures look like {"errors": [{"field": ..., "message": ...}]}
    try:
        payload = TypeAdapter(dict[str, object]).validate_json(response.content)
    except ValidationError:
        return []
    errors = payload.get("errors")
    if not isinstance(errors, list):
        return []
    messages: list[str] = []
    for error in errors:
        if isinstance(error, dict):
            message = error.get("message")
            if isinstance(message, str) and message:
                messages.append(message)
    return messages


def ensure_success(response: requests.Response) -> None:
    """Raise the matching ApiError subclass when the response is not 2xx."""
    if 200 <= response.status_code < 300:
        return
    raise ApiError.from_response(response, _error_messages(response))


def _load_json(response: requests.Response, schema: object) -> object:
    try:
        return TypeAdapter(object).validate_json(response.content)
    except ValidationError as exc:
        raise ResponseParseError.for_malformed_json(schema) from exc


def parse_response[SchemaT](
    response: requests.Response,
    schema: type[SchemaT],
    unwrap: Unwrap | None = None,
) -> SchemaT:
    """Validate a response body as `schema`.

    Args:
        response: Final response returned by the HTTP client.
        schema: Target type (a pydantic model, a scalar type or a `list[...]`).
        unwrap: `WholeBody()` (default) or `KeyedField(name)` for envelope payloads.

    Raises:
        ApiError: If the status is not 2xx.
        ResponseParseError: If the body is not JSON, lacks the key, or fails validation.
    """
    ensure_success(response)
    mode = unwrap or WholeBody()
    payload = _load_json(response, schema)

    match mode:
        case KeyedField(name=key):
            if not isinstance(payload, dict) or key not in payload:
                raise ResponseParseError.for_missing_key(key)
            value: object = payload[key]
        case WholeBody():
            value = payload

    try:
        return TypeAdapter(schema).validate_python(value)
    except ValidationError as exc:
        raise ResponseParseError.for_invalid_payload(schema) from exc
