"""Concrete infrastructure implementations and shared helpers."""

from .deserialization import KeyedField, Unwrap, WholeBody, ensure_success, parse_response
from .http import DEFAULT_BASE_URL, SendGridHttpClient, build_sendgrid_client, build_url
from .resilience import RetryPolicy, parse_rate_limit_reset, parse_retry_after

__all__ = [
    "DEFAULT_BASE_URL",
    "KeyedField",
    "RetryPolicy",
    "SendGridHttpClient",
    "Unwrap",
    "WholeBody",
    "build_sendgrid_client",
    "build_url",
    "ensure_success",
    "parse_rate_limit_reset",
    "parse_response",
    "parse_retry_after",
]
