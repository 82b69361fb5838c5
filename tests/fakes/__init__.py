"""Exports for test fakes."""

from .http import FakeHttpClient, RecordedRequest, make_response
from .resilience import FakeRetryStrategy

__all__ = [
    "FakeHttpClient",
    "FakeRetryStrategy",
    "RecordedRequest",
    "make_response",
]
