"""Retry strategy for rate-limited SendGrid responses.

Usage example:
    from stronggrid.infrastructure.resilience import RetryPolicy

    retry_policy = RetryPolicy(max_retries=3, backoff_factor=0.5)
"""

from __future__ import annotations

import random
import time
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from email.utils import parsedate_to_datetime
from typing import override

import requests

from ..protocols import RetryStrategy


def parse_retry_after(headers: Mapping[str, str] | None) -> int | None:
    """Parse Retry-After header into seconds, if available."""
    if not headers:
        return None
    value = headers.get("Retry-After")
    if not value:
        return None
    value = value.strip()
    if value.isdigit():
        return int(value)
    try:
        dt = parsedate_to_datetime(value)
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=UTC)
        delta = (dt - datetime.now(UTC)).total_seconds()
        return max(0, int(delta))
    except (AttributeError, OverflowError, TypeError, ValueError):
        return None


def parse_rate_limit_reset(headers: Mapping[str, str] | None) -> float | None:
    """Parse SendGrid's X-RateLimit-Reset header (unix seconds) into a wait in seconds."""
    if not headers:
        return None
    value = headers.get("X-RateLimit-Reset")
    if not value:
        return None
    try:
        reset_at = float(value.strip())
    except ValueError:
        return None
    return max(0.0, reset_at - time.time())


@dataclass(frozen=True)
class RetryPolicy(RetryStrategy):
    """Retry policy for rate-limited responses.

    Retries any status in `retry_statuses` while the attempt number is within
    `max_retries`, so one call makes at most `max_retries + 1` requests.
    """

    max_retries: int = 5
    backoff_factor: float = 1.0
    max_backoff_seconds: float = 60.0
    jitter_seconds: float = 0.1
    retry_statuses: tuple[int, ...] = (429,)

    @override
    def should_retry(self, attempt: int, response: requests.Response) -> bool:
        return response.status_code in self.retry_statuses and attempt <= self.max_retries

    @override
    def get_next_delay(self, attempt: int, response: requests.Response) -> float:
        headers = getattr(response, "headers", None)
        retry_after = parse_retry_after(headers)
        reset_in = parse_rate_limit_reset(headers)
        return self.compute_backoff(attempt, retry_after if retry_after is not None else reset_in)

    def compute_backoff(self, attempt: int, server_delay: float | None = None) -> float:
        """Compute backoff delay, preferring a server-provided delay when present."""
        if server_delay is not None:
            base = min(self.max_backoff_seconds, float(server_delay))
        else:
            base = min(self.max_backoff_seconds, self.backoff_factor * (2 ** max(0, attempt - 1)))
        if self.jitter_seconds > 0:
            base += random.uniform(0.0, self.jitter_seconds)
        return float(base)
