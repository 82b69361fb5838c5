"""HTTP client implementation for the SendGrid Web API.

Usage example:
    import requests

    from stronggrid.infrastructure.http import SendGridHttpClient
    from stronggrid.infrastructure.resilience import RetryPolicy

    client = SendGridHttpClient(
        api_key="SG.xxxxx",
        session=requests.Session(),
        retry_strategy=RetryPolicy(max_retries=3),
    )
    response = client.get("/user/profile")
"""

from __future__ import annotations

import threading
import time
from collections.abc import Mapping
from types import MappingProxyType
from typing import override

import requests

from .. import __version__
from ..exceptions import RequestCancelledError, TransportError
from ..observability.logging import get_logger
from ..protocols import HttpClient, HttpMethod, JsonBody, QueryParams, RetryStrategy
from .resilience import RetryPolicy

logger = get_logger("stronggrid.infrastructure.http")

DEFAULT_BASE_URL = "https://api.sendgrid.com/v3"
MEDIA_TYPE = "application/json"


def build_url(base_url: str, path: str) -> str:
    """Join `path` onto `base_url` with exactly one separator between them."""
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


def _default_headers(api_key: str, user_agent: str) -> Mapping[str, str]:
    return MappingProxyType(
        {
            "Authorization": f"Bearer {api_key}",
            "Accept": MEDIA_TYPE,
            "Content-Type": MEDIA_TYPE,
            "User-Agent": user_agent,
        }
    )


class SendGridHttpClient(HttpClient):
    """HTTP client with bearer authentication, retries and cooperative cancellation.

    Behaviour:
    - Every request carries the API key, JSON media type and user agent headers
    - After each response the retry strategy decides whether to wait and resend
    - Once the strategy declines, the last response is returned unchanged
    - Transport failures are never retried and surface as TransportError
    - A set cancellation event aborts before sending, after a response and
      during any inter-retry wait
    """

    def __init__(
        self,
        *,
        api_key: str,
        session: requests.Session | None = None,
        base_url: str = DEFAULT_BASE_URL,
        retry_strategy: RetryStrategy | None = None,
        timeout_seconds: float = 30.0,
        user_agent: str | None = None,
    ) -> None:
        self.session = session or requests.Session()
        self.base_url = base_url.rstrip("/")
        self.retry_strategy = retry_strategy or RetryPolicy()
        self.timeout_seconds = timeout_seconds
        self.default_headers = _default_headers(
            api_key, user_agent or f"stronggrid/{__version__}"
        )

    @override
    def send(
        self,
        method: HttpMethod,
        path: str,
        body: JsonBody | None = None,
        *,
        params: QueryParams | None = None,
        cancellation: threading.Event | None = None,
    ) -> requests.Response:
        """Send one logical request, retrying as the strategy directs.

        Raises:
            TransportError: If the transport raised before any response was received
            RequestCancelledError: If `cancellation` is set during the call
        """
        url = build_url(self.base_url, path)
        attempt = 1
        while True:
            self._raise_if_cancelled(cancellation, method, url, attempt)

            try:
                response = self.session.request(
                    method,
                    url,
                    json=body,
                    params=params,
                    headers=dict(self.default_headers),
                    timeout=self.timeout_seconds,
                )
            except requests.RequestException as exc:
                logger.warning("%s %s transport failure: %s", method, url, exc)
                raise TransportError.for_request(method, url, exc) from exc

            self._raise_if_cancelled(cancellation, method, url, attempt)

            if (
                not self.retry_strategy.should_retry(attempt, response)
                or attempt > self.retry_strategy.max_retries
            ):
                return response

            delay = self.retry_strategy.get_next_delay(attempt, response)
            logger.warning(
                "%s %s returned %s on attempt %d; retrying in %.2fs",
                method,
                url,
                response.status_code,
                attempt,
                delay,
            )
            self._wait(delay, cancellation, method, url, attempt)
            attempt += 1

    @override
    def get(
        self,
        path: str,
        *,
        params: QueryParams | None = None,
        cancellation: threading.Event | None = None,
    ) -> requests.Response:
        return self.send("GET", path, params=params, cancellation=cancellation)

    @override
    def post(
        self,
        path: str,
        body: JsonBody | None = None,
        *,
        params: QueryParams | None = None,
        cancellation: threading.Event | None = None,
    ) -> requests.Response:
        return self.send("POST", path, body, params=params, cancellation=cancellation)

    @override
    def put(
        self,
        path: str,
        body: JsonBody | None = None,
        *,
        params: QueryParams | None = None,
        cancellation: threading.Event | None = None,
    ) -> requests.Response:
        return self.send("PUT", path, body, params=params, cancellation=cancellation)

    @override
    def patch(
        self,
        path: str,
        body: JsonBody | None = None,
        *,
        params: QueryParams | None = None,
        cancellation: threading.Event | None = None,
    ) -> requests.Response:
        return self.send("PATCH", path, body, params=params, cancellation=cancellation)

    @override
    def delete(
        self,
        path: str,
        body: JsonBody | None = None,
        *,
        params: QueryParams | None = None,
        cancellation: threading.Event | None = None,
    ) -> requests.Response:
        return self.send("DELETE", path, body, params=params, cancellation=cancellation)

    def _raise_if_cancelled(
        self,
        cancellation: threading.Event | None,
        method: str,
        url: str,
        attempt: int,
    ) -> None:
        if cancellation is not None and cancellation.is_set():
            logger.info("%s %s cancelled on attempt %d", method, url, attempt)
            raise RequestCancelledError(method, url, attempt)

    def _wait(
        self,
        delay: float,
        cancellation: threading.Event | None,
        method: str,
        url: str,
        attempt: int,
    ) -> None:
        if cancellation is None:
            if delay > 0:
                time.sleep(delay)
            return
        # Event.wait returns True as soon as the event is set
        if cancellation.wait(max(0.0, delay)):
            logger.info("%s %s cancelled while waiting to retry", method, url)
            raise RequestCancelledError(method, url, attempt)


def build_sendgrid_client(
    *,
    api_key: str,
    base_url: str = DEFAULT_BASE_URL,
    timeout_seconds: float = 30.0,
    max_retries: int = 5,
    backoff_factor: float = 1.0,
    max_backoff_seconds: float = 60.0,
    jitter_seconds: float = 0.1,
) -> SendGridHttpClient:
    retry_policy = RetryPolicy(
        max_retries=max_retries,
        backoff_factor=backoff_factor,
        max_backoff_seconds=max_backoff_seconds,
        jitter_seconds=jitter_seconds,
    )
    return SendGridHttpClient(
        api_key=api_key,
        session=requests.Session(),
        base_url=base_url,
        retry_strategy=retry_policy,
        timeout_seconds=timeout_seconds,
    )
