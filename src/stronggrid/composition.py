"""Composition root for wiring a configured client."""

from __future__ import annotations

from .client import Client
from .config import ClientConfig
from .exceptions import MissingApiKeyError
from .infrastructure import build_sendgrid_client


def build_client(config: ClientConfig | None = None) -> Client:
    """Build a Client from configuration.

    Args:
        config: Client configuration. If None, it is loaded with `ClientConfig.from_env()`.

    Raises:
        MissingApiKeyError: If the configuration has no API key.
    """
    if config is None:
        config = ClientConfig.from_env()
    if not config.api_key.strip():
        raise MissingApiKeyError()
    http_client = build_sendgrid_client(
        api_key=config.api_key.strip(),
        base_url=config.base_url,
        timeout_seconds=config.timeout_seconds,
        max_retries=config.max_retries,
        backoff_factor=config.backoff_factor,
        max_backoff_seconds=config.backoff_max_seconds,
        jitter_seconds=config.backoff_jitter_seconds,
    )
    return Client(http_client=http_client)
