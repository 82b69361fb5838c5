"""Centralised, injectable configuration for the StrongGrid client."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from typing import Self

from dotenv import load_dotenv

from .infrastructure.http import DEFAULT_BASE_URL


class PositiveIntegerEnvVarError(ValueError):
    """Raised when an environment variable must be a non-negative integer."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a non-negative integer.")


class PositiveNumberEnvVarError(ValueError):
    """Raised when an environment variable must be a non-negative number."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be a non-negative number.")


class NonPositiveTimeoutEnvVarError(ValueError):
    """Raised when a timeout environment variable is zero."""

    def __init__(self, env_name: str) -> None:
        super().__init__(f"{env_name} must be greater than zero.")


@dataclass(frozen=True)
class ClientConfig:
    """Immutable configuration for one SendGrid client.

    Load from environment with `ClientConfig.from_env()` or construct directly for testing.
    """

    api_key: str = ""
    base_url: str = DEFAULT_BASE_URL
    timeout_seconds: float = 30.0

    # Retry policy for 429 responses
    max_retries: int = 5
    backoff_factor: float = 1.0
    backoff_max_seconds: float = 60.0
    backoff_jitter_seconds: float = 0.1

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> Self:
        """Load configuration from environment variables.

        Args:
            dotenv_path: Optional path to .env file. If None, uses default .env discovery.

        Returns:
            ClientConfig instance populated from environment.
        """
        load_dotenv(dotenv_path)

        return cls(
            api_key=os.getenv("SENDGRID_API_KEY", "").strip(),
            base_url=os.getenv("SENDGRID_BASE_URL", DEFAULT_BASE_URL).strip() or DEFAULT_BASE_URL,
            timeout_seconds=_parse_timeout(
                os.getenv("SENDGRID_TIMEOUT_SECONDS", "30"),
                env_name="SENDGRID_TIMEOUT_SECONDS",
            ),
            max_retries=_parse_int(
                os.getenv("SENDGRID_MAX_RETRIES", "5"),
                env_name="SENDGRID_MAX_RETRIES",
            ),
            backoff_factor=_parse_number(
                os.getenv("SENDGRID_BACKOFF_FACTOR", "1.0"),
                env_name="SENDGRID_BACKOFF_FACTOR",
            ),
            backoff_max_seconds=_parse_number(
                os.getenv("SENDGRID_BACKOFF_MAX_SECONDS", "60"),
                env_name="SENDGRID_BACKOFF_MAX_SECONDS",
            ),
            backoff_jitter_seconds=_parse_number(
                os.getenv("SENDGRID_BACKOFF_JITTER_SECONDS", "0.1"),
                env_name="SENDGRID_BACKOFF_JITTER_SECONDS",
            ),
        )

    def with_overrides(
        self,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout_seconds: float | None = None,
        max_retries: int | None = None,
    ) -> Self:
        """Return a new config with specified overrides."""
        return replace(
            self,
            api_key=self.api_key if api_key is None else api_key.strip(),
            base_url=self.base_url if base_url is None else base_url.strip(),
            timeout_seconds=self.timeout_seconds if timeout_seconds is None else timeout_seconds,
            max_retries=self.max_retries if max_retries is None else max_retries,
        )


def _parse_int(value: str, *, env_name: str) -> int:
    """Parse a non-negative integer from an environment variable."""
    try:
        parsed = int(value.strip())
    except ValueError as exc:
        raise PositiveIntegerEnvVarError(env_name) from exc
    if parsed < 0:
        raise PositiveIntegerEnvVarError(env_name)
    return parsed


def _parse_number(value: str, *, env_name: str) -> float:
    """Parse a non-negative float from an environment variable."""
    try:
        parsed = float(value.strip())
    except ValueError as exc:
        raise PositiveNumberEnvVarError(env_name) from exc
    if parsed < 0:
        raise PositiveNumberEnvVarError(env_name)
    return parsed


def _parse_timeout(value: str, *, env_name: str) -> float:
    """Parse a strictly positive timeout in seconds."""
    parsed = _parse_number(value, env_name=env_name)
    if parsed == 0:
        raise NonPositiveTimeoutEnvVarError(env_name)
    return parsed
