"""Facade exposing every SendGrid resource through one HTTP client.

Usage example:
    from stronggrid.client import Client

    client = Client("SG.xxxxx")
    profile = client.user.get_profile()
    total = client.contacts.get_total_count()
"""

from __future__ import annotations

import requests

from . import __version__
from .exceptions import MissingApiKeyError
from .infrastructure.http import DEFAULT_BASE_URL, SendGridHttpClient
from .protocols import HttpClient, RetryStrategy
from .resources import (
    ApiKeys,
    Categories,
    Contacts,
    GlobalSuppressions,
    InvalidEmails,
    Lists,
    Segments,
    SenderIdentities,
    Templates,
    User,
)


class Client:
    """SendGrid Web API v3 client.

    Either pass an API key (a `SendGridHttpClient` is built for it) or inject any
    `HttpClient` implementation, which is how tests substitute a fake transport.
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        http_client: HttpClient | None = None,
        session: requests.Session | None = None,
        base_url: str = DEFAULT_BASE_URL,
        retry_strategy: RetryStrategy | None = None,
        timeout_seconds: float = 30.0,
    ) -> None:
        if http_client is None:
            if not api_key or not api_key.strip():
                raise MissingApiKeyError()
            http_client = SendGridHttpClient(
                api_key=api_key.strip(),
                session=session,
                base_url=base_url,
                retry_strategy=retry_strategy,
                timeout_seconds=timeout_seconds,
            )
        self.http_client = http_client
        self.version = __version__

        self.api_keys = ApiKeys(http_client)
        self.categories = Categories(http_client)
        self.contacts = Contacts(http_client)
        self.global_suppressions = GlobalSuppressions(http_client)
        self.invalid_emails = InvalidEmails(http_client)
        self.lists = Lists(http_client)
        self.segments = Segments(http_client)
        self.sender_identities = SenderIdentities(http_client)
        self.templates = Templates(http_client)
        self.user = User(http_client)
