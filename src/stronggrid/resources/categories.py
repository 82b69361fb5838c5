"""Email categories.

See https://sendgrid.com/docs/API_Reference/Web_API_v3/Categories/categories.html
"""

from __future__ import annotations

import threading
from typing import TypedDict

from ..infrastructure.deserialization import parse_response
from ..protocols import HttpClient


class _CategoryInput(TypedDict):
    category: str


class Categories:
    def __init__(self, client: HttpClient, endpoint: str = "/categories") -> None:
        self._client = client
        self._endpoint = endpoint

    def get(
        self,
        search_prefix: str | None = None,
        limit: int = 50,
        offset: int = 0,
        *,
        cancellation: threading.Event | None = None,
    ) -> list[str]:
        """Return category names, optionally only those starting with `search_prefix`."""
        response = self._client.get(
            self._endpoint,
            params={"category": search_prefix, "limit": limit, "offset": offset},
            cancellation=cancellation,
        )
        # The API answers [{"category": "cat1"}, ...]; callers only want the names
        items = parse_response(response, list[_CategoryInput])
        return [item["category"] for item in items]
