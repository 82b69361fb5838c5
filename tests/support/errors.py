"""Test-only exceptions for enforcing constraints."""

from __future__ import annotations


class NetworkIsolationError(RuntimeError):
    """Raised when a test attempts a real network connection."""

    def __init__(self, attempted: str) -> None:
        super().__init__(
            "Tests must not make network connections! "
            "Use MagicMock(spec=requests.Session) or FakeHttpClient instead. "
            f"Attempted connection to: {attempted}"
        )


class FakeResponseMissingError(LookupError):
    """Raised when a fake HTTP client has no queued response left."""

    def __init__(self, method: str, path: str) -> None:
        super().__init__(f"No queued response for {method} {path}")
