"""Shared pytest fixtures.

All tests are network-isolated - socket connections are blocked by default.
"""

from __future__ import annotations

import socket

import pytest

from tests.fakes import FakeHttpClient
from tests.support.errors import NetworkIsolationError


def _blocked_socket_connect(self: socket.socket, *args: object, **kwargs: object) -> None:
    raise NetworkIsolationError(repr(args))


@pytest.fixture(autouse=True)
def block_network_access(monkeypatch: pytest.MonkeyPatch) -> None:
    """Block all network access in tests.

    Tests that need HTTP should use FakeHttpClient or MagicMock(spec=requests.Session).
    Tests that genuinely need the real API must be marked with @pytest.mark.e2e.
    """
    monkeypatch.setattr(socket.socket, "connect", _blocked_socket_connect)


@pytest.fixture
def fake_http_client() -> FakeHttpClient:
    """Provide an empty fake HTTP client; queue responses with `respond_with`."""
    return FakeHttpClient()
