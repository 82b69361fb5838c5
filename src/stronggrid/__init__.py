"""Typed client for the SendGrid Web API v3.

Import the facade from `stronggrid.client`; this module only carries the version,
which the HTTP layer sends in its User-Agent header.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("stronggrid")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"
