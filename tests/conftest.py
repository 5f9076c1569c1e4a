"""Shared fixtures: a transport double that answers by request path."""

from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest

from tmdbwrap.transport import Transport


def make_transport(routes: dict[str, Any] | None = None) -> MagicMock:
    """Create a Transport mock whose ``request`` answers from ``routes``.

    Values that are exceptions are raised instead of returned. Unknown paths
    fail the test with a KeyError.
    """
    routes = routes or {}

    async def _request(
        method: str,
        path: str,
        options: dict[str, Any] | None = None,
        content: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        result = routes[path]
        if isinstance(result, BaseException):
            raise result
        return result

    transport = MagicMock(spec=Transport)
    transport.request = AsyncMock(side_effect=_request)
    return transport


@pytest.fixture
def transport_factory():
    """Factory fixture building path-routed transport mocks."""
    return make_transport
