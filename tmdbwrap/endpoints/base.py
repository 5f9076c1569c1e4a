"""Shared behaviour of endpoints addressed by a TMDb ID.

An endpoint is either :class:`Unresolved` or :class:`Resolved`. Only an
unresolved endpoint accepts :meth:`ResolvableEndpoint.set_id`; every
ID-scoped request requires the resolved state.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, ClassVar

import structlog

from tmdbwrap.endpoints.adapter import build_resolution_config
from tmdbwrap.errors import IdAlreadySetError, IdRequiredError
from tmdbwrap.models import Locator
from tmdbwrap.resolver import ResourceKind, resolve_id
from tmdbwrap.transport import Transport

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Unresolved:
    """No TMDb ID yet."""


@dataclass(frozen=True)
class Resolved:
    """TMDb ID known."""

    id: int


EndpointState = Unresolved | Resolved


class ResolvableEndpoint:
    """Base for movie, TV, person and company endpoints.

    Subclasses set ``kind``, ``base_path`` and ``paths``.
    """

    kind: ClassVar[ResourceKind]
    base_path: ClassVar[str]
    paths: ClassVar[Mapping[str, str]]

    def __init__(self, transport: Transport, tmdb_id: int | None = None):
        self.transport = transport
        self.resolution = build_resolution_config(self.kind, transport)
        self.state: EndpointState = Unresolved() if tmdb_id is None else Resolved(tmdb_id)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.state!r})"

    @property
    def id(self) -> int | None:
        """The resolved TMDb ID, or None."""
        return self.state.id if isinstance(self.state, Resolved) else None

    async def set_id(
        self,
        locator: Locator | None = None,
        *,
        id: int | None = None,
        external_id: str | None = None,
        query: str | None = None,
    ) -> "ResolvableEndpoint":
        """Resolve and store the TMDb ID of this endpoint.

        Either pass a :class:`Locator` or the individual fields.

        Raises:
            IdAlreadySetError: The endpoint already has an ID
            ResolutionError: The locator could not be resolved
            TMDBTransportError: A lookup request failed
        """
        if isinstance(self.state, Resolved):
            raise IdAlreadySetError(self.state.id)

        if locator is None:
            locator = Locator(canonical_id=id, external_id=external_id, query=query)

        tmdb_id = await resolve_id(locator, self.resolution)

        # Another set_id may have finished while we were waiting on the API
        if isinstance(self.state, Resolved):
            raise IdAlreadySetError(self.state.id)

        self.state = Resolved(tmdb_id)
        logger.debug("tmdb_endpoint_resolved", kind=self.kind.value, tmdb_id=tmdb_id)
        return self

    def _path(self, name: str) -> str:
        if not isinstance(self.state, Resolved):
            raise IdRequiredError()
        return self.base_path + self.paths[name].format(id=self.state.id)

    async def _get(self, name: str, options: dict[str, Any]) -> Any:
        return await self.transport.request("GET", self._path(name), options)

    async def _add_rating(self, value: float, options: dict[str, Any]) -> Any:
        return await self.transport.request("POST", self._path("rating"), options, {"value": value})

    async def _remove_rating(self, options: dict[str, Any]) -> Any:
        return await self.transport.request("DELETE", self._path("rating"), options)


class ListsEndpoint:
    """Base for list endpoints that are not scoped to a single resource."""

    base_path: ClassVar[str]
    paths: ClassVar[Mapping[str, str]]

    def __init__(self, transport: Transport):
        self.transport = transport

    async def _get(self, name: str, options: dict[str, Any]) -> Any:
        return await self.transport.request("GET", self.base_path + self.paths[name], options)
