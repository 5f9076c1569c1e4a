"""TMDb client facade.

Owns the HTTP transport and hands out endpoint objects that share it.

Example:
    async with TMDb(api_key="...") as tmdb:
        movie = await tmdb.movie().set_id(external_id="tt1375666")
        details = await movie.get_details(append_to_response="credits")
        print(details.details["title"], len(details.appended["credits"]["cast"]))
"""

from typing import Any

from tmdbwrap.config import settings
from tmdbwrap.endpoints import (
    CompanyEndpoint,
    FindEndpoint,
    MovieEndpoint,
    MovieListsEndpoint,
    PersonEndpoint,
    PersonListsEndpoint,
    SearchEndpoint,
    TVEndpoint,
    TVListsEndpoint,
    build_resolution_config,
)
from tmdbwrap.models import Locator
from tmdbwrap.resolver import ResourceKind, resolve_id
from tmdbwrap.transport import Transport


class TMDb:
    """Async client for The Movie Database v3 API."""

    def __init__(
        self,
        api_key: str | None = None,
        language: str | None = None,
        region: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
    ):
        """Initialize client.

        Args:
            api_key: TMDb API key. Uses settings.tmdb_api_key if None.
            language: Default language (default: settings.tmdb_language)
            region: Default region (default: settings.tmdb_region)
            base_url: API base URL (default: settings.tmdb_base_url)
            timeout: Request timeout in seconds (default: settings.request_timeout)

        Raises:
            ValueError: No API key given or configured
        """
        if api_key is None and settings.tmdb_api_key is not None:
            api_key = settings.tmdb_api_key.get_secret_value()
        if not api_key:
            raise ValueError("TMDb API key required")

        self.transport = Transport(
            api_key,
            language=language,
            region=region,
            base_url=base_url,
            timeout=timeout,
        )

    async def __aenter__(self) -> "TMDb":
        await self.transport.__aenter__()
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self.transport.__aexit__(exc_type, exc_val, exc_tb)

    # =========================================================================
    # Endpoints
    # =========================================================================

    def find(self, external_id: str | None = None) -> FindEndpoint:
        return FindEndpoint(self.transport, external_id)

    def search(self) -> SearchEndpoint:
        return SearchEndpoint(self.transport)

    def movie(self, tmdb_id: int | None = None) -> MovieEndpoint:
        """Movie endpoint, resolved if ``tmdb_id`` is given."""
        return MovieEndpoint(self.transport, tmdb_id)

    def movie_lists(self) -> MovieListsEndpoint:
        return MovieListsEndpoint(self.transport)

    def tv(self, tmdb_id: int | None = None) -> TVEndpoint:
        """TV endpoint, resolved if ``tmdb_id`` is given."""
        return TVEndpoint(self.transport, tmdb_id)

    def tv_lists(self) -> TVListsEndpoint:
        return TVListsEndpoint(self.transport)

    def person(self, tmdb_id: int | None = None) -> PersonEndpoint:
        """Person endpoint, resolved if ``tmdb_id`` is given."""
        return PersonEndpoint(self.transport, tmdb_id)

    def person_lists(self) -> PersonListsEndpoint:
        return PersonListsEndpoint(self.transport)

    def company(self, tmdb_id: int | None = None) -> CompanyEndpoint:
        """Company endpoint, resolved if ``tmdb_id`` is given."""
        return CompanyEndpoint(self.transport, tmdb_id)

    # =========================================================================
    # Resolution
    # =========================================================================

    async def resolve(
        self,
        kind: ResourceKind | str,
        locator: Locator | None = None,
        **fields: Any,
    ) -> int:
        """Resolve a locator to a TMDb ID without creating an endpoint.

        Args:
            kind: Resource kind ("movie", "tv", "person", "company")
            locator: Locator to resolve; built from ``fields`` if None
            **fields: ``id``, ``external_id`` and/or ``query``

        Returns:
            TMDb ID

        Raises:
            UnsupportedResourceError: Unknown resource kind
            ResolutionError: Locator could not be resolved
            TMDBTransportError: A lookup request failed
        """
        config = build_resolution_config(kind, self.transport)
        if locator is None:
            locator = Locator(**fields)
        return await resolve_id(locator, config)
