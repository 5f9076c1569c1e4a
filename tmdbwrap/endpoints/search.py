"""Search endpoint."""

from typing import Any

from tmdbwrap.paths import SEARCH_BASE, SEARCH_PATHS
from tmdbwrap.transport import Transport


class SearchEndpoint:
    """Free-text search across TMDb resource types.

    Every method takes the query text plus any extra options the API accepts
    (``page``, ``year``, ``include_adult``, ...) and returns the raw response.
    """

    def __init__(self, transport: Transport):
        self.transport = transport

    async def _search(self, name: str, query: str, options: dict[str, Any]) -> dict[str, Any]:
        if not query:
            raise ValueError("Search query required")
        return await self.transport.request(
            "GET", SEARCH_BASE + SEARCH_PATHS[name], {**options, "query": query}
        )

    async def companies(self, query: str, **options: Any) -> dict[str, Any]:
        """Search for companies."""
        return await self._search("companies", query, options)

    async def collections(self, query: str, **options: Any) -> dict[str, Any]:
        """Search for collections."""
        return await self._search("collections", query, options)

    async def keywords(self, query: str, **options: Any) -> dict[str, Any]:
        """Search for keywords."""
        return await self._search("keywords", query, options)

    async def movies(self, query: str, **options: Any) -> dict[str, Any]:
        """Search for movies."""
        return await self._search("movies", query, options)

    async def multi(self, query: str, **options: Any) -> dict[str, Any]:
        """Search for movies, TV shows and people in a single request."""
        return await self._search("multi", query, options)

    async def people(self, query: str, **options: Any) -> dict[str, Any]:
        """Search for people."""
        return await self._search("people", query, options)

    async def tv_shows(self, query: str, **options: Any) -> dict[str, Any]:
        """Search for TV shows."""
        return await self._search("tv_shows", query, options)
