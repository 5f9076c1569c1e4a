"""Search adapter binding find/search requests to one resource kind."""

from collections.abc import Awaitable, Callable, Mapping
from functools import partial
from types import MappingProxyType
from typing import Any

from pydantic import ValidationError

from tmdbwrap.endpoints.find import FindEndpoint
from tmdbwrap.endpoints.search import SearchEndpoint
from tmdbwrap.errors import TMDBResponseFormatError, UnsupportedResourceError
from tmdbwrap.models import SearchResultSet
from tmdbwrap.resolver import ResolutionConfig, ResourceKind, SearchCapability, get_profile
from tmdbwrap.transport import Transport

SearchFunction = Callable[[SearchEndpoint, str], Awaitable[dict[str, Any]]]

SEARCH_FUNCTIONS: Mapping[ResourceKind, SearchFunction] = MappingProxyType(
    {
        ResourceKind.MOVIE: SearchEndpoint.movies,
        ResourceKind.TV: SearchEndpoint.tv_shows,
        ResourceKind.PERSON: SearchEndpoint.people,
        ResourceKind.COMPANY: SearchEndpoint.companies,
    }
)


class SearchAdapter(SearchCapability):
    """Find and search for a single resource kind.

    The search function is chosen once, here, so unsupported kinds fail on
    construction rather than on the first lookup.

    Raises:
        UnsupportedResourceError: Unknown resource kind
    """

    def __init__(self, transport: Transport, kind: ResourceKind | str):
        self.kind, _ = get_profile(kind)
        search = SEARCH_FUNCTIONS.get(self.kind)
        if search is None:
            raise UnsupportedResourceError(f"No search endpoint for {self.kind.value!r}")
        self._transport = transport
        self._search = partial(search, SearchEndpoint(transport))

    async def find_by_external_id(self, external_id: str, source: str) -> dict[str, Any]:
        find = FindEndpoint(self._transport, external_id)
        return await find.find_by_external_id(external_source=source)

    async def search_by_query(self, query: str) -> SearchResultSet:
        data = await self._search(query)
        try:
            return SearchResultSet.model_validate(data)
        except ValidationError as e:
            raise TMDBResponseFormatError(f"Malformed {self.kind.value} search response") from e


def build_resolution_config(kind: ResourceKind | str, transport: Transport) -> ResolutionConfig:
    """Build a fresh resolution config for a resource kind.

    Raises:
        UnsupportedResourceError: Unknown resource kind
    """
    return ResolutionConfig.from_adapter(SearchAdapter(transport, kind))
