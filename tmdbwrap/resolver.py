"""Resolution of ambiguous locators into canonical TMDb IDs.

A locator may hold a TMDb ID, an external ID (IMDb ``tt0137523``,
``nm0000093``, ...) or a free-text query. :func:`resolve_id` tries them in
that order:

1. a TMDb ID is returned as-is;
2. an external ID is either a native ``t<digits>`` ID, or is classified
   against the resource's external source table and looked up via /find;
3. a query is sent to the resource's /search endpoint.

If the external ID lookup fails and a query was also given, the query is used
instead. The first result of any lookup wins; TMDb's own ordering is trusted.
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Any

import structlog
from pydantic import ValidationError

from tmdbwrap.errors import (
    LocatorRequiredError,
    NoResultsError,
    TMDBError,
    TMDBResponseFormatError,
    UnrecognizedExternalSourceError,
    UnsupportedResourceError,
)
from tmdbwrap.models import Locator, SearchHit, SearchResultSet

logger = structlog.get_logger(__name__)

# TMDb's own ID written in external style, e.g. "t27205"
NATIVE_ID_PATTERN = re.compile(r"^t(\d+)$")


class ResourceKind(str, Enum):
    """Resource types that support ID resolution."""

    MOVIE = "movie"
    TV = "tv"
    PERSON = "person"
    COMPANY = "company"


@dataclass(frozen=True)
class ResourceProfile:
    """Static resolution data for one resource kind."""

    external_sources: Mapping[str, re.Pattern[str]]
    results_field: str


def _sources(**patterns: str) -> Mapping[str, re.Pattern[str]]:
    return MappingProxyType({name: re.compile(p) for name, p in patterns.items()})


RESOURCE_PROFILES: Mapping[ResourceKind, ResourceProfile] = MappingProxyType(
    {
        ResourceKind.MOVIE: ResourceProfile(_sources(imdb_id=r"^tt\d+$"), "movie_results"),
        ResourceKind.TV: ResourceProfile(_sources(imdb_id=r"^tt\d+$"), "tv_results"),
        ResourceKind.PERSON: ResourceProfile(_sources(imdb_id=r"^nm\d+$"), "person_results"),
        ResourceKind.COMPANY: ResourceProfile(_sources(imdb_id=r"^co\d+$"), "company_results"),
    }
)


def get_profile(kind: ResourceKind | str) -> tuple[ResourceKind, ResourceProfile]:
    """Look up the resolution profile for a resource kind.

    Raises:
        UnsupportedResourceError: Unknown resource kind
    """
    try:
        kind = ResourceKind(kind)
        return kind, RESOURCE_PROFILES[kind]
    except (ValueError, KeyError) as e:
        raise UnsupportedResourceError(f"ID resolution not supported for {kind!r}") from e


class SearchCapability(ABC):
    """Find and search requests bound to a single resource kind."""

    kind: ResourceKind

    @abstractmethod
    async def find_by_external_id(self, external_id: str, source: str) -> dict[str, Any]:
        """Return the raw /find response for an external ID from ``source``."""

    @abstractmethod
    async def search_by_query(self, query: str) -> SearchResultSet:
        """Return the parsed search response for ``query``."""


@dataclass(frozen=True)
class ResolutionConfig:
    """Everything the resolver needs to know about one resource kind."""

    external_sources: Mapping[str, re.Pattern[str]]
    results_field: str
    adapter: SearchCapability

    @classmethod
    def from_adapter(cls, adapter: SearchCapability) -> "ResolutionConfig":
        _, profile = get_profile(adapter.kind)
        return cls(
            external_sources=profile.external_sources,
            results_field=profile.results_field,
            adapter=adapter,
        )


def parse_hits(items: Any, source: str) -> list[SearchHit]:
    """Validate a list of result records.

    Raises:
        TMDBResponseFormatError: A record is not an object with an integer ``id``
    """
    if items is None:
        return []
    try:
        return [SearchHit.model_validate(item) for item in items]
    except (ValidationError, TypeError) as e:
        raise TMDBResponseFormatError(f"Malformed results in {source} response") from e


def match_native_id(external_id: str) -> int | None:
    """Extract a TMDb ID written as ``t<digits>``, if that is what this is."""
    match = NATIVE_ID_PATTERN.match(external_id)
    return int(match.group(1)) if match else None


def classify_external_id(external_id: str, external_sources: Mapping[str, re.Pattern[str]]) -> str:
    """Return the first source whose pattern matches the external ID.

    Raises:
        UnrecognizedExternalSourceError: No pattern matches
    """
    for source, pattern in external_sources.items():
        if pattern.search(external_id):
            return source
    raise UnrecognizedExternalSourceError(external_id)


async def resolve_external_id(external_id: str, config: ResolutionConfig) -> int:
    """Resolve an external ID to a TMDb ID.

    Raises:
        UnrecognizedExternalSourceError: Unknown external ID format
        NoResultsError: TMDb knows no object for this external ID
        TMDBTransportError: Request failed
    """
    native_id = match_native_id(external_id)
    if native_id is not None:
        logger.debug("tmdb_native_id", external_id=external_id, tmdb_id=native_id)
        return native_id

    source = classify_external_id(external_id, config.external_sources)
    response = await config.adapter.find_by_external_id(external_id, source)
    if not isinstance(response, Mapping):
        raise TMDBResponseFormatError("Malformed find response")

    hits = parse_hits(response.get(config.results_field), "find")
    if not hits:
        raise NoResultsError(f"No {config.results_field} for {source} {external_id!r}")
    return hits[0].id


async def resolve_query(query: str, config: ResolutionConfig) -> int:
    """Resolve a free-text query to the TMDb ID of the top search result.

    Raises:
        NoResultsError: The search returned nothing
        TMDBTransportError: Request failed
    """
    result_set = await config.adapter.search_by_query(query)
    first = result_set.first
    if first is None or result_set.total_results == 0:
        raise NoResultsError(f"No results for query {query!r}")
    return first.id


async def resolve_id(locator: Locator, config: ResolutionConfig) -> int:
    """Resolve a locator to a canonical TMDb ID.

    Args:
        locator: TMDb ID, external ID and/or query
        config: Resolution wiring for the resource kind

    Returns:
        TMDb ID

    Raises:
        LocatorRequiredError: Locator has no usable field
        UnrecognizedExternalSourceError: External ID format unknown and no query given
        NoResultsError: Lookup returned nothing
        TMDBTransportError: Request failed (propagated from the transport)
    """
    if locator.canonical_id is not None:
        return locator.canonical_id

    kind = config.adapter.kind.value

    if locator.external_id is not None:
        try:
            tmdb_id = await resolve_external_id(locator.external_id, config)
        except TMDBError as e:
            if locator.query is None:
                raise
            logger.warning(
                "tmdb_external_id_fallback",
                kind=kind,
                external_id=locator.external_id,
                query=locator.query,
                error=str(e),
            )
        else:
            logger.info(
                "tmdb_id_resolved",
                kind=kind,
                external_id=locator.external_id,
                tmdb_id=tmdb_id,
            )
            return tmdb_id

    if locator.query is not None:
        tmdb_id = await resolve_query(locator.query, config)
        logger.info("tmdb_id_resolved", kind=kind, query=locator.query, tmdb_id=tmdb_id)
        return tmdb_id

    raise LocatorRequiredError()
