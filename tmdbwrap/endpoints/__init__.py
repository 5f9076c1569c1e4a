"""TMDb API endpoints."""

from tmdbwrap.endpoints.adapter import SearchAdapter, build_resolution_config
from tmdbwrap.endpoints.base import EndpointState, ResolvableEndpoint, Resolved, Unresolved
from tmdbwrap.endpoints.company import CompanyEndpoint
from tmdbwrap.endpoints.find import FindEndpoint
from tmdbwrap.endpoints.movie import MovieEndpoint, MovieListsEndpoint
from tmdbwrap.endpoints.person import PersonEndpoint, PersonListsEndpoint
from tmdbwrap.endpoints.search import SearchEndpoint
from tmdbwrap.endpoints.tv import TVEndpoint, TVListsEndpoint

__all__ = [
    "CompanyEndpoint",
    "EndpointState",
    "FindEndpoint",
    "MovieEndpoint",
    "MovieListsEndpoint",
    "PersonEndpoint",
    "PersonListsEndpoint",
    "ResolvableEndpoint",
    "Resolved",
    "SearchAdapter",
    "SearchEndpoint",
    "TVEndpoint",
    "TVListsEndpoint",
    "Unresolved",
    "build_resolution_config",
]
