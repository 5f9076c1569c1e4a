"""Async client for The Movie Database (TMDb) v3 API.

Endpoints for movies, TV shows, people and companies can be addressed by TMDb
ID, by external ID (IMDb) or by a free-text query; see :mod:`tmdbwrap.resolver`.
"""

from tmdbwrap.client import TMDb
from tmdbwrap.errors import (
    EndpointStateError,
    IdAlreadySetError,
    IdRequiredError,
    LocatorRequiredError,
    NoResultsError,
    ResolutionError,
    TMDBAuthError,
    TMDBError,
    TMDBNoResponseError,
    TMDBNotFoundError,
    TMDBRateLimitError,
    TMDBResponseError,
    TMDBResponseFormatError,
    TMDBTransportError,
    UnrecognizedExternalSourceError,
    UnsupportedResourceError,
)
from tmdbwrap.logger import configure_logging, get_logger
from tmdbwrap.models import DetailsResponse, Locator, SearchHit, SearchResultSet
from tmdbwrap.resolver import ResolutionConfig, ResourceKind, resolve_id
from tmdbwrap.transport import Transport

__version__ = "0.1.0"

__all__ = [
    # Client
    "TMDb",
    "Transport",
    # Resolution
    "Locator",
    "ResolutionConfig",
    "ResourceKind",
    "resolve_id",
    # Models
    "DetailsResponse",
    "SearchHit",
    "SearchResultSet",
    # Errors
    "TMDBError",
    "TMDBTransportError",
    "TMDBResponseError",
    "TMDBAuthError",
    "TMDBNotFoundError",
    "TMDBRateLimitError",
    "TMDBNoResponseError",
    "TMDBResponseFormatError",
    "ResolutionError",
    "LocatorRequiredError",
    "UnrecognizedExternalSourceError",
    "NoResultsError",
    "UnsupportedResourceError",
    "EndpointStateError",
    "IdAlreadySetError",
    "IdRequiredError",
    # Logging
    "configure_logging",
    "get_logger",
]
