"""Exception hierarchy for the TMDb client.

Everything raised on purpose by this package derives from :class:`TMDBError`.
"""

from typing import Any


class TMDBError(Exception):
    """Base exception for TMDb client errors."""

    pass


# =============================================================================
# Transport
# =============================================================================


class TMDBTransportError(TMDBError):
    """Raised when a request could not be completed."""

    pass


class TMDBResponseError(TMDBTransportError):
    """Raised when TMDb answers with a non-success status.

    Attributes:
        status_code: HTTP status returned by the API
        payload: Decoded JSON body, or raw text when the body is not JSON
    """

    def __init__(self, message: str, status_code: int, payload: Any = None):
        self.status_code = status_code
        self.payload = payload
        super().__init__(message)


class TMDBAuthError(TMDBResponseError):
    """Raised when the TMDb API key or session is invalid."""

    pass


class TMDBNotFoundError(TMDBResponseError):
    """Raised when a resource is not found on TMDb."""

    pass


class TMDBRateLimitError(TMDBResponseError):
    """Raised when TMDb rate limit is exceeded."""

    def __init__(self, retry_after: int = 1, payload: Any = None):
        self.retry_after = retry_after
        super().__init__(
            f"Rate limit exceeded. Retry after {retry_after} seconds.",
            status_code=429,
            payload=payload,
        )


class TMDBNoResponseError(TMDBTransportError):
    """Raised when the request was sent but no response was received."""

    pass


class TMDBResponseFormatError(TMDBError):
    """Raised when a successful response does not have the expected shape."""

    pass


# =============================================================================
# Identifier resolution
# =============================================================================


class ResolutionError(TMDBError):
    """Base exception for failures while resolving a TMDb ID."""

    pass


class LocatorRequiredError(ResolutionError):
    """Raised when a locator carries no ID, external ID or query."""

    def __init__(self) -> None:
        super().__init__("An id, external_id or query is required.")


class UnrecognizedExternalSourceError(ResolutionError):
    """Raised when an external ID matches none of the known formats."""

    def __init__(self, external_id: str):
        self.external_id = external_id
        super().__init__(f"Unrecognized external ID format: {external_id!r}")


class NoResultsError(ResolutionError):
    """Raised when a find or search request returned no matches."""

    pass


class UnsupportedResourceError(ResolutionError):
    """Raised when resolution is configured for an unknown resource kind."""

    pass


# =============================================================================
# Endpoint usage
# =============================================================================


class EndpointStateError(TMDBError):
    """Base exception for calling an endpoint in the wrong state."""

    pass


class IdAlreadySetError(EndpointStateError):
    """Raised when resolving an endpoint that already has an ID."""

    def __init__(self, tmdb_id: int):
        self.tmdb_id = tmdb_id
        super().__init__(f"ID already set to {tmdb_id}.")


class IdRequiredError(EndpointStateError):
    """Raised when an ID-scoped request is made before the ID is resolved."""

    def __init__(self) -> None:
        super().__init__("ID required. Call set_id() first.")
