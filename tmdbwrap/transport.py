"""HTTP transport for the TMDb API.

A single ``request`` routine used by every endpoint. It merges the default
query options (API key, language, region) with per-call options, sends the
request through an ``httpx.AsyncClient`` and normalizes failures into the
:mod:`tmdbwrap.errors` hierarchy.
"""

from typing import Any

import httpx
import structlog

from tmdbwrap.config import settings
from tmdbwrap.errors import (
    TMDBAuthError,
    TMDBNoResponseError,
    TMDBNotFoundError,
    TMDBRateLimitError,
    TMDBResponseError,
    TMDBResponseFormatError,
    TMDBTransportError,
)

logger = structlog.get_logger(__name__)

JSON_CONTENT_TYPE = "application/json;charset=utf-8"


class Transport:
    """Async HTTP transport bound to one API key and default options.

    Example:
        async with Transport(api_key="...") as transport:
            data = await transport.request("GET", "/movie/27205")
    """

    def __init__(
        self,
        api_key: str,
        language: str | None = None,
        region: str | None = None,
        base_url: str | None = None,
        version: int | None = None,
        timeout: float | None = None,
    ):
        """Initialize transport.

        Args:
            api_key: TMDb v3 API key
            language: Default language. Uses settings.tmdb_language if None.
            region: Default region. Uses settings.tmdb_region if None.
            base_url: API base URL. Uses settings.tmdb_base_url if None.
            version: API version. Uses settings.tmdb_api_version if None.
            timeout: Request timeout in seconds. Uses settings.request_timeout if None.
        """
        if not api_key:
            raise ValueError("TMDb API key required")

        self.default_options: dict[str, Any] = {
            "api_key": api_key,
            "language": language or settings.tmdb_language,
            "region": region or settings.tmdb_region,
        }
        self._base_url = (base_url or settings.tmdb_base_url).rstrip("/")
        self._version = version or settings.tmdb_api_version
        self._timeout = timeout or settings.request_timeout
        self._client: httpx.AsyncClient | None = None

    async def __aenter__(self) -> "Transport":
        """Enter async context manager."""
        self._client = httpx.AsyncClient(
            timeout=self._timeout,
            headers={"Accept": "application/json"},
        )
        return self

    async def __aexit__(
        self,
        _exc_type: Any,
        _exc_val: Any,
        _exc_tb: Any,
    ) -> None:
        """Exit async context manager."""
        if self._client:
            await self._client.aclose()
            self._client = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Get HTTP client, ensuring it's initialized.

        Raises:
            RuntimeError: If client not initialized (not in context manager)
        """
        if self._client is None:
            raise RuntimeError("Transport must be used as async context manager")
        return self._client

    def build_url(self, path: str) -> str:
        return f"{self._base_url}/{self._version}{path}"

    def build_params(self, options: dict[str, Any] | None = None) -> dict[str, Any]:
        """Merge default options with call options, dropping unset values."""
        params = {**self.default_options, **(options or {})}
        return {k: v for k, v in params.items() if v is not None}

    async def request(
        self,
        method: str,
        path: str,
        options: dict[str, Any] | None = None,
        content: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send a request to the API.

        Args:
            method: HTTP method (case-insensitive)
            path: Endpoint path starting with "/", without base URL and version
            options: Query parameters merged over the default options
            content: JSON body
            headers: Extra request headers

        Returns:
            Decoded JSON response (empty dict for 204 No Content)

        Raises:
            ValueError: Missing method or path
            TMDBAuthError: Invalid API key or session (401)
            TMDBNotFoundError: Resource not found (404)
            TMDBRateLimitError: Rate limit exceeded (429)
            TMDBResponseError: Any other non-success status
            TMDBNoResponseError: Request sent, no response received
            TMDBTransportError: Unknown error while sending the request
            TMDBResponseFormatError: Success response body is not JSON
        """
        if not method:
            raise ValueError("Request method required")
        if not path:
            raise ValueError("Request path required")

        method = method.upper()
        request_headers = dict(headers or {})
        if method == "POST":
            request_headers = {"Content-Type": JSON_CONTENT_TYPE, **request_headers}

        logger.debug("tmdb_request", method=method, path=path, params=options)

        try:
            response = await self.client.request(
                method,
                self.build_url(path),
                params=self.build_params(options),
                json=content or None,
                headers=request_headers or None,
            )
        except httpx.RequestError as e:
            logger.warning("tmdb_no_response", method=method, path=path, error=str(e))
            raise TMDBNoResponseError(
                f"Request was made but no response was received: {e}"
            ) from e
        except httpx.HTTPError as e:
            logger.warning("tmdb_http_error", method=method, path=path, error=str(e))
            raise TMDBTransportError(f"Unknown error when sending request: {e}") from e

        if response.is_success:
            if response.status_code == 204 or not response.content:
                return {}
            try:
                return response.json()
            except ValueError as e:
                logger.warning("tmdb_invalid_json", path=path, status=response.status_code)
                raise TMDBResponseFormatError(f"Response from {path} is not valid JSON") from e

        raise self._error_from_response(response, path)

    @staticmethod
    def _parse_retry_after(value: str | None) -> int:
        # HTTP-date and fractional values are not honoured
        try:
            return int(value) if value is not None else 1
        except ValueError:
            return 1

    @staticmethod
    def _decode_payload(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError:
            return response.text

    def _error_from_response(self, response: httpx.Response, path: str) -> TMDBResponseError:
        status = response.status_code
        payload = self._decode_payload(response)
        logger.warning("tmdb_error_response", path=path, status=status)

        if status == 401:
            return TMDBAuthError("Invalid TMDb API key or session", status, payload)
        if status == 404:
            return TMDBNotFoundError(f"Resource not found: {path}", status, payload)
        if status == 429:
            retry_after = self._parse_retry_after(response.headers.get("Retry-After"))
            return TMDBRateLimitError(retry_after, payload)

        if isinstance(payload, dict) and payload.get("status_message"):
            detail = payload["status_message"]
        else:
            detail = response.text[:200] if response.text else "Unknown error"
        return TMDBResponseError(f"TMDb API error {status}: {detail}", status, payload)
