"""Find endpoint: look up TMDb objects by an external identifier."""

from typing import Any

from tmdbwrap.paths import FIND_BASE, FIND_PATHS
from tmdbwrap.transport import Transport


class FindEndpoint:
    """Find endpoint.

    The response groups matches by type (``movie_results``, ``tv_results``,
    ``person_results``, ...).
    """

    def __init__(self, transport: Transport, external_id: str | None = None):
        self.transport = transport
        self.external_id = external_id or None

    def set_external_id(self, external_id: str) -> "FindEndpoint":
        self.external_id = external_id
        return self

    def _path(self, name: str) -> str:
        return FIND_BASE + FIND_PATHS[name].format(external_id=self.external_id)

    async def find_by_external_id(
        self, external_source: str | None = None, **options: Any
    ) -> dict[str, Any]:
        """Find objects by external ID.

        Args:
            external_source: Source of the ID (imdb_id, tvdb_id, ...)
            **options: Extra query options

        Raises:
            ValueError: No external ID set
        """
        if not self.external_id:
            raise ValueError("External ID required")

        if external_source is not None:
            options["external_source"] = external_source
        return await self.transport.request("GET", self._path("find_by_external_id"), options)
