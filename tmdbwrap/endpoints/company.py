"""Company endpoint."""

from typing import Any

from tmdbwrap.endpoints.base import ResolvableEndpoint
from tmdbwrap.paths import COMPANY_BASE, COMPANY_PATHS
from tmdbwrap.resolver import ResourceKind


class CompanyEndpoint(ResolvableEndpoint):
    """Requests about a single production company."""

    kind = ResourceKind.COMPANY
    base_path = COMPANY_BASE
    paths = COMPANY_PATHS

    async def get_details(self, **options: Any) -> dict[str, Any]:
        return await self._get("details", options)

    async def get_alternative_names(self, **options: Any) -> dict[str, Any]:
        return await self._get("alternative_names", options)

    async def get_images(self, **options: Any) -> dict[str, Any]:
        """Get the logos of a company."""
        return await self._get("images", options)
