"""Person endpoints."""

from typing import Any

from tmdbwrap.endpoints.base import ListsEndpoint, ResolvableEndpoint
from tmdbwrap.paths import PERSON_BASE, PERSON_PATHS
from tmdbwrap.resolver import ResourceKind


class PersonEndpoint(ResolvableEndpoint):
    """Requests about a single person."""

    kind = ResourceKind.PERSON
    base_path = PERSON_BASE
    paths = PERSON_PATHS

    async def get_details(self, **options: Any) -> dict[str, Any]:
        return await self._get("details", options)

    async def get_changes(self, **options: Any) -> dict[str, Any]:
        return await self._get("changes", options)

    async def get_movie_credits(self, **options: Any) -> dict[str, Any]:
        return await self._get("movie_credits", options)

    async def get_tv_credits(self, **options: Any) -> dict[str, Any]:
        return await self._get("tv_credits", options)

    async def get_combined_credits(self, **options: Any) -> dict[str, Any]:
        """Get movie and TV credits in a single response."""
        return await self._get("combined_credits", options)

    async def get_external_ids(self, **options: Any) -> dict[str, Any]:
        return await self._get("external_ids", options)

    async def get_images(self, **options: Any) -> dict[str, Any]:
        return await self._get("images", options)

    async def get_tagged_images(self, **options: Any) -> dict[str, Any]:
        return await self._get("tagged_images", options)

    async def get_translations(self, **options: Any) -> dict[str, Any]:
        return await self._get("translations", options)


class PersonListsEndpoint(ListsEndpoint):
    """Person lists not tied to a single person."""

    base_path = PERSON_BASE
    paths = PERSON_PATHS

    async def get_latest(self, **options: Any) -> dict[str, Any]:
        return await self._get("latest", options)

    async def get_popular(self, **options: Any) -> dict[str, Any]:
        """Get the list of popular people, updated daily."""
        return await self._get("popular", options)
