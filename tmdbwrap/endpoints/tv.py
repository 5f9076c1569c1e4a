"""TV show endpoints.

See https://developer.themoviedb.org/reference/tv-series-details
"""

from typing import Any

from tmdbwrap.endpoints.base import ListsEndpoint, ResolvableEndpoint
from tmdbwrap.models import DetailsResponse
from tmdbwrap.paths import TV_BASE, TV_PATHS
from tmdbwrap.resolver import ResourceKind


class TVEndpoint(ResolvableEndpoint):
    """Requests about a single TV show."""

    kind = ResourceKind.TV
    base_path = TV_BASE
    paths = TV_PATHS

    async def get_details(self, **options: Any) -> DetailsResponse:
        """Get the primary information about a TV show.

        Sections requested via ``append_to_response`` are returned separately
        in ``DetailsResponse.appended``.
        """
        response = await self._get("details", options)
        return DetailsResponse.from_response(response, options.get("append_to_response"))

    async def get_account_states(self, session_id: str, **options: Any) -> dict[str, Any]:
        """Get rating, watchlist and favourite status for a session."""
        return await self._get("account_states", {**options, "session_id": session_id})

    async def get_alternative_titles(self, **options: Any) -> dict[str, Any]:
        return await self._get("alternative_titles", options)

    async def get_changes(self, **options: Any) -> dict[str, Any]:
        return await self._get("changes", options)

    async def get_content_ratings(self, **options: Any) -> dict[str, Any]:
        """Get the age ratings added to a TV show, per country."""
        return await self._get("content_ratings", options)

    async def get_credits(self, **options: Any) -> dict[str, Any]:
        """Get the cast and crew of the latest season."""
        return await self._get("credits", options)

    async def get_episode_groups(self, **options: Any) -> dict[str, Any]:
        return await self._get("episode_groups", options)

    async def get_external_ids(self, **options: Any) -> dict[str, Any]:
        return await self._get("external_ids", options)

    async def get_images(self, **options: Any) -> dict[str, Any]:
        return await self._get("images", options)

    async def get_keywords(self, **options: Any) -> dict[str, Any]:
        return await self._get("keywords", options)

    async def get_recommendations(self, **options: Any) -> dict[str, Any]:
        return await self._get("recommendations", options)

    async def get_reviews(self, **options: Any) -> dict[str, Any]:
        return await self._get("reviews", options)

    async def get_screened_theatrically(self, **options: Any) -> dict[str, Any]:
        """Get episodes that have been screened in a film festival or theatre."""
        return await self._get("screened_theatrically", options)

    async def get_similar(self, **options: Any) -> dict[str, Any]:
        return await self._get("similar", options)

    async def get_translations(self, **options: Any) -> dict[str, Any]:
        return await self._get("translations", options)

    async def get_videos(self, **options: Any) -> dict[str, Any]:
        return await self._get("videos", options)

    async def add_rating(self, value: float, **options: Any) -> dict[str, Any]:
        """Rate a TV show (0.5 to 10.0).

        Requires ``session_id`` or ``guest_session_id`` in options.
        """
        return await self._add_rating(value, options)

    async def remove_rating(self, **options: Any) -> dict[str, Any]:
        return await self._remove_rating(options)


class TVListsEndpoint(ListsEndpoint):
    """TV show lists not tied to a single show."""

    base_path = TV_BASE
    paths = TV_PATHS

    async def get_latest(self, **options: Any) -> dict[str, Any]:
        """Get the most newly created TV show."""
        return await self._get("latest", options)

    async def get_airing_today(self, **options: Any) -> dict[str, Any]:
        return await self._get("airing_today", options)

    async def get_on_the_air(self, **options: Any) -> dict[str, Any]:
        """Get shows with an episode airing in the next 7 days."""
        return await self._get("on_the_air", options)

    async def get_popular(self, **options: Any) -> dict[str, Any]:
        return await self._get("popular", options)

    async def get_top_rated(self, **options: Any) -> dict[str, Any]:
        return await self._get("top_rated", options)
