"""Movie endpoints.

See https://developer.themoviedb.org/reference/movie-details
"""

from typing import Any

from tmdbwrap.endpoints.base import ListsEndpoint, ResolvableEndpoint
from tmdbwrap.models import DetailsResponse
from tmdbwrap.paths import MOVIE_BASE, MOVIE_PATHS
from tmdbwrap.resolver import ResourceKind


class MovieEndpoint(ResolvableEndpoint):
    """Requests about a single movie.

    Example:
        movie = await tmdb.movie().set_id(external_id="tt1375666")
        credits = await movie.get_credits()
    """

    kind = ResourceKind.MOVIE
    base_path = MOVIE_BASE
    paths = MOVIE_PATHS

    async def get_details(self, **options: Any) -> DetailsResponse:
        """Get the primary information about a movie.

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

    async def get_credits(self, **options: Any) -> dict[str, Any]:
        """Get the cast and crew for a movie."""
        return await self._get("credits", options)

    async def get_external_ids(self, **options: Any) -> dict[str, Any]:
        return await self._get("external_ids", options)

    async def get_images(self, **options: Any) -> dict[str, Any]:
        return await self._get("images", options)

    async def get_keywords(self, **options: Any) -> dict[str, Any]:
        return await self._get("keywords", options)

    async def get_release_dates(self, **options: Any) -> dict[str, Any]:
        """Get release dates with certification, per country."""
        return await self._get("release_dates", options)

    async def get_videos(self, **options: Any) -> dict[str, Any]:
        return await self._get("videos", options)

    async def get_translations(self, **options: Any) -> dict[str, Any]:
        return await self._get("translations", options)

    async def get_recommendations(self, **options: Any) -> dict[str, Any]:
        return await self._get("recommendations", options)

    async def get_similar(self, **options: Any) -> dict[str, Any]:
        return await self._get("similar", options)

    async def get_reviews(self, **options: Any) -> dict[str, Any]:
        return await self._get("reviews", options)

    async def get_lists(self, **options: Any) -> dict[str, Any]:
        """Get lists that this movie belongs to."""
        return await self._get("lists", options)

    async def add_rating(self, value: float, **options: Any) -> dict[str, Any]:
        """Rate a movie (0.5 to 10.0).

        Requires ``session_id`` or ``guest_session_id`` in options.
        """
        return await self._add_rating(value, options)

    async def remove_rating(self, **options: Any) -> dict[str, Any]:
        return await self._remove_rating(options)


class MovieListsEndpoint(ListsEndpoint):
    """Movie lists not tied to a single movie."""

    base_path = MOVIE_BASE
    paths = MOVIE_PATHS

    async def get_latest(self, **options: Any) -> dict[str, Any]:
        """Get the most newly created movie."""
        return await self._get("latest", options)

    async def get_now_playing(self, **options: Any) -> dict[str, Any]:
        return await self._get("now_playing", options)

    async def get_popular(self, **options: Any) -> dict[str, Any]:
        return await self._get("popular", options)

    async def get_top_rated(self, **options: Any) -> dict[str, Any]:
        return await self._get("top_rated", options)

    async def get_upcoming(self, **options: Any) -> dict[str, Any]:
        return await self._get("upcoming", options)
