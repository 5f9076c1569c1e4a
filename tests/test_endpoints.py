"""Tests for resource, list, search and find endpoints."""

import asyncio

import pytest

from tmdbwrap.endpoints import (
    CompanyEndpoint,
    FindEndpoint,
    MovieEndpoint,
    MovieListsEndpoint,
    PersonEndpoint,
    PersonListsEndpoint,
    Resolved,
    SearchEndpoint,
    TVEndpoint,
    TVListsEndpoint,
    Unresolved,
)
from tmdbwrap.errors import (
    IdAlreadySetError,
    IdRequiredError,
    LocatorRequiredError,
    NoResultsError,
)
from tmdbwrap.models import DetailsResponse, Locator

SAMPLE_MOVIE_SEARCH_RESPONSE = {
    "page": 1,
    "results": [{"id": 27205, "title": "Inception"}],
    "total_pages": 1,
    "total_results": 1,
}

SAMPLE_TV_FIND_RESPONSE = {
    "movie_results": [],
    "tv_results": [{"id": 1396, "name": "Breaking Bad"}],
}

SAMPLE_TV_DETAILS = {
    "id": 1396,
    "name": "Breaking Bad",
    "number_of_seasons": 5,
    "credits": {"cast": [{"id": 17419, "name": "Bryan Cranston"}], "crew": []},
    "videos": {"results": []},
}


# =============================================================================
# State Tests
# =============================================================================


class TestEndpointState:
    """Tests for the Unresolved / Resolved endpoint state."""

    def test_starts_unresolved(self, transport_factory):
        movie = MovieEndpoint(transport_factory())
        assert movie.state == Unresolved()
        assert movie.id is None

    def test_starts_resolved_with_id(self, transport_factory):
        movie = MovieEndpoint(transport_factory(), 27205)
        assert movie.state == Resolved(27205)
        assert movie.id == 27205

    @pytest.mark.asyncio
    async def test_set_id_by_query(self, transport_factory):
        transport = transport_factory({"/search/movie": SAMPLE_MOVIE_SEARCH_RESPONSE})
        movie = MovieEndpoint(transport)

        result = await movie.set_id(query="Inception")

        assert result is movie
        assert movie.state == Resolved(27205)

    @pytest.mark.asyncio
    async def test_set_id_with_locator(self, transport_factory):
        transport = transport_factory({"/find/tt0903747": SAMPLE_TV_FIND_RESPONSE})
        tv = TVEndpoint(transport)

        await tv.set_id(Locator(external_id="tt0903747"))

        assert tv.id == 1396
        transport.request.assert_awaited_once_with(
            "GET", "/find/tt0903747", {"external_source": "imdb_id"}
        )

    @pytest.mark.asyncio
    async def test_set_id_twice_rejected(self, transport_factory):
        transport = transport_factory()
        movie = MovieEndpoint(transport)
        await movie.set_id(id=550)

        with pytest.raises(IdAlreadySetError) as exc_info:
            await movie.set_id(id=551)

        assert exc_info.value.tmdb_id == 550
        assert movie.id == 550
        transport.request.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_set_id_on_constructed_id_rejected(self, transport_factory):
        movie = MovieEndpoint(transport_factory(), 27205)

        with pytest.raises(IdAlreadySetError):
            await movie.set_id(query="Inception")

    @pytest.mark.asyncio
    async def test_set_id_failure_keeps_unresolved(self, transport_factory):
        transport = transport_factory(
            {"/search/movie": {"page": 1, "results": [], "total_results": 0}}
        )
        movie = MovieEndpoint(transport)

        with pytest.raises(NoResultsError):
            await movie.set_id(query="xyzzy-nonexistent")

        assert movie.state == Unresolved()

    @pytest.mark.asyncio
    async def test_set_id_requires_locator(self, transport_factory):
        movie = MovieEndpoint(transport_factory())

        with pytest.raises(LocatorRequiredError):
            await movie.set_id()

    @pytest.mark.asyncio
    async def test_concurrent_set_id_only_one_wins(self, transport_factory):
        transport = transport_factory({"/search/movie": SAMPLE_MOVIE_SEARCH_RESPONSE})
        movie = MovieEndpoint(transport)

        results = await asyncio.gather(
            movie.set_id(query="Inception"),
            movie.set_id(query="Inception"),
            return_exceptions=True,
        )

        errors = [r for r in results if isinstance(r, Exception)]
        assert len(errors) == 1
        assert isinstance(errors[0], IdAlreadySetError)
        assert movie.id == 27205

    @pytest.mark.asyncio
    async def test_request_before_resolution(self, transport_factory):
        transport = transport_factory()
        person = PersonEndpoint(transport)

        with pytest.raises(IdRequiredError):
            await person.get_details()

        transport.request.assert_not_awaited()


# =============================================================================
# Resource Endpoint Tests
# =============================================================================


class TestMovieEndpoint:
    """Tests for MovieEndpoint request paths."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,path",
        [
            ("get_alternative_titles", "/movie/27205/alternative_titles"),
            ("get_changes", "/movie/27205/changes"),
            ("get_credits", "/movie/27205/credits"),
            ("get_external_ids", "/movie/27205/external_ids"),
            ("get_images", "/movie/27205/images"),
            ("get_keywords", "/movie/27205/keywords"),
            ("get_release_dates", "/movie/27205/release_dates"),
            ("get_videos", "/movie/27205/videos"),
            ("get_translations", "/movie/27205/translations"),
            ("get_recommendations", "/movie/27205/recommendations"),
            ("get_similar", "/movie/27205/similar"),
            ("get_reviews", "/movie/27205/reviews"),
            ("get_lists", "/movie/27205/lists"),
        ],
    )
    async def test_get_paths(self, method, path, transport_factory):
        transport = transport_factory({path: {"id": 27205}})
        movie = MovieEndpoint(transport, 27205)

        assert await getattr(movie, method)(page=2) == {"id": 27205}
        transport.request.assert_awaited_once_with("GET", path, {"page": 2})

    @pytest.mark.asyncio
    async def test_get_details_without_append(self, transport_factory):
        transport = transport_factory({"/movie/27205": {"id": 27205, "title": "Inception"}})
        movie = MovieEndpoint(transport, 27205)

        details = await movie.get_details()

        assert details == DetailsResponse(details={"id": 27205, "title": "Inception"})

    @pytest.mark.asyncio
    async def test_account_states(self, transport_factory):
        transport = transport_factory({"/movie/27205/account_states": {"rated": False}})
        movie = MovieEndpoint(transport, 27205)

        await movie.get_account_states("session-1")

        transport.request.assert_awaited_once_with(
            "GET", "/movie/27205/account_states", {"session_id": "session-1"}
        )

    @pytest.mark.asyncio
    async def test_add_rating(self, transport_factory):
        transport = transport_factory({"/movie/27205/rating": {"status_code": 1}})
        movie = MovieEndpoint(transport, 27205)

        await movie.add_rating(8.5, session_id="session-1")

        transport.request.assert_awaited_once_with(
            "POST", "/movie/27205/rating", {"session_id": "session-1"}, {"value": 8.5}
        )

    @pytest.mark.asyncio
    async def test_remove_rating(self, transport_factory):
        transport = transport_factory({"/movie/27205/rating": {"status_code": 13}})
        movie = MovieEndpoint(transport, 27205)

        await movie.remove_rating(guest_session_id="guest")

        transport.request.assert_awaited_once_with(
            "DELETE", "/movie/27205/rating", {"guest_session_id": "guest"}
        )


class TestTVEndpoint:
    """Tests for TVEndpoint."""

    @pytest.mark.asyncio
    async def test_get_details_splits_appended(self, transport_factory):
        transport = transport_factory({"/tv/1396": SAMPLE_TV_DETAILS})
        tv = TVEndpoint(transport, 1396)

        result = await tv.get_details(append_to_response="credits,videos")

        assert result.details == {"id": 1396, "name": "Breaking Bad", "number_of_seasons": 5}
        assert set(result.appended) == {"credits", "videos"}
        assert result.appended["credits"]["cast"][0]["name"] == "Bryan Cranston"
        # Sample payload is not mutated
        assert "credits" in SAMPLE_TV_DETAILS

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,path",
        [
            ("get_content_ratings", "/tv/1396/content_ratings"),
            ("get_episode_groups", "/tv/1396/episode_groups"),
            ("get_screened_theatrically", "/tv/1396/screened_theatrically"),
            ("get_credits", "/tv/1396/credits"),
        ],
    )
    async def test_get_paths(self, method, path, transport_factory):
        transport = transport_factory({path: {}})
        tv = TVEndpoint(transport, 1396)

        await getattr(tv, method)()
        transport.request.assert_awaited_once_with("GET", path, {})

    @pytest.mark.asyncio
    async def test_resolve_then_request(self, transport_factory):
        transport = transport_factory(
            {
                "/find/tt0903747": SAMPLE_TV_FIND_RESPONSE,
                "/tv/1396/external_ids": {"imdb_id": "tt0903747"},
            }
        )
        tv = await TVEndpoint(transport).set_id(external_id="tt0903747")

        assert await tv.get_external_ids() == {"imdb_id": "tt0903747"}


class TestPersonAndCompanyEndpoints:
    """Tests for PersonEndpoint and CompanyEndpoint."""

    @pytest.mark.asyncio
    async def test_person_combined_credits(self, transport_factory):
        transport = transport_factory({"/person/6193/combined_credits": {"cast": []}})
        person = PersonEndpoint(transport, 6193)

        await person.get_combined_credits(language="de")
        transport.request.assert_awaited_once_with(
            "GET", "/person/6193/combined_credits", {"language": "de"}
        )

    @pytest.mark.asyncio
    async def test_company_by_imdb_id(self, transport_factory):
        transport = transport_factory(
            {
                "/find/co0002663": {"company_results": [{"id": 923}]},
                "/company/923/alternative_names": {"results": []},
            }
        )
        company = await CompanyEndpoint(transport).set_id(external_id="co0002663")

        await company.get_alternative_names()

        assert company.id == 923
        assert transport.request.await_args_list[-1].args[1] == "/company/923/alternative_names"


# =============================================================================
# List, Search and Find Endpoint Tests
# =============================================================================


class TestListsEndpoints:
    """Tests for list endpoints not tied to a single resource."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "endpoint_cls,method,path",
        [
            (MovieListsEndpoint, "get_latest", "/movie/latest"),
            (MovieListsEndpoint, "get_now_playing", "/movie/now_playing"),
            (MovieListsEndpoint, "get_upcoming", "/movie/upcoming"),
            (TVListsEndpoint, "get_airing_today", "/tv/airing_today"),
            (TVListsEndpoint, "get_on_the_air", "/tv/on_the_air"),
            (TVListsEndpoint, "get_top_rated", "/tv/top_rated"),
            (PersonListsEndpoint, "get_popular", "/person/popular"),
        ],
    )
    async def test_paths(self, endpoint_cls, method, path, transport_factory):
        transport = transport_factory({path: {"results": []}})

        await getattr(endpoint_cls(transport), method)(page=1)
        transport.request.assert_awaited_once_with("GET", path, {"page": 1})


class TestSearchEndpoint:
    """Tests for SearchEndpoint."""

    @pytest.mark.asyncio
    async def test_movies_with_options(self, transport_factory):
        transport = transport_factory({"/search/movie": SAMPLE_MOVIE_SEARCH_RESPONSE})

        await SearchEndpoint(transport).movies("Inception", year=2010)

        transport.request.assert_awaited_once_with(
            "GET", "/search/movie", {"year": 2010, "query": "Inception"}
        )

    @pytest.mark.asyncio
    async def test_keywords_and_collections(self, transport_factory):
        transport = transport_factory({"/search/keyword": {}, "/search/collection": {}})
        search = SearchEndpoint(transport)

        await search.keywords("heist")
        await search.collections("Dark Knight")

        paths = [c.args[1] for c in transport.request.await_args_list]
        assert paths == ["/search/keyword", "/search/collection"]

    @pytest.mark.asyncio
    async def test_query_required(self, transport_factory):
        with pytest.raises(ValueError, match="query required"):
            await SearchEndpoint(transport_factory()).multi("")


class TestFindEndpoint:
    """Tests for FindEndpoint."""

    @pytest.mark.asyncio
    async def test_find(self, transport_factory):
        transport = transport_factory({"/find/tt0903747": SAMPLE_TV_FIND_RESPONSE})

        result = await FindEndpoint(transport, "tt0903747").find_by_external_id("imdb_id")

        assert result == SAMPLE_TV_FIND_RESPONSE

    @pytest.mark.asyncio
    async def test_set_external_id(self, transport_factory):
        transport = transport_factory({"/find/81189": {"tv_results": [{"id": 1396}]}})
        find = FindEndpoint(transport).set_external_id("81189")

        await find.find_by_external_id(external_source="tvdb_id", language="en")

        transport.request.assert_awaited_once_with(
            "GET", "/find/81189", {"language": "en", "external_source": "tvdb_id"}
        )

    @pytest.mark.asyncio
    async def test_external_id_required(self, transport_factory):
        with pytest.raises(ValueError, match="External ID required"):
            await FindEndpoint(transport_factory()).find_by_external_id("imdb_id")
