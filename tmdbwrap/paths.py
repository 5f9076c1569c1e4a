"""Request path templates for TMDb v3 endpoints.

Templates are relative to each resource's base path. ``{id}`` is the TMDb ID
of the resolved resource, ``{external_id}`` the identifier passed to /find.

API Documentation: https://developer.themoviedb.org/reference
"""

from types import MappingProxyType

FIND_BASE = "/find"
FIND_PATHS = MappingProxyType(
    {
        "find_by_external_id": "/{external_id}",
    }
)

SEARCH_BASE = "/search"
SEARCH_PATHS = MappingProxyType(
    {
        "companies": "/company",
        "collections": "/collection",
        "keywords": "/keyword",
        "movies": "/movie",
        "multi": "/multi",
        "people": "/person",
        "tv_shows": "/tv",
    }
)

MOVIE_BASE = "/movie"
MOVIE_PATHS = MappingProxyType(
    {
        "details": "/{id}",
        "account_states": "/{id}/account_states",
        "alternative_titles": "/{id}/alternative_titles",
        "changes": "/{id}/changes",
        "credits": "/{id}/credits",
        "external_ids": "/{id}/external_ids",
        "images": "/{id}/images",
        "keywords": "/{id}/keywords",
        "release_dates": "/{id}/release_dates",
        "videos": "/{id}/videos",
        "translations": "/{id}/translations",
        "recommendations": "/{id}/recommendations",
        "similar": "/{id}/similar",
        "reviews": "/{id}/reviews",
        "lists": "/{id}/lists",
        "rating": "/{id}/rating",
        # Lists not scoped to one movie
        "latest": "/latest",
        "now_playing": "/now_playing",
        "popular": "/popular",
        "top_rated": "/top_rated",
        "upcoming": "/upcoming",
    }
)

TV_BASE = "/tv"
TV_PATHS = MappingProxyType(
    {
        "details": "/{id}",
        "account_states": "/{id}/account_states",
        "alternative_titles": "/{id}/alternative_titles",
        "changes": "/{id}/changes",
        "content_ratings": "/{id}/content_ratings",
        "credits": "/{id}/credits",
        "episode_groups": "/{id}/episode_groups",
        "external_ids": "/{id}/external_ids",
        "images": "/{id}/images",
        "keywords": "/{id}/keywords",
        "recommendations": "/{id}/recommendations",
        "reviews": "/{id}/reviews",
        "screened_theatrically": "/{id}/screened_theatrically",
        "similar": "/{id}/similar",
        "translations": "/{id}/translations",
        "videos": "/{id}/videos",
        "rating": "/{id}/rating",
        # Lists not scoped to one show
        "latest": "/latest",
        "airing_today": "/airing_today",
        "on_the_air": "/on_the_air",
        "popular": "/popular",
        "top_rated": "/top_rated",
    }
)

PERSON_BASE = "/person"
PERSON_PATHS = MappingProxyType(
    {
        "details": "/{id}",
        "changes": "/{id}/changes",
        "movie_credits": "/{id}/movie_credits",
        "tv_credits": "/{id}/tv_credits",
        "combined_credits": "/{id}/combined_credits",
        "external_ids": "/{id}/external_ids",
        "images": "/{id}/images",
        "tagged_images": "/{id}/tagged_images",
        "translations": "/{id}/translations",
        "latest": "/latest",
        "popular": "/popular",
    }
)

COMPANY_BASE = "/company"
COMPANY_PATHS = MappingProxyType(
    {
        "details": "/{id}",
        "alternative_names": "/{id}/alternative_names",
        "images": "/{id}/images",
    }
)
