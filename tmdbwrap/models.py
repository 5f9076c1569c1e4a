"""Data models shared by the resolver and the endpoints."""

from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Locator(BaseModel):
    """Caller-supplied description of the resource to resolve.

    Any combination of fields may be given. Precedence when resolving is
    ``canonical_id`` > ``external_id`` > ``query``. Empty strings are treated
    as absent.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    canonical_id: int | None = Field(default=None, alias="id")
    external_id: str | None = None
    query: str | None = None

    @field_validator("external_id", "query")
    @classmethod
    def blank_to_none(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        return v or None

    @property
    def is_empty(self) -> bool:
        """True when no field can be used for resolution."""
        return self.canonical_id is None and self.external_id is None and self.query is None


class SearchHit(BaseModel):
    """A single record from a search or find response.

    Only ``id`` is needed for resolution; every other field is kept as-is.
    """

    model_config = ConfigDict(extra="allow")

    id: int


class SearchResultSet(BaseModel):
    """Response of a /search request."""

    model_config = ConfigDict(extra="allow")

    page: int = 1
    total_results: int | None = None
    total_pages: int = 0
    results: list[SearchHit] = Field(default_factory=list)

    @property
    def first(self) -> SearchHit | None:
        """Top-ranked result, in the API's own relevance order."""
        return self.results[0] if self.results else None


@dataclass
class DetailsResponse:
    """Details of a resource with ``append_to_response`` sections split out.

    Attributes:
        details: The resource details without appended sections
        appended: Appended sub-responses keyed by their name (e.g. "credits")
    """

    details: dict[str, Any]
    appended: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_response(
        cls, response: dict[str, Any], append_to_response: str | None = None
    ) -> "DetailsResponse":
        details = dict(response)
        appended: dict[str, Any] = {}
        for name in (append_to_response or "").split(","):
            name = name.strip()
            if name and name in details:
                appended[name] = details.pop(name)
        return cls(details=details, appended=appended)
