"""Request DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class NewsQueryParams(BaseModel):
    """Raw query string parameters of the news endpoint.

    Everything is kept as text: malformed values (a non-numeric
    ``pageSize``, say) fall back to defaults during normalization instead
    of failing validation.
    """

    model_config = ConfigDict(populate_by_name=True)

    q: str = Field("", description="Category id, localized alias, or free-text term")
    page_size: str | int | None = Field(None, alias="pageSize", description="Articles per page (default 12, max 50)")
    country: str | None = Field(None, description="Two-letter country code (default 'ar')")
    lang: str | None = Field(None, description="Two-letter language code (default 'es')")

    @classmethod
    def from_mapping(cls, params: dict | None) -> "NewsQueryParams":
        """Build from a raw query-string mapping (e.g. a serverless event)."""
        params = params or {}
        return cls(
            q=params.get("q") or "",
            pageSize=params.get("pageSize"),
            country=params.get("country"),
            lang=params.get("lang"),
        )
