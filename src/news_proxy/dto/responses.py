"""Response DTOs for API endpoints."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ArticleSource(BaseModel):
    """Publisher of an article."""

    name: str | None = None
    url: str | None = None


class ArticleItem(BaseModel):
    """Single article, projected from the upstream schema."""

    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    description: str | None = None
    url: str | None = None
    image: str | None = None
    published_at: str | None = Field(None, alias="publishedAt")
    source: ArticleSource | None = None

    @classmethod
    def from_upstream(cls, item: Any) -> "ArticleItem":
        """Project one upstream article, ignoring fields we do not expose."""
        if not isinstance(item, dict):
            return cls()

        source = item.get("source")
        if isinstance(source, dict):
            source_item = ArticleSource(name=_text(source.get("name")), url=_text(source.get("url")))
        elif isinstance(source, str):
            source_item = ArticleSource(name=source)
        else:
            source_item = None

        return cls(
            title=_text(item.get("title")),
            description=_text(item.get("description")),
            url=_text(item.get("url")),
            image=_text(item.get("image")),
            publishedAt=_text(item.get("publishedAt")),
            source=source_item,
        )


class ArticlesResponse(BaseModel):
    """Successful response body (also the cached payload)."""

    articles: list[ArticleItem] = Field(default_factory=list)

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class ErrorResponse(BaseModel):
    """Generic error envelope."""

    error: str = Field(..., description="Human-readable error message")
    details: Any | None = Field(None, description="Exception text or upstream details")


class UpstreamErrorResponse(ErrorResponse):
    """Error envelope for non-2xx upstream replies."""

    status: int = Field(..., description="Status code returned by the upstream API")


class HealthCheckResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field(..., description="Health status: 'healthy' or 'unhealthy'")
    cache_healthy: bool = Field(..., description="Whether the cache backend is usable")
    cache_backend: str = Field(..., description="Configured cache backend")


def _text(value: Any) -> str | None:
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)
