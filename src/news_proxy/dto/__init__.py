"""Data Transfer Objects for API contracts.

These Pydantic models define the external API contract: the incoming
query parameters, the projected article list and the error envelope.

Internal domain logic should use entities from the entities package.
"""

from .requests import NewsQueryParams
from .responses import (
    ArticleItem,
    ArticleSource,
    ArticlesResponse,
    ErrorResponse,
    HealthCheckResponse,
    UpstreamErrorResponse,
)

__all__ = [
    "NewsQueryParams",
    "ArticleItem",
    "ArticleSource",
    "ArticlesResponse",
    "ErrorResponse",
    "UpstreamErrorResponse",
    "HealthCheckResponse",
]
