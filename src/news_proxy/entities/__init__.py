"""Domain entities for internal representation.

These are pure dataclasses (frozen) used internally by services
and repositories. They are NOT used for API contracts - use DTOs
from the dto package for that.
"""

from .cache_result import CacheLookup, CacheWrite
from .news_query import CATEGORIES, NewsQuery
from .news_response import NewsResponse, UpstreamResponse

__all__ = [
    "CATEGORIES",
    "CacheLookup",
    "CacheWrite",
    "NewsQuery",
    "NewsResponse",
    "UpstreamResponse",
]
