"""Protocol interfaces for swappable implementations.

This package contains protocol definitions using structural typing.
Protocols enable:
- Easy swapping of implementations (disk -> memory -> Redis)
- Unit testing with fake implementations
- Clear separation of concerns

Usage:
    ```python
    from news_proxy.protocols import CacheStore, NewsProvider

    # Type hints work with any implementation
    store: CacheStore = FileCacheRepository.create()  # works
    store: CacheStore = MemoryCacheRepository()       # also works
    ```
"""

from .cache_store import CacheStore
from .news_provider import NewsProvider

__all__ = [
    "CacheStore",
    "NewsProvider",
]
