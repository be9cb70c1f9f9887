#!/usr/bin/env python3
"""
Demo script for the news proxy.

Sends the same queries twice through the service to show the cache
short-circuiting the second upstream call. Requires GNEWS_API_KEY.
"""

import asyncio
import tempfile
import time

from news_proxy import FileCacheRepository, GNewsProvider, NewsQueryParams, NewsService, build_query, get_api_key


def print_section(title: str) -> None:
    """Print a section header."""
    print("\n" + "=" * 70)
    print(f"  {title}")
    print("=" * 70)


def demo_normalization() -> None:
    """Show how raw parameters are normalized."""
    print_section("Query Normalization")

    samples = [
        {"q": "salud"},
        {"q": "  Deportes "},
        {"q": "bitcoin", "pageSize": "5"},
        {"q": "", "pageSize": "500"},
        {"q": "technology", "pageSize": "abc", "lang": "en", "country": "us"},
    ]

    for raw in samples:
        query = build_query(
            q=raw.get("q"),
            page_size=raw.get("pageSize"),
            lang=raw.get("lang"),
            country=raw.get("country"),
        )
        kind = f"headlines/{query.category}" if query.is_headline else f"search/{query.search_term}"
        print(f"  {raw!s:<70} -> {kind:<24} key={query.cache_key}")


async def demo_cache(api_key: str) -> None:
    """Demonstrate cache hits against the live API."""
    print_section("Cache Behaviour")

    with tempfile.TemporaryDirectory() as cache_dir:
        service = NewsService.create(
            cache_store=FileCacheRepository.create(directory=cache_dir),
            provider=GNewsProvider.create(),
        )

        for params in [NewsQueryParams(q="salud"), NewsQueryParams(q="bitcoin", pageSize="5")]:
            for attempt in (1, 2):
                start = time.time()
                response = await service.handle(params, api_key)
                elapsed_ms = (time.time() - start) * 1000
                print(
                    f"  q={params.q!r:<10} attempt {attempt}: "
                    f"status={response.status_code} cache={response.cache_status} ({elapsed_ms:.1f}ms)"
                )

        await service.close()


def main() -> None:
    demo_normalization()

    api_key = get_api_key()
    if not api_key:
        print("\n  GNEWS_API_KEY is not set; skipping live cache demo.")
        return

    asyncio.run(demo_cache(api_key))


if __name__ == "__main__":
    main()
