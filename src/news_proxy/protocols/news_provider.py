"""Upstream news provider protocol."""

from typing import Protocol, runtime_checkable

from news_proxy.entities import NewsQuery, UpstreamResponse


@runtime_checkable
class NewsProvider(Protocol):
    """Protocol for the upstream news API.

    The provider performs exactly one HTTP call per ``fetch`` and returns
    the reply verbatim; interpreting status codes and bodies is the
    service's job.
    """

    async def fetch(self, query: NewsQuery, api_key: str) -> UpstreamResponse:
        """Fetch articles for a normalized query.

        Args:
            query: The normalized query
            api_key: Upstream credential

        Returns:
            UpstreamResponse with status code and body text

        Raises:
            httpx.HTTPError: On transport failures
        """
        ...

    async def close(self) -> None:
        """Release any network resources."""
        ...
