"""GNews-based news provider.

Talks to the GNews v4 REST API (https://gnews.io/docs/v4). Headline
queries use ``/top-headlines`` with a category and country; everything else
uses ``/search`` with a free-text term.
"""

import httpx

from news_proxy.config import settings
from news_proxy.entities import NewsQuery, UpstreamResponse


def build_request(query: NewsQuery, api_key: str, base_url: str | None = None) -> tuple[str, dict[str, str]]:
    """Build the upstream URL and query parameters for a normalized query.

    Args:
        query: The normalized query
        api_key: GNews credential
        base_url: API root. Defaults to settings.gnews_base_url.

    Returns:
        Tuple of (url, params)
    """
    base = (base_url or settings.gnews_base_url).rstrip("/")
    params = {
        "apikey": api_key,
        "lang": query.lang,
        "max": str(query.page_size),
    }

    if query.is_headline:
        params["category"] = query.category or "general"
        params["country"] = query.country
        return f"{base}/top-headlines", params

    params["q"] = query.search_term or ""
    return f"{base}/search", params


class GNewsProvider:
    """GNews implementation of NewsProvider protocol.

    This class satisfies the NewsProvider protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        provider = GNewsProvider.create()
        upstream = await provider.fetch(query, api_key="...")
        print(upstream.status_code, upstream.text[:80])
        await provider.close()
        ```
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the GNews provider.

        Args:
            base_url: API root. Defaults to settings.gnews_base_url.
            timeout: Request timeout in seconds. Defaults to settings.upstream_timeout.
            transport: Optional httpx transport (e.g. httpx.MockTransport in tests).
        """
        self._base_url = base_url or settings.gnews_base_url
        self._timeout = timeout or settings.upstream_timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the async HTTP client.

        Returns:
            The httpx.AsyncClient instance
        """
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                transport=self._transport,
                follow_redirects=True,
            )
        return self._client

    @classmethod
    def create(cls, base_url: str | None = None) -> "GNewsProvider":
        """Factory method to create GNewsProvider with defaults.

        Args:
            base_url: API root. If None, uses settings.

        Returns:
            Configured GNewsProvider
        """
        return cls(base_url=base_url)

    @property
    def base_url(self) -> str:
        return self._base_url

    async def fetch(self, query: NewsQuery, api_key: str) -> UpstreamResponse:
        """Perform the single upstream GET for ``query``.

        The body is returned as text whatever the status code; transport
        errors (DNS, connection refused, timeouts) propagate as
        ``httpx.HTTPError``.
        """
        url, params = build_request(query, api_key, self._base_url)
        response = await self.client.get(url, params=params)
        return UpstreamResponse(status_code=response.status_code, text=response.text)

    async def close(self) -> None:
        """Close the async HTTP client.

        Should be called when shutting down the application.
        """
        if self._client is not None:
            await self._client.aclose()
            self._client = None
