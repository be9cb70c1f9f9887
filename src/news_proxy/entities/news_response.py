"""Response entities passed between the provider, service and handlers."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class UpstreamResponse:
    """Raw upstream reply: status code and the full body as text."""

    status_code: int
    text: str

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass(frozen=True)
class NewsResponse:
    """Transport-neutral response produced by the news service.

    Attributes:
        status_code: HTTP status code
        body: Serialized JSON body
        headers: Response headers
        cache_status: "hit", "miss" or None when the cache was not consulted
    """

    status_code: int
    body: str
    headers: dict[str, str] = field(default_factory=dict)
    cache_status: str | None = None
