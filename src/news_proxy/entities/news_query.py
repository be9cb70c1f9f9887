"""News query domain entity."""

from dataclasses import dataclass
from urllib.parse import quote

# Categories supported by the GNews top-headlines endpoint
CATEGORIES = frozenset(
    {
        "business",
        "entertainment",
        "general",
        "health",
        "science",
        "sports",
        "technology",
    }
)

DEFAULT_CATEGORY = "general"


@dataclass(frozen=True)
class NewsQuery:
    """A normalized news query.

    Built by ``services.query_normalizer.build_query``; every field except
    ``term`` is already trimmed, lower-cased and bounded.

    Attributes:
        topic: Canonical category id, free-text term, or "" for general headlines
        lang: Two-letter language code
        country: Two-letter country code
        page_size: Number of articles requested upstream
        default_lang: Language that is implied by the cache key
        default_country: Country that is implied by the cache key
        term: Trimmed topic with its original case, sent to /search
    """

    topic: str
    lang: str
    country: str
    page_size: int
    default_lang: str = "es"
    default_country: str = "ar"
    term: str = ""

    @property
    def is_headline(self) -> bool:
        """Whether this query goes to /top-headlines instead of /search."""
        return self.topic == "" or self.topic in CATEGORIES

    @property
    def category(self) -> str | None:
        """Headline category, or None for search queries."""
        if not self.is_headline:
            return None
        return self.topic or DEFAULT_CATEGORY

    @property
    def search_term(self) -> str | None:
        """Free-text term as the user typed it, or None for headline queries.

        GNews operators (AND, OR, NOT) are case-sensitive, so the original
        case is kept; classification and the cache key use ``topic``.
        """
        if self.is_headline:
            return None
        return self.term or self.topic

    @property
    def cache_key(self) -> str:
        """URL-safe cache key, e.g. ``health_12`` or ``bitcoin_5``.

        Language and country only become part of the key when they differ
        from the defaults, so overridden requests never share entries with
        default ones.
        """
        raw = f"{self.topic or DEFAULT_CATEGORY}_{self.page_size}"
        if self.lang != self.default_lang or self.country != self.default_country:
            raw = f"{raw}_{self.lang}_{self.country}"
        return quote(raw, safe="")
