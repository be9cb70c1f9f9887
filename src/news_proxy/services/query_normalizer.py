"""Query normalization.

Turns raw query-string values into a ``NewsQuery``: the topic is trimmed,
lower-cased and resolved through the alias table; page size, language and
country fall back to defaults when missing or malformed.
"""

import re

from news_proxy.config import settings
from news_proxy.entities import NewsQuery

# Localized category names -> canonical GNews category ids
CATEGORY_ALIASES: dict[str, str] = {
    "negocios": "business",
    "economia": "business",
    "economía": "business",
    "finanzas": "business",
    "entretenimiento": "entertainment",
    "espectaculos": "entertainment",
    "espectáculos": "entertainment",
    "generales": "general",
    "portada": "general",
    "salud": "health",
    "ciencia": "science",
    "deportes": "sports",
    "tecnologia": "technology",
    "tecnología": "technology",
}


def normalize_topic(raw: str | None) -> str:
    """Trim, lower-case and resolve aliases.

    Only exact alias matches are substituted; any other term is returned
    as-is so it can be searched for.

    Example:
        >>> normalize_topic("  Salud ")
        'health'
        >>> normalize_topic("Bitcoin")
        'bitcoin'
    """
    topic = (raw or "").strip().lower()
    return CATEGORY_ALIASES.get(topic, topic)


def parse_page_size(
    raw: str | int | None,
    default: int | None = None,
    maximum: int | None = None,
) -> int:
    """Parse and clamp the page size.

    Args:
        raw: Raw value from the query string
        default: Used when ``raw`` is missing or not an integer. Defaults to settings.
        maximum: Upper bound. Defaults to settings.

    Returns:
        An integer in ``1..maximum``
    """
    default = default or settings.default_page_size
    maximum = maximum or settings.max_page_size

    if isinstance(raw, int) and not isinstance(raw, bool):
        value = raw
    else:
        try:
            value = int(str(raw).strip())
        except (TypeError, ValueError):
            value = default

    return max(1, min(value, maximum))


_CODE = re.compile(r"[a-z]{2}")


def _code(raw: str | None, default: str) -> str:
    """Two-letter lower-case code, or ``default`` for anything else."""
    code = (raw or "").strip().lower()
    return code if _CODE.fullmatch(code) else default


def build_query(
    q: str | None = None,
    page_size: str | int | None = None,
    lang: str | None = None,
    country: str | None = None,
) -> NewsQuery:
    """Build a normalized query from raw request values.

    Example:
        ```python
        query = build_query(q="salud")
        query.category   # "health"
        query.cache_key  # "health_12"
        ```
    """
    return NewsQuery(
        topic=normalize_topic(q),
        term=(q or "").strip(),
        lang=_code(lang, settings.default_lang),
        country=_code(country, settings.default_country),
        page_size=parse_page_size(page_size),
        default_lang=settings.default_lang,
        default_country=settings.default_country,
    )
