"""Cache operation results.

Cache stores never raise on I/O failures. A failed read is reported as a
miss and a failed write as an unsuccessful ``CacheWrite``, so the caller
decides what to do without wrapping every call in ``try``.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class CacheLookup:
    """Outcome of a cache read.

    Attributes:
        hit: True when a fresh entry was found
        payload: The stored JSON payload (only set on hit)
        age: Entry age in seconds at read time (only set on hit)
        reason: Why the read missed ("absent", "expired", "error: ...")
    """

    hit: bool
    payload: dict[str, Any] | None = None
    age: float | None = None
    reason: str | None = None

    @classmethod
    def found(cls, payload: dict[str, Any], age: float) -> "CacheLookup":
        return cls(hit=True, payload=payload, age=age)

    @classmethod
    def miss(cls, reason: str = "absent") -> "CacheLookup":
        return cls(hit=False, reason=reason)


@dataclass(frozen=True)
class CacheWrite:
    """Outcome of a cache write."""

    ok: bool
    error: str | None = None

    @classmethod
    def stored(cls) -> "CacheWrite":
        return cls(ok=True)

    @classmethod
    def failed(cls, error: str) -> "CacheWrite":
        return cls(ok=False, error=error)
