"""Local disk implementation of CacheStore.

One JSON file per cache key under a dedicated directory. The entry's age is
the file's modification time, so the payload carries no timestamp field.

Writes go to a temporary file in the same directory and are moved into
place with ``os.replace``, which is atomic on POSIX and Windows. Readers
therefore see either the previous entry or the new one, never a partial
file. Concurrent writers for the same key simply race; the last rename wins.
"""

import json
import os
import tempfile
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any

from news_proxy.config import settings
from news_proxy.entities import CacheLookup, CacheWrite
from news_proxy.logging_config import get_logger

logger = get_logger(__name__)


class FileCacheRepository:
    """Disk-backed cache store.

    This class satisfies the CacheStore protocol through structural
    typing - no explicit inheritance needed.

    Example:
        ```python
        store = FileCacheRepository.create(directory="/tmp/news-cache")
        store.set("health_12", {"articles": []})
        lookup = store.get("health_12", ttl=300)
        ```
    """

    SUFFIX = ".json"

    def __init__(
        self,
        directory: str | Path | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the file cache repository.

        Args:
            directory: Cache directory. Created lazily on first write.
            clock: Time source returning Unix seconds (overridable in tests).
        """
        self._directory = Path(directory or settings.cache_dir)
        self._clock = clock

    @classmethod
    def create(cls, directory: str | Path | None = None) -> "FileCacheRepository":
        """Factory method to create FileCacheRepository with defaults.

        Args:
            directory: Cache directory. If None, uses settings.

        Returns:
            Configured FileCacheRepository
        """
        return cls(directory=directory)

    def _path(self, key: str) -> Path:
        return self._directory / f"{key}{self.SUFFIX}"

    def get(self, key: str, ttl: int) -> CacheLookup:
        """Read an entry, deleting it when its mtime is older than ``ttl``."""
        path = self._path(key)
        try:
            age = self._clock() - path.stat().st_mtime
            if age > ttl:
                self.delete(key)
                return CacheLookup.miss("expired")
            payload = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return CacheLookup.miss("absent")
        except (OSError, ValueError) as e:
            logger.warning("cache_read_failed", key=key, error=str(e))
            return CacheLookup.miss(f"error: {e}")

        if not isinstance(payload, dict):
            return CacheLookup.miss("error: payload is not an object")

        return CacheLookup.found(payload, age)

    def set(self, key: str, payload: dict[str, Any]) -> CacheWrite:
        """Write an entry through a temp file and an atomic rename."""
        tmp_name: str | None = None
        try:
            data = json.dumps(payload, ensure_ascii=False)
            self._directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self._directory, prefix=f".{key}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(data)
            os.replace(tmp_name, self._path(key))
            tmp_name = None
        except (OSError, TypeError, ValueError) as e:
            logger.warning("cache_write_failed", key=key, error=str(e))
            return CacheWrite.failed(str(e))
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass

        return CacheWrite.stored()

    def delete(self, key: str) -> bool:
        try:
            self._path(key).unlink()
            return True
        except OSError:
            return False

    def clear(self) -> int:
        """Remove every cache file in the directory."""
        count = 0
        try:
            paths = list(self._directory.glob(f"*{self.SUFFIX}"))
        except OSError:
            return 0
        for path in paths:
            try:
                path.unlink()
                count += 1
            except OSError:
                continue
        return count

    def health_check(self) -> bool:
        """Check the directory exists (or can be created) and is writable."""
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            return os.access(self._directory, os.W_OK)
        except OSError:
            return False

    @property
    def directory(self) -> Path:
        """Get the cache directory."""
        return self._directory
