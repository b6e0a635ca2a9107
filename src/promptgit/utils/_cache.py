"""Key-value cache implementations with per-read TTL.

This module provides the cache protocol used by the git status core together
with an in-memory implementation (tests, single process) and a file-backed
implementation that survives between prompt renders. Every read passes its
own TTL; entries are never invalidated explicitly.
"""

import base64
import contextlib
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

import pendulum

if TYPE_CHECKING:
    from structlog.typing import FilteringBoundLogger

type Clock = Callable[[], float]

_TIMESTAMP_SUFFIX = ".time"


def utc_timestamp() -> float:
    """Return the current UTC time as a POSIX timestamp."""
    return pendulum.now("UTC").timestamp()


@dataclass(frozen=True, slots=True)
class CacheStats:
    """Summary of a cache's contents.

    Attributes:
        total: Number of stored entries.
        size: Total size of stored values in bytes.
    """

    total: int = 0
    size: int = 0


@runtime_checkable
class Cache(Protocol):
    """Protocol for cache implementations.

    Values are strings. A read returns None on a miss, an expired entry, or
    an unreadable entry; callers cannot tell these apart.
    """

    def get(self, key: str, ttl_seconds: float) -> str | None:
        """Get a value if it was written less than ``ttl_seconds`` ago.

        Args:
            key: The cache key.
            ttl_seconds: Maximum age of the entry in seconds.

        Returns:
            The cached value, or None on a miss.
        """
        ...

    def set(self, key: str, value: str) -> bool:
        """Store a value with the current timestamp.

        Args:
            key: The cache key.
            value: The value to store.

        Returns:
            True if the value was stored, False otherwise.
        """
        ...

    def delete(self, key: str) -> bool:
        """Delete an entry.

        Args:
            key: The cache key.

        Returns:
            True if an entry was removed.
        """
        ...

    def clear(self) -> int:
        """Remove every entry.

        Returns:
            Number of entries removed.
        """
        ...

    def stats(self) -> CacheStats:
        """Return entry count and total value size."""
        ...


def _is_fresh(written_at: float, now: float, ttl_seconds: float) -> bool:
    return now - written_at < ttl_seconds


class MemoryCache:
    """In-memory cache.

    Data is not persisted. Can be used as a drop-in replacement for
    FileCache in tests; pass a fake ``clock`` to control expiry.
    """

    _entries: dict[str, tuple[str, float]]
    _clock: Clock
    _logger: "FilteringBoundLogger | None"  # noqa: UP037

    def __init__(
        self,
        *,
        clock: Clock | None = None,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> None:
        """Initialize an empty in-memory cache.

        Args:
            clock: Callable returning the current time in seconds.
            logger: Optional logger for debug-level operation logging.
        """
        self._entries = {}
        self._clock = clock if clock is not None else utc_timestamp
        self._logger = logger

    def get(self, key: str, ttl_seconds: float) -> str | None:
        entry = self._entries.get(key)
        if entry is None:
            if self._logger:
                self._logger.debug("cache_get", key=key, hit=False)
            return None

        value, written_at = entry
        fresh = _is_fresh(written_at, self._clock(), ttl_seconds)
        if self._logger:
            self._logger.debug("cache_get", key=key, hit=fresh, expired=not fresh)
        return value if fresh else None

    def set(self, key: str, value: str) -> bool:
        self._entries[key] = (value, self._clock())
        if self._logger:
            self._logger.debug("cache_set", key=key)
        return True

    def delete(self, key: str) -> bool:
        return self._entries.pop(key, None) is not None

    def clear(self) -> int:
        count = len(self._entries)
        self._entries.clear()
        if self._logger:
            self._logger.debug("cache_clear", cleared_count=count)
        return count

    def stats(self) -> CacheStats:
        return CacheStats(
            total=len(self._entries),
            size=sum(len(value.encode("utf-8")) for value, _ in self._entries.values()),
        )

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


class FileCache:
    """File-backed cache.

    Each entry is stored as two files in the cache directory: the value and a
    ``.time`` companion holding the integer write timestamp. File names are
    the url-safe base64 encoding of the key so arbitrary keys (including
    directory paths) map to flat, portable names.
    """

    _directory: Path
    _clock: Clock
    _logger: "FilteringBoundLogger | None"  # noqa: UP037

    def __init__(
        self,
        directory: str | Path,
        *,
        clock: Clock | None = None,
        logger: "FilteringBoundLogger | None" = None,  # noqa: UP037
    ) -> None:
        """Initialize a file cache rooted at ``directory``.

        The directory is created lazily on first write.

        Args:
            directory: Directory holding the cache files.
            clock: Callable returning the current time in seconds.
            logger: Optional logger for debug-level operation logging.
        """
        self._directory = Path(directory)
        self._clock = clock if clock is not None else utc_timestamp
        self._logger = logger

    @property
    def directory(self) -> Path:
        """The directory holding the cache files."""
        return self._directory

    @staticmethod
    def encode_key(key: str) -> str:
        """Encode a cache key into a file name."""
        return base64.urlsafe_b64encode(key.encode("utf-8")).decode("ascii")

    def _value_path(self, key: str) -> Path:
        return self._directory / self.encode_key(key)

    def _timestamp_path(self, key: str) -> Path:
        return self._directory / f"{self.encode_key(key)}{_TIMESTAMP_SUFFIX}"

    def get(self, key: str, ttl_seconds: float) -> str | None:
        value_path = self._value_path(key)
        timestamp_path = self._timestamp_path(key)

        try:
            written_at = int(timestamp_path.read_text(encoding="utf-8").strip())
            if not _is_fresh(written_at, self._clock(), ttl_seconds):
                if self._logger:
                    self._logger.debug("cache_get", key=key, hit=False, expired=True)
                return None
            value = value_path.read_text(encoding="utf-8")
        except FileNotFoundError:
            if self._logger:
                self._logger.debug("cache_get", key=key, hit=False)
            return None
        except (OSError, ValueError) as e:
            if self._logger:
                self._logger.debug("cache_read_failed", key=key, error=str(e))
            return None

        if self._logger:
            self._logger.debug("cache_get", key=key, hit=True)
        return value

    def set(self, key: str, value: str) -> bool:
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            _ = self._value_path(key).write_text(value, encoding="utf-8")
            _ = self._timestamp_path(key).write_text(
                str(int(self._clock())), encoding="utf-8"
            )
        except OSError as e:
            if self._logger:
                self._logger.debug("cache_write_failed", key=key, error=str(e))
            return False

        if self._logger:
            self._logger.debug("cache_set", key=key)
        return True

    def delete(self, key: str) -> bool:
        deleted = False
        for path in (self._value_path(key), self._timestamp_path(key)):
            try:
                path.unlink()
            except FileNotFoundError:
                continue
            except OSError as e:
                if self._logger:
                    self._logger.debug("cache_delete_failed", key=key, error=str(e))
                continue
            deleted = True
        return deleted

    def _value_files(self) -> list[Path]:
        try:
            return [
                path
                for path in self._directory.iterdir()
                if path.is_file() and not path.name.endswith(_TIMESTAMP_SUFFIX)
            ]
        except OSError:
            return []

    def clear(self) -> int:
        count = 0
        try:
            paths = list(self._directory.iterdir())
        except OSError:
            paths = []

        for path in paths:
            if not path.is_file():
                continue
            with contextlib.suppress(OSError):
                path.unlink()
                if not path.name.endswith(_TIMESTAMP_SUFFIX):
                    count += 1

        if self._logger:
            self._logger.debug("cache_clear", cleared_count=count)
        return count

    def stats(self) -> CacheStats:
        total = 0
        size = 0
        for path in self._value_files():
            total += 1
            with contextlib.suppress(OSError):
                size += path.stat().st_size
        return CacheStats(total=total, size=size)
