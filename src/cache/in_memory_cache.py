"""In-memory cache implementation."""

import math
import threading
import time
from typing import Callable, Optional

from cachetools import TTLCache

from cache.cache import Cache, V
from models.config import InMemoryCacheConfig
from log import get_logger

logger = get_logger("cache.in_memory_cache")


class InMemoryCache(Cache[V]):
    """In-memory cache with a fixed time to live.

    Every entry expires `ttl` seconds after it was stored, regardless of how
    often it is read. An expired entry is never served: reading it is a miss.
    When `max_entries` is configured and the cache is full, expired entries
    are dropped first, then the least recently used one. The cache lives only
    as long as the process and all operations are guarded by a lock, so one
    instance can be shared by all requests handled by the process.
    """

    def __init__(
        self,
        config: InMemoryCacheConfig,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """Create a new instance of in-memory cache.

        Parameters:
            config (InMemoryCacheConfig): Time to live and optional size limit.
            clock (Callable[[], float]): Source of the current time in seconds;
            monotonic clock by default.
        """
        self.cache_config = config
        maxsize = math.inf if config.max_entries is None else config.max_entries
        self._cache: TTLCache[str, V] = TTLCache(
            maxsize=maxsize, ttl=config.ttl, timer=clock
        )
        # TTLCache is not thread-safe
        self._lock = threading.Lock()

    @property
    def ttl(self) -> int:
        """Return the time to live of new entries in seconds."""
        return self.cache_config.ttl

    def get(self, key: str) -> Optional[V]:
        """Get the value associated with the given key.

        Parameters:
            key: Cache key.

        Returns:
            The stored value, or None when the key is unknown or expired.
        """
        with self._lock:
            return self._cache.get(key)

    def set(self, key: str, value: V) -> None:
        """Set the value associated with the given key.

        Parameters:
            key: Cache key.
            value: Value to store.
        """
        with self._lock:
            self._cache[key] = value

    def delete(self, key: str) -> bool:
        """Delete the entry stored under the given key.

        Parameters:
            key: Cache key.

        Returns:
            bool: True if a live entry was deleted, False otherwise.
        """
        with self._lock:
            self._cache.expire()
            if key not in self._cache:
                return False
            del self._cache[key]
            return True

    def clear(self) -> None:
        """Remove all entries from the cache."""
        with self._lock:
            self._cache.clear()

    def __len__(self) -> int:
        """Return the number of entries that have not expired yet."""
        with self._lock:
            self._cache.expire()
            return len(self._cache)

    def ready(self) -> bool:
        """Check if the cache is ready.

        Returns:
            True (`bool`): Always `True` for this in-memory cache implementation.
        """
        return True
