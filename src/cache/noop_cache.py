"""No-operation cache implementation."""

from typing import Optional

from cache.cache import Cache, V
from log import get_logger

logger = get_logger("cache.noop_cache")


class NoopCache(Cache[V]):
    """No-operation cache implementation.

    Used when caching is disabled in configuration: values are accepted and
    discarded, so every lookup is a miss.
    """

    def __init__(self) -> None:
        """Create a new instance of no-op cache."""
        logger.info("Caching is disabled")

    def get(self, key: str) -> Optional[V]:
        """Get the value associated with the given key.

        Parameters:
            key: Cache key.

        Returns:
            None in all cases.
        """
        return None

    def set(self, key: str, value: V) -> None:
        """Accept a value without storing it.

        Parameters:
            key: Cache key.
            value: Value that would be stored.
        """

    def delete(self, key: str) -> bool:
        """Delete the entry for the given key.

        Parameters:
            key: Cache key.

        Returns:
            bool: False in all cases.
        """
        return False

    def clear(self) -> None:
        """Nothing to clear."""

    def __len__(self) -> int:
        """Return zero; nothing is ever stored."""
        return 0

    def ready(self) -> bool:
        """Check if the cache is ready.

        Returns:
            True in all cases.
        """
        return True
