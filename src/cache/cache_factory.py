"""Cache factory class."""

from typing import Any

import constants
from cache.cache import Cache
from cache.in_memory_cache import InMemoryCache
from cache.noop_cache import NoopCache
from log import get_logger
from models.config import CacheConfiguration

logger = get_logger("cache.cache_factory")


class CacheFactory:
    """Cache factory class."""

    @staticmethod
    def cache(config: CacheConfiguration) -> Cache[Any]:
        """Create an instance of Cache based on loaded configuration.

        Parameters:
            config (CacheConfiguration): Cache type and backend settings.

        Returns:
            An instance of `Cache` (either `NoopCache` or `InMemoryCache`).

        Raises:
            ValueError: If the configured cache type is not supported.
        """
        logger.info("Creating cache instance of type %s", config.type)
        match config.type:
            case constants.CACHE_TYPE_NOOP:
                return NoopCache()
            case constants.CACHE_TYPE_MEMORY:
                return InMemoryCache(config.memory)
            case _:
                raise ValueError(
                    f"Invalid cache type: {config.type}. "
                    f"Use '{constants.CACHE_TYPE_NOOP}' or "
                    f"'{constants.CACHE_TYPE_MEMORY}' options."
                )
