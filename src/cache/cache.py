"""Abstract class that is parent for all cache implementations."""

from abc import ABC, abstractmethod
from typing import Generic, Optional, TypeVar

V = TypeVar("V")


class Cache(ABC, Generic[V]):
    """Abstract class that is parent for all cache implementations.

    Cache entries are identified by a plain string key. The service keeps two
    independent instances: the response cache keyed by the serialized
    conversation and the search cache keyed by the literal search query.
    Values are never shared between the two instances.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[V]:
        """Abstract method to retrieve a value from the cache.

        Parameters:
            key (str): Cache key.

        Returns:
            Optional[V]: The cached value, or None when the key is absent or
            the entry has expired.
        """

    @abstractmethod
    def set(self, key: str, value: V) -> None:
        """Abstract method to store a value in the cache.

        An existing entry for the same key is replaced and its time to live
        starts again.

        Parameters:
            key (str): Cache key.
            value (V): Value to store.
        """

    @abstractmethod
    def delete(self, key: str) -> bool:
        """Delete the entry stored under the given key.

        Parameters:
            key (str): Cache key.

        Returns:
            `True` if an entry was deleted, `False` if no key was found.
        """

    @abstractmethod
    def clear(self) -> None:
        """Remove all entries from the cache."""

    @abstractmethod
    def __len__(self) -> int:
        """Return the number of entries that have not expired yet."""

    @abstractmethod
    def ready(self) -> bool:
        """Check if the cache is ready.

        Returns:
            True if the cache is ready, False otherwise.
        """
