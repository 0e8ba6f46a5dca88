"""
Cache Store Interface

Abstract key-value cache used by the recipe service. Values are strings,
entries never expire, and there is no compare-and-swap: a key is either
overwritten wholesale or deleted.
"""
from abc import ABC, abstractmethod
from typing import Optional


class CacheStore(ABC):

    @abstractmethod
    def get(self, cache_key: str) -> Optional[str]:
        """
        Return the cached value, or None on a miss.

        Raises:
            CacheUnavailable: the backend could not be reached.
        """
        pass

    @abstractmethod
    def set(self, cache_key: str, value: str) -> None:
        """
        Unconditionally store value under cache_key, with no expiry.
        """
        pass

    @abstractmethod
    def delete(self, cache_key: str) -> None:
        """
        Remove cache_key. Deleting an absent key is not an error.
        """
        pass
