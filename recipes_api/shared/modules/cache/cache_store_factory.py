"""
Cache Store Factory

Creates the CacheStore implementation named by configuration, so the
services never depend on a concrete cache backend.
"""
import os
from typing import Mapping, Optional

from recipes_api.shared.modules.cache.cache_store import CacheStore
from recipes_api.shared.modules.cache.memory_cache_store import MemoryCacheStore
from recipes_api.shared.modules.cache.redis_cache_store import RedisCacheStore


def create_cache_store(config: Optional[Mapping] = None) -> CacheStore:
    """
    Factory function to create the appropriate CacheStore instance.

    The implementation is chosen by CACHE_PROVIDER, read from the given
    config mapping first and the environment second.

    Returns:
        CacheStore: A concrete implementation of the CacheStore.
    """
    config = config or {}
    provider = str(config.get("CACHE_PROVIDER") or os.environ.get("CACHE_PROVIDER", "redis")).lower()

    if provider == "memory":
        return MemoryCacheStore()
    if provider == "redis":
        return RedisCacheStore(
            host=config.get("REDIS_HOST"),
            port=config.get("REDIS_PORT"),
            db=int(config.get("REDIS_DB", 0)),
            timeout=float(config.get("CACHE_TIMEOUT_SECONDS", 0.5)),
        )
    raise ValueError(f"Unknown cache provider: {provider}")
