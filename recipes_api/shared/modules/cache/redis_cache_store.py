"""
Redis Cache Store

Concrete CacheStore backed by Redis. Every redis-py failure, timeouts
included, is raised as CacheUnavailable so callers only deal with one
error type.
"""
import logging
import os
from typing import Optional

import redis

from recipes_api.shared.errors import CacheUnavailable
from recipes_api.shared.modules.cache.cache_store import CacheStore


class RedisCacheStore(CacheStore):
    """
    A cache store talking to a single Redis database.
    """

    def __init__(
        self,
        host: Optional[str] = None,
        port: Optional[int] = None,
        db: int = 0,
        timeout: float = 0.5,
        client: Optional[redis.StrictRedis] = None,
    ):
        """
        Initializes the Redis client. Connections are opened lazily by redis-py.

        Args:
            host (str): The Redis server hostname.
            port (int): The Redis server port.
            db (int): The Redis database number.
            timeout (float): Per-call socket and connect timeout in seconds.
            client: A ready-made client, used instead of building one.
        """
        self.host = host or os.environ.get("REDIS_HOST", "localhost")
        self.port = port or int(os.environ.get("REDIS_PORT", 6379))
        self.logger = logging.getLogger(self.__class__.__name__)
        self.redis = client or redis.StrictRedis(
            host=self.host,
            port=self.port,
            db=db,
            socket_timeout=timeout,
            socket_connect_timeout=timeout,
            decode_responses=True,
        )

    def get(self, cache_key: str) -> Optional[str]:
        try:
            return self.redis.get(cache_key)
        except redis.exceptions.RedisError as e:
            raise CacheUnavailable(f"Redis GET {cache_key} failed: {e}") from e
        except UnicodeDecodeError as e:
            # decode_responses: a value that is not UTF-8 is unreadable, not a request failure
            raise CacheUnavailable(f"Redis GET {cache_key} returned undecodable data: {e}") from e

    def set(self, cache_key: str, value: str) -> None:
        try:
            self.redis.set(cache_key, value)
        except redis.exceptions.RedisError as e:
            raise CacheUnavailable(f"Redis SET {cache_key} failed: {e}") from e

    def delete(self, cache_key: str) -> None:
        try:
            self.redis.delete(cache_key)
        except redis.exceptions.RedisError as e:
            raise CacheUnavailable(f"Redis DEL {cache_key} failed: {e}") from e
