"""
Memory Cache Store

In-process CacheStore for local development and tests. Nothing is shared
between processes, so it is only correct for a single worker.
"""
import threading
from typing import Dict, Optional

from recipes_api.shared.modules.cache.cache_store import CacheStore


class MemoryCacheStore(CacheStore):

    def __init__(self):
        self._entries: Dict[str, str] = {}
        self._lock = threading.Lock()

    def get(self, cache_key: str) -> Optional[str]:
        with self._lock:
            return self._entries.get(cache_key)

    def set(self, cache_key: str, value: str) -> None:
        with self._lock:
            self._entries[cache_key] = value

    def delete(self, cache_key: str) -> None:
        with self._lock:
            self._entries.pop(cache_key, None)
