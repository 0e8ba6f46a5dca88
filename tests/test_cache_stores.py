# tests/test_cache_stores.py
import fakeredis
import pytest

from recipes_api.shared.errors import CacheUnavailable
from recipes_api.shared.modules.cache.cache_keys import RECIPES_CACHE_KEY
from recipes_api.shared.modules.cache.cache_store_factory import create_cache_store
from recipes_api.shared.modules.cache.memory_cache_store import MemoryCacheStore
from recipes_api.shared.modules.cache.redis_cache_store import RedisCacheStore


@pytest.fixture(params=["memory", "redis"])
def any_cache(request, cache, redis_cache):
    return cache if request.param == "memory" else redis_cache


def test_get_missing_key_is_a_miss(any_cache):
    assert any_cache.get(RECIPES_CACHE_KEY) is None


def test_set_then_get_returns_value(any_cache):
    any_cache.set(RECIPES_CACHE_KEY, '[{"name": "Pizza"}]')
    assert any_cache.get(RECIPES_CACHE_KEY) == '[{"name": "Pizza"}]'


def test_set_overwrites_previous_value(any_cache):
    any_cache.set(RECIPES_CACHE_KEY, "old")
    any_cache.set(RECIPES_CACHE_KEY, "new")
    assert any_cache.get(RECIPES_CACHE_KEY) == "new"


def test_delete_is_idempotent(any_cache):
    any_cache.set(RECIPES_CACHE_KEY, "value")
    any_cache.delete(RECIPES_CACHE_KEY)
    any_cache.delete(RECIPES_CACHE_KEY)
    assert any_cache.get(RECIPES_CACHE_KEY) is None


def test_delete_absent_key_does_not_raise(any_cache):
    any_cache.delete("never-set")
    assert any_cache.get("never-set") is None


def test_redis_entries_have_no_expiry():
    client = fakeredis.FakeStrictRedis(server=fakeredis.FakeServer(), decode_responses=True)
    store = RedisCacheStore(client=client)
    store.set(RECIPES_CACHE_KEY, "value")
    # -1: key exists without a TTL
    assert client.ttl(RECIPES_CACHE_KEY) == -1


def test_redis_undecodable_value_raises_cache_unavailable():
    server = fakeredis.FakeServer()
    fakeredis.FakeStrictRedis(server=server).set(RECIPES_CACHE_KEY, b"\xff\xfe")
    store = RedisCacheStore(client=fakeredis.FakeStrictRedis(server=server, decode_responses=True))

    with pytest.raises(CacheUnavailable) as exc_info:
        store.get(RECIPES_CACHE_KEY)
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


def test_redis_connection_failure_raises_cache_unavailable():
    server = fakeredis.FakeServer()
    server.connected = False
    store = RedisCacheStore(client=fakeredis.FakeStrictRedis(server=server, decode_responses=True))

    with pytest.raises(CacheUnavailable):
        store.get(RECIPES_CACHE_KEY)
    with pytest.raises(CacheUnavailable):
        store.set(RECIPES_CACHE_KEY, "value")
    with pytest.raises(CacheUnavailable):
        store.delete(RECIPES_CACHE_KEY)


def test_factory_builds_memory_store():
    assert isinstance(create_cache_store({"CACHE_PROVIDER": "memory"}), MemoryCacheStore)


def test_factory_builds_redis_store_from_config():
    store = create_cache_store({
        "CACHE_PROVIDER": "redis",
        "REDIS_HOST": "cache.internal",
        "REDIS_PORT": 6380,
        "CACHE_TIMEOUT_SECONDS": 0.25,
    })
    assert isinstance(store, RedisCacheStore)
    assert store.host == "cache.internal"
    assert store.port == 6380


def test_factory_rejects_unknown_provider():
    with pytest.raises(ValueError):
        create_cache_store({"CACHE_PROVIDER": "memcached"})
