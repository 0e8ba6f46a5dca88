# tests/conftest.py
import fakeredis
import mongomock
import pytest
from flask import Flask
from flask.testing import FlaskClient

from recipes_api.backend.app import create_app
from recipes_api.backend.modules.recipe.models.recipe_model import RecipeModel
from recipes_api.backend.modules.recipe.services.recipe_service import RecipeService
from recipes_api.shared.modules.cache.memory_cache_store import MemoryCacheStore
from recipes_api.shared.modules.cache.redis_cache_store import RedisCacheStore


@pytest.fixture
def collection():
    """
    A fresh in-memory Mongo collection per test.
    """
    return mongomock.MongoClient().recipes_test.recipes


@pytest.fixture
def recipe_model(collection) -> RecipeModel:
    return RecipeModel(collection)


@pytest.fixture
def cache() -> MemoryCacheStore:
    return MemoryCacheStore()


@pytest.fixture
def redis_cache() -> RedisCacheStore:
    return RedisCacheStore(client=fakeredis.FakeStrictRedis(server=fakeredis.FakeServer(), decode_responses=True))


@pytest.fixture
def service(recipe_model, cache) -> RecipeService:
    return RecipeService(recipe_model, cache)


@pytest.fixture
def app(service) -> Flask:
    return create_app(config={"TESTING": True}, recipe_service=service)


@pytest.fixture
def client(app) -> FlaskClient:
    return app.test_client()
