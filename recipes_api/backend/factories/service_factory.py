"""
Service Factory for creating business service instances with proper dependencies.
"""
from flask import Flask
from flask_pymongo import PyMongo

from recipes_api.backend.modules.recipe.models.recipe_model import RecipeModel
from recipes_api.backend.modules.recipe.services.recipe_service import RecipeService
from recipes_api.shared.modules.cache.cache_store_factory import create_cache_store


class ServiceFactory:
    """
    Factory for creating service instances with injected dependencies.
    Clients are built once per application and shared by all requests.
    """

    @staticmethod
    def create_recipe_model(app: Flask) -> RecipeModel:
        """
        Connect to MongoDB for this app and wrap the recipes collection.
        pymongo connects lazily, so no server is contacted here.
        """
        timeout_ms = app.config["STORE_TIMEOUT_MS"]
        mongo = PyMongo(
            app,
            uri=app.config["MONGO_URI"],
            serverSelectionTimeoutMS=timeout_ms,
            connectTimeoutMS=timeout_ms,
            socketTimeoutMS=timeout_ms,
        )
        if mongo.db is None:
            raise ValueError("MONGO_URI must name a database, e.g. mongodb://host:27017/recipes")
        return RecipeModel(mongo.db[app.config["MONGO_COLLECTION"]])

    @staticmethod
    def create_recipe_service(app: Flask) -> RecipeService:
        """
        Create a RecipeService with its store and cache configured from app.config.

        Args:
            app: The Flask application whose config names the backends

        Returns:
            RecipeService: Configured recipe service
        """
        recipe_model = ServiceFactory.create_recipe_model(app)
        cache = create_cache_store(app.config)
        return RecipeService(recipe_model, cache)
