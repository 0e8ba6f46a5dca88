"""
Service context for the Flask application.
Provides the app's service instances to controllers and commands.
"""
from flask import Flask, current_app

from recipes_api.backend.modules.recipe.services.recipe_service import RecipeService

EXTENSION_KEY = "recipe_service"


class ServiceContext:
    """
    Holds the one RecipeService built for an application.
    Works anywhere an application context is active (requests, CLI commands).
    """

    @staticmethod
    def init_app(app: Flask, recipe_service: RecipeService) -> None:
        app.extensions[EXTENSION_KEY] = recipe_service

    @staticmethod
    def get_recipe_service() -> RecipeService:
        return current_app.extensions[EXTENSION_KEY]
