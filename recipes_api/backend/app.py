import logging
import sys

from flask import Flask

from recipes_api.backend.api.recipe_controller import bp as recipe_controller_bp
from recipes_api.backend.commands.recipe_loader import register_commands
from recipes_api.backend.config import Config
from recipes_api.backend.database.context import ServiceContext
from recipes_api.backend.factories.service_factory import ServiceFactory


def configure_logging(level: str) -> None:
    # No-op when the root logger already has handlers (e.g. under gunicorn or pytest)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def create_app(config=None, recipe_service=None) -> Flask:
    """
    Build the Flask application.

    Args:
        config: Optional mapping overriding values from Config
        recipe_service: Optional ready-made RecipeService; when omitted one is
            built from the configuration by ServiceFactory
    """
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    configure_logging(app.config["LOG_LEVEL"])

    if recipe_service is None:
        recipe_service = ServiceFactory.create_recipe_service(app)
    ServiceContext.init_app(app, recipe_service)

    app.register_blueprint(recipe_controller_bp)
    register_commands(app)
    return app


if __name__ == "__main__":
    create_app().run(host="0.0.0.0", port=8080, debug=False)
