import logging

from flask import Blueprint, jsonify, request

from recipes_api.backend.database.context import ServiceContext
from recipes_api.shared.errors import NotFoundError, RecipeServiceError
from recipes_api.shared.modules.recipe.models.recipe import RecipePayload

bp = Blueprint("recipe_controller", __name__)
logger = logging.getLogger(__name__)


def _recipe_payload_from_request() -> RecipePayload:
    """
    Parse and validate the JSON body. Raises ValueError on anything malformed.
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        raise ValueError("Request body must be a JSON object")
    return RecipePayload.model_validate(payload)


def _dump(recipes):
    return [r.model_dump(mode="json") for r in recipes]


@bp.route("/recipes", methods=["GET"])
def list_recipes():
    """
    Return every recipe, served from the cache when it is populated.
    """
    try:
        recipes = ServiceContext.get_recipe_service().list_recipes()
        return jsonify(_dump(recipes)), 200
    except RecipeServiceError as e:
        return jsonify({"error": str(e)}), 500


@bp.route("/recipes/search", methods=["GET"])
def search_recipes():
    """
    Return recipes tagged with ?tag=<tag>. Always read from the store.
    """
    tag = request.args.get("tag", "")
    try:
        recipes = ServiceContext.get_recipe_service().search_recipes(tag)
        return jsonify(_dump(recipes)), 200
    except RecipeServiceError as e:
        return jsonify({"error": str(e)}), 500


@bp.route("/recipes", methods=["POST"])
def create_recipe():
    """
    Create a new recipe.

    recipe_payload = {
        "name": "Oregano Marinara Sauce",
        "tags": ["main", "pasta", "vegetarian"],
        "ingredients": ["1 1/2 cups tomato sauce", "1 teaspoon dried oregano"],
        "instructions": ["Mix the ingredients", "Simmer for 10 minutes"]
    }
    """
    try:
        payload = _recipe_payload_from_request()
        recipe = ServiceContext.get_recipe_service().create_recipe(payload)
        return jsonify(recipe.model_dump(mode="json")), 200

    except ValueError as e:
        # Validation errors (from Pydantic models)
        return jsonify({"error": f"Validation error: {str(e)}"}), 400
    except RecipeServiceError as e:
        logger.error(f"Error while inserting new recipe: {e}")
        return jsonify({"error": "Error while inserting new recipe"}), 500


@bp.route("/recipes/<recipe_id>", methods=["PUT"])
def update_recipe(recipe_id):
    """
    Replace the name, tags, ingredients and instructions of a recipe.
    """
    try:
        payload = _recipe_payload_from_request()
        ServiceContext.get_recipe_service().update_recipe(recipe_id, payload)
        return jsonify({"message": "Recipe has been updated"}), 200

    except ValueError as e:
        return jsonify({"error": f"Validation error: {str(e)}"}), 400
    except NotFoundError as e:
        return jsonify({"error": str(e)}), 404
    except RecipeServiceError as e:
        return jsonify({"error": str(e)}), 500


@bp.route("/recipes/<recipe_id>", methods=["DELETE"])
def delete_recipe(recipe_id):
    try:
        ServiceContext.get_recipe_service().delete_recipe(recipe_id)
        return jsonify({"message": f"Recipe {recipe_id} has been deleted"}), 200

    except NotFoundError as e:
        return jsonify({"error": str(e)}), 404
    except RecipeServiceError as e:
        return jsonify({"error": str(e)}), 500


@bp.errorhandler(Exception)
def handle_unexpected_error(e):
    logger.exception(f"Unhandled error in recipe controller: {e}")
    return jsonify({"error": "Internal server error"}), 500
