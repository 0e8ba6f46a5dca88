"""Bulk data CLI commands."""

import json

import click
from flask.cli import with_appcontext
from pydantic import ValidationError

from recipes_api.backend.database.context import ServiceContext
from recipes_api.shared.modules.recipe.models.recipe import RecipePayload


@click.command("load-recipes")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@with_appcontext
def load_recipes_command(path):
    """Insert the recipes listed in a JSON file (an array of recipe objects)."""
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise click.ClickException(f"{path} is not valid JSON: {e}")

    if not isinstance(data, list):
        raise click.ClickException(f"{path} must contain a JSON array of recipes")

    try:
        payloads = [RecipePayload.model_validate(item) for item in data]
    except ValidationError as e:
        raise click.ClickException(f"Invalid recipe in {path}: {e}")

    recipes = ServiceContext.get_recipe_service().load_recipes(payloads)
    click.echo(f"Inserted recipes: {len(recipes)}")


def register_commands(app):
    app.cli.add_command(load_recipes_command)
