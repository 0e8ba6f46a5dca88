# tests/test_recipe_loader.py
import json

from recipes_api.shared.modules.cache.cache_keys import RECIPES_CACHE_KEY


def test_load_recipes_command(app, service, cache, tmp_path):
    service.list_recipes()
    assert cache.get(RECIPES_CACHE_KEY) is not None

    recipes_file = tmp_path / "recipes.json"
    recipes_file.write_text(json.dumps([
        {"name": "Salad", "tags": ["veg"], "ingredients": ["lettuce"], "instructions": ["toss"]},
        {"name": "Steak", "tags": ["meat"]},
    ]))

    result = app.test_cli_runner().invoke(args=["load-recipes", str(recipes_file)])

    assert result.exit_code == 0, result.output
    assert "Inserted recipes: 2" in result.output
    assert cache.get(RECIPES_CACHE_KEY) is None
    assert [r.name for r in service.list_recipes()] == ["Salad", "Steak"]


def test_load_recipes_rejects_invalid_file(app, service, tmp_path):
    bad_json = tmp_path / "bad.json"
    bad_json.write_text("{oops")
    not_a_list = tmp_path / "object.json"
    not_a_list.write_text(json.dumps({"name": "Salad"}))
    bad_recipe = tmp_path / "recipe.json"
    bad_recipe.write_text(json.dumps([{"name": "Salad"}, {"tags": ["no name"]}]))

    runner = app.test_cli_runner()
    for path in (bad_json, not_a_list, bad_recipe):
        result = runner.invoke(args=["load-recipes", str(path)])
        assert result.exit_code != 0

    # nothing is inserted when any recipe is invalid
    assert service.list_recipes() == []
