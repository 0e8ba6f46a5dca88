import logging
from typing import List, Optional

from pydantic import ValidationError
from pydantic_core import PydanticSerializationError

from recipes_api.backend.modules.recipe.models.recipe_model import RecipeModel
from recipes_api.shared.errors import CacheUnavailable, SerializationError
from recipes_api.shared.modules.cache.cache_keys import RECIPES_CACHE_KEY
from recipes_api.shared.modules.cache.cache_store import CacheStore
from recipes_api.shared.modules.recipe.models.recipe import Recipe, RecipeList, RecipePayload


class RecipeService:
    """
    Recipe catalog operations over a document store with a cache-aside
    layer in front of the full listing.

    - The full list is read from the cache when present, otherwise from the
      store, and written back to the cache.
    - Tag search always goes to the store.
    - Every mutation deletes the cached list after the store write succeeds
      and before returning.

    Cache failures never fail an operation: reads fall through to the store
    and write/delete errors are logged. Store failures propagate as
    StoreUnavailable.
    """

    def __init__(self, recipe_model: RecipeModel, cache: CacheStore, logger=None):
        self.recipe_model = recipe_model
        self.cache = cache
        self.logger = logger or logging.getLogger(self.__class__.__name__)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    def list_recipes(self) -> List[Recipe]:
        cached = self._read_cached_list()
        if cached is not None:
            self.logger.info("Requesting recipes from cache")
            return cached

        self.logger.info("Requesting recipes from store")
        recipes = self.recipe_model.find_all()
        try:
            data = RecipeList.dump_json(recipes).decode("utf-8")
        except PydanticSerializationError as e:
            raise SerializationError(f"Could not serialize recipe list: {e}") from e

        try:
            self.cache.set(RECIPES_CACHE_KEY, data)
        except CacheUnavailable as e:
            self.logger.warning(f"Could not populate recipe cache: {e}")

        return recipes

    def search_recipes(self, tag: str) -> List[Recipe]:
        return self.recipe_model.find_by_tag(tag)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------

    def create_recipe(self, payload: RecipePayload) -> Recipe:
        recipe = Recipe.from_payload(payload)
        self.recipe_model.insert(recipe)
        self._invalidate()
        return recipe

    def update_recipe(self, recipe_id: str, payload: RecipePayload) -> None:
        """
        Replace name, tags, ingredients and instructions of an existing recipe.

        Raises:
            NotFoundError: no recipe with this id; nothing is written.
        """
        self.recipe_model.update_by_id(recipe_id, payload.model_dump())
        self._invalidate()

    def delete_recipe(self, recipe_id: str) -> None:
        """
        Raises:
            NotFoundError: no recipe with this id; nothing is written.
        """
        self.recipe_model.delete_by_id(recipe_id)
        self._invalidate()

    def load_recipes(self, payloads: List[RecipePayload]) -> List[Recipe]:
        """
        Bulk insert recipes, e.g. from a seed file.
        """
        recipes = [Recipe.from_payload(p) for p in payloads]
        self.recipe_model.insert_many(recipes)
        self.logger.info(f"Inserted {len(recipes)} recipes")
        if recipes:
            self._invalidate()
        return recipes

    # -------------------------------------------------------------------------
    # Cache utils
    # -------------------------------------------------------------------------

    def _read_cached_list(self) -> Optional[List[Recipe]]:
        """
        Return the cached list, or None when it must be read from the store.
        """
        try:
            val = self.cache.get(RECIPES_CACHE_KEY)
        except CacheUnavailable as e:
            self.logger.warning(f"Recipe cache unavailable, reading from store: {e}")
            return None
        if val is None:
            return None

        try:
            return RecipeList.validate_json(val)
        except ValidationError as e:
            # Repopulated by the caller on the store path
            self.logger.warning(f"Discarding unreadable recipe cache entry: {e}")
            return None

    def _invalidate(self) -> None:
        self.logger.info("Remove recipe list cache")
        try:
            self.cache.delete(RECIPES_CACHE_KEY)
        except CacheUnavailable as e:
            self.logger.warning(f"Could not invalidate recipe cache: {e}")
