"""
Error types for the recipes service.

Request validation errors are plain ValueErrors (pydantic's ValidationError
is one), so controllers can map them to 400 the same way for both.
Everything raised by the service layer itself derives from
RecipeServiceError and keeps the underlying client exception as __cause__.
"""


class RecipeServiceError(Exception):
    """Base class for recipe service failures."""


class NotFoundError(RecipeServiceError):
    """No recipe exists with the given identifier."""

    def __init__(self, recipe_id: str):
        self.recipe_id = recipe_id
        super().__init__(f"Recipe {recipe_id} not found")


class StoreUnavailable(RecipeServiceError):
    """The document store failed or timed out."""


class CacheUnavailable(RecipeServiceError):
    """
    The cache failed or timed out.
    Never surfaced to callers; the service degrades to the store.
    """


class SerializationError(RecipeServiceError):
    """The recipe list could not be serialized for the cache."""
