from typing import Any, Dict, List

from recipes_api.backend.models.base_nosql_model import BaseNoSqlModel
from recipes_api.shared.errors import NotFoundError
from recipes_api.shared.modules.recipe.models.recipe import Recipe


class RecipeModel(BaseNoSqlModel):
    """
    MongoDB persistence wrapper for Recipe objects.
    The recipe id is stored as the document's _id.
    """

    @classmethod
    def _from_doc(cls, doc: Dict[str, Any]) -> Recipe:
        doc = dict(doc)
        doc["id"] = str(doc.pop("_id"))
        return Recipe(**doc)

    @classmethod
    def _to_doc(cls, recipe: Recipe) -> Dict[str, Any]:
        doc = recipe.model_dump()
        doc["_id"] = doc.pop("id")
        return doc

    def insert(self, recipe: Recipe) -> str:
        with self._store_errors("insert_one"):
            result = self.collection.insert_one(self._to_doc(recipe))
        return str(result.inserted_id)

    def insert_many(self, recipes: List[Recipe]) -> List[str]:
        if not recipes:
            return []
        with self._store_errors("insert_many"):
            result = self.collection.insert_many([self._to_doc(r) for r in recipes])
        return [str(i) for i in result.inserted_ids]

    def find_all(self) -> List[Recipe]:
        return self._find({})

    def find_by_tag(self, tag: str) -> List[Recipe]:
        """
        Recipes whose tag list contains exactly `tag` (case-sensitive).
        """
        return self._find({"tags": tag})

    def update_by_id(self, recipe_id: str, fields: Dict[str, Any]) -> None:
        """
        Overwrite the given fields of one recipe.
        The id and published_at are never part of the update.
        """
        fields = {k: v for k, v in fields.items() if k not in ("id", "_id", "published_at")}
        with self._store_errors("update_one"):
            result = self.collection.update_one({"_id": recipe_id}, {"$set": fields})
        # matched, not modified: an update that writes identical values still succeeds
        if result.matched_count == 0:
            raise NotFoundError(recipe_id)

    def delete_by_id(self, recipe_id: str) -> None:
        with self._store_errors("delete_one"):
            result = self.collection.delete_one({"_id": recipe_id})
        if result.deleted_count == 0:
            raise NotFoundError(recipe_id)
