"""
Base model class for MongoDB operations.
Wraps one collection handed in by the caller and provides the shared
document conversion and error translation for concrete models.
"""
from contextlib import contextmanager
from typing import Any, Dict

from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from recipes_api.shared.errors import StoreUnavailable


class BaseNoSqlModel:
    """
    Base class for MongoDB persistence wrappers.

    The collection is injected at construction, so the same model works
    against a real database, a test double, or a different collection name.
    Subclasses implement _from_doc and _to_doc for their domain type.
    """

    def __init__(self, collection: Collection):
        self._collection = collection

    @property
    def collection(self) -> Collection:
        """The MongoDB collection this model reads and writes."""
        return self._collection

    # -------------------------------------------------------------------------
    # Common operations
    # -------------------------------------------------------------------------

    def _find(self, query: Dict[str, Any]) -> list:
        with self._store_errors("find"):
            docs = list(self.collection.find(query))
        return [self._from_doc(doc) for doc in docs]

    @contextmanager
    def _store_errors(self, operation: str):
        """
        Translate any driver failure (timeouts included) into StoreUnavailable.
        """
        try:
            yield
        except PyMongoError as e:
            raise StoreUnavailable(
                f"MongoDB {operation} on '{self.collection.name}' failed: {e}"
            ) from e

    @classmethod
    def _from_doc(cls, doc: Dict[str, Any]) -> Any:
        """
        Convert MongoDB document to model instance.
        Override in subclasses to provide proper model instantiation.
        """
        raise NotImplementedError("Subclasses must implement _from_doc method")

    @classmethod
    def _to_doc(cls, model_instance: Any) -> Dict[str, Any]:
        """
        Convert a model instance to a MongoDB document with its ID as _id.
        """
        raise NotImplementedError("Subclasses must implement _to_doc method")
