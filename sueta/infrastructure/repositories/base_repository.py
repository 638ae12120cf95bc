"""
MongoDB implementation of the Base Repository.
"""

from contextlib import contextmanager
from typing import Any, Dict, Generic, Iterator, Optional, Type, TypeVar

import pymongo
import structlog
from bson import ObjectId
from pydantic import BaseModel
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError, PyMongoError

from sueta.domain.repositories.base import (
    BaseRepository,
    DuplicateRecord,
    InvalidRecordId,
    RecordNotFound,
    StorageError,
)

logger = structlog.get_logger(__name__)

ModelType = TypeVar("ModelType", bound=BaseModel)

# Upper bound for a single store call, applied on top of the caller's budget.
OPERATION_TIMEOUT = 5.0


class MongoRepository(BaseRepository[ModelType], Generic[ModelType]):
    """Generic repository over one collection.

    Models are stored with their snake_case field names; the model ``id``
    lives in ``_id`` as an ``ObjectId``.
    """

    def __init__(self, collection: Collection, model: Type[ModelType]):
        self.collection = collection
        self.model = model

    @contextmanager
    def _operation(self, name: str, timeout: Optional[float]) -> Iterator[None]:
        """Bound a store call and translate driver errors."""
        limit = OPERATION_TIMEOUT if timeout is None else min(timeout, OPERATION_TIMEOUT)
        if limit <= 0:
            raise StorageError(f"{name} failed: deadline exceeded")
        try:
            with pymongo.timeout(limit):
                yield
        except DuplicateKeyError as exc:
            raise DuplicateRecord(str(exc)) from exc
        except PyMongoError as exc:
            logger.warning(
                "Store operation failed",
                collection=self.collection.name,
                operation=name,
                error=str(exc),
            )
            raise StorageError(f"{name} failed: {exc}") from exc

    @staticmethod
    def _object_id(id: Optional[str]) -> ObjectId:
        # ObjectId(None) would mint a fresh id, so reject anything but 24 hex chars.
        if not isinstance(id, str) or not ObjectId.is_valid(id):
            raise InvalidRecordId(repr(id))
        return ObjectId(id)

    def _to_document(self, obj: ModelType) -> Dict[str, Any]:
        return obj.model_dump(exclude={"id"})

    def _from_document(self, document: Dict[str, Any]) -> ModelType:
        data = dict(document)
        data["id"] = str(data.pop("_id"))
        return self.model.model_validate(data)

    def _find_one(self, name: str, query: Dict[str, Any], timeout: Optional[float]) -> ModelType:
        with self._operation(name, timeout):
            document = self.collection.find_one(query)
        if document is None:
            raise RecordNotFound(str(query))
        return self._from_document(document)

    def create(self, obj: ModelType, *, timeout: Optional[float] = None) -> str:
        with self._operation("create", timeout):
            result = self.collection.insert_one(self._to_document(obj))
        return str(result.inserted_id)

    def find_by_id(self, id: str, *, timeout: Optional[float] = None) -> ModelType:
        return self._find_one("find_by_id", {"_id": self._object_id(id)}, timeout)

    def update_partially(self, obj: ModelType, *, timeout: Optional[float] = None) -> None:
        object_id = self._object_id(obj.id)
        with self._operation("update_partially", timeout):
            result = self.collection.update_one({"_id": object_id}, {"$set": self._to_document(obj)})
        if result.matched_count == 0:
            raise RecordNotFound(obj.id)

    def delete(self, id: str, *, timeout: Optional[float] = None) -> None:
        object_id = self._object_id(id)
        with self._operation("delete", timeout):
            deleted = self.collection.find_one_and_delete({"_id": object_id})
        if deleted is None:
            raise RecordNotFound(id)
