"""Mongo User Store: UserStore implementation over a MongoDB collection.

Invariants:
    - Documents expose `id` (str of ObjectId) instead of `_id`
    - An id that is not a valid ObjectId matches nothing (storage never assigned it)
    - update_by_key merges only supplied fields ($set) and returns the post-update document
    - delete_by_key on a missing id is a no-op, not an error
    - Every PyMongoError, and any BSON encoding failure, is re-raised as StorageError(operation)
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from bson import ObjectId
from bson.errors import BSONError, InvalidId
from pymongo import ReturnDocument
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from user_api.core.domain_types import UserId
from user_api.core.errors import StorageError

logger = logging.getLogger(__name__)


def _to_object_id(key: str) -> ObjectId | None:
    try:
        return ObjectId(key)
    except (InvalidId, TypeError):
        return None


def _to_record(document: dict) -> dict:
    record = {k: v for k, v in document.items() if k != "_id"}
    record["id"] = str(document["_id"])
    return record


class MongoUserStore:
    """User persistence on a single MongoDB collection."""

    def __init__(self, collection: AsyncCollection):
        self.collection = collection

    @asynccontextmanager
    async def _operation(self, name: str) -> AsyncIterator[None]:
        try:
            yield
        except (PyMongoError, BSONError, OverflowError) as e:
            logger.error(
                f"Mongo {name} failed: {e}",
                extra={"operation": name},
            )
            raise StorageError(name, e) from e

    def _translate_filter(self, filter: dict[str, Any]) -> dict | None:
        """Map `id` onto `_id`. None means the filter can match nothing."""
        query = {k: v for k, v in filter.items() if k != "id"}
        if "id" in filter:
            oid = _to_object_id(filter["id"])
            if oid is None:
                return None
            query["_id"] = oid
        return query

    async def find_all(self, filter: dict[str, Any]) -> list[dict]:
        query = self._translate_filter(filter)
        if query is None:
            return []
        async with self._operation("find"):
            documents = await self.collection.find(query).to_list(length=None)
        return [_to_record(d) for d in documents]

    async def insert(self, record: dict[str, Any]) -> dict:
        document = {k: v for k, v in record.items() if k != "id"}
        async with self._operation("insert"):
            result = await self.collection.insert_one(document)
        return _to_record({**document, "_id": result.inserted_id})

    async def update_by_key(
        self, key: UserId, partial: dict[str, Any],
    ) -> dict | None:
        oid = _to_object_id(key)
        if oid is None:
            return None
        changes = {k: v for k, v in partial.items() if k not in ("id", "_id")}
        async with self._operation("update"):
            if changes:
                document = await self.collection.find_one_and_update(
                    {"_id": oid}, {"$set": changes},
                    return_document=ReturnDocument.AFTER,
                )
            else:
                document = await self.collection.find_one({"_id": oid})
        return _to_record(document) if document else None

    async def delete_by_key(self, key: UserId) -> None:
        oid = _to_object_id(key)
        if oid is None:
            return
        async with self._operation("delete"):
            await self.collection.delete_one({"_id": oid})

    async def health_check(self) -> bool:
        try:
            await self.collection.database.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"User store health check failed: {e}")
            return False
