"""Infrastructure resources: MongoDB document store.

This module is part of the infra layer and must not import from application features.
"""
from typing import Any, Dict, Optional

import structlog
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from api.shared.exceptions import StoreUnavailableError
from api.shared.utils import without_mongo_id

logger = structlog.get_logger("graphify.store")


class MongoDocumentStore:
    """MongoDB-backed document store for dependency injection.

    One client per process; the driver pools connections and is safe to share
    across concurrent requests. Every driver error, including the client-side
    operation timeout, surfaces as :class:`StoreUnavailableError`.
    """

    def __init__(
        self,
        uri: str,
        database_name: str,
        timeout_ms: int = 5000,
        unique_keys: Optional[Dict[str, str]] = None,
    ):
        self.uri = uri
        self.database_name = database_name
        self.timeout_ms = timeout_ms
        self.unique_keys = unique_keys or {}
        self.client: Optional[AsyncMongoClient] = None
        self.db = None

    async def init(self) -> "MongoDocumentStore":
        """Connect, verify the server answers, and ensure unique key indexes."""
        self.client = AsyncMongoClient(
            self.uri,
            timeoutMS=self.timeout_ms,
            serverSelectionTimeoutMS=self.timeout_ms,
            tz_aware=True,
        )
        self.db = self.client[self.database_name]
        await self.ping()
        for collection, field in self.unique_keys.items():
            await self._run(
                "create_index",
                collection,
                self.db[collection].create_index(field, unique=True),
            )
        logger.info(
            "store.mongo.ready",
            database=self.database_name,
            indexes=sorted(self.unique_keys),
        )
        return self

    def _collection(self, name: str):
        if self.db is None:
            raise StoreUnavailableError("Database not initialized. Call init() first.")
        return self.db[name]

    async def _run(self, operation: str, collection: str, awaitable):
        try:
            return await awaitable
        except PyMongoError as e:
            logger.error(
                "store.mongo.failed",
                operation=operation,
                collection=collection,
                error=str(e),
            )
            raise StoreUnavailableError(
                str(e), {"operation": operation, "collection": collection}
            ) from e

    async def ping(self) -> None:
        if self.client is None:
            raise StoreUnavailableError("Database not initialized. Call init() first.")
        await self._run("ping", "admin", self.client.admin.command("ping"))

    async def find_one(
        self, collection: str, key: Dict[str, Any]
    ) -> Optional[Dict[str, Any]]:
        document = await self._run(
            "find_one",
            collection,
            self._collection(collection).find_one(key, projection={"_id": 0}),
        )
        return without_mongo_id(document) if document else None

    async def upsert(
        self,
        collection: str,
        key: Dict[str, Any],
        *,
        set_fields: Dict[str, Any],
        set_on_insert: Optional[Dict[str, Any]] = None,
    ) -> bool:
        update: Dict[str, Any] = {"$set": set_fields}
        if set_on_insert:
            update["$setOnInsert"] = set_on_insert
        result = await self._run(
            "upsert",
            collection,
            self._collection(collection).update_one(key, update, upsert=True),
        )
        return result.upserted_id is not None

    async def delete_one(self, collection: str, key: Dict[str, Any]) -> int:
        result = await self._run(
            "delete_one", collection, self._collection(collection).delete_one(key)
        )
        return result.deleted_count

    async def shutdown(self) -> None:
        """Close the client and drop the handle."""
        if self.client is not None:
            await self.client.close()
            logger.info("store.mongo.closed")
        self.client = None
        self.db = None
