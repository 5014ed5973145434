"""Database Session Manager: async MongoDB client owned by the app lifespan.

Invariants:
    - One AsyncMongoClient per app, created in the lifespan and closed on shutdown
    - The manager and the UserStore live on app.state, never a module-level connection
    - get_user_store is the only way routes obtain storage (FastAPI dependency)

Design Decisions:
    - Database taken from the URL path when present (mongodb://host/db), else settings
    - Pooling left to the driver: no pool knobs exposed
"""

import logging

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.asynchronous.database import AsyncDatabase

from user_api.core.repository_protocols import UserStore

logger = logging.getLogger(__name__)


class MongoSessionManager:
    """Owns the MongoDB client and resolves the application database."""

    def __init__(
        self,
        mongo_url: str,
        default_database: str = "user_api",
        server_selection_timeout_ms: int = 5000,
    ):
        self.client: AsyncMongoClient = AsyncMongoClient(
            mongo_url,
            serverSelectionTimeoutMS=server_selection_timeout_ms,
        )
        self.database: AsyncDatabase = self.client.get_default_database(
            default=default_database,
        )

    def collection(self, name: str) -> AsyncCollection:
        return self.database[name]

    async def close(self) -> None:
        await self.client.close()
        logger.info("MongoDB connection closed")


def get_user_store(request: Request) -> UserStore:
    """FastAPI dependency for the storage handle set up in the lifespan."""
    store = getattr(request.app.state, "user_store", None)
    if store is None:
        raise RuntimeError("Database not initialized")
    return store
