"""Database Session Manager: database resolution and the storage dependency.

AsyncMongoClient connects lazily, so constructing it needs no running server.
"""

from types import SimpleNamespace

import pytest

from user_api.infrastructure.database import MongoSessionManager, get_user_store


async def test_database_taken_from_url_path():
    manager = MongoSessionManager("mongodb://localhost:27017/from_url")
    assert manager.database.name == "from_url"
    await manager.close()


async def test_database_falls_back_to_default():
    manager = MongoSessionManager(
        "mongodb://localhost:27017", default_database="fallback",
    )
    assert manager.database.name == "fallback"
    await manager.close()


async def test_collection_lookup():
    manager = MongoSessionManager("mongodb://localhost:27017/db")
    assert manager.collection("users").name == "users"
    await manager.close()


def _request_with_state(**state):
    return SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(**state)))


def test_get_user_store_returns_app_state_store():
    store = object()
    assert get_user_store(_request_with_state(user_store=store)) is store


def test_get_user_store_requires_initialization():
    with pytest.raises(RuntimeError, match="not initialized"):
        get_user_store(_request_with_state())
