"""API test fixtures: in-memory UserStore + FastAPI test client.

Invariants:
    - Every test gets a fresh, empty in-memory store
    - get_user_store dependency overridden to return that store
    - Lifespan never runs (ASGITransport), so no MongoDB connection is opened

Design Decisions:
    - In-memory fake over mongomock: the routes only see the UserStore protocol
    - fail_with injects a driver error into the next storage calls
"""

import uuid

import pytest
from httpx import ASGITransport, AsyncClient
from pymongo.errors import PyMongoError

from user_api.config import Settings
from user_api.core.errors import StorageError
from user_api.infrastructure.database import get_user_store
from user_api.main import create_app


class InMemoryUserStore:
    """UserStore fake keyed by generated hex ids."""

    def __init__(self):
        self.records: dict[str, dict] = {}
        self.calls: list[str] = []
        self.fail_with: PyMongoError | None = None
        self.healthy = True

    def _maybe_fail(self, operation: str) -> None:
        self.calls.append(operation)
        if self.fail_with is not None:
            raise StorageError(operation, self.fail_with)

    async def find_all(self, filter):
        self._maybe_fail("find")
        return [
            dict(r) for r in self.records.values()
            if all(r.get(k) == v for k, v in filter.items())
        ]

    async def insert(self, record):
        self._maybe_fail("insert")
        user_id = uuid.uuid4().hex
        self.records[user_id] = {**record, "id": user_id}
        return dict(self.records[user_id])

    async def update_by_key(self, key, partial):
        self._maybe_fail("update")
        if key not in self.records:
            return None
        self.records[key].update(partial)
        return dict(self.records[key])

    async def delete_by_key(self, key):
        self._maybe_fail("delete")
        self.records.pop(key, None)

    async def health_check(self):
        return self.healthy


@pytest.fixture
def store():
    return InMemoryUserStore()


@pytest.fixture
def test_app(store):
    app = create_app(Settings(log_format="text"))
    app.dependency_overrides[get_user_store] = lambda: store
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(test_app):
    """FastAPI test client with storage dependency overridden."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def alice(client, store):
    """Create Alice through the API and return her id."""
    res = await client.post("/api/user", json={"name": "Alice", "age": 30})
    assert res.status_code == 201
    (user_id,) = store.records
    return user_id
