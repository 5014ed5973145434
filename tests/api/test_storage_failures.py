"""Storage Failures: every route maps StorageError to a 503 envelope.

Tests cover:
    - Route-specific messages ("Failed to get data", "Error in removing User")
    - Raw error payload forwarded as data
    - Create forwards the raw error text as message, without data
    - Transport status equals envelope statusCode
"""

import pytest
from pymongo.errors import ServerSelectionTimeoutError

RAW_ERROR = {
    "name": "ServerSelectionTimeoutError",
    "message": "localhost:27017: connection refused",
}


@pytest.fixture
def broken_store(store):
    store.fail_with = ServerSelectionTimeoutError(RAW_ERROR["message"])
    return store


@pytest.mark.parametrize("method,path,payload,message", [
    ("GET", "/api/user", None, "Failed to get data"),
    ("GET", "/api/user/abc", None, "Failed to get data"),
    ("PUT", "/api/user/abc", {"age": 1}, "Failed to get data"),
    ("DELETE", "/api/user/abc", None, "Error in removing User"),
])
async def test_storage_failure_envelope(
    client, broken_store, method, path, payload, message,
):
    res = await client.request(method, path, json=payload)
    assert res.status_code == 503
    assert res.json() == {
        "statusCode": 503,
        "message": message,
        "data": RAW_ERROR,
    }


async def test_create_failure_forwards_error_as_message(client, broken_store):
    res = await client.post("/api/user", json={"name": "Alice", "age": 30})
    assert res.status_code == 503
    assert res.json() == {
        "statusCode": 503,
        "message": RAW_ERROR["message"],
    }
