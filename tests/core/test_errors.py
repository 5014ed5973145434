"""Error Hierarchy: envelope rendering and raw payload forwarding."""

from pymongo.errors import ConnectionFailure

from user_api.core.errors import (
    ErrorCategory, StorageError, StorageUnavailableError, UserApiError,
)


def test_envelope_omits_absent_data():
    err = UserApiError("nope", "X", ErrorCategory.INTERNAL, http_status=500)
    assert err.to_response() == {"statusCode": 500, "message": "nope"}


def test_storage_error_carries_raw_payload():
    err = StorageError("find", ConnectionFailure("refused"))
    assert err.http_status == 503
    assert err.category is ErrorCategory.DATABASE
    assert err.to_payload() == {"name": "ConnectionFailure", "message": "refused"}
    assert err.to_response()["data"] == err.to_payload()


def test_storage_error_message_falls_back_to_class_name():
    err = StorageError("insert", ConnectionFailure())
    assert err.message == "ConnectionFailure"


def test_storage_unavailable_uses_route_message():
    cause = StorageError("delete", ConnectionFailure("refused"))
    err = StorageUnavailableError.from_storage_error("Error in removing User", cause)
    assert err.to_response() == {
        "statusCode": 503,
        "message": "Error in removing User",
        "data": {"name": "ConnectionFailure", "message": "refused"},
    }
