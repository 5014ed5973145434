"""User Routes: CRUD over the single User resource.

Invariants:
    - Payload and path are validated by Pydantic before a handler runs
    - Each handler awaits exactly one UserStore call
    - Transport status always equals the envelope statusCode
    - Not found is not an error: GET by id → 200 "User Not Found" with [],
      PUT → 200 with data null, DELETE → 200 ack
    - StorageError → 503 envelope with a route-specific message

Design Decisions:
    - Storage handle injected per request (Depends(get_user_store)), no global connection
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, status

from user_api.core.domain_types import EnvelopeMessage, UserId
from user_api.core.errors import StorageError, StorageUnavailableError
from user_api.core.repository_protocols import UserStore
from user_api.infrastructure.database import get_user_store
from user_api.schemas.envelope import (
    AckEnvelope, ErrorEnvelope, UserEnvelope, UserListEnvelope,
)
from user_api.schemas.user import UserCreate, UserUpdate

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/user", tags=["users"])

_STORAGE_FAILURE = {
    status.HTTP_503_SERVICE_UNAVAILABLE: {
        "model": ErrorEnvelope, "description": "Storage backend failure",
    },
}

UserIdPath = Annotated[
    str, Path(alias="id", description="Storage-assigned user id"),
]


@router.get(
    "",
    response_model=UserListEnvelope,
    responses=_STORAGE_FAILURE,
    summary="Get All User data",
    description="Get All User data",
)
async def list_users(store: UserStore = Depends(get_user_store)):
    try:
        users = await store.find_all({})
    except StorageError as e:
        raise StorageUnavailableError.from_storage_error(
            EnvelopeMessage.FETCH_FAILED.value, e,
        ) from e
    return UserListEnvelope(
        status_code=status.HTTP_200_OK,
        message=EnvelopeMessage.FETCHED.value,
        data=users,
    )


@router.post(
    "",
    response_model=AckEnvelope,
    status_code=status.HTTP_201_CREATED,
    responses=_STORAGE_FAILURE,
    summary="Save user data",
    description="Save user data",
)
async def create_user(
    body: UserCreate, store: UserStore = Depends(get_user_store),
):
    try:
        user = await store.insert(body.model_dump())
    except StorageError as e:
        # Create forwards the raw error as the message itself, without data.
        raise StorageUnavailableError(e.message) from e
    logger.info("User saved", extra={"user_id": user["id"]})
    return AckEnvelope(
        status_code=status.HTTP_201_CREATED,
        message=EnvelopeMessage.SAVED.value,
    )


@router.get(
    "/{id}",
    response_model=UserListEnvelope,
    responses=_STORAGE_FAILURE,
    summary="Get specific user data",
    description="Get specific user data",
)
async def get_user(
    user_id: UserIdPath,
    store: UserStore = Depends(get_user_store),
):
    try:
        users = await store.find_all({"id": UserId(user_id)})
    except StorageError as e:
        raise StorageUnavailableError.from_storage_error(
            EnvelopeMessage.FETCH_FAILED.value, e,
        ) from e
    message = EnvelopeMessage.FETCHED if users else EnvelopeMessage.NOT_FOUND
    return UserListEnvelope(
        status_code=status.HTTP_200_OK, message=message.value, data=users,
    )


@router.put(
    "/{id}",
    response_model=UserEnvelope,
    responses=_STORAGE_FAILURE,
    summary="Update specific user data",
    description="Update specific user data",
)
async def update_user(
    body: UserUpdate,
    user_id: UserIdPath,
    store: UserStore = Depends(get_user_store),
):
    try:
        user = await store.update_by_key(UserId(user_id), body.to_partial())
    except StorageError as e:
        raise StorageUnavailableError.from_storage_error(
            EnvelopeMessage.FETCH_FAILED.value, e,
        ) from e
    if user is None:
        logger.info("Update matched no user", extra={"user_id": user_id})
    return UserEnvelope(
        status_code=status.HTTP_200_OK,
        message=EnvelopeMessage.UPDATED.value,
        data=user,
    )


@router.delete(
    "/{id}",
    response_model=AckEnvelope,
    responses=_STORAGE_FAILURE,
    summary="Remove specific user data",
    description="Remove specific user data",
)
async def delete_user(
    user_id: UserIdPath,
    store: UserStore = Depends(get_user_store),
):
    try:
        await store.delete_by_key(UserId(user_id))
    except StorageError as e:
        raise StorageUnavailableError.from_storage_error(
            EnvelopeMessage.REMOVE_FAILED.value, e,
        ) from e
    logger.info("User deleted", extra={"user_id": user_id})
    return AckEnvelope(
        status_code=status.HTTP_200_OK,
        message=EnvelopeMessage.DELETED.value,
    )
