"""Envelope Schemas: the fixed-shape reply {statusCode, message, data?}.

Invariants:
    - statusCode is serialized under its camelCase alias
    - AckEnvelope never carries data (create, delete)
    - UserEnvelope always carries data, null when no record matched (update)
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from user_api.schemas.user import UserRecord


class AckEnvelope(BaseModel):
    """Write acknowledgement without data."""
    model_config = ConfigDict(populate_by_name=True)

    status_code: int = Field(alias="statusCode")
    message: str


class UserListEnvelope(AckEnvelope):
    data: list[UserRecord]


class UserEnvelope(AckEnvelope):
    data: UserRecord | None


class ErrorEnvelope(AckEnvelope):
    """Failure reply. data holds the raw error payload when forwarded."""
    data: Any = None
