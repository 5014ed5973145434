"""User Schemas: Pydantic models with field-level validation for API boundaries.

Invariants:
    - UserCreate: name (non-empty string) and age (number) both required
    - UserUpdate: name and age optional; only supplied fields reach storage
    - Unknown payload fields are rejected (extra="forbid")
    - Booleans and explicit nulls are wrong types, never coerced
    - Validation only checks presence and type, never value ranges
    - Integers beyond BSON's 8-byte range are stored as doubles
"""

from typing import Annotated

from pydantic import (
    AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field,
    field_validator,
)

_INT64_MIN, _INT64_MAX = -(2 ** 63), 2 ** 63 - 1


def _reject_bool(v):
    if isinstance(v, bool):
        raise ValueError("Input should be a valid number")
    return v


def _fit_int64(v: int | float) -> int | float:
    if isinstance(v, int) and not _INT64_MIN <= v <= _INT64_MAX:
        return float(v)
    return v


Number = Annotated[
    int | float, BeforeValidator(_reject_bool), AfterValidator(_fit_int64),
]


class UserCreate(BaseModel):
    """User creation payload."""
    model_config = ConfigDict(extra="forbid")

    name: str = Field(min_length=1)
    age: Number


class UserUpdate(BaseModel):
    """User update payload, merged into the stored record."""
    model_config = ConfigDict(extra="forbid")

    name: str | None = Field(None, min_length=1)
    age: Number | None = None

    @field_validator("name", "age", mode="before")
    @classmethod
    def reject_null(cls, v):
        # Defaults are not validated, so only an explicit null lands here.
        if v is None:
            raise ValueError("Field may be omitted but not null")
        return v

    def to_partial(self) -> dict:
        """Fields the client actually supplied."""
        return self.model_dump(exclude_unset=True)


class UserRecord(BaseModel):
    """Persisted user as returned to clients."""
    id: str
    name: str
    age: int | float
