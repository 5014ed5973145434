"""Boundary Protocols: contract between routes and the storage backend.

Invariants:
    - Routes depend on UserStore only, never on the driver
    - Every method may raise StorageError; no other exception type crosses the boundary
    - Records cross the boundary as plain dicts with an `id` key

Design Decisions:
    - Protocol over ABC: structural subtyping, the Mongo store and test fakes
      need no shared base class
"""

from typing import Any, Protocol

from user_api.core.domain_types import UserId


class UserStore(Protocol):
    """Contract for User persistence, implemented by infrastructure."""

    async def find_all(self, filter: dict[str, Any]) -> list[dict]: ...

    async def insert(self, record: dict[str, Any]) -> dict: ...

    async def update_by_key(
        self, key: UserId, partial: dict[str, Any],
    ) -> dict | None: ...

    async def delete_by_key(self, key: UserId) -> None: ...

    async def health_check(self) -> bool: ...
