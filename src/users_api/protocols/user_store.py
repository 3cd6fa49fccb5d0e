"""User store protocol.

Defines the interface for the relational store of record. The store is
the single source of truth; implementations assign identifiers.
"""

from datetime import datetime
from typing import Protocol, runtime_checkable

from users_api.entities import UserEntity


@runtime_checkable
class UserStore(Protocol):
    """Protocol for user persistence backends."""

    def list_all(self) -> list[UserEntity]:
        """Return every user ordered by identifier."""
        ...

    def get_by_id(self, user_id: int) -> UserEntity | None:
        """Return the user with the given identifier, or None if absent."""
        ...

    def insert(self, name: str, email: str, timestamp: datetime) -> int:
        """Insert a user and return the store-assigned identifier.

        Args:
            name: Full name of the user
            email: Email address of the user
            timestamp: Value written to both created_at and updated_at

        Returns:
            The new identifier
        """
        ...

    def ping(self) -> None:
        """Verify the store is reachable. Raises on failure."""
        ...

    def close(self) -> None:
        """Release pooled connections."""
        ...
