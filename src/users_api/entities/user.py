"""User domain entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class UserEntity:
    """Domain entity for a user record.

    Not frozen: UserService.create_user writes the store-assigned id and
    timestamps back onto the instance it was given.

    Attributes:
        id: Store-assigned identifier (0 until created)
        name: Full name of the user
        email: Email address of the user
        created_at: When the row was inserted
        updated_at: Equal to created_at; users are never updated
    """

    id: int = 0
    name: str = ""
    email: str = ""
    created_at: datetime | None = None
    updated_at: datetime | None = None
