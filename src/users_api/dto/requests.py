"""Request DTOs for API endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from users_api.entities import UserEntity


class CreateUserRequest(BaseModel):
    """Request DTO for creating a user.

    Both fields default to an empty string so that a body missing one of
    them still decodes; the service layer reports the missing field.
    """

    model_config = ConfigDict(extra="ignore", strict=True)

    name: str = Field("", description="Full name of the user")
    email: str = Field("", description="Email address of the user")

    def to_entity(self) -> UserEntity:
        """Convert to a domain entity (id and timestamps unset)."""
        return UserEntity(name=self.name, email=self.email)
