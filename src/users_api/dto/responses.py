"""Response DTOs for API endpoints."""

from datetime import datetime

from pydantic import BaseModel, Field

from users_api.entities import UserEntity


class UserResponse(BaseModel):
    """Response DTO for a single user record."""

    id: int = Field(..., description="Store-assigned identifier")
    name: str = Field(..., description="Full name of the user")
    email: str = Field(..., description="Email address of the user")
    created_at: datetime | None = Field(None, description="When the user was created")
    updated_at: datetime | None = Field(None, description="When the user was last updated")

    @classmethod
    def from_entity(cls, user: UserEntity) -> "UserResponse":
        return cls(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class ErrorResponse(BaseModel):
    """Response DTO for every error outcome."""

    error: str = Field(..., description="Human-readable error message")


class HealthResponse(BaseModel):
    """Response DTO for health check."""

    status: str = Field("ok", description="Always 'ok' while the process is serving")
