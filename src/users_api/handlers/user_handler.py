"""HTTP handlers for user operations.

Handlers convert between DTOs (API contracts) and service calls.
They handle HTTP concerns like status codes, validation, and error handling.
"""

import logging

from fastapi import HTTPException, status
from pydantic import ValidationError

from users_api.dto import CreateUserRequest, UserResponse
from users_api.errors import UserNotFoundError, UserValidationError
from users_api.services import UserService

logger = logging.getLogger(__name__)


class UserHandler:
    """HTTP handlers for user operations.

    This handler delegates business logic to UserService
    and handles HTTP-specific concerns like:
    - Decoding request bodies into DTOs
    - Converting entities to DTOs
    - Mapping service errors to status codes

    Every error outcome is raised as HTTPException; the application
    renders its detail as ``{"error": detail}``.

    Example:
        ```python
        handler = UserHandler(user_service=service)
        router = build_router(handler)
        ```
    """

    def __init__(self, user_service: UserService) -> None:
        """Initialize the user handler.

        Args:
            user_service: The user service for business logic (required).
        """
        self._users = user_service

    def list_users(self) -> list[UserResponse]:
        """Handle GET /users requests.

        Returns:
            All users; an empty list when there are none

        Raises:
            HTTPException: 500 if the store query fails
        """
        try:
            users = self._users.list_users()
        except Exception as e:
            logger.exception("Listing users failed")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(e),
            ) from e

        return [UserResponse.from_entity(user) for user in users]

    def get_user(self, user_id: str | None) -> UserResponse:
        """Handle GET /user?id=<id> requests.

        Args:
            user_id: Value of the ``id`` query parameter, if any

        Returns:
            The requested user

        Raises:
            HTTPException: 400 for a missing or malformed id,
                404 if the user does not exist, 500 otherwise
        """
        if not user_id:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="id parameter is required",
            )

        try:
            user = self._users.get_user(user_id)
        except UserValidationError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
        except UserNotFoundError as e:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="user not found") from e
        except Exception as e:
            logger.exception("Fetching user %s failed", user_id)
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(e),
            ) from e

        return UserResponse.from_entity(user)

    def create_user(self, body: bytes) -> UserResponse:
        """Handle POST /users requests.

        Args:
            body: Raw request body, expected to be a JSON object
                with ``name`` and ``email``

        Returns:
            The created user with its id and timestamps (sent as 201)

        Raises:
            HTTPException: 400 for an undecodable body or missing fields,
                500 if the store rejects the insert
        """
        try:
            request = CreateUserRequest.model_validate_json(body)
        except ValidationError as e:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail="invalid request body",
            ) from e

        try:
            user = self._users.create_user(request.to_entity())
        except UserValidationError as e:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e
        except Exception as e:
            logger.exception("Creating user failed")
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=str(e),
            ) from e

        return UserResponse.from_entity(user)
