"""Route table.

Routes are registered on an APIRouter built per application, so there
is no process-wide registration state.
"""

from typing import Annotated

from fastapi import APIRouter, Query, Request, status
from starlette.concurrency import run_in_threadpool

from users_api.dto import HealthResponse, UserResponse
from users_api.handlers import UserHandler, health


def build_router(handler: UserHandler) -> APIRouter:
    """Build the router that maps paths and methods to handlers.

    Handlers are synchronous; FastAPI runs plain ``def`` endpoints in
    its threadpool, one task per request.

    Args:
        handler: The user handler to dispatch to

    Returns:
        APIRouter with /health, /users and /user registered
    """
    router = APIRouter()

    @router.get("/health", response_model=HealthResponse)
    def get_health() -> HealthResponse:
        return health()

    @router.get("/users", response_model=list[UserResponse])
    def list_users() -> list[UserResponse]:
        return handler.list_users()

    @router.post("/users", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
    async def create_user(request: Request) -> UserResponse:
        # Body is decoded by the handler so a bad payload yields 400, not 422
        body = await request.body()
        return await run_in_threadpool(handler.create_user, body)

    @router.get("/user", response_model=UserResponse)
    def get_user(user_id: Annotated[str | None, Query(alias="id")] = None) -> UserResponse:
        return handler.get_user(user_id)

    return router
