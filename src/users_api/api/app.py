"""FastAPI application factory."""

import logging
from collections.abc import Iterable
from contextlib import asynccontextmanager
from typing import Protocol

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from users_api.api.routes import build_router
from users_api.dto import ErrorResponse
from users_api.handlers import UserHandler

logger = logging.getLogger(__name__)


class Closeable(Protocol):
    def close(self) -> None: ...


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render every HTTP error as ``{"error": detail}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(error=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


def create_app(handler: UserHandler, resources: Iterable[Closeable] = ()) -> FastAPI:
    """Create the FastAPI application.

    Args:
        handler: Fully wired user handler
        resources: Connections to close on shutdown (store, cache)

    Returns:
        The configured FastAPI app
    """
    to_close = list(resources)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Close store and cache connections on shutdown."""
        yield
        for resource in to_close:
            resource.close()
        logger.info("Users API shut down")

    app = FastAPI(
        title="Users API",
        description="Users CRUD service backed by PostgreSQL with a Redis read-through cache",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.include_router(build_router(handler))
    app.add_exception_handler(StarletteHTTPException, http_error_handler)  # type: ignore[arg-type]
    return app
