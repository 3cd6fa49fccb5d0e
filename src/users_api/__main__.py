"""Process entry point.

Builds the store and cache connectors, verifies both are reachable,
wires service -> handler -> router and serves until interrupted.
"""

import logging
import sys

import uvicorn
from sqlalchemy.exc import SQLAlchemyError

from users_api.api import create_app
from users_api.config import get_settings
from users_api.errors import CacheError
from users_api.handlers import UserHandler
from users_api.logging_config import setup_logging
from users_api.repositories import RedisCache, SqlUserRepository
from users_api.services import UserService

logger = logging.getLogger("users_api")


def main() -> None:
    """Run the users API server."""
    settings = get_settings()
    setup_logging(settings.log_level)

    store = SqlUserRepository.create(settings)
    try:
        store.ping()
    except SQLAlchemyError as e:
        logger.error("Failed to connect to database: %s", e)
        sys.exit(1)

    cache = RedisCache.create(settings)
    try:
        cache.ping()
    except CacheError as e:
        logger.error("%s", e)
        store.close()
        sys.exit(1)

    service = UserService(store=store, cache=cache)
    handler = UserHandler(user_service=service)
    app = create_app(handler, resources=(store, cache))

    logger.info("Server running on %s:%s", settings.api_host, settings.port)
    uvicorn.run(app, host=settings.api_host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
