#!/usr/bin/env python3
"""
Initial schema script for the users API.

Creates the users table and its email index in the database named by
the DB_* environment variables (or .env). Safe to run repeatedly.
"""

import sys

from sqlalchemy.exc import SQLAlchemyError

from users_api.config import get_settings
from users_api.logging_config import get_logger, setup_logging
from users_api.repositories import SqlUserRepository

logger = get_logger("users_api.init_db")


def main() -> None:
    """Create the schema."""
    settings = get_settings()
    setup_logging(settings.log_level)

    store = SqlUserRepository.create(settings)
    try:
        store.ping()
        store.create_schema()
    except SQLAlchemyError as e:
        logger.error("Schema creation failed: %s", e)
        sys.exit(1)
    finally:
        store.close()

    logger.info("Schema ready on %s:%s/%s", settings.db_host, settings.db_port, settings.db_name)


if __name__ == "__main__":
    main()
