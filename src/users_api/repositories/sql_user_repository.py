"""SQLAlchemy implementation of UserStore.

Uses SQLAlchemy Core with bound parameters against PostgreSQL in
production. The same code runs against SQLite, which the test suite
relies on.
"""

import logging
from datetime import datetime

from sqlalchemy import (
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    func,
    insert,
    select,
    text,
)
from sqlalchemy.engine import Engine, RowMapping

from users_api.config import Settings, get_engine
from users_api.entities import UserEntity

logger = logging.getLogger(__name__)

metadata = MetaData()

users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=False, unique=True),
    Column("created_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
    Index("idx_users_email", "email"),
)

_COLUMNS = (
    users_table.c.id,
    users_table.c.name,
    users_table.c.email,
    users_table.c.created_at,
    users_table.c.updated_at,
)


def _to_entity(row: RowMapping) -> UserEntity:
    return UserEntity(
        id=row["id"],
        name=row["name"],
        email=row["email"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


class SqlUserRepository:
    """Relational implementation of the UserStore protocol.

    This class satisfies the UserStore protocol through structural
    typing - no explicit inheritance needed.

    The engine's connection pool is shared by all request threads.
    """

    def __init__(self, engine: Engine) -> None:
        """Initialize the repository.

        Args:
            engine: SQLAlchemy engine (required).
        """
        self._engine = engine

    @classmethod
    def create(cls, settings: Settings) -> "SqlUserRepository":
        """Factory method to create SqlUserRepository from settings.

        Args:
            settings: Application settings with the db_* fields.

        Returns:
            Configured SqlUserRepository (not yet pinged)
        """
        return cls(engine=get_engine(settings))

    def ping(self) -> None:
        """Check that the database is reachable.

        Raises:
            sqlalchemy.exc.SQLAlchemyError: If no connection can be made
        """
        with self._engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Connected to %s database", self._engine.dialect.name)

    def create_schema(self) -> None:
        """Create the users table and its email index if they do not exist."""
        metadata.create_all(self._engine)

    def list_all(self) -> list[UserEntity]:
        query = select(*_COLUMNS).order_by(users_table.c.id)
        with self._engine.connect() as conn:
            rows = conn.execute(query).mappings().all()
        return [_to_entity(row) for row in rows]

    def get_by_id(self, user_id: int) -> UserEntity | None:
        query = select(*_COLUMNS).where(users_table.c.id == user_id)
        with self._engine.connect() as conn:
            row = conn.execute(query).mappings().first()
        if row is None:
            return None
        return _to_entity(row)

    def insert(self, name: str, email: str, timestamp: datetime) -> int:
        statement = insert(users_table).values(
            name=name,
            email=email,
            created_at=timestamp,
            updated_at=timestamp,
        )
        with self._engine.begin() as conn:
            result = conn.execute(statement)
            return result.inserted_primary_key[0]

    def close(self) -> None:
        self._engine.dispose()

    @property
    def engine(self) -> Engine:
        """Get the underlying engine (for testing)."""
        return self._engine
