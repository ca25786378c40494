"""Async PostgreSQL engine and sessions.

Repositories run SQLAlchemy Core statements through a request-scoped
AsyncSession; the session owns the transaction.
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from blog.config import DatabaseSettings, Settings


def _connect_args(database: DatabaseSettings) -> dict:
    """asyncpg connection options."""
    return {
        "server_settings": {
            "application_name": database.application_name,
            "statement_timeout": str(database.statement_timeout_ms),
        }
    }


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured database.

    Args:
        settings: Application settings

    Returns:
        Async engine with a bounded connection pool
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        connect_args=_connect_args(database),
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the factory for request sessions.

    Rows are mapped to domain models by hand, so nothing needs expiring
    after commit.
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
