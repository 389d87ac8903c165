"""Database engine shared by every repository."""

from typing import Any

from loguru import logger
from sqlalchemy import StaticPool, text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlmodel import SQLModel

from src.bookshelf.runtime.config.config_data import ConfigData, DatabaseConfig
from src.bookshelf.runtime.context import get_config


class DatabaseService:
    """Owns the async engine (and its connection pool).

    Repositories borrow ``engine``; only this service disposes it.

    An in-memory SQLite database lives on a single connection. SQLAlchemy
    discards a connection whose statement was cancelled or timed out, and
    the database goes with it, so anything that must survive a cancelled
    call belongs in a file-backed or server database.
    """

    def __init__(self, config: ConfigData | None = None):
        main_config = config or get_config()
        db_config = main_config.database
        self._config = db_config

        logger.info(
            "Configuring database engine for environment: {}",
            main_config.app.environment,
        )
        engine_kwargs = self._get_engine_kwargs(db_config, main_config.app.environment)
        self._engine: AsyncEngine = create_async_engine(db_config.url, **engine_kwargs)
        logger.info(
            "Database engine initialized",
            backend=db_config.backend,
            pool_size=db_config.pool_size,
        )

    @property
    def engine(self) -> AsyncEngine:
        return self._engine

    @property
    def statement_timeout(self) -> float | None:
        return self._config.statement_timeout

    @staticmethod
    def _get_engine_kwargs(db_config: DatabaseConfig, environment: str) -> dict[str, Any]:
        """Get backend-specific engine arguments."""
        engine_kwargs: dict[str, Any] = {"echo": db_config.echo}

        if db_config.backend == "sqlite":
            # aiosqlite runs the connection on a worker thread
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if db_config.is_memory:
                # One connection holds the whole database; losing it loses the data
                engine_kwargs["poolclass"] = StaticPool
            if environment == "production":
                logger.warning(
                    "SQLite is not recommended for production use. "
                    "Consider PostgreSQL for better performance and reliability."
                )
            return engine_kwargs

        engine_kwargs.update(
            {
                "pool_size": db_config.pool_size,
                "max_overflow": db_config.max_overflow,
                "pool_timeout": db_config.pool_timeout,
                "pool_recycle": db_config.pool_recycle,
                "pool_pre_ping": True,
            }
        )
        return engine_kwargs

    async def create_all(self) -> None:
        """Create all tables registered on the SQLModel metadata."""
        from src.bookshelf.entities.book.table import BookTable  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
        logger.info("Database initialized with tables.")

    async def drop_all(self) -> None:
        from src.bookshelf.entities.book.table import BookTable  # noqa: F401

        async with self._engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.drop_all)

    async def health_check(self) -> bool:
        """Perform a health check on the database connection."""
        try:
            async with self._engine.connect() as connection:
                await connection.execute(text("SELECT 1"))
                return True
        except Exception as e:
            logger.error(
                "Database health check failed",
                error_type=type(e).__name__,
                error_message=str(e),
            )
            return False

    def get_pool_status(self) -> dict:
        """Get current connection pool status for monitoring."""
        pool = self._engine.pool
        return {
            "size": getattr(pool, "size", lambda: 0)(),
            "checked_in": getattr(pool, "checkedin", lambda: 0)(),
            "checked_out": getattr(pool, "checkedout", lambda: 0)(),
            "overflow": getattr(pool, "overflow", lambda: 0)(),
        }

    async def dispose(self) -> None:
        """Close every pooled connection."""
        await self._engine.dispose()
