"""Database initialization script.

Creates the schema for development and tests. Production schemas are
managed by migrations outside this package.
"""

import asyncio

from src.bookshelf.core.services.database.db_session import DatabaseService
from src.bookshelf.runtime.logging_setup import configure_logging


async def init_db() -> None:
    """Create all database tables."""
    db_service = DatabaseService()
    try:
        await db_service.create_all()
    finally:
        await db_service.dispose()


if __name__ == "__main__":
    configure_logging()
    asyncio.run(init_db())
