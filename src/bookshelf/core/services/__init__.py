"""Core services exports."""

from .database.db_session import DatabaseService
from .library.library_service import LibraryService
from .library.store import BookStore

__all__ = [
    "BookStore",
    "DatabaseService",
    "LibraryService",
]
