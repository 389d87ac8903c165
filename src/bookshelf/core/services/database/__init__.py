from .db_session import DatabaseService

__all__ = ["DatabaseService"]
