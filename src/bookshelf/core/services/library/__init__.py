from .library_service import LibraryService
from .store import BookStore

__all__ = ["BookStore", "LibraryService"]
