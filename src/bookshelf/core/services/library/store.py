"""Store capability consumed by the library service."""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.bookshelf.entities.book.entity import Book


class BookStore(ABC):
    """Abstract interface for book persistence backends."""

    @abstractmethod
    async def create_book(self, book: Book, *, timeout: float | None = None) -> None:
        """Persist a new book.

        Args:
            book: Book with title and author set; its ``id`` is assigned
                in place once the row exists.
            timeout: Seconds to wait before aborting, ``None`` for the
                backend default.
        """
        pass

    @abstractmethod
    async def delete_book(self, book_id: int, *, timeout: float | None = None) -> None:
        """Delete a book. Deleting an unknown id is not an error."""
        pass

    @abstractmethod
    async def get_book_by_id(
        self, book_id: int, *, timeout: float | None = None
    ) -> Book:
        """Return a single book.

        Raises:
            NotFoundError: No book has this id.
        """
        pass

    @abstractmethod
    async def get_books(self, *, timeout: float | None = None) -> list[Book]:
        """Return every book ordered by ascending id."""
        pass
