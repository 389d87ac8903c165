from __future__ import annotations

from collections.abc import Iterable

from src.bookshelf.core.services.library.store import BookStore
from src.bookshelf.entities.book.entity import Book
from tests.fixtures.core import Cleanup


async def create_many_books(
    store: BookStore, cleanup: Cleanup, params: Iterable[tuple[str, str]]
) -> list[int]:
    """Insert ``(title, author)`` pairs in order and return their ids.

    Each book is deleted again when the test finishes.
    """
    ids: list[int] = []
    for title, author in params:
        book = Book(title=title, author=author)
        await store.create_book(book)
        cleanup(_deleter(store, book.id))
        ids.append(book.id)
    return ids


def _deleter(store: BookStore, book_id: int):
    async def _delete() -> None:
        await store.delete_book(book_id)

    return _delete
