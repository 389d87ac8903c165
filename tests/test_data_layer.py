"""Data layer tests against a per-test SQLite database file.

Covers:
- BookRepository operations (create, get, list, delete)
- storage constraints and error translation
- the library service wired to the real repository
"""

import asyncio

import pytest
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from src.bookshelf.core.errors import NotFoundError, PersistenceError, ValidationError
from src.bookshelf.core.models.library import (
    AddBookRequest,
    GetBookRequest,
    GetBooksRequest,
)
from src.bookshelf.core.services.database.db_session import DatabaseService
from src.bookshelf.core.services.library.library_service import LibraryService
from src.bookshelf.entities.book import Book, BookRepository, BookTable
from tests.utils import create_many_books

THREE_BOOKS = [
    ("Norse Mythology", "Neil Gaiman"),
    ("The Divine Comedy", "Dante Alighieri"),
    ("2001: A Space Odyssey", "Arthur C. Clarke"),
]


class TestBookRepository:
    """Test BookRepository against a real database."""

    @pytest.mark.asyncio
    async def test_create_book(self, book_repository: BookRepository, cleanup):
        book = Book(title="The Lean Startup", author="Eric Ries")

        await book_repository.create_book(book)
        cleanup(lambda: book_repository.delete_book(book.id))

        assert book.id != 0
        assert book.title == "The Lean Startup"
        assert book.author == "Eric Ries"

    @pytest.mark.asyncio
    async def test_get_book_by_id(self, book_repository: BookRepository, cleanup):
        book = Book(title="The Lean Startup", author="Eric Ries")
        await book_repository.create_book(book)
        cleanup(lambda: book_repository.delete_book(book.id))

        got = await book_repository.get_book_by_id(book.id)

        assert got.id == book.id
        assert got.title == "The Lean Startup"
        assert got.author == "Eric Ries"

    @pytest.mark.asyncio
    async def test_get_unknown_book(self, book_repository: BookRepository):
        with pytest.raises(NotFoundError, match="get book by id"):
            await book_repository.get_book_by_id(424242)

    @pytest.mark.asyncio
    async def test_get_books(self, book_repository: BookRepository, cleanup):
        ids = await create_many_books(book_repository, cleanup, THREE_BOOKS)

        books = await book_repository.get_books()

        assert [b.id for b in books] == ids
        assert ids == sorted(ids)
        assert [(b.title, b.author) for b in books] == THREE_BOOKS

    @pytest.mark.asyncio
    async def test_get_books_empty(self, book_repository: BookRepository):
        books = await book_repository.get_books()
        assert books == []

    @pytest.mark.asyncio
    async def test_delete_book(self, book_repository: BookRepository):
        book = Book(title="Dune", author="Frank Herbert")
        await book_repository.create_book(book)

        await book_repository.delete_book(book.id)

        with pytest.raises(NotFoundError):
            await book_repository.get_book_by_id(book.id)

    @pytest.mark.asyncio
    async def test_delete_unknown_book_is_noop(self, book_repository: BookRepository):
        await book_repository.delete_book(987654)
        await book_repository.delete_book(987654)

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("title", "author"),
        [("", "Frank Herbert"), ("Dune", "")],
    )
    async def test_empty_fields_violate_constraints(
        self, book_repository: BookRepository, title: str, author: str
    ):
        """The storage layer enforces non-empty title and author on its own."""
        book = Book(title=title, author=author)

        with pytest.raises(PersistenceError, match="^create book: ") as exc_info:
            await book_repository.create_book(book)

        assert isinstance(exc_info.value.__cause__, IntegrityError)
        assert book.id == 0
        assert await book_repository.get_books() == []

    @pytest.mark.asyncio
    async def test_round_trip_is_exact(self, book_repository: BookRepository, cleanup):
        book = Book(title="  Cien años de soledad ", author="GABRIEL García Márquez")
        await book_repository.create_book(book)
        cleanup(lambda: book_repository.delete_book(book.id))

        got = await book_repository.get_book_by_id(book.id)

        assert got == book

    @pytest.mark.asyncio
    async def test_created_at_is_stored_but_not_surfaced(
        self, database_service: DatabaseService, book_repository: BookRepository
    ):
        book = Book(title="Dune", author="Frank Herbert")
        await book_repository.create_book(book)

        async with database_service.engine.connect() as conn:
            created_at = (
                await conn.execute(select(BookTable.created_at).where(BookTable.id == book.id))
            ).scalar_one()

        assert created_at is not None
        got = await book_repository.get_book_by_id(book.id)
        assert not hasattr(got, "created_at")

    @pytest.mark.asyncio
    async def test_timeout_raises_persistence_error(self, book_repository: BookRepository):
        book = Book(title="Dune", author="Frank Herbert")
        await book_repository.create_book(book)

        with pytest.raises(PersistenceError, match="^get books: timed out") as exc_info:
            await book_repository.get_books(timeout=0)

        assert isinstance(exc_info.value.__cause__, TimeoutError)
        assert await book_repository.get_books() == [book]

    @pytest.mark.asyncio
    async def test_cancellation_propagates(self, book_repository: BookRepository):
        book = Book(title="Dune", author="Frank Herbert")
        await book_repository.create_book(book)

        task = asyncio.create_task(book_repository.get_books())
        await asyncio.sleep(0)
        task.cancel()

        with pytest.raises(asyncio.CancelledError):
            await task
        assert await book_repository.get_books() == [book]

    @pytest.mark.asyncio
    async def test_out_of_range_id_raises_persistence_error(
        self, book_repository: BookRepository
    ):
        with pytest.raises(PersistenceError, match="^get book by id: ") as exc_info:
            await book_repository.get_book_by_id(2**64)

        assert isinstance(exc_info.value.__cause__, OverflowError)

    @pytest.mark.asyncio
    async def test_repository_leaves_engine_open(
        self, database_service: DatabaseService, book_repository: BookRepository
    ):
        await book_repository.get_books()
        await book_repository.delete_book(1)

        assert await database_service.health_check()
        assert database_service.get_pool_status()["checked_out"] == 0


class TestLibraryServiceWithRepository:
    """End-to-end scenarios through the service and a real database."""

    @pytest.mark.asyncio
    async def test_add_then_get(self, library_service: LibraryService, cleanup):
        added = await library_service.add_book(
            AddBookRequest(title="Dune", author="Frank Herbert")
        )
        cleanup(lambda: library_service.store.delete_book(added.book.id))

        assert added.book.id != 0
        assert added.book.title == "Dune"
        assert added.book.author == "Frank Herbert"

        got = await library_service.get_book(GetBookRequest(id=added.book.id))
        assert got.book == added.book

        listed = await library_service.get_books(GetBooksRequest())
        assert listed.books[-1] == added.book

    @pytest.mark.asyncio
    async def test_three_books_in_insertion_order(
        self, library_service: LibraryService, cleanup
    ):
        for title, author in THREE_BOOKS:
            added = await library_service.add_book(AddBookRequest(title=title, author=author))
            cleanup(lambda book_id=added.book.id: library_service.store.delete_book(book_id))

        resp = await library_service.get_books(GetBooksRequest())

        assert [(b.title, b.author) for b in resp.books] == THREE_BOOKS

    @pytest.mark.asyncio
    async def test_get_unknown_book(self, library_service: LibraryService):
        with pytest.raises(NotFoundError, match="^get book: get book by id"):
            await library_service.get_book(GetBookRequest(id=31337))

    @pytest.mark.asyncio
    async def test_validation_happens_before_storage(self, library_service: LibraryService):
        with pytest.raises(ValidationError):
            await library_service.add_book(AddBookRequest(title="", author="Frank Herbert"))

        resp = await library_service.get_books(GetBooksRequest())
        assert resp.books == []
