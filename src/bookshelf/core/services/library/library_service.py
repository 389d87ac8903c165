"""Library service: validation and delegation over a book store."""

from loguru import logger

from src.bookshelf.core.errors import LibraryError, ValidationError
from src.bookshelf.core.models.library import (
    AddBookRequest,
    AddBookResponse,
    GetBookRequest,
    GetBookResponse,
    GetBooksRequest,
    GetBooksResponse,
)
from src.bookshelf.entities.book.entity import Book

from .store import BookStore


class LibraryService:
    """Request/response operations over the book catalogue.

    The service only knows the ``BookStore`` interface, so any backend
    (or a test double) can be injected.
    """

    def __init__(self, store: BookStore):
        self._store = store

    @property
    def store(self) -> BookStore:
        return self._store

    async def add_book(self, request: AddBookRequest) -> AddBookResponse:
        """Validate and persist a new book.

        Args:
            request: Title and author of the book to add

        Returns:
            Response holding the persisted book with its assigned id

        Raises:
            ValidationError: Title or author is empty
            PersistenceError: The store failed to save the book
        """
        if request.title == "":
            raise ValidationError("add book: title is required", field="title")
        if request.author == "":
            raise ValidationError("add book: author is required", field="author")

        book = Book(title=request.title, author=request.author)
        try:
            await self._store.create_book(book)
        except LibraryError as e:
            raise e.wrap("add book") from e

        logger.info(
            "Book added", book_id=book.id, title=book.title, author=book.author
        )
        return AddBookResponse(book=book)

    async def get_book(self, request: GetBookRequest) -> GetBookResponse:
        """Fetch a single book by id.

        Raises:
            NotFoundError: No book has the requested id
        """
        try:
            book = await self._store.get_book_by_id(request.id)
        except LibraryError as e:
            raise e.wrap("get book") from e
        return GetBookResponse(book=book)

    async def get_books(self, request: GetBooksRequest) -> GetBooksResponse:
        try:
            books = await self._store.get_books()
        except LibraryError as e:
            raise e.wrap("get books") from e
        return GetBooksResponse(books=books)
