"""Request and response shapes for the library service.

Each operation takes one request model and returns one response model so
the signature stays stable as parameters are added. Transport layers
translate into and out of these shapes.
"""

from pydantic import BaseModel, Field

from src.bookshelf.entities.book.entity import Book


class AddBookRequest(BaseModel):
    """Request to add a book to the catalogue."""

    title: str = Field(default="", description="Title of the book")
    author: str = Field(default="", description="Author of the book")


class AddBookResponse(BaseModel):
    book: Book = Field(description="The persisted book, including its id")


class GetBookRequest(BaseModel):
    id: int = Field(
        ge=-(2**63), le=2**63 - 1, description="Identifier of the book to fetch"
    )


class GetBookResponse(BaseModel):
    book: Book


class GetBooksRequest(BaseModel):
    """Request for the full catalogue. No filters or pagination yet."""


class GetBooksResponse(BaseModel):
    books: list[Book] = Field(default_factory=list)
