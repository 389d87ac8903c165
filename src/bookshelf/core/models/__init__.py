"""Core models for the bookshelf services."""

from .library import (
    AddBookRequest,
    AddBookResponse,
    GetBookRequest,
    GetBookResponse,
    GetBooksRequest,
    GetBooksResponse,
)

__all__ = [
    "AddBookRequest",
    "AddBookResponse",
    "GetBookRequest",
    "GetBookResponse",
    "GetBooksRequest",
    "GetBooksResponse",
]
