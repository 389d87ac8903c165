"""Book repository backed by a relational database."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from src.bookshelf.core.errors import NotFoundError, PersistenceError
from src.bookshelf.core.services.library.store import BookStore

from .entity import Book
from .table import BookTable

T = TypeVar("T")


class BookRepository(BookStore):
    """Data-access layer for books.

    The repository borrows a shared engine (and therefore its connection
    pool). It never disposes the engine; whoever created it owns that.
    """

    def __init__(self, engine: AsyncEngine, timeout: float | None = None) -> None:
        self._engine = engine
        self._timeout = timeout
        self._sessions = async_sessionmaker(engine, expire_on_commit=False)

    async def create_book(self, book: Book, *, timeout: float | None = None) -> None:
        async def _insert(session: AsyncSession) -> int:
            row = BookTable(title=book.title, author=book.author)
            session.add(row)
            await session.commit()
            return row.id

        book.id = await self._run("create book", _insert, timeout)

    async def delete_book(self, book_id: int, *, timeout: float | None = None) -> None:
        async def _delete(session: AsyncSession) -> None:
            await session.execute(delete(BookTable).where(BookTable.id == book_id))
            await session.commit()

        await self._run("delete book", _delete, timeout)

    async def get_book_by_id(
        self, book_id: int, *, timeout: float | None = None
    ) -> Book:
        async def _select(session: AsyncSession) -> Book:
            statement = select(BookTable.id, BookTable.title, BookTable.author).where(
                BookTable.id == book_id
            )
            row = (await session.execute(statement)).one_or_none()
            if row is None:
                raise NotFoundError(f"get book by id: no book with id {book_id}")
            return Book.model_validate(row, from_attributes=True)

        return await self._run("get book by id", _select, timeout)

    async def get_books(self, *, timeout: float | None = None) -> list[Book]:
        async def _select_all(session: AsyncSession) -> list[Book]:
            statement = select(BookTable.id, BookTable.title, BookTable.author).order_by(
                BookTable.id.asc()
            )
            rows = (await session.execute(statement)).all()
            return [Book.model_validate(row, from_attributes=True) for row in rows]

        return await self._run("get books", _select_all, timeout)

    async def _run(
        self,
        operation: str,
        work: Callable[[AsyncSession], Awaitable[T]],
        timeout: float | None,
    ) -> T:
        """Run ``work`` in a short-lived session under the statement timeout.

        The session (and its pooled connection) is released on every exit
        path. Driver failures and timeouts become ``PersistenceError``.
        """
        limit = self._timeout if timeout is None else timeout
        try:
            async with asyncio.timeout(limit):
                async with self._sessions() as session:
                    return await work(session)
        except TimeoutError as exc:
            raise PersistenceError(f"{operation}: timed out after {limit} seconds") from exc
        except (SQLAlchemyError, OSError, OverflowError) as exc:
            raise PersistenceError(f"{operation}: {exc}") from exc
