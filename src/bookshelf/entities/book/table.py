"""Book database table model."""

from datetime import datetime

import sqlalchemy as sa
from sqlmodel import Field, SQLModel

# BIGINT on PostgreSQL; SQLite only auto-increments an INTEGER primary key.
BigIntId = sa.BigInteger().with_variant(sa.Integer(), "sqlite")


class BookTable(SQLModel, table=True):
    """Database persistence model for books.

    This represents how the Book entity is stored in the database. It
    carries ``created_at``, which the domain entity deliberately omits.
    """

    __tablename__ = "books"
    __table_args__ = (
        sa.CheckConstraint("length(title) > 0", name="books_title_not_empty"),
        sa.CheckConstraint("length(author) > 0", name="books_author_not_empty"),
        {"comment": "User-submitted books that can be rated"},
    )

    id: int | None = Field(
        default=None,
        sa_column=sa.Column(
            BigIntId,
            primary_key=True,
            autoincrement=True,
            comment="A unique identifier for the book",
        ),
    )
    title: str = Field(
        sa_column=sa.Column(sa.Text, nullable=False, comment="The title of the book"),
    )
    author: str = Field(
        sa_column=sa.Column(sa.Text, nullable=False, comment="The author of the book"),
    )
    created_at: datetime | None = Field(
        default=None,
        sa_column=sa.Column(
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            comment="The time the book was added to the database",
        ),
    )
