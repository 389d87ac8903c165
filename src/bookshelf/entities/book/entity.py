"""Entity: Book."""

from typing import Any

from pydantic import BaseModel, Field


class Book(BaseModel):
    """Book entity representing a catalogued book.

    An ``id`` of 0 means the book has never been persisted; the store
    assigns the real identifier at insert time.
    """

    id: int = Field(default=0, description="Identifier assigned by the store")
    title: str = Field(description="Title")
    author: str = Field(description="Author")

    @property
    def is_persisted(self) -> bool:
        return self.id != 0

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Book):
            return False

        return (
            self.id == other.id
            and self.title == other.title
            and self.author == other.author
        )

    def __hash__(self) -> int:
        return hash((self.id, self.title, self.author))
