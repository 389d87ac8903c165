"""Error taxonomy shared by the store and service layers."""

from __future__ import annotations


class LibraryError(Exception):
    """Base class for all bookshelf errors."""

    def wrap(self, operation: str) -> LibraryError:
        """Return a copy of this error prefixed with ``operation``.

        The caller is expected to ``raise error.wrap("...") from error`` so
        the original stays reachable through ``__cause__``.
        """
        wrapped = type(self)(f"{operation}: {self}")
        wrapped.__dict__.update(self.__dict__)
        return wrapped


class ValidationError(LibraryError):
    """A request failed a domain precondition."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field


class NotFoundError(LibraryError):
    """The requested entity does not exist."""


class PersistenceError(LibraryError):
    """The underlying storage call failed."""
