"""Entities organized by business concept.

Each entity package keeps together:
- entity.py: domain model
- table.py: database persistence model
- repository.py: data access layer
"""

from .book import Book, BookRepository, BookTable

__all__ = ["Book", "BookRepository", "BookTable"]
