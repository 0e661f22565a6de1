"""Book catalog module.

Provides:
- The Book record
- Book repositories (abstract and in-memory)
"""

from .models import Book
from .repository import BookRepository, InMemoryBookRepository

__all__ = [
    "Book",
    "BookRepository",
    "InMemoryBookRepository",
]
