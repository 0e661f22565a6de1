"""Book repositories."""

from abc import ABC, abstractmethod
from typing import Optional

from .models import Book


class BookRepository(ABC):
    """Storage for catalogued books."""

    @abstractmethod
    def add(self, book: Book) -> None:
        """Store a book."""

    @abstractmethod
    def find_by_isbn(self, isbn: str) -> Optional[Book]:
        """Return the first book registered under ``isbn``, if any."""

    @abstractmethod
    def list_all(self) -> list[Book]:
        """Return every book in registration order."""


class InMemoryBookRepository(BookRepository):
    """List-backed book repository.

    Duplicate ISBNs are accepted; lookups return the earliest registration.
    """

    def __init__(self) -> None:
        self._books: list[Book] = []

    def add(self, book: Book) -> None:
        self._books.append(book)

    def find_by_isbn(self, isbn: str) -> Optional[Book]:
        return next((b for b in self._books if b.isbn == isbn), None)

    def list_all(self) -> list[Book]:
        return list(self._books)
