"""Book record for the catalog."""

from dataclasses import dataclass


@dataclass(eq=False)
class Book:
    """A catalogued book.

    Compared by identity: two registrations with the same ISBN are still
    two different records.
    """

    title: str
    author: str
    isbn: str
    available: bool = True

    def __repr__(self) -> str:
        return f"<Book(isbn={self.isbn}, title='{self.title}', available={self.available})>"
