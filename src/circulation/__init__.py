"""circulation: an in-memory library circulation desk.

Register users and books, lend books, take them back and charge late fees,
notifying users through every configured channel.
"""

from .catalog import Book, BookRepository, InMemoryBookRepository
from .lending import FeeCalculator, InMemoryLoanRepository, Loan, LoanRepository
from .members import InMemoryUserRepository, User, UserRepository
from .notifications import Broadcaster, EmailNotifier, Notification, Notifier, SMSNotifier
from .service import LibraryService, build_service

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # catalog
    "Book",
    "BookRepository",
    "InMemoryBookRepository",
    # members
    "User",
    "UserRepository",
    "InMemoryUserRepository",
    # lending
    "Loan",
    "LoanRepository",
    "InMemoryLoanRepository",
    "FeeCalculator",
    # notifications
    "Notification",
    "Notifier",
    "EmailNotifier",
    "SMSNotifier",
    "Broadcaster",
    # service
    "LibraryService",
    "build_service",
]
