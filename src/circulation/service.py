"""Library service: the register, lend and return use cases.

The service coordinates the book, user and loan repositories, the fee
calculator and the notification broadcaster. Refusals (unknown user or book,
book already out, no active loan) are reported through return values; nothing
here raises for them.
"""

import logging
from datetime import datetime, timedelta
from typing import Iterable, Optional

from rich.console import Console

from .catalog.models import Book
from .catalog.repository import BookRepository, InMemoryBookRepository
from .config import Config, get_config
from .lending.fees import FeeCalculator
from .lending.models import Loan
from .lending.repository import InMemoryLoanRepository, LoanRepository
from .members.models import User
from .members.repository import InMemoryUserRepository, UserRepository
from .notifications.notifiers import Broadcaster, Notifier, build_notifiers

logger = logging.getLogger(__name__)

WELCOME_SUBJECT = "Welcome!"
WELCOME_MESSAGE = "You have been registered successfully."
LOAN_SUBJECT = "Loan Created"
LATE_FEE_SUBJECT = "Late Fee"


class LibraryService:
    """Circulation desk operations over in-memory repositories."""

    def __init__(
        self,
        books: BookRepository,
        users: UserRepository,
        loans: LoanRepository,
        notifiers: Iterable[Notifier],
        fee_calculator: Optional[FeeCalculator] = None,
        currency: str = "R$",
    ):
        """Initialize library service.

        Args:
            books: Book repository
            users: User repository
            loans: Loan repository
            notifiers: Channels every notification is sent through, in order
            fee_calculator: Late fee policy (default: 1.0 per day)
            currency: Label printed before fee amounts
        """
        self.books = books
        self.users = users
        self.loans = loans
        self.broadcaster = Broadcaster(notifiers)
        self.fee_calculator = fee_calculator or FeeCalculator()
        self.currency = currency

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register_user(self, name: str, user_id: int) -> User:
        """Register a user and send them a welcome notification.

        Duplicate ids are not rejected; lookups keep returning the first
        user registered under an id.
        """
        user = User(name=name, user_id=user_id)
        self.users.add(user)
        logger.info("Registered user %s (id=%s)", name, user_id)
        self.broadcaster.notify(user.name, WELCOME_SUBJECT, WELCOME_MESSAGE)
        return user

    def register_book(self, title: str, author: str, isbn: str) -> Book:
        """Add an available book to the catalog."""
        book = Book(title=title, author=author, isbn=isbn)
        self.books.add(book)
        logger.info("Registered book '%s' (isbn=%s)", title, isbn)
        return book

    # -------------------------------------------------------------------------
    # Circulation
    # -------------------------------------------------------------------------

    def lend_book(
        self,
        user_id: int,
        isbn: str,
        days: int,
        now: Optional[datetime] = None,
    ) -> bool:
        """Lend a book to a user for ``days`` days.

        ``days`` is taken as given; zero or negative values yield a due date
        at or before the loan date.

        Args:
            user_id: Borrowing user
            isbn: Book to lend
            days: Loan length in days
            now: Loan date (default: current time)

        Returns:
            True if the loan was created, False if the user or book is
            unknown or the book is already out
        """
        user = self.users.find_by_id(user_id)
        book = self.books.find_by_isbn(isbn)

        if user is None or book is None or not book.available:
            logger.info(
                "Lend refused: user=%s isbn=%s (user found=%s, book found=%s, available=%s)",
                user_id,
                isbn,
                user is not None,
                book is not None,
                book.available if book else None,
            )
            return False

        now = now or datetime.now()
        loan = Loan(
            book=book,
            user=user,
            loan_date=now,
            due_date=now + timedelta(days=days),
        )
        book.available = False
        self.loans.add(loan)
        logger.info("Lent isbn=%s to user=%s, due %s", isbn, user_id, loan.due_date.isoformat())

        self.broadcaster.notify(user.name, LOAN_SUBJECT, f"Book: {book.title}")
        return True

    def return_book(
        self,
        isbn: str,
        user_id: int,
        now: Optional[datetime] = None,
    ) -> Optional[float]:
        """Take back a lent book and charge any late fee.

        Args:
            isbn: Book being returned
            user_id: User returning it
            now: Return date (default: current time)

        Returns:
            The fee (0.0 when on time), or None if the user has no active
            loan of this book
        """
        loan = self.loans.find_active_loan(isbn, user_id)
        if loan is None:
            logger.info("Return refused: no active loan of isbn=%s for user=%s", isbn, user_id)
            return None

        loan.mark_returned(now or datetime.now())
        fee = self.fee_calculator.compute_fee(loan)
        logger.info("Returned isbn=%s from user=%s, fee=%.2f", isbn, user_id, fee)

        if fee > 0:
            self.broadcaster.notify(
                loan.user.name,
                LATE_FEE_SUBJECT,
                f"Fee amount: {self.format_fee(fee)}",
            )

        return fee

    def format_fee(self, fee: float) -> str:
        """Render an amount with the configured currency label."""
        return f"{self.currency} {fee:.2f}"


def build_service(
    config: Optional[Config] = None,
    console: Optional[Console] = None,
) -> LibraryService:
    """Wire a service with fresh in-memory repositories.

    Args:
        config: Settings to use (default: loaded from the environment)
        console: Output sink for notifications (default: stdout)

    Raises:
        ValueError: If the config names an unknown notifier channel
    """
    config = config or get_config()
    return LibraryService(
        books=InMemoryBookRepository(),
        users=InMemoryUserRepository(),
        loans=InMemoryLoanRepository(),
        notifiers=build_notifiers(config.notifiers, console),
        fee_calculator=FeeCalculator(config.daily_fee),
        currency=config.currency,
    )
