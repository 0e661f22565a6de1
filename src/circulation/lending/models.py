"""Loan record."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..catalog.models import Book
from ..members.models import User


def days_late(due_date: datetime, return_date: datetime) -> int:
    """Whole days between the due date and a later return, else 0.

    A book returned 1 day and 23 hours late counts as one day.
    """
    if return_date <= due_date:
        return 0
    return (return_date - due_date).days


@dataclass(eq=False)
class Loan:
    """A book lent to a user.

    ``book`` and ``user`` are the same objects the repositories hold, so a
    change to ``book.available`` is seen through the loan and the catalog alike.
    """

    book: Book
    user: User
    loan_date: datetime
    due_date: datetime
    return_date: Optional[datetime] = None

    def __repr__(self) -> str:
        return (
            f"<Loan(isbn={self.book.isbn}, user_id={self.user.user_id}, "
            f"due={self.due_date.isoformat()}, active={self.is_active})>"
        )

    @property
    def is_active(self) -> bool:
        """A loan stays active until a return date is recorded."""
        return self.return_date is None

    def is_overdue(self, now: Optional[datetime] = None) -> bool:
        """Check if an active loan is past its due date."""
        now = now or datetime.now()
        return self.is_active and now > self.due_date

    def days_overdue(self, now: Optional[datetime] = None) -> int:
        """Whole days past due (0 if not overdue).

        Uses the return date for returned loans, ``now`` otherwise.
        """
        return days_late(self.due_date, self.return_date or now or datetime.now())

    def mark_returned(self, when: Optional[datetime] = None) -> None:
        self.return_date = when or datetime.now()
        self.book.available = True
