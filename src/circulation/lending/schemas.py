"""Pydantic schemas for reporting on loans."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel

from .models import Loan


class LoanStatus(str, Enum):
    """Status of a loan."""

    ACTIVE = "active"
    OVERDUE = "overdue"
    RETURNED = "returned"


class LoanSummary(BaseModel):
    """Summary of a loan for listing."""

    isbn: str
    book_title: str
    user_id: int
    user_name: str
    status: LoanStatus
    loan_date: datetime
    due_date: datetime
    return_date: Optional[datetime] = None
    days_overdue: int = 0

    @classmethod
    def from_loan(cls, loan: Loan, now: Optional[datetime] = None) -> "LoanSummary":
        """Build a summary from a loan record."""
        if not loan.is_active:
            status = LoanStatus.RETURNED
        elif loan.is_overdue(now):
            status = LoanStatus.OVERDUE
        else:
            status = LoanStatus.ACTIVE

        return cls(
            isbn=loan.book.isbn,
            book_title=loan.book.title,
            user_id=loan.user.user_id,
            user_name=loan.user.name,
            status=status,
            loan_date=loan.loan_date,
            due_date=loan.due_date,
            return_date=loan.return_date,
            days_overdue=loan.days_overdue(now),
        )
