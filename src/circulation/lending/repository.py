"""Loan repositories."""

from abc import ABC, abstractmethod
from typing import Optional

from .models import Loan


class LoanRepository(ABC):
    """Storage for loans. Loans are never removed."""

    @abstractmethod
    def add(self, loan: Loan) -> None:
        """Store a loan."""

    @abstractmethod
    def find_active_loan(self, isbn: str, user_id: int) -> Optional[Loan]:
        """Return the first unreturned loan of ``isbn`` to ``user_id``, if any."""

    @abstractmethod
    def list_all(self) -> list[Loan]:
        """Return every loan in creation order."""

    def list_active(self) -> list[Loan]:
        """Return loans that have not been returned."""
        return [l for l in self.list_all() if l.is_active]

    def list_by_user(self, user_id: int) -> list[Loan]:
        """Return every loan made to ``user_id``."""
        return [l for l in self.list_all() if l.user.user_id == user_id]


class InMemoryLoanRepository(LoanRepository):
    """List-backed loan repository."""

    def __init__(self) -> None:
        self._loans: list[Loan] = []

    def add(self, loan: Loan) -> None:
        self._loans.append(loan)

    def find_active_loan(self, isbn: str, user_id: int) -> Optional[Loan]:
        return next(
            (
                l
                for l in self._loans
                if l.book.isbn == isbn and l.user.user_id == user_id and l.is_active
            ),
            None,
        )

    def list_all(self) -> list[Loan]:
        return list(self._loans)
