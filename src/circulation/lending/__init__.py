"""Book lending module.

Provides functionality for:
- Loan records linking a book to a user
- Loan repositories (abstract and in-memory)
- Late fee calculation
"""

from .fees import DEFAULT_DAILY_RATE, FeeCalculator
from .models import Loan
from .repository import InMemoryLoanRepository, LoanRepository
from .schemas import LoanStatus, LoanSummary

__all__ = [
    "DEFAULT_DAILY_RATE",
    "FeeCalculator",
    "Loan",
    "LoanRepository",
    "InMemoryLoanRepository",
    "LoanStatus",
    "LoanSummary",
]
