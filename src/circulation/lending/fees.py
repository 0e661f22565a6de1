"""Late fee calculation."""

from datetime import datetime

from .models import Loan, days_late

DEFAULT_DAILY_RATE = 1.0


class FeeCalculator:
    """Computes the late fee owed on a returned loan."""

    def __init__(self, daily_rate: float = DEFAULT_DAILY_RATE):
        """Initialize calculator.

        Args:
            daily_rate: Amount charged per whole day past the due date
        """
        self.daily_rate = daily_rate

    def fee_between(self, due_date: datetime, return_date: datetime) -> float:
        """Fee for returning on ``return_date`` something due on ``due_date``."""
        return days_late(due_date, return_date) * self.daily_rate

    def compute_fee(self, loan: Loan) -> float:
        """Compute the fee for a loan.

        Loans returned on or before the due date, and loans not yet
        returned, cost nothing.

        Args:
            loan: Loan with its return date recorded

        Returns:
            Whole days late multiplied by the daily rate, or 0.0
        """
        if loan.return_date is None:
            return 0.0
        return self.fee_between(loan.due_date, loan.return_date)
