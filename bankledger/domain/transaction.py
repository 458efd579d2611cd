from __future__ import annotations

from dataclasses import dataclass
import datetime as dt


@dataclass(frozen=True)
class Transaction:
    """
    One ledger movement.
    - amount > 0: deposit, amount < 0: withdrawal
    - date: calendar day only, no time component
    """
    amount: int
    date: dt.date

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValueError("amount must be an integer")
        # dt.datetime is a subclass of dt.date
        if isinstance(self.date, dt.datetime) or not isinstance(self.date, dt.date):
            raise ValueError("date must be a date")

    @staticmethod
    def create(*, amount: int, date: dt.date | dt.datetime) -> "Transaction":
        if isinstance(date, dt.datetime):
            date = date.date()
        return Transaction(amount=amount, date=date)

    @property
    def is_deposit(self) -> bool:
        return self.amount > 0

    @property
    def is_withdrawal(self) -> bool:
        return self.amount < 0

    def describe(self) -> str:
        return f"Amount: {self.amount}, Date: {self.date.isoformat()}"
