from __future__ import annotations

import datetime as dt
import logging
from typing import Callable

from bankledger.domain.transaction import Transaction
from bankledger.engine.running_balance import total
from bankledger.repositories.transaction_repository import (
    LoadResult,
    SaveResult,
    TransactionRepository,
)


logger = logging.getLogger(__name__)


def _is_positive_int(amount: object) -> bool:
    return isinstance(amount, int) and not isinstance(amount, bool) and amount > 0


class BankAccount:
    """
    Domain object: running balance plus transaction history.

    The balance is tracked on its own and is not derived from the transaction
    list. After load_transactions() the two can disagree; ledger_balance shows
    the sum of the list and reconcile_balance() aligns the balance on it.
    """

    def __init__(
        self,
        repository: TransactionRepository,
        *,
        today: Callable[[], dt.date] = dt.date.today,
    ) -> None:
        self._repository = repository
        self._today = today
        self._balance = 0
        self._transactions: list[Transaction] = []

    @property
    def balance(self) -> int:
        return self._balance

    @property
    def transactions(self) -> tuple[Transaction, ...]:
        return tuple(self._transactions)

    @property
    def repository(self) -> TransactionRepository:
        return self._repository

    @property
    def ledger_balance(self) -> int:
        return total(self._transactions)

    def deposit(self, amount: int) -> bool:
        if not _is_positive_int(amount):
            logger.info("Invalid deposit amount: %r", amount)
            return False

        self._balance += amount
        self._add_transaction(amount)
        return True

    def withdraw(self, amount: int) -> bool:
        if not _is_positive_int(amount) or amount > self._balance:
            logger.info("Insufficient funds or invalid amount: %r (balance=%d)", amount, self._balance)
            return False

        self._balance -= amount
        self._add_transaction(-amount)
        return True

    def save_transactions(self) -> SaveResult:
        # the in-memory list is kept: saving again inserts the same rows again
        return self._repository.save_transactions(list(self._transactions))

    def load_transactions(self) -> LoadResult:
        result = self._repository.load_transactions()
        self._transactions = list(result.transactions)
        return result

    def reconcile_balance(self) -> int:
        self._balance = self.ledger_balance
        return self._balance

    def _add_transaction(self, amount: int) -> None:
        self._transactions.append(Transaction.create(amount=amount, date=self._today()))
