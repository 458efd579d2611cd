from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from bankledger.domain.transaction import Transaction


@dataclass(frozen=True)
class TransactionWithBalance:
    transaction: Transaction
    balance_after: int


def total(transactions: Iterable[Transaction]) -> int:
    return sum(t.amount for t in transactions)


def compute_running_balance(
    transactions: Iterable[Transaction],
    *,
    opening_balance: int = 0,
) -> list[TransactionWithBalance]:
    # order is kept as given: transactions carry no sequence to sort on
    balance = opening_balance
    out: list[TransactionWithBalance] = []
    for t in transactions:
        balance = balance + t.amount
        out.append(TransactionWithBalance(transaction=t, balance_after=balance))

    return out
