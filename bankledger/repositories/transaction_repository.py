from __future__ import annotations

from dataclasses import dataclass, field
import datetime as dt
from enum import Enum
from typing import Optional, Protocol, Sequence, runtime_checkable

from bankledger.domain.transaction import Transaction


class StoreStatus(str, Enum):
    OK = "OK"
    UNAVAILABLE = "UNAVAILABLE"


@dataclass(frozen=True)
class SaveResult:
    saved: int = 0
    status: StoreStatus = StoreStatus.OK
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == StoreStatus.OK


@dataclass(frozen=True)
class LoadResult:
    transactions: list[Transaction] = field(default_factory=list)
    status: StoreStatus = StoreStatus.OK
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == StoreStatus.OK


@dataclass(frozen=True)
class DeleteResult:
    deleted: int = 0
    status: StoreStatus = StoreStatus.OK
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == StoreStatus.OK


class TransactionRepository(Protocol):
    def save_transactions(self, transactions: Sequence[Transaction]) -> SaveResult:
        """Insert every transaction as a new row. No dedup, no clearing."""
        ...

    def load_transactions(self) -> LoadResult:
        """All stored transactions, in whatever order the store returns them."""
        ...


@runtime_checkable
class TransactionPurger(Protocol):
    def delete_transactions_by_date(self, date: dt.date) -> DeleteResult:
        ...
