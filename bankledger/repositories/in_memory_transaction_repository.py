from __future__ import annotations

from dataclasses import dataclass, field
import datetime as dt
from typing import Sequence

from bankledger.domain.transaction import Transaction
from bankledger.repositories.transaction_repository import DeleteResult, LoadResult, SaveResult


@dataclass
class InMemoryTransactionRepository:
    """
    Repo en mémoire.
    - Même sémantique que le repo SQL (ajout sans dédoublonnage)
    - Facile à tester, pas de base de données
    """
    _items: list[Transaction] = field(default_factory=list)

    def save_transactions(self, transactions: Sequence[Transaction]) -> SaveResult:
        items = list(transactions)
        self._items.extend(items)
        return SaveResult(saved=len(items))

    def load_transactions(self) -> LoadResult:
        # fresh list: the caller owns what it gets back
        return LoadResult(transactions=list(self._items))

    def delete_transactions_by_date(self, date: dt.date) -> DeleteResult:
        if isinstance(date, dt.datetime):
            date = date.date()

        kept = [t for t in self._items if t.date != date]
        deleted = len(self._items) - len(kept)
        self._items = kept
        return DeleteResult(deleted=deleted)

    def count(self) -> int:
        return len(self._items)
