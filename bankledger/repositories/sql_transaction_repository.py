from __future__ import annotations

import datetime as dt
import logging
from typing import Sequence

from sqlalchemy import Date, Integer, delete, func, select
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Mapped, mapped_column

from bankledger.db import build_session_factory, get_engine, get_session_factory, init_db
from bankledger.db_base import Base
from bankledger.domain.transaction import Transaction
from bankledger.repositories.transaction_repository import (
    DeleteResult,
    LoadResult,
    SaveResult,
    StoreStatus,
    TransactionRepository,
)


logger = logging.getLogger(__name__)


class TransactionRow(Base):
    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    amount: Mapped[int] = mapped_column(Integer, nullable=False)
    day: Mapped[dt.date] = mapped_column("date", Date, nullable=False)


class SqlTransactionRepository(TransactionRepository):
    """
    Stores transactions in the `transactions` table.
    Each call opens and closes its own session; storage faults are logged and
    turned into an UNAVAILABLE result instead of being raised.
    """

    def __init__(self, *, engine: Engine | None = None) -> None:
        # no I/O here: schema setup only happens through initialize()
        if engine is None:
            self._engine = get_engine()
            self._session_factory = get_session_factory()
        else:
            self._engine = engine
            self._session_factory = build_session_factory(engine)

    def initialize(self, *, reset: bool = False) -> bool:
        try:
            init_db(self._engine, reset=reset)
        except SQLAlchemyError as e:
            logger.exception("Error initializing database: %s", e)
            return False

        logger.info("Database initialized: table '%s' is ready.", TransactionRow.__tablename__)
        return True

    def save_transactions(self, transactions: Sequence[Transaction]) -> SaveResult:
        saved = 0
        try:
            with self._session_factory() as s:
                # one commit per row: a failure keeps the rows already written
                for tx in transactions:
                    s.add(self._to_row(tx))
                    s.commit()
                    saved += 1
        except (SQLAlchemyError, OverflowError) as e:
            # OverflowError: amount outside the driver's integer range
            logger.exception("Error saving transactions: %s", e)
            return SaveResult(saved=saved, status=StoreStatus.UNAVAILABLE, error=str(e))

        logger.info("%d transaction(s) saved to the database", saved)
        return SaveResult(saved=saved)

    def load_transactions(self) -> LoadResult:
        stmt = select(TransactionRow.amount, TransactionRow.day)
        try:
            with self._session_factory() as s:
                rows = s.execute(stmt).all()
        except SQLAlchemyError as e:
            logger.exception("Error loading transactions: %s", e)
            return LoadResult(transactions=[], status=StoreStatus.UNAVAILABLE, error=str(e))

        txs = [self._to_domain(amount, day) for amount, day in rows]
        logger.info("%d transaction(s) loaded from the database", len(txs))
        return LoadResult(transactions=txs)

    def delete_transactions_by_date(self, date: dt.date) -> DeleteResult:
        if isinstance(date, dt.datetime):
            date = date.date()

        stmt = delete(TransactionRow).where(TransactionRow.day == date)
        try:
            with self._session_factory() as s:
                result = s.execute(stmt)
                s.commit()
                deleted = int(result.rowcount or 0)
        except SQLAlchemyError as e:
            logger.exception("Error deleting transactions: %s", e)
            return DeleteResult(deleted=0, status=StoreStatus.UNAVAILABLE, error=str(e))

        logger.info("%d transaction(s) deleted for date %s", deleted, date.isoformat())
        return DeleteResult(deleted=deleted)

    def count(self) -> int:
        try:
            with self._session_factory() as s:
                return int(s.execute(select(func.count()).select_from(TransactionRow)).scalar_one())
        except SQLAlchemyError as e:
            logger.exception("Error counting transactions: %s", e)
            return 0

    @staticmethod
    def _to_row(tx: Transaction) -> TransactionRow:
        return TransactionRow(amount=int(tx.amount), day=tx.date)

    @staticmethod
    def _to_domain(amount: int, day: dt.date) -> Transaction:
        return Transaction.create(amount=int(amount), date=day)
