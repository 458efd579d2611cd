from __future__ import annotations

import argparse
import logging
from typing import Sequence

from bankledger.console import ConsoleMenu
from bankledger.domain.account import BankAccount
from bankledger.logging_config import setup_logging
from bankledger.repositories.sql_transaction_repository import SqlTransactionRepository
from bankledger.settings import get_settings


logger = logging.getLogger("bankledger")


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="bankledger", description="Console bank account ledger.")
    parser.add_argument(
        "--reset",
        action="store_true",
        help="drop and recreate the transactions table before starting (deletes stored data)",
    )
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(settings.log_level)

    repo = SqlTransactionRepository()
    reset = args.reset or settings.reset_on_start
    if not repo.initialize(reset=reset):
        # keep going: every storage call degrades on its own
        logger.warning("Database not initialized, storage operations will report errors")
    elif reset:
        print("Database initialized: table 'transactions' is ready.")

    account = BankAccount(repo)
    return ConsoleMenu(account).run()


if __name__ == "__main__":
    raise SystemExit(main())
