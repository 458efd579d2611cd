from __future__ import annotations

import datetime as dt
import sys
from typing import Callable, Optional, TextIO

from bankledger.domain.account import BankAccount
from bankledger.engine.running_balance import compute_running_balance
from bankledger.repositories.transaction_repository import TransactionPurger


MENU = (
    "\n1: Check Balance"
    "\n2: Deposit"
    "\n3: Withdraw"
    "\n4: Show All Transactions"
    "\n5: Save Transactions"
    "\n6: Load Transactions"
    "\n7: Delete Transactions by Date"
    "\n0: Exit"
)

DATE_FORMAT = "%Y-%m-%d"


def parse_date(raw: str) -> dt.date:
    """YYYY-MM-DD -> date. Raises ValueError on anything else."""
    return dt.datetime.strptime(raw.strip(), DATE_FORMAT).date()


class ConsoleMenu:
    """Numbered menu over a BankAccount. Bad input is reported, never raised."""

    def __init__(
        self,
        account: BankAccount,
        *,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
    ) -> None:
        self._account = account
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout

        self._actions: dict[str, Callable[[], None]] = {
            "1": self._check_balance,
            "2": self._deposit,
            "3": self._withdraw,
            "4": self._show_transactions,
            "5": self._save,
            "6": self._load,
            "7": self._delete_by_date,
        }

    def run(self) -> int:
        while True:
            self._print(MENU)
            line = self._prompt("Enter your choice: ")

            # end of input behaves like "0"
            if line is None:
                self._print("Exiting...")
                return 0

            choice = line.strip()[:1]
            if choice == "0":
                self._print("Exiting...")
                return 0

            action = self._actions.get(choice)
            if action is None:
                self._print("Invalid choice. Please try again.")
                continue

            action()

    # ---------- actions ----------
    def _check_balance(self) -> None:
        self._print(f"Balance: {self._account.balance}")

    def _deposit(self) -> None:
        amount = self._read_int("Enter amount to deposit: ")
        if amount is None:
            return
        if not self._account.deposit(amount):
            self._print("Invalid deposit amount.")

    def _withdraw(self) -> None:
        amount = self._read_int("Enter amount to withdraw: ")
        if amount is None:
            return
        if not self._account.withdraw(amount):
            self._print("Insufficient funds or invalid amount.")

    def _show_transactions(self) -> None:
        rows = compute_running_balance(self._account.transactions)
        if not rows:
            self._print("No transactions.")
            return
        for row in rows:
            self._print(f"{row.transaction.describe()}, Balance after: {row.balance_after}")

    def _save(self) -> None:
        result = self._account.save_transactions()
        if result.ok:
            self._print("Transactions saved to the database.")
        else:
            self._print(f"Error saving transactions ({result.saved} saved): {result.error}")

    def _load(self) -> None:
        result = self._account.load_transactions()
        if result.ok:
            self._print("Transactions loaded from the database.")
        else:
            self._print(f"Error loading transactions: {result.error}")

    def _delete_by_date(self) -> None:
        raw = self._prompt("Enter the date of transactions to delete (YYYY-MM-DD): ")
        if raw is None:
            return

        try:
            date = parse_date(raw)
        except ValueError:
            self._print("Invalid date format. Please use YYYY-MM-DD.")
            return

        repo = self._account.repository
        if not isinstance(repo, TransactionPurger):
            self._print("Transaction deletion is not supported for the current manager.")
            return

        result = repo.delete_transactions_by_date(date)
        if result.ok:
            self._print(f"{result.deleted} transaction(s) deleted for date {date.isoformat()}.")
        else:
            self._print(f"Error deleting transactions: {result.error}")

    # ---------- io ----------
    def _print(self, text: str) -> None:
        self._out.write(text + "\n")

    def _prompt(self, text: str) -> Optional[str]:
        self._out.write(text)
        self._out.flush()
        line = self._in.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")

    def _read_int(self, prompt: str) -> Optional[int]:
        line = self._prompt(prompt)
        while line is not None:
            try:
                return int(line.strip())
            except ValueError:
                self._print("Invalid input. Please enter a valid integer.")
            line = self._prompt(prompt)
        return None
