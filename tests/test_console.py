import datetime as dt
import io

import pytest

from bankledger.console import ConsoleMenu, parse_date
from bankledger.domain.account import BankAccount
from bankledger.domain.transaction import Transaction
from bankledger.repositories.in_memory_transaction_repository import InMemoryTransactionRepository
from bankledger.repositories.transaction_repository import LoadResult, SaveResult, StoreStatus


TODAY = dt.date(2026, 10, 19)


class SaveLoadOnlyRepository:
    """Port without the delete capability."""

    def save_transactions(self, transactions):
        return SaveResult(saved=len(transactions))

    def load_transactions(self):
        return LoadResult(transactions=[])


class DownRepository(SaveLoadOnlyRepository):
    def save_transactions(self, transactions):
        return SaveResult(saved=0, status=StoreStatus.UNAVAILABLE, error="connection refused")

    def load_transactions(self):
        return LoadResult(transactions=[], status=StoreStatus.UNAVAILABLE, error="connection refused")


def run(lines: list[str], repo=None) -> tuple[int, str, BankAccount]:
    account = BankAccount(repo or InMemoryTransactionRepository(), today=lambda: TODAY)
    stdin = io.StringIO("".join(line + "\n" for line in lines))
    stdout = io.StringIO()
    code = ConsoleMenu(account, stdin=stdin, stdout=stdout).run()
    return code, stdout.getvalue(), account


def test_exit_with_zero():
    code, out, _ = run(["0"])
    assert code == 0
    assert "1: Check Balance" in out
    assert "Exiting..." in out


def test_end_of_input_exits():
    code, out, _ = run([])
    assert code == 0
    assert "Exiting..." in out


def test_invalid_choice_reprompts():
    code, out, _ = run(["9", "", "x", "0"])
    assert code == 0
    assert out.count("Invalid choice. Please try again.") == 3


def test_choice_uses_first_character():
    _, out, _ = run(["1abc", "0"])
    assert "Balance: 0" in out


def test_deposit_and_balance():
    _, out, account = run(["2", "100", "1", "0"])
    assert account.balance == 100
    assert "Balance: 100" in out


def test_deposit_non_integer_reprompts():
    _, out, account = run(["2", "abc", "12.5", "40", "0"])
    assert out.count("Invalid input. Please enter a valid integer.") == 2
    assert account.balance == 40


def test_deposit_negative_prints_diagnostic():
    _, out, account = run(["2", "-5", "0"])
    assert "Invalid deposit amount." in out
    assert account.balance == 0
    assert account.transactions == ()


def test_withdraw_too_much_prints_diagnostic():
    _, out, account = run(["2", "10", "3", "11", "0"])
    assert "Insufficient funds or invalid amount." in out
    assert account.balance == 10


def test_show_transactions():
    _, out, _ = run(["2", "100", "2", "50", "3", "30", "4", "0"])
    assert "Amount: 100, Date: 2026-10-19, Balance after: 100" in out
    assert "Amount: 50, Date: 2026-10-19, Balance after: 150" in out
    assert "Amount: -30, Date: 2026-10-19, Balance after: 120" in out


def test_show_transactions_empty():
    _, out, _ = run(["4", "0"])
    assert "No transactions." in out


def test_save_and_load():
    repo = InMemoryTransactionRepository()
    _, out, _ = run(["2", "100", "5", "0"], repo=repo)
    assert "Transactions saved to the database." in out
    assert repo.count() == 1

    _, out, account = run(["6", "1", "0"], repo=repo)
    assert "Transactions loaded from the database." in out
    assert account.transactions == (Transaction(amount=100, date=TODAY),)
    # load does not touch the balance
    assert "Balance: 0" in out


def test_storage_errors_are_reported():
    _, out, _ = run(["2", "10", "5", "6", "0"], repo=DownRepository())
    assert "Error saving transactions (0 saved): connection refused" in out
    assert "Error loading transactions: connection refused" in out


def test_delete_by_date():
    repo = InMemoryTransactionRepository()
    repo.save_transactions([Transaction(amount=1, date=TODAY), Transaction(amount=2, date=dt.date(2026, 1, 1))])

    _, out, _ = run(["7", "2026-10-19", "7", "2026-10-19", "0"], repo=repo)

    assert "1 transaction(s) deleted for date 2026-10-19." in out
    assert "0 transaction(s) deleted for date 2026-10-19." in out
    assert repo.count() == 1


def test_delete_with_bad_date():
    _, out, _ = run(["7", "19/10/2026", "0"])
    assert "Invalid date format. Please use YYYY-MM-DD." in out


def test_delete_not_supported():
    _, out, _ = run(["7", "2026-10-19", "0"], repo=SaveLoadOnlyRepository())
    assert "Transaction deletion is not supported for the current manager." in out


def test_parse_date():
    assert parse_date(" 2026-02-28 ") == dt.date(2026, 2, 28)
    with pytest.raises(ValueError):
        parse_date("2026-02-30")
    with pytest.raises(ValueError):
        parse_date("")
