"""The bank: its clients, its accounts, statistics and persistence."""

from __future__ import annotations

import json
from dataclasses import dataclass
from os import PathLike
from typing import Any, Union

from .accounts import (
    Account,
    CheckingAccount,
    SavingsAccount,
    account_from_dict,
)
from .clients import Client

StrPath = Union[str, "PathLike[str]"]

_KNOWN_KINDS = frozenset({SavingsAccount.kind, CheckingAccount.kind})


class AccountNotFoundError(LookupError):
    """Raised when no account has the requested number."""

    def __init__(self, number: int) -> None:
        super().__init__(f"account {number} not found")
        self.number = number


@dataclass(frozen=True)
class BankStatistics:
    """Summary figures for a bank."""

    total_clients: int
    total_accounts: int
    average_balance: float
    interest_rate: float
    savings_count: int
    checking_count: int


class Bank:
    """Holds clients and accounts and the interest rate for new savings accounts."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.clients: list[Client] = []
        self.accounts: list[Account] = []
        self.interest_rate = 0.0

    def add_client(self, name: str, address: str) -> Client:
        """Register a new client and return it."""
        client = Client(name, address)
        self.clients.append(client)
        return client

    def add_savings_account(self, client_id: int, initial_balance: float) -> SavingsAccount:
        """Open a savings account at the bank's current interest rate."""
        account = SavingsAccount(initial_balance, client_id, self.interest_rate)
        self.accounts.append(account)
        return account

    def add_checking_account(
        self, client_id: int, initial_balance: float, overdraft_limit: float
    ) -> CheckingAccount:
        """Open a checking account with the given overdraft limit."""
        account = CheckingAccount(initial_balance, client_id, overdraft_limit)
        self.accounts.append(account)
        return account

    def find_account(self, account_number: int) -> Account:
        """Return the account with ``account_number`` or raise AccountNotFoundError."""
        for account in self.accounts:
            if account.number == account_number:
                return account
        raise AccountNotFoundError(account_number)

    def apply_interest(self) -> None:
        """Apply one month of interest to every savings account."""
        for account in self.accounts:
            if isinstance(account, SavingsAccount):
                account.apply_monthly_interest()

    def deposit(self, account_number: int, amount: float) -> None:
        """Deposit into an account; raises AccountNotFoundError."""
        self.find_account(account_number).deposit(amount)

    def withdraw(self, account_number: int, amount: float) -> None:
        """Withdraw from an account.

        Raises AccountNotFoundError or InsufficientFundsError.
        """
        self.find_account(account_number).withdraw(amount)

    def statistics(self) -> BankStatistics:
        """Compute summary figures over all clients and accounts."""
        total_accounts = len(self.accounts)
        total_balance = sum(account.balance for account in self.accounts)
        average = total_balance / total_accounts if total_accounts else 0.0
        return BankStatistics(
            total_clients=len(self.clients),
            total_accounts=total_accounts,
            average_balance=average,
            interest_rate=self.interest_rate,
            savings_count=sum(isinstance(a, SavingsAccount) for a in self.accounts),
            checking_count=sum(isinstance(a, CheckingAccount) for a in self.accounts),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return clients and accounts as a JSON-ready mapping."""
        return {
            "clientes": [client.to_dict() for client in self.clients],
            "cuentas": [account.to_dict() for account in self.accounts],
        }

    def save(self, path: StrPath) -> None:
        """Write clients and accounts to ``path`` as JSON."""
        with open(path, "w", encoding="utf-8") as handle:
            json.dump(self.to_dict(), handle, indent=4)
            handle.write("\n")

    def load(self, path: StrPath) -> None:
        """Replace clients and accounts with those stored in ``path``.

        Accounts of an unknown kind are skipped. Raises FileNotFoundError if
        the file does not exist.
        """
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)

        self.clients = [Client.from_dict(item) for item in data.get("clientes") or []]
        self.accounts = [
            account_from_dict(item)
            for item in data.get("cuentas") or []
            if item["tipo"] in _KNOWN_KINDS
        ]