"""Bank accounts: savings and checking, with shared sequential numbering."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar


class InsufficientFundsError(Exception):
    """Raised when a withdrawal exceeds what the account allows."""

    def __init__(self, number: int, amount: float) -> None:
        super().__init__(f"insufficient funds in account {number} to withdraw {amount}")
        self.number = number
        self.amount = amount


class Account(ABC):
    """Common state of every account.

    Account numbers are shared across all account kinds and start at 100.
    """

    _last_number: ClassVar[int] = 99

    def __init__(self, initial_balance: float, client_id: int, number: int | None = None) -> None:
        self.balance = float(initial_balance)
        self.client_id = client_id
        if number is None:
            Account._last_number += 1
            self.number = Account._last_number
        else:
            self.number = number
            if number > Account._last_number:
                Account._last_number = number

    def deposit(self, amount: float) -> None:
        """Add ``amount`` to the balance."""
        self.balance += amount

    @abstractmethod
    def withdraw(self, amount: float) -> None:
        """Take ``amount`` from the balance or raise InsufficientFundsError."""

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Return the account as a JSON-ready mapping."""

    @classmethod
    def reset_numbers(cls, last_number: int) -> None:
        """Set the last number handed out; the next account gets ``last_number + 1``."""
        Account._last_number = last_number

    def _common_fields(self) -> dict[str, Any]:
        return {
            "numeroCuenta": self.number,
            "saldo": self.balance,
            "idCliente": self.client_id,
        }

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(number={self.number}, "
            f"client_id={self.client_id}, balance={self.balance})"
        )


class SavingsAccount(Account):
    """An account that earns monthly interest and cannot go below zero."""

    kind = "ahorro"

    def __init__(
        self,
        initial_balance: float,
        client_id: int,
        interest_rate: float,
        number: int | None = None,
    ) -> None:
        super().__init__(initial_balance, client_id, number)
        self.interest_rate = float(interest_rate)

    def apply_monthly_interest(self) -> None:
        """Grow the balance by ``interest_rate`` percent."""
        self.balance += self.balance * (self.interest_rate / 100.0)

    def withdraw(self, amount: float) -> None:
        if amount > self.balance:
            raise InsufficientFundsError(self.number, amount)
        self.balance -= amount

    def to_dict(self) -> dict[str, Any]:
        return {"tipo": self.kind, **self._common_fields(), "tasaInteres": self.interest_rate}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SavingsAccount:
        """Build a savings account from a mapping produced by :meth:`to_dict`."""
        return cls(
            initial_balance=float(data["saldo"]),
            client_id=int(data["idCliente"]),
            interest_rate=float(data["tasaInteres"]),
            number=int(data["numeroCuenta"]),
        )


class CheckingAccount(Account):
    """An account that may be overdrawn down to ``-overdraft_limit``."""

    kind = "corriente"

    def __init__(
        self,
        initial_balance: float,
        client_id: int,
        overdraft_limit: float,
        number: int | None = None,
    ) -> None:
        super().__init__(initial_balance, client_id, number)
        self.overdraft_limit = float(overdraft_limit)

    def withdraw(self, amount: float) -> None:
        if amount > self.balance + self.overdraft_limit:
            raise InsufficientFundsError(self.number, amount)
        self.balance -= amount

    def to_dict(self) -> dict[str, Any]:
        return {
            "tipo": self.kind,
            **self._common_fields(),
            "limiteSobregiro": self.overdraft_limit,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> CheckingAccount:
        """Build a checking account from a mapping produced by :meth:`to_dict`."""
        return cls(
            initial_balance=float(data["saldo"]),
            client_id=int(data["idCliente"]),
            overdraft_limit=float(data["limiteSobregiro"]),
            number=int(data["numeroCuenta"]),
        )


_KINDS: dict[str, type[SavingsAccount] | type[CheckingAccount]] = {
    SavingsAccount.kind: SavingsAccount,
    CheckingAccount.kind: CheckingAccount,
}


def account_from_dict(data: dict[str, Any]) -> Account:
    """Build the right kind of account from its ``tipo`` field.

    Raises KeyError if a field is missing and ValueError for an unknown kind.
    """
    kind = data["tipo"]
    try:
        account_class = _KINDS[kind]
    except KeyError:
        raise ValueError(f"unknown account type: {kind!r}") from None
    return account_class.from_dict(data)