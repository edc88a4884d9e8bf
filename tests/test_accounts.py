import pytest

from banco.accounts import (
    Account,
    CheckingAccount,
    InsufficientFundsError,
    SavingsAccount,
    account_from_dict,
)


@pytest.fixture(autouse=True)
def fresh_numbers():
    Account.reset_numbers(99)
    yield
    Account.reset_numbers(99)


def test_first_account_number_is_100():
    account = SavingsAccount(10.0, 1, 2.0)
    assert account.number == 100


def test_numbers_shared_across_kinds():
    savings = SavingsAccount(10.0, 1, 2.0)
    checking = CheckingAccount(10.0, 1, 5.0)
    assert checking.number == savings.number + 1


def test_account_is_abstract():
    with pytest.raises(TypeError):
        Account(10.0, 1)


def test_deposit_then_withdraw_restores_balance():
    account = SavingsAccount(250.0, 1, 1.0)
    account.deposit(75.5)
    assert account.balance > 250.0
    account.withdraw(75.5)
    assert account.balance == pytest.approx(250.0)


def test_savings_withdraw_whole_balance():
    account = SavingsAccount(300.0, 1, 1.0)
    account.withdraw(300.0)
    assert account.balance == 0.0


def test_savings_withdraw_too_much_raises_and_keeps_balance():
    account = SavingsAccount(300.0, 1, 1.0)
    with pytest.raises(InsufficientFundsError) as info:
        account.withdraw(300.01)
    assert account.balance == 300.0
    assert info.value.number == account.number


def test_checking_can_use_overdraft():
    account = CheckingAccount(100.0, 2, 50.0)
    account.withdraw(150.0)
    assert account.balance == pytest.approx(-50.0)


def test_checking_beyond_overdraft_raises():
    account = CheckingAccount(100.0, 2, 50.0)
    with pytest.raises(InsufficientFundsError):
        account.withdraw(150.01)
    assert account.balance == 100.0


def test_monthly_interest():
    account = SavingsAccount(1000.0, 1, 5.0)
    account.apply_monthly_interest()
    assert account.balance == pytest.approx(1050.0)


def test_zero_interest_leaves_balance():
    account = SavingsAccount(1000.0, 1, 0.0)
    account.apply_monthly_interest()
    assert account.balance == 1000.0


def test_savings_to_dict():
    account = SavingsAccount(20.0, 3, 4.0)
    assert account.to_dict() == {
        "tipo": "ahorro",
        "numeroCuenta": account.number,
        "saldo": 20.0,
        "idCliente": 3,
        "tasaInteres": 4.0,
    }


def test_checking_to_dict():
    account = CheckingAccount(20.0, 3, 40.0)
    assert account.to_dict() == {
        "tipo": "corriente",
        "numeroCuenta": account.number,
        "saldo": 20.0,
        "idCliente": 3,
        "limiteSobregiro": 40.0,
    }


@pytest.mark.parametrize(
    "account",
    [lambda: SavingsAccount(12.5, 7, 3.0), lambda: CheckingAccount(-4.0, 8, 10.0)],
)
def test_round_trip(account):
    original = account()
    restored = account_from_dict(original.to_dict())
    assert type(restored) is type(original)
    assert restored.to_dict() == original.to_dict()


def test_from_dict_advances_counter():
    loaded = CheckingAccount.from_dict(
        {"tipo": "corriente", "numeroCuenta": 500, "saldo": 1.0, "idCliente": 1, "limiteSobregiro": 0.0}
    )
    following = SavingsAccount(0.0, 1, 1.0)
    assert following.number == loaded.number + 1


def test_from_dict_with_lower_number_keeps_counter():
    Account.reset_numbers(300)
    SavingsAccount.from_dict(
        {"tipo": "ahorro", "numeroCuenta": 150, "saldo": 1.0, "idCliente": 1, "tasaInteres": 1.0}
    )
    following = SavingsAccount(0.0, 1, 1.0)
    assert following.number > 300


def test_unknown_type_raises():
    with pytest.raises(ValueError):
        account_from_dict({"tipo": "plazo", "numeroCuenta": 1, "saldo": 0.0, "idCliente": 1})


def test_missing_field_raises():
    with pytest.raises(KeyError):
        account_from_dict({"tipo": "ahorro", "numeroCuenta": 1, "saldo": 0.0, "idCliente": 1})