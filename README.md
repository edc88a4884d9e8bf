# banco

A small bank ledger. You can register clients, open savings and checking
accounts, deposit, withdraw and apply monthly interest to savings accounts. The
data is kept in a JSON file between sessions.

## Installation

```
pip install .
```

## The interactive menu

```
banco [data_file]
```

`data_file` defaults to `BancoJaveriano.json` in the current directory. At
startup the program loads that file. If the file does not exist, it reports this
on standard error and starts with an empty bank. Next it asks for the interest
rate, as a percentage, to use for new savings accounts. It asks again until it
gets a number that is zero or greater. After that it shows a menu with these
entries:

1. Clients: add a client or list clients
2. Accounts: open a savings or checking account, or list accounts
3. Statistics: totals, average balance, the interest rate and the registered
   clients and accounts
4. Financial operations: apply interest to savings accounts, deposit, withdraw
5. Exit and save data

Option 5 writes the data back to the file. Some cases end the program without
saving:

- Input ends while the program is still asking for the interest rate. The exit
  status is 1.
- Input ends inside the menu. The exit status is 0.

The prompts and messages are in Spanish.

## Using it as a library

```python
from banco.bank import Bank

bank = Bank("Example Bank")
bank.interest_rate = 2.0                # used for savings accounts opened from now on
client = bank.add_client("Ana", "Calle 1")
savings = bank.add_savings_account(client.id, 1000.0)
checking = bank.add_checking_account(client.id, 50.0, 200.0)

bank.deposit(savings.number, 250.0)
bank.withdraw(checking.number, 200.0)   # goes into the overdraft
bank.apply_interest()                   # savings accounts only

stats = bank.statistics()
print(stats.total_accounts, stats.average_balance)

bank.save("bank.json")

other = Bank("Copy")
other.load("bank.json")                 # replaces its clients and accounts
```

### Modules

- `banco.clients`: the `Client` dataclass, with `name`, `address` and `id`.
  `to_dict()` and `from_dict()` convert a client to and from a plain mapping.
  `reset_ids()` sets the ID counter.
- `banco.accounts`: the abstract base `Account`, with `number`, `client_id`,
  `balance`, `deposit()` and `withdraw()`. It has two kinds:
  - `SavingsAccount` has `interest_rate` and `apply_monthly_interest()`. Its
    balance cannot go below zero.
  - `CheckingAccount` has `overdraft_limit`. Its balance may go down to
    `-overdraft_limit`.

  The module also has `account_from_dict()`, which builds the right kind of
  account from a mapping. `Account.reset_numbers()` sets the number counter.
- `banco.bank`: `Bank`, `BankStatistics` and `AccountNotFoundError`.
  `Bank.find_account()` looks an account up by its number.
- `banco.cli`: the `banco` command (`main()`) and the menu loop `run_menu()`.
  Also `format_clients()`, `format_accounts()` and `format_statistics()`, which
  render a bank as text.

### Errors

- A withdrawal that the account cannot cover raises
  `banco.accounts.InsufficientFundsError`.
- An unknown account number raises `banco.bank.AccountNotFoundError`.
- `Bank.load()` raises `FileNotFoundError` if the file is missing.
- `account_from_dict()` raises `ValueError` for an unknown `tipo`.
  `Bank.load()` skips accounts of an unknown kind.

### Counters

Client IDs start at 1 and account numbers start at 100. Creating a client or an
account with an explicit ID or number moves the counter forward. Loading a saved
file therefore does the same, so new clients and accounts never reuse an
existing ID or number.

## File format

The saved file is a JSON object with two lists, indented by four spaces:

- `clientes` holds entries with `id`, `nombre` and `direccion`.
- `cuentas` holds entries with `tipo` (`"ahorro"` or `"corriente"`),
  `numeroCuenta`, `saldo` and `idCliente`. Savings accounts also have
  `tasaInteres`. Checking accounts also have `limiteSobregiro`.

## Limitations

The package does not do the following:

- Check that a client ID exists when an account is opened.
- Edit or remove clients or accounts.
- Keep a transaction history.
- Transfer between accounts.