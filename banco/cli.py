"""Interactive text menu for running the bank."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterable, Iterator
from typing import TextIO, TypeVar

from .accounts import InsufficientFundsError, SavingsAccount
from .bank import AccountNotFoundError, Bank

BANK_NAME = "Banco Javeriano"
DEFAULT_DATA_FILE = "BancoJaveriano.json"

_PROMPT = "Seleccione una opcion: "
_INVALID_VALUE = "Valor invalido.\n"

_T = TypeVar("_T", int, float)


def format_clients(bank: Bank) -> str:
    """Render the client list."""
    lines = ["\nLista de Clientes"]
    lines += [
        f"ID: {c.id} | Nombre: {c.name} | Direccion: {c.address}" for c in bank.clients
    ]
    return "\n".join(lines) + "\n"


def format_accounts(bank: Bank) -> str:
    """Render the account list with balances to two decimals."""
    lines = ["\nLista de Cuentas"]
    lines += [
        f"Numero: {a.number} | Cliente ID: {a.client_id} | Saldo: {a.balance:.2f}"
        for a in bank.accounts
    ]
    return "\n".join(lines) + "\n"


def format_statistics(bank: Bank) -> str:
    """Render bank statistics, registered clients and registered accounts."""
    stats = bank.statistics()
    lines = [
        "\nEstadisticas del Banco",
        f"Total Clientes: {stats.total_clients}",
        f"Total Cuentas: {stats.total_accounts}",
        f"Promedio de Saldo: {stats.average_balance:.2f}",
        f"Tasa de Interes Ahorros: {stats.interest_rate:.2f}%",
        f"N Cuentas Ahorro: {stats.savings_count}",
        f"N Cuentas Corriente: {stats.checking_count}",
        "",
        "Clientes Registrados",
    ]
    lines += [f"ID: {c.id} | Nombre: {c.name}" for c in bank.clients]
    lines += ["", "Cuentas Registradas"]
    for account in bank.accounts:
        kind = "Ahorro" if isinstance(account, SavingsAccount) else "Corriente"
        lines.append(
            f"Cliente ID: {account.client_id} | Cuenta N: {account.number} | Tipo: {kind}"
        )
    return "\n".join(lines) + "\n"


class _EndOfInput(Exception):
    """The input ran out before the menu was left."""


class _Console:
    def __init__(self, lines: Iterable[str], out: TextIO) -> None:
        self._lines: Iterator[str] = iter(lines)
        self.out = out

    def write(self, text: str) -> None:
        self.out.write(text)

    def ask(self, prompt: str) -> str:
        self.out.write(prompt)
        try:
            line = next(self._lines)
        except StopIteration:
            raise _EndOfInput from None
        return line.rstrip("\r\n")

    def ask_number(self, prompt: str, kind: Callable[[str], _T]) -> _T | None:
        tokens = self.ask(prompt).split()
        if not tokens:
            return None
        try:
            return kind(tokens[0])
        except ValueError:
            return None


def _clients_menu(bank: Bank, console: _Console) -> None:
    console.write("\nCLIENTES\n1. Agregar Cliente\n2. Listar Clientes\n")
    choice = console.ask_number(_PROMPT, int)
    if choice == 1:
        name = console.ask("Nombre del cliente: ")
        address = console.ask("Direccion del cliente: ")
        client = bank.add_client(name, address)
        console.write(f"Cliente agregado con ID: {client.id}\n")
    elif choice == 2:
        console.write(format_clients(bank))
    else:
        console.write("Opcion invalida.\n")


def _accounts_menu(bank: Bank, console: _Console) -> None:
    console.write("\nCUENTAS\n1. Agregar Cuenta\n2. Listar Cuentas\n")
    choice = console.ask_number(_PROMPT, int)
    if choice == 2:
        console.write(format_accounts(bank))
        return
    if choice != 1:
        console.write("Opcion invalida.\n")
        return

    client_id = console.ask_number("ID del cliente: ", int)
    balance = console.ask_number("Saldo inicial: ", float)
    if client_id is None or balance is None:
        console.write(_INVALID_VALUE)
        return
    kind = console.ask_number("Tipo de cuenta (1: Ahorro | 2: Corriente): ", int)
    if kind == 1:
        account = bank.add_savings_account(client_id, balance)
        console.write(f"Cuenta de ahorro creada con numero: {account.number}\n")
    elif kind == 2:
        limit = console.ask_number("Limite de sobregiro: ", float)
        if limit is None:
            console.write(_INVALID_VALUE)
            return
        checking = bank.add_checking_account(client_id, balance, limit)
        console.write(f"Cuenta corriente creada con numero: {checking.number}\n")
    else:
        console.write("Tipo de cuenta invalido.\n")


def _statistics_menu(bank: Bank, console: _Console) -> None:
    console.write("\nESTADISTICAS\n")
    console.write(format_statistics(bank))


def _operations_menu(bank: Bank, console: _Console) -> None:
    console.write(
        "\nOPERACIONES FINANCIERAS\n"
        "1. Aplicar Interes a Cuentas de Ahorro\n"
        "2. Consignar Dinero en una Cuenta\n"
        "3. Retirar Dinero de una Cuenta\n"
    )
    choice = console.ask_number(_PROMPT, int)
    if choice == 1:
        bank.apply_interest()
        console.write("Interes aplicado a las cuentas de ahorro.\n")
    elif choice == 2:
        number = console.ask_number("Numero de cuenta: ", int)
        amount = console.ask_number("Monto a consignar: ", float)
        if number is None or amount is None:
            console.write(_INVALID_VALUE)
            return
        try:
            bank.deposit(number, amount)
        except AccountNotFoundError:
            console.write("Cuenta no encontrada.\n")
        else:
            console.write("Consignacion exitosa.\n")
    elif choice == 3:
        number = console.ask_number("Numero de cuenta: ", int)
        amount = console.ask_number("Monto a retirar: ", float)
        if number is None or amount is None:
            console.write(_INVALID_VALUE)
            return
        try:
            bank.withdraw(number, amount)
        except (AccountNotFoundError, InsufficientFundsError):
            console.write("Fondos insuficientes o cuenta no encontrada.\n")
        else:
            console.write("Retiro exitoso.\n")
    else:
        console.write("Opcion invalida.\n")


_MAIN_MENU = (
    "\nMENU BANCO JAVERIANO\n"
    "1. Clientes\n"
    "2. Cuentas\n"
    "3. Estadisticas\n"
    "4. Operaciones Financieras\n"
    "5. Salir y Guardar Datos\n"
)

_HANDLERS: dict[int, Callable[[Bank, _Console], None]] = {
    1: _clients_menu,
    2: _accounts_menu,
    3: _statistics_menu,
    4: _operations_menu,
}


def run_menu(bank: Bank, lines: Iterable[str], out: TextIO) -> bool:
    """Run the main menu, reading answers from ``lines`` and writing to ``out``.

    Returns True when the user chose to leave and save, False when the input
    ran out first.
    """
    console = _Console(lines, out)
    try:
        while True:
            console.write(_MAIN_MENU)
            choice = console.ask_number(_PROMPT, int)
            if choice == 5:
                return True
            handler = _HANDLERS.get(choice) if choice is not None else None
            if handler is None:
                console.write("Opcion invalida. Intente de nuevo.\n")
            else:
                handler(bank, console)
    except _EndOfInput:
        return False


def _ask_interest_rate(lines: Iterator[str], out: TextIO) -> float | None:
    out.write("Ingrese la tasa de interes para las cuentas de ahorro (%): ")
    for line in lines:
        tokens = line.split()
        try:
            rate = float(tokens[0]) if tokens else -1.0
        except ValueError:
            rate = -1.0
        if rate >= 0:
            return rate
        out.write("Valor invalido. Ingrese una tasa positiva: ")
    return None


def main(argv: list[str] | None = None) -> int:
    """Load the bank data, run the menu and save on exit."""
    parser = argparse.ArgumentParser(prog="banco", description="Interactive bank manager.")
    parser.add_argument(
        "data_file",
        nargs="?",
        default=DEFAULT_DATA_FILE,
        help=f"JSON file holding the bank data (default: {DEFAULT_DATA_FILE})",
    )
    args = parser.parse_args(argv)
    path = args.data_file

    bank = Bank(BANK_NAME)
    try:
        bank.load(path)
    except FileNotFoundError:
        print("Archivo no encontrado, iniciando nuevo banco.", file=sys.stderr)
    else:
        print(f"Datos cargados desde {path}")

    lines = iter(sys.stdin)
    rate = _ask_interest_rate(lines, sys.stdout)
    if rate is None:
        return 1
    bank.interest_rate = rate

    if not run_menu(bank, lines, sys.stdout):
        return 0

    try:
        bank.save(path)
    except OSError:
        print("Error al guardar datos.", file=sys.stderr)
    else:
        print(f"Datos guardados exitosamente en {path}")
    print("Gracias por usar el sistema del Banco Javeriano. Hasta pronto")
    return 0