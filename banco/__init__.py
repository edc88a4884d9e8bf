"""A small bank ledger with clients, savings and checking accounts, and an interactive menu."""

__version__ = "0.1.0"
__all__ = ["accounts", "bank", "cli", "clients"]