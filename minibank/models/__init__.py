"""Data models for the ledger."""

from .account import Account
from .exceptions import (
    BankError,
    AccountNotFoundError,
)

__all__ = [
    "Account",
    "BankError",
    "AccountNotFoundError",
]
