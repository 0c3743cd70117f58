"""minibank: a minimal in-memory bank ledger."""

from .config.settings import Settings
from .logging_config import configure_logging
from .models import Account, AccountNotFoundError, BankError
from .services.bank import Bank
from .services.statement import render_statement

__all__ = [
    "Account",
    "AccountNotFoundError",
    "Bank",
    "BankError",
    "Settings",
    "configure_logging",
    "render_statement",
]
