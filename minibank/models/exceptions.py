"""Custom exceptions for the ledger."""


class BankError(Exception):
    """Base exception for all ledger errors."""
    pass


class AccountNotFoundError(BankError):
    """Raised when no account matches the requested name."""
    pass
