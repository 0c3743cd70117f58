"""Bank service for the ledger operations."""

import logging
from typing import Optional

from minibank.config.settings import Settings
from minibank.models.account import Account
from minibank.models.exceptions import AccountNotFoundError
from minibank.repositories.account_repo import AccountRepository
from minibank.services.statement import render_statement

logger = logging.getLogger(__name__)


class Bank:
    """Owns an ordered collection of accounts and applies ledger operations."""

    def __init__(self, settings: Optional[Settings] = None):
        """
        Initialize an empty bank.

        Args:
            settings: Configuration, defaults to Settings()
        """
        self._settings = settings if settings is not None else Settings()
        self._account_repo = AccountRepository()

    @property
    def accounts(self) -> tuple[Account, ...]:
        """Accounts in the order they were added.

        The returned tuple is a snapshot; changing it does not affect the bank.
        """
        return self._account_repo.all()

    @property
    def total_balance(self) -> float:
        """Sum of all account balances."""
        return sum(account.balance for account in self._account_repo.all())

    def __len__(self) -> int:
        return len(self._account_repo)

    def add_account(self, name: str) -> Account:
        """
        Create a new account with a zero balance.

        Duplicate names are accepted. Lookups resolve to the account that was
        added first.

        Args:
            name: The account name

        Returns:
            The created Account
        """
        account = Account(name, 0)
        self._account_repo.add(account)
        logger.debug("Added account %r (%d accounts)", name, len(self._account_repo))
        return account

    def find_account(self, name: str) -> Account:
        """
        Look up an account by exact name.

        Args:
            name: The account name

        Returns:
            The first Account added under that name

        Raises:
            AccountNotFoundError: If no account has this name
        """
        account = self._account_repo.find_by_name(name)
        if account is None:
            logger.warning("Lookup failed for account %r", name)
            raise AccountNotFoundError(f"Account {name} not found")
        return account

    def deposit(self, name: str, amount: float) -> None:
        """
        Add funds to an account.

        The amount is not validated; a negative deposit lowers the balance.

        Args:
            name: The account name
            amount: The amount to add

        Raises:
            AccountNotFoundError: If the account doesn't exist
        """
        account = self.find_account(name)
        account._set_balance(account.balance + amount)
        logger.debug("Deposited %r into %r, balance %r", amount, name, account.balance)

    def withdraw(self, name: str, amount: float) -> None:
        """
        Remove funds from an account.

        There is no overdraft check, the balance may become negative.

        Args:
            name: The account name
            amount: The amount to remove

        Raises:
            AccountNotFoundError: If the account doesn't exist
        """
        account = self.find_account(name)
        account._set_balance(account.balance - amount)
        logger.debug("Withdrew %r from %r, balance %r", amount, name, account.balance)

    def statement(self, floatfmt: Optional[str] = None) -> str:
        """Render the accounts as a text table, see ``render_statement``.

        floatfmt defaults to the configured ``statement_floatfmt``.
        """
        if floatfmt is None:
            floatfmt = self._settings.statement_floatfmt
        return render_statement(self._account_repo.all(), floatfmt=floatfmt)
