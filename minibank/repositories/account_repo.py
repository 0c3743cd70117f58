"""In-memory account repository."""

from minibank.models.account import Account


class AccountRepository:
    """Repository holding Account objects in insertion order."""

    def __init__(self):
        """Initialize the repository with an empty collection."""
        self._accounts: list[Account] = []

    def add(self, account: Account) -> None:
        """
        Append an account to the collection.

        Names are not required to be unique.

        Args:
            account: The Account object to store
        """
        self._accounts.append(account)

    def find_by_name(self, name: str) -> Account | None:
        """
        Find the first account with an exactly matching name.

        Args:
            name: The account name to search for

        Returns:
            The earliest added Account with that name, None if there is none
        """
        for account in self._accounts:
            if account.name == name:
                return account
        return None

    def all(self) -> tuple[Account, ...]:
        """
        Return a snapshot of all accounts in insertion order.

        Returns:
            Tuple of Account objects
        """
        return tuple(self._accounts)

    def __len__(self) -> int:
        return len(self._accounts)
