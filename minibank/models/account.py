"""Account data model."""


class Account:
    """Represents a named account holding a balance.

    The balance is read-only from the outside. Only the owning Bank changes
    it, through ``_set_balance``.
    """

    def __init__(self, name: str, balance: float):
        self._name = name
        self._balance = balance

    @property
    def name(self) -> str:
        """The identifier given at construction."""
        return self._name

    @property
    def balance(self) -> float:
        """The current balance."""
        return self._balance

    def _set_balance(self, balance: float) -> None:
        self._balance = balance

    def __repr__(self) -> str:
        return f"Account(name={self._name!r}, balance={self._balance!r})"
