"""Plain-text account statements."""

from typing import Iterable

from tabulate import tabulate

from minibank.models.account import Account

DEFAULT_FLOATFMT = ".2f"


def render_statement(accounts: Iterable[Account], floatfmt: str = DEFAULT_FLOATFMT) -> str:
    """
    Render accounts as a right-aligned table with a closing total row.

    Args:
        accounts: Accounts in the order they should be listed
        floatfmt: Format spec applied to float balances

    Returns:
        The table as a string
    """
    header = ['#', 'Name', 'Balance']
    rows = [[i, account.name, account.balance] for i, account in enumerate(accounts, start=1)]
    total = sum(row[2] for row in rows)
    rows.append(['Total', '', total])
    # '#' and Name are text columns
    return tabulate([header] + rows, headers="firstrow", stralign='right', numalign='right',
                    floatfmt=floatfmt, disable_numparse=[0, 1])
