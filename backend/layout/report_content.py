"""
Report Content Module
Fixed title, column layout and expense rows of the consolidated expense report.
"""

from .models import ColumnSpec, Justification, RowRecord
from validators.layout_validator import validate_parallel_lengths


REPORT_TITLE = "ACME HOLDINGS LLC"
REPORT_SUBTITLE = "CONSOLIDATED EXPENSE REPORT - FISCAL YEAR 2022"

DATE_OFFSET = 60.0
EXPENSE_OFFSET = 120.0
ACCOUNT_OFFSET = 240.0
CURRENCY_OFFSET = 400.0

COLUMNS: tuple[ColumnSpec, ...] = (
    ColumnSpec("Date", DATE_OFFSET),
    ColumnSpec("Expense", EXPENSE_OFFSET),
    ColumnSpec("Account", ACCOUNT_OFFSET),
    ColumnSpec("Currency", CURRENCY_OFFSET),
    ColumnSpec("Amount", justification=Justification.RIGHT),
)

DATES = ["2022-02-16", "2022-02-17", "2022-02-18"]
EXPENSE_NAMES = ['"GA January"', '"ICU Expenses"', '"GCP Servers"']
ACCOUNT_NAMES = ["Transportation", "Education", "Cloud Services"]
CURRENCIES = ["USD", "USD", "CHF"]
AMOUNTS = ["32.33", "438.21", "3.57"]


def rows_from_columns(
    dates: list[str],
    expense_names: list[str],
    account_names: list[str],
    currencies: list[str],
    amounts: list[str]
) -> list[RowRecord]:
    """
    Zip parallel column arrays into row records.

    Raises:
        LayoutContractError: If the columns differ in length
    """
    validate_parallel_lengths(
        dates=dates,
        expense_names=expense_names,
        account_names=account_names,
        currencies=currencies,
        amounts=amounts,
    )
    return [
        RowRecord(*values)
        for values in zip(dates, expense_names, account_names, currencies, amounts)
    ]


def expense_rows() -> list[RowRecord]:
    """Rows of the reference expense report."""
    return rows_from_columns(DATES, EXPENSE_NAMES, ACCOUNT_NAMES, CURRENCIES, AMOUNTS)
