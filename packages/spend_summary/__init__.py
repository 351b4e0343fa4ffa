"""Public interface for the ``spend_summary`` package.

Re-exports the month selector, filter, aggregator, formatting helpers, models
and error types. The loader, dashboard and CLI live in their own modules.
"""

from .errors import (
    InvalidAmountError,
    InvalidDateError,
    SpendSummaryError,
    TransactionLoadError,
)
from .formatting import format_currency, format_month_label, format_percentage
from .models import (
    CategorySummary,
    MonthlySummary,
    Transaction,
    Transactions,
    YearMonth,
)
from .summary import (
    calculate_monthly_summary,
    filter_transactions_by_month,
    get_month_year,
    group_by_month,
    summarize_month,
)

__all__ = [
    # Core
    "get_month_year",
    "filter_transactions_by_month",
    "calculate_monthly_summary",
    "summarize_month",
    "group_by_month",
    # Formatting
    "format_currency",
    "format_percentage",
    "format_month_label",
    # Models / types
    "Transaction",
    "Transactions",
    "YearMonth",
    "CategorySummary",
    "MonthlySummary",
    # Errors
    "SpendSummaryError",
    "InvalidDateError",
    "InvalidAmountError",
    "TransactionLoadError",
]
