"""Monthly spend summary: month selection, filtering and aggregation.

Three pure functions compose in order::

    get_month_year -> filter_transactions_by_month -> calculate_monthly_summary

:func:`summarize_month` runs all three. Nothing here performs I/O; the only
implicit input is the current date, and callers can pass ``now`` explicitly.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime
from decimal import Decimal

from .errors import InvalidDateError
from .logging_setup import get_logger
from .models import CategorySummary, MonthlySummary, Transaction, YearMonth

_logger = get_logger("spend_summary.summary")

_HUNDRED = Decimal(100)


def get_month_year(month_offset: int = 0, *, now: date | datetime | None = None) -> YearMonth:
    """Return the calendar month ``month_offset`` months away from ``now``.

    ``0`` is the current month, negative values go back and positive values go
    forward. The day of month is ignored, so 31 March minus one month is
    February. ``now`` defaults to today's local date.
    """

    ref = now if now is not None else date.today()
    # Count months from year 0 so divmod handles rollover in both directions.
    index = ref.year * 12 + (ref.month - 1) + month_offset
    year, month0 = divmod(index, 12)
    return YearMonth(year=year, month=month0 + 1)


def filter_transactions_by_month(
    transactions: Iterable[Transaction], year: int, month: int
) -> list[Transaction]:
    """Return the transactions dated within ``year``/``month``, in input order.

    Raises
    ------
    ValueError
        When ``month`` is outside 1..12.
    InvalidDateError
        When a transaction carries something other than a calendar date.
    """

    if not 1 <= month <= 12:
        raise ValueError(f"month must be within 1..12, got {month!r}")

    selected: list[Transaction] = []
    for t in transactions:
        d = t.date
        if not isinstance(d, date):
            raise InvalidDateError(d, transaction_id=getattr(t, "id", None))
        if d.year == year and d.month == month:
            selected.append(t)
    _logger.debug("selected %d transaction(s) for %04d-%02d", len(selected), year, month)
    return selected


def calculate_monthly_summary(transactions: Iterable[Transaction]) -> MonthlySummary:
    """Reduce transactions into a total and a sorted per-category breakdown.

    Amounts are summed as ``Decimal``. Each category's ``percentage`` is its
    share of the total (``0.0`` for every category when the total is zero).
    Categories are sorted by amount descending; ties keep first-seen order.
    An empty input yields ``MonthlySummary(total=Decimal("0"), categories=())``.
    """

    total = Decimal(0)
    by_category: dict[str, Decimal] = {}
    for t in transactions:
        total += t.amount
        by_category[t.category] = by_category.get(t.category, Decimal(0)) + t.amount

    categories = [
        CategorySummary(
            category=category,
            amount=amount,
            percentage=float(amount * _HUNDRED / total) if total > 0 else 0.0,
        )
        for category, amount in by_category.items()
    ]
    # sorted() is stable, so equal amounts stay in first-seen order.
    categories = sorted(categories, key=lambda c: c.amount, reverse=True)
    return MonthlySummary(total=total, categories=tuple(categories))


def group_by_month(transactions: Iterable[Transaction]) -> dict[YearMonth, list[Transaction]]:
    """Bucket transactions by calendar month, newest month first.

    Transactions keep their input order within each month.
    """

    grouped: dict[YearMonth, list[Transaction]] = {}
    for t in transactions:
        grouped.setdefault(YearMonth(t.date.year, t.date.month), []).append(t)
    return dict(sorted(grouped.items(), key=lambda item: item[0], reverse=True))


def summarize_month(
    transactions: Iterable[Transaction],
    month_offset: int = 0,
    *,
    now: date | datetime | None = None,
) -> tuple[YearMonth, MonthlySummary]:
    """Select the month at ``month_offset`` and summarize its transactions."""

    ym = get_month_year(month_offset, now=now)
    filtered = filter_transactions_by_month(transactions, ym.year, ym.month)
    return ym, calculate_monthly_summary(filtered)


__all__ = [
    "get_month_year",
    "filter_transactions_by_month",
    "calculate_monthly_summary",
    "summarize_month",
    "group_by_month",
]
