"""Data models and type aliases for ``spend_summary``.

``Transaction`` is the only input type. It normalizes its ``date`` and
``amount`` fields on construction so that every instance the core sees holds a
real :class:`datetime.date` and a :class:`~decimal.Decimal`:

- ``date`` accepts a ``date``, a ``datetime`` (time-of-day dropped) or an
  ISO-8601 string ``YYYY-MM-DD`` optionally followed by a time part.
- ``amount`` accepts ``Decimal``, ``int``, ``float`` (via its shortest repr) or
  a numeric string, and must be finite and non-negative.

``CategorySummary`` and ``MonthlySummary`` are derived, ephemeral values built
by :func:`spend_summary.summary.calculate_monthly_summary`.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any, NamedTuple, TypeAlias

from .errors import InvalidAmountError, InvalidDateError, SpendSummaryError

_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_CENT = Decimal("0.01")


# ---------------------------------------------------------------------------
# Field normalization
# ---------------------------------------------------------------------------


def parse_transaction_date(value: Any, *, transaction_id: int | None = None) -> date:
    """Return ``value`` as a calendar date or raise :class:`InvalidDateError`."""

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise InvalidDateError(value, transaction_id=transaction_id)
    s = value.strip()
    if not s:
        raise InvalidDateError(value, transaction_id=transaction_id)
    # Accept 'YYYY-MM-DD', 'YYYY-MM-DDTHH:MM:SS' and 'YYYY-MM-DD HH:MM:SS'.
    first = s.split()[0].split("T", 1)[0]
    if not _ISO_DATE_RE.fullmatch(first):
        raise InvalidDateError(value, transaction_id=transaction_id)
    try:
        return date.fromisoformat(first)
    except ValueError as exc:
        raise InvalidDateError(value, transaction_id=transaction_id) from exc


def parse_amount(value: Any, *, transaction_id: int | None = None) -> Decimal:
    """Return ``value`` as a finite, non-negative ``Decimal``.

    Floats go through ``repr`` so ``0.1`` becomes ``Decimal("0.1")`` rather
    than its binary expansion.
    """

    if isinstance(value, bool):
        raise InvalidAmountError(value, "expected a number", transaction_id=transaction_id)
    if isinstance(value, Decimal):
        d = value
    elif isinstance(value, int):
        d = Decimal(value)
    elif isinstance(value, float):
        d = Decimal(repr(value))
    elif isinstance(value, str):
        s = value.strip().replace(",", "")
        if not s:
            raise InvalidAmountError(value, "amount is empty", transaction_id=transaction_id)
        try:
            d = Decimal(s)
        except InvalidOperation as exc:
            raise InvalidAmountError(
                value, "not a number", transaction_id=transaction_id
            ) from exc
    else:
        raise InvalidAmountError(value, "expected a number", transaction_id=transaction_id)

    if not d.is_finite():
        raise InvalidAmountError(value, "must be finite", transaction_id=transaction_id)
    if d < 0:
        raise InvalidAmountError(value, "must not be negative", transaction_id=transaction_id)
    return d


def quantize_half_up(d: Decimal, exp: Decimal) -> Decimal:
    """Round ``d`` to the places of ``exp`` with ``ROUND_HALF_UP``, at any magnitude."""

    with localcontext() as ctx:
        # quantize fails once the result needs more digits than the context holds.
        ctx.prec = max(ctx.prec, d.adjusted() - exp.adjusted() + 2)
        return d.quantize(exp, rounding=ROUND_HALF_UP)


def format_amount(d: Decimal) -> str:
    """Render a Decimal with exactly two places (no grouping, no symbol)."""

    return f"{quantize_half_up(d, _CENT):.2f}"


# ---------------------------------------------------------------------------
# Input record
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single recorded expense.

    Attributes
    ----------
    id:
        Integer identifier. Uniqueness is assumed, not enforced.
    date:
        Calendar date of the expense (no time-of-day or timezone).
    category:
        Free-form grouping label, case-sensitive and used verbatim.
    amount:
        Non-negative amount in the single implicit currency.
    description:
        Free text; not used by aggregation.
    """

    id: int
    date: date
    category: str
    amount: Decimal
    description: str = ""

    def __post_init__(self) -> None:
        # Frozen dataclass: normalized values are written through object.__setattr__.
        object.__setattr__(self, "date", parse_transaction_date(self.date, transaction_id=self.id))
        object.__setattr__(self, "amount", parse_amount(self.amount, transaction_id=self.id))
        if not isinstance(self.category, str) or not self.category.strip():
            raise SpendSummaryError(
                f"category must be a non-empty string (transaction id={self.id})"
            )


Transactions: TypeAlias = Iterable[Transaction]
"""Any iterable of :class:`Transaction`; consumed once, in order."""


class YearMonth(NamedTuple):
    """A calendar month. ``month`` is 1-based (1 = January)."""

    year: int
    month: int


# ---------------------------------------------------------------------------
# Derived values
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class CategorySummary:
    """Total spend for one category and its share of the month."""

    category: str
    amount: Decimal
    percentage: float


@dataclass(frozen=True, slots=True)
class MonthlySummary:
    """Total spend for a month and its category breakdown.

    ``categories`` is ordered by ``amount`` descending; equal amounts keep the
    order in which their categories were first seen.
    """

    total: Decimal = Decimal("0")
    categories: tuple[CategorySummary, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping; money values are two-decimal strings."""

        return {
            "total": format_amount(self.total),
            "categories": [
                {
                    "category": c.category,
                    "amount": format_amount(c.amount),
                    "percentage": c.percentage,
                }
                for c in self.categories
            ],
        }


__all__ = [
    "Transaction",
    "Transactions",
    "YearMonth",
    "CategorySummary",
    "MonthlySummary",
    "parse_transaction_date",
    "parse_amount",
    "format_amount",
    "quantize_half_up",
]
