"""Display helpers for money, percentages and month labels.

Rounding is ``ROUND_HALF_UP`` on the decimal value. Floats are converted via
their shortest ``repr`` first, so ``12.25`` rounds to ``12.3`` and ``2.675``
to ``2.68`` even though neither is exactly representable in binary.
"""

from __future__ import annotations

from decimal import Decimal

from .models import YearMonth, quantize_half_up

CURRENCY_SYMBOL = "$"

_CENT = Decimal("0.01")
_TENTH = Decimal("0.1")


def _as_decimal(value: Decimal | float | int) -> Decimal:
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def format_currency(amount: Decimal | float | int) -> str:
    """Render ``amount`` as ``$1,234.50``.

    Negative values get a leading minus before the symbol (``-$12.00``). A value
    that rounds to zero is always ``$0.00``.
    """

    q = quantize_half_up(_as_decimal(amount), _CENT)
    sign = "-" if q < 0 else ""
    return f"{sign}{CURRENCY_SYMBOL}{abs(q):,.2f}"


def format_percentage(pct: Decimal | float | int) -> str:
    """Render ``pct`` with one decimal place and a trailing ``%`` (``33.3%``)."""

    q = quantize_half_up(_as_decimal(pct), _TENTH)
    if q == 0:
        q = abs(q)
    return f"{q:.1f}%"


def format_month_label(year_month: YearMonth) -> str:
    """Render a month as ``YYYY-MM``."""

    return f"{year_month.year:04d}-{year_month.month:02d}"


__all__ = ["CURRENCY_SYMBOL", "format_currency", "format_percentage", "format_month_label"]
