"""Exception types raised by ``spend_summary``.

All errors derive from :class:`ValueError` so callers that only care about
"bad input" can catch one type. Each exception carries the offending value and,
when known, the id of the transaction it came from.
"""

from __future__ import annotations

from typing import Any


class SpendSummaryError(ValueError):
    """Base class for input errors raised by this package."""


class InvalidDateError(SpendSummaryError):
    """A transaction date could not be parsed into a calendar date."""

    def __init__(self, value: Any, *, transaction_id: int | None = None) -> None:
        self.value = value
        self.transaction_id = transaction_id
        where = f" (transaction id={transaction_id})" if transaction_id is not None else ""
        super().__init__(f"invalid transaction date: {value!r}{where}")


class InvalidAmountError(SpendSummaryError):
    """A transaction amount is not a finite, non-negative number."""

    def __init__(self, value: Any, reason: str, *, transaction_id: int | None = None) -> None:
        self.value = value
        self.reason = reason
        self.transaction_id = transaction_id
        where = f" (transaction id={transaction_id})" if transaction_id is not None else ""
        super().__init__(f"invalid amount {value!r}: {reason}{where}")


class TransactionLoadError(SpendSummaryError):
    """A transaction data file or record could not be loaded."""


__all__ = [
    "SpendSummaryError",
    "InvalidDateError",
    "InvalidAmountError",
    "TransactionLoadError",
]
