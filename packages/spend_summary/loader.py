"""Load transactions from a static data file.

Supported formats, chosen by file suffix:

- ``.json``: a top-level array of objects with ``id``, ``date``, ``category``,
  ``amount`` and ``description``. Numbers are decoded straight to ``Decimal``.
- ``.csv``: a header row with the same column names (``description`` optional).

Row shape is validated with pydantic; date and amount parsing is left to
:class:`~spend_summary.models.Transaction` so malformed values surface as
:class:`~spend_summary.errors.InvalidDateError` /
:class:`~spend_summary.errors.InvalidAmountError` carrying the row's id.
"""

from __future__ import annotations

import csv
import json
import os
from collections.abc import Iterable, Mapping
from decimal import Decimal
from os import PathLike
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import TransactionLoadError
from .logging_setup import get_logger
from .models import Transaction

DATA_PATH_ENV_VAR = "SPEND_SUMMARY_DATA"

_REQUIRED_CSV_COLUMNS = ("id", "date", "category", "amount")

_logger = get_logger("spend_summary.loader")


class TransactionRow(BaseModel):
    """Schema of one raw record as found in a data file."""

    model_config = ConfigDict(extra="ignore")

    id: int
    # Parsed by Transaction so the error type names the problem precisely.
    date: Any = None
    category: str = Field(min_length=1)
    amount: Any = None
    description: str = ""

    def to_transaction(self) -> Transaction:
        return Transaction(
            id=self.id,
            date=self.date,
            category=self.category,
            amount=self.amount,
            description=self.description,
        )


def default_data_path() -> Path:
    """Return the data file to read when none is given.

    Default: ``./data/transactions.json`` under the current working directory.
    Override: ``SPEND_SUMMARY_DATA`` environment variable.
    """

    raw = os.getenv(DATA_PATH_ENV_VAR)
    if raw and raw.strip():
        return Path(raw.strip()).expanduser()
    return Path.cwd() / "data" / "transactions.json"


def _describe_validation_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    loc = ".".join(str(p) for p in first.get("loc", ())) or "record"
    return f"{loc}: {first.get('msg', 'invalid value')}"


def parse_transactions(records: Iterable[Any]) -> list[Transaction]:
    """Convert decoded records (mappings) into :class:`Transaction` objects.

    Order is preserved. The first invalid record stops the load: shape errors
    raise :class:`TransactionLoadError` naming the record position, while
    date/amount errors propagate from :class:`Transaction` unchanged.
    """

    out: list[Transaction] = []
    for pos, raw in enumerate(records):
        if not isinstance(raw, Mapping):
            raise TransactionLoadError(
                f"record {pos}: expected an object, got {type(raw).__name__}"
            )
        try:
            row = TransactionRow.model_validate(dict(raw))
        except ValidationError as exc:
            raise TransactionLoadError(
                f"record {pos}: {_describe_validation_error(exc)}"
            ) from exc
        out.append(row.to_transaction())
    return out


def _read_json_records(path: Path) -> list[Any]:
    with path.open(encoding="utf-8") as f:
        try:
            data = json.load(f, parse_float=Decimal)
        except json.JSONDecodeError as exc:
            raise TransactionLoadError(f"invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, list):
        raise TransactionLoadError(
            f"expected a JSON array of transactions in {path}, got {type(data).__name__}"
        )
    return data


def _read_csv_records(path: Path) -> list[dict[str, str]]:
    with path.open(encoding="utf-8", newline="") as f:
        # Short rows get "" for their missing trailing cells.
        reader = csv.DictReader(f, restval="")
        headers = reader.fieldnames
        if headers is None:
            raise TransactionLoadError(f"CSV appears to have no header row: {path}")
        missing = [h for h in _REQUIRED_CSV_COLUMNS if h not in headers]
        if missing:
            raise TransactionLoadError(
                f"CSV is missing required columns: {', '.join(missing)} ({path})"
            )
        try:
            # Drop the None key DictReader uses for surplus cells.
            return [{k: v for k, v in row.items() if k is not None} for row in reader]
        except csv.Error as exc:
            raise TransactionLoadError(f"failed to parse CSV {path}: {exc}") from exc


def load_transactions(path: str | PathLike[str]) -> list[Transaction]:
    """Read and validate every transaction in ``path``.

    Raises
    ------
    TransactionLoadError
        The file is missing or unreadable, has an unsupported suffix, or a
        record does not match the expected shape.
    InvalidDateError, InvalidAmountError
        A record's date or amount cannot be parsed.
    """

    p = Path(path)
    suffix = p.suffix.lower()
    try:
        if suffix == ".json":
            records: list[Any] = _read_json_records(p)
        elif suffix == ".csv":
            records = list(_read_csv_records(p))
        else:
            raise TransactionLoadError(
                f"unsupported data file type {p.suffix or '(none)'!r}; expected .json or .csv"
            )
    except FileNotFoundError as exc:
        raise TransactionLoadError(f"file not found: {p}") from exc
    except PermissionError as exc:
        raise TransactionLoadError(f"permission denied: {p}") from exc
    except UnicodeDecodeError as exc:
        raise TransactionLoadError(f"{p} is not valid UTF-8: {exc}") from exc

    transactions = parse_transactions(records)
    _logger.debug("loaded %d transaction(s) from %s", len(transactions), p)
    return transactions


__all__ = [
    "DATA_PATH_ENV_VAR",
    "TransactionRow",
    "default_data_path",
    "parse_transactions",
    "load_transactions",
]
