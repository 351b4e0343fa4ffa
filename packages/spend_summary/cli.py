"""CLI for the ``spend_summary`` package.

The command handlers (``cmd_show``, ``cmd_months``) do the work and return an
exit code; the Typer commands below parse options and delegate to them.
Environment variables are loaded from a local ``.env`` with ``python-dotenv``
before any command runs, without overriding variables already set.
"""

from __future__ import annotations

import json
from datetime import date, datetime
from pathlib import Path
from typing import Any

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from .dashboard import render_dashboard
from .errors import SpendSummaryError
from .formatting import format_currency, format_month_label
from .loader import default_data_path, load_transactions
from .logging_setup import configure_logging, get_logger
from .models import Transaction, format_amount
from .summary import (
    calculate_monthly_summary,
    filter_transactions_by_month,
    get_month_year,
    group_by_month,
)

_logger = get_logger("spend_summary.cli")


# ---- Command handlers ---------------------------------------------------------


def _load(data_path: Path | None) -> list[Transaction] | None:
    """Load transactions, printing a one-line error and returning ``None`` on failure."""

    path = data_path or default_data_path()
    try:
        return load_transactions(path)
    except SpendSummaryError as e:
        typer.echo(f"Error: {e}", err=True)
        return None


def cmd_show(
    data_path: Path | None = None,
    *,
    month_offset: int = 0,
    now: date | datetime | None = None,
    as_json: bool = False,
    console: Console | None = None,
) -> int:
    """Summarize one month and print the dashboard (or JSON).

    Returns ``0`` on success and ``1`` when the data cannot be loaded or a
    transaction is invalid. Errors go to stderr as ``Error: <message>``.
    """

    transactions = _load(data_path)
    if transactions is None:
        return 1

    ym = get_month_year(month_offset, now=now)
    try:
        filtered = filter_transactions_by_month(transactions, ym.year, ym.month)
    except SpendSummaryError as e:
        typer.echo(f"Error: {e}", err=True)
        return 1
    summary = calculate_monthly_summary(filtered)
    _logger.debug(
        "summarized %d transaction(s) for %s", len(filtered), format_month_label(ym)
    )

    if as_json:
        payload: dict[str, Any] = {
            "year": ym.year,
            "month": ym.month,
            "label": format_month_label(ym),
            "transaction_count": len(filtered),
            **summary.to_dict(),
        }
        typer.echo(json.dumps(payload, indent=2))
        return 0

    render_dashboard(summary, ym, console=console)
    return 0


def cmd_months(
    data_path: Path | None = None,
    *,
    as_json: bool = False,
    console: Console | None = None,
) -> int:
    """List every month present in the data with its count and total."""

    transactions = _load(data_path)
    if transactions is None:
        return 1

    rows = [
        (ym, len(items), calculate_monthly_summary(items).total)
        for ym, items in group_by_month(transactions).items()
    ]

    if as_json:
        typer.echo(
            json.dumps(
                [
                    {
                        "label": format_month_label(ym),
                        "transaction_count": count,
                        "total": format_amount(total),
                    }
                    for ym, count, total in rows
                ],
                indent=2,
            )
        )
        return 0

    out = console or Console()
    if not rows:
        out.print("No transactions found.")
        return 0
    table = Table(title="Months")
    table.add_column("Month")
    table.add_column("Transactions", justify="right")
    table.add_column("Total", justify="right")
    for ym, count, total in rows:
        table.add_row(format_month_label(ym), str(count), format_currency(total))
    out.print(table)
    return 0


# ---- Typer-based console interface -------------------------------------------


app = typer.Typer(
    no_args_is_help=True,
    add_completion=False,
    help="Monthly spending summary by category from a transactions file.",
)

DATA_HELP = (
    "Transactions file (.json or .csv). "
    "Defaults to $SPEND_SUMMARY_DATA or ./data/transactions.json."
)


@app.command("show")
def show_cmd(
    data: Path | None = typer.Option(
        None,
        "--data",
        help=DATA_HELP,
        dir_okay=False,
        exists=False,  # the handler reports missing files itself
    ),
    *,
    month_offset: int = typer.Option(
        0,
        "--month-offset",
        "-m",
        help="Months relative to the current one (0 = current, -1 = last month).",
    ),
    last_month: bool = typer.Option(False, "--last-month", help="Shortcut for --month-offset -1."),
    as_of: datetime | None = typer.Option(
        None,
        "--as-of",
        formats=["%Y-%m-%d"],
        help="Reference date used as 'today' (YYYY-MM-DD).",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
) -> None:
    """Show total spending and the category breakdown for one month."""

    if last_month:
        if month_offset != 0:
            typer.echo("Error: --last-month cannot be combined with --month-offset.", err=True)
            raise typer.Exit(2)
        month_offset = -1

    code = cmd_show(
        data,
        month_offset=month_offset,
        now=as_of.date() if as_of is not None else None,
        as_json=as_json,
    )
    raise typer.Exit(code)


@app.command("months")
def months_cmd(
    data: Path | None = typer.Option(
        None,
        "--data",
        help=DATA_HELP,
        dir_okay=False,
        exists=False,  # the handler reports missing files itself
    ),
    *,
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table."),
) -> None:
    """List the months that have transactions, newest first."""

    raise typer.Exit(cmd_months(data, as_json=as_json))


@app.callback()
def _root() -> None:
    """Load ``.env`` from the working directory and configure logging."""

    load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    configure_logging()


def main() -> None:  # pragma: no cover - console script
    app()


if __name__ == "__main__":  # pragma: no cover
    main()
