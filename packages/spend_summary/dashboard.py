"""Terminal rendering of a monthly summary using ``rich``.

Layout, top to bottom:

- a "Budget Manager" header with the selected month label;
- a "Total Spending" panel;
- a "Category Breakdown" panel listing each category with amount and share;
- a "Spending by Category" horizontal bar chart scaled to the largest category.

Category colours cycle through :data:`PALETTE` by rank so a category keeps the
same colour in the breakdown and in the chart.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import NamedTuple

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .formatting import format_currency, format_month_label, format_percentage
from .models import MonthlySummary, YearMonth

PALETTE: tuple[str, ...] = (
    "#3b82f6",
    "#10b981",
    "#f59e0b",
    "#ef4444",
    "#8b5cf6",
    "#ec4899",
    "#14b8a6",
)

TITLE = "Budget Manager"
EMPTY_BREAKDOWN_MESSAGE = "No transactions for this month"
EMPTY_CHART_MESSAGE = "No data available for this month"

_BAR_CHAR = "█"


class ChartRow(NamedTuple):
    """One bar of the category chart."""

    name: str
    amount: Decimal
    fill: str


def color_for(rank: int) -> str:
    return PALETTE[rank % len(PALETTE)]


def build_chart_data(summary: MonthlySummary) -> list[ChartRow]:
    """Return chart rows in summary order with their palette colour."""

    return [
        ChartRow(name=c.category, amount=c.amount, fill=color_for(i))
        for i, c in enumerate(summary.categories)
    ]


def bar_length(amount: Decimal, largest: Decimal, width: int) -> int:
    """Scale ``amount`` against ``largest`` into ``0..width`` cells.

    Any positive amount gets at least one cell so small categories stay visible.
    """

    if largest <= 0 or amount <= 0:
        return 0
    cells = int((amount * width / largest).to_integral_value(rounding=ROUND_HALF_UP))
    return max(1, min(width, cells))


def _total_panel(summary: MonthlySummary, year_month: YearMonth) -> Panel:
    body = Text()
    body.append(format_currency(summary.total), style="bold")
    body.append("\n")
    body.append(format_month_label(year_month), style="dim")
    return Panel(body, title="Total Spending", title_align="left")


def _breakdown_panel(summary: MonthlySummary) -> Panel:
    if not summary.categories:
        return Panel(
            Text(EMPTY_BREAKDOWN_MESSAGE, style="dim"),
            title="Category Breakdown",
            title_align="left",
        )
    lines = Text()
    for i, c in enumerate(summary.categories):
        if i:
            lines.append("\n")
        lines.append(
            f"{c.category} — {format_currency(c.amount)} ({format_percentage(c.percentage)})",
            style=color_for(i),
        )
    return Panel(lines, title="Category Breakdown", title_align="left")


def _chart_panel(summary: MonthlySummary, width: int) -> Panel:
    rows = build_chart_data(summary)
    if not rows:
        return Panel(
            Text(EMPTY_CHART_MESSAGE, style="dim"),
            title="Spending by Category",
            title_align="left",
        )
    largest = rows[0].amount
    table = Table.grid(padding=(0, 1))
    table.add_column("category", no_wrap=True)
    table.add_column("bar", no_wrap=True)
    table.add_column("amount", justify="right", no_wrap=True)
    for row in rows:
        table.add_row(
            row.name,
            Text(_BAR_CHAR * bar_length(row.amount, largest, width), style=row.fill),
            format_currency(row.amount),
        )
    return Panel(table, title="Spending by Category", title_align="left")


def build_dashboard(summary: MonthlySummary, year_month: YearMonth, *, bar_width: int = 40) -> Group:
    """Assemble the dashboard renderable for ``summary``."""

    header = Text()
    header.append(TITLE, style="bold")
    header.append("  ")
    header.append(format_month_label(year_month), style="dim")
    return Group(
        header,
        _total_panel(summary, year_month),
        _breakdown_panel(summary),
        _chart_panel(summary, bar_width),
    )


def render_dashboard(
    summary: MonthlySummary,
    year_month: YearMonth,
    *,
    console: Console | None = None,
    bar_width: int = 40,
) -> None:
    """Print the dashboard to ``console`` (a default ``Console`` when omitted)."""

    (console or Console()).print(build_dashboard(summary, year_month, bar_width=bar_width))


__all__ = [
    "PALETTE",
    "TITLE",
    "EMPTY_BREAKDOWN_MESSAGE",
    "EMPTY_CHART_MESSAGE",
    "ChartRow",
    "color_for",
    "build_chart_data",
    "bar_length",
    "build_dashboard",
    "render_dashboard",
]
