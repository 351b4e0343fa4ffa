from decimal import Decimal

import pytest

from spend_summary import YearMonth, format_currency, format_month_label, format_percentage


@pytest.mark.parametrize(
    ("amount", "expected"),
    [
        (1234.5, "$1,234.50"),
        (0, "$0.00"),
        (7, "$7.00"),
        (999.999, "$1,000.00"),
        (Decimal("1234567.891"), "$1,234,567.89"),
        (Decimal("80"), "$80.00"),
        # Half-up on the decimal value, not the binary float.
        (2.675, "$2.68"),
        (0.005, "$0.01"),
    ],
)
def test_format_currency(amount, expected: str):
    assert format_currency(amount) == expected


def test_format_currency_negative_has_leading_minus_before_symbol():
    assert format_currency(-1234.5) == "-$1,234.50"
    assert format_currency(Decimal("-0.5")) == "-$0.50"


def test_format_currency_never_renders_negative_zero():
    assert format_currency(-0.001) == "$0.00"
    assert format_currency(Decimal("-0")) == "$0.00"


@pytest.mark.parametrize(
    ("pct", "expected"),
    [
        (33.333, "33.3%"),
        (100 / 3, "33.3%"),
        (200 / 3, "66.7%"),
        (80.0, "80.0%"),
        (100, "100.0%"),
        (0, "0.0%"),
        (12.25, "12.3%"),
        (12.35, "12.4%"),
        (0.04, "0.0%"),
        (Decimal("99.95"), "100.0%"),
    ],
)
def test_format_percentage(pct, expected: str):
    assert format_percentage(pct) == expected


def test_format_percentage_negative_zero_is_plain_zero():
    assert format_percentage(-0.01) == "0.0%"


def test_format_month_label_zero_pads():
    assert format_month_label(YearMonth(2024, 3)) == "2024-03"
    assert format_month_label(YearMonth(2023, 12)) == "2023-12"


def test_format_currency_beyond_default_decimal_precision():
    assert format_currency(Decimal("1e30")) == f"${10**30:,}.00"
    assert format_currency(1e30) == f"${10**30:,}.00"
    assert format_currency(Decimal("123456789012345678901234567.895")) == (
        "$123,456,789,012,345,678,901,234,567.90"
    )


def test_format_percentage_beyond_default_decimal_precision():
    assert format_percentage(Decimal("1e40")) == f"{10**40}.0%"
