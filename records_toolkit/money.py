"""
Rounding and display helpers shared by the fee estimator, the statistics
aggregator, and the letter generators.

Python's built-in ``round`` rounds half to even, which would turn a
$2.675 charge into $2.67. Fee totals and percentages are rounded half-up.
"""

from __future__ import annotations

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Union

_CENT = Decimal("0.01")
_WHOLE = Decimal("1")


def round_cents(value: float) -> float:
    """Round a dollar amount half-up to two decimal places."""
    return float(Decimal(repr(value)).quantize(_CENT, rounding=ROUND_HALF_UP))


def round_whole(value: float) -> int:
    """Round half-up to the nearest integer."""
    return int(Decimal(repr(value)).quantize(_WHOLE, rounding=ROUND_HALF_UP))


def format_money(value: float) -> str:
    return f"${value:,.2f}"


def format_date(value: Optional[Union[date, datetime]]) -> str:
    """Format as e.g. "Mar 4, 2026"; an em dash when unset."""
    if value is None:
        return "—"
    return f"{value:%b} {value.day}, {value.year}"


def format_datetime(value: Optional[datetime]) -> str:
    if value is None:
        return "—"
    hour = value.hour % 12 or 12
    suffix = "AM" if value.hour < 12 else "PM"
    return f"{format_date(value)} at {hour}:{value:%M} {suffix}"
