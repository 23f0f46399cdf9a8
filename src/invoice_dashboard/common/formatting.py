"""Display formatting for money and dates."""
from __future__ import annotations

from datetime import date, datetime
from typing import Union


def format_currency(amount: int) -> str:
    """Format an amount in cents as US dollars, e.g. ``123456`` -> ``"$1,234.56"``."""
    cents = int(amount or 0)
    sign = "-" if cents < 0 else ""
    return f"{sign}${abs(cents) / 100:,.2f}"


def cents_to_dollars(amount: int) -> float:
    return amount / 100


def dollars_to_cents(amount: float) -> int:
    return int(round(amount * 100))


def format_date_to_local(value: Union[str, date, datetime]) -> str:
    """Render an ISO date the way en-US locales show it, e.g. ``"Dec 6, 2022"``."""
    if isinstance(value, str):
        value = datetime.strptime(value[:10], "%Y-%m-%d").date()
    return f"{value.strftime('%b')} {value.day}, {value.year}"
