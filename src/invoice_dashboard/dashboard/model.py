from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CardData:
    """Summary figures shown on the overview cards."""

    number_of_invoices: int
    number_of_customers: int
    total_paid_invoices: str
    total_pending_invoices: str
