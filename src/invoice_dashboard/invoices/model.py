from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import InvoiceStatus


@dataclass(frozen=True)
class InvoiceRecord:
    """Stored invoice. ``amount`` is in cents."""

    id: int
    customer_id: int
    amount: int
    status: InvoiceStatus
    date: date


@dataclass(frozen=True)
class InvoiceRow:
    """Read-model for invoice tables: the invoice joined with its customer's display fields."""

    id: int
    name: str
    email: str
    image_url: str
    amount: int
    date: date
    status: InvoiceStatus


@dataclass(frozen=True)
class LatestInvoice:
    id: int
    name: str
    email: str
    image_url: str
    amount: str


@dataclass(frozen=True)
class InvoiceForm:
    """Values the edit form starts from; ``amount`` is in dollars."""

    id: int
    customer_id: int
    amount: float
    status: InvoiceStatus
