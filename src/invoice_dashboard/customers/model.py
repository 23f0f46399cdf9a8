from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Customer:
    """Customer as stored."""

    id: int
    name: str
    email: str
    image_url: str


@dataclass(frozen=True)
class CustomerTotals:
    """Read-model: one customer with its invoice aggregates, amounts in cents."""

    id: int
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: int
    total_paid: int


@dataclass(frozen=True)
class CustomerTableRow:
    id: int
    name: str
    email: str
    image_url: str
    total_invoices: int
    total_pending: str
    total_paid: str
