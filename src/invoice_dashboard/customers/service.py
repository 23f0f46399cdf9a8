from __future__ import annotations

from typing import Sequence

from ..common.formatting import format_currency
from .model import Customer, CustomerTableRow
from .repository import CustomerRepository


class CustomerService:
    """Use case: customer directory."""

    def __init__(self, customers: CustomerRepository):
        self._customers = customers

    def list_all(self) -> Sequence[Customer]:
        return self._customers.list_all()

    def search_with_totals(self, query: str) -> Sequence[CustomerTableRow]:
        return [
            CustomerTableRow(
                id=c.id,
                name=c.name,
                email=c.email,
                image_url=c.image_url,
                total_invoices=c.total_invoices,
                total_pending=format_currency(c.total_pending),
                total_paid=format_currency(c.total_paid),
            )
            for c in self._customers.search_with_totals(query or "")
        ]
