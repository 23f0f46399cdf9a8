from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from ..core.enums import InvoiceStatus
from .model import InvoiceRecord, InvoiceRow


class InvoiceRepository(Protocol):
    """Repository interface for Invoice.

    Amounts are integer cents in both directions.
    """

    def list_latest(self, limit: int) -> Sequence[InvoiceRow]:
        raise NotImplementedError

    def count_all(self) -> int:
        raise NotImplementedError

    def total_amount_by_status(self, status: InvoiceStatus) -> int:
        raise NotImplementedError

    def search(self, query: str, *, offset: int, limit: int) -> Sequence[InvoiceRow]:
        raise NotImplementedError

    def count_search_matches(self, query: str) -> int:
        raise NotImplementedError

    def count_first_matching_customer_invoices(self, query: str) -> int:
        raise NotImplementedError

    def get_by_id(self, invoice_id: int) -> Optional[InvoiceRecord]:
        raise NotImplementedError

    def create(self, *, customer_id: int, amount: int, status: InvoiceStatus, issued_on: date) -> int:
        raise NotImplementedError

    def update(self, *, invoice_id: int, customer_id: int, amount: int, status: InvoiceStatus) -> bool:
        raise NotImplementedError

    def delete_by_id(self, invoice_id: int) -> bool:
        raise NotImplementedError
