from __future__ import annotations

from typing import Sequence

from ..common.formatting import format_currency
from ..core.constants import LATEST_INVOICES_LIMIT
from ..core.enums import InvoiceStatus
from ..customers.repository import CustomerRepository
from ..invoices.model import LatestInvoice
from ..invoices.repository import InvoiceRepository
from ..revenue.model import RevenueBucket
from ..revenue.repository import RevenueRepository
from .model import CardData


class DashboardService:
    """Use case: the overview page (revenue, latest invoices, summary cards)."""

    def __init__(
        self,
        revenue: RevenueRepository,
        invoices: InvoiceRepository,
        customers: CustomerRepository,
    ):
        self._revenue = revenue
        self._invoices = invoices
        self._customers = customers

    def fetch_revenue(self) -> Sequence[RevenueBucket]:
        return self._revenue.list_all()

    def fetch_latest_invoices(self, limit: int = LATEST_INVOICES_LIMIT) -> Sequence[LatestInvoice]:
        return [
            LatestInvoice(
                id=r.id,
                name=r.name,
                email=r.email,
                image_url=r.image_url,
                amount=format_currency(r.amount),
            )
            for r in self._invoices.list_latest(limit)
        ]

    def fetch_card_data(self) -> CardData:
        # Independent reads; nothing depends on their order.
        number_of_invoices = self._invoices.count_all()
        number_of_customers = self._customers.count_all()
        total_paid = self._invoices.total_amount_by_status(InvoiceStatus.PAID)
        total_pending = self._invoices.total_amount_by_status(InvoiceStatus.PENDING)

        return CardData(
            number_of_invoices=number_of_invoices,
            number_of_customers=number_of_customers,
            total_paid_invoices=format_currency(total_paid or 0),
            total_pending_invoices=format_currency(total_pending or 0),
        )
