from __future__ import annotations

import logging
import math
from datetime import date
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from ..common.formatting import cents_to_dollars, dollars_to_cents
from ..common.validators import require_int, require_positive_number
from ..core.constants import ITEMS_PER_PAGE
from ..core.enums import InvoiceStatus, PageCountMode
from ..core.exceptions import NotFoundError, ValidationError
from .model import InvoiceForm, InvoiceRow
from .repository import InvoiceRepository

logger = logging.getLogger(__name__)


class InvoiceService:
    """Use case: search, page through and edit invoices."""

    def __init__(
        self,
        invoices: InvoiceRepository,
        *,
        page_count_mode: PageCountMode = PageCountMode.CUSTOMER,
        page_size: int = ITEMS_PER_PAGE,
    ):
        self._invoices = invoices
        self._page_count_mode = PageCountMode(page_count_mode)
        self._page_size = int(page_size)

    def search(self, query: str, page: int = 1) -> Sequence[InvoiceRow]:
        page = max(int(page), 1)
        offset = (page - 1) * self._page_size
        return self._invoices.search(query or "", offset=offset, limit=self._page_size)

    def count_pages(self, query: str) -> int:
        query = query or ""
        if self._page_count_mode == PageCountMode.INVOICE:
            total = self._invoices.count_search_matches(query)
        else:
            # Counts only the first matching customer's invoices, see DESIGN.md.
            total = self._invoices.count_first_matching_customer_invoices(query)
        return math.ceil(total / self._page_size)

    def get_form(self, invoice_id: int) -> Optional[InvoiceForm]:
        record = self._invoices.get_by_id(invoice_id)
        if not record:
            return None
        return InvoiceForm(
            id=record.id,
            customer_id=record.customer_id,
            amount=cents_to_dollars(record.amount),
            status=record.status,
        )

    def create_invoice(self, form: Mapping[str, Any], *, today: Optional[date] = None) -> int:
        customer_id, amount, status = self._validate(form, "Missing Fields. Failed to Create Invoice.")
        invoice_id = self._invoices.create(
            customer_id=customer_id,
            amount=dollars_to_cents(amount),
            status=status,
            issued_on=today or date.today(),
        )
        logger.info("created invoice id=%s", invoice_id)
        return invoice_id

    def update_invoice(self, invoice_id: int, form: Mapping[str, Any]) -> None:
        customer_id, amount, status = self._validate(form, "Missing Fields. Failed to Update Invoice.")
        updated = self._invoices.update(
            invoice_id=invoice_id,
            customer_id=customer_id,
            amount=dollars_to_cents(amount),
            status=status,
        )
        if not updated:
            raise NotFoundError("Invoice not found.")

    def delete_invoice(self, invoice_id: int) -> None:
        if not self._invoices.delete_by_id(invoice_id):
            raise NotFoundError("Invoice not found.")
        logger.info("deleted invoice id=%s", invoice_id)

    @staticmethod
    def _validate(form: Mapping[str, Any], message: str) -> Tuple[int, float, InvoiceStatus]:
        errors: Dict[str, List[str]] = {}
        customer_id = amount = status = None

        try:
            customer_id = require_int(form.get("customer_id"), "Customer")
        except ValidationError:
            errors["customer_id"] = ["Please select a customer."]

        try:
            amount = require_positive_number(form.get("amount"), "Amount")
        except ValidationError:
            errors["amount"] = ["Please enter an amount greater than $0."]

        try:
            status = InvoiceStatus(form.get("status"))
        except ValueError:
            errors["status"] = ["Please select an invoice status."]

        if errors:
            raise ValidationError(message, errors)
        return customer_id, amount, status
